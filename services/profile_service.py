from sqlalchemy.orm import Session
import logging

from app.exceptions import NotFoundError
from repositories import ProfileRepository

logger = logging.getLogger("cookingrecipes.profiles")


class ProfileService:
    """Business logic for profile management"""

    @staticmethod
    def delete_profile(db: Session, profile_id: int) -> None:
        """
        Delete a profile.

        Its authorization, comments, bookmarks and published recipes go with it,
        and so do the comments, bookmarks and ingredients of those recipes.
        """
        if not ProfileRepository(db).delete_profile(profile_id):
            logger.warning(f"profile_not_found profile_id={profile_id}")
            raise NotFoundError(f"Profile {profile_id} not found")
        logger.info(f"profile_deleted profile_id={profile_id}")
