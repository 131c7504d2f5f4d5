"""
Profile Repository - Data access layer for profiles and their credentials
"""

from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import UserProfile, Authorization
from app.exceptions import ConflictError


class ProfileRepository(BaseRepository[UserProfile]):
    """Repository for profile data access"""

    def __init__(self, db: Session):
        super().__init__(db, UserProfile)

    def create_profile(
        self,
        name: str,
        surname: str,
        email: str,
        reference_link: str,
        login: str,
        password_hash: str,
        is_admin: bool = False,
        image: Optional[bytes] = None,
    ) -> UserProfile:
        """Create a profile together with its one-to-one Authorization row"""
        profile = UserProfile(
            name=name,
            surname=surname,
            email=email,
            reference_link=reference_link,
            is_admin=is_admin,
            image=image,
        )
        profile.authorization = Authorization(login=login, password=password_hash)
        try:
            self.db.add(profile)
            self.db.commit()
            self.db.refresh(profile)
            return profile
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(f"Login {login} is already taken")

    def delete_profile(self, profile_id: int) -> bool:
        """Delete profile and all related data (cascade)"""
        return self.delete(profile_id)

