from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from app.exceptions import ConflictError, NotFoundError
from app.security import Caller
from domain.models import Bookmark, CookingRecipe
from repositories import BookmarkRepository, RecipeRepository

logger = logging.getLogger("cookingrecipes.bookmarks")


class BookmarkService:
    """Business logic for saved recipes"""

    @staticmethod
    def add_bookmark(db: Session, caller: Caller, recipe_id: int) -> Bookmark:
        """Bookmark a recipe for the caller; a recipe can be bookmarked once"""
        if not RecipeRepository(db).exists(recipe_id):
            raise NotFoundError(f"Recipe {recipe_id} not found")

        bookmark_repo = BookmarkRepository(db)
        if bookmark_repo.get_by_recipe_and_profile(recipe_id, caller.profile_id):
            raise ConflictError(f"Recipe {recipe_id} is already bookmarked")

        try:
            bookmark = bookmark_repo.create(
                Bookmark(profile_id=caller.profile_id, recipe_id=recipe_id)
            )
        except IntegrityError as e:
            db.rollback()
            logger.warning(f"bookmark_add_conflict error={str(e)}")
            raise ConflictError(f"Recipe {recipe_id} is already bookmarked")
        logger.info(
            f"bookmark_added bookmark_id={bookmark.id} profile_id={caller.profile_id} "
            f"recipe_id={recipe_id}"
        )
        return bookmark

    @staticmethod
    def delete_bookmark_by_token(db: Session, caller: Caller, recipe_id: int) -> None:
        bookmark_repo = BookmarkRepository(db)
        bookmark = bookmark_repo.get_by_recipe_and_profile(recipe_id, caller.profile_id)
        if not bookmark:
            raise NotFoundError(f"Recipe {recipe_id} is not bookmarked")
        bookmark_repo.delete_bookmark(bookmark)
        logger.info(
            f"bookmark_deleted profile_id={caller.profile_id} recipe_id={recipe_id}"
        )

    @staticmethod
    def get_bookmarks_list(
        db: Session,
        profile_id: int,
        text_filter: Optional[str] = None,
        reverse_order: bool = False,
    ) -> List[CookingRecipe]:
        return BookmarkRepository(db).get_bookmarked_recipes(
            profile_id, text_filter=text_filter, reverse_order=reverse_order
        )
