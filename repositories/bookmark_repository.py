"""
Bookmark Repository - Data access for saved recipes
"""

from typing import List, Optional
from sqlalchemy.orm import Session, selectinload

from repositories.base import BaseRepository
from domain.models import Bookmark, CookingRecipe, IngredientsList


class BookmarkRepository(BaseRepository[Bookmark]):
    """Repository for bookmark data access"""

    def __init__(self, db: Session):
        super().__init__(db, Bookmark)

    def get_by_recipe_and_profile(
        self, recipe_id: int, profile_id: int
    ) -> Optional[Bookmark]:
        return (
            self.db.query(Bookmark)
            .filter(Bookmark.recipe_id == recipe_id, Bookmark.profile_id == profile_id)
            .first()
        )

    def get_bookmarked_recipes(
        self,
        profile_id: int,
        text_filter: Optional[str] = None,
        reverse_order: bool = False,
    ) -> List[CookingRecipe]:
        """
        Get the recipes a profile bookmarked, in bookmark order.

        text_filter is a case-insensitive substring of the recipe name.
        """
        query = (
            self.db.query(CookingRecipe)
            .join(Bookmark, Bookmark.recipe_id == CookingRecipe.id)
            .filter(Bookmark.profile_id == profile_id)
            .options(
                selectinload(CookingRecipe.ingredients).selectinload(
                    IngredientsList.ingredient_unit
                ),
                selectinload(CookingRecipe.comments),
                selectinload(CookingRecipe.publisher),
            )
        )
        if text_filter:
            query = query.filter(CookingRecipe.name.icontains(text_filter, autoescape=True))

        if reverse_order:
            query = query.order_by(Bookmark.add_time.desc(), Bookmark.id.desc())
        else:
            query = query.order_by(Bookmark.add_time.asc(), Bookmark.id.asc())
        return query.all()

    def delete_bookmark(self, bookmark: Bookmark) -> None:
        self.db.delete(bookmark)
        self.db.commit()
