from sqlalchemy.orm import Session
import logging

from app.exceptions import NotFoundError
from domain.models import CookingRecipe
from repositories import RecipeRepository

logger = logging.getLogger("cookingrecipes.recipes")


class RecipeService:
    @staticmethod
    def get_recipe(db: Session, recipe_id: int) -> CookingRecipe:
        """Full recipe with ingredients, comments and publisher"""
        recipe = RecipeRepository(db).get_with_details(recipe_id)
        if not recipe:
            logger.warning(f"recipe_not_found recipe_id={recipe_id}")
            raise NotFoundError(f"Recipe {recipe_id} not found")
        return recipe
