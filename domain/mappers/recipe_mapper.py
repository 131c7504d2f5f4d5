"""
Recipe domain mappers.
"""

from typing import List

from domain.models import CookingRecipe, IngredientsList
from domain.schemas.recipe_schemas import (
    CookingRecipeInfo,
    CookingRecipesList,
    IngredientInfo,
)
from domain.mappers.comment_mapper import ProfileMapper


class RecipeMapper:
    """Mapper for recipe transformations."""

    @staticmethod
    def average_rating(recipe: CookingRecipe) -> float:
        ratings = [c.rating for c in recipe.comments]
        if not ratings:
            return 0.0
        return sum(ratings) / len(ratings)

    @staticmethod
    def to_ingredient(line: IngredientsList) -> IngredientInfo:
        return IngredientInfo(
            id=line.id,
            name=line.name,
            value=line.value,
            unit=line.ingredient_unit.name,
        )

    @staticmethod
    def to_info(recipe: CookingRecipe) -> CookingRecipeInfo:
        """Convert a CookingRecipe (with ingredients, comments, publisher) to its info DTO."""
        return CookingRecipeInfo(
            id=recipe.id,
            name=recipe.name,
            description=recipe.description,
            image=recipe.image,
            publication_time=recipe.publication_time,
            rating=RecipeMapper.average_rating(recipe),
            ingredients=[RecipeMapper.to_ingredient(i) for i in recipe.ingredients],
            publisher=ProfileMapper.to_info(recipe.publisher),
            publisher_id=recipe.publisher_id,
        )

    @staticmethod
    def to_list(recipes: List[CookingRecipe]) -> CookingRecipesList:
        return CookingRecipesList(
            recipes=[RecipeMapper.to_info(r) for r in recipes],
            all_count=len(recipes),
        )
