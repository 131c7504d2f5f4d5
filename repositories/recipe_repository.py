"""
Recipe Repository - Data access for recipes, categories and ingredient units
"""

from typing import Iterable, Optional, Tuple
from sqlalchemy.orm import Session, selectinload

from repositories.base import BaseRepository
from domain.models import (
    CookingRecipe,
    RecipeCategory,
    IngredientUnit,
    IngredientsList,
)


class RecipeRepository(BaseRepository[CookingRecipe]):
    """Repository for cooking recipes"""

    def __init__(self, db: Session):
        super().__init__(db, CookingRecipe)

    def get_with_details(self, recipe_id: int) -> Optional[CookingRecipe]:
        """Get a recipe with ingredients, comments and publisher loaded"""
        return (
            self.db.query(CookingRecipe)
            .options(
                selectinload(CookingRecipe.ingredients).selectinload(
                    IngredientsList.ingredient_unit
                ),
                selectinload(CookingRecipe.comments),
                selectinload(CookingRecipe.publisher),
            )
            .filter(CookingRecipe.id == recipe_id)
            .first()
        )

    def create_recipe(
        self,
        name: str,
        publisher_id: int,
        recipe_category_id: int,
        description: Optional[str] = None,
        image: Optional[bytes] = None,
        ingredients: Iterable[Tuple[str, float, int]] = (),
    ) -> CookingRecipe:
        """Create a recipe; ingredients are (name, value, ingredient_unit_id) tuples"""
        recipe = CookingRecipe(
            name=name,
            description=description,
            image=image,
            publisher_id=publisher_id,
            recipe_category_id=recipe_category_id,
        )
        for ingredient_name, value, unit_id in ingredients:
            recipe.ingredients.append(
                IngredientsList(
                    name=ingredient_name, value=value, ingredient_unit_id=unit_id
                )
            )
        return self.create(recipe)


class RecipeCategoryRepository(BaseRepository[RecipeCategory]):
    def __init__(self, db: Session):
        super().__init__(db, RecipeCategory)

    def get_or_create(self, name: str) -> RecipeCategory:
        category = (
            self.db.query(RecipeCategory).filter(RecipeCategory.name == name).first()
        )
        if category:
            return category
        return self.create(RecipeCategory(name=name))


class IngredientUnitRepository(BaseRepository[IngredientUnit]):
    def __init__(self, db: Session):
        super().__init__(db, IngredientUnit)

    def get_or_create(self, name: str) -> IngredientUnit:
        unit = self.db.query(IngredientUnit).filter(IngredientUnit.name == name).first()
        if unit:
            return unit
        return self.create(IngredientUnit(name=name))
