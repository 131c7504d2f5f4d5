"""Recipe read routes"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db, require_policy
from api.responses import ERROR_RESPONSES
from app.security import Caller
from domain.enums import Role
from domain.mappers import RecipeMapper
from domain.schemas.recipe_schemas import CookingRecipeInfo
from services.recipe_service import RecipeService

router = APIRouter(
    prefix="/cookingrecipes/recipes", tags=["Recipes"], responses=ERROR_RESPONSES
)
logger = logging.getLogger("cookingrecipes.api.recipes")


@router.get("/get", response_model=CookingRecipeInfo)
def get_recipe(
    recipe_id: int = Query(..., alias="recipeId"),
    caller: Caller = Depends(require_policy(Role.USER)),
    db: Session = Depends(get_db),
):
    """Full recipe info with ingredients, publisher and average rating"""
    return RecipeMapper.to_info(RecipeService.get_recipe(db, recipe_id))
