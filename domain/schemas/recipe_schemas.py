from datetime import datetime
from typing import List, Optional

from domain.schemas.base import APIRequest, APIResponse
from domain.schemas.profile_schemas import ProfileInfo


class IngredientInfo(APIResponse):
    """One ingredient line with its unit name"""

    id: int
    name: str
    value: float
    unit: str


class CookingRecipeInfo(APIResponse):
    """Full recipe data"""

    id: int
    name: str
    description: Optional[str] = None
    image: Optional[bytes] = None
    publication_time: datetime
    # Average comment rating, 0 when nobody has rated the recipe yet
    rating: float
    ingredients: List[IngredientInfo] = []
    publisher: ProfileInfo
    publisher_id: int


class CookingRecipesList(APIResponse):
    recipes: List[CookingRecipeInfo] = []
    all_count: int


class AddBookmarkRequest(APIRequest):
    recipe_id: int


class DeleteBookmarkByTokenRequest(APIRequest):
    recipe_id: int
