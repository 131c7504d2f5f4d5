"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    init_database,
    get_db_session,
)
from domain.models.profile import UserProfile, Authorization, FriendList
from domain.models.recipe import (
    RecipeCategory,
    CookingRecipe,
    IngredientUnit,
    IngredientsList,
)
from domain.models.social import (
    Comment,
    Bookmark,
    Recommendation,
    MIN_RATING,
    MAX_RATING,
)
from domain.models.audit import LoggingInfo

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "init_database",
    "get_db_session",
    # Profile models
    "UserProfile",
    "Authorization",
    "FriendList",
    # Recipe models
    "RecipeCategory",
    "CookingRecipe",
    "IngredientUnit",
    "IngredientsList",
    # Social models
    "Comment",
    "Bookmark",
    "Recommendation",
    "MIN_RATING",
    "MAX_RATING",
    # Audit
    "LoggingInfo",
]
