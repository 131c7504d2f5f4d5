"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.profile_repository import ProfileRepository
from repositories.recipe_repository import (
    RecipeRepository,
    RecipeCategoryRepository,
    IngredientUnitRepository,
)
from repositories.comment_repository import CommentRepository
from repositories.bookmark_repository import BookmarkRepository
from repositories.audit_repository import AuditRepository

__all__ = [
    "BaseRepository",
    "ProfileRepository",
    "RecipeRepository",
    "RecipeCategoryRepository",
    "IngredientUnitRepository",
    "CommentRepository",
    "BookmarkRepository",
    "AuditRepository",
]
