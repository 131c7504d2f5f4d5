"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.base import APIRequest, APIResponse
from domain.schemas.profile_schemas import ProfileInfo, DeleteProfileRequest
from domain.schemas.comment_schemas import (
    AddCommentRequest,
    EditCommentRequest,
    EditCommentByTokenRequest,
    DeleteCommentRequest,
    DeleteCommentByTokenRequest,
    CommentResponse,
)
from domain.schemas.recipe_schemas import (
    IngredientInfo,
    CookingRecipeInfo,
    CookingRecipesList,
    AddBookmarkRequest,
    DeleteBookmarkByTokenRequest,
)

__all__ = [
    # Base
    "APIRequest",
    "APIResponse",
    # Profile schemas
    "ProfileInfo",
    "DeleteProfileRequest",
    # Comment schemas
    "AddCommentRequest",
    "EditCommentRequest",
    "EditCommentByTokenRequest",
    "DeleteCommentRequest",
    "DeleteCommentByTokenRequest",
    "CommentResponse",
    # Recipe and bookmark schemas
    "IngredientInfo",
    "CookingRecipeInfo",
    "CookingRecipesList",
    "AddBookmarkRequest",
    "DeleteBookmarkByTokenRequest",
]
