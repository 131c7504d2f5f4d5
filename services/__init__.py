"""
Services package - Business logic layer.
"""

from services.comment_service import CommentService
from services.bookmark_service import BookmarkService
from services.recipe_service import RecipeService
from services.profile_service import ProfileService
from services.audit_service import AuditService

__all__ = [
    "CommentService",
    "BookmarkService",
    "RecipeService",
    "ProfileService",
    "AuditService",
]
