from datetime import datetime
from typing import Optional

from pydantic import Field

from domain.schemas.base import APIRequest, APIResponse
from domain.schemas.profile_schemas import ProfileInfo


class AddCommentRequest(APIRequest):
    """Body of POST comments/add; the author comes from the token"""

    recipe_id: int
    text: Optional[str] = Field(None, max_length=200)
    # Range is checked by CommentService so that it surfaces as a 400
    rating: float


class EditCommentRequest(APIRequest):
    """Body of PUT comments/edit (Admin)"""

    comment_id: int
    text: Optional[str] = Field(None, max_length=200)
    rating: float


class EditCommentByTokenRequest(APIRequest):
    """Body of PUT comments/editbytoken.

    The caller's own comment is located by recipe_id; comment_id may be given
    instead to address a comment directly (ownership is still enforced).
    """

    recipe_id: Optional[int] = None
    comment_id: Optional[int] = None
    text: Optional[str] = Field(None, max_length=200)
    rating: float


class DeleteCommentRequest(APIRequest):
    comment_id: int


class DeleteCommentByTokenRequest(APIRequest):
    recipe_id: int


class CommentResponse(APIResponse):
    """Comment DTO returned by the get endpoints"""

    id: int
    text: Optional[str] = None
    rating: float
    publication_time: datetime
    recipe_id: int
    profile_id: int
    profile: Optional[ProfileInfo] = None
