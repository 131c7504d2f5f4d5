"""Comment routes: add, edit, delete and read, by id (Admin) or by token (User)"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
import logging
from typing import List, Optional

from api.dependencies import get_db, require_policy, audit_trail
from api.responses import MessageResponse, ERROR_RESPONSES, success_response
from app.security import Caller
from domain.enums import Role
from domain.mappers import CommentMapper
from domain.schemas.comment_schemas import (
    AddCommentRequest,
    EditCommentRequest,
    EditCommentByTokenRequest,
    DeleteCommentRequest,
    DeleteCommentByTokenRequest,
    CommentResponse,
)
from services.comment_service import CommentService

router = APIRouter(
    prefix="/cookingrecipes/comments", tags=["Comments"], responses=ERROR_RESPONSES
)
logger = logging.getLogger("cookingrecipes.api.comments")


@router.post("/add", response_model=MessageResponse)
def add_comment(
    request: AddCommentRequest,
    caller: Caller = Depends(require_policy(Role.USER)),
    _audit: None = Depends(audit_trail("AddComment")),
    db: Session = Depends(get_db),
):
    """[User] Add a comment to a recipe on behalf of the caller"""
    CommentService.add_comment(
        db, caller.profile_id, request.recipe_id, request.text, request.rating
    )
    return success_response("Comment added successfully")


@router.delete("/delete", response_model=MessageResponse)
def delete_comment(
    request: DeleteCommentRequest,
    caller: Caller = Depends(require_policy(Role.ADMIN)),
    _audit: None = Depends(audit_trail("DeleteComment")),
    db: Session = Depends(get_db),
):
    """[Admin] Delete any comment by id"""
    CommentService.delete_comment(db, request.comment_id)
    return success_response("Comment deleted successfully")


@router.delete("/deletebytoken", response_model=MessageResponse)
def delete_comment_by_token(
    request: DeleteCommentByTokenRequest,
    caller: Caller = Depends(require_policy(Role.USER)),
    _audit: None = Depends(audit_trail("DeleteCommentByToken")),
    db: Session = Depends(get_db),
):
    """[User] Delete the caller's comment on a recipe"""
    CommentService.delete_comment_by_token(db, caller, request.recipe_id)
    return success_response("Comment deleted successfully")


@router.put("/edit", response_model=MessageResponse)
def edit_comment(
    request: EditCommentRequest,
    caller: Caller = Depends(require_policy(Role.ADMIN)),
    _audit: None = Depends(audit_trail("EditComment")),
    db: Session = Depends(get_db),
):
    """[Admin] Edit any comment by id"""
    CommentService.edit_comment(db, request.comment_id, request.text, request.rating)
    return success_response("Comment updated successfully")


@router.put("/editbytoken", response_model=MessageResponse)
def edit_comment_by_token(
    request: EditCommentByTokenRequest,
    caller: Caller = Depends(require_policy(Role.USER)),
    _audit: None = Depends(audit_trail("EditCommentByToken")),
    db: Session = Depends(get_db),
):
    """[User] Edit the caller's own comment"""
    CommentService.edit_comment_by_token(
        db,
        caller,
        request.text,
        request.rating,
        recipe_id=request.recipe_id,
        comment_id=request.comment_id,
    )
    return success_response("Comment updated successfully")


@router.get("/get", response_model=CommentResponse)
def get_comment(
    comment_id: Optional[int] = Query(None, alias="commentId"),
    recipe_id: Optional[int] = Query(None, alias="recipeId"),
    profile_id: Optional[int] = Query(None, alias="profileId"),
    caller: Caller = Depends(require_policy(Role.USER)),
    db: Session = Depends(get_db),
):
    """Get a comment by id, or by recipe and author (the caller when profileId is omitted)"""
    if profile_id is None:
        profile_id = caller.profile_id
    comment = CommentService.get_comment(
        db, comment_id=comment_id, recipe_id=recipe_id, profile_id=profile_id
    )
    return CommentMapper.to_response(comment)


@router.get("/getbytoken", response_model=CommentResponse)
def get_comment_by_token(
    recipe_id: int = Query(..., alias="recipeId"),
    caller: Caller = Depends(require_policy(Role.USER)),
    db: Session = Depends(get_db),
):
    """Get the caller's own comment on a recipe"""
    comment = CommentService.get_comment_by_token(db, caller, recipe_id)
    return CommentMapper.to_response(comment)


@router.get("/getlist/byprofile", response_model=List[CommentResponse])
def get_profile_comments(
    text_filter: Optional[str] = Query(None, alias="textFilter"),
    reverse_order: bool = Query(False, alias="reverseOrder"),
    caller: Caller = Depends(require_policy(Role.USER)),
    db: Session = Depends(get_db),
):
    """List the caller's comments, optionally filtered by text and newest first"""
    comments = CommentService.get_profile_comments(
        db, caller.profile_id, text_filter=text_filter, reverse_order=reverse_order
    )
    return CommentMapper.to_response_list(comments)
