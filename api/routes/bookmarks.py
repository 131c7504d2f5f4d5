"""Bookmark routes"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
import logging
from typing import Optional

from api.dependencies import get_db, require_policy, audit_trail
from api.responses import MessageResponse, ERROR_RESPONSES, success_response
from app.security import Caller
from domain.enums import Role
from domain.mappers import RecipeMapper
from domain.schemas.recipe_schemas import (
    AddBookmarkRequest,
    DeleteBookmarkByTokenRequest,
    CookingRecipesList,
)
from services.bookmark_service import BookmarkService

router = APIRouter(
    prefix="/cookingrecipes/bookmarks", tags=["Bookmarks"], responses=ERROR_RESPONSES
)
logger = logging.getLogger("cookingrecipes.api.bookmarks")


@router.post("/add", response_model=MessageResponse)
def add_bookmark(
    request: AddBookmarkRequest,
    caller: Caller = Depends(require_policy(Role.USER)),
    _audit: None = Depends(audit_trail("AddBookmark")),
    db: Session = Depends(get_db),
):
    """[User] Bookmark a recipe"""
    BookmarkService.add_bookmark(db, caller, request.recipe_id)
    return success_response("Bookmark added successfully")


@router.delete("/deletebytoken", response_model=MessageResponse)
def delete_bookmark_by_token(
    request: DeleteBookmarkByTokenRequest,
    caller: Caller = Depends(require_policy(Role.USER)),
    _audit: None = Depends(audit_trail("DeleteBookmarkByToken")),
    db: Session = Depends(get_db),
):
    """[User] Remove a recipe from the caller's bookmarks"""
    BookmarkService.delete_bookmark_by_token(db, caller, request.recipe_id)
    return success_response("Bookmark deleted successfully")


@router.get("/getlist/bytoken", response_model=CookingRecipesList)
def get_bookmarks_list(
    text_filter: Optional[str] = Query(None, alias="textFilter"),
    reverse_order: bool = Query(False, alias="reverseOrder"),
    caller: Caller = Depends(require_policy(Role.USER)),
    db: Session = Depends(get_db),
):
    """List the recipes the caller bookmarked"""
    recipes = BookmarkService.get_bookmarks_list(
        db, caller.profile_id, text_filter=text_filter, reverse_order=reverse_order
    )
    return RecipeMapper.to_list(recipes)
