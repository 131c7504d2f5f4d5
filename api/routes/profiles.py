"""Profile administration routes"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db, require_policy, audit_trail
from api.responses import MessageResponse, ERROR_RESPONSES, success_response
from app.security import Caller
from domain.enums import Role
from domain.schemas.profile_schemas import DeleteProfileRequest
from services.profile_service import ProfileService

router = APIRouter(
    prefix="/cookingrecipes/profiles", tags=["Profiles"], responses=ERROR_RESPONSES
)
logger = logging.getLogger("cookingrecipes.api.profiles")


@router.delete("/delete", response_model=MessageResponse)
def delete_profile(
    request: DeleteProfileRequest,
    caller: Caller = Depends(require_policy(Role.ADMIN)),
    _audit: None = Depends(audit_trail("DeleteProfile")),
    db: Session = Depends(get_db),
):
    """[Admin] Delete a profile together with everything it owns"""
    ProfileService.delete_profile(db, request.profile_id)
    return success_response("Profile deleted successfully")
