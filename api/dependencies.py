"""
API dependencies for dependency injection
"""

import logging
from typing import Callable, Generator, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import UnauthorizedError
from app.security import Caller, decode_access_token
from domain.enums import Role
from domain.models import get_db_session
from services.audit_service import AuditService
from services.authorization import ensure_allowed

logger = logging.getLogger("cookingrecipes.api.dependencies")

# auto_error is off so a missing header surfaces as 401 through UnauthorizedError
bearer_scheme = HTTPBearer(auto_error=False, description="JWT bearer token")


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_current_caller(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Caller:
    """Resolve the caller from the Authorization: Bearer header"""
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Bearer token is required")
    return decode_access_token(credentials.credentials)


def require_policy(role: Role) -> Callable[..., Caller]:
    """
    Build a dependency that admits callers holding ``role``.

    Usage:
        @router.delete("/delete")
        def delete(caller: Caller = Depends(require_policy(Role.ADMIN))):
            ...
    """

    def dependency(caller: Caller = Depends(get_current_caller)) -> Caller:
        ensure_allowed(caller, role, message=f"{role.value} role required")
        return caller

    return dependency


def audit_trail(method_name: str) -> Callable[..., None]:
    """Build a dependency that records the call in the LoggingInfo table"""

    def dependency(
        caller: Caller = Depends(get_current_caller),
        db: Session = Depends(get_db),
    ) -> None:
        if settings.audit_enabled:
            AuditService.record(db, method_name, caller)

    return dependency
