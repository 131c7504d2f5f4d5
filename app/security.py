"""
Bearer token handling.

Tokens are HS256 (by default) JWTs carrying the caller's profile id in the
primary-sid claim and the caller's roles in the role claim.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Iterable, List, Optional

from jose import jwt
from jose.exceptions import ExpiredSignatureError, JWTError
from pydantic import BaseModel

from app.config import settings
from app.exceptions import UnauthorizedError
from domain.enums import Role

logger = logging.getLogger("cookingrecipes.security")


class Caller(BaseModel):
    """The authenticated principal behind a request."""

    profile_id: int
    roles: List[str] = []

    def has_role(self, role: Role) -> bool:
        return role.value in self.roles

    def is_admin(self) -> bool:
        return self.has_role(Role.ADMIN)


def roles_for(is_admin: bool) -> List[str]:
    """Roles granted to a profile: everyone is a User, admins are also Admin."""
    if is_admin:
        return [Role.USER.value, Role.ADMIN.value]
    return [Role.USER.value]


def create_access_token(
    profile_id: int,
    roles: Optional[Iterable[str]] = None,
    expires_delta: Optional[timedelta] = None,
    extra_claims: Optional[dict[str, Any]] = None,
) -> str:
    """Create a signed access token for a profile.

    Args:
        profile_id: Id of the UserProfile the token identifies.
        roles: Role names; defaults to the plain User role.
        expires_delta: Custom lifetime, otherwise taken from settings.
        extra_claims: Additional claims to include in the token.

    Returns:
        Encoded JWT string.
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.jwt_access_token_expire_minutes)

    now = datetime.now(timezone.utc)
    payload: dict[str, Any] = {
        "sub": str(profile_id),
        settings.jwt_profile_claim: str(profile_id),
        settings.jwt_role_claim: list(roles) if roles is not None else roles_for(False),
        "iat": now,
        "exp": now + expires_delta,
    }
    if extra_claims:
        payload.update(extra_claims)

    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Caller:
    """Validate a bearer token and resolve the caller.

    Raises:
        UnauthorizedError: expired or invalid token, or a missing / non-numeric
            profile claim.
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm]
        )
    except ExpiredSignatureError as e:
        logger.debug(f"token_expired error={e}")
        raise UnauthorizedError("Token has expired") from e
    except JWTError as e:
        logger.warning(f"token_invalid error={e}")
        raise UnauthorizedError("Invalid token") from e

    raw_profile_id = payload.get(settings.jwt_profile_claim)
    if raw_profile_id is None:
        raise UnauthorizedError("Token does not identify a profile")
    try:
        profile_id = int(raw_profile_id)
    except (TypeError, ValueError):
        raise UnauthorizedError("Token profile identifier is not numeric")

    raw_roles = payload.get(settings.jwt_role_claim) or []
    if isinstance(raw_roles, str):
        raw_roles = [raw_roles]

    return Caller(profile_id=profile_id, roles=[str(r) for r in raw_roles])
