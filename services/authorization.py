"""
Authorization predicate shared by route policy gates and service ownership checks.
"""

import logging
from typing import Optional

from app.exceptions import ForbiddenError
from app.security import Caller
from domain.enums import Role

logger = logging.getLogger("cookingrecipes.authorization")


def is_allowed(caller: Caller, required_role: Role, owner_id: Optional[int] = None) -> bool:
    """
    Decide whether a caller may act on a resource.

    Admin-only actions ignore ownership. User actions are open to Users and
    Admins, and when the resource has an owner the caller must be that owner.
    """
    if required_role == Role.ADMIN:
        return caller.is_admin()

    if not (caller.has_role(Role.USER) or caller.is_admin()):
        return False
    return owner_id is None or owner_id == caller.profile_id


def ensure_allowed(
    caller: Caller,
    required_role: Role,
    owner_id: Optional[int] = None,
    message: str = "Access denied",
) -> None:
    """Raise ForbiddenError unless is_allowed() holds"""
    if not is_allowed(caller, required_role, owner_id):
        logger.warning(
            f"access_denied profile_id={caller.profile_id} "
            f"required_role={required_role.value} owner_id={owner_id}"
        )
        raise ForbiddenError(message)
