"""
Tests for the authorization predicate and the role/ownership gate.
"""

import pytest

from app.exceptions import ForbiddenError
from app.security import Caller
from domain.enums import Role
from services.authorization import ensure_allowed, is_allowed

USER = Caller(profile_id=1, roles=["User"])
ADMIN = Caller(profile_id=2, roles=["User", "Admin"])
ADMIN_ONLY = Caller(profile_id=3, roles=["Admin"])
NOBODY = Caller(profile_id=4, roles=[])


@pytest.mark.parametrize(
    "caller, expected",
    [(USER, False), (ADMIN, True), (ADMIN_ONLY, True), (NOBODY, False)],
)
def test_admin_policy(caller, expected):
    assert is_allowed(caller, Role.ADMIN) is expected


@pytest.mark.parametrize(
    "caller, expected",
    [(USER, True), (ADMIN, True), (ADMIN_ONLY, True), (NOBODY, False)],
)
def test_user_policy_without_owner(caller, expected):
    assert is_allowed(caller, Role.USER) is expected


def test_user_policy_requires_ownership():
    assert is_allowed(USER, Role.USER, owner_id=1) is True
    assert is_allowed(USER, Role.USER, owner_id=99) is False


def test_admin_policy_ignores_ownership():
    assert is_allowed(ADMIN, Role.ADMIN, owner_id=99) is True


def test_ensure_allowed_raises_forbidden():
    with pytest.raises(ForbiddenError) as exc_info:
        ensure_allowed(USER, Role.ADMIN, message="Admin role required")

    assert exc_info.value.http_status == 403
    assert exc_info.value.message == "Admin role required"


def test_ensure_allowed_passes_silently():
    assert ensure_allowed(USER, Role.USER, owner_id=1) is None
