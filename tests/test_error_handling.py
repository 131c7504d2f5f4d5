"""
Error handling and edge case tests.

This test suite covers the exception taxonomy and how each error surfaces:
- Status codes carried by the service exceptions
- Standard error body produced by the exception handlers
- Database and unexpected errors hidden behind 500 responses
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from test_fixtures import auth_headers, client, db_session, make_profile
from api.middleware import make_serializable
from api.responses import error_response, success_response
from app.exceptions import (
    AppError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ServiceValidationError,
    UnauthorizedError,
)
from main import app
from services.comment_service import CommentService


# =============================================================================
# EXCEPTION TAXONOMY
# =============================================================================


@pytest.mark.parametrize(
    "exc_class, status, code",
    [
        (ServiceValidationError, 400, "SERVICE_VALIDATION_ERROR"),
        (UnauthorizedError, 401, "UNAUTHORIZED"),
        (ForbiddenError, 403, "FORBIDDEN"),
        (NotFoundError, 404, "NOT_FOUND"),
        (ConflictError, 409, "CONFLICT"),
    ],
)
def test_exception_status_and_code(exc_class, status, code):
    exc = exc_class("boom")

    assert isinstance(exc, AppError)
    assert exc.http_status == status
    assert exc.code == code
    assert str(exc) == "boom"


def test_exception_defaults_and_details():
    exc = NotFoundError(details={"comment_id": 3})

    assert exc.message == "Not found"
    assert exc.to_dict() == {
        "code": "NOT_FOUND",
        "message": "Not found",
        "details": {"comment_id": 3},
    }
    assert ConflictError("dup", code="DUPLICATE_COMMENT").code == "DUPLICATE_COMMENT"


# =============================================================================
# RESPONSE HELPERS
# =============================================================================


def test_error_response_shape():
    body = error_response("NOT_FOUND", "Comment 1 not found")

    assert body["success"] is False
    assert body["error"] == {"code": "NOT_FOUND", "message": "Comment 1 not found"}
    assert "timestamp" in body


def test_success_response_shape():
    response = success_response("Comment added successfully")

    assert response.success is True
    assert response.data is None


def test_make_serializable_handles_nested_values():
    value = {"errors": [ValueError("bad"), b"raw"], "n": (1, 2)}

    assert make_serializable(value) == {"errors": ["bad", "raw"], "n": [1, 2]}


# =============================================================================
# HANDLERS
# =============================================================================


def test_unknown_route_uses_error_body():
    r = client.get("/cookingrecipes/nope")

    assert r.status_code == 404
    assert r.json()["error"]["code"] == "HTTP_404"


def test_database_error_is_500(db_session: Session, monkeypatch):
    profile = make_profile(db_session)

    def broken(*args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection lost"))

    monkeypatch.setattr(CommentService, "get_profile_comments", broken)
    r = client.get("/cookingrecipes/comments/getlist/byprofile", headers=auth_headers(profile.id))

    assert r.status_code == 500
    body = r.json()
    assert body["error"]["code"] == "DATABASE_ERROR"
    assert "connection lost" not in body["error"]["message"]


def test_unexpected_error_is_500(db_session: Session, monkeypatch):
    profile = make_profile(db_session)

    def broken(*args, **kwargs):
        raise RuntimeError("kaboom")

    monkeypatch.setattr(CommentService, "get_profile_comments", broken)
    safe_client = TestClient(app, raise_server_exceptions=False)
    r = safe_client.get(
        "/cookingrecipes/comments/getlist/byprofile", headers=auth_headers(profile.id)
    )

    assert r.status_code == 500
    assert r.json()["error"]["code"] == "INTERNAL_SERVER_ERROR"
