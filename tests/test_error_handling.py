"""
Error envelope and exception-to-status mapping tests.

Each error raised by the service layer must reach the client as
{"success": false, "error": {"code", "message"[, "details"]}, "timestamp"}
with the matching HTTP status.
"""

from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from test_fixtures import auth_headers
from api.dependencies import get_ingredient_service
from api.responses import ErrorResponse, error_body
from app.exceptions import (
    DuplicateNameError,
    NotFoundError,
    ServiceValidationError,
    StoreError,
    UnauthenticatedError,
)
from main import app
from repositories import IngredientStore
from services.ingredient_service import IngredientService


@pytest.fixture
def failing_store():
    """Service wired to a store mock; the test decides how it fails."""
    store = Mock(spec=IngredientStore)
    app.dependency_overrides[get_ingredient_service] = lambda: IngredientService(store)
    try:
        yield store
    finally:
        app.dependency_overrides.pop(get_ingredient_service, None)


@pytest.mark.parametrize(
    "exc_class,status,code",
    [
        (NotFoundError, 404, "NOT_FOUND"),
        (DuplicateNameError, 400, "DUPLICATE_NAME"),
        (ServiceValidationError, 400, "SERVICE_VALIDATION_ERROR"),
        (UnauthenticatedError, 401, "UNAUTHENTICATED"),
        (StoreError, 503, "STORE_ERROR"),
    ],
)
def test_exception_defaults(exc_class, status, code):
    exc = exc_class()
    assert exc.http_status == status
    assert exc.code == code
    assert exc.to_dict() == {"code": code, "message": exc_class.default_message}


def test_to_dict_includes_details_when_present():
    exc = ServiceValidationError("Invalid ingredient data", details={"name": "too short"})
    assert exc.to_dict() == {
        "code": "SERVICE_VALIDATION_ERROR",
        "message": "Invalid ingredient data",
        "details": {"name": "too short"},
    }
    assert str(exc) == "Invalid ingredient data"


def test_store_failure_on_list_is_503(failing_store: Mock):
    failing_store.list_all.side_effect = StoreError("Ingredient store failed during list_all")

    r = TestClient(app).get("/api/ingredients")

    assert r.status_code == 503
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "STORE_ERROR"
    assert "timestamp" in body


def test_store_failure_on_create_is_503(failing_store: Mock):
    failing_store.exists_by_name_case_insensitive.return_value = False
    failing_store.insert.side_effect = StoreError()

    r = TestClient(app).post(
        "/api/ingredients", json={"name": "Flour"}, headers=auth_headers()
    )

    assert r.status_code == 503


def test_unexpected_error_is_500(failing_store: Mock):
    failing_store.find_by_id.side_effect = RuntimeError("boom")

    r = TestClient(app, raise_server_exceptions=False).get("/api/ingredients/1")

    assert r.status_code == 500
    assert r.json()["error"]["code"] == "INTERNAL_SERVER_ERROR"


def test_non_integer_id_is_422():
    r = TestClient(app).get("/api/ingredients/flour")

    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"


def test_unknown_route_uses_error_envelope():
    r = TestClient(app).get("/api/does-not-exist")

    assert r.status_code == 404
    assert r.json()["error"]["code"] == "HTTP_404"


def test_error_body_matches_error_response_model():
    body = error_body("NOT_FOUND", "Ingredient 3 not found")

    assert body["success"] is False
    assert body["error"] == {"code": "NOT_FOUND", "message": "Ingredient 3 not found"}
    assert ErrorResponse.model_validate(body).error.code == "NOT_FOUND"
    assert isinstance(body["timestamp"], str)


def test_error_body_keeps_details_when_given():
    body = error_body("DUPLICATE_NAME", "taken", {"name": "Ñame"})

    assert body["error"]["details"] == {"name": "Ñame"}
