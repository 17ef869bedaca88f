"""
Unit Tests for Exception Handlers.

Tests the exception handler functions in isolation.
"""

import json
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest
from fastapi import Request
from fastapi.exceptions import RequestValidationError

from modules.backend.core.exception_handlers import (
    EXCEPTION_STATUS_MAP,
    _get_request_id,
    application_error_handler,
    status_for,
    unhandled_exception_handler,
    validation_error_handler,
)
from modules.backend.core.exceptions import (
    ApplicationError,
    AuthenticationError,
    DuplicateUsernameError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    NoteNotFoundError,
    NotFoundError,
    ProfileUpdateError,
    ValidationError,
)


def _body(response) -> dict:
    return json.loads(response.body.decode())


class TestStatusMapping:
    def test_not_found_maps_to_404(self):
        assert EXCEPTION_STATUS_MAP[NotFoundError] == 404

    def test_validation_maps_to_400(self):
        assert EXCEPTION_STATUS_MAP[ValidationError] == 400

    def test_authentication_maps_to_401(self):
        assert EXCEPTION_STATUS_MAP[AuthenticationError] == 401

    @pytest.mark.parametrize(
        ("exc", "status"),
        [
            (DuplicateUsernameError("ada"), 400),
            (InvalidCredentialsError(), 401),
            (MissingTokenError(), 401),
            (InvalidTokenError(), 401),
            (NoteNotFoundError("update"), 404),
            (ProfileUpdateError(OSError("disk full")), 500),
            (ApplicationError("Unknown"), 500),
        ],
    )
    def test_subclasses_inherit_status(self, exc, status):
        assert status_for(exc) == status


class TestGetRequestId:
    def test_extracts_from_request_state(self):
        request = MagicMock(spec=Request)
        request.state.request_id = "state-123"
        request.headers = {}

        assert _get_request_id(request) == "state-123"

    def test_extracts_from_header(self):
        request = MagicMock(spec=Request)
        del request.state.request_id
        request.headers = {"x-request-id": "header-456"}

        assert _get_request_id(request) == "header-456"

    def test_returns_none_when_not_present(self):
        request = MagicMock(spec=Request)
        del request.state.request_id
        request.headers = {}

        assert _get_request_id(request) is None


class TestApplicationErrorHandler:
    @pytest.fixture
    def mock_request(self):
        request = MagicMock(spec=Request)
        request.url.path = "/api/notes"
        request.method = "PUT"
        request.headers = {"x-request-id": "test-123"}
        del request.state.request_id
        return request

    @pytest.fixture
    def detailed_errors(self):
        def _patch(enabled: bool):
            config = SimpleNamespace(features=SimpleNamespace(api_detailed_errors=enabled))
            return patch(
                "modules.backend.core.exception_handlers.get_app_config",
                return_value=config,
            )
        return _patch

    @pytest.mark.asyncio
    async def test_note_not_found_message(self, mock_request):
        response = await application_error_handler(mock_request, NoteNotFoundError("update"))

        assert response.status_code == 404
        body = _body(response)
        assert body["message"] == "Note not found or you are not authorized to update this note"
        assert body["code"] == "NOTE_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_missing_token_returns_401(self, mock_request):
        response = await application_error_handler(mock_request, MissingTokenError())

        assert response.status_code == 401
        assert _body(response)["message"] == "Unauthorized: No token provided"

    @pytest.mark.asyncio
    async def test_validation_includes_details(self, mock_request):
        exc = ValidationError("Error: Images Only!", details={"field": "wallpaper"})

        response = await application_error_handler(mock_request, exc)

        assert response.status_code == 400
        assert _body(response)["details"] == {"field": "wallpaper"}

    @pytest.mark.asyncio
    async def test_response_includes_request_id(self, mock_request):
        response = await application_error_handler(mock_request, NotFoundError("User not found"))

        assert _body(response)["requestId"] == "test-123"

    @pytest.mark.asyncio
    async def test_profile_update_error_echoes_cause_when_detailed(self, mock_request, detailed_errors):
        with detailed_errors(True):
            response = await application_error_handler(
                mock_request, ProfileUpdateError(OSError("disk full"))
            )

        assert response.status_code == 500
        body = _body(response)
        assert body["message"] == "Failed to update user data"
        assert body["error"] == "disk full"

    @pytest.mark.asyncio
    async def test_profile_update_error_hides_cause_otherwise(self, mock_request, detailed_errors):
        with detailed_errors(False):
            response = await application_error_handler(
                mock_request, ProfileUpdateError(OSError("disk full"))
            )

        assert "error" not in _body(response)


class TestValidationErrorHandler:
    @pytest.mark.asyncio
    async def test_returns_422_with_field_details(self):
        request = MagicMock(spec=Request)
        request.url.path = "/api/notes"
        request.method = "POST"
        request.headers = {}
        del request.state.request_id

        exc = RequestValidationError(
            [{"loc": ("body", "content"), "msg": "Field required", "type": "missing"}]
        )

        response = await validation_error_handler(request, exc)

        assert response.status_code == 422
        body = _body(response)
        assert body["code"] == "VAL_REQUEST_INVALID"
        assert body["details"]["validation_errors"][0]["field"] == "body.content"


class TestUnhandledExceptionHandler:
    @pytest.mark.asyncio
    async def test_hides_internal_details(self):
        request = MagicMock(spec=Request)
        request.url.path = "/api/users"
        request.method = "GET"
        request.headers = {}
        del request.state.request_id

        response = await unhandled_exception_handler(request, RuntimeError("secret detail"))

        assert response.status_code == 500
        assert "secret detail" not in response.body.decode()
