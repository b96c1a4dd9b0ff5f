"""
Unit tests for error handler middleware.

Usage:
    pytest parrain/tests/unit/presentation/test_error_handler.py -v
"""

import json
from unittest.mock import MagicMock

import pytest
from starlette.requests import Request

from parrain.domain.exceptions import (
    ConflictError,
    EntityNotFoundError,
    IdentifierGenerationError,
    StoreError,
)
from parrain.presentation.api.middleware import error_handler


def _request() -> Request:
    return Request(
        {
            "type": "http",
            "method": "GET",
            "path": "/api/stats",
            "query_string": b"",
            "headers": [],
        }
    )


class TestErrorHandler:
    """Tests for exception to envelope translation."""

    # ================================================================
    # Domain exceptions
    # ================================================================

    @pytest.mark.parametrize(
        ("exc", "status_code"),
        [
            (EntityNotFoundError("User", "W1"), 404),
            (ConflictError("username", "Username already taken"), 400),
            (IdentifierGenerationError("referral code", 10), 503),
            (StoreError("load", "bad document"), 500),
        ],
    )
    async def test_domain_exception_status(self, exc, status_code):
        """Test error codes map to HTTP status and envelope."""
        response = await error_handler.parrain_exception_handler(_request(), exc)

        assert response.status_code == status_code
        assert json.loads(response.body) == {
            "success": False,
            "error": exc.message,
            "code": exc.code,
        }

    # ================================================================
    # Unhandled exceptions
    # ================================================================

    async def test_unhandled_exception_envelope(self, monkeypatch):
        """Test generic 500 envelope without a second error log."""
        logger = MagicMock()
        monkeypatch.setattr(error_handler, "logger", logger)

        response = await error_handler.unhandled_exception_handler(
            _request(), RuntimeError("boom")
        )

        assert response.status_code == 500
        assert json.loads(response.body) == {
            "success": False,
            "error": "Internal server error",
            "code": "INTERNAL_ERROR",
        }
        logger.error.assert_not_called()
