"""
Unit tests for structured logging.
"""

import json
import logging

from parrain.infrastructure.monitoring.logger import (
    JSONFormatter,
    get_request_id,
    request_id_ctx,
    set_request_id,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="parrain.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="User %s registered",
        args=("wallet1",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_base_fields(self):
        """Test core log fields."""
        data = json.loads(JSONFormatter().format(_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "parrain.test"
        assert data["message"] == "User wallet1 registered"
        assert data["line"] == 10

    def test_extra_fields_included(self):
        """Test extra= fields are emitted."""
        data = json.loads(
            JSONFormatter().format(_record(referral_code="ABCD1234", referral_count=3))
        )

        assert data["referral_code"] == "ABCD1234"
        assert data["referral_count"] == 3

    def test_service_and_environment_fields(self):
        """Test records are stamped with service and environment."""
        data = json.loads(JSONFormatter(environment="production").format(_record()))

        assert data["service"] == "parrain"
        assert data["env"] == "production"

    def test_extra_cannot_replace_core_fields(self):
        """Test extra= keys never overwrite level or message."""
        data = json.loads(
            JSONFormatter().format(_record(level="gold", message="other"))
        )

        assert data["level"] == "INFO"
        assert data["message"] == "User wallet1 registered"

    def test_request_id_included(self):
        """Test request ID from context is emitted."""
        token = request_id_ctx.set("req-1")
        try:
            data = json.loads(JSONFormatter().format(_record()))
        finally:
            request_id_ctx.reset(token)

        assert data["request_id"] == "req-1"


class TestRequestId:
    """Tests for request ID context."""

    def test_generates_id_when_missing(self):
        """Test a UUID is generated when none is given."""
        token = request_id_ctx.set(None)
        try:
            request_id = set_request_id()
            assert get_request_id() == request_id
            assert len(request_id) == 36
        finally:
            request_id_ctx.reset(token)
