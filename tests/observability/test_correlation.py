"""
Test suite for correlation ID propagation and log formatting.

System role: Verification of request tracing
"""

import logging

from fastapi.testclient import TestClient

from backend.api.main import create_app
from backend.observability import configure_logging, get_correlation_id, set_correlation_id
from backend.observability.correlation import clear_correlation_id
from backend.observability.logger import CorrelationIdFilter
from backend.observability.middleware import CORRELATION_HEADER


class TestCorrelationContext:
    """contextvar helpers."""

    def test_set_generates_id_when_none_given(self) -> None:
        correlation_id = set_correlation_id()
        try:
            assert correlation_id
            assert get_correlation_id() == correlation_id
        finally:
            clear_correlation_id()

    def test_set_keeps_given_id(self) -> None:
        try:
            assert set_correlation_id("req-123") == "req-123"
        finally:
            clear_correlation_id()

        assert get_correlation_id() == ""


class TestCorrelationIdFilter:
    """Log records carry the current correlation ID."""

    def test_filter_attaches_current_id(self) -> None:
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)
        set_correlation_id("req-456")
        try:
            assert CorrelationIdFilter().filter(record) is True
        finally:
            clear_correlation_id()

        assert record.correlation_id == "req-456"

    def test_filter_uses_placeholder_outside_request(self) -> None:
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)

        CorrelationIdFilter().filter(record)

        assert record.correlation_id == "-"

    def test_configure_logging_sets_level_and_single_handler(self) -> None:
        root = logging.getLogger()
        original_level = root.level
        original_handlers = root.handlers[:]
        try:
            configure_logging("debug")
            configure_logging("warning")

            assert root.level == logging.WARNING
            assert len(root.handlers) == 1
        finally:
            for handler in root.handlers[:]:
                root.removeHandler(handler)
            for handler in original_handlers:
                root.addHandler(handler)
            root.setLevel(original_level)


class TestCorrelationMiddleware:
    """X-Correlation-ID header handling."""

    def test_response_echoes_incoming_header(self) -> None:
        client = TestClient(create_app())

        response = client.get("/api/v1/health", headers={CORRELATION_HEADER: "req-789"})

        assert response.headers[CORRELATION_HEADER] == "req-789"

    def test_response_gets_generated_id(self) -> None:
        client = TestClient(create_app())

        first = client.get("/api/v1/health").headers[CORRELATION_HEADER]
        second = client.get("/api/v1/health").headers[CORRELATION_HEADER]

        assert first and second
        assert first != second
