"""Unit tests for observability logging and correlation."""

from __future__ import annotations

import logging

import structlog

from password_store.observability import (
    CorrelationContext,
    CorrelationProcessor,
    JsonLoggerFactory,
    RequestContext,
    SensitiveFieldsFilter,
    get_logger,
)


# ---------------------------------------------------------------------------
# SensitiveFieldsFilter
# ---------------------------------------------------------------------------


class TestSensitiveFieldsFilter:
    def test_redacts_known_sensitive_key(self) -> None:
        result = SensitiveFieldsFilter().redact({"password": "s3cr3t", "name": "gh1"})
        assert result == {"password": SensitiveFieldsFilter.REDACTED, "name": "gh1"}

    def test_matches_field_suffix_case_insensitively(self) -> None:
        result = SensitiveFieldsFilter().redact({"clientSecret": "s3cr3t", "vault_token": "s.abc"})
        assert result == {"clientSecret": "[REDACTED]", "vault_token": "[REDACTED]"}

    def test_redacts_nested_and_lists(self) -> None:
        data = {"auth": {"password": "pw"}, "users": [{"secret": "a"}, "plain"]}
        assert SensitiveFieldsFilter().redact(data) == {
            "auth": {"password": SensitiveFieldsFilter.REDACTED},
            "users": [{"secret": SensitiveFieldsFilter.REDACTED}, "plain"],
        }

    def test_custom_fields(self) -> None:
        f = SensitiveFieldsFilter(frozenset({"PIN"}))
        assert f.redact({"pin": "1234", "password": "x"}) == {"pin": "[REDACTED]", "password": "x"}

    def test_is_a_structlog_processor(self) -> None:
        event = {"event": "vault.login", "token": "s.abc"}
        assert SensitiveFieldsFilter()(None, "info", event) == {"event": "vault.login", "token": "[REDACTED]"}
        assert event["token"] == "s.abc"


# ---------------------------------------------------------------------------
# CorrelationProcessor
# ---------------------------------------------------------------------------


class TestCorrelationProcessor:
    def test_injects_active_context(self) -> None:
        CorrelationContext.set(RequestContext(correlation_id="cid-1", user_id="u-1", project_id="p-1"))
        try:
            event = CorrelationProcessor()(None, "info", {"event": "x"})
        finally:
            CorrelationContext.clear()
        assert event == {"event": "x", "correlation_id": "cid-1", "user_id": "u-1", "project_id": "p-1"}

    def test_no_context_leaves_event(self) -> None:
        CorrelationContext.clear()
        assert CorrelationProcessor()(None, "info", {"event": "x"}) == {"event": "x"}

    def test_existing_keys_kept(self) -> None:
        CorrelationContext.set(RequestContext(correlation_id="cid-1"))
        try:
            event = CorrelationProcessor()(None, "info", {"correlation_id": "explicit"})
        finally:
            CorrelationContext.clear()
        assert event["correlation_id"] == "explicit"

    def test_request_context_fixture(self, request_ctx: RequestContext) -> None:
        assert CorrelationContext.get() is request_ctx


class TestRequestContext:
    def test_new_generates_correlation_id(self) -> None:
        a, b = RequestContext.new(), RequestContext.new()
        assert a.correlation_id != b.correlation_id

    def test_new_keeps_user_and_project(self) -> None:
        ctx = RequestContext.new(user_id="u", project_id="p")
        assert (ctx.user_id, ctx.project_id) == ("u", "p")


# ---------------------------------------------------------------------------
# JsonLoggerFactory / get_logger
# ---------------------------------------------------------------------------


class TestJsonLoggerFactory:
    def test_configure_installs_single_handler(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            JsonLoggerFactory.configure(level=logging.DEBUG)
            assert len(root.handlers) == 1
            assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
            assert root.level == logging.DEBUG
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
            structlog.reset_defaults()


class TestGetLogger:
    def test_returns_bindable_logger(self) -> None:
        logger = get_logger("password_store.test")
        assert hasattr(logger, "bind")

    def test_binds_initial_values(self) -> None:
        logger = get_logger("password_store.test", resource_type="githubConfig")
        assert hasattr(logger, "info")
