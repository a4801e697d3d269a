"""
Unit tests for shared logging helpers.
"""

import logging

import pytest
import structlog

from shared import logging as shared_logging
from shared.logging import (
    add_correlation_context,
    add_service_context,
    clear_context,
    configure_logging,
    get_logger,
    set_request_id,
)


@pytest.fixture(autouse=True)
def reset_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    clear_context()
    shared_logging._service_name = None
    structlog.reset_defaults()


class TestLoggingContext:

    def test_set_request_id_generates_one(self):
        request_id = set_request_id()

        assert add_correlation_context(None, "info", {}) == {"request_id": request_id}

    def test_set_request_id_explicit(self):
        set_request_id("req-42")

        assert add_correlation_context(None, "info", {})["request_id"] == "req-42"

    def test_clear_context(self):
        set_request_id("req-42")
        clear_context()

        assert add_correlation_context(None, "info", {}) == {}

    def test_service_from_logger_name(self):
        event = add_service_context(None, "info", {"logger": "idtoken.certs"})

        assert event["service"] == "idtoken"

    def test_service_from_configuration(self):
        configure_logging("login-api", "debug")

        event = add_service_context(None, "info", {"logger": "idtoken.certs"})

        assert event["service"] == "login-api"


class TestConfigureLogging:

    def test_json_output(self, capsys):
        configure_logging("login-api", "info")
        set_request_id("req-7")

        get_logger("idtoken.verifier").info("ID token rejected", code="UNKNOWN_ISSUER")

        out = capsys.readouterr().out
        assert '"event": "ID token rejected"' in out
        assert '"code": "UNKNOWN_ISSUER"' in out
        assert '"service": "login-api"' in out
        assert '"request_id": "req-7"' in out

    def test_level_filtering(self, capsys):
        configure_logging("login-api", "warning")

        get_logger("idtoken.verifier").info("ID token verified")

        assert "ID token verified" not in capsys.readouterr().out

    def test_level_from_settings(self, capsys, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("IDTOKEN_LOG_LEVEL", "warning")
        configure_logging("login-api")

        logger = get_logger("idtoken.verifier")
        logger.info("ID token verified")
        logger.warning("Serving stale certs")

        out = capsys.readouterr().out
        assert "ID token verified" not in out
        assert "Serving stale certs" in out

    def test_level_defaults_to_info(self, capsys, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("IDTOKEN_LOG_LEVEL", raising=False)
        configure_logging("login-api")

        get_logger("idtoken.verifier").info("ID token rejected")

        assert "ID token rejected" in capsys.readouterr().out
