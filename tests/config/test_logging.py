"""Tests for structlog configuration."""

from __future__ import annotations

import io
import json
import logging

import pytest
import structlog

from addrctl.config.logging import APP_LOGGER, configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger(APP_LOGGER).level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger(APP_LOGGER).level == logging.WARNING

    def test_human_mode_output(self) -> None:
        configure_logging(verbose=True, log_json=False)
        log = structlog.get_logger("addrctl.test")
        log.warning("hello world", key="val")
        # Smoke test: format depends on terminal

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("addrctl.test")
        log.warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "addrctl.test"
        assert "timestamp" in parsed

    def test_user_commands_logged_when_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("addrctl.logic.manager").info("[USER COMMAND][%s]", "list")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "[USER COMMAND][list]"
        assert parsed["level"] == "info"

    def test_quiet_by_default(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("addrctl.logic.manager").info("[USER COMMAND][%s]", "list")
        logging.getLogger("other.library").info("noise")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=False, log_json=False)
        configure_logging(verbose=False, log_json=False)
        assert len(logging.getLogger().handlers) == 1

    def test_explicit_stream(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=stream)
        logging.getLogger("addrctl.storage").info("saved")
        assert json.loads(stream.getvalue().strip())["event"] == "saved"

    def test_json_inlines_exception(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=False, log_json=True, stream=stream)
        try:
            raise ValueError("bad file")
        except ValueError:
            logging.getLogger("addrctl.storage").exception("save failed")
        parsed = json.loads(stream.getvalue().strip())
        assert parsed["event"] == "save failed"
        assert "ValueError: bad file" in parsed["exception"]

    def test_console_uncolored_off_tty(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=False, log_json=False, stream=stream)
        logging.getLogger("addrctl.storage").warning("plain text")
        output = stream.getvalue()
        assert "plain text" in output
        assert "\x1b[" not in output
