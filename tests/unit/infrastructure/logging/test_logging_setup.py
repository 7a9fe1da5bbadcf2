# tests/unit/infrastructure/logging/test_logging_setup.py

"""Tests for logging configuration and run summaries"""

# Standard library imports
import logging
from logging import FileHandler
from logging import StreamHandler
from logging import getLogger
from pathlib import Path

# Third party imports
from pytest import fixture

# Local imports
from json_workbench.infrastructure.logging import get_default_log_path
from json_workbench.infrastructure.logging import log_run_summary
from json_workbench.infrastructure.logging import setup_logging


@fixture
def root_logger():
    root = getLogger()
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()


def own_handlers(root):
    return [h for h in root.handlers if not type(h).__module__.startswith("_pytest")]


class TestSetupLogging:
    """Test handler configuration"""

    def test_file_logging(self, root_logger, tmp_path):
        """Test that a file handler records debug messages"""
        log_file = str(tmp_path / "run.log")
        assert setup_logging(log_file=log_file, log_level="WARNING", silent=True) == log_file
        handlers = own_handlers(root_logger)
        assert [type(h) for h in handlers] == [FileHandler]
        assert root_logger.level == logging.DEBUG

        getLogger("json_workbench.test").debug("detail for the file")
        handlers[0].flush()
        content = Path(log_file).read_text(encoding="utf-8")
        assert "json_workbench.test - DEBUG - detail for the file" in content

    def test_console_only(self, root_logger):
        """Test console logging without a file"""
        assert setup_logging(log_level="warning", disable_file_logging=True) is None
        handlers = own_handlers(root_logger)
        assert len(handlers) == 1
        assert type(handlers[0]) is StreamHandler
        assert handlers[0].level == logging.WARNING
        assert root_logger.level == logging.WARNING

    def test_silent_without_file(self, root_logger):
        """Test that silent mode with no file installs no handlers"""
        assert setup_logging(silent=True, disable_file_logging=True) is None
        assert own_handlers(root_logger) == []

    def test_unknown_level_defaults_to_info(self, root_logger):
        """Test that unrecognized level names fall back to INFO"""
        setup_logging(log_level="LOUD", silent=True, disable_file_logging=True)
        assert root_logger.level == logging.INFO

    def test_default_log_path(self, tmp_path, monkeypatch):
        """Test that the default log path is timestamped under logs/"""
        monkeypatch.chdir(tmp_path)
        path = get_default_log_path()
        assert path.startswith("logs/json_workbench_")
        assert path.endswith(".log")
        assert (tmp_path / "logs").is_dir()


class TestLogRunSummary:
    """Test the one-line command summary"""

    def test_success(self, caplog):
        """Test the summary of a successful command"""
        with caplog.at_level(logging.INFO):
            log_run_summary("check", "doc.json", 1.0, 1.25, 0)
        assert "check doc.json: ok in 250.0 ms" in caplog.text

    def test_failure(self, caplog):
        """Test the summary of a failed command"""
        with caplog.at_level(logging.INFO):
            log_run_summary("validate", "-", 0.0, 0.001, 1)
        assert "validate -: failed (exit 1) in 1.0 ms" in caplog.text
