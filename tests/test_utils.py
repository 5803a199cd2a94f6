"""
Tests for logging setup and the dependency checker.
"""

import logging
from unittest.mock import patch

from mtx_library.core.config_manager import LoggingConfig
from mtx_library.utils.dependencies import DependencyChecker
from mtx_library.utils.library_logger import log_command, setup_logging


def test_setup_logging_console_only():
    logger = setup_logging(LoggingConfig(level="DEBUG"))

    assert logger.name == "mtx_library"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_setup_logging_replaces_handlers():
    setup_logging(LoggingConfig())
    logger = setup_logging(LoggingConfig())

    assert len(logger.handlers) == 1


def test_setup_logging_with_file(tmp_path):
    log_file = tmp_path / "logs" / "mtx.log"
    config = LoggingConfig(console_enabled=False, file_enabled=True, file=str(log_file))

    logger = setup_logging(config)
    logging.getLogger("mtx_library.test").info("written to file")
    for handler in logger.handlers:
        handler.flush()

    assert "written to file" in log_file.read_text(encoding="utf-8")


def test_log_command(caplog):
    with caplog.at_level(logging.INFO, logger="mtx_library.commands"):
        log_command("mtx -f /dev/sg3 status", success=True, execution_time=0.2)
        log_command("mtx -f /dev/sg3 load 1 0", success=False, details="Empty")
        log_command("mtx -f /dev/sg3 inventory", success=True, execution_time=42.0)

    levels = [record.levelname for record in caplog.records]
    assert levels == ["INFO", "ERROR", "INFO", "WARNING"]
    assert "Empty" in caplog.records[1].getMessage()


def test_collect_dependencies():
    with patch("mtx_library.utils.dependencies.shutil.which", return_value=None):
        results = DependencyChecker.collect("mtx")

    assert results["mtx"] is False
    assert results["yaml"] is True
    assert results["jsonschema"] is True


def test_check_all_reports_missing_mtx(capsys):
    with patch("mtx_library.utils.dependencies.shutil.which", return_value=None):
        assert DependencyChecker.check_all("mtx") is False

    assert "mtx" in capsys.readouterr().out


def test_check_all_ok():
    with patch("mtx_library.utils.dependencies.shutil.which", return_value="/usr/sbin/mtx"):
        assert DependencyChecker.check_all("mtx") is True
