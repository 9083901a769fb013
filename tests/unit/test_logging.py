"""
Unit tests for the mazeframe logging layer.
"""

import logging

import pytest

from mazeframe.utils.maze_logging import (
    LoggedOperation,
    MazeFormatter,
    MazeLogger,
    configure_logging,
    get_logger,
)


@pytest.fixture
def restore_logging():
    """Put the global logging configuration back after a test changes it."""
    yield
    configure_logging(level="WARNING", log_to_file=False, use_colors=True)


class TestGetLogger:
    def test_default_name(self):
        assert get_logger().name == "mazeframe"

    def test_cached_per_name(self):
        assert get_logger("mazeframe.test_a") is get_logger("mazeframe.test_a")

    def test_single_handler_no_propagation(self):
        logger = get_logger("mazeframe.test_handlers")
        get_logger("mazeframe.test_handlers")

        assert len(logger.handlers) == 1
        assert not logger.propagate

    def test_singleton(self):
        assert MazeLogger() is MazeLogger()


class TestConfigureLogging:
    def test_level_applies_to_existing_loggers(self, restore_logging):
        logger = get_logger("mazeframe.test_level")
        configure_logging(level="DEBUG")

        assert logger.level == logging.DEBUG
        assert logger.handlers[0].level == logging.DEBUG

    def test_file_handler(self, tmp_path, restore_logging):
        log_file = tmp_path / "logs" / "maze.log"
        configure_logging(level="INFO", log_to_file=True, log_file_path=log_file, use_colors=False)

        logger = get_logger("mazeframe.test_file")
        logger.info("written to file")
        for handler in logger.handlers:
            handler.flush()

        assert log_file.exists()
        assert "written to file" in log_file.read_text()

    def test_suppresses_external_loggers(self, restore_logging):
        logging.getLogger("PIL").setLevel(logging.DEBUG)
        configure_logging(level="DEBUG", suppress_external=True)
        assert logging.getLogger("PIL").level == logging.WARNING


class TestMazeFormatter:
    def _record(self):
        return logging.LogRecord("mazeframe.x", logging.INFO, "grid.py", 12, "hello", None, None)

    def test_plain_format(self):
        text = MazeFormatter(use_colors=False).format(self._record())
        assert "INFO" in text
        assert "hello" in text
        assert "\x1b[" not in text

    def test_location_suffix(self):
        text = MazeFormatter(use_colors=False, include_location=True).format(self._record())
        assert "[grid.py:12]" in text

    def test_colored_format(self):
        text = MazeFormatter(use_colors=True).format(self._record())
        assert "hello" in text
        assert "INFO" in text


class TestLoggedOperation:
    def test_logs_start_and_completion(self, caplog):
        logger = logging.getLogger("logged_operation.ok")
        with caplog.at_level(logging.DEBUG, logger="logged_operation.ok"):
            with LoggedOperation(logger, "carve"):
                pass

        messages = [record.getMessage() for record in caplog.records]
        assert messages[0] == "Starting carve"
        assert messages[1].startswith("Completed carve in ")

    def test_failure_is_logged_and_reraised(self, caplog):
        logger = logging.getLogger("logged_operation.fail")
        with caplog.at_level(logging.DEBUG, logger="logged_operation.fail"):
            with pytest.raises(RuntimeError):
                with LoggedOperation(logger, "carve"):
                    raise RuntimeError("boom")

        assert any(record.getMessage().startswith("Failed carve") for record in caplog.records)
        assert all(record.levelno == logging.DEBUG for record in caplog.records)
