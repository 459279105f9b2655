"""Tests for logging configuration."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import pytest
import structlog
from optval._logging import LOGGER_NAME, configure_logging, get_logger
from structlog.testing import capture_logs

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def reset_optval_logger() -> Generator[None]:
    """Restore the optval logger and structlog defaults after each test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    structlog.reset_defaults()


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_sets_optval_level(self) -> None:
        configure_logging(level='warning')
        assert logging.getLogger(LOGGER_NAME).level == logging.WARNING

    def test_unknown_level_defaults_to_info(self) -> None:
        configure_logging(level='NOPE')
        assert logging.getLogger(LOGGER_NAME).level == logging.INFO

    def test_reconfigure_replaces_handler(self) -> None:
        configure_logging(level='DEBUG', json_output=False)
        configure_logging(level='DEBUG', json_output=True)
        assert len(logging.getLogger(LOGGER_NAME).handlers) == 1

    def test_root_logger_untouched(self) -> None:
        root = logging.getLogger()
        handlers = list(root.handlers)
        configure_logging(level='DEBUG')
        assert root.handlers == handlers
        assert logging.getLogger(LOGGER_NAME).propagate is False

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Events render as one JSON object per line."""
        configure_logging(level='DEBUG', json_output=True)
        get_logger('optval.test').info('lookup', user='mary')

        line = capsys.readouterr().err.strip().splitlines()[-1]
        entry = json.loads(line)
        assert entry['event'] == 'lookup'
        assert entry['user'] == 'mary'
        assert entry['level'] == 'info'
        assert entry['logger'] == 'optval.test'

    def test_level_filters_events(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level='INFO', json_output=True)
        get_logger('optval.test').debug('hidden')
        assert 'hidden' not in capsys.readouterr().err


class TestGetLogger:
    """Tests for get_logger()."""

    def test_emits_through_structlog(self) -> None:
        with capture_logs() as logs:
            get_logger().info('hello')
        assert logs == [{'event': 'hello', 'log_level': 'info'}]
