"""
Tests for the shared logging functionality.
"""

import logging
import os
from unittest.mock import patch

import pytest

from telegraf_migration_toolkit.shared import globals
from telegraf_migration_toolkit.shared.logging import (
    CustomFormatter,
    ReadOnlyRotatingFileHandler,
    setup_logging,
)


@pytest.fixture(autouse=True)
def no_log_file_env():
    with patch.dict(os.environ):
        os.environ.pop(globals.LOG_FILE_ENV, None)
        yield


class TestSetupLogging:
    """Test cases for setup_logging function."""

    def test_setup_logging_default(self):
        with patch('logging.basicConfig') as mock_basic_config:
            setup_logging()

            mock_basic_config.assert_called_once()
            call_args = mock_basic_config.call_args
            assert call_args[1]['level'] == logging.INFO
            assert call_args[1]['force'] is True

            # Only the console handler without a log file
            handlers = call_args[1]['handlers']
            assert len(handlers) == 1
            assert isinstance(handlers[0], logging.StreamHandler)
            assert not isinstance(handlers[0], logging.FileHandler)

    def test_setup_logging_verbose(self):
        with patch('logging.basicConfig') as mock_basic_config:
            setup_logging(verbose=True)

            assert mock_basic_config.call_args[1]['level'] == logging.DEBUG

    @pytest.mark.parametrize("level_name, level", [
        ("ERROR", logging.ERROR),
        ("warning", logging.WARNING),
        ("DEBUG", logging.DEBUG),
        ("bogus", logging.INFO),
    ])
    def test_setup_logging_custom_level(self, level_name, level):
        with patch('logging.basicConfig') as mock_basic_config:
            setup_logging(log_level=level_name)

            assert mock_basic_config.call_args[1]['level'] == level

    def test_setup_logging_verbose_overrides_level(self):
        with patch('logging.basicConfig') as mock_basic_config:
            setup_logging(verbose=True, log_level="ERROR")

            assert mock_basic_config.call_args[1]['level'] == logging.DEBUG

    def test_setup_logging_with_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "migrate.log"

        with patch('logging.basicConfig') as mock_basic_config:
            setup_logging(log_file_path=str(log_file))

            handlers = mock_basic_config.call_args[1]['handlers']
            assert len(handlers) == 2
            assert isinstance(handlers[1], ReadOnlyRotatingFileHandler)
            assert isinstance(handlers[1].formatter, CustomFormatter)
            assert log_file.parent.exists()
            handlers[1].close()

    def test_setup_logging_log_file_from_environment(self, tmp_path):
        log_file = tmp_path / "env.log"

        with patch.dict(os.environ, {globals.LOG_FILE_ENV: str(log_file)}):
            with patch('logging.basicConfig') as mock_basic_config:
                setup_logging()

                handlers = mock_basic_config.call_args[1]['handlers']
                assert handlers[1].baseFilename == str(log_file)
                handlers[1].close()


class TestCustomFormatter:
    """Test cases for CustomFormatter."""

    def test_format_includes_user_and_host(self):
        with patch('getpass.getuser', return_value='telegraf'), \
                patch('socket.gethostname', return_value='collector'):
            formatter = CustomFormatter()

        record = logging.LogRecord("test", logging.INFO, "migrate.py", 42, "hello", None, None)
        output = formatter.format(record)

        assert "[telegraf@collector]" in output
        assert "[migrate.py:42]" in output
        assert output.endswith("hello")


class TestReadOnlyRotatingFileHandler:
    """Test cases for ReadOnlyRotatingFileHandler."""

    def test_rotated_file_is_read_only(self, tmp_path):
        log_file = tmp_path / "rotate.log"
        handler = ReadOnlyRotatingFileHandler(str(log_file), maxBytes=10, backupCount=1, encoding='utf-8')
        handler.setFormatter(logging.Formatter('%(message)s'))
        try:
            handler.emit(logging.LogRecord("test", logging.INFO, __file__, 1, "first message", None, None))
            handler.emit(logging.LogRecord("test", logging.INFO, __file__, 1, "second message", None, None))
        finally:
            handler.close()

        rotated = tmp_path / "rotate.log.1"
        assert rotated.exists()
        assert not os.access(rotated, os.W_OK) or os.geteuid() == 0
