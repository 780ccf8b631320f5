"""Logger setup tests."""

import logging

import pytest

from core import setup_logger


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_writes_formatted_records_to_file(tmp_path, restore_root_logger):
    log_file = tmp_path / "logs" / "errors.log"
    setup_logger(log_file=log_file, level="DEBUG")

    logging.getLogger("formatters.test").warning("offset fallback")
    for handler in restore_root_logger.handlers:
        handler.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "formatters.test - WARNING - offset fallback" in content


def test_repeated_setup_does_not_duplicate_handlers(tmp_path, restore_root_logger):
    setup_logger(log_file=tmp_path / "a.log")
    setup_logger(log_file=tmp_path / "b.log")
    assert len(restore_root_logger.handlers) == 2


def test_level_is_applied(tmp_path, restore_root_logger):
    setup_logger(log_file=tmp_path / "c.log", level="WARNING")
    assert restore_root_logger.level == logging.WARNING
