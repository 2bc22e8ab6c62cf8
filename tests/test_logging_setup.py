"""Tests for console and file logging configuration."""

import logging
import os

import pytest

from jwt_parser import logging_setup
from jwt_parser.logging_setup import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger(tmp_path, monkeypatch):
    """Point LOG_DIR at tmp_path and put the root logger back afterwards."""
    monkeypatch.setattr(logging_setup, "LOG_DIR", str(tmp_path / "logs"))
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def _handlers(kind):
    return [h for h in logging.getLogger().handlers if type(h) is kind]


def test_console_only_by_default(tmp_path):
    assert setup_logging() is None

    consoles = _handlers(logging.StreamHandler)
    assert len(consoles) == 1
    assert consoles[0].level == logging.WARNING
    assert _handlers(logging.FileHandler) == []
    assert not (tmp_path / "logs").exists()
    assert logging.getLogger().level == logging.DEBUG


def test_verbose_console_is_debug():
    setup_logging(verbose=True)
    assert _handlers(logging.StreamHandler)[0].level == logging.DEBUG


def test_file_handler_writes_debug(tmp_path):
    log_path = setup_logging(log_to_file=True, log_prefix="unit")

    assert log_path is not None
    assert os.path.dirname(log_path) == str(tmp_path / "logs")
    assert os.path.basename(log_path).startswith("unit_")
    assert os.path.isfile(log_path)

    files = _handlers(logging.FileHandler)
    assert len(files) == 1
    assert files[0].level == logging.DEBUG
    assert _handlers(logging.StreamHandler)[0].level == logging.WARNING

    logging.getLogger("jwt_parser.parser").debug("segment lengths recorded")
    files[0].flush()
    with open(log_path, encoding="utf-8") as f:
        assert "segment lengths recorded" in f.read()


def test_replaces_existing_handlers():
    setup_logging()
    setup_logging()
    assert len(_handlers(logging.StreamHandler)) == 1
