"""Tests for photo_sorter.utils."""

import logging
from pathlib import Path

import pytest

from photo_sorter.utils import format_pair, setup_logging


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_string_level(self, restore_root_logger):
        setup_logging("debug")

        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1

    def test_log_file(self, tmp_path, restore_root_logger):
        log_file = tmp_path / "logs" / "sort.log"

        setup_logging(logging.INFO, log_file)
        logging.getLogger("photo_sorter.test").info("Copied a -> b")
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert "Copied a -> b" in log_file.read_text()
        assert " - photo_sorter.test - INFO - " in log_file.read_text()

    def test_quiets_decoders(self, restore_root_logger):
        setup_logging("DEBUG")

        assert logging.getLogger("PIL").level == logging.WARNING
        assert logging.getLogger("exifread").level == logging.ERROR


def test_format_pair():
    assert format_pair(Path("a.jpg"), Path("lib/a.jpg")) == f"{Path('a.jpg')} -> {Path('lib/a.jpg')}"
