"""Tests for package logger configuration."""

import logging
import sys
import tempfile
import unittest
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from BookFinder.utils.log import configure_logging, log, log_file_path, reset_logging


class TestConfigureLogging(unittest.TestCase):
    def tearDown(self) -> None:
        reset_logging()

    def test_console_only(self) -> None:
        configure_logging(level="warning", action="search")
        self.assertEqual(len(log.handlers), 1)
        self.assertEqual(log.handlers[0].level, logging.WARNING)
        self.assertEqual(log.level, logging.WARNING)
        self.assertFalse(log.propagate)

    def test_unknown_level_falls_back_to_info(self) -> None:
        configure_logging(level="chatty")
        self.assertEqual(log.level, logging.INFO)

    def test_file_mirror_records_debug(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            configure_logging(level="INFO", action="browse", log_to_file=True, log_dir=tmp)
            log.debug("debounced commit")
            file_handlers = [handler for handler in log.handlers if isinstance(handler, logging.FileHandler)]
            self.assertEqual(len(file_handlers), 1)
            path = Path(file_handlers[0].baseFilename)
            reset_logging()

            self.assertEqual(path.parent.name, "browse")
            self.assertTrue(path.name.startswith("browse_"))
            self.assertIn("[DEBG] debounced commit", path.read_text(encoding="utf-8"))

    def test_reconfigure_replaces_handlers(self) -> None:
        configure_logging(level="INFO")
        configure_logging(level="DEBUG")
        self.assertEqual(len(log.handlers), 1)

    def test_reset_restores_propagation(self) -> None:
        configure_logging(level="INFO")
        reset_logging()
        self.assertEqual(log.handlers, [])
        self.assertTrue(log.propagate)


class TestLogFilePath(unittest.TestCase):
    def test_layout(self) -> None:
        path = log_file_path("logs", "search", now=datetime(2024, 3, 5, 7, 8, 9))
        self.assertEqual(path, Path("logs/search/search_0305070809.log"))


if __name__ == "__main__":
    unittest.main()
