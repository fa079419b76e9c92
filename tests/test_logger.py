import logging
import tempfile
import unittest
from logging.handlers import RotatingFileHandler
from pathlib import Path

from app_utils.logger import setup_logger


class TestSetupLogger(unittest.TestCase):
    def setUp(self):
        root = logging.getLogger()
        self._saved_handlers = list(root.handlers)
        self._saved_level = root.level
        root.handlers = [h for h in root.handlers if not isinstance(h, RotatingFileHandler)]
        self._tmp = tempfile.TemporaryDirectory()
        self.log_file = Path(self._tmp.name) / "logs" / "daygrid.log"

    def tearDown(self):
        root = logging.getLogger()
        for h in root.handlers:
            if h not in self._saved_handlers:
                h.close()
        root.handlers = self._saved_handlers
        root.setLevel(self._saved_level)
        self._tmp.cleanup()

    def rotating(self):
        return [h for h in logging.getLogger().handlers if isinstance(h, RotatingFileHandler)]

    def test_rerun_does_not_stack_handlers(self):
        setup_logger(str(self.log_file), level="DEBUG")
        setup_logger(str(self.log_file), level="WARNING")
        self.assertEqual(len(self.rotating()), 1)
        self.assertEqual(logging.getLogger().level, logging.WARNING)

    def test_writes_to_file(self):
        setup_logger(str(self.log_file), level="INFO")
        logging.getLogger("daygrid.test").warning("hello file")
        for h in self.rotating():
            h.flush()
        self.assertIn("[WARNING] daygrid.test: hello file", self.log_file.read_text(encoding="utf-8"))

    def test_unknown_level_falls_back_to_info(self):
        setup_logger(str(self.log_file), level="chatty")
        self.assertEqual(logging.getLogger().level, logging.INFO)


if __name__ == "__main__":
    unittest.main()
