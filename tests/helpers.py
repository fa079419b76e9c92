import tempfile
from pathlib import Path

from app_utils.settings import SettingsStore
from app_utils.storage import KeyValueStore, make_engine


class TempStoreMixin:
    """A fresh SQLite-backed KeyValueStore per test."""

    def setUp(self):
        super().setUp()
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp_path = Path(self._tmp.name)
        self.engine = make_engine(str(self.tmp_path / "data" / "test.db"))
        self.kv = KeyValueStore(self.engine)

    def tearDown(self):
        self.engine.dispose()
        self._tmp.cleanup()
        super().tearDown()

    def store(self, kind):
        return SettingsStore(self.kv, kind)


class ScriptedPrompter:
    """Answers prompts from a fixed script; None plays a dismissed prompt."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.asked = []

    def _next(self):
        if not self.answers:
            raise AssertionError(f"unexpected prompt after {self.asked}")
        return self.answers.pop(0)

    def choose(self, title, message, options):
        self.asked.append(title)
        answer = self._next()
        if answer is not None and answer not in options:
            raise AssertionError(f"{answer!r} is not one of {options}")
        return answer

    def ask(self, title, placeholder):
        self.asked.append(title)
        answer = self._next()
        if answer is None:
            return None
        return answer.strip() or None
