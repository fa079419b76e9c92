"""
Persisted tracker state.

Everything that writes to the key-value store goes through `SettingsStore`;
the grid and progress code only ever receives plain values read from here.
"""

import json
import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import FrozenSet, Optional

from app_utils.dates import InvalidDateError, format_date, is_date_key, try_parse_date

logger = logging.getLogger(__name__)


class Theme(Enum):
    DARK = "dark"
    LIGHT = "light"


class TrackerKind(Enum):
    COUNTDOWN = "countdown"
    HABIT = "habit"


KEYS = {
    TrackerKind.COUNTDOWN: {
        "theme": "countdown.theme",
        "label": "countdown.title",
        "target_date": "countdown.target_date",
        "anchor_date": "countdown.install_date",
    },
    TrackerKind.HABIT: {
        "theme": "habit.theme",
        "label": "habit.name",
        "dates": "habit.dates",
    },
}

DEFAULT_LABELS = {
    TrackerKind.COUNTDOWN: "Countdown",
    TrackerKind.HABIT: "habit",
}


@dataclass
class TrackerConfig:
    theme: Theme
    label: str
    anchor_date: Optional[date] = None
    target_date: Optional[date] = None


def decode_completions(raw) -> FrozenSet[str]:
    """JSON array of day keys -> set; anything unreadable is dropped."""
    if not raw:
        return frozenset()
    try:
        items = json.loads(raw)
    except ValueError:
        logger.info("Ignoring malformed completion list")
        return frozenset()
    if not isinstance(items, list):
        return frozenset()
    out = set()
    for item in items:
        d = try_parse_date(item)
        if d is not None:
            out.add(format_date(d))
    return frozenset(out)


def encode_completions(completions) -> str:
    bad = [k for k in completions if not is_date_key(k)]
    if bad:
        raise InvalidDateError(f"Not day keys: {sorted(bad)!r}")
    return json.dumps(sorted(completions))


class SettingsStore:
    def __init__(self, kv, kind: TrackerKind):
        self.kv = kv
        self.kind = kind
        self.keys = KEYS[kind]

    # ----- theme -----
    def theme(self) -> Optional[Theme]:
        raw = self.kv.get(self.keys["theme"])
        try:
            return Theme(raw) if raw else None
        except ValueError:
            logger.info("Ignoring unknown theme %r", raw)
            return None

    def set_theme(self, theme: Theme):
        self.kv.set(self.keys["theme"], theme.value)

    # ----- label -----
    def label(self) -> Optional[str]:
        raw = self.kv.get(self.keys["label"])
        return raw.strip() if raw and raw.strip() else None

    def set_label(self, label: str):
        label = label.strip()
        if not label:
            raise ValueError("label must not be empty")
        self.kv.set(self.keys["label"], label)

    # ----- dates (countdown) -----
    def _date(self, name) -> Optional[date]:
        key = self.keys.get(name)
        if key is None:
            return None
        raw = self.kv.get(key)
        d = try_parse_date(raw) if raw else None
        if raw and d is None:
            logger.info("Ignoring malformed %s %r", name, raw)
        return d

    def target_date(self) -> Optional[date]:
        return self._date("target_date")

    def anchor_date(self) -> Optional[date]:
        return self._date("anchor_date")

    def set_target_date(self, target: date, today: date):
        """Store the target and start counting from `today`."""
        self.kv.set(self.keys["target_date"], format_date(target))
        self.kv.set(self.keys["anchor_date"], format_date(today))

    # ----- completions (habit) -----
    def completions(self) -> FrozenSet[str]:
        key = self.keys.get("dates")
        return decode_completions(self.kv.get(key)) if key else frozenset()

    def set_completions(self, completions):
        self.kv.set(self.keys["dates"], encode_completions(completions))

    def reset_completions(self):
        self.set_completions(frozenset())

    # ----- whole config -----
    def load_config(self) -> Optional[TrackerConfig]:
        theme = self.theme()
        label = self.label()
        if theme is None or label is None:
            return None
        return TrackerConfig(theme=theme, label=label,
                             anchor_date=self.anchor_date(), target_date=self.target_date())

    def reset(self):
        # every key this tracker ever wrote, including ones no longer in KEYS
        for key in self.kv.keys(f"{self.kind.value}."):
            self.kv.delete(key)
