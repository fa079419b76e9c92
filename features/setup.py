"""
Prompt-then-persist flows.

Each step asks the user through a `Prompter` and writes through the
`SettingsStore` only once it has a usable answer. A `None` answer means the
prompt was dismissed: the flow stops and nothing further is written.
"""

import logging
from enum import Enum
from typing import List, Optional, Protocol

from app_utils.dates import try_parse_date
from app_utils.settings import Theme, TrackerKind
from app_utils.themes import THEMES, theme_option
from features.habits import check_in

logger = logging.getLogger(__name__)

THEME_OPTIONS = [theme_option("dark"), theme_option("light")]

CHECK_IN = "Check-in"
SETTINGS = "Settings"
CHANGE_THEME = "Change Theme"
CHANGE_TITLE = "Change Title"
CHANGE_HABIT = "Change Habit"
CHANGE_TARGET = "Change Target Date"
RESET_DATA = "Reset Data"

TARGET_PROMPT = "Target Date (YYYY-MM-DD)"
TARGET_HINT = "Use YYYY-MM-DD for the target date, e.g. 2025-12-31. Nothing was saved."

SETTINGS_ACTIONS = {
    TrackerKind.COUNTDOWN: [CHANGE_THEME, CHANGE_TITLE, CHANGE_TARGET],
    TrackerKind.HABIT: [CHANGE_THEME, CHANGE_HABIT, RESET_DATA],
}

LABEL_PROMPTS = {
    TrackerKind.COUNTDOWN: ("Widget Title", "e.g. My Project"),
    TrackerKind.HABIT: ("What do you want to track?", "habit name"),
}


class Prompter(Protocol):
    def choose(self, title: str, message: Optional[str], options: List[str]) -> Optional[str]:
        ...

    def ask(self, title: str, placeholder: str) -> Optional[str]:
        ...


class SetupState(Enum):
    UNCONFIGURED = "unconfigured"
    AWAITING_CHOICE = "awaiting_choice"
    CONFIGURED = "configured"


def theme_from_option(option: str) -> Optional[Theme]:
    for name in THEMES:
        if option == theme_option(name) or option == name:
            return Theme(name)
    return None


def clean_label(kind: TrackerKind, text: str) -> str:
    text = text.strip()
    return text.lower() if kind is TrackerKind.HABIT else text


def prompt_theme(prompter: Prompter) -> Optional[Theme]:
    choice = prompter.choose("Choose Theme", "Select dark or light mode", THEME_OPTIONS)
    return theme_from_option(choice) if choice else None


def prompt_label(store, prompter: Prompter) -> Optional[str]:
    title, placeholder = LABEL_PROMPTS[store.kind]
    text = prompter.ask(title, placeholder)
    if not text or not text.strip():
        return None
    return clean_label(store.kind, text)


def target_rejected(text) -> bool:
    """True for submitted text that is not a YYYY-MM-DD day."""
    return bool(text and text.strip()) and try_parse_date(text.strip()) is None


def prompt_target_date(prompter: Prompter):
    text = prompter.ask(TARGET_PROMPT, "2025-12-31")
    if not text:
        return None
    target = try_parse_date(text.strip())
    if target is None:
        logger.info("Rejected target date %r", text)
    return target


def ensure_theme(store, prompter: Prompter) -> Optional[Theme]:
    theme = store.theme()
    if theme is None:
        theme = prompt_theme(prompter)
        if theme is not None:
            store.set_theme(theme)
    return theme


def ensure_label(store, prompter: Prompter) -> Optional[str]:
    label = store.label()
    if label is None:
        label = prompt_label(store, prompter)
        if label is not None:
            store.set_label(label)
    return label


def ensure_target_date(store, prompter: Prompter, today):
    target = store.target_date()
    if target is None or store.anchor_date() is None:
        target = prompt_target_date(prompter)
        if target is not None:
            store.set_target_date(target, today)
    return target


def setup_state(store) -> SetupState:
    have = [store.theme() is not None, store.label() is not None]
    if store.kind is TrackerKind.COUNTDOWN:
        have.append(store.target_date() is not None and store.anchor_date() is not None)
    if all(have):
        return SetupState.CONFIGURED
    if any(have):
        return SetupState.AWAITING_CHOICE
    return SetupState.UNCONFIGURED


def run_setup(store, prompter: Prompter, today) -> SetupState:
    """Ask for whatever is still missing, in order, stopping at the first dismissal."""
    if ensure_theme(store, prompter) is None:
        return setup_state(store)
    if ensure_label(store, prompter) is None:
        return setup_state(store)
    if store.kind is TrackerKind.COUNTDOWN:
        ensure_target_date(store, prompter, today)
    return setup_state(store)


def apply_setting(store, prompter: Prompter, action: str, today) -> bool:
    """Run one settings action; True when something was written."""
    if action == CHANGE_THEME:
        theme = prompt_theme(prompter)
        if theme is None:
            return False
        store.set_theme(theme)
    elif action in (CHANGE_TITLE, CHANGE_HABIT):
        label = prompt_label(store, prompter)
        if label is None:
            return False
        store.set_label(label)
    elif action == CHANGE_TARGET and store.kind is TrackerKind.COUNTDOWN:
        target = prompt_target_date(prompter)
        if target is None:
            return False
        store.set_target_date(target, today)
    elif action == RESET_DATA and store.kind is TrackerKind.HABIT:
        store.reset_completions()
    else:
        return False
    logger.info("%s: %s", store.kind.value, action)
    return True


def run_settings(store, prompter: Prompter, today) -> bool:
    action = prompter.choose(SETTINGS, None, SETTINGS_ACTIONS[store.kind])
    if not action:
        return False
    return apply_setting(store, prompter, action, today)


def run_habit_menu(store, prompter: Prompter, today) -> Optional[str]:
    """Main menu of the habit tracker; returns the check-in message, if any."""
    action = prompter.choose(store.label() or "habit", None, [CHECK_IN, SETTINGS])
    if action == CHECK_IN:
        return check_in(store, today)
    if action == SETTINGS:
        run_settings(store, prompter, today)
    return None
