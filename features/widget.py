"""
Widget output from stored state.

Nothing here prompts; this is what the background/display mode draws. Missing values
fall back to the light theme and a generic label.
"""

import logging

from app_utils.grid import GridTooDense
from app_utils.plots import save_widget_png
from app_utils.progress import countdown_label
from app_utils.render import RenderMode, build_widget, to_html
from app_utils.settings import DEFAULT_LABELS, Theme, TrackerKind
from features.countdown import countdown_grid
from features.habits import habit_grid

logger = logging.getLogger(__name__)


def build_tracker_widget(store, today, widget):
    """Widget tree for the stored tracker, or None when there is nothing to draw.

    Raises GridTooDense when the grid does not fit the widget width.
    """
    theme = (store.theme() or Theme.LIGHT).value
    label = store.label() or DEFAULT_LABELS[store.kind]

    if store.kind is TrackerKind.COUNTDOWN:
        target, anchor = store.target_date(), store.anchor_date()
        if target is None or anchor is None:
            return None
        progress, spec, cells = countdown_grid(anchor, target, today, widget)
        return build_widget(theme, label, countdown_label(progress), cells, spec, widget, "countdown")

    spec, cells = habit_grid(store.completions(), today, widget)
    return build_widget(theme, label, None, cells, spec, widget, "habit")


def render_home_screen(store, today, widget, path):
    """Write the standing home-screen PNG; returns the path or None."""
    try:
        tree = build_tracker_widget(store, today, widget)
    except GridTooDense as ex:
        logger.warning("%s widget not rendered: %s", store.kind.value, ex)
        return None
    if tree is None:
        logger.info("%s widget not configured yet, nothing to render", store.kind.value)
        return None
    return save_widget_png(tree, path)


def render(store, today, widget, mode: RenderMode, path=None):
    """HTML for the interactive view, or the PNG path for the home screen."""
    if mode is RenderMode.HOME_SCREEN:
        return render_home_screen(store, today, widget, path)
    tree = build_tracker_widget(store, today, widget)
    return to_html(tree) if tree is not None else None
