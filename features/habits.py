from app_utils.dates import format_date, month_days, parse_date
from app_utils.grid import build_cells, compute_layout

ADDED_MESSAGE = "✅ Added today's entry"
REMOVED_MESSAGE = "❌ Removed today's entry"


def toggle_completion(completions, day):
    """Return (new_set, was_removed); the input set is left alone."""
    # strings must already be day keys; InvalidDateError propagates
    key = format_date(parse_date(day)) if isinstance(day, str) else format_date(day)
    current = frozenset(completions)
    if key in current:
        return current - {key}, True
    return current | {key}, False


def check_in(store, today) -> str:
    completions, was_removed = toggle_completion(store.completions(), today)
    store.set_completions(completions)
    return REMOVED_MESSAGE if was_removed else ADDED_MESSAGE


def habit_grid(completions, today, widget):
    # one cell per day of the current month, cell 0 is the 1st
    days = [format_date(d) for d in month_days(today)]
    spec = compute_layout(len(days), widget.rows, widget.widget_width, widget.padding, widget.spacing)
    return spec, build_cells(spec, lambda idx: days[idx] in completions)
