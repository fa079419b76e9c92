from dataclasses import dataclass

from app_utils.dates import days_between, month_bounds


@dataclass(frozen=True)
class Progress:
    total_cells: int
    elapsed: int
    remaining: int

    @property
    def filled_cells(self) -> int:
        # elapsed keeps counting past the end date; drawing never does
        return min(self.elapsed, self.total_cells)


def compute_progress(anchor, end, today) -> Progress:
    total = max(1, days_between(anchor, end) + 1)
    elapsed = days_between(anchor, today)
    return Progress(total_cells=total, elapsed=elapsed, remaining=max(0, total - elapsed))


def compute_month_progress(today) -> Progress:
    first, last = month_bounds(today)
    return compute_progress(first, last, today)


def countdown_label(progress: Progress) -> str:
    return f"D-{progress.remaining}"
