from app_utils.grid import build_cells, compute_layout
from app_utils.progress import compute_progress


def countdown_grid(anchor, target, today, widget):
    progress = compute_progress(anchor, target, today)
    spec = compute_layout(progress.total_cells, widget.rows, widget.widget_width,
                          widget.padding, widget.spacing)
    filled = progress.filled_cells
    return progress, spec, build_cells(spec, lambda idx: idx < filled)
