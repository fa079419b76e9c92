import math
from dataclasses import dataclass
from typing import Callable, List, Tuple


class GridTooDense(ValueError):
    def __init__(self, cell_size_px, cols_per_row):
        super().__init__(f"Grid too dense: {cols_per_row} columns leave {cell_size_px}px per cell")
        self.cell_size_px = cell_size_px
        self.cols_per_row = cols_per_row


@dataclass(frozen=True)
class GridSpec:
    total_cells: int
    rows: int
    cols_per_row: int
    last_row_count: int
    cell_size_px: int

    @property
    def rows_used(self) -> int:
        if self.total_cells == 0:
            return 0
        return math.ceil(self.total_cells / self.cols_per_row)

    @property
    def row_counts(self) -> Tuple[int, ...]:
        n = self.rows_used
        if n == 0:
            return ()
        return (self.cols_per_row,) * (n - 1) + (self.last_row_count,)


@dataclass(frozen=True)
class Cell:
    index: int
    row: int
    col: int
    filled: bool


def compute_layout(total_cells: int, rows: int, container_width: int,
                   padding: int, spacing: int) -> GridSpec:
    if total_cells < 0:
        raise ValueError(f"total_cells must be >= 0, got {total_cells}")
    if rows < 1:
        raise ValueError(f"rows must be >= 1, got {rows}")
    if total_cells == 0:
        return GridSpec(total_cells=0, rows=rows, cols_per_row=0, last_row_count=0, cell_size_px=0)

    cols = math.ceil(total_cells / rows)
    last = total_cells - (rows - 1) * cols
    if last < 1:
        # small totals (2 or 4 over three rows) cannot fill every row
        rows_used = math.ceil(total_cells / cols)
        last = total_cells - (rows_used - 1) * cols

    size = math.floor((container_width - 2 * padding - (cols - 1) * spacing) / cols)
    if size < 1:
        raise GridTooDense(size, cols)
    return GridSpec(total_cells=total_cells, rows=rows, cols_per_row=cols,
                    last_row_count=last, cell_size_px=size)


def build_cells(spec: GridSpec, is_filled: Callable[[int], bool]) -> List[List[Cell]]:
    """Lay out cells row-major; `is_filled` gets the 0-based flat index."""
    grid = []
    for r, count in enumerate(spec.row_counts):
        row = []
        for c in range(count):
            idx = r * spec.cols_per_row + c
            row.append(Cell(index=idx, row=r, col=c, filled=bool(is_filled(idx))))
        grid.append(row)
    return grid
