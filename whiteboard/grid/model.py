"""
Grid data model.

A grid is an ordered tuple of rows (top to bottom); each row is an ordered
tuple of panels (left to right). Sizes are percentages of the parent axis:
row heights sum to 100 across the grid, panel widths sum to 100 within a
row. All three types are frozen, so `==` is deep structural equality and
every change produces a new value.
"""

import itertools
import threading
from dataclasses import dataclass, field, replace
from typing import Any, Iterator, List, Optional, Tuple

from ..config.constants import (
    DEFAULT_PANELS_PER_ROW,
    DEFAULT_ROW_COUNT,
    MAX_PANELS_PER_ROW,
    MAX_ROWS,
    MIN_SIZE_PCT,
    SIZE_TOLERANCE,
)


class IdGenerator:
    """Monotonic id source for rows and panels.

    Ids are never reused for the lifetime of the generator, so widgets
    keyed by id can't collide even when several are created at once.
    """

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def __call__(self) -> int:
        with self._lock:
            return next(self._counter)


# Shared by every grid built without an explicit generator
default_ids = IdGenerator()


@dataclass(frozen=True)
class Panel:
    """A cell within a row.

    Attributes:
        id: Session-unique identifier
        width: Percentage of the row's width
        content: Opaque handle owned by the host (None when empty)
    """

    id: int
    width: float
    content: Any = None

    @property
    def is_empty(self) -> bool:
        return self.content is None


@dataclass(frozen=True)
class Row:
    """A horizontal band of panels.

    Attributes:
        id: Session-unique identifier
        height: Percentage of the grid's height
        panels: Panels in render order
    """

    id: int
    height: float
    panels: Tuple[Panel, ...] = field(default_factory=tuple)

    @property
    def panel_count(self) -> int:
        return len(self.panels)

    @property
    def can_add_panel(self) -> bool:
        return self.panel_count < MAX_PANELS_PER_ROW

    @property
    def can_remove_panel(self) -> bool:
        return self.panel_count > 1


@dataclass(frozen=True)
class Grid:
    """The full layout: rows in render order."""

    rows: Tuple[Row, ...] = field(default_factory=tuple)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def can_add_row(self) -> bool:
        return self.row_count < MAX_ROWS

    @property
    def can_remove_row(self) -> bool:
        return self.row_count > 1

    def iter_panels(self) -> Iterator[Tuple[int, int, Panel]]:
        """Yield (row_index, panel_index, panel) for every panel."""
        for row_index, row in enumerate(self.rows):
            for panel_index, panel in enumerate(row.panels):
                yield row_index, panel_index, panel

    def find_panel(self, panel_id: int) -> Optional[Tuple[int, int]]:
        """Locate a panel by id.

        Returns:
            (row_index, panel_index) or None if no panel has that id
        """
        for row_index, panel_index, panel in self.iter_panels():
            if panel.id == panel_id:
                return row_index, panel_index
        return None

    def heights(self) -> List[float]:
        return [row.height for row in self.rows]

    def widths(self, row_index: int) -> List[float]:
        return [panel.width for panel in self.rows[row_index].panels]


def normalize_row(row: Row) -> Row:
    """Give every panel in the row an equal share of its width."""
    if not row.panels:
        return row
    share = 100 / len(row.panels)
    return replace(row, panels=tuple(replace(p, width=share) for p in row.panels))


def normalize_grid(grid: Grid) -> Grid:
    """Give every row an equal share of the grid's height."""
    if not grid.rows:
        return grid
    share = 100 / len(grid.rows)
    return replace(grid, rows=tuple(replace(r, height=share) for r in grid.rows))


def new_panel(ids: IdGenerator = default_ids, width: float = 100.0) -> Panel:
    """Create an empty panel with a fresh id."""
    return Panel(id=ids(), width=width)


def new_row(
    ids: IdGenerator = default_ids,
    height: float = 100.0,
    panel_count: int = DEFAULT_PANELS_PER_ROW,
) -> Row:
    """Create a row of empty, equally sized panels."""
    row = Row(id=ids(), height=height, panels=tuple(new_panel(ids) for _ in range(panel_count)))
    return normalize_row(row)


def default_grid(ids: IdGenerator = default_ids) -> Grid:
    """The starting layout: 2 rows of 2 panels, all 50/50."""
    grid = Grid(rows=tuple(new_row(ids) for _ in range(DEFAULT_ROW_COUNT)))
    return normalize_grid(grid)


def check_grid(grid: Grid) -> List[str]:
    """Validate a grid against the layout invariants.

    Returns:
        List of violation messages (empty if valid)
    """
    errors: List[str] = []

    if not 1 <= grid.row_count <= MAX_ROWS:
        errors.append(f"Grid has {grid.row_count} rows, expected 1-{MAX_ROWS}")

    total_height = sum(grid.heights())
    if grid.rows and abs(total_height - 100) > SIZE_TOLERANCE:
        errors.append(f"Row heights sum to {total_height}, expected 100")

    seen_ids = set()
    for row_index, row in enumerate(grid.rows):
        if row.id in seen_ids:
            errors.append(f"Duplicate id: {row.id}")
        seen_ids.add(row.id)

        if not 0 < row.height <= 100:
            errors.append(f"Row {row_index} height {row.height} outside (0, 100]")
        if grid.row_count > 1 and row.height < MIN_SIZE_PCT - SIZE_TOLERANCE:
            errors.append(f"Row {row_index} height {row.height} below {MIN_SIZE_PCT}")

        if not 1 <= row.panel_count <= MAX_PANELS_PER_ROW:
            errors.append(
                f"Row {row_index} has {row.panel_count} panels, "
                f"expected 1-{MAX_PANELS_PER_ROW}"
            )
            continue

        total_width = sum(p.width for p in row.panels)
        if abs(total_width - 100) > SIZE_TOLERANCE:
            errors.append(f"Row {row_index} widths sum to {total_width}, expected 100")

        for panel_index, panel in enumerate(row.panels):
            if panel.id in seen_ids:
                errors.append(f"Duplicate id: {panel.id}")
            seen_ids.add(panel.id)

            if not 0 < panel.width <= 100:
                errors.append(
                    f"Panel {row_index}.{panel_index} width {panel.width} outside (0, 100]"
                )
            if row.panel_count > 1 and panel.width < MIN_SIZE_PCT - SIZE_TOLERANCE:
                errors.append(
                    f"Panel {row_index}.{panel_index} width {panel.width} below {MIN_SIZE_PCT}"
                )

    return errors


def is_valid(grid: Grid) -> bool:
    return not check_grid(grid)
