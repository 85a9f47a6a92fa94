"""
Structural layout operations.

Every operation takes a Grid and returns a Grid. Requests that would break
a cardinality limit, or that name a row/panel that doesn't exist, return
the input unchanged instead of raising. Insertions and removals always
reset the affected axis to equal shares; custom sizes on that axis are
discarded.
"""

import logging
from dataclasses import replace
from enum import Enum
from typing import Optional, Union

from ..config.constants import MAX_PANELS_PER_ROW, MAX_ROWS
from .model import (
    Grid,
    IdGenerator,
    Row,
    default_ids,
    new_panel,
    new_row,
    normalize_grid,
    normalize_row,
)

logger = logging.getLogger(__name__)


class Side(str, Enum):
    """Where a new row or panel goes relative to its anchor."""

    BEFORE = "before"
    AFTER = "after"

    @classmethod
    def coerce(cls, value: Union["Side", str]) -> Optional["Side"]:
        """Accept a Side or one of its spellings; None if unrecognized.

        "left"/"top" mean before and "right"/"bottom" mean after.
        """
        if isinstance(value, cls):
            return value
        aliases = {
            "before": cls.BEFORE,
            "left": cls.BEFORE,
            "top": cls.BEFORE,
            "above": cls.BEFORE,
            "after": cls.AFTER,
            "right": cls.AFTER,
            "bottom": cls.AFTER,
            "below": cls.AFTER,
        }
        if isinstance(value, str):
            return aliases.get(value.strip().lower())
        return None


SideLike = Union[Side, str]


class LayoutMutator:
    """Applies structural edits to grids.

    Holds the id generator so every row and panel it creates gets an id
    that is unique for the session.
    """

    def __init__(self, ids: Optional[IdGenerator] = None) -> None:
        self.ids = ids or default_ids

    def add_row(self, grid: Grid, anchor_index: int, side: SideLike = Side.AFTER) -> Grid:
        """Insert a row of 2 empty panels next to the anchor row.

        Args:
            grid: Current grid
            anchor_index: Row the new one is placed relative to
            side: Before (above) or after (below) the anchor

        Returns:
            New grid with equal row heights, or the input if the grid is full
        """
        resolved = Side.coerce(side)
        if grid.row_count >= MAX_ROWS:
            logger.debug(f"add_row ignored: grid already has {grid.row_count} rows")
            return grid
        if resolved is None or not 0 <= anchor_index < grid.row_count:
            logger.debug(f"add_row ignored: bad anchor {anchor_index!r} / side {side!r}")
            return grid

        insert_at = anchor_index if resolved is Side.BEFORE else anchor_index + 1
        rows = list(grid.rows)
        rows.insert(insert_at, new_row(self.ids))
        return normalize_grid(replace(grid, rows=tuple(rows)))

    def remove_row(self, grid: Grid, row_index: int) -> Grid:
        """Delete a row; the rest share the height equally."""
        if grid.row_count <= 1:
            logger.debug("remove_row ignored: last row")
            return grid
        if not 0 <= row_index < grid.row_count:
            logger.debug(f"remove_row ignored: no row {row_index!r}")
            return grid

        rows = grid.rows[:row_index] + grid.rows[row_index + 1:]
        return normalize_grid(replace(grid, rows=rows))

    def add_panel(self, grid: Grid, row_index: int, side: SideLike = Side.AFTER) -> Grid:
        """Insert an empty panel at the start (before) or end (after) of a row.

        Only the target row is renormalized; other rows are untouched.
        """
        resolved = Side.coerce(side)
        if resolved is None or not 0 <= row_index < grid.row_count:
            logger.debug(f"add_panel ignored: bad row {row_index!r} / side {side!r}")
            return grid

        row = grid.rows[row_index]
        if row.panel_count >= MAX_PANELS_PER_ROW:
            logger.debug(f"add_panel ignored: row {row_index} already has {row.panel_count} panels")
            return grid

        panel = new_panel(self.ids)
        if resolved is Side.BEFORE:
            panels = (panel,) + row.panels
        else:
            panels = row.panels + (panel,)
        return self._replace_row(grid, row_index, normalize_row(replace(row, panels=panels)))

    def remove_panel(self, grid: Grid, row_index: int, panel_index: int) -> Grid:
        """Delete a panel; the rest of its row share the width equally."""
        if not 0 <= row_index < grid.row_count:
            logger.debug(f"remove_panel ignored: no row {row_index!r}")
            return grid

        row = grid.rows[row_index]
        if row.panel_count <= 1:
            logger.debug(f"remove_panel ignored: row {row_index} has one panel")
            return grid
        if not 0 <= panel_index < row.panel_count:
            logger.debug(f"remove_panel ignored: no panel {row_index}.{panel_index!r}")
            return grid

        panels = row.panels[:panel_index] + row.panels[panel_index + 1:]
        return self._replace_row(grid, row_index, normalize_row(replace(row, panels=panels)))

    def reset_layout(self, grid: Grid) -> Grid:
        """Make every row and every panel within a row equally sized."""
        grid = normalize_grid(grid)
        return replace(grid, rows=tuple(normalize_row(row) for row in grid.rows))

    @staticmethod
    def _replace_row(grid: Grid, row_index: int, row: Row) -> Grid:
        rows = list(grid.rows)
        rows[row_index] = row
        return replace(grid, rows=tuple(rows))


# Module-level conveniences backed by the shared id generator
_mutator = LayoutMutator()

add_row = _mutator.add_row
remove_row = _mutator.remove_row
add_panel = _mutator.add_panel
remove_panel = _mutator.remove_panel
reset_layout = _mutator.reset_layout
