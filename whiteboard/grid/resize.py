"""
Divider drag state machine.

A drag moves size between the two siblings on either side of a divider.
The controller holds exactly one state value, so a row drag and a panel
drag can never be active at the same time:

    Idle --press(RowDivider)--> DraggingRow --release--> Idle
    Idle --press(PanelDivider)--> DraggingPanel --release--> Idle

Each move measures the pointer delta from the previous move, converts it
to a percentage of the live container size and applies it only if both
siblings stay at or above MIN_SIZE_PCT. The last pointer position advances
on every move, applied or not, so a rejected move never turns into a jump
later.
"""

import logging
import re
from dataclasses import dataclass, replace
from typing import NamedTuple, Optional, Tuple, Union

from ..config.constants import MIN_SIZE_PCT
from .model import Grid

logger = logging.getLogger(__name__)


class Point(NamedTuple):
    """Pointer position in host coordinates (cells or pixels)."""

    x: float
    y: float


class ContainerSize(NamedTuple):
    """Current size of the grid's bounding box, same units as Point."""

    width: float
    height: float


# =============================================================================
# Divider targets
# =============================================================================


@dataclass(frozen=True)
class RowDivider:
    """The divider below row `row_index`."""

    row_index: int

    @property
    def divider_id(self) -> str:
        return f"row-divider-{self.row_index}"


@dataclass(frozen=True)
class PanelDivider:
    """The divider between panels `panel_index` and `panel_index + 1`."""

    row_index: int
    panel_index: int

    @property
    def divider_id(self) -> str:
        return f"panel-divider-{self.row_index}-{self.panel_index}"


DividerTarget = Union[RowDivider, PanelDivider]

_ROW_DIVIDER_RE = re.compile(r"^row-divider-(\d+)$")
_PANEL_DIVIDER_RE = re.compile(r"^panel-divider-(\d+)-(\d+)$")


def parse_divider_id(divider_id: Optional[str]) -> Optional[DividerTarget]:
    """Turn a divider widget id back into its target.

    Examples:
        >>> parse_divider_id("row-divider-0")
        RowDivider(row_index=0)
        >>> parse_divider_id("panel-divider-1-0")
        PanelDivider(row_index=1, panel_index=0)
    """
    if not divider_id:
        return None
    match = _ROW_DIVIDER_RE.match(divider_id)
    if match:
        return RowDivider(int(match.group(1)))
    match = _PANEL_DIVIDER_RE.match(divider_id)
    if match:
        return PanelDivider(int(match.group(1)), int(match.group(2)))
    return None


# =============================================================================
# States
# =============================================================================


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class DraggingRow:
    row_index: int
    last_y: float


@dataclass(frozen=True)
class DraggingPanel:
    row_index: int
    panel_index: int
    last_x: float


ResizeState = Union[Idle, DraggingRow, DraggingPanel]

IDLE = Idle()


def _transfer(current: float, following: float, delta_pct: float) -> Optional[Tuple[float, float]]:
    """Move delta_pct from `following` to `current` if both stay large enough."""
    new_current = current + delta_pct
    new_following = following - delta_pct
    if new_current >= MIN_SIZE_PCT and new_following >= MIN_SIZE_PCT:
        return new_current, new_following
    return None


class ResizeController:
    """Turns divider press/move/release events into size changes.

    One controller per grid view. It never owns the grid: every call takes
    the current grid and `move` returns the (possibly) updated one.
    """

    def __init__(self) -> None:
        self.state: ResizeState = IDLE

    @property
    def is_idle(self) -> bool:
        return isinstance(self.state, Idle)

    @property
    def is_dragging(self) -> bool:
        return not self.is_idle

    def press(self, grid: Grid, target: Optional[DividerTarget], point: Point) -> bool:
        """Start a drag on a divider.

        Returns:
            True if a drag session started; False if one is already active
            or the target isn't a divider in this grid
        """
        if not self.is_idle:
            logger.debug(f"press on {target} ignored: already in {self.state}")
            return False

        if isinstance(target, RowDivider):
            if 0 <= target.row_index < grid.row_count - 1:
                self.state = DraggingRow(target.row_index, point.y)
                logger.debug(f"Row drag started at divider {target.row_index}")
                return True
        elif isinstance(target, PanelDivider):
            if 0 <= target.row_index < grid.row_count:
                panel_count = grid.rows[target.row_index].panel_count
                if 0 <= target.panel_index < panel_count - 1:
                    self.state = DraggingPanel(target.row_index, target.panel_index, point.x)
                    logger.debug(
                        f"Panel drag started at divider {target.row_index}.{target.panel_index}"
                    )
                    return True

        logger.debug(f"press ignored: {target!r} is not a divider in this grid")
        return False

    def move(self, grid: Grid, point: Point, container: ContainerSize) -> Grid:
        """Apply one pointer movement to the grid.

        Args:
            grid: Current grid
            point: Pointer position, wherever it is on screen
            container: Live size of the grid container

        Returns:
            The resized grid, or the input when idle or the move is rejected
        """
        state = self.state

        if isinstance(state, DraggingRow):
            delta = point.y - state.last_y
            self.state = replace(state, last_y=point.y)
            return self._resize_rows(grid, state.row_index, delta, container.height)

        if isinstance(state, DraggingPanel):
            delta = point.x - state.last_x
            self.state = replace(state, last_x=point.x)
            return self._resize_panels(
                grid, state.row_index, state.panel_index, delta, container.width
            )

        return grid

    def release(self) -> None:
        """End the drag session, if any."""
        if self.is_dragging:
            logger.debug(f"Drag ended from {self.state}")
        self.state = IDLE

    def force_release(self, reason: str) -> bool:
        """End a drag whose release event was never delivered.

        Hosts call this when they lose focus or mouse capture.

        Returns:
            True if a drag was actually cancelled
        """
        if self.is_idle:
            return False
        logger.info(f"Forcing end of drag {self.state}: {reason}")
        self.state = IDLE
        return True

    def _resize_rows(self, grid: Grid, row_index: int, delta: float, extent: float) -> Grid:
        if extent <= 0 or delta == 0 or row_index + 1 >= grid.row_count:
            return grid

        current, following = grid.rows[row_index], grid.rows[row_index + 1]
        sizes = _transfer(current.height, following.height, 100 * delta / extent)
        if sizes is None:
            return grid

        rows = list(grid.rows)
        rows[row_index] = replace(current, height=sizes[0])
        rows[row_index + 1] = replace(following, height=sizes[1])
        return replace(grid, rows=tuple(rows))

    def _resize_panels(
        self, grid: Grid, row_index: int, panel_index: int, delta: float, extent: float
    ) -> Grid:
        if extent <= 0 or delta == 0 or row_index >= grid.row_count:
            return grid

        row = grid.rows[row_index]
        if panel_index + 1 >= row.panel_count:
            return grid

        current, following = row.panels[panel_index], row.panels[panel_index + 1]
        sizes = _transfer(current.width, following.width, 100 * delta / extent)
        if sizes is None:
            return grid

        panels = list(row.panels)
        panels[panel_index] = replace(current, width=sizes[0])
        panels[panel_index + 1] = replace(following, width=sizes[1])
        rows = list(grid.rows)
        rows[row_index] = replace(row, panels=tuple(panels))
        return replace(grid, rows=tuple(rows))
