"""
Grid session: the one grid a host is showing, plus the drag in progress.

Hosts talk only to GridSession. It routes structural commands to the
LayoutMutator and pointer events to the ResizeController, and keeps the
current Grid value between calls. Structural commands are refused while a
drag is active; they return the grid unchanged like any other refused
request.
"""

import logging
import shlex
from dataclasses import replace
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..exceptions import CommandParseError
from .model import Grid, IdGenerator, default_grid
from .mutator import LayoutMutator, Side, SideLike
from .resize import ContainerSize, DividerTarget, Point, ResizeController

logger = logging.getLogger(__name__)


class GridSession:
    """Owns the current grid for one host.

    Every method that can change the layout returns the grid after the
    call. A returned value that `is` the previous grid means nothing
    changed.
    """

    def __init__(self, grid: Optional[Grid] = None, ids: Optional[IdGenerator] = None) -> None:
        self.ids = ids or IdGenerator()
        self.mutator = LayoutMutator(self.ids)
        self.controller = ResizeController()
        self._grid = grid if grid is not None else default_grid(self.ids)

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def is_dragging(self) -> bool:
        return self.controller.is_dragging

    # -------------------------------------------------------------------------
    # Structural commands
    # -------------------------------------------------------------------------

    def _structural(self, name: str, operation: Callable[[Grid], Grid]) -> Grid:
        if self.controller.is_dragging:
            logger.debug(f"{name} ignored: drag in progress ({self.controller.state})")
            return self._grid
        self._grid = operation(self._grid)
        return self._grid

    def add_row(self, anchor_index: int, side: SideLike = Side.AFTER) -> Grid:
        return self._structural("add_row", lambda g: self.mutator.add_row(g, anchor_index, side))

    def remove_row(self, row_index: int) -> Grid:
        return self._structural("remove_row", lambda g: self.mutator.remove_row(g, row_index))

    def add_panel(self, row_index: int, side: SideLike = Side.AFTER) -> Grid:
        return self._structural("add_panel", lambda g: self.mutator.add_panel(g, row_index, side))

    def remove_panel(self, row_index: int, panel_index: int) -> Grid:
        return self._structural(
            "remove_panel", lambda g: self.mutator.remove_panel(g, row_index, panel_index)
        )

    def reset_layout(self) -> Grid:
        return self._structural("reset_layout", self.mutator.reset_layout)

    def apply_command(self, command: str) -> Grid:
        """Run a command written as text, e.g. "add-panel 0 after".

        Commands:
            add-row <row> [before|after]
            remove-row <row>
            add-panel <row> [before|after]
            remove-panel <row> <panel>
            reset

        Raises:
            CommandParseError: If the command is unknown or malformed
        """
        try:
            parts = shlex.split(command)
        except ValueError as e:
            raise CommandParseError(f"Cannot parse command: {e}", command=command) from e
        if not parts:
            raise CommandParseError("Empty command", command=command)

        name, args = parts[0].lower().replace("_", "-"), parts[1:]
        arity = _COMMANDS.get(name)
        if arity is None:
            raise CommandParseError(
                f"Unknown command '{name}'. Expected one of: {', '.join(sorted(_COMMANDS))}",
                command=command,
            )

        int_count, takes_side = arity
        max_args = int_count + (1 if takes_side else 0)
        if not int_count <= len(args) <= max_args:
            raise CommandParseError(f"'{name}' takes {int_count} index argument(s)", command=command)

        try:
            indices = [int(a) for a in args[:int_count]]
        except ValueError as e:
            raise CommandParseError(f"Indices must be integers: {e}", command=command) from e

        side: SideLike = Side.AFTER
        if takes_side and len(args) > int_count:
            coerced = Side.coerce(args[int_count])
            if coerced is None:
                raise CommandParseError(f"Unknown side '{args[int_count]}'", command=command)
            side = coerced

        if name == "add-row":
            return self.add_row(indices[0], side)
        if name == "remove-row":
            return self.remove_row(indices[0])
        if name == "add-panel":
            return self.add_panel(indices[0], side)
        if name == "remove-panel":
            return self.remove_panel(indices[0], indices[1])
        return self.reset_layout()

    def apply_commands(self, commands: List[str]) -> Grid:
        for command in commands:
            self.apply_command(command)
        return self._grid

    # -------------------------------------------------------------------------
    # Pointer events
    # -------------------------------------------------------------------------

    def press(self, target: Optional[DividerTarget], point: Point) -> bool:
        return self.controller.press(self._grid, target, point)

    def move(self, point: Point, container: ContainerSize) -> Grid:
        self._grid = self.controller.move(self._grid, point, container)
        return self._grid

    def release(self) -> None:
        self.controller.release()

    def force_release(self, reason: str) -> bool:
        return self.controller.force_release(reason)

    # -------------------------------------------------------------------------
    # Content slot
    # -------------------------------------------------------------------------

    def get_content(self, panel_id: int) -> Any:
        location = self._grid.find_panel(panel_id)
        if location is None:
            return None
        row_index, panel_index = location
        return self._grid.rows[row_index].panels[panel_index].content

    def set_content(self, panel_id: int, content: Any) -> Grid:
        """Store a content handle in a panel; unknown ids are ignored."""
        location = self._grid.find_panel(panel_id)
        if location is None:
            logger.debug(f"set_content ignored: no panel {panel_id}")
            return self._grid

        row_index, panel_index = location
        row = self._grid.rows[row_index]
        panels = list(row.panels)
        panels[panel_index] = replace(panels[panel_index], content=content)
        rows = list(self._grid.rows)
        rows[row_index] = replace(row, panels=tuple(panels))
        self._grid = replace(self._grid, rows=tuple(rows))
        return self._grid

    def clear_content(self, panel_id: int) -> Grid:
        return self.set_content(panel_id, None)


# name -> (number of integer indices, accepts a side)
_COMMANDS: Dict[str, Tuple[int, bool]] = {
    "add-row": (1, True),
    "remove-row": (1, False),
    "add-panel": (1, True),
    "remove-panel": (2, False),
    "reset": (0, False),
}
