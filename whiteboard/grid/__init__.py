"""
Grid layout engine.

Rows of panels with percentage sizes, the structural edits that keep them
valid, and the drag state machine that resizes neighbours. Nothing here
renders, reads files or persists anything.

Example usage:
    from whiteboard.grid import GridSession, Point, ContainerSize, PanelDivider

    session = GridSession()
    session.add_panel(0, "after")
    session.press(PanelDivider(0, 0), Point(40, 5))
    session.move(Point(46, 5), ContainerSize(120, 40))
    session.release()
"""

from .content import (
    ContentHandle,
    ContentKind,
    blank_content,
    content_from_path,
)
from .model import (
    Grid,
    IdGenerator,
    Panel,
    Row,
    check_grid,
    default_grid,
    is_valid,
    normalize_grid,
    normalize_row,
)
from .mutator import LayoutMutator, Side
from .resize import (
    ContainerSize,
    DraggingPanel,
    DraggingRow,
    Idle,
    PanelDivider,
    Point,
    ResizeController,
    RowDivider,
    parse_divider_id,
)
from .session import GridSession

__all__ = [
    # Model
    "Grid",
    "Row",
    "Panel",
    "IdGenerator",
    "default_grid",
    "normalize_row",
    "normalize_grid",
    "check_grid",
    "is_valid",
    # Mutations
    "LayoutMutator",
    "Side",
    # Resize
    "ResizeController",
    "Idle",
    "DraggingRow",
    "DraggingPanel",
    "RowDivider",
    "PanelDivider",
    "Point",
    "ContainerSize",
    "parse_divider_id",
    # Session
    "GridSession",
    # Content
    "ContentHandle",
    "ContentKind",
    "content_from_path",
    "blank_content",
]
