"""
Textual rendering of a GridSession.

GridView lays rows out top to bottom with a one-cell divider between
rows, and panels left to right with a one-cell divider between panels.
Sizes are applied as fr units so the percentages share whatever space
the dividers leave.

Dragging: a Divider captures the mouse on press, so moves and the final
release reach it even when the pointer leaves the divider. It reports
them to GridView as messages; GridView feeds them to the session using
screen coordinates, which stay stable while the layout shifts underneath.
"""

import logging
from typing import List, Optional, Tuple

from rich.markup import escape
from textual import events
from textual.app import ComposeResult
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Label, Static

from ..grid.content import ContentHandle
from ..grid.model import Grid, Panel
from ..grid.resize import ContainerSize, DividerTarget, PanelDivider, Point, RowDivider
from ..grid.session import GridSession
from .content_view import ContentView

logger = logging.getLogger(__name__)


class Divider(Static):
    """Draggable boundary between two rows or two panels."""

    DEFAULT_CSS = """
    Divider {
        background: $panel;
    }
    Divider.-row {
        height: 1;
        width: 100%;
    }
    Divider.-panel {
        width: 1;
        height: 100%;
    }
    Divider:hover, Divider.-dragging {
        background: $accent;
    }
    """

    class Pressed(Message):
        """Mouse went down on a divider."""

        def __init__(self, target: DividerTarget, point: Point) -> None:
            self.target = target
            self.point = point
            super().__init__()

    class Dragged(Message):
        """Mouse moved while a divider holds the capture."""

        def __init__(self, point: Point) -> None:
            self.point = point
            super().__init__()

    class Released(Message):
        """Mouse went up, or the capture was lost."""

        def __init__(self, forced: bool = False) -> None:
            self.forced = forced
            super().__init__()

    def __init__(self, target: DividerTarget) -> None:
        axis = "-row" if isinstance(target, RowDivider) else "-panel"
        super().__init__("", id=target.divider_id, classes=axis)
        self.target = target
        self.dragging = False

    def on_mouse_down(self, event: events.MouseDown) -> None:
        event.stop()
        self.dragging = True
        self.add_class("-dragging")
        self.capture_mouse()
        self.post_message(self.Pressed(self.target, Point(event.screen_x, event.screen_y)))

    def on_mouse_move(self, event: events.MouseMove) -> None:
        if not self.dragging:
            return
        event.stop()
        self.post_message(self.Dragged(Point(event.screen_x, event.screen_y)))

    def on_mouse_up(self, event: events.MouseUp) -> None:
        if not self.dragging:
            return
        event.stop()
        self._finish(forced=False)
        self.release_mouse()

    def on_mouse_release(self, event: events.MouseRelease) -> None:
        # Capture taken away before we saw the button go up
        if self.dragging:
            self._finish(forced=True)

    def _finish(self, forced: bool) -> None:
        self.dragging = False
        self.remove_class("-dragging")
        self.post_message(self.Released(forced=forced))


class PanelView(Widget):
    """One panel: a title line and its content."""

    DEFAULT_CSS = """
    PanelView {
        height: 100%;
        border: round $panel-lighten-2;
        padding: 0 1;
    }
    PanelView.-selected {
        border: round $accent;
    }
    PanelView .panel-title {
        width: 100%;
        color: $text-muted;
    }
    """

    class Selected(Message):
        """A panel was clicked."""

        def __init__(self, panel_id: int) -> None:
            self.panel_id = panel_id
            super().__init__()

    def __init__(self, panel: Panel, selected: bool = False) -> None:
        super().__init__(id=f"panel-{panel.id}", classes="-selected" if selected else "")
        self.panel = panel

    def compose(self) -> ComposeResult:
        content: Optional[ContentHandle] = self.panel.content
        title = content.name if content is not None else "empty"
        yield Label(f"#{self.panel.id}  {escape(title)}", classes="panel-title")
        yield ContentView(content)

    def on_click(self, event: events.Click) -> None:
        self.post_message(self.Selected(self.panel.id))


class RowView(Widget):
    """Horizontal band holding panels and the dividers between them."""

    DEFAULT_CSS = """
    RowView {
        layout: horizontal;
        width: 100%;
    }
    """


class GridView(Widget):
    """Renders a GridSession and drives it from mouse input."""

    DEFAULT_CSS = """
    GridView {
        layout: vertical;
        height: 1fr;
        width: 100%;
    }
    """

    selected_panel_id: reactive[Optional[int]] = reactive(None)

    class LayoutChanged(Message):
        """The session's grid changed structurally or in size."""

        def __init__(self, grid: Grid) -> None:
            self.grid = grid
            super().__init__()

    def __init__(self, session: Optional[GridSession] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.session = session or GridSession()
        first = next(self.session.grid.iter_panels(), None)
        self.set_reactive(GridView.selected_panel_id, first[2].id if first else None)

    @property
    def grid(self) -> Grid:
        return self.session.grid

    def compose(self) -> ComposeResult:
        rows = self.grid.rows
        for row_index, row in enumerate(rows):
            row_view = RowView(id=f"row-{row.id}")
            row_view.styles.height = f"{row.height}fr"
            with row_view:
                for panel_index, panel in enumerate(row.panels):
                    panel_view = PanelView(panel, selected=panel.id == self.selected_panel_id)
                    panel_view.styles.width = f"{panel.width}fr"
                    yield panel_view
                    if panel_index < row.panel_count - 1:
                        yield Divider(PanelDivider(row_index, panel_index))
            if row_index < len(rows) - 1:
                yield Divider(RowDivider(row_index))

    # -------------------------------------------------------------------------
    # Selection
    # -------------------------------------------------------------------------

    def selected_location(self) -> Optional[Tuple[int, int]]:
        """(row_index, panel_index) of the selected panel, if it still exists."""
        if self.selected_panel_id is None:
            return None
        return self.grid.find_panel(self.selected_panel_id)

    def watch_selected_panel_id(self, old: Optional[int], new: Optional[int]) -> None:
        for panel_view in self.query(PanelView):
            panel_view.set_class(panel_view.panel.id == new, "-selected")

    def select_offset(self, offset: int) -> None:
        """Move the selection forward/backward through panels in reading order."""
        panel_ids: List[int] = [panel.id for _, _, panel in self.grid.iter_panels()]
        if not panel_ids:
            return
        if self.selected_panel_id in panel_ids:
            index = (panel_ids.index(self.selected_panel_id) + offset) % len(panel_ids)
        else:
            index = 0
        self.selected_panel_id = panel_ids[index]

    def _ensure_selection(self) -> None:
        if self.selected_location() is None:
            first = next(self.grid.iter_panels(), None)
            self.selected_panel_id = first[2].id if first else None

    def on_panel_view_selected(self, message: PanelView.Selected) -> None:
        self.selected_panel_id = message.panel_id

    # -------------------------------------------------------------------------
    # Rendering updates
    # -------------------------------------------------------------------------

    async def rebuild(self) -> None:
        """Recompose after a structural or content change."""
        self._ensure_selection()
        await self.recompose()
        self.post_message(self.LayoutChanged(self.grid))

    def apply_sizes(self) -> None:
        """Push the grid's current percentages onto the existing widgets."""
        for row in self.grid.rows:
            self.query_one(f"#row-{row.id}", RowView).styles.height = f"{row.height}fr"
            for panel in row.panels:
                self.query_one(f"#panel-{panel.id}", PanelView).styles.width = f"{panel.width}fr"

    # -------------------------------------------------------------------------
    # Dragging
    # -------------------------------------------------------------------------

    def _grid_container_size(self) -> ContainerSize:
        return ContainerSize(self.size.width, self.size.height)

    def begin_drag(self, target: DividerTarget, point: Point) -> bool:
        return self.session.press(target, point)

    def drag_to(self, point: Point) -> None:
        before = self.grid
        after = self.session.move(point, self._grid_container_size())
        if after is not before:
            self.apply_sizes()
            self.post_message(self.LayoutChanged(after))

    def end_drag(self) -> None:
        self.session.release()

    def cancel_drag(self, reason: str) -> None:
        if self.session.force_release(reason):
            for divider in self.query(Divider):
                if divider.dragging:
                    divider.dragging = False
                    divider.remove_class("-dragging")
                    divider.release_mouse()

    def on_divider_pressed(self, message: Divider.Pressed) -> None:
        message.stop()
        self.begin_drag(message.target, message.point)

    def on_divider_dragged(self, message: Divider.Dragged) -> None:
        message.stop()
        self.drag_to(message.point)

    def on_divider_released(self, message: Divider.Released) -> None:
        message.stop()
        if message.forced:
            self.cancel_drag("mouse capture lost")
        else:
            self.end_drag()
