"""
Whiteboard terminal app.

Hosts a GridView and binds keys to the layout commands. Commands act on
the selected panel (click a panel, or move the selection with n/p).
Resizing is mouse-only: drag a divider.
"""

import logging
from typing import Optional

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from ..config.ui_config import get_start_dir, get_theme
from ..exceptions import ContentError
from ..grid.content import ContentKind, blank_content, content_from_path
from ..grid.model import Grid
from ..grid.mutator import Side
from ..grid.session import GridSession
from .grid_view import GridView
from .modals import OpenFileScreen

logger = logging.getLogger(__name__)


class WhiteboardApp(App):
    """Resizable grid of presentation panels."""

    TITLE = "Whiteboard"

    CSS = """
    Screen {
        layout: vertical;
    }
    """

    BINDINGS = [
        Binding("a", "add_panel('after')", "Add panel"),
        Binding("A", "add_panel('before')", "Add panel left", show=False),
        Binding("x", "remove_panel", "Remove panel"),
        Binding("r", "add_row('after')", "Add row"),
        Binding("R", "add_row('before')", "Add row above", show=False),
        Binding("d", "remove_row", "Remove row"),
        Binding("e", "reset_layout", "Reset layout"),
        Binding("o", "open_file", "Open"),
        Binding("w", "new_canvas", "Canvas", show=False),
        Binding("i", "new_code", "Code", show=False),
        Binding("c", "clear_content", "Clear"),
        Binding("n", "select_offset(1)", "Next panel", show=False),
        Binding("p", "select_offset(-1)", "Previous panel", show=False),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, session: Optional[GridSession] = None, theme: Optional[str] = None) -> None:
        super().__init__()
        self.session = session or GridSession()
        self._theme_name = theme

    def compose(self) -> ComposeResult:
        yield Header()
        yield GridView(self.session, id="grid")
        yield Footer()

    def on_mount(self) -> None:
        theme_name = self._theme_name or get_theme()
        if theme_name in self.available_themes:
            self.theme = theme_name
        else:
            logger.warning(f"Unknown theme '{theme_name}', keeping default")

    @property
    def grid_view(self) -> GridView:
        return self.query_one("#grid", GridView)

    async def _after_command(self, before: Grid) -> None:
        if self.session.grid is not before:
            await self.grid_view.rebuild()
        elif self.session.is_dragging:
            self.notify("Finish resizing first", severity="warning")
        else:
            self.bell()

    # -------------------------------------------------------------------------
    # Layout commands
    # -------------------------------------------------------------------------

    async def action_add_panel(self, side: str) -> None:
        location = self.grid_view.selected_location()
        if location is None:
            return
        before = self.session.grid
        self.session.add_panel(location[0], Side.coerce(side) or Side.AFTER)
        await self._after_command(before)

    async def action_remove_panel(self) -> None:
        location = self.grid_view.selected_location()
        if location is None:
            return
        before = self.session.grid
        self.session.remove_panel(*location)
        await self._after_command(before)

    async def action_add_row(self, side: str) -> None:
        location = self.grid_view.selected_location()
        if location is None:
            return
        before = self.session.grid
        self.session.add_row(location[0], Side.coerce(side) or Side.AFTER)
        await self._after_command(before)

    async def action_remove_row(self) -> None:
        location = self.grid_view.selected_location()
        if location is None:
            return
        before = self.session.grid
        self.session.remove_row(location[0])
        await self._after_command(before)

    async def action_reset_layout(self) -> None:
        before = self.session.grid
        self.session.reset_layout()
        await self._after_command(before)

    def action_select_offset(self, offset: int) -> None:
        self.grid_view.select_offset(offset)

    # -------------------------------------------------------------------------
    # Content commands
    # -------------------------------------------------------------------------

    def action_open_file(self) -> None:
        panel_id = self.grid_view.selected_panel_id
        if panel_id is None:
            return

        async def handle_path(path: Optional[str]) -> None:
            if path:
                await self.load_file(panel_id, path)

        self.push_screen(OpenFileScreen(get_start_dir()), handle_path)

    async def load_file(self, panel_id: int, path: str) -> bool:
        """Put a file into a panel; reports failures as a notification."""
        try:
            handle = content_from_path(path)
        except ContentError as e:
            logger.warning(f"Cannot open {path}: {e}")
            self.notify(str(e), title="Cannot open file", severity="error")
            return False
        self.session.set_content(panel_id, handle)
        await self.grid_view.rebuild()
        return True

    async def _set_blank(self, kind: ContentKind) -> None:
        panel_id = self.grid_view.selected_panel_id
        if panel_id is None:
            return
        self.session.set_content(panel_id, blank_content(kind))
        await self.grid_view.rebuild()

    async def action_new_canvas(self) -> None:
        await self._set_blank(ContentKind.CANVAS)

    async def action_new_code(self) -> None:
        await self._set_blank(ContentKind.CODE)

    async def action_clear_content(self) -> None:
        panel_id = self.grid_view.selected_panel_id
        if panel_id is None or self.session.get_content(panel_id) is None:
            return
        self.session.clear_content(panel_id)
        await self.grid_view.rebuild()

    # -------------------------------------------------------------------------
    # Drag safety
    # -------------------------------------------------------------------------

    def on_app_blur(self, event: events.AppBlur) -> None:
        self.grid_view.cancel_drag("application lost focus")
