"""
Panel content viewers.

Picks a widget for a panel's content handle. CSV files become a table,
text files are shown as text, a blank code panel is an editable TextArea.
Kinds a terminal can't draw (images, video, PDF, drawing canvases) get a
labelled placeholder.
"""

import csv
import logging
from typing import Optional

from rich.markup import escape
from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widget import Widget
from textual.widgets import DataTable, Static, TextArea

from ..grid.content import ContentHandle, ContentKind

logger = logging.getLogger(__name__)

# Rows shown from a CSV file
MAX_TABLE_ROWS = 500

# Bytes shown from a text file
MAX_TEXT_BYTES = 256 * 1024

EMPTY_HINT = "[dim]Empty panel\n\n[b]o[/b] open a file  [b]w[/b] canvas  [b]i[/b] code[/dim]"


class ContentView(Widget):
    """Shows one content handle."""

    DEFAULT_CSS = """
    ContentView {
        height: 1fr;
        width: 100%;
    }
    ContentView .content-placeholder {
        width: 100%;
        height: 100%;
        content-align: center middle;
        text-align: center;
    }
    ContentView DataTable, ContentView TextArea {
        height: 100%;
    }
    """

    def __init__(self, content: Optional[ContentHandle] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.content = content

    def compose(self) -> ComposeResult:
        content = self.content

        if content is None:
            yield Static(EMPTY_HINT, classes="content-placeholder")
        elif content.kind is ContentKind.TABLE:
            yield self._build_table(content)
        elif content.kind is ContentKind.TEXT:
            yield self._build_text(content)
        elif content.kind is ContentKind.CODE:
            yield TextArea.code_editor("", classes="content-code")
        else:
            yield Static(
                f"[b]{content.kind.value}[/b]\n{escape(content.name)}",
                classes="content-placeholder",
            )

    def _build_table(self, content: ContentHandle) -> Widget:
        table: DataTable = DataTable(zebra_stripes=True, classes="content-table")
        try:
            with open(content.path, newline="", encoding="utf-8") as f:
                reader = csv.reader(f)
                header = next(reader, None)
                if header is None:
                    return Static(f"{content.name} is empty", classes="content-placeholder")
                table.add_columns(*header)
                for index, row in enumerate(reader):
                    if index >= MAX_TABLE_ROWS:
                        break
                    # Pad/truncate ragged rows to the header width
                    cells = (row + [""] * len(header))[: len(header)]
                    table.add_row(*(Text(cell) for cell in cells))
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            logger.warning(f"Failed to read table {content.path}: {e}")
            message = f"Could not read {escape(content.name)}: {escape(str(e))}"
            return Static(f"[red]{message}[/red]", classes="content-placeholder")
        return table

    def _build_text(self, content: ContentHandle) -> Widget:
        try:
            with open(content.path, "rb") as f:
                text = f.read(MAX_TEXT_BYTES).decode("utf-8", errors="replace")
        except OSError as e:
            logger.warning(f"Failed to read text {content.path}: {e}")
            message = f"Could not read {escape(content.name)}: {escape(str(e))}"
            return Static(f"[red]{message}[/red]", classes="content-placeholder")
        return VerticalScroll(Static(text, markup=False), classes="content-text")
