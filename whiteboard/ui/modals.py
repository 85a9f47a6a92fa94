"""Modal screens for the whiteboard app."""

from pathlib import Path
from typing import Optional

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label

from ..grid.content import SUPPORTED_EXTENSIONS


class OpenFileScreen(ModalScreen[Optional[str]]):
    """Ask for the path of a file to show in the selected panel.

    Dismisses with the entered path, or None when cancelled.
    """

    CSS = """
    OpenFileScreen {
        align: center middle;
    }
    #open-dialog {
        width: 80;
        height: auto;
        background: $surface;
        border: thick $primary;
        padding: 1 2;
    }
    #open-label {
        width: 100%;
        padding-bottom: 1;
    }
    #open-input {
        width: 100%;
        margin-bottom: 1;
    }
    #open-buttons {
        width: 100%;
        height: 3;
        align: center middle;
    }
    #open-buttons Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
    ]

    def __init__(self, start_dir: Optional[Path] = None) -> None:
        super().__init__()
        self.start_dir = start_dir

    def compose(self) -> ComposeResult:
        initial = f"{self.start_dir}/" if self.start_dir else ""
        with Vertical(id="open-dialog"):
            yield Label(
                f"Select a file to present ({', '.join(SUPPORTED_EXTENSIONS)}):",
                id="open-label",
            )
            yield Input(value=initial, placeholder="path/to/file", id="open-input")
            with Horizontal(id="open-buttons"):
                yield Button("Open", variant="primary", id="open-btn")
                yield Button("Cancel", variant="default", id="cancel-btn")

    def on_mount(self) -> None:
        self.query_one("#open-input", Input).focus()

    def _submit(self) -> None:
        path = self.query_one("#open-input", Input).value.strip()
        if path:
            self.dismiss(path)
        else:
            self.query_one("#open-label", Label).update("[red]Enter a file path[/red]")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "open-btn":
            self._submit()
        else:
            self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)
