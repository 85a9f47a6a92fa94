"""Textual host for the grid layout engine."""

from .app import WhiteboardApp
from .grid_view import Divider, GridView, PanelView, RowView

__all__ = [
    "WhiteboardApp",
    "GridView",
    "RowView",
    "PanelView",
    "Divider",
]
