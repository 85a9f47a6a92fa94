"""
Panel content handles.

A handle is what the host stores in a panel's content slot. The layout
engine treats it as opaque; only the viewer widgets look inside.
"""

import mimetypes
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from ..exceptions import ContentNotFoundError, UnsupportedContentError


class ContentKind(Enum):
    """What a panel is presenting."""

    IMAGE = "image"
    VIDEO = "video"
    DOCUMENT = "document"  # PDF
    TABLE = "table"  # CSV
    TEXT = "text"
    CANVAS = "canvas"  # Blank drawing surface
    CODE = "code"  # Blank code editor


# Blank kinds don't come from a file
BLANK_KINDS = {ContentKind.CANVAS, ContentKind.CODE}

# Extensions the open-file prompt offers
SUPPORTED_EXTENSIONS = (".csv", ".png", ".jpg", ".jpeg", ".pdf", ".mp4", ".txt")


@dataclass(frozen=True)
class ContentHandle:
    """Reference to what a panel shows.

    Attributes:
        kind: Content category, picks the viewer
        name: Label shown in the panel
        path: Source file, None for blank canvases/editors
        mime_type: Detected MIME type of the source file
    """

    kind: ContentKind
    name: str
    path: Optional[Path] = None
    mime_type: Optional[str] = None


def kind_for_mime_type(mime_type: Optional[str]) -> Optional[ContentKind]:
    """Map a MIME type to the content kind that presents it."""
    if not mime_type:
        return None
    if mime_type == "text/csv":
        return ContentKind.TABLE
    if mime_type == "application/pdf":
        return ContentKind.DOCUMENT
    if mime_type.startswith("image/"):
        return ContentKind.IMAGE
    if mime_type.startswith("video/"):
        return ContentKind.VIDEO
    if mime_type.startswith("text/plain"):
        return ContentKind.TEXT
    return None


def content_from_path(path: Union[str, Path]) -> ContentHandle:
    """Build a handle for a file.

    Raises:
        ContentNotFoundError: If the file does not exist
        UnsupportedContentError: If no viewer handles its type
    """
    file_path = Path(path).expanduser()
    if not file_path.is_file():
        raise ContentNotFoundError(path=str(file_path))

    mime_type, _ = mimetypes.guess_type(file_path.name)
    kind = kind_for_mime_type(mime_type)
    if kind is None:
        raise UnsupportedContentError(path=str(file_path), mime_type=mime_type)

    return ContentHandle(kind=kind, name=file_path.name, path=file_path, mime_type=mime_type)


def blank_content(kind: ContentKind) -> ContentHandle:
    """A drawing canvas or code editor with nothing loaded."""
    if kind not in BLANK_KINDS:
        raise UnsupportedContentError(f"{kind.value} content needs a file")
    return ContentHandle(kind=kind, name=f"Untitled {kind.value}")
