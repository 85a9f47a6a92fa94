"""Exception hierarchy for whiteboard.

The grid engine itself never raises: structural requests it cannot honor
return the grid unchanged. These exceptions cover everything around it
(configuration, content loading, textual command parsing).

Exception Hierarchy:
    WhiteboardError (base)
    ├── ConfigurationError - environment variables and config files
    ├── ContentError - building content handles from files
    │   ├── ContentNotFoundError
    │   └── UnsupportedContentError
    └── CommandParseError - malformed textual layout commands

Usage:
    from whiteboard.exceptions import ContentError

    try:
        handle = content_from_path(path)
    except ContentError as e:
        self.notify(str(e), severity="error")
"""

from typing import Any, Optional


class WhiteboardError(Exception):
    """Base exception for all whiteboard errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (paths, values)
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(WhiteboardError):
    """Invalid configuration value."""

    def __init__(
        self,
        message: str = "Invalid configuration",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)


# =============================================================================
# Content Errors
# =============================================================================


class ContentError(WhiteboardError):
    """Base exception for panel content handling."""

    pass


class ContentNotFoundError(ContentError):
    """The file given as panel content does not exist."""

    def __init__(
        self,
        message: str = "Content file not found",
        *,
        path: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = path
        super().__init__(message, **context)


class UnsupportedContentError(ContentError):
    """The file type cannot be presented in a panel."""

    def __init__(
        self,
        message: str = "Unsupported file type",
        *,
        path: Optional[str] = None,
        mime_type: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = path
        if mime_type:
            context["mime_type"] = mime_type
        super().__init__(message, **context)


# =============================================================================
# Command Errors
# =============================================================================


class CommandParseError(WhiteboardError):
    """A textual layout command could not be parsed."""

    def __init__(
        self,
        message: str = "Invalid layout command",
        *,
        command: Optional[str] = None,
        **context: Any,
    ) -> None:
        if command is not None:
            context["command"] = command
        super().__init__(message, **context)
