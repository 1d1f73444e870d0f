"""Rich console handler for file operation events.

Where: platform/logging/handlers.py
What: Render ``fileop_event`` log records with icons, colours and compact paths.
Why: Keep long build paths readable in terminal output.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class FileOpRichHandler(RichHandler):
    """Rich handler that renders file operation records with styled paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str, str]]] = {
        "fileop.copy": ("📄", "cyan", "Copied "),
        "fileop.clean": ("🧹", "green", "Cleaned "),
        "fileop.clean.fallback": ("⚠️", "yellow", "Partial clean "),
        "fileop.flatten": ("📦", "magenta", "Flattened "),
        "fileop.concat": ("🔗", "blue", "Concatenated "),
        "fileop.token.write": ("🏷️", "green", "Token "),
    }
    _TWO_PATH_EVENTS: ClassVar[frozenset[str]] = frozenset(
        {"fileop.copy", "fileop.flatten", "fileop.concat"}
    )
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path with coloured separators and ellipsis truncation.

        Args:
            path: Absolute or relative path string to format.

        Returns:
            Text: Styled path keeping at most the last four segments.
        """
        pure_path = self._to_pure_path(path)
        is_windows = isinstance(pure_path, PureWindowsPath)
        separator = "\\" if is_windows else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ""
        if truncated:
            display_string = "…" + separator
        elif anchor:
            display_string = anchor.rstrip("\\/") + separator if is_windows else separator
        display_string += separator.join(body_parts)

        return self._style_path_string(display_string or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        text = Text()
        for char in path_string:
            if char == separator or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_fileop_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured file operation events with dedicated styling."""

        event = getattr(record, "fileop_event", None)
        if not isinstance(event, str):
            return None

        icon, color, prefix = self._EVENT_STYLES.get(event, ("ℹ️", "blue", ""))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(prefix)

        source_path = getattr(record, "source_path", None)
        target_path = getattr(record, "target_path", None)
        if source_path:
            _ = body.append_text(self._format_path(str(source_path)))
        if target_path and (event in self._TWO_PATH_EVENTS or not source_path):
            if source_path:
                _ = body.append(" → ")
            _ = body.append_text(self._format_path(str(target_path)))

        details: list[str] = []
        count = getattr(record, "count", None)
        if isinstance(count, int):
            details.append(f"count={count}")
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for file operation events."""

        fileop_text = self._render_fileop_message(record)
        if fileop_text is not None:
            return fileop_text
        return super().render_message(record, message)


__all__ = ["FileOpRichHandler"]
