"""Rich console handler for directory change events.

Where: platform/logging/handlers.py
What: Render structured ``directory_event`` records with icons and compact paths.
Why: Keep console output readable while plain records still reach the log file.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class DirectoryEventRichHandler(RichHandler):
    """Rich handler that styles directory events and shortens long paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str, str]]] = {
        "directory.change.success": ("📂", "green", "Changed to "),
        "directory.change.error": ("❌", "red", "Cannot change to "),
        "directory.restore.success": ("↩️", "cyan", "Restored "),
        "directory.restore.error": ("⛔", "red", "Cannot restore "),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path with coloured separators, keeping only the last segments."""

        pure_path = self._to_pure_path(path)
        is_windows = isinstance(pure_path, PureWindowsPath)
        separator = "\\" if is_windows else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display = ""
        if anchor:
            display = anchor.rstrip("\\/") + separator if is_windows else separator
        if truncated:
            display += "…" + separator
        display += separator.join(body_parts)
        if not display:
            display = "."

        text = Text()
        for char in display:
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _render_directory_event(self, record: logging.LogRecord) -> Text | None:
        event = getattr(record, "directory_event", None)
        if not isinstance(event, str):
            return None

        icon, color, prefix = self._EVENT_STYLES.get(event, ("ℹ️", "blue", ""))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(prefix)

        target_path = getattr(record, "target_path", None)
        if target_path:
            _ = body.append_text(self._format_path(str(target_path)))

        previous_path = getattr(record, "previous_path", None)
        if previous_path:
            _ = body.append(" (from ")
            _ = body.append_text(self._format_path(str(previous_path)))
            _ = body.append(")")

        error_message = getattr(record, "error_message", None)
        if error_message:
            error_code = getattr(record, "error_code", None)
            detail = f"[{error_code}] {error_message}" if isinstance(error_code, int) else str(error_message)
            _ = body.append(f": {detail}")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render directory events with dedicated styling, anything else as usual."""

        event_text = self._render_directory_event(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["DirectoryEventRichHandler"]
