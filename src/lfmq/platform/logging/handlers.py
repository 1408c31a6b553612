"""Where: src/lfmq/platform/logging/handlers.py
What: Rich handler that renders structured Last.fm request events.
Why: Keep request tracing readable on the console without changing call sites.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, ClassVar

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class RequestRichHandler(RichHandler):
    """Rich handler with dedicated styling for ``request.*`` log events."""

    _REQUEST_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "request.send": ("📡", "cyan"),
        "request.success": ("✅", "green"),
        "request.service_error": ("⚠️", "yellow"),
        "request.parsing_error": ("🧩", "red"),
        "request.transport_error": ("⛔", "red"),
    }
    _PARAM_VALUE_LIMIT: ClassVar[int] = 32

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    @classmethod
    def _format_params(cls, params: object) -> str:
        """Render request parameters as ``key=value`` pairs, shortening long values."""

        if not isinstance(params, dict) or not params:
            return ""
        rendered: list[str] = []
        for key, value in params.items():
            text = str(value)
            if len(text) > cls._PARAM_VALUE_LIMIT:
                text = text[: cls._PARAM_VALUE_LIMIT - 1] + "…"
            rendered.append(f"{key}={text}")
        return " ".join(rendered)

    def _render_request_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured request events with dedicated styling."""

        event = getattr(record, "request_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._REQUEST_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        method = getattr(record, "method", None)
        label = {
            "request.send": "Requesting",
            "request.success": "Received",
            "request.service_error": "Service error from",
            "request.parsing_error": "Unreadable response from",
            "request.transport_error": "Transport failure for",
        }.get(event, "Request")
        _ = body.append(label)
        if method:
            _ = body.append(" ")
            _ = body.append(str(method), style=Style(color="white", bold=True))

        details: list[str] = []
        if event == "request.send":
            params = self._format_params(getattr(record, "params", None))
            if params:
                details.append(params)
        elif event == "request.service_error":
            code = getattr(record, "error_code", None)
            if isinstance(code, int):
                details.append(f"code={code}")
        duration_ms = getattr(record, "duration_ms", None)
        if isinstance(duration_ms, (int, float)):
            details.append(f"{duration_ms:.2f} ms")
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for request events."""

        request_text = self._render_request_message(record)
        if request_text is not None:
            return request_text

        return super().render_message(record, message)


__all__ = ["RequestRichHandler"]
