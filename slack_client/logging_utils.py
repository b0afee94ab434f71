from __future__ import annotations

import json
import logging
from typing import IO, Any


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Attributes every LogRecord has; anything else arrived through ``extra=``.
_RECORD_ATTRIBUTES = set(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {
    "message",
    "asctime",
    "taskName",
}


class ExtraFieldsFormatter(logging.Formatter):
    """Renders ``extra=`` context as ``key=<json>`` pairs after the message."""

    @staticmethod
    def extra_fields(record: logging.LogRecord) -> dict[str, Any]:
        return {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRIBUTES and not key.startswith("_")
        }

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        extras = self.extra_fields(record)
        if not extras:
            return formatted

        suffix = " ".join(f"{key}={json.dumps(value, default=str)}" for key, value in extras.items())
        # Keep the context on the first line, ahead of any traceback.
        head, newline, tail = formatted.partition("\n")
        return f"{head} {suffix}{newline}{tail}"


def configure_logging(level: str | int = logging.INFO, stream: IO[str] | None = None) -> None:
    root = logging.getLogger()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    root.setLevel(level)

    # Repeated calls must not stack handlers.
    if any(getattr(handler, "_slack_client_handler", False) for handler in root.handlers):
        return

    handler = logging.StreamHandler(stream)
    handler.setFormatter(ExtraFieldsFormatter(LOG_FORMAT))
    handler._slack_client_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)


def redact_token(token: str | None) -> str:
    if not token:
        return ""
    if len(token) <= 5:
        return "***"
    return f"{token[:5]}***"
