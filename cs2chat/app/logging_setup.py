from __future__ import annotations

import json
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from cs2chat.app.config import app_paths

# Attributes every LogRecord carries; anything else arrived through `extra`.
_RESERVED_FIELDS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
    "taskName",
}

CHAT_FIELDS = ("channel", "sender", "command", "line")
LINE_FIELD_LIMIT = 200


def clip(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


class JsonLineFormatter(logging.Formatter):
    """
    One JSON object per record. Chat context (channel, sender, command, line)
    follows the message so a log file reads in chat order; raw console lines
    are clipped to `line_limit` characters.
    """

    def __init__(self, *args: Any, line_limit: int = LINE_FIELD_LIMIT, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.line_limit = line_limit

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        fields = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_FIELDS and not key.startswith("_")
        }
        for key in CHAT_FIELDS:
            if key in fields:
                payload[key] = fields.pop(key)
        if isinstance(payload.get("line"), str):
            payload["line"] = clip(payload["line"], self.line_limit)
        payload.update(fields)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def log_event(logger: logging.Logger | None, level: int, event: str, **fields: Any) -> None:
    if logger is None:
        return
    logger.log(level, event, extra=fields)


def setup_app_logger(
    name: str = "cs2chat.app",
    *,
    debug: bool = False,
) -> tuple[logging.Logger, Path, Path]:
    paths = app_paths()
    log_dir = paths.config_dir / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / "cs2chat.log"

    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False
    logger.handlers.clear()

    handler = RotatingFileHandler(
        filename=log_path,
        maxBytes=1_000_000,
        backupCount=5,
        encoding="utf-8",
    )
    handler.setFormatter(JsonLineFormatter(datefmt="%Y-%m-%dT%H:%M:%S"))
    logger.addHandler(handler)
    return logger, log_dir, log_path
