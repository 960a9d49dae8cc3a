from __future__ import annotations

import json
import logging
from pathlib import Path

from cs2chat.app.logging_setup import JsonLineFormatter, clip, log_event, setup_app_logger


def _close(name: str) -> None:
    logger = logging.getLogger(name)
    for h in logger.handlers:
        h.close()
    logger.handlers.clear()


def test_setup_app_logger_writes_json_line(config_dir: Path) -> None:
    logger, log_dir, log_path = setup_app_logger("cs2chat.test")

    logger.info("hello", extra={"event": "test_event", "value": 7})
    for h in logger.handlers:
        h.flush()

    assert log_dir == config_dir / "logs"
    assert log_path.exists()
    lines = [ln for ln in log_path.read_text(encoding="utf-8").splitlines() if ln.strip()]
    payload = json.loads(lines[-1])
    assert payload["message"] == "hello"
    assert payload["event"] == "test_event"
    assert payload["value"] == 7
    assert payload["level"] == "INFO"
    _close("cs2chat.test")


def test_debug_level_and_log_event(config_dir: Path) -> None:
    logger, _, log_path = setup_app_logger("cs2chat.test_debug", debug=True)
    log_event(logger, logging.DEBUG, "chat_event", sender="Bob", path=Path("x"))
    log_event(None, logging.INFO, "ignored")
    for h in logger.handlers:
        h.flush()

    payload = json.loads(log_path.read_text(encoding="utf-8").splitlines()[-1])
    assert payload["message"] == "chat_event"
    assert payload["level"] == "DEBUG"
    assert payload["sender"] == "Bob"
    assert payload["path"] == "x"
    _close("cs2chat.test_debug")


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("cs2chat.fmt", logging.INFO, __file__, 1, "chat_event", (), None)
    record.__dict__.update(extra)
    return record


def test_formatter_puts_chat_context_after_message() -> None:
    out = JsonLineFormatter().format(
        _record(elapsed_ms=3, command="Plain", sender="Bob", channel="ALL")
    )
    payload = json.loads(out)
    assert list(payload)[3:] == ["message", "channel", "sender", "command", "elapsed_ms"]
    assert payload["sender"] == "Bob"


def test_formatter_clips_long_console_lines() -> None:
    line = "[ALL] Spammer: " + "x" * 500
    payload = json.loads(JsonLineFormatter(line_limit=20).format(_record(line=line)))
    assert payload["line"] == line[:20] + "..."
    short = json.loads(JsonLineFormatter().format(_record(line="[CT] A: hi")))
    assert short["line"] == "[CT] A: hi"
    assert clip("abc", 3) == "abc"
