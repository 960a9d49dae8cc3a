from __future__ import annotations

from pathlib import Path
from typing import Any


def summarize_exception(detail: str, *, max_len: int = 220) -> str:
    text = str(detail or "").strip()
    if not text:
        return "Unknown runtime error."
    lines = [ln.strip() for ln in text.splitlines() if ln.strip()]
    if not lines:
        return "Unknown runtime error."
    for ln in reversed(lines):
        if ln.startswith("File "):
            continue
        if ln.startswith("^"):
            continue
        if ln.startswith("Traceback "):
            continue
        out = ln
        break
    else:
        out = lines[-1]
    if len(out) > max_len:
        return out[: max_len - 3].rstrip() + "..."
    return out


def hint_for_exception(summary: str) -> str:
    s = str(summary or "").lower()
    if "no log_path" in s:
        return "Set it with --set-log-path /path/to/console.log."
    if "no cfg_dir" in s:
        return "Set it with --set-cfg-dir /path/to/csgo/cfg."
    if "console.log not found" in s:
        return "Ensure CS2 is running with the -condebug launch option, or fix --set-log-path."
    if "cfg directory not found" in s:
        return "Point --set-cfg-dir at the game's csgo/cfg directory."
    if "config file not found" in s:
        return "Configured JSON file is missing. Update the config path or run --init-config."
    if "jsondecodeerror" in s or "must be a json object" in s:
        return "config.json is not valid JSON. Fix it or run --init-config to rewrite it."
    if "unknown translator provider" in s:
        return "Use --translator google or --translator stub."
    return "Check logs for full traceback."


def check_startup_paths(args: Any) -> list[str]:
    """Return fatal problems with the configured paths (empty when usable)."""
    problems: list[str] = []
    log_path = str(getattr(args, "log_path", "") or "")
    cfg_dir = str(getattr(args, "cfg_dir", "") or "")
    if not log_path:
        problems.append("No log_path configured.")
    elif not Path(log_path).is_file():
        problems.append(f"console.log not found: {log_path}")
    if not cfg_dir:
        problems.append("No cfg_dir configured.")
    elif not Path(cfg_dir).is_dir():
        problems.append(f"cfg directory not found: {cfg_dir}")
    return problems
