from __future__ import annotations

from typing import List

from cs2chat.contracts import ChatEvent

# Terminal-only formatting; in-game chat text never goes through here.


def format_chat_line(event: ChatEvent) -> str:
    return f"[{event.channel.value}] {event.sender}: {event.message}"


def format_auto_translation(event: ChatEvent, source_name: str, target: str, text: str) -> str:
    return f"[{event.channel.value}] {event.sender} ({source_name} -> {target.upper()}): {text}"


def format_kv(key: str, value: object) -> str:
    return f"   {key}: {value}"


def banner_lines(*, log_path: str, auto_translate: bool, target: str) -> List[str]:
    lines = [
        "CS2 Chat Translator (watching console.log)",
        f"   log: {log_path}",
        "",
        "Commands:",
        "  tm_<lang> TEXT    translate TEXT to <lang> (chat output, e.g. tm_de hello)",
        "  _tl [lang]        translate last message to [lang] (default en)",
        "  code_<language>   show helper like 'For French use tm_fr'",
        "",
    ]
    if auto_translate:
        lines.append("Auto-Translate:")
        lines.append(f"  non-commands are shown here as '<from> -> {target.upper()}'")
        lines.append("")
    return lines
