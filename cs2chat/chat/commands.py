# cs2chat/chat/commands.py
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Union

DEFAULT_TL_TARGET = "en"


@dataclass(frozen=True)
class TranslateLast:
    target: str = DEFAULT_TL_TARGET

@dataclass(frozen=True)
class LookupCode:
    query: str

@dataclass(frozen=True)
class TranslateInline:
    # target == "" marks a bare tm_ with no language code
    target: str
    text: str

@dataclass(frozen=True)
class Plain:
    text: str


Command = Union[TranslateLast, LookupCode, TranslateInline, Plain]

_TL = re.compile(r"^_tl\b", re.IGNORECASE)
_CODE = re.compile(r"^code[_\s]+(.*)$", re.IGNORECASE | re.DOTALL)
_TM = re.compile(r"^tm_([a-z_]{2,5})\b", re.IGNORECASE)
_TM_BARE = re.compile(r"^tm_(\s|$)", re.IGNORECASE)
_FILLER = re.compile(r"^[.\s]*$")


def _after_first_space(message: str) -> str:
    parts = message.split(None, 1)
    return parts[1].strip() if len(parts) > 1 else ""


def _translate_last(message: str) -> Optional[Command]:
    if not _TL.match(message):
        return None
    parts = message.split()
    target = parts[1].lower() if len(parts) > 1 else DEFAULT_TL_TARGET
    return TranslateLast(target=target)


def _lookup_code(message: str) -> Optional[Command]:
    m = _CODE.match(message)
    if m is None:
        return None
    return LookupCode(query=m.group(1).strip())


def _translate_inline(message: str) -> Optional[Command]:
    m = _TM.match(message)
    if m is not None:
        return TranslateInline(target=m.group(1).lower(), text=_after_first_space(message))
    if _TM_BARE.match(message):
        return TranslateInline(target="", text=_after_first_space(message))
    return None


# First match wins; the order is part of the chat protocol.
RULES: Tuple[Callable[[str], Optional[Command]], ...] = (
    _translate_last,
    _lookup_code,
    _translate_inline,
)


def classify(message: str) -> Command:
    text = (message or "").strip()
    for rule in RULES:
        cmd = rule(text)
        if cmd is not None:
            return cmd
    return Plain(text=text)


def is_filler(text: str) -> bool:
    """Empty, whitespace-only or dots-only messages."""
    return bool(_FILLER.match(text or ""))
