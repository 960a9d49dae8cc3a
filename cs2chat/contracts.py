from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Channel(str, Enum):
    TEAM_CT = "CT"
    TEAM_T = "T"
    ALL = "ALL"

    @property
    def is_team(self) -> bool:
        return self is not Channel.ALL


@dataclass(frozen=True)
class ChatEvent:
    channel: Channel
    sender: str
    message: str

@dataclass(frozen=True)
class TranslationRequest:
    text: str
    target_lang: str = "en"
    # None means "let the service detect it"
    source_lang: Optional[str] = None

@dataclass(frozen=True)
class TranslationResult:
    source_text: str
    translated_text: str
    provider: str
    detected_lang: str = ""

@dataclass(frozen=True)
class ResolvedTranslation:
    """
    Translation as seen by chat handlers.
    overridden=True means the source language was forced instead of detected.
    """
    translated_text: str
    source_lang: str
    overridden: bool = False

@dataclass(frozen=True)
class LanguageMatch:
    code: str
    name: str
    score: int
