from __future__ import annotations
import re
from typing import Dict, Optional, Tuple
from .base import Translator
from cs2chat.contracts import TranslationRequest, TranslationResult

_CYRILLIC = re.compile(r"[\u0400-\u04FF]")

# (text, target) -> translation
KNOWN_PHRASES: Dict[Tuple[str, str], str] = {
    ("hello friend", "de"): "Hallo Freund",
    ("hello", "de"): "Hallo",
    ("привет", "de"): "Hallo",
    ("привет", "en"): "Hi",
    ("hello", "ru"): "Привет",
}


class StubTranslator(Translator):
    """Offline provider: a tiny phrase table, otherwise echoes the input."""

    def __init__(self, phrases: Optional[Dict[Tuple[str, str], str]] = None) -> None:
        self.phrases = dict(KNOWN_PHRASES if phrases is None else phrases)

    @property
    def name(self) -> str:
        return "stub"

    async def translate(self, req: TranslationRequest) -> TranslationResult:
        # Deterministic, test-friendly
        detected = req.source_lang or ("ru" if _CYRILLIC.search(req.text) else "en")
        key = (req.text.strip().lower(), req.target_lang.lower())
        out = self.phrases.get(key, req.text)
        return TranslationResult(
            source_text=req.text,
            translated_text=out,
            provider=self.name,
            detected_lang=detected,
        )
