from __future__ import annotations
import os
from .base import Translator
from .google import GoogleTranslator
from .stub import StubTranslator

def get_translator(provider: str | None = None, *, timeout: float = 10.0) -> Translator:
    provider = (provider or os.getenv("CS2CHAT_TRANSLATOR", "google")).lower().strip()

    if provider == "google":
        return GoogleTranslator(timeout=timeout)
    if provider == "stub":
        return StubTranslator()

    raise ValueError(f"Unknown translator provider: {provider}")
