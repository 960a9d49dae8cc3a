# cs2chat/nlp/resolver.py
from __future__ import annotations

import logging
import re
from typing import Any

from cs2chat.app.logging_setup import log_event
from cs2chat.contracts import ResolvedTranslation, TranslationRequest
from cs2chat.nlp.languages import lang_name

CYRILLIC = re.compile(r"[\u0400-\u04FF]")
FORCED_SOURCE = "ru"
UNKNOWN_SOURCE = "unknown"


class TranslationResolver:
    """
    Wraps a translator with source-language handling:
      1) Translate with auto-detection.
      2) Cyrillic text the detector did not call Russian is retried as Russian
         (when prefer_ru_for_cyrillic is on); a failed retry keeps step 1.
      3) A failed first call yields the input unchanged with source "unknown".
    resolve() never raises.
    """

    def __init__(
        self,
        translator: Any,
        *,
        prefer_ru_for_cyrillic: bool = True,
        logger: logging.Logger | None = None,
    ) -> None:
        self.translator = translator
        self.prefer_ru_for_cyrillic = prefer_ru_for_cyrillic
        self.logger = logger

    async def resolve(self, text: str, target: str = "en") -> ResolvedTranslation:
        target = (target or "en").lower()
        try:
            first = await self.translator.translate(TranslationRequest(text=text, target_lang=target))
        except Exception as e:
            log_event(
                self.logger,
                logging.WARNING,
                "translate_failed",
                target=target,
                chars=len(text),
                error=str(e),
            )
            return ResolvedTranslation(translated_text=text, source_lang=UNKNOWN_SOURCE, overridden=False)

        detected = (first.detected_lang or "").lower()
        if self.prefer_ru_for_cyrillic and detected != FORCED_SOURCE and CYRILLIC.search(text):
            try:
                forced = await self.translator.translate(
                    TranslationRequest(text=text, target_lang=target, source_lang=FORCED_SOURCE)
                )
            except Exception as e:
                log_event(
                    self.logger,
                    logging.INFO,
                    "translate_forced_ru_failed",
                    detected=detected,
                    error=str(e),
                )
            else:
                log_event(self.logger, logging.INFO, "translate_forced_ru", detected=detected, target=target)
                return ResolvedTranslation(
                    translated_text=forced.translated_text,
                    source_lang=FORCED_SOURCE,
                    overridden=True,
                )

        return ResolvedTranslation(
            translated_text=first.translated_text,
            source_lang=detected or UNKNOWN_SOURCE,
            overridden=False,
        )


def source_name(res: ResolvedTranslation) -> str:
    return lang_name(res.source_lang)
