from __future__ import annotations

from typing import Callable, Optional

from cs2chat.contracts import TranslationRequest, TranslationResult


class RecordingSink:
    def __init__(self) -> None:
        self.sent: list[tuple[str, bool]] = []

    async def deliver(self, message: str, team: bool) -> None:
        self.sent.append((message, team))


class ScriptedTranslator:
    """
    Fake translator: detects `detect` unless the source is forced,
    and renders "<target>:<text>" (plus "/forced" for forced calls).
    """

    name = "scripted"

    def __init__(
        self,
        *,
        detect: str = "en",
        fail_first: bool = False,
        fail_forced: bool = False,
        render: Optional[Callable[[TranslationRequest], str]] = None,
    ) -> None:
        self.detect = detect
        self.fail_first = fail_first
        self.fail_forced = fail_forced
        self.render = render
        self.calls: list[TranslationRequest] = []

    async def translate(self, req: TranslationRequest) -> TranslationResult:
        self.calls.append(req)
        if req.source_lang is None and self.fail_first:
            raise ConnectionError("network down")
        if req.source_lang is not None and self.fail_forced:
            raise ConnectionError("forced call failed")
        if self.render is not None:
            text = self.render(req)
        else:
            text = f"{req.target_lang}:{req.text}" + ("/forced" if req.source_lang else "")
        return TranslationResult(
            source_text=req.text,
            translated_text=text,
            provider=self.name,
            detected_lang=req.source_lang or self.detect,
        )

    async def aclose(self) -> None:
        return None
