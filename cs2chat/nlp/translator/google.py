from __future__ import annotations

from typing import Any, Optional

import httpx

from .base import TranslationError, Translator
from cs2chat.contracts import TranslationRequest, TranslationResult

TRANSLATE_URL = "https://translate.googleapis.com/translate_a/single"


def to_service_code(code: str) -> str:
    """Catalog code -> service code ("zh_cn" -> "zh-CN")."""
    c = (code or "").strip().lower().replace("_", "-")
    if "-" in c:
        head, tail = c.split("-", 1)
        return f"{head}-{tail.upper()}"
    return c


def from_service_code(code: str) -> str:
    """Service code -> catalog code ("zh-CN" -> "zh_cn")."""
    return (code or "").strip().lower().replace("-", "_")


def parse_payload(payload: Any) -> tuple[str, str]:
    """
    Response shape: [[["Hallo Freund", "hello friend", ...], ...], null, "en", ...]
    Returns (translated_text, detected_code).
    """
    if not isinstance(payload, list) or not payload or not isinstance(payload[0], list):
        raise TranslationError("unexpected translate response shape")
    parts = []
    for seg in payload[0]:
        if isinstance(seg, list) and seg and isinstance(seg[0], str):
            parts.append(seg[0])
    detected = payload[2] if len(payload) > 2 and isinstance(payload[2], str) else ""
    return "".join(parts), from_service_code(detected)


class GoogleTranslator(Translator):
    """
    Client for the public Google Translate web endpoint.
    Detects the source language unless the request forces one.
    """

    def __init__(self, *, timeout: float = 10.0, client: Optional[httpx.AsyncClient] = None) -> None:
        self.timeout = float(timeout)
        self._client = client

    @property
    def name(self) -> str:
        return "google"

    @property
    def http_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def translate(self, req: TranslationRequest) -> TranslationResult:
        params = {
            "client": "gtx",
            "dt": "t",
            "sl": to_service_code(req.source_lang) if req.source_lang else "auto",
            "tl": to_service_code(req.target_lang),
            "q": req.text,
        }
        try:
            response = await self.http_client.get(TRANSLATE_URL, params=params)
        except httpx.HTTPError as e:
            raise TranslationError(f"translate request failed: {e}") from e

        if response.status_code != 200:
            raise TranslationError(f"translate service returned HTTP {response.status_code}")
        try:
            payload = response.json()
        except ValueError as e:
            raise TranslationError("translate service returned invalid JSON") from e

        text, detected = parse_payload(payload)
        if req.source_lang:
            detected = from_service_code(req.source_lang)
        return TranslationResult(
            source_text=req.text,
            translated_text=text,
            provider=self.name,
            detected_lang=detected,
        )

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
