from __future__ import annotations
from abc import ABC, abstractmethod
from cs2chat.contracts import TranslationRequest, TranslationResult


class TranslationError(RuntimeError):
    pass


class Translator(ABC):
    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    async def translate(self, req: TranslationRequest) -> TranslationResult: ...

    async def aclose(self) -> None:
        return None
