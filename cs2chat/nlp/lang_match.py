# cs2chat/nlp/lang_match.py
from __future__ import annotations

import re
from difflib import SequenceMatcher
from typing import Iterable, Optional, Tuple

from cs2chat.contracts import LanguageMatch
from cs2chat.nlp.languages import CATALOG, LanguageEntry

MATCH_THRESHOLD = 55

_SEPARATORS = re.compile(r"[_\-]+")
_PAREN_PART = re.compile(r"\([^)]*\)")
_STRAY_PARENS = re.compile(r"[()]")
_SPACES = re.compile(r"\s+")


def _squash(s: str) -> str:
    return _SPACES.sub(" ", s).strip()


def loose_query(text: str | None) -> str:
    """
    Brackets become spaces, the words inside them stay:
      "Chinese (Simplified)" -> "chinese simplified"
    """
    s = _SEPARATORS.sub(" ", str(text or "").lower())
    return _squash(_STRAY_PARENS.sub(" ", s))


def normalize_query(text: str | None) -> str:
    """
    Bracketed parts dropped:
      "Chinese_(Simplified)" -> "chinese", "  Scots-Gaelic " -> "scots gaelic"
    """
    s = _SEPARATORS.sub(" ", str(text or "").lower())
    s = _PAREN_PART.sub(" ", s)
    return _squash(_STRAY_PARENS.sub(" ", s))


def query_forms(text: str | None) -> Tuple[str, ...]:
    """Non-empty lookup forms, unbracketed first."""
    forms = []
    for form in (loose_query(text), normalize_query(text)):
        if form and form not in forms:
            forms.append(form)
    return tuple(forms)


def similarity(a: str, b: str) -> int:
    """0-100 similarity score."""
    return int(round(SequenceMatcher(None, a, b).ratio() * 100))


def best_lang_match(
    query: str | None,
    catalog: Iterable[LanguageEntry] = CATALOG,
    *,
    threshold: int = MATCH_THRESHOLD,
) -> Optional[LanguageMatch]:
    forms = query_forms(query)
    if not forms:
        return None
    entries = tuple(catalog)

    for q in forms:
        for entry in entries:
            if q in entry.aliases:
                return LanguageMatch(code=entry.code, name=entry.name, score=100)

    # fuzzy pass scores the bracket-free form when there is one
    q = forms[-1]
    best: Optional[LanguageMatch] = None
    for entry in entries:
        score = max(similarity(q, alias) for alias in entry.aliases)
        # strict ">" keeps the earliest entry on ties
        if best is None or score > best.score:
            best = LanguageMatch(code=entry.code, name=entry.name, score=score)

    if best is None or best.score < threshold:
        return None
    return best
