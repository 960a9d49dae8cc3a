# cs2chat/nlp/languages.py
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, FrozenSet, Tuple

LANG_NAMES: Dict[str, str] = {
    "af": "Afrikaans", "sq": "Albanian", "am": "Amharic", "ar": "Arabic", "hy": "Armenian",
    "az": "Azerbaijani", "eu": "Basque", "be": "Belarusian", "bn": "Bengali", "bs": "Bosnian",
    "bg": "Bulgarian", "ca": "Catalan", "ceb": "Cebuano", "ny": "Chichewa", "zh": "Chinese",
    "zh_cn": "Chinese (Simplified)", "zh_tw": "Chinese (Traditional)", "co": "Corsican",
    "hr": "Croatian", "cs": "Czech", "da": "Danish", "nl": "Dutch", "en": "English",
    "eo": "Esperanto", "et": "Estonian", "tl": "Filipino", "fi": "Finnish", "fr": "French",
    "fy": "Frisian", "gl": "Galician", "ka": "Georgian", "de": "German", "el": "Greek",
    "gu": "Gujarati", "ht": "Haitian Creole", "ha": "Hausa", "haw": "Hawaiian", "he": "Hebrew",
    "hi": "Hindi", "hmn": "Hmong", "hu": "Hungarian", "is": "Icelandic", "ig": "Igbo",
    "id": "Indonesian", "ga": "Irish", "it": "Italian", "ja": "Japanese", "jw": "Javanese",
    "kn": "Kannada", "kk": "Kazakh", "km": "Khmer", "rw": "Kinyarwanda", "ko": "Korean",
    "ku": "Kurdish (Kurmanji)", "ky": "Kyrgyz", "lo": "Lao", "la": "Latin", "lv": "Latvian",
    "lt": "Lithuanian", "lb": "Luxembourgish", "mk": "Macedonian", "mg": "Malagasy",
    "ms": "Malay", "ml": "Malayalam", "mt": "Maltese", "mi": "Maori", "mr": "Marathi",
    "mn": "Mongolian", "my": "Myanmar (Burmese)", "ne": "Nepali", "no": "Norwegian",
    "or": "Odia (Oriya)", "ps": "Pashto", "fa": "Persian", "pl": "Polish", "pt": "Portuguese",
    "pa": "Punjabi", "ro": "Romanian", "ru": "Russian", "sm": "Samoan", "gd": "Scots Gaelic",
    "sr": "Serbian", "st": "Sesotho", "sn": "Shona", "sd": "Sindhi", "si": "Sinhala",
    "sk": "Slovak", "sl": "Slovenian", "so": "Somali", "es": "Spanish", "su": "Sundanese",
    "sw": "Swahili", "sv": "Swedish", "tg": "Tajik", "ta": "Tamil", "tt": "Tatar", "te": "Telugu",
    "th": "Thai", "tr": "Turkish", "tk": "Turkmen", "uk": "Ukrainian", "ur": "Urdu",
    "ug": "Uyghur", "uz": "Uzbek", "vi": "Vietnamese", "cy": "Welsh", "xh": "Xhosa",
    "yi": "Yiddish", "yo": "Yoruba", "zu": "Zulu",
}

# Common alternate spellings that the names alone do not cover.
EXTRA_ALIASES: Dict[str, Tuple[str, ...]] = {
    "zh_cn": ("simplified chinese", "chinese simplified"),
    "zh_tw": ("traditional chinese", "chinese traditional"),
    "ga": ("irish gaelic",),
    "gd": ("scottish gaelic", "scots gaelic"),
    "jw": ("javanese",),
    "my": ("burmese",),
    "tl": ("tagalog",),
    "pt": ("brazilian portuguese", "brasilianisch"),
    "he": ("ivrit",),
}

_PARENS = re.compile(r"\s*\([^)]*\)\s*")
_BRACKETS = re.compile(r"[()]")


@dataclass(frozen=True)
class LanguageEntry:
    code: str
    name: str
    aliases: FrozenSet[str]


def _build_catalog() -> Tuple[LanguageEntry, ...]:
    entries = []
    for code, name in LANG_NAMES.items():
        bare = _PARENS.sub(" ", name).strip()
        # "Kurdish (Kurmanji)" -> "kurdish kurmanji"
        unbracketed = " ".join(_BRACKETS.sub(" ", name).split())
        aliases = {name.lower(), bare.lower(), unbracketed.lower(), code.lower()}
        aliases.update(EXTRA_ALIASES.get(code, ()))
        entries.append(LanguageEntry(code=code, name=name, aliases=frozenset(aliases)))
    return tuple(entries)


# Iteration order is the order of LANG_NAMES and decides fuzzy-match ties.
CATALOG: Tuple[LanguageEntry, ...] = _build_catalog()


def lang_name(code: str | None) -> str:
    """Readable name for a language code; unknown codes render uppercased."""
    key = (code or "").strip().lower()
    return LANG_NAMES.get(key) or key.upper() or "UNKNOWN"
