from __future__ import annotations

import pytest

from cs2chat.chat import commands
from cs2chat.chat.commands import (
    LookupCode,
    Plain,
    TranslateInline,
    TranslateLast,
    classify,
    is_filler,
)


def test_tl_defaults_to_english() -> None:
    assert classify("_tl") == TranslateLast(target="en")


def test_tl_takes_second_token_lowercased() -> None:
    assert classify("_TL  DE extra words") == TranslateLast(target="de")


def test_tl_requires_word_boundary() -> None:
    assert classify("_tlx de") == Plain(text="_tlx de")


def test_code_with_underscore_or_space() -> None:
    assert classify("code_french") == LookupCode(query="french")
    assert classify("CODE   brasil") == LookupCode(query="brasil")


def test_code_without_query_is_still_a_lookup() -> None:
    assert classify("code_") == LookupCode(query="")


def test_code_needs_separator() -> None:
    assert classify("codes are fun") == Plain(text="codes are fun")
    assert classify("code") == Plain(text="code")


def test_tm_with_text() -> None:
    assert classify("tm_de hello friend") == TranslateInline(target="de", text="hello friend")
    assert classify("TM_ZH_CN  ni hao ") == TranslateInline(target="zh_cn", text="ni hao")


def test_tm_without_text_is_recognized() -> None:
    assert classify("tm_fr") == TranslateInline(target="fr", text="")


def test_bare_tm_is_a_command_without_code() -> None:
    assert classify("tm_ hello") == TranslateInline(target="", text="hello")
    assert classify("tm_") == TranslateInline(target="", text="")


def test_tm_with_unusable_code_is_plain() -> None:
    assert classify("tm_german hello") == Plain(text="tm_german hello")
    assert classify("tm_x hi") == Plain(text="tm_x hi")
    assert classify("tm_de1 hi") == Plain(text="tm_de1 hi")


def test_priority_tl_beats_everything() -> None:
    assert isinstance(classify("_tl code_french"), TranslateLast)


def test_rules_are_checked_in_priority_order() -> None:
    names = [rule.__name__ for rule in commands.RULES]
    assert names == ["_translate_last", "_lookup_code", "_translate_inline"]


def test_plain_message() -> None:
    assert classify("  gg wp  ") == Plain(text="gg wp")


@pytest.mark.parametrize("text,expected", [("", True), ("   ", True), ("...", True), (". .", True), ("ok.", False)])
def test_is_filler(text: str, expected: bool) -> None:
    assert is_filler(text) is expected
