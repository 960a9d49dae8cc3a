from __future__ import annotations

import pytest

from cs2chat.chat.parser import parse_chat_line
from cs2chat.contracts import Channel, ChatEvent


def test_parse_team_line_with_timestamp_prefix() -> None:
    event = parse_chat_line("10/26 18:49:20  [CT] Alice: tm_de hello friend")
    assert event == ChatEvent(channel=Channel.TEAM_CT, sender="Alice", message="tm_de hello friend")
    assert event.channel.is_team


def test_parse_global_line_keeps_sender_spaces_and_trims() -> None:
    event = parse_chat_line("[ALL] Some Guy :  hello there  ")
    assert event is not None
    assert event.channel == Channel.ALL
    assert not event.channel.is_team
    assert event.sender == "Some Guy"
    assert event.message == "hello there"


def test_parse_passes_message_colons_and_quotes_through() -> None:
    event = parse_chat_line('[T] Dan: time: 12:30 "go" \\ now')
    assert event is not None
    assert event.channel == Channel.TEAM_T
    assert event.sender == "Dan"
    assert event.message == 'time: 12:30 "go" \\ now'


@pytest.mark.parametrize(
    "line",
    [
        "",
        "Loaded map de_dust2",
        "[SPEC] Eve: hi",
        "[ct] Alice: lowercase channel",
        "[CT]Alice: no space after tag",
        "[CT] Alice no colon",
        "[CT] Alice:",
    ],
)
def test_parse_rejects_non_chat_lines(line: str) -> None:
    assert parse_chat_line(line) is None


def test_parse_whitespace_message_gives_empty_message() -> None:
    event = parse_chat_line("[ALL] Bob:    ")
    assert event is not None
    assert event.message == ""
