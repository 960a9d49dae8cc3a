# cs2chat/chat/parser.py
from __future__ import annotations

import re
from typing import Optional

from cs2chat.contracts import Channel, ChatEvent

# "10/26 18:49:20  [CT] Player: hello" - anything may precede the channel tag
_CHAT_LINE = re.compile(r"\[(CT|T|ALL)\]\s+([^:]+):\s(.+)")


def parse_chat_line(line: str) -> Optional[ChatEvent]:
    m = _CHAT_LINE.search(line or "")
    if m is None:
        return None
    channel, sender, message = m.groups()
    return ChatEvent(channel=Channel(channel), sender=sender.strip(), message=message.strip())
