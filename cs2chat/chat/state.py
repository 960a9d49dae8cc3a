from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from cs2chat.contracts import Channel, ChatEvent


@dataclass(frozen=True)
class LastMessage:
    sender: str
    message: str
    channel: Channel


@dataclass
class LastMessageMemory:
    """
    Most recent normal chat message, read by `_tl`.
    Overwritten by every qualifying message, never cleared.
    """
    last: Optional[LastMessage] = None

    def remember(self, event: ChatEvent) -> None:
        self.last = LastMessage(sender=event.sender, message=event.message, channel=event.channel)

    def recall(self) -> Optional[LastMessage]:
        return self.last
