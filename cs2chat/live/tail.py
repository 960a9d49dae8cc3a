from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import AsyncIterator, List, Optional


class LogTailer:
    """
    Follows an append-only text file (CS2 console.log).
    Yields batches of complete lines appended since the previous poll;
    bytes already seen are never re-read.
    """

    def __init__(self, path: str | Path, *, poll_sec: float = 0.5) -> None:
        if poll_sec <= 0:
            raise ValueError("poll_sec must be > 0")
        self.path = Path(path)
        self.poll_sec = float(poll_sec)
        self._offset: Optional[int] = None
        self._pending = b""

    def _size(self) -> int:
        try:
            return os.stat(self.path).st_size
        except FileNotFoundError:
            return 0

    def seek_end(self) -> None:
        self._offset = self._size()
        self._pending = b""

    def read_new_lines(self) -> List[str]:
        if self._offset is None:
            self.seek_end()
            return []
        size = self._size()
        if size < self._offset:
            # truncated or replaced: continue from the new end
            self._offset = size
            self._pending = b""
            return []
        if size == self._offset:
            return []

        with self.path.open("rb") as f:
            f.seek(self._offset)
            data = f.read(size - self._offset)
        self._offset += len(data)

        buf = self._pending + data
        *complete, self._pending = buf.split(b"\n")
        return [raw.decode("utf-8", errors="replace").rstrip("\r") for raw in complete]

    async def batches(self, stop_event: asyncio.Event | None = None) -> AsyncIterator[List[str]]:
        if self._offset is None:
            self.seek_end()
        while stop_event is None or not stop_event.is_set():
            lines = self.read_new_lines()
            if lines:
                yield lines
            await asyncio.sleep(self.poll_sec)
