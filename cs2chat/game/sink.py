from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from cs2chat.app.logging_setup import log_event

CFG_HEADER = "// Auto-generated by CS2 Chat Translator\n"


def escape_for_cfg(text: str) -> str:
    """Escape characters that break a quoted CFG `say` argument."""
    return text.replace("\\", "\\\\").replace('"', '\\"')


def render_say_command(message: str, team: bool) -> str:
    verb = "say_team" if team else "say"
    return f'{verb} "{escape_for_cfg(message)}"'


class CfgFileSink:
    """
    Delivers chat messages into the game through a cfg file:
    the message is written as a `say`/`say_team` command, then the key bound
    to `exec <cfg_name>` is pressed with xdotool.
    """

    def __init__(
        self,
        *,
        cfg_dir: str | Path,
        bind_key: str = "l",
        cfg_name: str = "chat_reader.cfg",
        press_delay_sec: float = 0.15,
        logger: logging.Logger | None = None,
    ) -> None:
        if press_delay_sec < 0:
            raise ValueError("press_delay_sec must be >= 0")
        self.cfg_path = Path(cfg_dir) / cfg_name
        self.bind_key = bind_key
        self.press_delay_sec = float(press_delay_sec)
        self.logger = logger

    def write(self, message: str, team: bool) -> str:
        cmd = render_say_command(message, team)
        self.cfg_path.write_text(f"{CFG_HEADER}{cmd}\n", encoding="utf-8")
        log_event(self.logger, logging.INFO, "sink_write", team=team, chars=len(message))
        return cmd

    async def press_bind_key(self) -> bool:
        try:
            proc = await asyncio.create_subprocess_exec(
                "xdotool",
                "key",
                self.bind_key,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            log_event(self.logger, logging.WARNING, "bind_key_failed", key=self.bind_key, error=str(e))
            return False
        _, stderr = await proc.communicate()
        if proc.returncode != 0:
            log_event(
                self.logger,
                logging.WARNING,
                "bind_key_failed",
                key=self.bind_key,
                returncode=proc.returncode,
                error=(stderr or b"").decode("utf-8", "replace").strip(),
            )
            return False
        return True

    async def deliver(self, message: str, team: bool) -> None:
        self.write(message, team)
        # let the game see the new file before it is exec'd
        await asyncio.sleep(self.press_delay_sec)
        await self.press_bind_key()
