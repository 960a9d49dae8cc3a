# cs2chat/chat/dispatcher.py
from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

from cs2chat.app.logging_setup import log_event
from cs2chat.chat.commands import (
    Command,
    LookupCode,
    Plain,
    TranslateInline,
    TranslateLast,
    classify,
    is_filler,
)
from cs2chat.chat.parser import parse_chat_line
from cs2chat.chat.state import LastMessageMemory
from cs2chat.contracts import ChatEvent
from cs2chat.nlp.lang_match import best_lang_match, query_forms
from cs2chat.nlp.resolver import TranslationResolver, source_name
from cs2chat.ui.console import format_auto_translation, format_chat_line, format_kv

NO_RECENT_MESSAGE = "No recent message to translate."
NO_MATCH_HINT = 'No close language match for "{query}". Try tm_en, tm_de, tm_fr, tm_es, tm_ru, tm_pt...'


class OutboundSink(Protocol):
    async def deliver(self, message: str, team: bool) -> None:
        ...


def format_reply(sender: str, translated: str, source: str) -> str:
    return f"{sender} said - {translated} - (from {source})"


class ChatDispatcher:
    """
    Routes chat events to in-game commands or the console auto-translation.

    Command priority (first match wins): _tl, code, tm_, plain message.
    Only plain messages with real content update the `_tl` memory, and they
    never produce an in-game reply.
    """

    def __init__(
        self,
        *,
        resolver: TranslationResolver,
        sink: OutboundSink,
        memory: LastMessageMemory | None = None,
        auto_translate: bool = True,
        auto_translate_target: str = "en",
        echo: Optional[Callable[[str], None]] = print,
        logger: logging.Logger | None = None,
    ) -> None:
        self.resolver = resolver
        self.sink = sink
        self.memory = memory if memory is not None else LastMessageMemory()
        self.auto_translate = auto_translate
        self.auto_translate_target = (auto_translate_target or "en").lower()
        self.echo = echo
        self.logger = logger

    def _echo(self, text: str) -> None:
        if self.echo is not None:
            self.echo(text)

    async def handle_line(self, line: str) -> Optional[Command]:
        event = parse_chat_line(line)
        log_event(self.logger, logging.DEBUG, "line_received", line=line, chat=event is not None)
        if event is None:
            return None
        self._echo(format_chat_line(event))
        return await self.dispatch(event)

    async def dispatch(self, event: ChatEvent) -> Command:
        cmd = classify(event.message)
        if isinstance(cmd, Plain) and not is_filler(cmd.text):
            self.memory.remember(event)
        log_event(
            self.logger,
            logging.DEBUG,
            "chat_event",
            channel=event.channel.value,
            sender=event.sender,
            command=type(cmd).__name__,
        )

        if isinstance(cmd, TranslateLast):
            await self._handle_tl(event, cmd)
        elif isinstance(cmd, LookupCode):
            await self._handle_code(event, cmd)
        elif isinstance(cmd, TranslateInline):
            await self._handle_tm(event, cmd)
        else:
            await self._auto_translate_to_console(event, cmd)
        return cmd

    async def _handle_tl(self, event: ChatEvent, cmd: TranslateLast) -> None:
        team = event.channel.is_team
        last = self.memory.recall()
        if last is None:
            await self.sink.deliver(NO_RECENT_MESSAGE, team)
            self._echo(NO_RECENT_MESSAGE)
            log_event(self.logger, logging.INFO, "command_tl_empty", sender=event.sender)
            return

        res = await self.resolver.resolve(last.message, cmd.target)
        original = source_name(res)
        await self.sink.deliver(format_reply(last.sender, res.translated_text, original), team)

        self._echo(f"_tl -> {cmd.target}")
        self._echo(format_kv("from", original))
        self._echo(format_kv("player", last.sender))
        self._echo(format_kv("text", res.translated_text))
        log_event(
            self.logger,
            logging.INFO,
            "command_tl",
            target=cmd.target,
            source=res.source_lang,
            overridden=res.overridden,
        )

    async def _handle_code(self, event: ChatEvent, cmd: LookupCode) -> None:
        if not query_forms(cmd.query):
            log_event(self.logger, logging.DEBUG, "command_code_empty", sender=event.sender)
            return

        match = best_lang_match(cmd.query)
        if match is not None:
            reply = f"For {match.name} use tm_{match.code}"
            self._echo(f"code -> {reply} (score {match.score})")
        else:
            reply = NO_MATCH_HINT.format(query=cmd.query)
            self._echo(reply)
        await self.sink.deliver(reply, event.channel.is_team)
        log_event(
            self.logger,
            logging.INFO,
            "command_code",
            query=cmd.query,
            code=match.code if match else None,
            score=match.score if match else None,
        )

    async def _handle_tm(self, event: ChatEvent, cmd: TranslateInline) -> None:
        if not cmd.target or not cmd.text:
            log_event(
                self.logger,
                logging.DEBUG,
                "command_tm_ignored",
                target=cmd.target,
                has_text=bool(cmd.text),
            )
            return

        res = await self.resolver.resolve(cmd.text, cmd.target)
        original = source_name(res)
        await self.sink.deliver(format_reply(event.sender, res.translated_text, original), event.channel.is_team)

        self._echo(f"tm_{cmd.target} -> sent to chat")
        self._echo(format_kv("from", original))
        self._echo(format_kv("text", res.translated_text))
        log_event(
            self.logger,
            logging.INFO,
            "command_tm",
            target=cmd.target,
            source=res.source_lang,
            overridden=res.overridden,
        )

    async def _auto_translate_to_console(self, event: ChatEvent, cmd: Plain) -> None:
        if not self.auto_translate or is_filler(cmd.text):
            return

        target = self.auto_translate_target
        res = await self.resolver.resolve(cmd.text, target)
        if res.source_lang.lower() == target:
            return
        self._echo(format_auto_translation(event, source_name(res), target, res.translated_text))
