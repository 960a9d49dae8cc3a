from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from cs2chat.chat.dispatcher import ChatDispatcher
from cs2chat.chat.state import LastMessageMemory
from cs2chat.game.sink import CfgFileSink
from cs2chat.live.tail import LogTailer
from cs2chat.nlp.resolver import TranslationResolver
from cs2chat.nlp.translator.base import Translator
from cs2chat.nlp.translator.factory import get_translator


@dataclass(frozen=True)
class WatchServices:
    tailer: LogTailer
    translator: Translator
    dispatcher: ChatDispatcher


def build_watch_services(args: Any, logger: logging.Logger | None = None) -> WatchServices:
    tailer = LogTailer(str(args.log_path), poll_sec=max(10, int(args.poll_ms)) / 1000.0)
    translator = get_translator(str(args.translator), timeout=float(args.http_timeout_sec))
    resolver = TranslationResolver(
        translator,
        prefer_ru_for_cyrillic=bool(args.prefer_ru_for_cyrillic),
        logger=logger,
    )
    sink = CfgFileSink(
        cfg_dir=str(args.cfg_dir),
        bind_key=str(args.bind_key),
        cfg_name=str(args.cfg_name),
        press_delay_sec=max(0, int(args.press_delay_ms)) / 1000.0,
        logger=logger,
    )
    dispatcher = ChatDispatcher(
        resolver=resolver,
        sink=sink,
        memory=LastMessageMemory(),
        auto_translate=bool(args.auto_translate),
        auto_translate_target=str(args.auto_translate_target),
        logger=logger,
    )
    return WatchServices(tailer=tailer, translator=translator, dispatcher=dispatcher)
