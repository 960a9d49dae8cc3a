from __future__ import annotations

import asyncio
import logging
from typing import Any

from cs2chat.app.logging_setup import log_event
from cs2chat.app.services import WatchServices, build_watch_services
from cs2chat.chat.dispatcher import ChatDispatcher


async def _handle_line(dispatcher: ChatDispatcher, line: str, logger: logging.Logger | None = None) -> None:
    try:
        await dispatcher.handle_line(line)
    except Exception:
        if logger is not None:
            logger.exception("line_handling_failed", extra={"line": line})


def _spawn_line_tasks(
    dispatcher: ChatDispatcher,
    lines: list[str],
    tasks: "set[asyncio.Task[None]]",
    logger: logging.Logger | None = None,
) -> int:
    # One task per line: a slow translation must not hold back later lines.
    spawned = 0
    for line in lines:
        if not line.strip():
            continue
        task = asyncio.create_task(_handle_line(dispatcher, line, logger))
        tasks.add(task)
        task.add_done_callback(tasks.discard)
        spawned += 1
    return spawned


async def run_watch(
    args: Any,
    logger: logging.Logger | None = None,
    *,
    stop_event: asyncio.Event | None = None,
    services: WatchServices | None = None,
) -> None:
    services = services or build_watch_services(args, logger)
    tasks: "set[asyncio.Task[None]]" = set()
    lines_seen = 0

    log_event(
        logger,
        logging.INFO,
        "watch_start",
        log_path=str(services.tailer.path),
        translator=services.translator.name,
        auto_translate=bool(args.auto_translate),
    )
    try:
        async for batch in services.tailer.batches(stop_event):
            lines_seen += len(batch)
            _spawn_line_tasks(services.dispatcher, batch, tasks, logger)
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
    finally:
        for task in list(tasks):
            task.cancel()
        await services.translator.aclose()
        log_event(logger, logging.INFO, "watch_stop", lines_seen=lines_seen, pending=len(tasks))
