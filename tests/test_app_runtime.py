from __future__ import annotations

import asyncio
import logging
from argparse import Namespace
from pathlib import Path

from cs2chat.app import runtime as app_runtime
from cs2chat.app.services import build_watch_services
from cs2chat.game.sink import CfgFileSink
from cs2chat.nlp.translator.stub import StubTranslator


def _args(tmp_path: Path, **overrides) -> Namespace:
    values = dict(
        log_path=str(tmp_path / "console.log"),
        cfg_dir=str(tmp_path),
        cfg_name="chat_reader.cfg",
        bind_key="l",
        translator="stub",
        http_timeout_sec=5.0,
        prefer_ru_for_cyrillic=True,
        auto_translate=False,
        auto_translate_target="en",
        poll_ms=10,
        press_delay_ms=0,
    )
    values.update(overrides)
    return Namespace(**values)


def test_build_watch_services(tmp_path: Path) -> None:
    services = build_watch_services(_args(tmp_path, poll_ms=250, press_delay_ms=150, bind_key="k"))
    assert isinstance(services.translator, StubTranslator)
    assert services.dispatcher.resolver.translator is services.translator
    sink = services.dispatcher.sink
    assert isinstance(sink, CfgFileSink)
    assert services.tailer.poll_sec == 0.25
    assert sink.press_delay_sec == 0.15
    assert sink.bind_key == "k"
    assert sink.cfg_path == tmp_path / "chat_reader.cfg"


def test_handle_line_logs_and_swallows_errors(caplog) -> None:
    class _Boom:
        async def handle_line(self, line: str):
            raise RuntimeError("boom")

    logger = logging.getLogger("cs2chat.test_runtime")
    with caplog.at_level(logging.ERROR, logger="cs2chat.test_runtime"):
        asyncio.run(app_runtime._handle_line(_Boom(), "[CT] A: hi", logger))
    assert [r.getMessage() for r in caplog.records] == ["line_handling_failed"]


def test_run_watch_answers_commands_from_appended_lines(tmp_path: Path, monkeypatch) -> None:
    pressed: list[str] = []

    async def fake_press(self) -> bool:
        pressed.append(self.cfg_path.read_text(encoding="utf-8"))
        return True

    monkeypatch.setattr(CfgFileSink, "press_bind_key", fake_press)
    log = tmp_path / "console.log"
    log.write_text("[CT] Old: tm_de hello\n", encoding="utf-8")
    args = _args(tmp_path)

    async def _run() -> None:
        stop = asyncio.Event()
        task = asyncio.create_task(app_runtime.run_watch(args, stop_event=stop, services=build_watch_services(args)))
        await asyncio.sleep(0.05)
        with log.open("a", encoding="utf-8") as f:
            f.write("10/26 18:49:20  [CT] Alice: tm_de hello friend\n")
            f.write("not a chat line\n")
        for _ in range(200):
            if pressed:
                break
            await asyncio.sleep(0.01)
        stop.set()
        await asyncio.wait_for(task, timeout=2)

    asyncio.run(_run())
    assert len(pressed) == 1
    assert 'say_team "Alice said - Hallo Freund - (from English)"' in pressed[0]
