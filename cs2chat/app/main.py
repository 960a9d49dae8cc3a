from __future__ import annotations

import asyncio
import traceback
from pathlib import Path

from cs2chat.app.config import app_paths, resolve_args, save_user_config, update_config_key
from cs2chat.app.diagnostics import check_startup_paths, hint_for_exception, summarize_exception
from cs2chat.app.logging_setup import setup_app_logger
from cs2chat.app.runtime import run_watch
from cs2chat.ui.console import banner_lines


def _print_effective(path: Path, values: dict) -> None:
    print(f"  {path}")
    print("Effective values:")
    print(f"  log_path: {values['log_path']}")
    print(f"  cfg_dir : {values['cfg_dir']}")
    print(f"  bind_key: {values['bind_key']}")


def _run_setup_command(args) -> bool:
    """Handle the config-editing flags; True when one ran."""
    if args.init_config:
        merged, path = save_user_config({}, config_path=args.config)
        print("Config initialized/updated:")
        _print_effective(path, merged)
        return True

    updates = (
        ("log_path", str(Path(args.set_log_path).resolve()) if args.set_log_path else None),
        ("cfg_dir", str(Path(args.set_cfg_dir).resolve()) if args.set_cfg_dir else None),
        ("bind_key", args.set_bind_key),
    )
    for key, value in updates:
        if value is None:
            continue
        merged, path = update_config_key(key, value, config_path=args.config)
        print(f"Config updated ({key}):")
        print(f"  {path}")
        print(f"  {key}: {merged[key]}")
        return True
    return False


def _fail(message: str) -> int:
    summary = summarize_exception(message)
    print(f"Error: {summary}")
    print(f"Hint: {hint_for_exception(summary)}")
    return 1


def main(argv: list[str] | None = None) -> int:
    try:
        args = resolve_args(argv)
    except SystemExit as e:
        # argparse exits for --help and usage errors; load_user_config for a missing file
        if isinstance(e.code, str):
            return _fail(e.code)
        return int(e.code or 0)
    except (ValueError, OSError) as e:
        return _fail(f"{type(e).__name__}: {e}")

    if _run_setup_command(args):
        return 0

    logger, _, log_file = setup_app_logger(debug=bool(args.debug))
    logger.info("app_start", extra={"config_path": str(args.config or app_paths().config_path), "argv": argv or []})

    problems = check_startup_paths(args)
    if problems:
        for problem in problems:
            logger.error("startup_failed", extra={"detail": problem})
        return _fail(problems[0])

    for line in banner_lines(
        log_path=str(args.log_path),
        auto_translate=bool(args.auto_translate),
        target=str(args.auto_translate_target),
    ):
        print(line)

    try:
        asyncio.run(run_watch(args, logger))
    except KeyboardInterrupt:
        logger.info("app_quit")
        return 0
    except Exception:
        err = traceback.format_exc()
        logger.exception("watch_crash")
        print(f"See log: {log_file}")
        return _fail(err)
    return 0
