from __future__ import annotations

import argparse
import copy
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir

APP_NAME = "cs2-chat-translator"

# Typical Steam install; only a starting point, users override it.
GUESSED_GAME_ROOT = (
    Path.home()
    / ".local/share/Steam/steamapps/common/Counter-Strike Global Offensive/game/csgo"
)

DEFAULTS: dict[str, Any] = {
    "log_path": str(GUESSED_GAME_ROOT / "console.log"),
    "cfg_dir": str(GUESSED_GAME_ROOT / "cfg"),
    "bind_key": "l",
    "cfg_name": "chat_reader.cfg",
    "translator": "google",
    "auto_translate": True,
    "auto_translate_target": "en",
    "prefer_ru_for_cyrillic": True,
    "poll_ms": 500,
    "press_delay_ms": 150,
    "http_timeout_sec": 10.0,
    "debug": False,
}
CONFIG_KEYS: tuple[str, ...] = tuple(DEFAULTS.keys())

# Blank values for these fall back to the defaults.
_REQUIRED_KEYS: tuple[str, ...] = ("log_path", "cfg_dir", "bind_key")


@dataclass(frozen=True)
class AppPaths:
    config_dir: Path
    config_path: Path


def app_paths() -> AppPaths:
    config_dir = Path(user_config_dir(APP_NAME, appauthor=False))
    return AppPaths(config_dir=config_dir, config_path=config_dir / "config.json")


def _load_json_dict(path: Path) -> dict[str, Any]:
    # Accept UTF-8 with or without BOM for hand-edited config files.
    text = path.read_text(encoding="utf-8-sig").strip()
    if not text:
        return {}
    loaded = json.loads(text)
    if not isinstance(loaded, dict):
        raise ValueError(f"config must be a JSON object: {path}")
    return loaded


def _write_json_dict(path: Path, payload: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)
        f.write("\n")


def _known_only(payload: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key in CONFIG_KEYS:
        if key in payload:
            out[key] = payload[key]
    return out


def _merged(*layers: dict[str, Any]) -> dict[str, Any]:
    out = copy.deepcopy(DEFAULTS)
    for layer in layers:
        out.update(_known_only(layer))
    for key in _REQUIRED_KEYS:
        if not out.get(key):
            out[key] = DEFAULTS[key]
    return out


def load_default_config() -> dict[str, Any]:
    return copy.deepcopy(DEFAULTS)


def ensure_user_config_exists(defaults: dict[str, Any] | None = None) -> Path:
    paths = app_paths()
    if paths.config_path.exists():
        return paths.config_path
    _write_json_dict(paths.config_path, defaults or load_default_config())
    return paths.config_path


def load_user_config(config_path: str | None = None) -> tuple[dict[str, Any], Path]:
    if config_path:
        chosen = Path(config_path)
        if not chosen.exists():
            raise SystemExit(f"Config file not found: {chosen}")
    else:
        chosen = ensure_user_config_exists()
    return _merged(_load_json_dict(chosen)), chosen


def save_user_config(values: dict[str, Any], config_path: str | None = None) -> tuple[dict[str, Any], Path]:
    path = Path(config_path) if config_path else ensure_user_config_exists()
    existing = _load_json_dict(path) if path.exists() else {}
    merged = _merged(existing, values)
    _write_json_dict(path, merged)
    return merged, path


def update_config_key(key: str, value: Any, config_path: str | None = None) -> tuple[dict[str, Any], Path]:
    if key not in CONFIG_KEYS:
        raise KeyError(f"unknown config key: {key}")
    return save_user_config({key: value}, config_path=config_path)


def resolve_defaults(config_path: str | None = None) -> tuple[dict[str, Any], Path]:
    return load_user_config(config_path=config_path)


IN_GAME_HELP = """\
in-game commands:
  tm_<lang> TEXT    translate TEXT to <lang> (e.g. tm_de hello)
  _tl [lang]        translate last message to [lang] (default en)
  code_<language>   show helper like 'For French use tm_fr'
"""


def parser_with_defaults(defaults: dict[str, Any]) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="cs2-chat-translator",
        description="Watch CS2 console.log, translate chat and answer in-game commands.",
        epilog=IN_GAME_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--config", default=None, help="JSON config path (CLI flags override config)")

    setup = p.add_mutually_exclusive_group()
    setup.add_argument("--init-config", action="store_true", help="create/refresh config.json and exit")
    setup.add_argument("--set-log-path", metavar="PATH", default=None, help="store console.log path and exit")
    setup.add_argument("--set-cfg-dir", metavar="PATH", default=None, help="store CS2 cfg directory and exit")
    setup.add_argument("--set-bind-key", metavar="KEY", default=None, help="store bind key and exit")

    p.add_argument("--translator", default=defaults["translator"], help="google | stub")
    p.add_argument(
        "--auto-translate",
        action=argparse.BooleanOptionalAction,
        default=defaults["auto_translate"],
        help="print console translations of normal chat messages",
    )
    p.add_argument(
        "--auto-translate-target",
        default=defaults["auto_translate_target"],
        help="target language for console translations",
    )
    p.add_argument(
        "--prefer-ru-for-cyrillic",
        action=argparse.BooleanOptionalAction,
        default=defaults["prefer_ru_for_cyrillic"],
        help="retry Cyrillic text as Russian when detection disagrees",
    )
    p.add_argument("--poll-ms", type=int, default=defaults["poll_ms"], help="console.log poll interval (ms)")
    p.add_argument(
        "--press-delay-ms",
        type=int,
        default=defaults["press_delay_ms"],
        help="delay between cfg write and bind key press (ms)",
    )
    p.add_argument("--debug", action="store_true", help="verbose logging")
    return p


def resolve_args(argv: list[str] | None = None) -> argparse.Namespace:
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config", default=None)
    pre_args, _ = pre.parse_known_args(argv)
    defaults, _ = resolve_defaults(config_path=pre_args.config)
    parser = parser_with_defaults(defaults)
    args = parser.parse_args(argv)
    for key in ("log_path", "cfg_dir", "bind_key", "cfg_name", "http_timeout_sec"):
        setattr(args, key, defaults[key])
    if defaults.get("debug"):
        args.debug = True
    return args
