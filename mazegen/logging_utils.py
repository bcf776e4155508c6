"""Event logger for generation and pathfinding.

Each call writes one line describing a single event: the level, a unix
timestamp, the event name and whatever measurements go with it. Plain mode
renders ``key=value`` pairs; JSON mode renders one compact object per line.
Error events go to stderr, the rest to stdout.

Usage:
    from mazegen.logging_utils import get_logger
    log = get_logger("maze")
    log.info(event="maze_generated", seed=42, floors=13)

``None`` values are left out. Enum members are written by value, booleans as
``true``/``false``. Reserved keys: level, ts, logger.

Environment:
    MAZEGEN_LOG_LEVEL   debug | info | warn | error (default info)
    MAZEGEN_LOG_JSON    1/true/yes/on for JSON lines
"""

from __future__ import annotations

import json
import os
import sys
import time
from enum import Enum
from typing import Any, Dict

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
_TRUTHY = ("1", "true", "yes", "on")


def env_flag(value: str | None) -> bool:
    return (value or "").strip().lower() in _TRUTHY


CURRENT_LEVEL = LEVELS.get(os.getenv("MAZEGEN_LOG_LEVEL", "info").strip().lower(), 20)
JSON_MODE = env_flag(os.getenv("MAZEGEN_LOG_JSON"))


def configure(level: str | None = None, json_mode: bool | None = None) -> None:
    """Change the threshold and/or output format at runtime."""
    global CURRENT_LEVEL, JSON_MODE
    if level is not None:
        key = level.strip().lower()
        if key not in LEVELS:
            raise ValueError(f"unknown log level: {level}")
        CURRENT_LEVEL = LEVELS[key]
    if json_mode is not None:
        JSON_MODE = bool(json_mode)


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def _record(level: str, fields: Dict[str, Any]) -> Dict[str, Any]:
    rec: Dict[str, Any] = {"level": level, "ts": int(time.time())}
    rec.update((k, _plain(v)) for k, v in fields.items() if v is not None and k not in rec)
    return rec


def _format(level: str, **fields) -> str:
    rec = _record(level, fields)
    if JSON_MODE:
        return json.dumps(rec, separators=(",", ":"), default=str)
    # values must stay single tokens so lines split cleanly on spaces
    return " ".join(f"{k}={str(v).replace(' ', '_')}" for k, v in rec.items())


class _Logger:
    def __init__(self, name: str | None = None):
        self.name = name or "mazegen"

    def _log(self, lvl: str, fields: Dict[str, Any]) -> None:
        if LEVELS[lvl] < CURRENT_LEVEL:
            return
        fields.setdefault("logger", self.name)
        print(_format(lvl, **fields), file=sys.stderr if lvl == "error" else sys.stdout)

    def debug(self, **fields):
        self._log("debug", fields)

    def info(self, **fields):
        self._log("info", fields)

    def warn(self, **fields):
        self._log("warn", fields)

    def error(self, **fields):
        self._log("error", fields)


_LOGGER_CACHE: Dict[str, _Logger] = {}


def get_logger(name: str) -> _Logger:
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("mazegen")
