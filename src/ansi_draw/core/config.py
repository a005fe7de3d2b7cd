"""Runtime settings with environment overrides."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional


ENV_PREFIX = "ANSI_DRAW_"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class DrawConfig:
    """Settings shared by a Screen and its collaborators."""
    bottom_row: int = 9998      # 0-based row used by Cursor.bot()
    default_cols: int = 80      # fallback when the terminal size is unknown
    default_rows: int = 24
    auto_flush: bool = False    # flush after every write
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> DrawConfig:
        """Build a config from ANSI_DRAW_* environment variables."""
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            bottom_row=_int(env, "BOTTOM_ROW", defaults.bottom_row),
            default_cols=_int(env, "DEFAULT_COLS", defaults.default_cols),
            default_rows=_int(env, "DEFAULT_ROWS", defaults.default_rows),
            auto_flush=_bool(env, "AUTO_FLUSH", defaults.auto_flush),
            log_level=_level(env, "LOG_LEVEL", defaults.log_level),
        )


def _int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(ENV_PREFIX + name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{ENV_PREFIX}{name} must be non-negative, got {value}")
    return value


def _bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(ENV_PREFIX + name)
    if raw is None:
        return default
    lowered = raw.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise ValueError(f"{ENV_PREFIX}{name} must be a boolean, got {raw!r}")


def _level(env: Mapping[str, str], name: str, default: str) -> str:
    raw = env.get(ENV_PREFIX + name)
    if raw is None:
        return default
    level = raw.strip().upper()
    # getLevelName maps known names to their number
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{ENV_PREFIX}{name} must be a logging level name, got {raw!r}")
    return level
