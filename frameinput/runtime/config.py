"""Centralized environment-sourced configuration."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Mapping

from frameinput.api.logging import LoggingConfig

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True, slots=True)
class InputConfig:
    trace_enabled: bool
    wheel_step: float
    units_per_notch: int = 3


@dataclass(frozen=True, slots=True)
class LoopConfig:
    tick_rate: float
    max_ticks_per_frame: int
    max_frame_delta_seconds: float

    @property
    def step_seconds(self) -> float:
        return 1.0 / self.tick_rate


@dataclass(frozen=True, slots=True)
class FrameInputConfig:
    input: InputConfig
    loop: LoopConfig
    logging: LoggingConfig


class _EnvReader:
    """Read ``FRAMEINPUT_*`` settings, falling back to defaults on bad values.

    Blank values count as unset.
    """

    def __init__(self, env: Mapping[str, str] | None) -> None:
        self._env = os.environ if env is None else env

    def get(self, name: str) -> str | None:
        value = self._env.get(name)
        if value is None:
            return None
        value = str(value).strip()
        return value or None

    def flag(self, name: str, default: bool) -> bool:
        value = (self.get(name) or "").lower()
        if value in _TRUE_WORDS:
            return True
        if value in _FALSE_WORDS:
            return False
        return default

    def integer(self, name: str, default: int, *, minimum: int) -> int:
        try:
            value = int(self.get(name) or default)
        except ValueError:
            value = default
        return max(minimum, value)

    def number(self, name: str, default: float, *, minimum: float) -> float:
        try:
            value = float(self.get(name) or default)
        except ValueError:
            value = default
        if not math.isfinite(value):
            value = default
        return max(minimum, value)

    def choice(self, name: str, default: str, allowed: frozenset[str]) -> str:
        value = (self.get(name) or default).lower()
        return value if value in allowed else default


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level; ``FRAMEINPUT_LOG_LEVEL`` wins over ``LOG_LEVEL``."""
    reader = _EnvReader(env)
    value = reader.get("FRAMEINPUT_LOG_LEVEL") or reader.get("LOG_LEVEL") or default
    return value.upper()


def load_frameinput_config(*, env: Mapping[str, str] | None = None) -> FrameInputConfig:
    reader = _EnvReader(env)
    return FrameInputConfig(
        input=InputConfig(
            trace_enabled=reader.flag("FRAMEINPUT_INPUT_TRACE_ENABLED", False),
            wheel_step=reader.number("FRAMEINPUT_WHEEL_STEP", 100.0, minimum=1.0),
            units_per_notch=reader.integer("FRAMEINPUT_WHEEL_UNITS_PER_NOTCH", 3, minimum=1),
        ),
        loop=LoopConfig(
            tick_rate=reader.number("FRAMEINPUT_TICK_RATE", 60.0, minimum=1.0),
            max_ticks_per_frame=reader.integer("FRAMEINPUT_MAX_TICKS_PER_FRAME", 8, minimum=1),
            max_frame_delta_seconds=reader.number(
                "FRAMEINPUT_MAX_FRAME_DELTA", 0.25, minimum=0.0
            ),
        ),
        logging=LoggingConfig(
            level_name=resolve_log_level_name(env=env),
            console_format=reader.choice(
                "FRAMEINPUT_LOG_FORMAT", "text", frozenset({"text", "json"})
            ),
            file_path=reader.get("FRAMEINPUT_LOG_FILE"),
            file_format="json",
        ),
    )


__all__ = [
    "FrameInputConfig",
    "InputConfig",
    "LoopConfig",
    "load_frameinput_config",
    "resolve_log_level_name",
]
