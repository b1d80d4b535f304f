"""Raw host input event records."""

from __future__ import annotations

from dataclasses import dataclass

from frameinput.api.input_state import InputCode


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """Raw key-down/key-up event."""

    event_type: str
    code: InputCode


@dataclass(frozen=True, slots=True)
class PointerEvent:
    """Raw pointer event in surface pixel coordinates."""

    event_type: str
    x: float
    y: float
    button: int


@dataclass(frozen=True, slots=True)
class WheelEvent:
    """Mouse wheel event; positive dy scrolls down."""

    x: float
    y: float
    dy: float


InputEvent = KeyEvent | PointerEvent | WheelEvent


__all__ = ["InputEvent", "KeyEvent", "PointerEvent", "WheelEvent"]
