"""Public input contracts."""

from frameinput.api.input_events import InputEvent, KeyEvent, PointerEvent, WheelEvent
from frameinput.api.input_snapshot import (
    InputSnapshot,
    KeyboardSnapshot,
    PointerSnapshot,
    create_empty_input_snapshot,
)
from frameinput.api.input_state import ORIGIN, InputCode, PointerPosition
from frameinput.api.logging import LoggingConfig

__all__ = [
    "InputCode",
    "InputEvent",
    "InputSnapshot",
    "KeyEvent",
    "KeyboardSnapshot",
    "LoggingConfig",
    "ORIGIN",
    "PointerEvent",
    "PointerPosition",
    "PointerSnapshot",
    "WheelEvent",
    "create_empty_input_snapshot",
]
