"""Pointer buttons, position, motion and scroll state polled by the game loop."""

from __future__ import annotations

import logging
from threading import Lock

from frameinput.api.input_snapshot import PointerSnapshot
from frameinput.api.input_state import ORIGIN, InputCode, PointerPosition
from frameinput.input.button_table import ButtonTable

logger = logging.getLogger(__name__)


class PointerState:
    """Track pointer buttons plus the per-frame moved flag and scroll total.

    Position is sticky: ``sync`` clears the moved flag and the scroll
    accumulator but keeps the last known position. An inactive instance drops
    ingestion so every query stays neutral.
    """

    kind = "pointer"

    def __init__(self, *, active: bool = True) -> None:
        self._buttons = ButtonTable()
        self._lock = Lock()
        self._active = active
        self._position = ORIGIN
        self._moved = False
        self._scroll = 0

    @property
    def active(self) -> bool:
        return self._active

    def activate(self) -> None:
        self._active = True

    def on_press(self, code: InputCode) -> None:
        if self._active:
            self._buttons.press(code)

    def on_release(self, code: InputCode) -> None:
        if self._active:
            self._buttons.release(code)

    def on_move(
        self,
        raw_x: float,
        raw_y: float,
        surface_width: float,
        surface_height: float,
    ) -> None:
        """Store the position normalized by the surface size at event time."""
        if not self._active:
            return
        if not (surface_width > 0 and surface_height > 0):
            logger.debug(
                "pointer_move_ignored width=%s height=%s", surface_width, surface_height
            )
            return
        position = PointerPosition(
            x=float(raw_x) / float(surface_width),
            y=float(raw_y) / float(surface_height),
        )
        with self._lock:
            self._position = position
            self._moved = True

    def on_scroll(self, unit_delta: int) -> None:
        """Accumulate signed scroll units; positive scrolls down/backward."""
        if not self._active:
            return
        with self._lock:
            self._scroll += int(unit_delta)

    def is_pressed(self, code: InputCode) -> bool:
        return self._buttons.is_pressed(code)

    def was_just_pressed(self, code: InputCode) -> bool:
        return self._buttons.was_just_pressed(code)

    def was_just_released(self, code: InputCode) -> bool:
        return self._buttons.was_just_released(code)

    def has_moved(self) -> bool:
        """Return whether any move arrived since the last sync."""
        with self._lock:
            return self._moved

    def get_position(self) -> PointerPosition:
        with self._lock:
            return self._position

    def get_scroll(self) -> int:
        """Return net scroll units accumulated since the last sync."""
        with self._lock:
            return self._scroll

    def sync(self) -> None:
        self._buttons.sync()
        with self._lock:
            self._moved = False
            self._scroll = 0

    def advance(self) -> PointerSnapshot:
        """Capture this frame's state and sync exactly what was captured.

        Moved flag and scroll are read and reset in one locked step, so
        motion or scroll arriving afterwards belongs to the next frame.
        """
        edges = self._buttons.advance()
        with self._lock:
            position, moved, scroll = self._position, self._moved, self._scroll
            self._moved = False
            self._scroll = 0
        return PointerSnapshot(
            active=self._active,
            position=position,
            moved=moved,
            scroll=scroll,
            pressed=edges.pressed,
            just_pressed=edges.just_pressed,
            just_released=edges.just_released,
        )

    def pressed_codes(self) -> frozenset[InputCode]:
        return self._buttons.pressed_codes()

    def just_pressed_codes(self) -> frozenset[InputCode]:
        return self._buttons.just_pressed_codes()

    def just_released_codes(self) -> frozenset[InputCode]:
        return self._buttons.just_released_codes()


__all__ = ["PointerState"]
