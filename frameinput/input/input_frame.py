"""Frame boundary that advances every active input device at once."""

from __future__ import annotations

import logging
from threading import Lock
from typing import Protocol

from frameinput.api.input_snapshot import InputSnapshot, KeyboardSnapshot, PointerSnapshot
from frameinput.input.key_state import KeyState
from frameinput.input.pointer_state import PointerState

logger = logging.getLogger(__name__)


class InputDevice(Protocol):
    """Device state that can be advanced by one frame."""

    kind: str

    def activate(self) -> None: ...

    def sync(self) -> None: ...


class InputFrame:
    """Own the keyboard and pointer state and the sync boundary between frames.

    Devices start inactive and drop every event until
    ``activate_keyboard``/``activate_pointer`` moves them into the active
    registry for the rest of the process. Inactive devices therefore answer
    every query with neutral values, and ``sync`` only touches active ones.

    Usage:
        frame = InputFrame()
        keyboard = frame.activate_keyboard()
        while running:
            tick = frame.advance()
            if 32 in tick.keyboard.just_pressed:
                player.jump()
    """

    def __init__(self) -> None:
        self._keyboard = KeyState(active=False)
        self._pointer = PointerState(active=False)
        self._registry_lock = Lock()
        self._active: dict[str, InputDevice] = {}
        self._frame_index = 0

    @property
    def keyboard(self) -> KeyState:
        """Keyboard state without activating it."""
        return self._keyboard

    @property
    def pointer(self) -> PointerState:
        """Pointer state without activating it."""
        return self._pointer

    @property
    def frame_index(self) -> int:
        """Number of completed syncs."""
        return self._frame_index

    def activate_keyboard(self) -> KeyState:
        self._activate(self._keyboard)
        return self._keyboard

    def activate_pointer(self) -> PointerState:
        self._activate(self._pointer)
        return self._pointer

    def is_active(self, kind: str) -> bool:
        with self._registry_lock:
            return kind in self._active

    def active_devices(self) -> tuple[InputDevice, ...]:
        with self._registry_lock:
            return tuple(self._active.values())

    def sync(self) -> None:
        """Promote current state to previous and clear per-frame signals.

        Call exactly once per tick from the game-loop thread, after all queries
        for that tick. Never call concurrently with itself. Loops that hand a
        snapshot to their update should use ``advance`` instead.
        """
        for device in self.active_devices():
            device.sync()
        self._frame_index += 1

    def advance(self) -> InputSnapshot:
        """Capture the frame's input and sync exactly what was captured.

        Events that land after the capture, including ones delivered while the
        caller is still handling the returned snapshot, show up in the next one.
        """
        keyboard = KeyboardSnapshot()
        if self.is_active(KeyState.kind):
            keyboard = self._keyboard.advance()
        pointer = PointerSnapshot()
        if self.is_active(PointerState.kind):
            pointer = self._pointer.advance()
        snapshot = InputSnapshot(frame_index=self._frame_index, keyboard=keyboard, pointer=pointer)
        self._frame_index += 1
        return snapshot

    def snapshot(self) -> InputSnapshot:
        """Build an immutable view of device state since the last sync."""
        keyboard = KeyboardSnapshot()
        if self.is_active(KeyState.kind):
            keyboard = KeyboardSnapshot(
                active=True,
                pressed=self._keyboard.pressed_codes(),
                just_pressed=self._keyboard.just_pressed_codes(),
                just_released=self._keyboard.just_released_codes(),
            )
        pointer = PointerSnapshot()
        if self.is_active(PointerState.kind):
            pointer = PointerSnapshot(
                active=True,
                position=self._pointer.get_position(),
                moved=self._pointer.has_moved(),
                scroll=self._pointer.get_scroll(),
                pressed=self._pointer.pressed_codes(),
                just_pressed=self._pointer.just_pressed_codes(),
                just_released=self._pointer.just_released_codes(),
            )
        return InputSnapshot(frame_index=self._frame_index, keyboard=keyboard, pointer=pointer)

    def _activate(self, device: InputDevice) -> None:
        with self._registry_lock:
            if device.kind in self._active:
                return
            device.activate()
            self._active[device.kind] = device
        logger.info("input_device_activated device=%s", device.kind)


__all__ = ["InputDevice", "InputFrame"]
