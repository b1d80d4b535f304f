"""Keyboard press state polled by the game loop."""

from __future__ import annotations

from frameinput.api.input_snapshot import KeyboardSnapshot
from frameinput.api.input_state import InputCode
from frameinput.input.button_table import ButtonTable


class KeyState:
    """Track key press state across two frames.

    Ingestion (``on_press``/``on_release``) may run on the host event thread;
    queries, ``sync`` and ``advance`` belong to the game-loop thread. An
    inactive instance drops ingestion so every query stays neutral.
    """

    kind = "keyboard"

    def __init__(self, *, active: bool = True) -> None:
        self._keys = ButtonTable()
        self._active = active

    @property
    def active(self) -> bool:
        return self._active

    def activate(self) -> None:
        self._active = True

    def on_press(self, code: InputCode) -> None:
        if self._active:
            self._keys.press(code)

    def on_release(self, code: InputCode) -> None:
        if self._active:
            self._keys.release(code)

    def is_pressed(self, code: InputCode) -> bool:
        """Return whether the key is held right now."""
        return self._keys.is_pressed(code)

    def was_just_pressed(self, code: InputCode) -> bool:
        """Return whether the key went down since the last sync."""
        return self._keys.was_just_pressed(code)

    def was_just_released(self, code: InputCode) -> bool:
        """Return whether the key went up since the last sync."""
        return self._keys.was_just_released(code)

    def sync(self) -> None:
        self._keys.sync()

    def advance(self) -> KeyboardSnapshot:
        """Capture this frame's state and sync exactly what was captured."""
        edges = self._keys.advance()
        return KeyboardSnapshot(
            active=self._active,
            pressed=edges.pressed,
            just_pressed=edges.just_pressed,
            just_released=edges.just_released,
        )

    def pressed_codes(self) -> frozenset[InputCode]:
        return self._keys.pressed_codes()

    def just_pressed_codes(self) -> frozenset[InputCode]:
        return self._keys.just_pressed_codes()

    def just_released_codes(self) -> frozenset[InputCode]:
        return self._keys.just_released_codes()


__all__ = ["KeyState"]
