"""Immutable input snapshot contracts."""

from __future__ import annotations

from dataclasses import dataclass, field

from frameinput.api.input_state import InputCode, PointerPosition


@dataclass(frozen=True, slots=True)
class KeyboardSnapshot:
    """Frame-stable keyboard state."""

    active: bool = False
    pressed: frozenset[InputCode] = field(default_factory=frozenset)
    just_pressed: frozenset[InputCode] = field(default_factory=frozenset)
    just_released: frozenset[InputCode] = field(default_factory=frozenset)


@dataclass(frozen=True, slots=True)
class PointerSnapshot:
    """Frame-stable mouse/pointer state."""

    active: bool = False
    position: PointerPosition = field(default_factory=PointerPosition)
    moved: bool = False
    scroll: int = 0
    pressed: frozenset[InputCode] = field(default_factory=frozenset)
    just_pressed: frozenset[InputCode] = field(default_factory=frozenset)
    just_released: frozenset[InputCode] = field(default_factory=frozenset)


@dataclass(frozen=True, slots=True)
class InputSnapshot:
    """Immutable view of all device state since the last sync."""

    frame_index: int
    keyboard: KeyboardSnapshot = field(default_factory=KeyboardSnapshot)
    pointer: PointerSnapshot = field(default_factory=PointerSnapshot)


def create_empty_input_snapshot(*, frame_index: int = 0) -> InputSnapshot:
    """Create an empty input snapshot for bootstrap and tests."""
    return InputSnapshot(frame_index=frame_index)


__all__ = [
    "InputSnapshot",
    "KeyboardSnapshot",
    "PointerSnapshot",
    "create_empty_input_snapshot",
]
