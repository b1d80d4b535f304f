from __future__ import annotations

import logging

import pytest

from frameinput.api.input_state import PointerPosition
from frameinput.input.pointer_state import PointerState

LEFT = 1
RIGHT = 3


def test_cold_start_is_neutral() -> None:
    pointer = PointerState()

    assert pointer.get_position() == PointerPosition(0.0, 0.0)
    assert pointer.has_moved() is False
    assert pointer.get_scroll() == 0
    assert pointer.is_pressed(LEFT) is False
    assert pointer.was_just_pressed(LEFT) is False
    assert pointer.was_just_released(LEFT) is False


def test_button_edges_follow_sync_boundary() -> None:
    pointer = PointerState()
    pointer.on_press(LEFT)
    assert pointer.was_just_pressed(LEFT) is True

    pointer.sync()
    assert pointer.was_just_pressed(LEFT) is False
    assert pointer.is_pressed(LEFT) is True

    pointer.on_release(LEFT)
    assert pointer.was_just_released(LEFT) is True
    assert pointer.is_pressed(LEFT) is False


def test_move_normalizes_by_surface_size() -> None:
    pointer = PointerState()
    pointer.on_move(50, 25, 100, 100)

    assert pointer.get_position() == PointerPosition(0.5, 0.25)
    assert pointer.get_position().as_tuple() == (0.5, 0.25)
    assert pointer.has_moved() is True


def test_move_uses_size_at_event_time() -> None:
    pointer = PointerState()
    pointer.on_move(640, 360, 1280, 720)
    pointer.on_move(640, 360, 640, 720)

    assert pointer.get_position() == PointerPosition(1.0, 0.5)


def test_position_is_sticky_across_sync_while_moved_flag_clears() -> None:
    pointer = PointerState()
    pointer.on_move(50, 25, 100, 100)
    pointer.sync()

    assert pointer.get_position() == PointerPosition(0.5, 0.25)
    assert pointer.has_moved() is False


@pytest.mark.parametrize(
    ("width", "height"),
    [(0, 100), (100, 0), (0, 0), (-10, 100), (float("nan"), 100), (100, float("nan"))],
)
def test_move_on_empty_surface_is_ignored(width, height, caplog) -> None:
    pointer = PointerState()
    pointer.on_move(10, 20, 100, 100)
    pointer.sync()

    with caplog.at_level(logging.DEBUG, logger="frameinput.input.pointer_state"):
        pointer.on_move(5, 5, width, height)

    assert pointer.get_position() == PointerPosition(0.1, 0.2)
    assert pointer.has_moved() is False
    assert "pointer_move_ignored" in caplog.text


def test_scroll_accumulates_signed_units_and_resets_on_sync() -> None:
    pointer = PointerState()
    pointer.on_scroll(3)
    pointer.on_scroll(-1)
    assert pointer.get_scroll() == 2

    pointer.sync()
    assert pointer.get_scroll() == 0


def test_scroll_up_is_negative() -> None:
    pointer = PointerState()
    pointer.on_scroll(-2)
    pointer.on_scroll(-1)
    assert pointer.get_scroll() == -3


def test_repeated_sync_without_events_is_idempotent() -> None:
    pointer = PointerState()
    pointer.on_press(RIGHT)
    pointer.on_move(30, 60, 120, 120)
    pointer.on_scroll(4)
    pointer.sync()

    def observe() -> tuple[object, ...]:
        return (
            pointer.is_pressed(RIGHT),
            pointer.was_just_pressed(RIGHT),
            pointer.was_just_released(RIGHT),
            pointer.has_moved(),
            pointer.get_position(),
            pointer.get_scroll(),
        )

    first = observe()
    pointer.sync()
    assert observe() == first == (True, False, False, False, PointerPosition(0.25, 0.5), 0)


def test_code_sets_track_buttons() -> None:
    pointer = PointerState()
    pointer.on_press(LEFT)
    pointer.sync()
    pointer.on_press(RIGHT)
    pointer.on_release(LEFT)

    assert pointer.pressed_codes() == frozenset({RIGHT})
    assert pointer.just_pressed_codes() == frozenset({RIGHT})
    assert pointer.just_released_codes() == frozenset({LEFT})


def test_inactive_pointer_drops_every_event() -> None:
    pointer = PointerState(active=False)
    pointer.on_press(LEFT)
    pointer.on_move(10, 10, 20, 20)
    pointer.on_scroll(2)

    assert pointer.active is False
    assert pointer.is_pressed(LEFT) is False
    assert pointer.has_moved() is False
    assert pointer.get_position() == PointerPosition(0.0, 0.0)
    assert pointer.get_scroll() == 0

    pointer.activate()
    pointer.on_scroll(2)
    assert pointer.get_scroll() == 2


def test_advance_returns_frame_state_and_resets_transients() -> None:
    pointer = PointerState()
    pointer.on_press(RIGHT)
    pointer.on_move(30, 10, 60, 40)
    pointer.on_scroll(-2)

    captured = pointer.advance()

    assert captured.active is True
    assert captured.position == PointerPosition(0.5, 0.25)
    assert captured.moved is True
    assert captured.scroll == -2
    assert captured.just_pressed == frozenset({RIGHT})
    assert pointer.was_just_pressed(RIGHT) is False
    assert pointer.is_pressed(RIGHT) is True
    assert pointer.has_moved() is False
    assert pointer.get_scroll() == 0

    pointer.on_release(RIGHT)
    assert pointer.advance().just_released == frozenset({RIGHT})
