"""Polled keyboard and pointer state for fixed-tick game loops."""

from typing import TYPE_CHECKING

from frameinput.api.input_snapshot import InputSnapshot
from frameinput.api.input_state import InputCode, PointerPosition
from frameinput.input import InputFrame, KeyState, PointerState

if TYPE_CHECKING:
    from frameinput.runtime.tick_loop import TickUpdate


def run(update: "TickUpdate", *, title: str = "frameinput") -> None:
    """Open a canvas and drive ``update`` at the configured tick rate."""
    from frameinput.runtime.entrypoint import run as runtime_run

    runtime_run(update, title=title)


__version__ = "0.1.0"

__all__ = [
    "InputCode",
    "InputFrame",
    "InputSnapshot",
    "KeyState",
    "PointerPosition",
    "PointerState",
    "run",
]
