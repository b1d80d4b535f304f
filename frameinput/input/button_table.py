"""Double-buffered digital press state shared by keyboard and pointer devices."""

from __future__ import annotations

from dataclasses import dataclass
from threading import Lock

from frameinput.api.input_state import InputCode


@dataclass(frozen=True, slots=True)
class ButtonEdges:
    """Pressed codes and edges of one table, read in a single locked step."""

    pressed: frozenset[InputCode]
    just_pressed: frozenset[InputCode]
    just_released: frozenset[InputCode]


class ButtonTable:
    """Current/previous press tables with edge queries.

    ``current`` is written by the host event thread. ``previous`` is written only
    by :meth:`sync`/:meth:`advance` on the game-loop thread and holds
    ``current`` as it was at the last sync. Codes missing from either table
    read as not pressed.
    """

    __slots__ = ("_lock", "_current", "_previous")

    def __init__(self) -> None:
        self._lock = Lock()
        self._current: dict[InputCode, bool] = {}
        self._previous: dict[InputCode, bool] = {}

    def press(self, code: InputCode) -> None:
        with self._lock:
            self._current[code] = True

    def release(self, code: InputCode) -> None:
        with self._lock:
            self._current[code] = False

    def is_pressed(self, code: InputCode) -> bool:
        with self._lock:
            return self._current.get(code, False)

    def was_just_pressed(self, code: InputCode) -> bool:
        return self.is_pressed(code) and not self._previous.get(code, False)

    def was_just_released(self, code: InputCode) -> bool:
        return self._previous.get(code, False) and not self.is_pressed(code)

    def sync(self) -> None:
        """Promote current state into previous."""
        with self._lock:
            self._previous.update(self._current)

    def advance(self) -> ButtonEdges:
        """Return the edges since the last sync and promote exactly that state.

        A press landing after this call is compared against the promoted state
        at the next advance, so it is never consumed unseen.
        """
        with self._lock:
            edges = self._edges_locked()
            self._previous.update(self._current)
        return edges

    def edges(self) -> ButtonEdges:
        with self._lock:
            return self._edges_locked()

    def pressed_codes(self) -> frozenset[InputCode]:
        return self.edges().pressed

    def just_pressed_codes(self) -> frozenset[InputCode]:
        return self.edges().just_pressed

    def just_released_codes(self) -> frozenset[InputCode]:
        return self.edges().just_released

    def _edges_locked(self) -> ButtonEdges:
        pressed: set[InputCode] = set()
        just_pressed: set[InputCode] = set()
        just_released: set[InputCode] = set()
        for code, down in self._current.items():
            was_down = self._previous.get(code, False)
            if down:
                pressed.add(code)
                if not was_down:
                    just_pressed.add(code)
            elif was_down:
                just_released.add(code)
        return ButtonEdges(
            pressed=frozenset(pressed),
            just_pressed=frozenset(just_pressed),
            just_released=frozenset(just_released),
        )


__all__ = ["ButtonEdges", "ButtonTable"]
