"""Fixed-tick game loop driver that owns the input sync boundary."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from frameinput.api.input_snapshot import InputSnapshot
from frameinput.input.input_frame import InputFrame
from frameinput.runtime.config import LoopConfig
from frameinput.runtime.time import FixedStepAccumulator, FrameClock

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TickContext:
    """Per-tick context handed to the update callback."""

    tick_index: int
    step_seconds: float
    elapsed_seconds: float
    input: InputSnapshot


TickUpdate = Callable[[TickContext], None]


class TickLoop:
    """Run fixed-rate updates, each on input captured and synced at its start.

    ``advance`` is meant to be called once per host frame (e.g. from a draw
    callback). Input only advances when an update actually runs, so an edge
    that arrives between ticks, or while an update is running, is seen by
    exactly one update.
    """

    def __init__(
        self,
        frame: InputFrame,
        update: TickUpdate,
        *,
        step_seconds: float = 1.0 / 60.0,
        max_steps_per_frame: int = 8,
        clock: FrameClock | None = None,
    ) -> None:
        self._frame = frame
        self._update = update
        self._accumulator = FixedStepAccumulator(
            step_seconds, max_steps_per_frame=max_steps_per_frame
        )
        self._clock = clock or FrameClock()
        self._tick_index = 0

    @classmethod
    def from_config(
        cls,
        frame: InputFrame,
        update: TickUpdate,
        config: LoopConfig,
        *,
        clock: FrameClock | None = None,
    ) -> TickLoop:
        return cls(
            frame,
            update,
            step_seconds=config.step_seconds,
            max_steps_per_frame=config.max_ticks_per_frame,
            clock=clock or FrameClock(max_delta_seconds=config.max_frame_delta_seconds),
        )

    @property
    def frame(self) -> InputFrame:
        return self._frame

    @property
    def tick_index(self) -> int:
        return self._tick_index

    @property
    def alpha(self) -> float:
        """Interpolation fraction between the last tick and the next one."""
        return self._accumulator.alpha

    def advance(self) -> int:
        """Run every tick due for this host frame and return how many ran."""
        frame_time = self._clock.next()
        steps = self._accumulator.consume(frame_time.delta_seconds)
        step_seconds = self._accumulator.step_seconds
        for _ in range(steps):
            snapshot = self._frame.advance()
            self._update(
                TickContext(
                    tick_index=self._tick_index,
                    step_seconds=step_seconds,
                    elapsed_seconds=self._tick_index * step_seconds,
                    input=snapshot,
                )
            )
            self._tick_index += 1
        if steps:
            logger.debug("tick_loop_advanced steps=%d tick=%d", steps, self._tick_index)
        return steps


__all__ = ["TickContext", "TickLoop", "TickUpdate"]
