"""Frame timing primitives for fixed-tick loops."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from time import monotonic


@dataclass(frozen=True, slots=True)
class FrameTime:
    """Timing of one host frame."""

    delta_seconds: float
    elapsed_seconds: float


class FrameClock:
    """Monotonic host-frame clock with bounded deltas."""

    def __init__(
        self,
        *,
        time_source: Callable[[], float] | None = None,
        max_delta_seconds: float = 0.25,
    ) -> None:
        self._time_source = time_source or monotonic
        self._max_delta_seconds = max_delta_seconds
        self._last_seconds: float | None = None
        self._elapsed_seconds = 0.0

    def next(self) -> FrameTime:
        """Advance the clock; the first frame has a zero delta."""
        now = self._time_source()
        if self._last_seconds is None:
            delta = 0.0
        else:
            delta = min(max(0.0, now - self._last_seconds), self._max_delta_seconds)
        self._last_seconds = now
        self._elapsed_seconds += delta
        return FrameTime(delta_seconds=delta, elapsed_seconds=self._elapsed_seconds)


class FixedStepAccumulator:
    """Accumulates variable frame deltas into fixed-step tick counts."""

    def __init__(self, step_seconds: float, *, max_steps_per_frame: int = 8) -> None:
        if step_seconds <= 0.0:
            raise ValueError("step_seconds must be > 0")
        if max_steps_per_frame <= 0:
            raise ValueError("max_steps_per_frame must be > 0")
        self._step_seconds = step_seconds
        self._max_steps_per_frame = max_steps_per_frame
        self._accumulated_seconds = 0.0

    @property
    def step_seconds(self) -> float:
        return self._step_seconds

    @property
    def alpha(self) -> float:
        """Fraction of a step left over after the last consume."""
        return min(1.0, self._accumulated_seconds / self._step_seconds)

    def consume(self, delta_seconds: float) -> int:
        """Return number of fixed steps due for this frame."""
        if delta_seconds < 0.0:
            raise ValueError("delta_seconds must be >= 0")
        self._accumulated_seconds += delta_seconds
        steps = int(self._accumulated_seconds // self._step_seconds)
        if steps > self._max_steps_per_frame:
            # Backlog beyond the cap is dropped.
            self._accumulated_seconds = 0.0
            return self._max_steps_per_frame
        self._accumulated_seconds -= steps * self._step_seconds
        return steps


__all__ = ["FixedStepAccumulator", "FrameClock", "FrameTime"]
