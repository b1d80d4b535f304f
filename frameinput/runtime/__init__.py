"""Runtime support: configuration, logging, timing and the tick loop."""

from frameinput.runtime.config import (
    FrameInputConfig,
    InputConfig,
    LoopConfig,
    load_frameinput_config,
)
from frameinput.runtime.logging import configure_frameinput_logging, setup_frameinput_logging
from frameinput.runtime.tick_loop import TickContext, TickLoop
from frameinput.runtime.time import FixedStepAccumulator, FrameClock, FrameTime

__all__ = [
    "FixedStepAccumulator",
    "FrameClock",
    "FrameInputConfig",
    "FrameTime",
    "InputConfig",
    "LoopConfig",
    "TickContext",
    "TickLoop",
    "configure_frameinput_logging",
    "load_frameinput_config",
    "setup_frameinput_logging",
]
