"""Public entrypoint wiring a canvas, an InputFrame and a TickLoop together."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from frameinput.input.input_frame import InputFrame
from frameinput.runtime.config import FrameInputConfig, load_frameinput_config
from frameinput.runtime.logging import configure_frameinput_logging
from frameinput.runtime.tick_loop import TickLoop, TickUpdate
from frameinput.window.rendercanvas_listener import (
    RenderCanvasInputListener,
    create_canvas,
    run_canvas_loop,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InputSession:
    """Composed input runtime bound to one canvas."""

    frame: InputFrame
    listener: RenderCanvasInputListener
    loop: TickLoop
    canvas: Any


def build_session(
    update: TickUpdate,
    *,
    canvas: Any,
    config: FrameInputConfig,
) -> InputSession:
    """Bind input listeners to ``canvas`` and drive ``update`` from its draw callback."""
    frame = InputFrame()
    listener = RenderCanvasInputListener(frame, config.input)
    listener.bind(canvas)
    loop = TickLoop.from_config(frame, update, config.loop)
    request_draw = getattr(canvas, "request_draw", None)
    if callable(request_draw):
        request_draw(loop.advance)
    logger.info(
        "input_session_ready tick_rate=%.1f max_ticks=%d",
        config.loop.tick_rate,
        config.loop.max_ticks_per_frame,
    )
    return InputSession(frame=frame, listener=listener, loop=loop, canvas=canvas)


def run(
    update: TickUpdate,
    *,
    title: str = "frameinput",
    width: int = 1280,
    height: int = 720,
    config: FrameInputConfig | None = None,
) -> None:
    """Open a desktop canvas and run ``update`` at a fixed tick rate until closed."""
    resolved = config or load_frameinput_config()
    configure_frameinput_logging(resolved.logging)
    canvas = create_canvas(
        width=width,
        height=height,
        title=title,
        max_fps=max(60.0, resolved.loop.tick_rate),
    )
    build_session(update, canvas=canvas, config=resolved)
    run_canvas_loop()


__all__ = ["InputSession", "build_session", "run"]
