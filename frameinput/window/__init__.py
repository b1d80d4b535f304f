"""Host window adapters."""

from frameinput.window.rendercanvas_listener import (
    RenderCanvasInputListener,
    create_canvas,
    run_canvas_loop,
    wheel_units,
)

__all__ = ["RenderCanvasInputListener", "create_canvas", "run_canvas_loop", "wheel_units"]
