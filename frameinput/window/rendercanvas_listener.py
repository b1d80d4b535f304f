"""Rendercanvas event listener feeding an InputFrame."""

from __future__ import annotations

import logging
import math
from typing import Any

from frameinput.api.input_events import KeyEvent, PointerEvent, WheelEvent
from frameinput.input.input_frame import InputFrame
from frameinput.runtime.config import InputConfig
from frameinput.runtime.errors import RECOVERABLE_HOST_ERRORS, log_recoverable

_LOG = logging.getLogger("frameinput.window")


class RenderCanvasInputListener:
    """Translate rendercanvas events into KeyState/PointerState ingestion calls.

    Handlers run on whatever thread the canvas backend dispatches events on and
    write straight into the frame's current state; nothing is queued.
    """

    def __init__(self, frame: InputFrame, config: InputConfig | None = None) -> None:
        self._frame = frame
        self._config = config or InputConfig(trace_enabled=False, wheel_step=100.0)
        self._canvas: Any | None = None

    def bind(self, canvas: Any) -> None:
        """Attach keyboard and pointer handlers to a rendercanvas canvas."""
        self.bind_keyboard(canvas)
        self.bind_pointer(canvas)

    def bind_keyboard(self, canvas: Any) -> None:
        add_handler = self._require_add_handler(canvas)
        self._frame.activate_keyboard()
        self._try_add_event_handler(add_handler, self._on_key_down, "key_down")
        self._try_add_event_handler(add_handler, self._on_key_up, "key_up")

    def bind_pointer(self, canvas: Any) -> None:
        add_handler = self._require_add_handler(canvas)
        self._frame.activate_pointer()
        self._try_add_event_handler(add_handler, self._on_pointer_down, "pointer_down")
        self._try_add_event_handler(add_handler, self._on_pointer_up, "pointer_up")
        self._try_add_event_handler(add_handler, self._on_pointer_move, "pointer_move")
        self._try_add_event_handler(add_handler, self._on_wheel, "wheel")

    def _require_add_handler(self, canvas: Any) -> Any:
        add_handler = getattr(canvas, "add_event_handler", None)
        if not callable(add_handler):
            raise RuntimeError("Canvas does not support event handlers.")
        self._canvas = canvas
        return add_handler

    def _try_add_event_handler(self, add_handler: Any, handler: Any, event_type: str) -> None:
        try:
            add_handler(handler, event_type)
        except RECOVERABLE_HOST_ERRORS:
            log_recoverable(_LOG, "input_handler_rejected type=%s", event_type)

    def _on_key_down(self, event: object) -> None:
        parsed = _parse_key_event(event, expected_type="key_down")
        if parsed is None:
            return
        self._frame.keyboard.on_press(parsed.code)
        self._trace(parsed)

    def _on_key_up(self, event: object) -> None:
        parsed = _parse_key_event(event, expected_type="key_up")
        if parsed is None:
            return
        self._frame.keyboard.on_release(parsed.code)
        self._trace(parsed)

    def _on_pointer_down(self, event: object) -> None:
        parsed = _parse_pointer_event(event, expected_type="pointer_down")
        if parsed is None:
            return
        self._frame.pointer.on_press(parsed.button)
        self._trace(parsed)

    def _on_pointer_up(self, event: object) -> None:
        parsed = _parse_pointer_event(event, expected_type="pointer_up")
        if parsed is None:
            return
        self._frame.pointer.on_release(parsed.button)
        self._trace(parsed)

    def _on_pointer_move(self, event: object) -> None:
        parsed = _parse_pointer_event(event, expected_type="pointer_move")
        if parsed is None:
            return
        width, height = self._surface_size()
        self._frame.pointer.on_move(parsed.x, parsed.y, width, height)
        self._trace(parsed)

    def _on_wheel(self, event: object) -> None:
        parsed = _parse_wheel_event(event)
        if parsed is None:
            return
        units = wheel_units(parsed.dy, self._config.wheel_step, self._config.units_per_notch)
        if units:
            self._frame.pointer.on_scroll(units)
        self._trace(parsed)

    def _surface_size(self) -> tuple[float, float]:
        getter = getattr(self._canvas, "get_logical_size", None)
        if not callable(getter):
            return (0.0, 0.0)
        try:
            size = getter()
        except RECOVERABLE_HOST_ERRORS:
            log_recoverable(_LOG, "input_surface_size_unavailable")
            return (0.0, 0.0)
        if not isinstance(size, (tuple, list)) or len(size) < 2:
            return (0.0, 0.0)
        width, height = size[0], size[1]
        if not isinstance(width, (int, float)) or not isinstance(height, (int, float)):
            return (0.0, 0.0)
        return (float(width), float(height))

    def _trace(self, parsed: KeyEvent | PointerEvent | WheelEvent) -> None:
        if self._config.trace_enabled:
            _LOG.debug("input_event %r", parsed)


def wheel_units(dy: float, step: float, units_per_notch: int = 1) -> int:
    """Convert a pixel wheel delta to signed scroll units.

    ``step`` pixels make one notch and each notch is worth ``units_per_notch``
    units. The listener uses 3 per notch, the same as a default Swing
    ``MouseWheelEvent.getUnitsToScroll``. Rounds half away from zero; any
    non-zero finite delta yields at least one unit, and NaN or infinite deltas
    yield none.
    """
    if dy == 0 or not math.isfinite(dy) or not step > 0:
        return 0
    magnitude = max(1, math.floor(abs(dy) / step * units_per_notch + 0.5))
    return magnitude if dy > 0 else -magnitude


def create_canvas(
    *,
    width: int = 1280,
    height: int = 720,
    title: str = "frameinput",
    update_mode: str = "continuous",
    max_fps: float = 60.0,
) -> Any:
    """Create a desktop rendercanvas canvas for the listener to bind to."""
    try:
        import rendercanvas.auto as rc_auto
    except ImportError as exc:
        raise RuntimeError(
            "Render canvas backend unavailable. Install a desktop backend such as glfw."
        ) from exc
    canvas_cls = getattr(rc_auto, "RenderCanvas", None)
    if canvas_cls is None:
        raise RuntimeError("rendercanvas.auto did not expose RenderCanvas.")
    try:
        return canvas_cls(
            size=(int(width), int(height)),
            title=title,
            update_mode=update_mode,
            max_fps=float(max_fps),
        )
    except TypeError:
        return canvas_cls(size=(int(width), int(height)), title=title)


def run_canvas_loop() -> None:
    """Run the rendercanvas backend loop until every canvas is closed."""
    import rendercanvas.auto as rc_auto

    loop = getattr(rc_auto, "loop", None)
    if loop is not None and hasattr(loop, "run"):
        loop.run()
        return
    run_func = getattr(rc_auto, "run", None)
    if callable(run_func):
        run_func()
        return
    raise RuntimeError("rendercanvas.auto did not expose a runnable loop.")


def _parse_pointer_event(event: object, *, expected_type: str) -> PointerEvent | None:
    raw_type = str(_event_value(event, "event_type", "")).strip().lower()
    if not _is_pointer_type_match(raw_type, expected_type):
        return None
    x = _event_value(event, "x")
    y = _event_value(event, "y")
    button = _event_value(event, "button", 0)
    if not _is_finite_number(x) or not _is_finite_number(y):
        return None
    if not isinstance(button, int):
        button = 0
    if expected_type in {"pointer_down", "pointer_up"} and int(button) == 0:
        button = 1
    return PointerEvent(expected_type, float(x), float(y), int(button))


def _parse_key_event(event: object, *, expected_type: str) -> KeyEvent | None:
    if str(_event_value(event, "event_type", "")) != expected_type:
        return None
    key = _event_value(event, "key")
    if not isinstance(key, (str, int)) or isinstance(key, bool) or key == "":
        return None
    return KeyEvent(expected_type, key)


def _parse_wheel_event(event: object) -> WheelEvent | None:
    if str(_event_value(event, "event_type", "")) != "wheel":
        return None
    x = _event_value(event, "x", 0.0)
    y = _event_value(event, "y", 0.0)
    dy = _event_value(event, "dy")
    if not all(_is_finite_number(value) for value in (x, y, dy)):
        return None
    return WheelEvent(float(x), float(y), float(dy))


def _is_finite_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def _event_value(event: object, key: str, default: object | None = None) -> object | None:
    if isinstance(event, dict):
        return event.get(key, default)
    return getattr(event, key, default)


def _is_pointer_type_match(raw_type: str, expected_type: str) -> bool:
    aliases: dict[str, tuple[str, ...]] = {
        "pointer_down": ("pointer_down", "mouse_down"),
        "pointer_move": ("pointer_move", "mouse_move"),
        "pointer_up": ("pointer_up", "mouse_up"),
    }
    allowed = aliases.get(expected_type, (expected_type,))
    return raw_type in allowed


__all__ = ["RenderCanvasInputListener", "create_canvas", "run_canvas_loop", "wheel_units"]
