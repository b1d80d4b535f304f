from __future__ import annotations

import frameinput.runtime.entrypoint as entrypoint
from frameinput.runtime.config import load_frameinput_config
from frameinput.runtime.tick_loop import TickContext


class FakeDrawCanvas:
    def __init__(self) -> None:
        self.handlers: dict[str, list] = {}
        self.draw_function = None

    def add_event_handler(self, handler, event_type: str) -> None:
        self.handlers.setdefault(event_type, []).append(handler)

    def get_logical_size(self) -> tuple[float, float]:
        return (100.0, 100.0)

    def request_draw(self, draw_function=None) -> None:
        self.draw_function = draw_function

    def emit(self, event_type: str, **payload) -> None:
        for handler in self.handlers.get(event_type, []):
            handler({"event_type": event_type, **payload})


def test_build_session_binds_devices_and_draw_callback() -> None:
    canvas = FakeDrawCanvas()
    seen: list[TickContext] = []

    session = entrypoint.build_session(
        seen.append, canvas=canvas, config=load_frameinput_config(env={})
    )

    assert session.canvas is canvas
    assert session.frame.is_active("keyboard") is True
    assert session.frame.is_active("pointer") is True
    assert canvas.draw_function == session.loop.advance
    canvas.emit("key_down", key="Escape")
    assert session.frame.keyboard.was_just_pressed("Escape") is True


def test_run_composes_logging_canvas_and_loop(monkeypatch) -> None:
    canvas = FakeDrawCanvas()
    calls: list[str] = []
    configured: list[object] = []
    monkeypatch.setattr(entrypoint, "create_canvas", lambda **kwargs: canvas)
    monkeypatch.setattr(entrypoint, "run_canvas_loop", lambda: calls.append("loop"))
    monkeypatch.setattr(entrypoint, "configure_frameinput_logging", configured.append)
    config = load_frameinput_config(env={"FRAMEINPUT_TICK_RATE": "30"})

    entrypoint.run(lambda ctx: None, config=config)

    assert configured == [config.logging]
    assert calls == ["loop"]
    assert canvas.draw_function is not None
    assert "key_down" in canvas.handlers
