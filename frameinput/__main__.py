"""Input monitor: log input edges observed by the fixed-tick loop."""

from __future__ import annotations

import logging

from frameinput.runtime.entrypoint import run
from frameinput.runtime.tick_loop import TickContext

logger = logging.getLogger("frameinput.monitor")


def log_input_edges(ctx: TickContext) -> None:
    keyboard = ctx.input.keyboard
    pointer = ctx.input.pointer
    for code in sorted(map(str, keyboard.just_pressed)):
        logger.info("key_pressed tick=%d code=%s", ctx.tick_index, code)
    for code in sorted(map(str, keyboard.just_released)):
        logger.info("key_released tick=%d code=%s", ctx.tick_index, code)
    for code in sorted(map(str, pointer.just_pressed)):
        logger.info("button_pressed tick=%d code=%s", ctx.tick_index, code)
    for code in sorted(map(str, pointer.just_released)):
        logger.info("button_released tick=%d code=%s", ctx.tick_index, code)
    if pointer.moved:
        logger.debug(
            "pointer_moved tick=%d x=%.3f y=%.3f",
            ctx.tick_index,
            pointer.position.x,
            pointer.position.y,
        )
    if pointer.scroll:
        logger.info("scrolled tick=%d units=%d", ctx.tick_index, pointer.scroll)


def main() -> None:
    run(log_input_edges, title="frameinput monitor")


if __name__ == "__main__":
    main()
