"""Input code and pointer position contracts."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import TypeAlias

# Host-toolkit key/button identifier. Opaque: used only as a mapping key.
InputCode: TypeAlias = Hashable


@dataclass(frozen=True, slots=True)
class PointerPosition:
    """Pointer position normalized to the observing surface.

    (0.0, 0.0) is the top-left corner and (1.0, 1.0) the bottom-right one.
    """

    x: float = 0.0
    y: float = 0.0

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


ORIGIN = PointerPosition()


__all__ = ["InputCode", "ORIGIN", "PointerPosition"]
