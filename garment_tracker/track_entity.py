"""Rectangles and tracked objects."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in pixel coordinates."""

    x: int
    y: int
    width: int
    height: int

    def center(self) -> tuple[int, int]:
        """Integer centre point, halving the size with truncation."""
        return self.x + int(self.width / 2), self.y + int(self.height / 2)


def _random_color() -> tuple[int, int, int]:
    return (random.randrange(256), random.randrange(256), random.randrange(256))


@dataclass
class TrackEntity:
    """An object followed from frame to frame, with a display colour and a uuid."""

    bounding_rect: Rect
    id: int = -1
    color: tuple[int, int, int] = field(default_factory=_random_color)
    uuid: str = field(init=False)

    def __post_init__(self) -> None:
        channels = "".join(f"-{channel:03d}" for channel in self.color)
        self.uuid = f"{int(time.time())}{channels}"