"""Power-up items and the manager that keeps track of them."""

from __future__ import annotations

import enum
from collections.abc import Iterator

from marioworld.collision import rects_overlap
from marioworld.geometry import Point2f, Rectf


class PowerUpType(enum.Enum):
    MUSHROOM = 1
    FIRE_FLOWER = 2


class PowerUp:
    """A power-up of some kind.

    Its hit box starts empty at the origin, independent of ``center``.
    """

    IMAGE_PATH = "Resources/Images/Mushroom.png"

    def __init__(
        self, center: Point2f, kind: PowerUpType, shape: Rectf | None = None
    ) -> None:
        self.center = center
        self.kind = kind
        self.shape = shape if shape is not None else Rectf()

    def update(self, elapsed_sec: float) -> None:
        """Power-ups do not change over time."""

    def is_overlapping(self, rect: Rectf) -> bool:
        return rects_overlap(rect, self.shape)


class PowerUpManager:
    """Owns the power-ups in play and removes them when they are hit."""

    def __init__(self) -> None:
        self._items: list[PowerUp] = []

    def add_item(self, center: Point2f, kind: PowerUpType) -> PowerUp:
        item = PowerUp(center, kind)
        self._items.append(item)
        return item

    def update(self, elapsed_sec: float) -> None:
        for item in self._items:
            item.update(elapsed_sec)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[PowerUp]:
        return iter(self._items)

    def hit_item(self, rect: Rectf) -> bool:
        """Remove the first power-up overlapping ``rect``; whether one was found."""
        for idx, item in enumerate(self._items):
            if item.is_overlapping(rect):
                del self._items[idx]
                return True
        return False