"""Collectable items lying in the level: coins, Yoshi coins and mushrooms."""

from __future__ import annotations

import enum
import logging

from marioworld.collision import rects_overlap
from marioworld.geometry import Point2f, Rectf
from marioworld.sprite import Sprite

logger = logging.getLogger(__name__)


class PickUp:
    """An item the avatar collects by touching its shape."""

    _collect_message: str | None = "coin get"

    def __init__(self, shape: Rectf, sprite: Sprite | None = None) -> None:
        self.shape = shape
        self.pos = shape.bottom_left()
        self.sprite = sprite

    def update(self, elapsed_sec: float) -> None:
        if self.sprite is not None:
            self.sprite.update(elapsed_sec)

    def overlapping_check(self, avatar_shape: Rectf) -> bool:
        """Whether the avatar touches the item; touching drops its sprite."""
        if not rects_overlap(self.shape, avatar_shape):
            return False
        if self._collect_message:
            logger.info(self._collect_message)
        self.sprite = None
        return True


class _AnimatedPickUp(PickUp):
    """A pick-up whose shape is one frame of its sprite sheet at ``pos``."""

    IMAGE_PATH = ""
    COLS = 1
    ROWS = 1
    FRAME_SEC = 0.0

    def __init__(self, pos: Point2f, texture_width: float, texture_height: float) -> None:
        sprite = Sprite(texture_width, texture_height, self.COLS, self.ROWS, self.FRAME_SEC)
        super().__init__(
            Rectf(pos.x, pos.y, sprite.frame_width(), sprite.frame_height()), sprite
        )
        self.is_hit = False

    def update(self, elapsed_sec: float) -> None:
        if not self.is_hit:
            super().update(elapsed_sec)


class Coin(_AnimatedPickUp):
    IMAGE_PATH = "Resources/Images/Coin.png"
    COLS = 4
    ROWS = 1
    FRAME_SEC = 0.2
    _collect_message = None


class YoshiCoin(_AnimatedPickUp):
    IMAGE_PATH = "Resources/Images/YoshiCoin.png"
    COLS = 4
    ROWS = 1
    FRAME_SEC = 0.1
    _collect_message = None


class MushroomState(enum.Enum):
    YET_SPAWNED = enum.auto()
    SPAWNING = enum.auto()
    MOVING = enum.auto()


class Mushroom(_AnimatedPickUp):
    """A mushroom that rises slowly out of a block while spawning."""

    IMAGE_PATH = "Resources/Images/mushroom.png"
    COLS = 1
    ROWS = 1
    FRAME_SEC = 1.0
    _collect_message = "mushroom get"

    def __init__(self, pos: Point2f, texture_width: float, texture_height: float) -> None:
        super().__init__(pos, texture_width, texture_height)
        self.state = MushroomState.YET_SPAWNED

    def update(self, elapsed_sec: float) -> None:
        super().update(elapsed_sec)
        if self.state is MushroomState.SPAWNING:
            self.shape.bottom += 2.0 * elapsed_sec