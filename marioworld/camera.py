"""A camera that follows a target while staying inside the level."""

from __future__ import annotations

from dataclasses import dataclass, field

from marioworld.geometry import Point2f, Rectf


@dataclass
class Camera:
    """A view of ``width`` x ``height`` kept within the level boundaries."""

    width: float
    height: float
    level_boundaries: Rectf = field(default_factory=Rectf)

    def set_level_boundaries(self, boundaries: Rectf) -> None:
        self.level_boundaries = boundaries

    def track(self, target: Rectf) -> Point2f:
        """Bottom-left of a view centred on the target.

        Uses a quarter of the view size because the scene is drawn at twice
        its size.
        """
        return Point2f(
            target.left + target.width / 2 - self.width / 4,
            target.bottom + target.height / 2 - self.height / 4,
        )

    def clamp(self, bottom_left: Point2f) -> Point2f:
        """Move a view position back inside the level boundaries."""
        bounds = self.level_boundaries
        x = max(bounds.left, min(bounds.left + bounds.width - self.width, bottom_left.x))
        y = max(
            bounds.bottom, min(bounds.bottom + bounds.height - self.height, bottom_left.y)
        )
        return Point2f(x, y)

    def position(self, target: Rectf) -> Point2f:
        """Where the view's bottom-left lies when following the target."""
        return self.clamp(self.track(target))