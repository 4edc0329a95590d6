"""Basic 2D value types: points, vectors, rectangles, colours and shapes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real


@dataclass
class Window:
    """Properties of the window the game renders into."""

    title: str = "Title"
    width: float = 320.0
    height: float = 180.0
    is_vsync_on: bool = True


@dataclass
class Point2f:
    """A position in 2D space."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2f) -> Point2f:
        if not isinstance(other, Vector2f):
            return NotImplemented
        return Point2f(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2f | Point2f) -> Point2f | Vector2f:
        if isinstance(other, Vector2f):
            return Point2f(self.x - other.x, self.y - other.y)
        if isinstance(other, Point2f):
            return Vector2f(self.x - other.x, self.y - other.y)
        return NotImplemented


@dataclass
class Rectf:
    """An axis-aligned rectangle given by its bottom-left corner and size."""

    left: float = 0.0
    bottom: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def vertices(self) -> list[Point2f]:
        """Corners in counter-clockwise order, starting at the bottom left."""
        right = self.left + self.width
        top = self.bottom + self.height
        return [
            Point2f(self.left, self.bottom),
            Point2f(right, self.bottom),
            Point2f(right, top),
            Point2f(self.left, top),
        ]

    def bottom_left(self) -> Point2f:
        return Point2f(self.left, self.bottom)

    def set_bottom_left(self, point: Point2f) -> None:
        self.left = point.x
        self.bottom = point.y


@dataclass
class Color4f:
    """An RGBA colour with components in [0, 1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0


@dataclass
class Circlef:
    center: Point2f = field(default_factory=Point2f)
    radius: float = 0.0


@dataclass
class Ellipsef:
    center: Point2f = field(default_factory=Point2f)
    radius_x: float = 0.0
    radius_y: float = 0.0


@dataclass(eq=False)
class Vector2f:
    """A 2D direction/displacement; equality is approximate."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def between(cls, from_point: Point2f, till_point: Point2f) -> Vector2f:
        """The vector pointing from one point to another."""
        return cls(till_point.x - from_point.x, till_point.y - from_point.y)

    @classmethod
    def from_point(cls, point: Point2f) -> Vector2f:
        """The vector from the origin to a point."""
        return cls(point.x, point.y)

    def to_point(self) -> Point2f:
        return Point2f(self.x, self.y)

    def equals(self, other: Vector2f, epsilon: float = 0.001) -> bool:
        return abs(self.x - other.x) < epsilon and abs(self.y - other.y) < epsilon

    def dot(self, other: Vector2f) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2f) -> float:
        return self.x * other.y - self.y * other.x

    def norm(self) -> float:
        return self.length()

    def length(self) -> float:
        return math.sqrt(self.squared_length())

    def squared_length(self) -> float:
        return self.x * self.x + self.y * self.y

    def angle_with(self, other: Vector2f) -> float:
        """Signed angle in radians; positive is counter-clockwise towards other."""
        return math.atan2(self.cross(other), self.dot(other))

    def normalized(self, epsilon: float = 0.001) -> Vector2f:
        """Unit vector in the same direction, or zero if too short."""
        length = self.length()
        if length < epsilon:
            return Vector2f(0.0, 0.0)
        return Vector2f(self.x / length, self.y / length)

    def orthogonal(self) -> Vector2f:
        return Vector2f(-self.y, self.x)

    def reflect(self, surface_normal: Vector2f) -> Vector2f:
        return self - 2 * (self.dot(surface_normal) * surface_normal)

    def __neg__(self) -> Vector2f:
        return Vector2f(-self.x, -self.y)

    def __pos__(self) -> Vector2f:
        return Vector2f(self.x, self.y)

    def __add__(self, other: Vector2f) -> Vector2f:
        if not isinstance(other, Vector2f):
            return NotImplemented
        return Vector2f(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2f) -> Vector2f:
        if not isinstance(other, Vector2f):
            return NotImplemented
        return Vector2f(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2f:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector2f(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vector2f:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector2f:
        if not isinstance(scalar, Real):
            return NotImplemented
        return self * (1 / scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2f):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"Vector2f({self.x:.2f}, {self.y:.2f})"