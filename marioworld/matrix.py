"""Affine 2D transformation matrices."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from marioworld.geometry import Point2f, Rectf, Vector2f

_PI = 3.1415926535


def _unit_x() -> Vector2f:
    return Vector2f(1.0, 0.0)


def _unit_y() -> Vector2f:
    return Vector2f(0.0, 1.0)


def _rotation_axes(degrees: float) -> tuple[Vector2f, Vector2f]:
    radians = degrees * _PI / 180
    cos, sin = math.cos(radians), math.sin(radians)
    return Vector2f(cos, sin), Vector2f(-sin, cos)


def _split_pair(first: float | Vector2f, second: float | None) -> tuple[float, float]:
    """Accept either a vector or a pair of floats."""
    if isinstance(first, Vector2f):
        return first.x, first.y
    if second is None:
        raise TypeError("a second component is required when the first is a number")
    return first, second


@dataclass(eq=False)
class Matrix2x3:
    """A 2x3 matrix: two axis columns and a translation column.

    The default is the identity matrix. Equality is approximate.
    """

    dir_x: Vector2f = field(default_factory=_unit_x)
    dir_y: Vector2f = field(default_factory=_unit_y)
    orig: Vector2f = field(default_factory=Vector2f)

    @classmethod
    def from_floats(
        cls, e1x: float, e1y: float, e2x: float, e2y: float, ox: float, oy: float
    ) -> Matrix2x3:
        return cls(Vector2f(e1x, e1y), Vector2f(e2x, e2y), Vector2f(ox, oy))

    def transform_vector(self, vector: Vector2f) -> Vector2f:
        """Transform a vector; translation is not applied."""
        return vector.x * self.dir_x + vector.y * self.dir_y

    def transform_point(self, point: Point2f) -> Point2f:
        """Transform a point, including translation."""
        return (self.transform_vector(Vector2f.from_point(point)) + self.orig).to_point()

    def transform_rect(self, rect: Rectf) -> list[Point2f]:
        """Transformed corners: bottom-left, top-left, top-right, bottom-right."""
        right = rect.left + rect.width
        top = rect.bottom + rect.height
        corners = (
            Point2f(rect.left, rect.bottom),
            Point2f(rect.left, top),
            Point2f(right, top),
            Point2f(right, rect.bottom),
        )
        return [self.transform_point(corner) for corner in corners]

    def transform_polygon(self, vertices: Iterable[Point2f]) -> list[Point2f]:
        return [self.transform_point(vertex) for vertex in vertices]

    def determinant(self) -> float:
        return self.dir_x.x * self.dir_y.y - self.dir_x.y * self.dir_y.x

    def inverse(self) -> Matrix2x3:
        """The inverse matrix; raises ZeroDivisionError for a singular matrix."""
        det = self.determinant()
        if det == 0:
            raise ZeroDivisionError("matrix is singular and has no inverse")
        dx, dy, o = self.dir_x, self.dir_y, self.orig
        return Matrix2x3(
            Vector2f(dy.y, -dx.y) / det,
            Vector2f(-dy.x, dx.x) / det,
            Vector2f(dy.x * o.y - dy.y * o.x, -(dx.x * o.y - dx.y * o.x)) / det,
        )

    def equals(self, other: Matrix2x3, epsilon: float = 0.001) -> bool:
        return (
            self.dir_x.equals(other.dir_x, epsilon)
            and self.dir_y.equals(other.dir_y, epsilon)
            and self.orig.equals(other.orig, epsilon)
        )

    def set_as_identity(self) -> None:
        self.dir_x, self.dir_y, self.orig = _unit_x(), _unit_y(), Vector2f()

    def set_as_rotate(self, degrees: float) -> None:
        self.dir_x, self.dir_y = _rotation_axes(degrees)
        self.orig = Vector2f()

    def set_as_translate(self, tx: float | Vector2f, ty: float | None = None) -> None:
        x, y = _split_pair(tx, ty)
        self.dir_x, self.dir_y, self.orig = _unit_x(), _unit_y(), Vector2f(x, y)

    def set_as_scale(self, scale_x: float, scale_y: float | None = None) -> None:
        if scale_y is None:
            scale_y = scale_x
        self.dir_x = Vector2f(scale_x, 0.0)
        self.dir_y = Vector2f(0.0, scale_y)
        self.orig = Vector2f()

    @classmethod
    def identity(cls) -> Matrix2x3:
        return cls()

    @classmethod
    def rotation(cls, degrees: float) -> Matrix2x3:
        dir_x, dir_y = _rotation_axes(degrees)
        return cls(dir_x, dir_y, Vector2f())

    @classmethod
    def scaling(
        cls, scale_x: float | Vector2f, scale_y: float | None = None
    ) -> Matrix2x3:
        """A scaling matrix from one uniform factor, two factors or a vector."""
        if isinstance(scale_x, Vector2f):
            scale_x, scale_y = scale_x.x, scale_x.y
        elif scale_y is None:
            scale_y = scale_x
        return cls(Vector2f(scale_x, 0.0), Vector2f(0.0, scale_y), Vector2f())

    @classmethod
    def translation(cls, tx: float | Vector2f, ty: float | None = None) -> Matrix2x3:
        x, y = _split_pair(tx, ty)
        return cls(_unit_x(), _unit_y(), Vector2f(x, y))

    def __mul__(self, other: Matrix2x3) -> Matrix2x3:
        """Compose: the result applies ``other`` first, then ``self``."""
        if not isinstance(other, Matrix2x3):
            return NotImplemented
        lhs, rhs = self, other
        return Matrix2x3(
            Vector2f(
                rhs.dir_x.x * lhs.dir_x.x + rhs.dir_x.y * lhs.dir_y.x,
                rhs.dir_x.x * lhs.dir_x.y + rhs.dir_x.y * lhs.dir_y.y,
            ),
            Vector2f(
                rhs.dir_y.x * lhs.dir_x.x + rhs.dir_y.y * lhs.dir_y.x,
                rhs.dir_y.x * lhs.dir_x.y + rhs.dir_y.y * lhs.dir_y.y,
            ),
            Vector2f(
                rhs.orig.x * lhs.dir_x.x + rhs.orig.y * lhs.dir_y.x + lhs.orig.x,
                rhs.orig.x * lhs.dir_x.y + rhs.orig.y * lhs.dir_y.y + lhs.orig.y,
            ),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix2x3):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return (
            f"Matrix2x3( x( {self.dir_x.x:.6f}, {self.dir_x.y:.6f} ), "
            f"y( {self.dir_y.x:.6f}, {self.dir_y.y:.6f} ), "
            f"orig( {self.orig.x:.6f}, {self.orig.y:.6f} )  )"
        )