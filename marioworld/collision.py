"""Collision and intersection tests between points, segments and shapes."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from marioworld.geometry import Circlef, Point2f, Rectf, Vector2f


@dataclass
class HitInfo:
    """Where a ray hit a polygon edge.

    ``fraction`` is the position of the hit along the ray, in (0, 1].
    """

    fraction: float = 0.0
    intersect_point: Point2f = field(default_factory=Point2f)
    normal: Vector2f = field(default_factory=Vector2f)


def _closed_edges(vertices: Sequence[Point2f]):
    """Consecutive vertex pairs, including the edge from the last to the first."""
    count = len(vertices)
    return ((vertices[idx], vertices[(idx + 1) % count]) for idx in range(count))


def _bounding_rect(a: Point2f, b: Point2f) -> Rectf:
    left = min(a.x, b.x)
    bottom = min(a.y, b.y)
    return Rectf(left, bottom, max(a.x, b.x) - left, max(a.y, b.y) - bottom)


def is_point_in_rect(point: Point2f, rect: Rectf) -> bool:
    return (
        rect.left <= point.x <= rect.left + rect.width
        and rect.bottom <= point.y <= rect.bottom + rect.height
    )


def is_point_in_circle(point: Point2f, circle: Circlef) -> bool:
    dx = point.x - circle.center.x
    dy = point.y - circle.center.y
    return circle.radius * circle.radius >= dx * dx + dy * dy


def is_point_in_polygon(point: Point2f, vertices: Sequence[Point2f]) -> bool:
    """Even-odd test with a horizontal ray towards the right."""
    if len(vertices) < 2:
        return False

    x_min = min(v.x for v in vertices)
    x_max = max(v.x for v in vertices)
    y_min = min(v.y for v in vertices)
    y_max = max(v.y for v in vertices)
    if point.x < x_min or point.x > x_max or point.y < y_min or point.y > y_max:
        return False

    outside = Point2f(x_max + 10.0, point.y)
    crossings = 0
    for q1, q2 in _closed_edges(vertices):
        lambdas = intersect_line_segments(q1, q2, point, outside)
        if lambdas is None:
            continue
        lambda1, lambda2 = lambdas
        if 0 < lambda1 <= 1 and 0 < lambda2 <= 1:
            crossings += 1
    return crossings % 2 == 1


def segment_overlaps_circle(a: Point2f, b: Point2f, circle: Circlef) -> bool:
    return dist_point_line_segment(circle.center, a, b) <= circle.radius


def segment_overlaps_rect(a: Point2f, b: Point2f, rect: Rectf) -> bool:
    if is_point_in_rect(a, rect) or is_point_in_rect(b, rect):
        return True
    return raycast(rect.vertices(), a, b) is not None


def rects_overlap(r1: Rectf, r2: Rectf) -> bool:
    if r1.left + r1.width < r2.left or r2.left + r2.width < r1.left:
        return False
    if r1.bottom > r2.bottom + r2.height or r2.bottom > r1.bottom + r1.height:
        return False
    return True


def rect_overlaps_circle(rect: Rectf, circle: Circlef) -> bool:
    if is_point_in_rect(circle.center, rect):
        return True
    right = rect.left + rect.width
    top = rect.bottom + rect.height
    sides = (
        (Point2f(rect.left, rect.bottom), Point2f(rect.left, top)),
        (Point2f(rect.left, rect.bottom), Point2f(right, rect.bottom)),
        (Point2f(right, top), Point2f(rect.left, top)),
        (Point2f(right, top), Point2f(right, rect.bottom)),
    )
    return any(
        dist_point_line_segment(circle.center, a, b) <= circle.radius for a, b in sides
    )


def circles_overlap(c1: Circlef, c2: Circlef) -> bool:
    dx = c1.center.x - c2.center.x
    dy = c1.center.y - c2.center.y
    touching = c1.radius + c2.radius
    return dx * dx + dy * dy < touching * touching


def polygon_overlaps_circle(vertices: Sequence[Point2f], circle: Circlef) -> bool:
    if any(is_point_in_circle(v, circle) for v in vertices):
        return True
    if any(
        dist_point_line_segment(circle.center, a, b) <= circle.radius
        for a, b in _closed_edges(vertices)
    ):
        return True
    return is_point_in_polygon(circle.center, vertices)


def raycast(
    vertices: Sequence[Point2f], ray_p1: Point2f, ray_p2: Point2f
) -> HitInfo | None:
    """The hit closest to ``ray_p1`` of the ray against the closed polygon, if any."""
    if not vertices:
        return None

    ray_box = _bounding_rect(ray_p1, ray_p2)
    hits: list[HitInfo] = []
    for q1, q2 in _closed_edges(vertices):
        if not rects_overlap(ray_box, _bounding_rect(q1, q2)):
            continue
        lambdas = intersect_line_segments(ray_p1, ray_p2, q1, q2)
        if lambdas is None:
            continue
        lambda1, lambda2 = lambdas
        if 0 < lambda1 <= 1 and 0 < lambda2 <= 1:
            hits.append(
                HitInfo(
                    fraction=lambda1,
                    intersect_point=Point2f(
                        ray_p1.x + (ray_p2.x - ray_p1.x) * lambda1,
                        ray_p1.y + (ray_p2.y - ray_p1.y) * lambda1,
                    ),
                    normal=(q2 - q1).orthogonal().normalized(),
                )
            )

    if not hits:
        return None
    return min(hits, key=lambda hit: hit.fraction)


def intersect_line_segments(
    p1: Point2f, p2: Point2f, q1: Point2f, q2: Point2f, epsilon: float = 1e-6
) -> tuple[float, float] | None:
    """Parameters of the intersection of lines p1-p2 and q1-q2, or None.

    For collinear, touching segments ``(0.0, 0.0)`` is returned.
    """
    p1p2 = Vector2f.between(p1, p2)
    q1q2 = Vector2f.between(q1, q2)
    p1q1 = Vector2f.between(p1, q1)

    denom = p1p2.cross(q1q2)
    if abs(denom) > epsilon:
        return p1q1.cross(q1q2) / denom, p1q1.cross(p1p2) / denom

    # Parallel: only collinear segments that touch intersect.
    if abs(p1q1.cross(q1q2)) > epsilon:
        return None
    if (
        is_point_on_line_segment(p1, q1, q2)
        or is_point_on_line_segment(p2, q1, q2)
        or is_point_on_line_segment(q1, p1, p2)
        or is_point_on_line_segment(q2, p1, p2)
    ):
        return 0.0, 0.0
    return None


def dist_point_line_segment(point: Point2f, a: Point2f, b: Point2f) -> float:
    ab = Vector2f.between(a, b)
    ap = Vector2f.between(a, point)
    ab_norm = ab.normalized()
    dist_to_a = ab_norm.dot(ap)

    if dist_to_a < 0:
        return ap.length()
    if dist_to_a > ab.length():
        return Vector2f.between(b, point).length()

    closest = dist_to_a * ab_norm + Vector2f.from_point(a)
    return Vector2f.from_point(point - closest).length()


def is_point_on_line_segment(point: Point2f, a: Point2f, b: Point2f) -> bool:
    ap = Vector2f.between(a, point)
    bp = Vector2f.between(b, point)
    if abs(ap.cross(bp)) > 0.001:
        return False
    return ap.dot(bp) <= 0


def _divide(numerator: float, denominator: float) -> float:
    """Floating-point division that yields inf or nan instead of raising."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _first_min(a: float, b: float) -> float:
    return b if b < a else a


def _first_max(a: float, b: float) -> float:
    return b if a < b else a


def intersect_rect_line(
    rect: Rectf, p1: Point2f, p2: Point2f
) -> tuple[float, float] | None:
    """Entry and exit parameters of the line p1-p2 through the rectangle, or None.

    Parameters in [0, 1] lie on the segment between p1 and p2.
    """
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    x1 = _divide(rect.left - p1.x, dx)
    x2 = _divide(rect.left + rect.width - p1.x, dx)
    y1 = _divide(rect.bottom - p1.y, dy)
    y2 = _divide(rect.bottom + rect.height - p1.y, dy)

    t_min = _first_max(_first_min(x1, x2), _first_min(y1, y2))
    t_max = _first_min(_first_max(x1, x2), _first_max(y1, y2))
    if t_min > t_max:
        return None
    return t_min, t_max


def clamp(value, low, high):
    """Limit a value to the range [low, high]."""
    return max(low, min(value, high))