"""Geometric primitives used throughout the editor kernel."""

from __future__ import annotations
import math
from pydantic import BaseModel


LINE_PARALLEL_EPSILON = 1e-8


class Point2D(BaseModel):
    """Point on the plan (drawing units, millimetres in practice)."""
    x: float
    y: float

    def distance_to(self, other: Point2D) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def lerp(self, other: Point2D, t: float) -> Point2D:
        return Point2D(
            x=self.x + (other.x - self.x) * t,
            y=self.y + (other.y - self.y) * t,
        )

    def offset(self, direction: Vector2D, distance: float) -> Point2D:
        """Return self + direction * distance."""
        return Point2D(
            x=self.x + direction.x * distance,
            y=self.y + direction.y * distance,
        )

    def __add__(self, other: Vector2D) -> Point2D:
        return Point2D(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: Point2D) -> Vector2D:
        return Vector2D(x=self.x - other.x, y=self.y - other.y)


class Vector2D(BaseModel):
    """2D vector for direction calculations on the plan."""
    x: float
    y: float

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vector2D:
        ln = self.length()
        if ln < 1e-10:
            return Vector2D(x=0.0, y=0.0)
        return Vector2D(x=self.x / ln, y=self.y / ln)

    def is_zero(self, eps: float = 1e-10) -> bool:
        return self.length() < eps

    def perpendicular(self) -> Vector2D:
        """90-degree counterclockwise rotation (the left normal)."""
        return Vector2D(x=-self.y, y=self.x)

    def dot(self, other: Vector2D) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2D) -> float:
        """Z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def angle_to(self, other: Vector2D) -> float:
        """Angle between two vectors in radians."""
        d = self.dot(other) / (self.length() * other.length() + 1e-10)
        d = max(-1.0, min(1.0, d))
        return math.acos(d)

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(x=self.x + other.x, y=self.y + other.y)

    def __neg__(self) -> Vector2D:
        return Vector2D(x=-self.x, y=-self.y)

    def __mul__(self, scalar: float) -> Vector2D:
        return Vector2D(x=self.x * scalar, y=self.y * scalar)


def direction_from_points(start: Point2D, end: Point2D) -> Vector2D:
    """Get direction vector from start to end."""
    return Vector2D(x=end.x - start.x, y=end.y - start.y)


def intersect_lines(
    point_a: Point2D, dir_a: Vector2D,
    point_b: Point2D, dir_b: Vector2D,
) -> Point2D | None:
    """Intersect two infinite lines given as point + direction.

    Returns None when the lines are parallel.
    """
    det = dir_a.cross(dir_b)
    if abs(det) <= LINE_PARALLEL_EPSILON:
        return None
    t = (point_b - point_a).cross(dir_b) / det
    return point_a.offset(dir_a, t)
