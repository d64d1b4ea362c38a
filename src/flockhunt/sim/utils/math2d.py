from __future__ import annotations

import math

from pygame.math import Vector2


def is_zero(vector: Vector2) -> bool:
    return vector.x == 0.0 and vector.y == 0.0


def planar_distance(a: Vector2, b: Vector2) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def perpendicular(vector: Vector2) -> Vector2:
    # Clockwise quarter turn: (1, 0) -> (0, -1).
    return Vector2(vector.y, -vector.x)


def safe_normalize(vector: Vector2) -> Vector2:
    return _safe_normalize_xy(vector.x, vector.y)


def _safe_normalize_xy(x: float, y: float) -> Vector2:
    magnitude_sq = x * x + y * y
    if magnitude_sq < 1e-12:
        return Vector2()
    inv = 1.0 / math.sqrt(magnitude_sq)
    return Vector2(x * inv, y * inv)


def clamp_length(vector: Vector2, max_length: float) -> Vector2:
    return _clamp_length_xy(vector.x, vector.y, max_length)


def _clamp_length_xy(x: float, y: float, max_length: float) -> Vector2:
    if max_length <= 0:
        return Vector2()
    magnitude_sq = x * x + y * y
    if magnitude_sq <= max_length * max_length:
        return Vector2(x, y)
    inv = max_length / math.sqrt(magnitude_sq)
    return Vector2(x * inv, y * inv)


def clamp_value(value: float, min_value: float, max_value: float) -> float:
    return max(min_value, min(max_value, value))


def heading_from_velocity(vector: Vector2, default: float = 0.0) -> float:
    """Facing angle in [-pi, pi] of a velocity, `default` when at rest.

    `acos` only covers [0, pi]; the sign of y picks the half plane, with
    y == 0 counted as positive.
    """
    unit = safe_normalize(vector)
    if is_zero(unit):
        return default
    angle = math.acos(clamp_value(unit.x, -1.0, 1.0))
    return angle if unit.y >= 0.0 else -angle


def heading_vector(heading: float) -> Vector2:
    return Vector2(math.cos(heading), math.sin(heading))


def wrap_coordinate(value: float, size: float) -> float:
    # Single correction: only valid while one tick moves less than a map width.
    if value >= size:
        return value - size
    if value < 0.0:
        value += size
        # A tiny negative value rounds up to exactly `size`.
        return value if value < size else 0.0
    return value
