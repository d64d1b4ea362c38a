from __future__ import annotations

import math

from pygame.math import Vector2

from ..utils.math2d import _clamp_length_xy, clamp_value


def steer_towards(velocity: Vector2, desired: Vector2, max_speed: float, max_force: float) -> Vector2:
    """Acceleration nudging `velocity` towards `desired` at full speed.

    The magnitude never exceeds `max_force`, however large `desired` is. A
    zero `desired` yields a zero acceleration.
    """
    magnitude_sq = desired.x * desired.x + desired.y * desired.y
    if magnitude_sq < 1e-12:
        return Vector2()
    scale = max_speed / math.sqrt(magnitude_sq)
    return _clamp_length_xy(
        desired.x * scale - velocity.x,
        desired.y * scale - velocity.y,
        max_force,
    )


def clamp_speed(speed: float, min_speed: float, max_speed: float) -> float:
    return clamp_value(speed, min_speed, max_speed)


def apply_acceleration(
    velocity: Vector2,
    acceleration: Vector2,
    seconds: float,
    min_speed: float,
    max_speed: float,
) -> Vector2:
    """Integrate `acceleration` over `seconds` and clamp the resulting speed.

    The direction is preserved. A velocity that ends up (numerically) zero
    becomes exactly zero since it has no direction to scale.
    """
    vel_x = velocity.x + acceleration.x * seconds
    vel_y = velocity.y + acceleration.y * seconds
    speed = math.sqrt(vel_x * vel_x + vel_y * vel_y)
    if speed < 1e-12:
        return Vector2()
    result = Vector2(vel_x, vel_y)
    clamped = clamp_speed(speed, min_speed, max_speed)
    if clamped != speed:
        result *= clamped / speed
    return result
