"""Directional intents for keyboard-controlled agents.

Decoding actual key presses is left to whatever front end drives the world;
it hands over one `Intent` per controlled agent per tick.
"""

from __future__ import annotations

import enum

from pygame.math import Vector2

from ..core.agent import Agent
from ..utils.math2d import clamp_length, heading_vector, is_zero, perpendicular, safe_normalize
from .steering import apply_acceleration, steer_towards


class Intent(enum.Flag):
    NONE = 0
    LEFT = enum.auto()
    RIGHT = enum.auto()
    FORWARD = enum.auto()
    BRAKE = enum.auto()


def forward_axis(velocity: Vector2, heading: float) -> Vector2:
    if is_zero(velocity):
        return heading_vector(heading)
    return safe_normalize(velocity)


def intent_acceleration(
    velocity: Vector2,
    heading: float,
    intent: Intent,
    max_speed: float,
    max_force: float,
) -> Vector2:
    if not intent:
        return Vector2()
    forward = forward_axis(velocity, heading)
    right = perpendicular(forward)
    desired = Vector2()
    if Intent.FORWARD in intent:
        desired += forward
    if Intent.LEFT in intent:
        desired -= right
    if Intent.RIGHT in intent:
        desired += right
    acceleration = steer_towards(velocity, desired, max_speed, max_force)
    if Intent.BRAKE in intent:
        acceleration -= forward * max_force
    return clamp_length(acceleration, max_force)


def apply_intent(agent: Agent, intent: Intent, dt: float, max_speed: float, max_force: float) -> None:
    if not intent or dt <= 0.0:
        return
    before = Vector2(agent.velocity)
    acceleration = intent_acceleration(before, agent.heading, intent, max_speed, max_force)
    after = apply_acceleration(before, acceleration, dt, 0.0, max_speed)
    # Braking stops the agent, it never throws it into reverse.
    if Intent.BRAKE in intent and before.dot(after) <= 0.0:
        after = Vector2()
    agent.velocity = after
