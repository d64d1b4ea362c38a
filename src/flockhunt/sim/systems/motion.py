from __future__ import annotations

from ..core.agent import Agent
from ..utils.math2d import heading_from_velocity, is_zero, wrap_coordinate


def integrate(agent: Agent, dt: float, map_size: float, friction_seconds: float) -> None:
    """Move `agent` along its velocity on the torus and turn it to face that way.

    Predators also slow down: friction takes `friction_seconds` to bring a
    predator from any speed to rest if nothing accelerates it.
    """
    position = agent.position
    velocity = agent.velocity
    position.update(
        wrap_coordinate(position.x + velocity.x * dt, map_size),
        wrap_coordinate(position.y + velocity.y * dt, map_size),
    )
    if is_zero(velocity):
        return
    agent.heading = heading_from_velocity(velocity, agent.heading)
    if agent.is_predator:
        velocity *= max(0.0, 1.0 - dt / friction_seconds)
