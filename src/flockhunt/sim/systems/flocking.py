"""Boids flocking for prey.

Each prey is steered by four weighted forces: away from the nearby map
edges, towards the centre of its flockmates (cohesion), towards their
average heading (alignment) and away from prey that crowd it (separation).
The neighbour scan is a plain O(n^2) loop over a snapshot of the flock,
which is fine for the few hundred prey the simulation runs with.
"""

from __future__ import annotations

from typing import AbstractSet, Dict, Sequence, Tuple

from pygame.math import Vector2

from ..core.agent import AgentRecord
from ..core.config import PreyConfig
from .steering import apply_acceleration, steer_towards


def wall_desire(position: Vector2, map_size: float, margin: float, max_speed: float) -> Vector2:
    desired = Vector2()
    if position.x < margin:
        desired.x = max_speed
    elif position.x > map_size - margin:
        desired.x = -max_speed
    if position.y < margin:
        desired.y = max_speed
    elif position.y > map_size - margin:
        desired.y = -max_speed
    return desired


def flocking_acceleration(
    index: int,
    prey: Sequence[AgentRecord],
    config: PreyConfig,
    map_size: float,
) -> Tuple[Vector2, int]:
    """Summed weighted steering force for `prey[index]` and the number of pairs checked."""
    me = prey[index]
    pos_x = me.position.x
    pos_y = me.position.y
    view_sq = config.view_radius * config.view_radius
    avoid_sq = config.avoid_radius * config.avoid_radius
    epsilon = config.separation_epsilon

    flockmates = 0
    heading_x = heading_y = 0.0
    center_x = center_y = 0.0
    separation_x = separation_y = 0.0
    checks = 0
    for other_index, other in enumerate(prey):
        if other_index == index:
            continue
        checks += 1
        offset_x = pos_x - other.position.x
        offset_y = pos_y - other.position.y
        sq_distance = offset_x * offset_x + offset_y * offset_y
        if sq_distance >= view_sq:
            continue
        flockmates += 1
        heading_x += other.velocity.x
        heading_y += other.velocity.y
        center_x += other.position.x
        center_y += other.position.y
        if sq_distance < avoid_sq:
            inv = 1.0 / (sq_distance + epsilon)
            separation_x += offset_x * inv
            separation_y += offset_y * inv

    weights = config.weights
    max_speed = config.max_speed
    max_force = config.max_steering_force
    velocity = me.velocity
    acceleration = Vector2()

    wall = wall_desire(me.position, map_size, map_size * config.wall_margin_fraction, max_speed)
    if weights.wall and (wall.x or wall.y):
        acceleration += steer_towards(velocity, wall, max_speed, max_force) * weights.wall

    if flockmates == 0:
        return acceleration, checks

    to_center = Vector2(center_x / flockmates - pos_x, center_y / flockmates - pos_y)
    acceleration += steer_towards(velocity, to_center, max_speed, max_force) * weights.cohesion
    heading = Vector2(heading_x / flockmates, heading_y / flockmates)
    acceleration += steer_towards(velocity, heading, max_speed, max_force) * weights.alignment
    if separation_x or separation_y:
        separation = Vector2(separation_x, separation_y)
        acceleration += steer_towards(velocity, separation, max_speed, max_force) * weights.separation
    return acceleration, checks


def flocking_pass(
    prey: Sequence[AgentRecord],
    config: PreyConfig,
    map_size: float,
    skip_ids: AbstractSet[int] = frozenset(),
) -> Tuple[Dict[int, Vector2], int]:
    """New velocities for every prey not in `skip_ids`.

    `prey` must be a snapshot taken before the pass; nothing is written back
    here, so every prey sees the same pre-pass state of its flockmates. Skipped
    prey still count as flockmates of the others.
    """
    interval = config.recalculate_flocking_seconds
    velocities: Dict[int, Vector2] = {}
    neighbor_checks = 0
    for index, record in enumerate(prey):
        if record.id in skip_ids:
            continue
        acceleration, checks = flocking_acceleration(index, prey, config, map_size)
        neighbor_checks += checks
        velocities[record.id] = apply_acceleration(
            record.velocity, acceleration, interval, config.min_speed, config.max_speed
        )
    return velocities, neighbor_checks
