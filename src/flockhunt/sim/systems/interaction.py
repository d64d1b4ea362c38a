"""Relationships between prey and predators for one tick.

A predator spots a prey within its view radius. The prey only notices the
predator once it is inside the prey's own, smaller, view radius, and gets
eaten when the predator is within the strike radius:

    distance <= strike_radius               -> the predator eats the prey
    distance <  prey view_radius            -> the predator sees the prey and
                                               the prey sees the predator
    distance <= predator view_radius        -> the predator sees the prey

Being eaten takes priority: an eaten prey respawns elsewhere and neither
flees nor gets reported to the predators that merely saw it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence, Set, Tuple

from pygame.math import Vector2

from ..core.agent import Agent
from ..core.config import SimulationConfig
from ..core.rng import DeterministicRng
from ..core.world_view import WorldView
from ..types.events import PreyEaten
from ..utils.math2d import planar_distance
from .steering import apply_acceleration, steer_towards

logger = logging.getLogger(__name__)


@dataclass
class InteractionResult:
    events: List[PreyEaten] = field(default_factory=list)
    # Prey that saw at least one predator and fled this tick.
    threatened_ids: Set[int] = field(default_factory=set)
    eaten_ids: Set[int] = field(default_factory=set)


@dataclass(slots=True)
class PreyRelations:
    eats_me: List[int] = field(default_factory=list)
    sees_me: List[int] = field(default_factory=list)
    # (predator position, distance) pairs the prey itself can see.
    i_see: List[Tuple[Vector2, float]] = field(default_factory=list)


def classify(
    prey_position: Vector2,
    predators: Sequence[Tuple[int, Vector2]],
    config: SimulationConfig,
) -> PreyRelations:
    """Sort predators by how they relate to a prey. Indexes point into `predators`."""
    relations = PreyRelations()
    predator_view = config.predator.view_radius
    strike = config.predator.strike_radius
    prey_view = config.prey.view_radius
    for index, (_, predator_position) in enumerate(predators):
        distance = planar_distance(prey_position, predator_position)
        if distance > predator_view:
            continue
        if distance <= strike:
            relations.eats_me.append(index)
            continue
        relations.sees_me.append(index)
        if distance < prey_view:
            relations.i_see.append((predator_position, distance))
    return relations


def escape_direction(prey_position: Vector2, seen: Sequence[Tuple[Vector2, float]]) -> Vector2:
    """Sum of vectors pointing away from each seen predator.

    Each contribution is the unit vector away from the predator divided by
    the distance, so a predator twice as close pushes twice as hard.
    """
    escape = Vector2()
    for predator_position, distance in seen:
        if distance <= 0.0:
            continue
        escape += (prey_position - predator_position) / (distance * distance)
    return escape


def interaction_pass(
    prey: Sequence[Agent],
    predators: Sequence[Agent],
    config: SimulationConfig,
    world_view: WorldView,
    rng: DeterministicRng,
    tick: int = 0,
) -> InteractionResult:
    result = InteractionResult()
    if not prey or not predators:
        return result

    # Positions are copied up front: respawning prey must never alias them.
    predator_positions = [(predator.id, Vector2(predator.position)) for predator in predators]
    prey_config = config.prey
    weight = prey_config.weights.escape

    for agent in prey:
        relations = classify(agent.position, predator_positions, config)

        if relations.eats_me:
            caught_at = Vector2(agent.position)
            for index in relations.eats_me:
                predator = predators[index]
                score = predator.record_catch()
                result.events.append(
                    PreyEaten(
                        tick=tick,
                        predator_id=predator.id,
                        prey_id=agent.id,
                        position=caught_at,
                        predator_score=score,
                    )
                )
                logger.debug("Predator %d ate prey %d at (%.1f, %.1f)", predator.id, agent.id, caught_at.x, caught_at.y)
            result.eaten_ids.add(agent.id)
            agent.position = rng.next_position(config.map_size)
            continue

        if relations.i_see:
            escape = escape_direction(agent.position, relations.i_see)
            acceleration = steer_towards(
                agent.velocity, escape, prey_config.max_speed, prey_config.max_steering_force
            ) * weight
            agent.velocity = apply_acceleration(
                agent.velocity,
                acceleration,
                prey_config.recalculate_flocking_seconds,
                prey_config.min_speed,
                prey_config.max_speed,
            )
            result.threatened_ids.add(agent.id)

        for index in relations.sees_me:
            world_view.spot_prey(predator_positions[index][0], agent.position)

    return result
