from __future__ import annotations

import math
from typing import Iterable

from ..core.agent import Agent
from ..types.metrics import TickMetrics


def average_speed(agents: Iterable[Agent]) -> float:
    total = 0.0
    count = 0
    for agent in agents:
        total += math.hypot(agent.velocity.x, agent.velocity.y)
        count += 1
    return total / count if count else 0.0


def create_metrics(
    tick: int,
    prey: list[Agent],
    predators: list[Agent],
    eaten: int,
    threatened: int,
    flock_recomputed: bool,
    sightings: tuple[int, int],
    neighbor_checks: int,
    duration_ms: float,
) -> TickMetrics:
    prey_sightings, predator_sightings = sightings
    return TickMetrics(
        tick=tick,
        prey=len(prey),
        predators=len(predators),
        eaten=eaten,
        threatened=threatened,
        flock_recomputed=flock_recomputed,
        prey_sightings=prey_sightings,
        predator_sightings=predator_sightings,
        neighbor_checks=neighbor_checks,
        average_prey_speed=average_speed(prey),
        tick_duration_ms=duration_ms,
    )
