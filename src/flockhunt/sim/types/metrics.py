from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class TickMetrics:
    tick: int
    prey: int
    predators: int
    eaten: int
    threatened: int
    flock_recomputed: bool
    prey_sightings: int
    predator_sightings: int
    neighbor_checks: int
    average_prey_speed: float
    tick_duration_ms: float = 0.0
