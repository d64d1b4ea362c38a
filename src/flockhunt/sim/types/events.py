"""Events emitted by the simulation core.

The world keeps the events of the most recent tick in `World.events`; a
presentation layer or the headless runner drains them from there.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pygame.math import Vector2


@dataclass(frozen=True)
class SimEvent:
    tick: int = field(default=0)


@dataclass(frozen=True)
class PreyEaten(SimEvent):
    predator_id: int = field(default=0)
    prey_id: int = field(default=0)
    # Where the prey was caught, before it respawned.
    position: Vector2 = field(default_factory=Vector2)
    predator_score: int = 0
