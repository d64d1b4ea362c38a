from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pygame.math import Vector2


class Species(str, Enum):
    PREY = "Prey"
    PREDATOR = "Predator"


@dataclass(slots=True)
class Agent:
    id: int
    species: Species
    position: Vector2
    velocity: Vector2 = field(default_factory=Vector2)
    heading: float = 0.0
    keyboard_controlled: bool = False
    # Prey eaten so far; only predators ever score.
    score: int = 0

    @property
    def is_prey(self) -> bool:
        return self.species is Species.PREY

    @property
    def is_predator(self) -> bool:
        return self.species is Species.PREDATOR

    def record_catch(self) -> int:
        self.score += 1
        return self.score

    def record(self) -> "AgentRecord":
        return AgentRecord(self.id, Vector2(self.position), Vector2(self.velocity))


@dataclass(frozen=True, slots=True)
class AgentRecord:
    """Copy of an agent's kinematic state taken before a pass starts."""

    id: int
    position: Vector2
    velocity: Vector2
