from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from pygame.math import Vector2


class WorldView:
    """Per-tick scratch buffers describing what each predator noticed.

    The tick driver owns one instance and resets it before any pass runs, so
    nothing recorded here survives into the next tick.
    """

    def __init__(self) -> None:
        self._nearby_prey: Dict[int, List[Vector2]] = {}
        self._nearby_predators: Dict[int, List[Vector2]] = {}

    def reset(self, predator_ids: Iterable[int]) -> None:
        self._nearby_prey.clear()
        self._nearby_predators.clear()
        for predator_id in predator_ids:
            self._nearby_prey[predator_id] = []
            self._nearby_predators[predator_id] = []

    def spot_prey(self, predator_id: int, at: Vector2) -> None:
        self._nearby_prey.setdefault(predator_id, []).append(Vector2(at))

    def spot_predator(self, predator_id: int, at: Vector2) -> None:
        self._nearby_predators.setdefault(predator_id, []).append(Vector2(at))

    def nearby_prey(self, predator_id: int) -> Tuple[Vector2, ...]:
        return tuple(self._nearby_prey.get(predator_id, ()))

    def nearby_predators(self, predator_id: int) -> Tuple[Vector2, ...]:
        return tuple(self._nearby_predators.get(predator_id, ()))

    def prey_sightings(self) -> int:
        return sum(len(seen) for seen in self._nearby_prey.values())

    def predator_sightings(self) -> int:
        return sum(len(seen) for seen in self._nearby_predators.values())
