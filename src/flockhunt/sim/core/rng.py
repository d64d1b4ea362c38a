from __future__ import annotations

import math
import random

from pygame.math import Vector2

from ..utils.math2d import wrap_coordinate


class DeterministicRng:
    def __init__(self, seed: int):
        self._seed = seed
        self._random = random.Random(seed)

    def reset(self) -> None:
        self._random.seed(self._seed)

    def next_unit_circle(self) -> Vector2:
        angle = self._random.uniform(0, 2 * math.pi)
        vector = Vector2()
        vector.from_polar((1, math.degrees(angle)))
        return vector

    def next_position(self, map_size: float) -> Vector2:
        x = self._random.random() * map_size
        y = self._random.random() * map_size
        return Vector2(wrap_coordinate(x, map_size), wrap_coordinate(y, map_size))
