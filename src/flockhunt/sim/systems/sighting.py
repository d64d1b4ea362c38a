from __future__ import annotations

from typing import Sequence

from pygame.math import Vector2

from ..core.agent import Agent
from ..core.world_view import WorldView


def sighting_pass(predators: Sequence[Agent], view_radius: float, world_view: WorldView) -> int:
    """Record every pair of predators within `view_radius` in both world views.

    Each unordered pair is compared once (i < j) and both sides are updated
    from that single comparison. Returns the number of pairs found.
    """
    positions = [(predator.id, Vector2(predator.position)) for predator in predators]
    radius_sq = view_radius * view_radius
    pairs = 0
    for i, (first_id, first_pos) in enumerate(positions):
        for second_id, second_pos in positions[i + 1 :]:
            offset_x = first_pos.x - second_pos.x
            offset_y = first_pos.y - second_pos.y
            if offset_x * offset_x + offset_y * offset_y > radius_sq:
                continue
            world_view.spot_predator(first_id, second_pos)
            world_view.spot_predator(second_id, first_pos)
            pairs += 1
    return pairs
