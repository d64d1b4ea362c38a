from __future__ import annotations

from pygame.math import Vector2

from flockhunt.sim.core.agent import Agent, Species


def make_prey(agent_id: int, x: float, y: float, vx: float = 0.0, vy: float = 0.0) -> Agent:
    return Agent(id=agent_id, species=Species.PREY, position=Vector2(x, y), velocity=Vector2(vx, vy))


def make_predator(agent_id: int, x: float, y: float, vx: float = 0.0, vy: float = 0.0) -> Agent:
    return Agent(id=agent_id, species=Species.PREDATOR, position=Vector2(x, y), velocity=Vector2(vx, vy))
