from __future__ import annotations

import logging
import math
from time import perf_counter
from typing import Dict, List, Mapping, Optional, Tuple

from pygame.math import Vector2

from .agent import Agent, Species
from .config import SimulationConfig
from .errors import SimulationError
from .rng import DeterministicRng
from .timer import FlockUpdateTimer
from .world_view import WorldView
from ..systems import controls, flocking, interaction, motion, sighting
from ..systems import metrics as metrics_system
from ..types.events import PreyEaten
from ..types.metrics import TickMetrics
from ..types.snapshot import Snapshot, SnapshotMetadata

logger = logging.getLogger(__name__)


class World:
    """Owns every agent and runs the ordered passes that make up one tick."""

    def __init__(self, config: SimulationConfig):
        self._config = config.validate()
        self._rng = DeterministicRng(config.seed)
        self._agents: List[Agent] = []
        self._prey: List[Agent] = []
        self._predators: List[Agent] = []
        self._id_to_agent: Dict[int, Agent] = {}
        self._world_view = WorldView()
        self._flock_timer = FlockUpdateTimer(config.prey.recalculate_flocking_seconds)
        self._events: List[PreyEaten] = []
        self._metrics: TickMetrics | None = None
        self._focused_id: Optional[int] = None
        self._tick = 0
        self._next_id = 0
        self._bootstrap_population()

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def agents(self) -> List[Agent]:
        return self._agents

    @property
    def prey(self) -> List[Agent]:
        return self._prey

    @property
    def predators(self) -> List[Agent]:
        return self._predators

    @property
    def world_view(self) -> WorldView:
        return self._world_view

    @property
    def flock_timer(self) -> FlockUpdateTimer:
        return self._flock_timer

    @property
    def events(self) -> List[PreyEaten]:
        """Events emitted during the most recent tick."""
        return self._events

    @property
    def metrics(self) -> TickMetrics | None:
        return self._metrics

    @property
    def tick(self) -> int:
        return self._tick

    @property
    def scores(self) -> Dict[int, int]:
        return {predator.id: predator.score for predator in self._predators}

    @property
    def focused_id(self) -> Optional[int]:
        return self._focused_id

    def agent(self, agent_id: int) -> Agent:
        try:
            return self._id_to_agent[agent_id]
        except KeyError:
            raise SimulationError(f"Unknown agent id {agent_id}") from None

    def focus(self, agent_id: Optional[int]) -> None:
        if agent_id is not None:
            self.agent(agent_id)
        self._focused_id = agent_id

    def add_agent(
        self,
        species: Species,
        position: Vector2,
        velocity: Vector2 | None = None,
        keyboard_controlled: bool = False,
    ) -> Agent:
        agent = Agent(
            id=self._next_id,
            species=species,
            position=Vector2(position),
            velocity=Vector2() if velocity is None else Vector2(velocity),
            keyboard_controlled=keyboard_controlled,
        )
        self._next_id += 1
        self._agents.append(agent)
        self._id_to_agent[agent.id] = agent
        if agent.is_prey:
            self._prey.append(agent)
        else:
            self._predators.append(agent)
        return agent

    def reset(self) -> None:
        self._agents.clear()
        self._prey.clear()
        self._predators.clear()
        self._id_to_agent.clear()
        self._world_view.reset(())
        self._flock_timer.reset()
        self._events = []
        self._rng.reset()
        self._metrics = None
        self._focused_id = None
        self._tick = 0
        self._next_id = 0
        self._bootstrap_population()

    def step(self, dt: float | None = None, intents: Mapping[int, controls.Intent] | None = None) -> TickMetrics:
        start = perf_counter()
        config = self._config
        dt = config.time_step if dt is None else dt
        if not math.isfinite(dt) or dt < 0.0:
            raise SimulationError(f"Elapsed time must be a finite non-negative number, got {dt}")
        controlled = self._resolve_intents(intents or {})

        self._world_view.reset(predator.id for predator in self._predators)

        result = interaction.interaction_pass(
            self._prey, self._predators, config, self._world_view, self._rng, tick=self._tick
        )
        self._events = result.events
        if result.events:
            logger.info("Tick %d: %d prey eaten", self._tick, len(result.events))

        sighting.sighting_pass(self._predators, config.predator.view_radius, self._world_view)

        neighbor_checks = 0
        flock_recomputed = self._flock_timer.tick(dt)
        if flock_recomputed:
            neighbor_checks = self._apply_flocking(result.threatened_ids | result.eaten_ids)

        for agent, intent in controlled:
            limits = config.prey if agent.is_prey else config.predator
            controls.apply_intent(agent, intent, dt, limits.max_speed, limits.max_steering_force)

        friction = config.predator.friction_seconds
        for agent in self._agents:
            motion.integrate(agent, dt, config.map_size, friction)

        duration_ms = (perf_counter() - start) * 1000.0
        self._metrics = metrics_system.create_metrics(
            self._tick,
            self._prey,
            self._predators,
            eaten=len(result.events),
            threatened=len(result.threatened_ids),
            flock_recomputed=flock_recomputed,
            sightings=(self._world_view.prey_sightings(), self._world_view.predator_sightings()),
            neighbor_checks=neighbor_checks,
            duration_ms=duration_ms,
        )
        self._tick += 1
        return self._metrics

    def snapshot(self) -> Snapshot:
        config = self._config
        return Snapshot(
            tick=self._tick,
            metrics=self._metrics,
            agents=[self._agent_snapshot(agent) for agent in self._agents],
            scores=self.scores,
            focused_id=self._focused_id,
            metadata=SnapshotMetadata(
                map_size=config.map_size,
                sim_dt=config.time_step,
                tick_rate=1.0 / config.time_step,
                seed=config.seed,
                config_version=config.config_version,
            ),
        )

    def _bootstrap_population(self) -> None:
        config = self._config
        for _ in range(config.prey.count):
            position = self._rng.next_position(config.map_size)
            velocity = self._rng.next_unit_circle() * config.prey.min_speed
            self.add_agent(Species.PREY, position, velocity)
        for index in range(config.predator.count):
            position = self._rng.next_position(config.map_size)
            self.add_agent(
                Species.PREDATOR,
                position,
                keyboard_controlled=index < config.predator.keyboard_controlled,
            )
        if self._predators:
            self._focused_id = self._predators[0].id
        logger.debug(
            "Spawned %d prey and %d predators on a %.0f map (seed %d)",
            len(self._prey),
            len(self._predators),
            config.map_size,
            config.seed,
        )

    def _apply_flocking(self, skip_ids: set[int]) -> int:
        records = [agent.record() for agent in self._prey]
        velocities, neighbor_checks = flocking.flocking_pass(
            records, self._config.prey, self._config.map_size, skip_ids
        )
        for agent in self._prey:
            velocity = velocities.get(agent.id)
            if velocity is not None:
                agent.velocity = velocity
        return neighbor_checks

    def _resolve_intents(self, intents: Mapping[int, controls.Intent]) -> List[Tuple[Agent, controls.Intent]]:
        # Unknown ids fail before any pass has touched the world.
        controlled = []
        for agent_id, intent in intents.items():
            agent = self.agent(agent_id)
            if not agent.keyboard_controlled:
                logger.debug("Ignoring intent %s for agent %d, not keyboard controlled", intent, agent_id)
                continue
            controlled.append((agent, intent))
        return controlled

    @staticmethod
    def _agent_snapshot(agent: Agent) -> Dict[str, object]:
        return {
            "id": agent.id,
            "species": agent.species.value,
            "x": agent.position.x,
            "y": agent.position.y,
            "vx": agent.velocity.x,
            "vy": agent.velocity.y,
            "speed": agent.velocity.length(),
            "heading": agent.heading,
            "keyboard_controlled": agent.keyboard_controlled,
            "score": agent.score,
        }
