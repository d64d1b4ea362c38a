from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .errors import ConfigurationError


@dataclass
class FlockingWeights:
    wall: float = 1.0
    alignment: float = 1.0
    cohesion: float = 1.0
    separation: float = 1.5
    escape: float = 1.0


@dataclass
class PreyConfig:
    # Roughly this many prey live on the map at any time; eaten prey respawn.
    count: int = 50
    max_speed: float = 350.0
    # Prey are always on the move.
    min_speed: float = 100.0
    max_steering_force: float = 250.0
    view_radius: float = 150.0
    # Prey closer than this repel each other.
    avoid_radius: float = 80.0
    # Flocking is expensive, it is recomputed only this often.
    recalculate_flocking_seconds: float = 0.05
    # Fraction of the map width along each edge where the wall force kicks in.
    wall_margin_fraction: float = 0.1
    separation_epsilon: float = 1e-3
    weights: FlockingWeights = field(default_factory=FlockingWeights)


@dataclass
class PredatorConfig:
    count: int = 3
    # Must stay below the prey max speed so predators have to cooperate.
    max_speed: float = 300.0
    max_steering_force: float = 300.0
    # Must be at least the prey view radius.
    view_radius: float = 250.0
    strike_radius: float = 30.0
    # Seconds it takes friction to bring a predator from max speed to rest.
    friction_seconds: float = 5.0
    # The first N predators react to keyboard intents.
    keyboard_controlled: int = 1


@dataclass
class SimulationConfig:
    time_step: float = 1.0 / 60.0
    map_size: float = 1000.0
    seed: int = 42
    config_version: str = "v1"
    prey: PreyConfig = field(default_factory=PreyConfig)
    predator: PredatorConfig = field(default_factory=PredatorConfig)

    @staticmethod
    def from_yaml(path: Path) -> "SimulationConfig":
        data = yaml.safe_load(Path(path).read_text())
        return load_config(data or {})

    def validate(self) -> "SimulationConfig":
        prey = self.prey
        predator = self.predator
        if self.map_size <= 0:
            raise ConfigurationError(f"map_size must be positive, got {self.map_size}")
        if self.time_step <= 0:
            raise ConfigurationError(f"time_step must be positive, got {self.time_step}")
        if prey.count < 0 or predator.count < 0:
            raise ConfigurationError("agent counts must be non-negative")
        if not 0 <= prey.min_speed <= prey.max_speed:
            raise ConfigurationError(
                f"prey speeds must satisfy 0 <= min_speed <= max_speed, got {prey.min_speed}, {prey.max_speed}"
            )
        for name, section in (("prey", prey), ("predator", predator)):
            if section.max_speed <= 0:
                raise ConfigurationError(f"{name} max_speed must be positive, got {section.max_speed}")
            if section.max_steering_force < 0:
                raise ConfigurationError(
                    f"{name} max_steering_force must be non-negative, got {section.max_steering_force}"
                )
        if prey.separation_epsilon <= 0:
            raise ConfigurationError(f"prey separation_epsilon must be positive, got {prey.separation_epsilon}")
        if prey.avoid_radius > prey.view_radius:
            raise ConfigurationError("prey avoid_radius must not exceed view_radius")
        if predator.view_radius < prey.view_radius:
            raise ConfigurationError("predator view_radius must be at least the prey view_radius")
        if not 0 <= predator.strike_radius < predator.view_radius:
            raise ConfigurationError("predator strike_radius must lie in [0, view_radius)")
        if predator.friction_seconds <= 0:
            raise ConfigurationError("predator friction_seconds must be positive")
        if prey.recalculate_flocking_seconds <= 0:
            raise ConfigurationError("prey recalculate_flocking_seconds must be positive")
        if not 0 <= prey.wall_margin_fraction < 0.5:
            raise ConfigurationError("prey wall_margin_fraction must lie in [0, 0.5)")
        return self


def load_config(raw: dict) -> SimulationConfig:
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Configuration must be a mapping, got {type(raw).__name__}")
    prey_raw = dict(raw.get("prey") or {})
    try:
        weights = FlockingWeights(**(prey_raw.pop("weights", None) or {}))
        prey = PreyConfig(weights=weights, **prey_raw)
        predator = PredatorConfig(**(raw.get("predator") or {}))
        sim_values = {k: v for k, v in raw.items() if k not in {"prey", "predator"}}
        config = SimulationConfig(prey=prey, predator=predator, **sim_values)
    except TypeError as exc:
        raise ConfigurationError(f"Unknown configuration key: {exc}") from exc
    return config.validate()
