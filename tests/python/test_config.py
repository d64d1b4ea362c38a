from __future__ import annotations

from pathlib import Path

import pytest

from flockhunt.sim.core.config import SimulationConfig, load_config
from flockhunt.sim.core.errors import ConfigurationError

DEFAULT_YAML = Path(__file__).resolve().parents[2] / "configs" / "default.yaml"


def test_load_config_merges_nested_sections():
    config = load_config(
        {
            "map_size": 800.0,
            "seed": 9,
            "prey": {"count": 10, "weights": {"separation": 2.0}},
            "predator": {"strike_radius": 20.0},
        }
    )
    assert config.map_size == 800.0
    assert config.seed == 9
    assert config.prey.count == 10
    assert config.prey.weights.separation == 2.0
    assert config.prey.weights.cohesion == 1.0
    assert config.predator.strike_radius == 20.0
    assert config.predator.view_radius == 250.0


def test_from_yaml_reads_file(tmp_path):
    path = tmp_path / "small.yaml"
    path.write_text("seed: 5\nprey:\n  count: 3\npredator:\n  count: 1\n")
    config = SimulationConfig.from_yaml(path)
    assert (config.seed, config.prey.count, config.predator.count) == (5, 3, 1)


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert SimulationConfig.from_yaml(path) == SimulationConfig()


def test_unknown_key_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        load_config({"prey": {"colour": "white"}})


@pytest.mark.parametrize(
    "raw",
    [
        {"map_size": 0.0},
        {"prey": {"min_speed": 400.0}},
        {"prey": {"avoid_radius": 200.0}},
        {"predator": {"view_radius": 100.0}},
        {"predator": {"strike_radius": 300.0}},
        {"predator": {"friction_seconds": 0.0}},
        {"prey": {"recalculate_flocking_seconds": 0.0}},
        {"prey": {"count": -1}},
        {"prey": {"separation_epsilon": 0.0}},
        {"prey": {"max_speed": -10.0, "min_speed": 0.0}},
        {"predator": {"max_speed": 0.0}},
        {"prey": {"max_steering_force": -1.0}},
        {"predator": {"max_steering_force": -5.0}},
    ],
)
def test_invalid_values_are_rejected(raw):
    with pytest.raises(ConfigurationError):
        load_config(raw)


def test_configuration_error_is_a_value_error():
    with pytest.raises(ValueError):
        load_config({"map_size": -1.0})


@pytest.mark.config_change
def test_shipped_yaml_matches_defaults():
    config = SimulationConfig.from_yaml(DEFAULT_YAML)
    defaults = SimulationConfig()
    assert config.prey == defaults.prey
    assert config.predator == defaults.predator
    assert config.map_size == defaults.map_size
    assert config.time_step == pytest.approx(defaults.time_step, rel=1e-4)


@pytest.mark.parametrize("raw", [["a"], "seed: 1", 3])
def test_non_mapping_config_is_a_configuration_error(raw):
    with pytest.raises(ConfigurationError):
        load_config(raw)


def test_yaml_list_is_a_configuration_error(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- seed\n- 3\n")
    with pytest.raises(ConfigurationError):
        SimulationConfig.from_yaml(path)
