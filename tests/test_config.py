import dataclasses

import pytest

from breakout_neat.config import Config, global_config


def test_global_config_is_shared():
    first = global_config()
    second = global_config()
    assert first is second
    assert first == Config()
    assert second.population_size == 150


def test_defaults_match_documented_values():
    cfg = global_config()
    assert cfg.init_mean == 0.0
    assert cfg.init_stdev == 0.5
    assert (cfg.min, cfg.max) == (-5.0, 5.0)
    assert cfg.num_inputs == 3
    assert cfg.num_outputs == 3
    assert cfg.population_size == 150
    assert cfg.num_generations == 100
    assert cfg.num_steps == 5000
    assert cfg.survival_threshold == 0.2


def test_config_is_immutable():
    cfg = Config()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.population_size = 10
    assert cfg.population_size == 150


def test_probabilities_are_in_unit_interval():
    cfg = global_config()
    for value in (
        cfg.mutation_rate,
        cfg.add_node_prob,
        cfg.add_link_prob,
        cfg.shift_weight_prob,
        cfg.random_weight_prob,
    ):
        assert 0.0 <= value <= 1.0