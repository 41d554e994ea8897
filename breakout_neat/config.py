"""Tuning parameters for the NEAT trainer."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class Config:
    """Evolution, mutation and run-length settings."""

    init_mean: float = 0.0
    init_stdev: float = 0.5
    min: float = -5.0
    max: float = 5.0
    mutation_rate: float = 0.2
    mutate_power: float = 0.3
    replace_rate: float = 0.05
    survival_threshold: float = 0.2

    num_inputs: int = 3
    num_outputs: int = 3

    add_node_prob: float = 0.03
    add_link_prob: float = 0.05
    enable_link_prob: float = 0.01
    disable_link_prob: float = 0.01
    shift_weight_prob: float = 0.8
    random_weight_prob: float = 0.1

    c1_excess: float = 1.0
    c2_disjoint: float = 1.0
    c3_weight: float = 0.4

    compatibility_threshold: float = 3.0

    population_size: int = 150
    num_generations: int = 100
    num_steps: int = 5000


@lru_cache(maxsize=None)
def global_config() -> Config:
    """Return the process-wide configuration."""
    return Config()