"""Evaluating genomes by letting their networks play Breakout."""

from __future__ import annotations

import math
import random
import time
from collections.abc import Sequence
from dataclasses import dataclass

from .engine import Action, BreakoutEngine
from .genome import Individual
from .nn import FeedForwardNetwork

_FRAME_DELTA = 1.0 / 60.0
_LAUNCH_SPEED = 6.5


def choose_action(outputs: Sequence[float]) -> Action:
    """Map [left, stay, right] network outputs to an action; ties mean stay."""
    left, stay, right = outputs[0], outputs[1], outputs[2]
    if left > stay and left > right:
        return Action.LEFT
    if right > stay and right > left:
        return Action.RIGHT
    return Action.STAY


def evaluate_individual(individual: Individual, num_steps: int) -> float:
    """Play one game with a randomised launch and return its fitness."""
    engine = BreakoutEngine()
    network = FeedForwardNetwork.from_genome(individual.genome)

    angle = random.uniform(-0.5, 0.5)
    engine.dx = _LAUNCH_SPEED * math.cos(angle)
    engine.dy = -_LAUNCH_SPEED * abs(math.sin(angle))
    engine.platform_x = random.uniform(5.0, engine.scr_w - 5.0)
    engine.stick = False

    for _ in range(num_steps):
        if engine.game_over:
            break
        outputs = network.activate(engine.get_state())
        engine.step(choose_action(outputs), _FRAME_DELTA)

    return engine.calculate_fitness()


def train_population(individuals: list[Individual], num_steps: int) -> None:
    """Set the fitness of every individual."""
    for individual in individuals:
        individual.fitness = evaluate_individual(individual, num_steps)


@dataclass
class TrainingStats:
    duration: float
    avg_fitness: float
    max_fitness: float
    min_fitness: float
    population_size: int


def train_population_with_stats(
    individuals: list[Individual], num_steps: int
) -> TrainingStats:
    """Evaluate every individual and summarise the run; duration is in seconds."""
    if not individuals:
        raise ValueError("cannot train an empty population")

    start = time.perf_counter()
    train_population(individuals, num_steps)
    duration = time.perf_counter() - start

    scores = [i.fitness for i in individuals]
    return TrainingStats(
        duration=duration,
        avg_fitness=sum(scores) / len(scores),
        max_fitness=max(0.0, *scores),
        min_fitness=min(scores),
        population_size=len(individuals),
    )