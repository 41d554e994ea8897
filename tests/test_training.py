import pytest

from breakout_neat.engine import Action
from breakout_neat.genome import Genome, Individual
from breakout_neat.training import (
    choose_action,
    evaluate_individual,
    train_population,
    train_population_with_stats,
)


def _individual():
    return Individual(Genome.random(3, 3), 0.0)


@pytest.mark.parametrize(
    "outputs, expected",
    [
        ([1.0, 0.0, 0.0], Action.LEFT),
        ([0.0, 0.0, 1.0], Action.RIGHT),
        ([0.0, 1.0, 0.0], Action.STAY),
        ([1.0, 1.0, 0.0], Action.STAY),
        ([1.0, 0.0, 1.0], Action.STAY),
    ],
)
def test_choose_action(outputs, expected):
    assert choose_action(outputs) is expected


def test_zero_steps_gives_zero_fitness():
    assert evaluate_individual(_individual(), 0) == 0.0


def test_short_game_survives_every_frame():
    # The ball cannot reach a block or the floor within ten frames.
    assert evaluate_individual(_individual(), 10) == 10.0


def test_train_population_sets_fitness():
    individuals = [_individual() for _ in range(3)]
    train_population(individuals, 5)
    assert [i.fitness for i in individuals] == [5.0, 5.0, 5.0]


def test_stats_are_consistent():
    individuals = [_individual() for _ in range(4)]
    stats = train_population_with_stats(individuals, 20)
    assert stats.population_size == 4
    assert stats.min_fitness <= stats.avg_fitness <= stats.max_fitness
    assert stats.max_fitness == max(i.fitness for i in individuals)
    assert stats.duration >= 0.0


def test_stats_on_empty_population_raise():
    with pytest.raises(ValueError):
        train_population_with_stats([], 10)