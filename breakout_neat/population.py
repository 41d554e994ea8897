"""A population of individuals evolved by truncation selection."""

from __future__ import annotations

import copy
import math
import random
from collections.abc import Callable
from dataclasses import dataclass, field

from .config import global_config
from .crossover import crossover
from .genome import Genome, Individual
from .mutation import mutate


def sort_individuals_by_fitness(individuals: list[Individual]) -> None:
    """Sort in place, fittest first."""
    if any(math.isnan(i.fitness) for i in individuals):
        raise ValueError("cannot sort individuals with NaN fitness")
    individuals.sort(key=lambda i: i.fitness, reverse=True)


def _fresh_individual() -> Individual:
    cfg = global_config()
    return Individual(Genome.random(cfg.num_inputs, cfg.num_outputs), 0.0)


@dataclass
class Population:
    individuals: list[Individual] = field(default_factory=list)
    best: Individual = field(default_factory=_fresh_individual)

    def populate(self) -> None:
        """Add a configured number of fresh random individuals."""
        cfg = global_config()
        self.individuals.extend(
            Individual(Genome.random(cfg.num_inputs, cfg.num_outputs), 0.0)
            for _ in range(cfg.population_size)
        )

    def populate_from_genome(self, genome: Genome) -> None:
        """Add a configured number of independent copies of one genome."""
        cfg = global_config()
        self.individuals.extend(
            Individual(copy.deepcopy(genome), 0.0) for _ in range(cfg.population_size)
        )

    def reproduce(self) -> list[Individual]:
        """Breed a new generation from the front (fittest) share of individuals."""
        cfg = global_config()
        cutoff = math.ceil(cfg.survival_threshold * len(self.individuals))
        survivors = self.individuals[:cutoff]
        if not survivors:
            raise ValueError("no individuals to reproduce from")

        offspring = []
        for _ in range(cfg.population_size):
            first = random.choice(survivors)
            second = random.choice(survivors)
            child = crossover(first, second)
            mutate(child)
            offspring.append(Individual(child, 0.0))
        return offspring

    def run(
        self,
        compute_fitness: Callable[[list[Individual]], None],
        num_generations: int,
    ) -> None:
        """Evaluate, select and breed for the given number of generations."""
        for _ in range(num_generations):
            compute_fitness(self.individuals)
            sort_individuals_by_fitness(self.individuals)
            if not self.individuals:
                raise ValueError("population is empty")
            self.best = copy.deepcopy(self.individuals[0])
            self.individuals = self.reproduce()