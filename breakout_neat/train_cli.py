"""Command line trainer: evolves Breakout players and saves the best."""

from __future__ import annotations

import argparse
import copy
import sys
import time
from collections.abc import Sequence

from .config import global_config
from .population import Population, sort_individuals_by_fitness
from .serialization import load_genome, save_genome, save_individual
from .training import train_population_with_stats

INDIVIDUAL_FILE = "best_individual.pb"
GENOME_FILE = "best_genome.pb"


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    """Parse --prev, --num-gens and --num-steps; other arguments are ignored."""
    cfg = global_config()
    parser = argparse.ArgumentParser(prog="breakout-train", allow_abbrev=False)
    parser.add_argument("--prev", action="store_true", help="start from best_genome.pb")
    parser.add_argument(
        "--num-gens", dest="num_generations", type=int, default=cfg.num_generations
    )
    parser.add_argument("--num-steps", dest="num_steps", type=int, default=cfg.num_steps)
    options, _ = parser.parse_known_args(list(argv))
    return options


def main(argv: Sequence[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    options = parse_args(args)
    print("Starting NEAT training on Breakout...")

    population = Population()
    if options.prev:
        try:
            genome = load_genome(GENOME_FILE)
        except (OSError, ValueError) as exc:
            print(f"Failed to load genome: {exc}", file=sys.stderr)
            print("Please run training first: breakout-train", file=sys.stderr)
            return 1
        print("Successfully loaded best genome!")
        population.populate_from_genome(genome)
    else:
        population.populate()

    if "--num-gens" in args:
        print(f"num-gens flag loaded successfully, num_gens: {options.num_generations}")
    if "--num-steps" in args:
        print(f"num-steps flag loaded successfully, num_steps: {options.num_steps}")

    num_generations = options.num_generations
    start = time.perf_counter()

    for generation in range(num_generations):
        print(f"\n=== Generation {generation + 1}/{num_generations} ===")
        stats = train_population_with_stats(population.individuals, options.num_steps)
        rate = (
            stats.population_size / stats.duration if stats.duration > 0 else float("inf")
        )
        print(f"  Evaluation time: {stats.duration:.2f}s")
        print(f"  Evaluations/sec: {rate:.2f}")
        print(f"  Avg fitness: {stats.avg_fitness:.2f}")
        print(f"  Min fitness: {stats.min_fitness:.2f}")
        print(f"  Max fitness: {stats.max_fitness:.2f}")

        sort_individuals_by_fitness(population.individuals)
        if population.individuals:
            best = population.individuals[0]
            population.best = copy.deepcopy(best)
            print(f"  Best genome ID: {best.genome.id}")
            print(f"  Best fitness: {best.fitness:.2f}")

        if generation < num_generations - 1:
            population.individuals = population.reproduce()

    total = time.perf_counter() - start
    print("\n=== Training Complete! ===")
    print(f"Total training time: {total:.2f}s")
    if num_generations > 0:
        print(f"Average time per generation: {total / num_generations:.2f}s")
    print(f"Best genome ID: {population.best.genome.id}")
    print(f"Best fitness: {population.best.fitness:.2f}")

    try:
        save_individual(population.best, INDIVIDUAL_FILE)
    except OSError as exc:
        print(f"Failed to save best individual: {exc}", file=sys.stderr)
    try:
        save_genome(population.best.genome, GENOME_FILE)
    except OSError as exc:
        print(f"Failed to save best genome: {exc}", file=sys.stderr)

    print("\nResults saved to:")
    print(f"  - {INDIVIDUAL_FILE}")
    print(f"  - {GENOME_FILE}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())