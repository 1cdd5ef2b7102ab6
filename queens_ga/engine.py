"""
Generation loop for the N-queens solver.

Drives ranking, the termination check and population regeneration across
generations, and collects the run's result.
"""

from typing import List, Optional, Tuple

import numpy as np

from .data_models import Individual, RunParameters, GenerationStats, RunResult
from .population import (
    create_population,
    rank_population,
    count_leading_solutions,
    collect_solutions,
)
from .selection import select_for_replacement
from .crossover import fill_vacancies
from .mutation import mutate_population


def next_population(
    population: List[Individual],
    params: RunParameters,
    rng: np.random.Generator,
    stats: GenerationStats
) -> GenerationStats:
    """
    Regenerate the population in place.

    Algorithm:
        1. Clear the slots of individuals selected for replacement
        2. Refill every cleared slot by crossover of surviving parents
        3. Mutate the whole population with a small per-individual chance

    Args:
        population: Ranked population, modified in place
        params: Run parameters
        rng: Random number generator
        stats: Statistics of the generation being evolved, updated in place

    Returns:
        The updated stats

    Raises:
        DegenerateSelectionError: If no individual survived selection
    """
    vacant = select_for_replacement(population, rng)
    stats.degenerate = fill_vacancies(population, vacant, rng)
    stats.mutations = mutate_population(population, rng)

    stats.born = len(vacant)
    stats.copied = len(population) - stats.born

    if params.verbose:
        best = max(population, key=lambda individual: individual.fitness)
        rate = stats.mutations / len(population) * 100
        note = " (single survivor cloned)" if stats.degenerate else ""
        print(
            f"Building population {stats.generation - 1}: "
            f"copied: {stats.copied} born: {stats.born}{note} "
            f"mutation: {rate:.2f}% best: {best}"
        )

    return stats


def generation_stats(population: List[Individual], generation: int) -> GenerationStats:
    """Summarise a freshly ranked population."""
    fitness = [individual.fitness for individual in population]
    return GenerationStats(
        generation=generation,
        best_fitness=max(fitness),
        mean_fitness=float(np.mean(fitness)),
    )


def make_rng(params: RunParameters) -> Tuple[np.random.Generator, int]:
    """
    Create the run's random generator.

    Args:
        params: Run parameters (random_seed may be None)

    Returns:
        Tuple of (generator, seed)
    """
    seed = params.random_seed
    if seed is None:
        seed = int(np.random.randint(0, 2**31))
    return np.random.default_rng(seed), seed


def run_solver(
    params: RunParameters,
    rng: Optional[np.random.Generator] = None
) -> RunResult:
    """
    Evolve a population until enough solutions lead the ranking.

    Each generation the population is ranked by fitness. The run stops when at
    least max_solutions zero-fitness individuals lead the ranking or when the
    last generation of the budget has been ranked; otherwise the population is
    regenerated and the next generation begins.

    Args:
        params: Run parameters
        rng: Random number generator; built from params.random_seed when None

    Returns:
        RunResult with the reported solutions (possibly empty)

    Raises:
        DegenerateSelectionError: If a generation leaves no survivor
        MemoryError: If the population cannot be allocated
    """
    seed = None
    if rng is None:
        rng, seed = make_rng(params)

    if params.verbose and seed is not None:
        print(f"Random seed: {seed}")

    population = create_population(params, rng)
    history = []

    generation = 1
    while True:
        rank_population(population)
        stats = generation_stats(population, generation)
        history.append(stats)

        if count_leading_solutions(population) >= params.max_solutions:
            break

        if generation >= params.steps:
            break

        next_population(population, params, rng, stats)
        generation += 1

    # Final generation is reported as is
    stats.copied = len(population)

    return RunResult(
        params=params,
        seed=seed,
        generation=generation,
        solutions=collect_solutions(population, params.max_solutions),
        population=population,
        history=history,
    )
