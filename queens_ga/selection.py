"""
Selection and replacement policy.

Each individual survives a generation with a probability that falls as its
conflict count grows. Slots of individuals that do not survive are cleared and
later refilled by crossover.
"""

from typing import List, Optional, Tuple

import numpy as np

from .data_models import Individual

# Upper bound of the survival draw; an individual with -fitness >= WORST_FITNESS
# never survives.
WORST_FITNESS = 56


class DegenerateSelectionError(RuntimeError):
    """Raised when too few individuals survive to pick distinct parents."""
    pass


def select_for_replacement(
    population: List[Optional[Individual]],
    rng: np.random.Generator,
    worst_fitness: int = WORST_FITNESS
) -> List[int]:
    """
    Mark individuals for replacement.

    For every individual a uniform integer is drawn from [0, worst_fitness);
    when the draw is lower than the individual's conflict magnitude the slot is
    cleared (set to None).

    Args:
        population: Population to thin out, modified in place
        rng: Random number generator
        worst_fitness: Exclusive upper bound of the draw

    Returns:
        Indexes of the vacated slots, in ascending order
    """
    vacant = []
    for index, individual in enumerate(population):
        if rng.integers(0, worst_fitness) < -individual.fitness:
            population[index] = None
            vacant.append(index)
    return vacant


def surviving_indexes(population: List[Optional[Individual]]) -> List[int]:
    """Indexes of slots that still hold an individual."""
    return [index for index, individual in enumerate(population) if individual is not None]


def select_two_parents(
    population: List[Optional[Individual]],
    survivors: List[int],
    rng: np.random.Generator
) -> Tuple[Individual, Individual]:
    """
    Select two distinct surviving parents uniformly at random.

    Args:
        population: Population with vacated slots set to None
        survivors: Indexes of surviving individuals
        rng: Random number generator

    Returns:
        Tuple of (parent_a, parent_b)

    Raises:
        DegenerateSelectionError: If fewer than 2 individuals survived
    """
    if len(survivors) < 2:
        raise DegenerateSelectionError(
            f"Need at least 2 surviving parents for crossover, got {len(survivors)}"
        )

    idx_a, idx_b = rng.choice(len(survivors), size=2, replace=False)

    return population[survivors[idx_a]], population[survivors[idx_b]]
