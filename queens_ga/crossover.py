"""
Crossover operators for the N-queens solver.

Implements one-point crossover and the refilling of slots vacated by the
selection/replacement policy.
"""

from typing import List, Optional, Tuple

import numpy as np

from .data_models import Individual
from .fitness import evaluate_individual
from .selection import (
    DegenerateSelectionError,
    select_two_parents,
    surviving_indexes,
)


def one_point_crossover(
    parent_a: Individual,
    parent_b: Individual,
    rng: np.random.Generator,
    cross_point: Optional[int] = None
) -> Tuple[Individual, int]:
    """
    Combine two parents at a single cut point.

    The child takes columns [0, cross_point) from parent_a and columns
    [cross_point, N) from parent_b.

    Args:
        parent_a: Parent providing the leading genes
        parent_b: Parent providing the trailing genes
        rng: Random number generator
        cross_point: Cut point; drawn uniformly from [1, N-2] when None

    Returns:
        Tuple of (child_individual, cross_point)
    """
    size = parent_a.size
    if parent_b.size != size:
        raise ValueError(f"Parents differ in size: {size} != {parent_b.size}")

    if cross_point is None:
        cross_point = int(rng.integers(1, size - 1))
    elif not 0 <= cross_point <= size:
        raise ValueError(f"Cross point {cross_point} outside [0, {size}]")

    placement = np.concatenate(
        (parent_a.placement[:cross_point], parent_b.placement[cross_point:])
    )

    child = evaluate_individual(Individual(placement=placement))

    return child, cross_point


def fill_vacancies(
    population: List[Optional[Individual]],
    vacant: List[int],
    rng: np.random.Generator
) -> bool:
    """
    Refill every vacated slot with the child of two surviving parents.

    When a single individual survived, each vacancy receives a clone of it
    (the survivor crossed with itself).

    Args:
        population: Population with vacated slots set to None, modified in place
        vacant: Indexes of the vacated slots
        rng: Random number generator

    Returns:
        True if the single-survivor fallback was used

    Raises:
        DegenerateSelectionError: If no individual survived
    """
    if not vacant:
        return False

    survivors = surviving_indexes(population)

    if not survivors:
        raise DegenerateSelectionError(
            f"All {len(population)} individuals were selected for replacement"
        )

    if len(survivors) == 1:
        only = population[survivors[0]]
        for index in vacant:
            population[index], _ = one_point_crossover(only, only, rng)
        return True

    for index in vacant:
        parent_a, parent_b = select_two_parents(population, survivors, rng)
        population[index], _ = one_point_crossover(parent_a, parent_b, rng)

    return False
