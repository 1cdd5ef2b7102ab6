"""
Mutation operators for the N-queens solver.
"""

from typing import List

import numpy as np

from .data_models import Individual
from .fitness import evaluate_individual

# Chance, per individual and generation, of a point mutation (per mille)
MUTATION_PER_MILLE = 5


def point_mutation(
    individual: Individual,
    rng: np.random.Generator
) -> Individual:
    """
    Overwrite one gene with a random row.

    Both the column and the new row are drawn from [0, N-1), so the last
    column and the last row are never produced by mutation. The new row may
    equal the old one. The individual is modified in place and its fitness
    recomputed.

    Args:
        individual: Individual to mutate
        rng: Random number generator

    Returns:
        The mutated individual
    """
    upper = individual.size - 1
    column = int(rng.integers(0, upper))
    row = int(rng.integers(0, upper))

    individual.placement[column] = row
    return evaluate_individual(individual)


def mutate_population(
    population: List[Individual],
    rng: np.random.Generator,
    per_mille: int = MUTATION_PER_MILLE
) -> int:
    """
    Apply point mutation independently to each individual.

    Args:
        population: Population to mutate in place (no vacant slots)
        rng: Random number generator
        per_mille: Mutation chance per individual, out of 1000

    Returns:
        Number of individuals mutated
    """
    mutations = 0
    for individual in population:
        if rng.integers(0, 1000) < per_mille:
            point_mutation(individual, rng)
            mutations += 1
    return mutations
