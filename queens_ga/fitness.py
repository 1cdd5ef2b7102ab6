"""
Fitness evaluation for queen placements.

Fitness is the negated number of attacking relationships, counted from every
queen's point of view: a pair of queens that share a row or a diagonal costs
two points, one for each queen. A placement with C attacking pairs therefore
scores -2*C and a valid solution scores 0.
"""

import numpy as np

from .data_models import Individual


def evaluate(placement) -> int:
    """
    Compute the fitness of a placement.

    Args:
        placement: Sequence of rows, one per column

    Returns:
        Fitness (<= 0); 0 means no two queens attack each other
    """
    rows = np.asarray(placement, dtype=np.int64)
    n = len(rows)
    columns = np.arange(n)

    # Ordered pairs (i, j); the diagonal i == j is excluded below
    row_delta = np.abs(rows[:, None] - rows[None, :])
    column_delta = np.abs(columns[:, None] - columns[None, :])

    same_row = row_delta == 0
    same_diagonal = row_delta == column_delta
    off_diagonal = ~np.eye(n, dtype=bool)

    attacks = np.count_nonzero(same_row & off_diagonal) + \
        np.count_nonzero(same_diagonal & off_diagonal)

    return -int(attacks)


def evaluate_individual(individual: Individual) -> Individual:
    """Recompute and store the fitness of an individual."""
    individual.fitness = evaluate(individual.placement)
    return individual


def count_conflicting_pairs(placement) -> int:
    """
    Count unordered pairs of queens that attack each other.

    Args:
        placement: Sequence of rows, one per column

    Returns:
        Number of attacking pairs (same row or same diagonal)
    """
    rows = [int(row) for row in placement]
    pairs = 0
    for i in range(len(rows)):
        for j in range(i + 1, len(rows)):
            if rows[i] == rows[j] or abs(rows[i] - rows[j]) == j - i:
                pairs += 1
    return pairs


def is_solution(individual: Individual) -> bool:
    return individual.fitness == 0
