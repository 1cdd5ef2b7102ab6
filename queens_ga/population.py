"""
Population construction and ranking.
"""

from typing import List

import numpy as np

from .data_models import Individual, RunParameters
from .fitness import evaluate_individual, is_solution


def create_individual(params: RunParameters, rng: np.random.Generator) -> Individual:
    """
    Create a random individual.

    Each column receives a row drawn uniformly from [0, N); rows may repeat.

    Args:
        params: Run parameters (board size)
        rng: Random number generator

    Returns:
        Evaluated Individual

    Raises:
        MemoryError: If the placement cannot be allocated
    """
    placement = rng.integers(0, params.n_queens, size=params.n_queens)
    return evaluate_individual(Individual(placement=placement))


def create_population(params: RunParameters, rng: np.random.Generator) -> List[Individual]:
    """
    Create the initial population.

    Args:
        params: Run parameters (board size, population size)
        rng: Random number generator

    Returns:
        List of population_size evaluated individuals
    """
    return [create_individual(params, rng) for _ in range(params.population_size)]


def rank_population(population: List[Individual]) -> None:
    """Sort population in place, best (closest to 0) fitness first."""
    population.sort(key=lambda individual: individual.fitness, reverse=True)


def count_leading_solutions(population: List[Individual]) -> int:
    """
    Count zero-fitness individuals at the front of a ranked population.

    Args:
        population: Ranked population

    Returns:
        Length of the leading run of individuals with fitness 0
    """
    count = 0
    for individual in population:
        if not is_solution(individual):
            break
        count += 1
    return count


def collect_solutions(population: List[Individual], max_solutions: int) -> List[Individual]:
    """
    Copy up to max_solutions leading zero-fitness individuals.

    Args:
        population: Ranked population
        max_solutions: Solution cap

    Returns:
        Copies of the reported solutions, in ranking order
    """
    count = min(count_leading_solutions(population), max_solutions)
    return [individual.copy() for individual in population[:count]]
