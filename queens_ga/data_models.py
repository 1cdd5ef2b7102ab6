"""
Data models for the N-queens genetic solver.

Core data structures representing individuals, run parameters, per-generation
statistics and run results.
"""

from dataclasses import dataclass, field
from typing import Optional, Any

import numpy as np


@dataclass(eq=False)
class Individual:
    """
    Represents a single candidate queen placement (individual in GA population).

    Attributes:
        placement: Row occupied by the queen of each column (index = column)
        fitness: Cached conflict score, 0 for a valid solution, negative otherwise
    """
    placement: np.ndarray
    fitness: int = 0

    def __post_init__(self):
        """Ensure placement is an integer numpy array."""
        self.placement = np.asarray(self.placement, dtype=np.int64)

    @property
    def size(self) -> int:
        """Board size (number of queens)."""
        return len(self.placement)

    def copy(self) -> "Individual":
        """
        Create a deep copy of this individual.

        Returns:
            New Individual with copied placement and the same fitness
        """
        return Individual(placement=self.placement.copy(), fitness=self.fitness)

    def genes(self) -> list[int]:
        """Placement as a plain list of ints."""
        return [int(gene) for gene in self.placement]

    def __str__(self) -> str:
        return "[" + ",".join(str(gene) for gene in self.genes()) + f"] fitness = {self.fitness}"


@dataclass(frozen=True)
class RunParameters:
    """
    Immutable configuration for one solver run.

    Attributes:
        n_queens: Board size, must be even and at least 4
        population_size: Number of individuals, at least 2
        steps: Generation budget
        max_solutions: Number of zero-conflict individuals to find before stopping
        verbose: Print per-generation progress
        random_seed: Seed for the run's random generator (None draws one)
    """
    n_queens: int
    population_size: int
    steps: int
    max_solutions: int = 1
    verbose: bool = False
    random_seed: Optional[int] = None

    def __post_init__(self):
        """Validate run parameters."""
        if self.n_queens % 2:
            raise ValueError("NUM_QUEENS must be an even number.")

        if self.n_queens < 4:
            raise ValueError(f"N_QUEENS must be at least 4, got: {self.n_queens}")

        if self.population_size < 2:
            raise ValueError(
                f"POPULATION_SIZE must be at least 2, got: {self.population_size}"
            )

        if self.steps < 1:
            raise ValueError(f"STEPS must be a positive integer, got: {self.steps}")

        if self.max_solutions < 1:
            raise ValueError(
                f"MAX_SOLUTIONS must be a positive integer, got: {self.max_solutions}"
            )

        if self.random_seed is not None and self.random_seed < 0:
            raise ValueError(
                f"Random seed must be a non-negative integer, got: {self.random_seed}"
            )

    def to_dict(self) -> dict[str, Any]:
        """Convert parameters to a plain dictionary for YAML export."""
        return {
            "n_queens": self.n_queens,
            "population_size": self.population_size,
            "steps": self.steps,
            "max_solutions": self.max_solutions,
            "verbose": self.verbose,
            "random_seed": self.random_seed,
        }


@dataclass
class GenerationStats:
    """
    Summary of one generation.

    Attributes:
        generation: 1-based generation number
        best_fitness: Fitness of the best individual when the generation was ranked
        mean_fitness: Mean fitness of the ranked population
        copied: Individuals that survived selection unchanged
        born: Individuals created by crossover to fill vacated slots
        mutations: Individuals mutated after crossover
        degenerate: True when only one individual survived and was cloned
    """
    generation: int
    best_fitness: int
    mean_fitness: float
    copied: int = 0
    born: int = 0
    mutations: int = 0
    degenerate: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "generation": self.generation,
            "best_fitness": self.best_fitness,
            "mean_fitness": round(self.mean_fitness, 4),
            "copied": self.copied,
            "born": self.born,
            "mutations": self.mutations,
            "degenerate": self.degenerate,
        }


@dataclass
class RunResult:
    """
    Outcome of a solver run.

    Attributes:
        params: Parameters the run was started with
        seed: Seed actually used for the random generator (None if a generator was supplied)
        generation: Generation at which the run terminated
        solutions: Zero-conflict individuals from the front of the final ranking
        population: Final ranked population
        history: Per-generation statistics
    """
    params: RunParameters
    seed: Optional[int]
    generation: int
    solutions: list[Individual]
    population: list[Individual]
    history: list[GenerationStats] = field(default_factory=list)

    @property
    def solved(self) -> bool:
        """True when at least one solution was found."""
        return len(self.solutions) > 0

    @property
    def complete(self) -> bool:
        """True when the requested number of solutions was found."""
        return len(self.solutions) >= self.params.max_solutions

    def to_dict(self) -> dict[str, Any]:
        """
        Convert run result to dictionary for YAML export.

        Returns:
            Dictionary with plain Python values
        """
        return {
            "parameters": self.params.to_dict(),
            "seed": self.seed,
            "generation": self.generation,
            "solved": self.solved,
            "solutions": [solution.genes() for solution in self.solutions],
            "history": [stats.to_dict() for stats in self.history],
        }
