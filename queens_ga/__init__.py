"""
Genetic Algorithm Solver for the N-Queens Puzzle

This package searches for placements of N non-attacking queens on an N x N
board by evolving a population of candidate placements.

Key Features:
- One queen per column, rows drawn at random (rows may clash)
- Conflict-count fitness, 0 for a valid solution
- Fitness-biased probabilistic replacement
- One-point crossover and point mutation
- Explicit reporting when the generation budget runs out

Modules:
- data_models: Core data structures (Individual, RunParameters, RunResult)
- fitness: Conflict counting
- population: Random initialization and ranking
- selection: Survival/replacement policy
- crossover: One-point crossover and vacancy refilling
- mutation: Point mutation
- engine: Generation loop and termination
- io_utils: Solution CSV and run summary export
- visualization_utils: Board and fitness history plots
- cli: Command-line interface
"""

__version__ = "0.1.0"

from .data_models import Individual, RunParameters, GenerationStats, RunResult
from .engine import run_solver
from .selection import DegenerateSelectionError

__all__ = [
    "Individual",
    "RunParameters",
    "GenerationStats",
    "RunResult",
    "run_solver",
    "DegenerateSelectionError",
]
