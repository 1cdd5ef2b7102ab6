"""
Visualization utilities for the N-queens solver.

Renders solved boards and the fitness history of a run with matplotlib.
"""

from pathlib import Path
from typing import Tuple

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np

from .data_models import Individual, RunResult


def plot_board(
    individual: Individual,
    output_path: Path,
    figsize: Tuple[int, int] = (6, 6)
) -> None:
    """
    Draw a chessboard with the individual's queens.

    Args:
        individual: Individual to draw
        output_path: Path to save PNG file
        figsize: Figure size (width, height) in inches
    """
    n = individual.size
    board = (np.add.outer(np.arange(n), np.arange(n)) % 2).astype(float)

    fig, ax = plt.subplots(figsize=figsize)
    ax.imshow(board, cmap='Greys', vmin=0, vmax=1.5, origin='lower')

    columns = np.arange(n)
    ax.scatter(columns, individual.placement, s=3000 / n, c='crimson',
               marker='o', edgecolors='k', zorder=3)

    ax.set_xticks(columns)
    ax.set_yticks(columns)
    ax.set_xlabel('Column')
    ax.set_ylabel('Row')
    ax.set_title(f"{n} queens, fitness = {individual.fitness}")

    fig.savefig(output_path, dpi=100, bbox_inches='tight')
    plt.close(fig)

    print(f"  Saved visualization: {output_path}")


def plot_fitness_history(
    result: RunResult,
    output_path: Path,
    figsize: Tuple[int, int] = (10, 5)
) -> None:
    """
    Plot best and mean fitness per generation.

    Args:
        result: Result of a solver run
        output_path: Path to save PNG file
        figsize: Figure size (width, height) in inches
    """
    generations = [stats.generation for stats in result.history]
    best = [stats.best_fitness for stats in result.history]
    mean = [stats.mean_fitness for stats in result.history]

    fig, ax = plt.subplots(figsize=figsize)
    ax.plot(generations, best, label='Best fitness', color='tab:green')
    ax.plot(generations, mean, label='Mean fitness', color='tab:blue', alpha=0.7)
    ax.axhline(0, color='gray', linewidth=0.8, linestyle='--')

    ax.set_xlabel('Generation')
    ax.set_ylabel('Fitness')
    ax.set_title(f"{result.params.n_queens} queens, population {result.params.population_size}")
    ax.legend()
    ax.grid(True, alpha=0.3)

    fig.savefig(output_path, dpi=100, bbox_inches='tight')
    plt.close(fig)

    print(f"  Saved visualization: {output_path}")
