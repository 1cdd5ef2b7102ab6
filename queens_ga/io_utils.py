"""
I/O utilities for the N-queens solver.

Handles solution CSV serialization, run summary export and output folder
management.
"""

import csv
from pathlib import Path
from typing import Union
from datetime import datetime
import yaml

from .data_models import Individual, RunResult


def prepare_output_folder(root: Union[str, Path], overwrite: bool = False) -> Path:
    """
    Create the output folder for a run.

    Args:
        root: Output directory
        overwrite: If True, reuse an existing directory

    Returns:
        Path to the output folder

    Raises:
        FileExistsError: If the folder exists and overwrite=False
    """
    root = Path(root)

    if root.exists() and not overwrite:
        raise FileExistsError(
            f"Output directory already exists: {root}\n"
            f"Set 'output.overwrite: true' in config to overwrite"
        )

    root.mkdir(parents=True, exist_ok=overwrite)

    return root


def save_solutions_csv(
    solutions: list[Individual],
    output_path: Union[str, Path],
    overwrite: bool = False
) -> Path:
    """
    Save solutions to a CSV file, one row per queen.

    CSV format:
        solution,column,row
        1,0,1
        1,1,3
        ...

    Args:
        solutions: Individuals to save
        output_path: Path for output CSV
        overwrite: If True, overwrite existing file

    Returns:
        Path to saved CSV file

    Raises:
        FileExistsError: If file exists and overwrite=False
    """
    output_path = Path(output_path)

    if output_path.exists() and not overwrite:
        raise FileExistsError(f"Output file already exists: {output_path}")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(['solution', 'column', 'row'])

        for number, solution in enumerate(solutions, start=1):
            for column, row in enumerate(solution.genes()):
                writer.writerow([number, column, row])

    return output_path


def save_run_summary(
    result: RunResult,
    output_path: Union[str, Path],
    overwrite: bool = False
) -> Path:
    """
    Save a run summary to a YAML file.

    Args:
        result: Result of a solver run
        output_path: Path for output YAML
        overwrite: If True, overwrite existing file

    Returns:
        Path to saved summary

    Raises:
        FileExistsError: If file exists and overwrite=False
    """
    output_path = Path(output_path)

    if output_path.exists() and not overwrite:
        raise FileExistsError(f"Summary file already exists: {output_path}")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    summary = result.to_dict()
    summary['saved_at'] = datetime.now().isoformat()

    with open(output_path, 'w') as f:
        yaml.dump(summary, f, default_flow_style=False, sort_keys=False)

    return output_path
