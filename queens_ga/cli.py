"""
CLI module for the N-queens solver.

Handles argument parsing, optional run configuration loading, result
reporting and exporting.

Usage:
    queens-ga N_QUEENS POPULATION_SIZE STEPS [MAX_SOLUTIONS] [-v] [--seed=N] [--config=PATH]
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from .data_models import RunParameters, RunResult
from .engine import run_solver
from .selection import DegenerateSelectionError

EXIT_OK = 0
EXIT_RESOURCE_EXHAUSTED = 1
EXIT_INVALID_INPUT = 2
EXIT_DEGENERATE_SELECTION = 3

BANNER_RULE = "-" * 47

KNOWN_CONFIG_KEYS = {'random_seed', 'output'}
KNOWN_OUTPUT_KEYS = {'root', 'overwrite', 'save_plots'}


class ConfigValidationError(Exception):
    """Raised when run configuration is invalid."""
    pass


def load_run_config(config_path: str) -> Dict[str, Any]:
    """
    Load run configuration from YAML file.

    Args:
        config_path: Path to run configuration YAML file

    Returns:
        Dictionary containing run configuration

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigValidationError: If config is invalid
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_file, 'r') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigValidationError(f"Invalid YAML in configuration file: {e}")

    if config is None:
        raise ConfigValidationError("Configuration file is empty")

    validate_run_config(config)

    return config


def validate_run_config(config: Dict[str, Any]) -> None:
    """
    Validate run configuration structure.

    Args:
        config: Run configuration dictionary

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    if not isinstance(config, dict):
        raise ConfigValidationError("Run configuration must be a dictionary")

    unknown = set(config) - KNOWN_CONFIG_KEYS
    if unknown:
        raise ConfigValidationError(f"Unknown configuration field(s): {sorted(unknown)}")

    seed = config.get('random_seed')
    if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool) or seed < 0):
        raise ConfigValidationError(
            f"'random_seed' must be a non-negative integer, got: {seed}"
        )

    if 'output' in config:
        output = config['output']
        if not isinstance(output, dict):
            raise ConfigValidationError("'output' must be a dictionary")

        unknown = set(output) - KNOWN_OUTPUT_KEYS
        if unknown:
            raise ConfigValidationError(f"Unknown output field(s): {sorted(unknown)}")

        if 'root' not in output:
            raise ConfigValidationError("Missing required field: 'output.root'")

        for flag in ('overwrite', 'save_plots'):
            if flag in output and not isinstance(output[flag], bool):
                raise ConfigValidationError(f"'output.{flag}' must be true or false")


def split_options(args: List[str]) -> Tuple[List[str], Dict[str, str]]:
    """
    Separate --seed/--config options from positional arguments.

    Args:
        args: Command-line arguments without the program name

    Returns:
        Tuple of (positional_arguments, options)
    """
    positional = []
    options = {}

    i = 0
    while i < len(args):
        arg = args[i]
        if arg.startswith('--seed=') or arg.startswith('--config='):
            name, value = arg[2:].split('=', 1)
            options[name] = value
        elif arg in ('--seed', '--config'):
            if i + 1 >= len(args):
                raise ValueError(f"{arg} requires an argument")
            options[arg[2:]] = args[i + 1]
            i += 1
        else:
            positional.append(arg)
        i += 1

    return positional, options


def parse_int(value: str, name: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got: '{value}'")


def parse_arguments(
    positional: List[str],
    seed: Optional[int] = None
) -> RunParameters:
    """
    Build run parameters from positional arguments.

    Args:
        positional: N_QUEENS POPULATION_SIZE STEPS [MAX_SOLUTIONS] [-v]
        seed: Optional random seed

    Returns:
        Validated RunParameters

    Raises:
        ValueError: If an argument is not an integer or out of range
    """
    n_queens = parse_int(positional[0], "N_QUEENS")
    population_size = parse_int(positional[1], "POPULATION_SIZE")
    steps = parse_int(positional[2], "STEPS")

    max_solutions = 1
    if len(positional) > 3:
        max_solutions = parse_int(positional[3], "MAX_SOLUTIONS")

    verbose = len(positional) > 4 and positional[4] == '-v'

    return RunParameters(
        n_queens=n_queens,
        population_size=population_size,
        steps=steps,
        max_solutions=max_solutions,
        verbose=verbose,
        random_seed=seed,
    )


def print_usage(prog: str) -> None:
    print(f"\n\nInvalid parameters. Use: {prog} N_QUEENS POPULATION_SIZE STEPS MAX_SOLUTIONS\n")


def print_banner(params: RunParameters) -> None:
    """Echo the run parameters."""
    print(BANNER_RULE)
    print(f"Solving {params.n_queens} queens problem.")
    print(f"Population size: {params.population_size}")
    print(f"Max number of generation(s): {params.steps}")
    print(f"Will stop after finding {params.max_solutions} solution(s)")
    print(BANNER_RULE)


def report_result(result: RunResult) -> None:
    """
    Print the solutions of a run.

    Prints the terminating generation and each reported solution, or an
    explicit message when the budget ran out without a solution.
    """
    if not result.solved:
        print(f"No solution found after {result.generation} generation(s).")
        return

    print(f"Population #{result.generation}.")
    for number, solution in enumerate(result.solutions, start=1):
        print(f"Solution {number}: {solution}")

    if not result.complete:
        print(
            f"Found {len(result.solutions)} of {result.params.max_solutions} "
            f"requested solution(s) within the generation budget."
        )


def export_result(result: RunResult, output_config: Dict[str, Any]) -> Path:
    """
    Write solutions, run summary and optional plots to the output folder.

    Args:
        result: Result of a solver run
        output_config: 'output' section of the run configuration

    Returns:
        Path to the output folder
    """
    from .io_utils import prepare_output_folder, save_solutions_csv, save_run_summary

    overwrite = output_config.get('overwrite', False)
    output_root = prepare_output_folder(output_config['root'], overwrite=overwrite)

    save_solutions_csv(result.solutions, output_root / 'solutions.csv', overwrite=overwrite)
    save_run_summary(result, output_root / 'run_summary.yaml', overwrite=overwrite)

    if output_config.get('save_plots', True):
        from .visualization_utils import plot_board, plot_fitness_history

        for number, solution in enumerate(result.solutions, start=1):
            plot_board(solution, output_root / f"solution_{number:03d}.png")
        plot_fitness_history(result, output_root / 'fitness_history.png')

    print(f"Output directory: {output_root}")

    return output_root


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the solver from command-line arguments.

    Args:
        argv: Full argument vector including the program name (defaults to sys.argv)

    Returns:
        Process exit code
    """
    if argv is None:
        argv = sys.argv

    prog = argv[0] if argv else "queens-ga"

    try:
        positional, options = split_options(list(argv[1:]))
    except ValueError as e:
        print(f"Error: {e}")
        return EXIT_INVALID_INPUT

    if len(positional) < 3:
        print_usage(prog)
        return EXIT_OK

    try:
        # Odd board sizes are rejected before anything else is checked
        if parse_int(positional[0], "N_QUEENS") % 2:
            print("\nNUM_QUEENS must be an even number.")
            return EXIT_OK

        config = {}
        if 'config' in options:
            config = load_run_config(options['config'])

        seed = config.get('random_seed')
        if 'seed' in options:
            seed = parse_int(options['seed'], "--seed")

        params = parse_arguments(positional, seed=seed)
    except (ValueError, FileNotFoundError, ConfigValidationError) as e:
        print(f"Error: {e}")
        return EXIT_INVALID_INPUT

    print_banner(params)

    try:
        result = run_solver(params)
    except MemoryError:
        print("Memory allocation failed.")
        return EXIT_RESOURCE_EXHAUSTED
    except DegenerateSelectionError as e:
        print(f"Error: {e}")
        return EXIT_DEGENERATE_SELECTION

    report_result(result)

    if 'output' in config:
        try:
            export_result(result, config['output'])
        except FileExistsError as e:
            print(f"Error: {e}")
            return EXIT_INVALID_INPUT

    print()

    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
