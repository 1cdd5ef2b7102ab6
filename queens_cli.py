#!/usr/bin/env python3
"""
N-Queens GA CLI - Minimal entry point.

Usage:
    python3 queens_cli.py N_QUEENS POPULATION_SIZE STEPS [MAX_SOLUTIONS] [-v]
    python3 queens_cli.py N_QUEENS POPULATION_SIZE STEPS [MAX_SOLUTIONS] [-v] --seed=42
    python3 queens_cli.py N_QUEENS POPULATION_SIZE STEPS [MAX_SOLUTIONS] [-v] --config=queens_config.yaml

Examples:
    # Find one solution of the 8 queens problem
    python3 queens_cli.py 8 100 1000

    # Find up to 3 solutions, printing every generation
    python3 queens_cli.py 8 200 5000 3 -v
"""

import sys
from pathlib import Path

# Add project root to path if needed
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


def main():
    """Main entry point for the N-queens CLI."""
    if len(sys.argv) > 1 and sys.argv[1] in ['-h', '--help', 'help']:
        print(__doc__)
        sys.exit(0)

    from queens_ga.cli import main as run_cli

    try:
        sys.exit(run_cli(sys.argv))
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        sys.exit(1)


if __name__ == '__main__':
    main()
