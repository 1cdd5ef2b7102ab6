"""
Tests for the generation loop and termination controller.
"""

import io
import unittest
from contextlib import redirect_stdout
from unittest import mock

import numpy as np

from queens_ga.data_models import Individual, RunParameters, GenerationStats
from queens_ga.engine import next_population, run_solver, make_rng
from queens_ga.fitness import evaluate, evaluate_individual, count_conflicting_pairs
from queens_ga.population import create_population, rank_population
from queens_ga.selection import DegenerateSelectionError


class TestRunParameters(unittest.TestCase):
    """Test run parameter validation."""

    def test_defaults(self):
        params = RunParameters(n_queens=8, population_size=10, steps=5)
        self.assertEqual(params.max_solutions, 1)
        self.assertFalse(params.verbose)
        self.assertIsNone(params.random_seed)

    def test_odd_board_rejected(self):
        with self.assertRaises(ValueError) as ctx:
            RunParameters(n_queens=5, population_size=10, steps=5)
        self.assertIn("even", str(ctx.exception))

    def test_out_of_range_values_rejected(self):
        for kwargs in (
            dict(n_queens=2, population_size=10, steps=5),
            dict(n_queens=0, population_size=10, steps=5),
            dict(n_queens=8, population_size=1, steps=5),
            dict(n_queens=8, population_size=10, steps=0),
            dict(n_queens=8, population_size=10, steps=5, max_solutions=0),
            dict(n_queens=8, population_size=10, steps=5, random_seed=-1),
        ):
            with self.assertRaises(ValueError):
                RunParameters(**kwargs)

    def test_immutable(self):
        params = RunParameters(n_queens=8, population_size=10, steps=5)
        with self.assertRaises(Exception):
            params.n_queens = 10


class TestNextPopulation(unittest.TestCase):
    """Test one regeneration step."""

    def setUp(self):
        self.params = RunParameters(n_queens=8, population_size=50, steps=100)
        self.rng = np.random.default_rng(42)

    def test_population_size_invariant(self):
        population = create_population(self.params, self.rng)

        for generation in range(1, 31):
            rank_population(population)
            stats = GenerationStats(generation=generation, best_fitness=0, mean_fitness=0.0)
            next_population(population, self.params, self.rng, stats)

            self.assertEqual(len(population), 50)
            self.assertTrue(all(individual is not None for individual in population))
            self.assertEqual(stats.copied + stats.born, 50)

    def test_fitness_never_stale(self):
        population = create_population(self.params, self.rng)

        for generation in range(1, 11):
            rank_population(population)
            stats = GenerationStats(generation=generation, best_fitness=0, mean_fitness=0.0)
            next_population(population, self.params, self.rng, stats)

            for individual in population:
                self.assertEqual(individual.fitness, evaluate(individual.placement))
                self.assertTrue(np.all(individual.placement >= 0))
                self.assertTrue(np.all(individual.placement < 8))

    def test_single_survivor_flagged(self):
        params = RunParameters(n_queens=4, population_size=4, steps=10)
        solution = Individual(placement=[1, 3, 0, 2])
        hopeless = [Individual(placement=[0, 0, 0, 0], fitness=-100) for _ in range(3)]
        population = [solution] + hopeless

        stats = GenerationStats(generation=1, best_fitness=0, mean_fitness=0.0)
        next_population(population, params, self.rng, stats)

        self.assertTrue(stats.degenerate)
        self.assertEqual(stats.born, 3)
        self.assertEqual(len(population), 4)

    def test_no_survivor_raises(self):
        params = RunParameters(n_queens=4, population_size=3, steps=10)
        population = [Individual(placement=[0, 0, 0, 0], fitness=-100) for _ in range(3)]

        stats = GenerationStats(generation=1, best_fitness=0, mean_fitness=0.0)
        with self.assertRaises(DegenerateSelectionError):
            next_population(population, params, self.rng, stats)


class TestRunSolver(unittest.TestCase):
    """Test the full generation loop."""

    def test_finds_verified_solutions(self):
        params = RunParameters(
            n_queens=4, population_size=200, steps=500, max_solutions=2, random_seed=7
        )
        result = run_solver(params)

        self.assertTrue(result.solved)
        self.assertTrue(result.complete)
        self.assertLessEqual(result.generation, 500)
        self.assertEqual(len(result.solutions), 2)
        for solution in result.solutions:
            self.assertEqual(solution.fitness, 0)
            self.assertEqual(count_conflicting_pairs(solution.placement), 0)

    def test_population_size_after_run(self):
        params = RunParameters(n_queens=8, population_size=40, steps=25, random_seed=3)
        result = run_solver(params)

        self.assertEqual(len(result.population), 40)
        fitness = [individual.fitness for individual in result.population]
        self.assertEqual(fitness, sorted(fitness, reverse=True))

    def test_history_tracks_generations(self):
        params = RunParameters(n_queens=8, population_size=40, steps=25, random_seed=3)
        result = run_solver(params)

        self.assertEqual(len(result.history), result.generation)
        self.assertEqual(
            [stats.generation for stats in result.history],
            list(range(1, result.generation + 1))
        )
        last = result.history[-1]
        self.assertEqual(last.copied, 40)
        self.assertEqual(last.born, 0)

    def test_budget_exhausted_without_solution(self):
        """Unsolved runs stop at the budget and report no solutions."""
        params = RunParameters(n_queens=20, population_size=10, steps=1, random_seed=11)
        result = run_solver(params)

        self.assertFalse(result.solved)
        self.assertEqual(result.solutions, [])
        self.assertEqual(result.generation, 1)
        self.assertEqual(len(result.history), 1)

    def test_stops_as_soon_as_cap_reached(self):
        """A population that already holds enough solutions is not evolved."""
        params = RunParameters(n_queens=4, population_size=3, steps=100, max_solutions=2)
        seeded = [
            Individual(placement=[1, 3, 0, 2]),
            Individual(placement=[0, 0, 0, 0], fitness=-12),
            Individual(placement=[2, 0, 3, 1]),
        ]

        with mock.patch('queens_ga.engine.create_population', return_value=seeded):
            result = run_solver(params, rng=np.random.default_rng(0))

        self.assertEqual(result.generation, 1)
        self.assertEqual(sorted(s.genes() for s in result.solutions), [[1, 3, 0, 2], [2, 0, 3, 1]])
        self.assertIsNone(result.seed)

    def test_partial_solutions_at_budget_end(self):
        """Solutions found before the budget runs out are reported even below the cap."""
        params = RunParameters(n_queens=4, population_size=3, steps=1, max_solutions=3)
        seeded = [
            evaluate_individual(Individual(placement=[0, 0, 0, 0])),
            evaluate_individual(Individual(placement=[1, 3, 0, 2])),
            evaluate_individual(Individual(placement=[0, 1, 2, 3])),
        ]

        with mock.patch('queens_ga.engine.create_population', return_value=seeded):
            result = run_solver(params, rng=np.random.default_rng(0))

        self.assertEqual(result.generation, 1)
        self.assertEqual([s.genes() for s in result.solutions], [[1, 3, 0, 2]])
        self.assertTrue(result.solved)
        self.assertFalse(result.complete)

    def test_supplied_generator_reports_no_seed(self):
        """A caller-supplied generator ignores random_seed, so no seed is reported."""
        params = RunParameters(
            n_queens=4, population_size=20, steps=3, random_seed=5, verbose=True
        )

        buffer = io.StringIO()
        with redirect_stdout(buffer):
            result = run_solver(params, rng=np.random.default_rng(123))

        self.assertIsNone(result.seed)
        self.assertNotIn("Random seed", buffer.getvalue())

    def test_same_seed_same_result(self):
        params = RunParameters(n_queens=6, population_size=60, steps=200, random_seed=99)

        first = run_solver(params)
        second = run_solver(params)

        self.assertEqual(first.generation, second.generation)
        self.assertEqual(
            [s.genes() for s in first.solutions],
            [s.genes() for s in second.solutions]
        )

    def test_verbose_output_does_not_change_run(self):
        quiet = RunParameters(n_queens=6, population_size=60, steps=200, random_seed=5)
        loud = RunParameters(
            n_queens=6, population_size=60, steps=200, random_seed=5, verbose=True
        )

        buffer = io.StringIO()
        with redirect_stdout(buffer):
            loud_result = run_solver(loud)
        quiet_result = run_solver(quiet)

        self.assertEqual(loud_result.generation, quiet_result.generation)
        self.assertEqual(
            [s.genes() for s in loud_result.solutions],
            [s.genes() for s in quiet_result.solutions]
        )
        self.assertIn("Random seed: 5", buffer.getvalue())
        if loud_result.generation > 1:
            self.assertIn("Building population 0: copied:", buffer.getvalue())

    def test_make_rng_draws_seed(self):
        params = RunParameters(n_queens=8, population_size=10, steps=5)
        rng, seed = make_rng(params)

        self.assertIsInstance(seed, int)
        self.assertGreaterEqual(seed, 0)
        self.assertIsInstance(rng, np.random.Generator)


def run_tests():
    """Run all tests in this module."""
    loader = unittest.TestLoader()
    suite = unittest.TestSuite()

    suite.addTests(loader.loadTestsFromTestCase(TestRunParameters))
    suite.addTests(loader.loadTestsFromTestCase(TestNextPopulation))
    suite.addTests(loader.loadTestsFromTestCase(TestRunSolver))

    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)

    return result.wasSuccessful()


if __name__ == '__main__':
    import sys
    success = run_tests()
    sys.exit(0 if success else 1)
