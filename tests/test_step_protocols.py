# tests/test_step_protocols.py
import unittest
import sys
import os

# Add package root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from aleatoric.domain.generators.discrete_generator import DiscreteGenerator
from aleatoric.domain.generators.uniform_generator import UniformGenerator
from aleatoric.domain.protocols.entities.adjacent_steps import AdjacentSteps
from aleatoric.domain.protocols.entities.granular_walk import GranularWalk
from aleatoric.domain.protocols.entities.periodic import Periodic
from aleatoric.domain.protocols.entities.protocol_params import (
    AdjacentStepsParams, GranularWalkParams, NumberProtocolConfig, PeriodicParams, WalkParams
)
from aleatoric.domain.protocols.entities.range import Range
from aleatoric.domain.protocols.entities.walk import Walk
from aleatoric.domain.protocols.errors import InvalidArgumentError
from aleatoric.infrastructure.rng.strategies.mersenne_rng import MersenneTwisterRNG


def take(protocol, count):
    return [protocol.get_integer_number() for _ in range(count)]


class TestAdjacentSteps(unittest.TestCase):
    """Test cases for the AdjacentSteps protocol."""

    def setUp(self):
        self.generator = DiscreteGenerator(MersenneTwisterRNG(seed_value=12345))

    def test_steps_of_one(self):
        protocol = AdjacentSteps(Range(1, 6), generator=self.generator)
        values = take(protocol, 500)

        for previous, current in zip(values, values[1:]):
            self.assertEqual(abs(previous - current), 1)
        self.assertEqual(set(values), {1, 2, 3, 4, 5, 6})

    def test_start_boundary_steps_inward(self):
        protocol = AdjacentSteps(Range(1, 5), initial_selection=1, generator=self.generator)

        self.assertEqual(protocol.get_integer_number(), 1)
        self.assertEqual(self.generator.get_distribution_vector(), [0.0, 1.0, 0.0, 0.0, 0.0])
        self.assertEqual(protocol.get_integer_number(), 2)

    def test_end_boundary_steps_inward(self):
        protocol = AdjacentSteps(Range(1, 5), initial_selection=5, generator=self.generator)

        self.assertEqual(take(protocol, 2), [5, 4])

    def test_reset(self):
        protocol = AdjacentSteps(Range(1, 5), initial_selection=3, generator=self.generator)
        take(protocol, 4)

        protocol.reset()

        self.assertEqual(protocol.get_integer_number(), 3)

    def test_set_params_continues_from_last(self):
        protocol = AdjacentSteps(Range(1, 5), initial_selection=3, generator=self.generator)
        protocol.get_integer_number()

        protocol.set_params(NumberProtocolConfig(Range(3, 8), AdjacentStepsParams()))

        self.assertEqual(self.generator.get_distribution_vector(), [0.0, 1.0, 0.0, 0.0, 0.0, 0.0])

    def test_set_params_last_excluded(self):
        protocol = AdjacentSteps(Range(1, 5), initial_selection=2, generator=self.generator)
        protocol.get_integer_number()

        protocol.set_params(NumberProtocolConfig(Range(3, 8), AdjacentStepsParams()))

        self.assertEqual(self.generator.get_distribution_vector(), [1.0] * 6)


class TestWalk(unittest.TestCase):
    """Test cases for the Walk protocol."""

    def setUp(self):
        self.generator = UniformGenerator(MersenneTwisterRNG(seed_value=12345))

    def test_steps_within_max_step(self):
        protocol = Walk(Range(1, 20), 3, generator=self.generator)
        values = take(protocol, 500)

        for previous, current in zip(values, values[1:]):
            self.assertLessEqual(abs(previous - current), 3)
        for value in values:
            self.assertTrue(1 <= value <= 20)

    def test_max_step_bounds(self):
        with self.assertRaises(InvalidArgumentError):
            Walk(Range(1, 10), 0)

        with self.assertRaises(InvalidArgumentError):
            Walk(Range(1, 10), 11)

        self.assertEqual(Walk(Range(1, 10), 10).max_step, 10)

    def test_sub_range_does_not_wrap(self):
        protocol = Walk(Range(1, 10), 5, initial_selection=8, generator=self.generator)

        self.assertEqual(protocol.get_integer_number(), 8)
        self.assertEqual(self.generator.get_distribution(), (3, 10))

    def test_reset(self):
        protocol = Walk(Range(1, 10), 2, initial_selection=5, generator=self.generator)
        take(protocol, 3)

        protocol.reset()

        self.assertEqual(self.generator.get_distribution(), (1, 10))
        self.assertEqual(protocol.get_integer_number(), 5)

    def test_set_params_continues_from_last(self):
        protocol = Walk(Range(1, 20), 2, initial_selection=10, generator=self.generator)
        protocol.get_integer_number()

        protocol.set_params(NumberProtocolConfig(Range(5, 15), WalkParams(3)))

        self.assertEqual(self.generator.get_distribution(), (7, 13))
        self.assertEqual(protocol.max_step, 3)

    def test_set_params_last_excluded(self):
        protocol = Walk(Range(1, 20), 2, initial_selection=10, generator=self.generator)
        protocol.get_integer_number()

        protocol.set_params(NumberProtocolConfig(Range(11, 20), WalkParams(2)))

        self.assertEqual(self.generator.get_distribution(), (11, 20))

    def test_set_params_invalid_max_step(self):
        protocol = Walk(Range(1, 20), 2, generator=self.generator)

        with self.assertRaises(InvalidArgumentError):
            protocol.set_params(NumberProtocolConfig(Range(1, 3), WalkParams(5)))

        self.assertEqual(protocol.range, Range(1, 20))


class TestGranularWalk(unittest.TestCase):
    """Test cases for the GranularWalk protocol."""

    def setUp(self):
        self.generator = UniformGenerator(MersenneTwisterRNG(seed_value=12345))

    def test_decimal_steps_within_deviation(self):
        protocol = GranularWalk(Range(0, 100), 0.1, generator=self.generator)
        values = [protocol.get_decimal_number() for _ in range(1000)]

        for previous, current in zip(values, values[1:]):
            self.assertLessEqual(abs(previous - current), 10.0 + 1e-3)
        for value in values:
            self.assertTrue(0.0 <= value <= 100.0)

    def test_integer_output_rounds(self):
        protocol = GranularWalk(Range(1, 4), 0.5, generator=self.generator)

        for _ in range(200):
            self.assertIn(protocol.get_integer_number(), {1, 2, 3, 4})

    def test_max_step(self):
        self.assertEqual(GranularWalk(Range(0, 10), 0.1).max_step, 6500)
        self.assertEqual(GranularWalk(Range(0, 10), 0.0).max_step, 0)

    def test_invalid_deviation_factor(self):
        with self.assertRaises(InvalidArgumentError):
            GranularWalk(Range(0, 10), 1.5)

        with self.assertRaises(InvalidArgumentError):
            GranularWalk(Range(0, 10), -0.1)

    def test_initial_selection(self):
        protocol = GranularWalk(Range(0, 100), 0.1, initial_selection=50, generator=self.generator)

        self.assertEqual(protocol.get_decimal_number(), 50.0)
        self.assertEqual(self.generator.get_distribution(), (26000, 39000))

    def test_set_params_continues_from_last(self):
        protocol = GranularWalk(Range(0, 100), 0.1, initial_selection=50, generator=self.generator)
        protocol.get_decimal_number()

        protocol.set_params(NumberProtocolConfig(Range(0, 200), GranularWalkParams(0.1)))

        self.assertEqual(self.generator.get_distribution(), (9750, 22750))

    def test_set_params_last_excluded(self):
        protocol = GranularWalk(Range(0, 100), 0.1, initial_selection=50, generator=self.generator)
        protocol.get_decimal_number()

        protocol.set_params(NumberProtocolConfig(Range(60, 100), GranularWalkParams(0.2)))

        self.assertEqual(self.generator.get_distribution(), (0, 65000))
        self.assertEqual(protocol.max_step, 13000)

    def test_reset(self):
        protocol = GranularWalk(Range(0, 100), 0.1, initial_selection=20, generator=self.generator)
        [protocol.get_decimal_number() for _ in range(5)]

        protocol.reset()

        self.assertEqual(protocol.get_decimal_number(), 20.0)


class TestPeriodic(unittest.TestCase):
    """Test cases for the Periodic protocol."""

    def setUp(self):
        self.generator = DiscreteGenerator(MersenneTwisterRNG(seed_value=12345))

    def test_certain_repetition(self):
        protocol = Periodic(Range(1, 5), 1.0, generator=self.generator)
        values = take(protocol, 50)

        self.assertEqual(values, [values[0]] * 50)

    def test_no_repetition(self):
        protocol = Periodic(Range(1, 4), 0.0, generator=self.generator)
        values = take(protocol, 300)

        for previous, current in zip(values, values[1:]):
            self.assertNotEqual(previous, current)
        self.assertEqual(set(values), {1, 2, 3, 4})

    def test_distribution_after_selection(self):
        protocol = Periodic(Range(1, 3), 0.5, initial_selection=2, generator=self.generator)

        self.assertEqual(protocol.get_integer_number(), 2)
        for actual, expected in zip(self.generator.get_distribution_vector(), [0.25, 0.5, 0.25]):
            self.assertAlmostEqual(actual, expected)

    def test_invalid_chance_of_repetition(self):
        with self.assertRaises(InvalidArgumentError):
            Periodic(Range(1, 3), 1.5)

        with self.assertRaises(InvalidArgumentError):
            Periodic(Range(1, 3), -0.1)

    def test_set_params_continues_from_last(self):
        protocol = Periodic(Range(1, 3), 0.5, initial_selection=2, generator=self.generator)
        protocol.get_integer_number()

        protocol.set_params(NumberProtocolConfig(Range(1, 5), PeriodicParams(0.6)))

        self.assertAlmostEqual(protocol.periodicity, 0.6)
        for actual, expected in zip(self.generator.get_distribution_vector(), [0.1, 0.6, 0.1, 0.1, 0.1]):
            self.assertAlmostEqual(actual, expected)

    def test_reset(self):
        protocol = Periodic(Range(1, 3), 0.9, initial_selection=1, generator=self.generator)
        take(protocol, 3)

        protocol.reset()

        self.assertEqual(self.generator.get_distribution_vector(), [1.0, 1.0, 1.0])
        self.assertEqual(protocol.get_integer_number(), 1)


if __name__ == "__main__":
    unittest.main()
