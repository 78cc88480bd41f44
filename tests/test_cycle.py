# tests/test_cycle.py
import unittest
import sys
import os

# Add package root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from aleatoric.domain.protocols.entities.cycle import Cycle
from aleatoric.domain.protocols.entities.protocol_params import CycleParams, NumberProtocolConfig, WalkParams
from aleatoric.domain.protocols.entities.range import Range
from aleatoric.domain.protocols.errors import InvalidArgumentError
from aleatoric.domain.protocols.services.cycle_states import (
    Bidirectional, UniForward, UniReverse, create_cycle_state
)


def take(protocol, count):
    return [protocol.get_integer_number() for _ in range(count)]


class TestCycleStates(unittest.TestCase):
    """Test cases for the cycle position algorithms."""

    def test_create_cycle_state(self):
        self.assertIsInstance(create_cycle_state(False, False, 1), UniForward)
        self.assertIsInstance(create_cycle_state(False, True, 1), UniReverse)

        state = create_cycle_state(True, True, 3)
        self.assertIsInstance(state, Bidirectional)
        self.assertTrue(state.reverse)

    def test_uni_forward_wraps(self):
        state = UniForward(2)
        range_ = Range(1, 3)

        self.assertEqual([state.get_position(range_) for _ in range(4)], [2, 3, 1, 2])

    def test_uni_reverse_wraps(self):
        state = UniReverse(2)
        range_ = Range(1, 3)

        self.assertEqual([state.get_position(range_) for _ in range(4)], [2, 1, 3, 2])

    def test_bidirectional_reset_restores_direction(self):
        state = Bidirectional(1, False)
        range_ = Range(1, 3)
        for _ in range(4):
            state.get_position(range_)
        self.assertTrue(state.reverse)

        state.reset(range_)

        self.assertFalse(state.reverse)
        self.assertEqual(state.position, 1)

    def test_set_range_without_request_goes_to_start(self):
        state = UniForward(5)
        state.set_range(5, Range(1, 10), False)

        self.assertEqual(state.position, 1)


class TestCycle(unittest.TestCase):
    """Test cases for the Cycle protocol."""

    def test_forward(self):
        self.assertEqual(take(Cycle(Range(1, 3)), 6), [1, 2, 3, 1, 2, 3])

    def test_reverse(self):
        self.assertEqual(take(Cycle(Range(1, 3), reverse_direction=True), 6), [3, 2, 1, 3, 2, 1])

    def test_bidirectional_forward(self):
        cycle = Cycle(Range(1, 3), bidirectional=True)

        self.assertEqual(take(cycle, 5), [1, 2, 3, 2, 1])
        self.assertEqual(take(cycle, 4), [2, 3, 2, 1])

    def test_bidirectional_reverse(self):
        cycle = Cycle(Range(1, 3), bidirectional=True, reverse_direction=True)

        self.assertEqual(take(cycle, 5), [3, 2, 1, 2, 3])

    def test_initial_selection(self):
        cycle = Cycle(Range(1, 3), initial_selection=2)

        self.assertEqual(take(cycle, 4), [2, 3, 1, 2])

    def test_initial_selection_out_of_range(self):
        with self.assertRaises(InvalidArgumentError):
            Cycle(Range(1, 3), initial_selection=4)

    def test_decimal_output(self):
        cycle = Cycle(Range(1, 3))

        self.assertEqual(cycle.get_decimal_number(), 1.0)
        self.assertIsInstance(cycle.get_decimal_number(), float)

    def test_reset(self):
        cycle = Cycle(Range(1, 5), bidirectional=True)
        take(cycle, 7)

        cycle.reset()

        self.assertEqual(take(cycle, 3), [1, 2, 3])

    def test_reset_returns_to_initial_selection(self):
        cycle = Cycle(Range(1, 5), initial_selection=4)
        take(cycle, 3)

        cycle.reset()

        self.assertEqual(take(cycle, 3), [4, 5, 1])

    def test_get_params(self):
        cycle = Cycle(Range(1, 5), bidirectional=True, reverse_direction=True)
        params = cycle.get_params()

        self.assertEqual(params.range, Range(1, 5))
        self.assertEqual(params.params, CycleParams(True, True))

    def test_set_params_continues_from_last(self):
        cycle = Cycle(Range(1, 10))
        self.assertEqual(take(cycle, 3), [1, 2, 3])

        cycle.set_params(NumberProtocolConfig(Range(1, 5), CycleParams()))

        self.assertEqual(take(cycle, 4), [4, 5, 1, 2])

    def test_set_params_last_excluded_starts_over(self):
        cycle = Cycle(Range(1, 10))
        take(cycle, 7)

        cycle.set_params(NumberProtocolConfig(Range(1, 5), CycleParams()))

        self.assertEqual(take(cycle, 2), [1, 2])

    def test_set_params_changes_direction(self):
        cycle = Cycle(Range(1, 10))
        take(cycle, 3)

        cycle.set_params(NumberProtocolConfig(Range(1, 10), CycleParams(reverse_direction=True)))

        self.assertEqual(take(cycle, 3), [2, 1, 10])

    def test_set_params_bidirectional_at_end(self):
        cycle = Cycle(Range(1, 3), bidirectional=True)
        take(cycle, 3)

        cycle.set_params(NumberProtocolConfig(Range(1, 3), CycleParams(bidirectional=True)))

        self.assertEqual(take(cycle, 3), [2, 1, 2])

    def test_set_params_keeps_pending_initial_selection(self):
        cycle = Cycle(Range(1, 10), initial_selection=5)

        cycle.set_params(NumberProtocolConfig(Range(1, 6), CycleParams()))

        self.assertEqual(cycle.initial_selection, 5)
        self.assertEqual(take(cycle, 3), [5, 6, 1])

    def test_set_params_drops_excluded_initial_selection(self):
        cycle = Cycle(Range(1, 10), initial_selection=5)

        cycle.set_params(NumberProtocolConfig(Range(6, 10), CycleParams()))

        self.assertIsNone(cycle.initial_selection)
        self.assertEqual(take(cycle, 2), [6, 7])

    def test_set_params_rejects_other_protocol(self):
        cycle = Cycle(Range(1, 3))

        with self.assertRaises(InvalidArgumentError):
            cycle.set_params(NumberProtocolConfig(Range(1, 3), WalkParams(1)))

        self.assertEqual(take(cycle, 2), [1, 2])


if __name__ == "__main__":
    unittest.main()
