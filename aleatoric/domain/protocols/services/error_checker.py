# aleatoric/domain/protocols/services/error_checker.py
import math
from typing import Sequence

from ..entities.range import Range
from ..errors import InvalidArgumentError

# Absolute tolerance for "sums to 1.0" checks on probability vectors.
# Ten entries of 0.1 sum to 0.9999999999999999, which has to pass.
PROBABILITY_SUM_TOLERANCE = 1e-9


def check_initial_selection_in_range(initial_selection: int, range_: Range) -> None:
    if not range_.contains(initial_selection):
        raise InvalidArgumentError(
            "initial_selection",
            f"The value passed as argument for initial_selection must be "
            f"within the range of {range_.start} to {range_.end}"
        )


def check_value_within_unit_interval(value: float, argument_name: str) -> None:
    """
    Check that value lies in the closed interval [0.0, 1.0].

    Raises:
        InvalidArgumentError: If the value is outside the unit interval
    """
    if value < 0.0 or value > 1.0:
        raise InvalidArgumentError(
            argument_name,
            f"The value passed as argument for {argument_name} "
            f"must be within the range of 0.0 to 1.0"
        )


def check_size_matches_range(values: Sequence, range_: Range, argument_name: str) -> None:
    if len(values) != range_.size:
        raise InvalidArgumentError(
            argument_name,
            f"The size of the {argument_name} collection ({len(values)}) "
            f"must match the size of the range ({range_.size})"
        )


def sums_to_one(values: Sequence[float]) -> bool:
    return math.isclose(math.fsum(values), 1.0, rel_tol=0.0, abs_tol=PROBABILITY_SUM_TOLERANCE)
