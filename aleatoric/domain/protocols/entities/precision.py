# aleatoric/domain/protocols/entities/precision.py
from typing import List, Optional, Sequence

from aleatoric.domain.generators.discrete_generator import DiscreteGenerator

from ..errors import InvalidArgumentError
from ..services.error_checker import PROBABILITY_SUM_TOLERANCE, check_size_matches_range, sums_to_one
from .number_protocol import NumberProtocol
from .protocol_params import PrecisionParams, ProtocolType
from .range import Range


class Precision(NumberProtocol):
    """
    Selects numbers according to a caller supplied probability for each
    number in the range.

    The distribution must hold one probability per number in the range and
    sum to 1.0 (within PROBABILITY_SUM_TOLERANCE).
    """
    protocol_type = ProtocolType.PRECISION

    def __init__(self, range_: Optional[Range] = None, distribution: Optional[Sequence[float]] = None,
                 initial_selection: Optional[int] = None, generator: Optional[DiscreteGenerator] = None):
        range_ = range_ if range_ is not None else Range(0, 1)
        distribution = list(distribution) if distribution is not None else [1.0 / range_.size] * range_.size
        self._check_distribution(distribution, range_)

        super().__init__(range_, initial_selection)
        self._generator = generator if generator is not None else DiscreteGenerator()
        self._generator.set_distribution_vector(distribution)

    def get_integer_number(self) -> int:
        if self._pending_initial_selection():
            self._have_requested_first_number = True
            return self._initial_selection

        self._have_requested_first_number = True
        return self._generator.get_number() + self._range.offset

    def reset(self) -> None:
        self._have_requested_first_number = False
        self.logger.debug("Reset")

    def _current_params(self) -> PrecisionParams:
        return PrecisionParams(self._generator.get_distribution_vector())

    def _apply_params(self, new_range: Range, params: PrecisionParams) -> None:
        distribution = list(params.distribution) if params.distribution is not None else [1.0 / new_range.size] * new_range.size
        self._check_distribution(distribution, new_range)

        self._generator.set_distribution_vector(distribution)
        self._range = new_range

    @staticmethod
    def _check_distribution(distribution: List[float], range_: Range) -> None:
        if any(value < 0.0 for value in distribution) or not sums_to_one(distribution):
            raise InvalidArgumentError(
                "distribution",
                f"The values of the distribution must not be negative and must sum to 1.0 "
                f"(tolerance {PROBABILITY_SUM_TOLERANCE})"
            )
        check_size_matches_range(distribution, range_, "distribution")
