# aleatoric/domain/protocols/entities/periodic.py
import math
from typing import Optional

from aleatoric.domain.generators.discrete_generator import DiscreteGenerator

from ..services.error_checker import (
    PROBABILITY_SUM_TOLERANCE,
    check_value_within_unit_interval,
    sums_to_one,
)
from .number_protocol import NumberProtocol
from .protocol_params import PeriodicParams, ProtocolType
from .range import Range


class Periodic(NumberProtocol):
    """
    Biases selection towards repeating the last number.

    After every selection the weight of the number just returned is set to
    the chance of repetition (the periodicity) and the remainder,
    1.0 - periodicity, is shared equally by all other numbers. A periodicity
    of 1.0 therefore repeats the first number forever while 0.0 never
    repeats.
    """
    protocol_type = ProtocolType.PERIODIC

    def __init__(self, range_: Optional[Range] = None, chance_of_repetition: float = 0.0,
                 initial_selection: Optional[int] = None, generator: Optional[DiscreteGenerator] = None):
        check_value_within_unit_interval(chance_of_repetition, "chance_of_repetition")

        super().__init__(range_ if range_ is not None else Range(0, 1), initial_selection)
        self._periodicity = chance_of_repetition
        self._generator = generator if generator is not None else DiscreteGenerator()
        self._generator.set_uniform(self._range.size, 1.0)

    @property
    def periodicity(self) -> float:
        return self._periodicity

    def get_integer_number(self) -> int:
        if self._pending_initial_selection():
            selected_index = self._initial_selection - self._range.offset
        else:
            selected_index = self._generator.get_number()

        self._set_periodic_distribution(selected_index)
        self._last_returned_number = selected_index + self._range.offset
        self._have_requested_first_number = True
        return self._last_returned_number

    def reset(self) -> None:
        self._generator.update_all_weights(1.0)
        self._have_requested_first_number = False
        self.logger.debug("Reset")

    def _current_params(self) -> PeriodicParams:
        return PeriodicParams(self._periodicity)

    def _apply_params(self, new_range: Range, params: PeriodicParams) -> None:
        check_value_within_unit_interval(params.chance_of_repetition, "chance_of_repetition")

        # Periodicity first so the distribution is rebuilt with the new value
        self._periodicity = params.chance_of_repetition
        self._range = new_range
        self._generator.set_uniform(new_range.size, 1.0)

        if self._last_number_in(new_range):
            self._set_periodic_distribution(self._last_returned_number - new_range.offset)

    def _set_periodic_distribution(self, selected_index: int) -> None:
        size = self._range.size
        remainder_allocation = (1.0 - self._periodicity) / (size - 1)

        distribution = [remainder_allocation] * size
        distribution[selected_index] = self._periodicity

        if not sums_to_one(distribution):
            # Only rounding error can get here; log it rather than fail mid sequence
            self.logger.warning(
                f"Periodic distribution sums to {math.fsum(distribution)!r}, "
                f"outside tolerance {PROBABILITY_SUM_TOLERANCE}"
            )

        self._generator.set_distribution_vector(distribution)
