# aleatoric/domain/protocols/entities/granular_walk.py
from typing import Optional

from aleatoric.domain.generators.uniform_generator import UniformGenerator

from ..services.error_checker import check_value_within_unit_interval
from ..services.range_mapping import get_max_step_sub_range, map_to_range, scale_to_range
from .number_protocol import NumberProtocol
from .protocol_params import GranularWalkParams, ProtocolType
from .range import Range

INTERNAL_RANGE = Range(0, 65000)


class GranularWalk(NumberProtocol):
    """
    A Walk producing real numbers at a fine granularity.

    The walk itself runs over a fixed internal range of 0 to 65000 and each
    selection is mapped linearly onto the caller's range, so decimal output
    moves in small increments whatever the size of that range. The largest
    step is the deviation factor applied to the internal range (rounded), so
    a deviation factor of 0.1 allows consecutive numbers to differ by up to a
    tenth of the range span.

    get_integer_number() rounds the decimal output to the nearest integer.
    """
    protocol_type = ProtocolType.GRANULAR_WALK

    def __init__(self, range_: Optional[Range] = None, deviation_factor: float = 1.0,
                 initial_selection: Optional[int] = None, generator: Optional[UniformGenerator] = None):
        check_value_within_unit_interval(deviation_factor, "deviation_factor")

        super().__init__(range_ if range_ is not None else Range(0, 1), initial_selection)
        self._deviation_factor = deviation_factor
        self._max_step = self._calculate_max_step(deviation_factor)
        self._last_returned_decimal = None
        self._generator = generator if generator is not None else UniformGenerator()
        self._generator.set_distribution(INTERNAL_RANGE.start, INTERNAL_RANGE.end)

    @property
    def max_step(self) -> int:
        """Largest step on the internal range."""
        return self._max_step

    def get_integer_number(self) -> int:
        return int(round(self.get_decimal_number()))

    def get_decimal_number(self) -> float:
        if self._pending_initial_selection():
            internal = int(round(map_to_range(self._initial_selection, self._range, INTERNAL_RANGE)))
            self._set_for_next_step(internal)
            self._have_requested_first_number = True
            self._last_returned_decimal = float(self._initial_selection)
            return self._last_returned_decimal

        internal = self._generator.get_number()
        self._set_for_next_step(internal)
        self._have_requested_first_number = True
        self._last_returned_decimal = map_to_range(internal, INTERNAL_RANGE, self._range)
        return self._last_returned_decimal

    def reset(self) -> None:
        self._generator.set_distribution(INTERNAL_RANGE.start, INTERNAL_RANGE.end)
        self._have_requested_first_number = False
        self.logger.debug("Reset")

    def _current_params(self) -> GranularWalkParams:
        return GranularWalkParams(self._deviation_factor)

    def _apply_params(self, new_range: Range, params: GranularWalkParams) -> None:
        check_value_within_unit_interval(params.deviation_factor, "deviation_factor")

        self._deviation_factor = params.deviation_factor
        self._max_step = self._calculate_max_step(params.deviation_factor)
        self._range = new_range

        if not self._have_requested_first_number:
            return

        if new_range.contains_real(self._last_returned_decimal):
            internal = int(round(map_to_range(self._last_returned_decimal, new_range, INTERNAL_RANGE)))
            self._set_for_next_step(internal)
        else:
            self._generator.set_distribution(INTERNAL_RANGE.start, INTERNAL_RANGE.end)

    def _set_for_next_step(self, last_internal: int) -> None:
        sub_range = get_max_step_sub_range(last_internal, self._max_step, INTERNAL_RANGE.start, INTERNAL_RANGE.end)
        self._generator.set_distribution(*sub_range)

    @staticmethod
    def _calculate_max_step(deviation_factor: float) -> int:
        return int(round(scale_to_range(deviation_factor, INTERNAL_RANGE.start, INTERNAL_RANGE.end)))
