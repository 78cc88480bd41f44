# aleatoric/domain/protocols/entities/walk.py
from typing import Optional

from aleatoric.domain.generators.uniform_generator import UniformGenerator

from ..errors import InvalidArgumentError
from ..services.range_mapping import get_max_step_sub_range
from .number_protocol import NumberProtocol
from .protocol_params import ProtocolType, WalkParams
from .range import Range


class Walk(NumberProtocol):
    """
    A stepwise traversal, or walk, through the range.

    After the first number, each number is chosen with equal chance from the
    sub-range previous +/- max_step. The walk does not wrap: with a range of
    1 to 10, a max_step of 5 and a previous number of 8, the sub-range is
    3 to 10 rather than 3 to 13.
    """
    protocol_type = ProtocolType.WALK

    def __init__(self, range_: Optional[Range] = None, max_step: int = 1,
                 initial_selection: Optional[int] = None, generator: Optional[UniformGenerator] = None):
        """
        Args:
            range_: Range to walk through
            max_step: Largest distance between consecutive numbers. Must be
                between 1 and the range size.
            initial_selection: Optional first number and starting point
            generator: Uniform generator to select with
        """
        range_ = range_ if range_ is not None else Range(0, 1)
        self._check_max_step(max_step, range_)

        super().__init__(range_, initial_selection)
        self._max_step = max_step
        self._generator = generator if generator is not None else UniformGenerator()
        self._generator.set_distribution(self._range.start, self._range.end)

    @property
    def max_step(self) -> int:
        return self._max_step

    def get_integer_number(self) -> int:
        if self._pending_initial_selection():
            selected = self._initial_selection
        else:
            selected = self._generator.get_number()

        self._set_for_next_step(selected)
        self._last_returned_number = selected
        self._have_requested_first_number = True
        return selected

    def reset(self) -> None:
        self._generator.set_distribution(self._range.start, self._range.end)
        self._have_requested_first_number = False
        self.logger.debug("Reset")

    def _current_params(self) -> WalkParams:
        return WalkParams(self._max_step)

    def _apply_params(self, new_range: Range, params: WalkParams) -> None:
        self._check_max_step(params.max_step, new_range)

        self._max_step = params.max_step
        self._range = new_range
        self._generator.set_distribution(new_range.start, new_range.end)

        if self._last_number_in(new_range):
            self._set_for_next_step(self._last_returned_number)

    def _set_for_next_step(self, last_selected: int) -> None:
        sub_range = get_max_step_sub_range(last_selected, self._max_step, self._range.start, self._range.end)
        self._generator.set_distribution(*sub_range)

    @staticmethod
    def _check_max_step(max_step: int, range_: Range) -> None:
        if max_step < 1 or max_step > range_.size:
            raise InvalidArgumentError(
                "max_step",
                f"The value passed as argument for max_step must be between 1 and {range_.size}"
            )
