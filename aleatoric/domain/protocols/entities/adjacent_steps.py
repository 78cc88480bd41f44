# aleatoric/domain/protocols/entities/adjacent_steps.py
from typing import Optional

from aleatoric.domain.generators.discrete_generator import DiscreteGenerator

from .number_protocol import NumberProtocol
from .protocol_params import AdjacentStepsParams, ProtocolType
from .range import Range


class AdjacentSteps(NumberProtocol):
    """
    Moves one step up or down from the last number, with equal chance.

    At either end of the range the only possible step is back inside it.
    The first number is chosen from the whole range unless an initial
    selection is given.
    """
    protocol_type = ProtocolType.ADJACENT_STEPS

    def __init__(self, range_: Optional[Range] = None, initial_selection: Optional[int] = None,
                 generator: Optional[DiscreteGenerator] = None):
        super().__init__(range_ if range_ is not None else Range(0, 1), initial_selection)
        self._generator = generator if generator is not None else DiscreteGenerator()
        self._generator.set_uniform(self._range.size, 1.0)

    def get_integer_number(self) -> int:
        if self._pending_initial_selection():
            self._last_returned_number = self._initial_selection
        else:
            self._last_returned_number = self._generator.get_number() + self._range.offset

        self._have_requested_first_number = True
        self._prepare_step_based_distribution(self._last_returned_number)
        return self._last_returned_number

    def reset(self) -> None:
        self._generator.update_all_weights(1.0)
        self._have_requested_first_number = False
        self.logger.debug("Reset")

    def _current_params(self) -> AdjacentStepsParams:
        return AdjacentStepsParams()

    def _apply_params(self, new_range: Range, params: AdjacentStepsParams) -> None:
        self._range = new_range
        self._generator.set_uniform(new_range.size, 1.0)

        if self._last_number_in(new_range):
            self._prepare_step_based_distribution(self._last_returned_number)

    def _prepare_step_based_distribution(self, number: int) -> None:
        index = number - self._range.offset
        self._generator.update_all_weights(0.0)

        if number != self._range.start:
            self._generator.update_weight(index - 1, 1.0)
        if number != self._range.end:
            self._generator.update_weight(index + 1, 1.0)
