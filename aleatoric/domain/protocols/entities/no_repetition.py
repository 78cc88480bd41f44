# aleatoric/domain/protocols/entities/no_repetition.py
from typing import Optional

from aleatoric.domain.generators.discrete_generator import DiscreteGenerator

from .number_protocol import NumberProtocol
from .protocol_params import NoRepetitionParams, ProtocolType
from .range import Range


class NoRepetition(NumberProtocol):
    """
    Equal chance for every number except the one returned last, which is
    excluded from the next selection.
    """
    protocol_type = ProtocolType.NO_REPETITION

    def __init__(self, range_: Optional[Range] = None, generator: Optional[DiscreteGenerator] = None):
        super().__init__(range_ if range_ is not None else Range(0, 1))
        self._generator = generator if generator is not None else DiscreteGenerator()
        self._generator.set_uniform(self._range.size, 1.0)

    def get_integer_number(self) -> int:
        selected_index = self._generator.get_number()

        self._generator.update_all_weights(1.0)
        self._generator.update_weight(selected_index, 0.0)

        self._last_returned_number = selected_index + self._range.offset
        self._have_requested_first_number = True
        return self._last_returned_number

    def reset(self) -> None:
        self._generator.update_all_weights(1.0)
        self._have_requested_first_number = False
        self.logger.debug("Reset")

    def _current_params(self) -> NoRepetitionParams:
        return NoRepetitionParams()

    def _apply_params(self, new_range: Range, params: NoRepetitionParams) -> None:
        self._generator.set_uniform(new_range.size, 1.0)

        # Keep excluding the last number if the new range still holds it
        if self._last_number_in(new_range):
            self._generator.update_weight(self._last_returned_number - new_range.offset, 0.0)

        self._range = new_range
