# aleatoric/domain/protocols/entities/cycle.py
from typing import Optional

from ..services.cycle_states import create_cycle_state
from .number_protocol import NumberProtocol
from .protocol_params import CycleParams, ProtocolType
from .range import Range


class Cycle(NumberProtocol):
    """
    Steps through the range in order, with no randomness.

    Unidirectional cycles go from one end to the other and start over
    (1, 2, 3, 1, 2, 3 for a range of 1 to 3). Bidirectional cycles turn
    around at each end without repeating the end value (1, 2, 3, 2, 1).
    reverse_direction starts at the end of the range and descends.
    """
    protocol_type = ProtocolType.CYCLE

    def __init__(self, range_: Optional[Range] = None, bidirectional: bool = False,
                 reverse_direction: bool = False, initial_selection: Optional[int] = None):
        super().__init__(range_ if range_ is not None else Range(0, 1), initial_selection)
        self._bidirectional = bidirectional
        self._reverse_direction = reverse_direction
        self._state = create_cycle_state(bidirectional, reverse_direction, self._start_position())

    def get_integer_number(self) -> int:
        self._last_returned_number = self._state.get_position(self._range)
        self._have_requested_first_number = True
        return self._last_returned_number

    def reset(self) -> None:
        self._state.reset(self._range)
        if self._initial_selection is not None:
            self._state.position = self._initial_selection
        self._have_requested_first_number = False
        self.logger.debug("Reset")

    def _current_params(self) -> CycleParams:
        return CycleParams(self._bidirectional, self._reverse_direction)

    def _apply_params(self, new_range: Range, params: CycleParams) -> None:
        self._bidirectional = params.bidirectional
        self._reverse_direction = params.reverse_direction
        self._range = new_range

        self._state = create_cycle_state(params.bidirectional, params.reverse_direction, new_range.start)

        if self._pending_initial_selection() and new_range.contains(self._initial_selection):
            self._state.position = self._initial_selection
            return

        last_position = self._last_returned_number if self._last_returned_number is not None else new_range.start
        self._state.set_range(last_position, new_range, self._have_requested_first_number)

    def _start_position(self) -> int:
        if self._initial_selection is not None:
            return self._initial_selection
        return self._range.end if self._reverse_direction else self._range.start
