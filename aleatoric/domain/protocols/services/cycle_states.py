# aleatoric/domain/protocols/services/cycle_states.py
from typing import Protocol

from ..entities.range import Range


class CycleState(Protocol):
    """
    Position-advance algorithm used by the Cycle protocol.

    A state returns the number at the current position and moves the position
    on for the next call. reverse reports the direction of the next step.
    """
    position: int

    @property
    def reverse(self) -> bool:
        ...

    def get_position(self, range_: Range) -> int:
        ...

    def reset(self, range_: Range) -> None:
        ...

    def set_range(self, last_position: int, range_: Range, have_requested_first_number: bool) -> None:
        ...


class UniForward:
    """Ascends through the range, returning to the start after the end."""
    def __init__(self, position: int):
        self.position = position

    @property
    def reverse(self) -> bool:
        return False

    def get_position(self, range_: Range) -> int:
        current = self.position
        self.position = range_.start if current == range_.end else current + 1
        return current

    def reset(self, range_: Range) -> None:
        self.position = range_.start

    def set_range(self, last_position: int, range_: Range, have_requested_first_number: bool) -> None:
        self.position = last_position + 1

        if (not have_requested_first_number
                or not range_.contains(last_position)
                or last_position == range_.end):
            self.position = range_.start

    def __repr__(self) -> str:
        return f"UniForward(position={self.position})"


class UniReverse:
    """Descends through the range, returning to the end after the start."""
    def __init__(self, position: int):
        self.position = position

    @property
    def reverse(self) -> bool:
        return True

    def get_position(self, range_: Range) -> int:
        current = self.position
        self.position = range_.end if current == range_.start else current - 1
        return current

    def reset(self, range_: Range) -> None:
        self.position = range_.end

    def set_range(self, last_position: int, range_: Range, have_requested_first_number: bool) -> None:
        self.position = last_position - 1

        if (not have_requested_first_number
                or not range_.contains(last_position)
                or last_position == range_.start):
            self.position = range_.end

    def __repr__(self) -> str:
        return f"UniReverse(position={self.position})"


class Bidirectional:
    """
    Travels back and forth between the ends of the range.

    The direction flips on reaching either end, and the end value is returned
    once only: with a range of 1 to 3 going forward the sequence runs
    1, 2, 3, 2, 1, 2, 3...
    """
    def __init__(self, position: int, initial_state_reverse: bool = False):
        self.position = position
        self._initial_state_reverse = initial_state_reverse
        self._reverse = initial_state_reverse

    @property
    def reverse(self) -> bool:
        return self._reverse

    def get_position(self, range_: Range) -> int:
        current = self.position

        if current == range_.end and not self._reverse:
            self._reverse = True
        elif current == range_.start and self._reverse:
            self._reverse = False

        self.position = current - 1 if self._reverse else current + 1
        return current

    def reset(self, range_: Range) -> None:
        self._reverse = self._initial_state_reverse
        self.position = range_.end if self._reverse else range_.start

    def set_range(self, last_position: int, range_: Range, have_requested_first_number: bool) -> None:
        self.position = last_position - 1 if self._reverse else last_position + 1

        if have_requested_first_number and last_position == range_.end:
            self.position = range_.end - 1
            self._reverse = True

        if have_requested_first_number and last_position == range_.start:
            self.position = range_.start + 1
            self._reverse = False

        if not have_requested_first_number or not range_.contains(last_position):
            self.position = range_.end if self._reverse else range_.start

    def __repr__(self) -> str:
        return f"Bidirectional(position={self.position}, reverse={self._reverse})"


def create_cycle_state(bidirectional: bool, reverse_direction: bool, position: int) -> CycleState:
    """
    Select the state algorithm for a Cycle configuration.

    Args:
        bidirectional: Whether to travel back and forth
        reverse_direction: Whether to start (or, for unidirectional, keep) descending
        position: Position the state starts from

    Returns:
        The matching CycleState
    """
    if bidirectional:
        return Bidirectional(position, reverse_direction)
    if reverse_direction:
        return UniReverse(position)
    return UniForward(position)
