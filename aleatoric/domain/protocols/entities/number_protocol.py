# aleatoric/domain/protocols/entities/number_protocol.py
import logging
from typing import Optional

from ..errors import InvalidArgumentError
from ..services.error_checker import check_initial_selection_in_range
from .protocol_params import NumberProtocolConfig, ProtocolParams, ProtocolType
from .range import Range


class NumberProtocol:
    """
    Base class for the protocols that produce numbers from a range.

    Each subclass encodes one rule for which number may follow the last one.
    Subclasses implement get_integer_number(), reset(), get_params() and
    _apply_params(); set_params() checks the payload tag and hands over to
    _apply_params(), which validates everything before changing any state.

    Protocols that accept an initial selection return it, unsampled, from
    the first call after construction or reset().
    """
    protocol_type: ProtocolType = None

    def __init__(self, range_: Range, initial_selection: Optional[int] = None):
        self.logger = logging.getLogger(f"domain.protocols.{self.protocol_type.value}")
        self._range = range_
        self._initial_selection = None
        self._have_requested_first_number = False
        self._last_returned_number = None

        if initial_selection is not None:
            check_initial_selection_in_range(initial_selection, range_)
            self._initial_selection = initial_selection

    @property
    def range(self) -> Range:
        return self._range

    @property
    def initial_selection(self) -> Optional[int]:
        return self._initial_selection

    def get_integer_number(self) -> int:
        raise NotImplementedError("This method must be implemented")

    def get_decimal_number(self) -> float:
        return float(self.get_integer_number())

    def reset(self) -> None:
        """Return the protocol to its as-constructed state."""
        raise NotImplementedError("This method must be implemented")

    def get_params(self) -> NumberProtocolConfig:
        """Build a config from the live state of the protocol."""
        return NumberProtocolConfig(self._range, self._current_params())

    def set_params(self, new_params: NumberProtocolConfig) -> None:
        """
        Reconfigure the protocol in place.

        Args:
            new_params: New range and payload for this protocol

        Raises:
            InvalidArgumentError: If the payload belongs to another protocol
                or fails this protocol's checks. Nothing is changed when it
                is raised.
        """
        if new_params.active_protocol is not self.protocol_type:
            raise InvalidArgumentError(
                "params",
                f"Active protocol for new params ({new_params.active_protocol.value}) "
                f"is not consistent with protocol currently in use ({self.protocol_type.value})"
            )

        self._apply_params(new_params.range, new_params.params)

        if self._initial_selection is not None and not self._range.contains(self._initial_selection):
            self.logger.debug(f"Dropping initial selection {self._initial_selection} outside {self._range}")
            self._initial_selection = None

        self.logger.debug(f"Reconfigured with {self._range} and {new_params.params}")

    def _current_params(self) -> ProtocolParams:
        raise NotImplementedError("This method must be implemented")

    def _apply_params(self, new_range: Range, params: ProtocolParams) -> None:
        raise NotImplementedError("This method must be implemented")

    def _pending_initial_selection(self) -> bool:
        return self._initial_selection is not None and not self._have_requested_first_number

    def _last_number_in(self, range_: Range) -> bool:
        return self._have_requested_first_number and range_.contains(self._last_returned_number)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(range={self._range})"
