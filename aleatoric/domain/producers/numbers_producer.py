# aleatoric/domain/producers/numbers_producer.py
import logging
from typing import List

from aleatoric.domain.protocols.entities.number_protocol import NumberProtocol
from aleatoric.domain.protocols.entities.protocol_params import NumberProtocolConfig
from aleatoric.domain.protocols.errors import InvalidArgumentError


class NumbersProducer:
    """
    Produces single numbers or collections of numbers from a protocol.
    """
    def __init__(self, protocol: NumberProtocol):
        self.logger = logging.getLogger("domain.producers.numbers")
        self._protocol = protocol

    def get_integer_number(self) -> int:
        return self._protocol.get_integer_number()

    def get_decimal_number(self) -> float:
        return self._protocol.get_decimal_number()

    def get_integer_collection(self, size: int) -> List[int]:
        return [self.get_integer_number() for _ in range(size)]

    def get_decimal_collection(self, size: int) -> List[float]:
        return [self.get_decimal_number() for _ in range(size)]

    def get_params(self) -> NumberProtocolConfig:
        return self._protocol.get_params()

    def set_params(self, new_params: NumberProtocolConfig) -> None:
        """
        Reconfigure the protocol in use.

        Args:
            new_params: Range and payload for the current protocol

        Raises:
            InvalidArgumentError: If the payload is for a different protocol
        """
        if new_params.active_protocol is not self._protocol.protocol_type:
            raise InvalidArgumentError(
                "params",
                "Active protocol for new params is not consistent with protocol currently in use"
            )
        self._protocol.set_params(new_params)

    def set_protocol(self, protocol: NumberProtocol) -> None:
        self.logger.debug(f"Switching protocol to {protocol}")
        self._protocol = protocol
