# aleatoric/domain/producers/collections_producer.py
import logging
from typing import Generic, List, Sequence, TypeVar

from aleatoric.domain.protocols.entities.number_protocol import NumberProtocol
from aleatoric.domain.protocols.entities.protocol_params import (
    RANGE_SIZED_TYPES, NumberProtocolConfig, ProtocolParams, WalkParams, default_params
)
from aleatoric.domain.protocols.entities.range import Range
from aleatoric.domain.protocols.errors import InvalidArgumentError

T = TypeVar("T")


class CollectionsProducer(Generic[T]):
    """
    Selects items from a source collection, using a protocol to pick indices.

    The protocol's range is always kept at 0 to len(source) - 1, so payloads
    passed to set_params() carry no range of their own.
    """
    def __init__(self, source: Sequence[T], protocol: NumberProtocol):
        """
        Initialize the producer.

        Args:
            source: Items to select from, at least two of them
            protocol: Protocol choosing the index of each item

        Raises:
            InvalidArgumentError: If the source holds fewer than two items
        """
        self.logger = logging.getLogger("domain.producers.collections")
        self._source = list(source)
        self._protocol = protocol
        self._fit_protocol_to(self._source)

    def get_item(self) -> T:
        """
        Get the next item.

        Raises:
            IndexError: If the protocol returns an index outside the source
        """
        index = self._protocol.get_integer_number()
        if index < 0:
            raise IndexError(f"Index {index} is out of bounds for a source of {len(self._source)} items")
        return self._source[index]

    def get_collection(self, size: int) -> List[T]:
        return [self.get_item() for _ in range(size)]

    def get_params(self) -> ProtocolParams:
        return self._protocol.get_params().params

    def set_params(self, new_params: ProtocolParams) -> None:
        """
        Reconfigure the protocol in use, keeping its range over the source.

        Raises:
            InvalidArgumentError: If the payload is for a different protocol
        """
        if new_params.protocol_type is not self._protocol.protocol_type:
            raise InvalidArgumentError(
                "params",
                "Active protocol for new params is not consistent with protocol currently in use"
            )
        self._protocol.set_params(NumberProtocolConfig(self._source_range(self._source), new_params))

    def set_protocol(self, protocol: NumberProtocol) -> None:
        self._protocol = protocol
        self._fit_protocol_to(self._source)

    def set_source(self, new_source: Sequence[T]) -> None:
        new_source = list(new_source)
        if len(new_source) != len(self._source):
            self._fit_protocol_to(new_source)
        self._source = new_source

    def get_source(self) -> List[T]:
        return list(self._source)

    def _fit_protocol_to(self, source: List[T]) -> None:
        new_range = self._source_range(source)
        if self._protocol.range == new_range:
            return

        params = self._protocol.get_params().params
        if params.protocol_type in RANGE_SIZED_TYPES:
            params = default_params(params.protocol_type, new_range)
        elif isinstance(params, WalkParams) and params.max_step > new_range.size:
            params = WalkParams(new_range.size)

        self.logger.debug(f"Fitting {self._protocol} to {new_range}")
        self._protocol.set_params(NumberProtocolConfig(new_range, params))

    @staticmethod
    def _source_range(source: List[T]) -> Range:
        if len(source) < 2:
            raise InvalidArgumentError(
                "source",
                "The size of the source collection provided is too small. It must be two or greater"
            )
        return Range(0, len(source) - 1)
