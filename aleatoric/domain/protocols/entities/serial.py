# aleatoric/domain/protocols/entities/serial.py
from typing import Optional

from aleatoric.domain.generators.discrete_generator import DiscreteGenerator

from ..services.series_principle import SeriesPrinciple
from .number_protocol import NumberProtocol
from .protocol_params import ProtocolType, SerialParams
from .range import Range


class Serial(NumberProtocol):
    """
    Returns every number in the range once, in random order, before any
    number is repeated. A new series starts as soon as one completes.
    """
    protocol_type = ProtocolType.SERIAL

    def __init__(self, range_: Optional[Range] = None, generator: Optional[DiscreteGenerator] = None):
        super().__init__(range_ if range_ is not None else Range(0, 1))
        self._generator = generator if generator is not None else DiscreteGenerator()
        self._series_principle = SeriesPrinciple()
        self._generator.set_uniform(self._range.size, 1.0)

    def get_integer_number(self) -> int:
        if self._series_principle.series_is_complete(self._generator):
            self._series_principle.reset_series(self._generator)

        return self._series_principle.get_number(self._generator) + self._range.offset

    def reset(self) -> None:
        self._series_principle.reset_series(self._generator)
        self.logger.debug("Reset")

    def _current_params(self) -> SerialParams:
        return SerialParams()

    def _apply_params(self, new_range: Range, params: SerialParams) -> None:
        self._range = new_range
        self._generator.set_uniform(new_range.size, 1.0)
