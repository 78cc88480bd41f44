# aleatoric/domain/protocols/entities/basic.py
from typing import Optional

from aleatoric.domain.generators.uniform_generator import UniformGenerator

from .number_protocol import NumberProtocol
from .protocol_params import BasicParams, ProtocolType
from .range import Range


class Basic(NumberProtocol):
    """Every number in the range has an equal chance on every call."""
    protocol_type = ProtocolType.BASIC

    def __init__(self, range_: Optional[Range] = None, generator: Optional[UniformGenerator] = None):
        super().__init__(range_ if range_ is not None else Range(0, 1))
        self._generator = generator if generator is not None else UniformGenerator()
        self._generator.set_distribution(self._range.start, self._range.end)

    def get_integer_number(self) -> int:
        return self._generator.get_number()

    def reset(self) -> None:
        pass

    def _current_params(self) -> BasicParams:
        return BasicParams()

    def _apply_params(self, new_range: Range, params: BasicParams) -> None:
        self._range = new_range
        self._generator.set_distribution(new_range.start, new_range.end)
