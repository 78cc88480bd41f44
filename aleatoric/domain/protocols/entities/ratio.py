# aleatoric/domain/protocols/entities/ratio.py
from typing import List, Optional, Sequence

from aleatoric.domain.generators.discrete_generator import DiscreteGenerator

from ..errors import InvalidArgumentError
from ..services.error_checker import check_size_matches_range
from ..services.series_principle import SeriesPrinciple
from .number_protocol import NumberProtocol
from .protocol_params import ProtocolType, RatioParams
from .range import Range


class Ratio(NumberProtocol):
    """
    Serial selection where each number appears as many times per series as
    its ratio says.

    With a range of 1 to 3 and ratios [2, 1, 0], every series holds two 1s,
    one 2 and no 3, in random order.
    """
    protocol_type = ProtocolType.RATIO

    def __init__(self, range_: Optional[Range] = None, ratios: Optional[Sequence[int]] = None,
                 generator: Optional[DiscreteGenerator] = None):
        """
        Args:
            range_: Range to produce numbers from
            ratios: Occurrences per series for each number in the range, in
                order. Its length must equal the range size. Defaults to 1
                for every number.
            generator: Discrete generator to select with
        """
        range_ = range_ if range_ is not None else Range(0, 1)
        ratios = list(ratios) if ratios is not None else [1] * range_.size
        self._check_ratios(ratios, range_)

        super().__init__(range_)
        self._ratios = ratios
        self._generator = generator if generator is not None else DiscreteGenerator()
        self._series_principle = SeriesPrinciple()
        self._selectables: List[int] = []
        self._initialise()

    def get_integer_number(self) -> int:
        if self._series_principle.series_is_complete(self._generator):
            self._series_principle.reset_series(self._generator)

        index = self._series_principle.get_number(self._generator)
        return self._selectables[index]

    def reset(self) -> None:
        self._series_principle.reset_series(self._generator)
        self.logger.debug("Reset")

    def _current_params(self) -> RatioParams:
        return RatioParams(list(self._ratios))

    def _apply_params(self, new_range: Range, params: RatioParams) -> None:
        ratios = list(params.ratios) if params.ratios is not None else [1] * new_range.size
        self._check_ratios(ratios, new_range)

        self._ratios = ratios
        self._range = new_range
        self._initialise()

    def _initialise(self) -> None:
        self._selectables = [
            self._range.offset + index
            for index, ratio in enumerate(self._ratios)
            for _ in range(ratio)
        ]
        self._generator.set_uniform(len(self._selectables), 1.0)

    @staticmethod
    def _check_ratios(ratios: List[int], range_: Range) -> None:
        check_size_matches_range(ratios, range_, "ratios")

        if any(ratio < 0 for ratio in ratios) or not any(ratio > 0 for ratio in ratios):
            raise InvalidArgumentError(
                "ratios",
                "The ratios must not be negative and at least one must be greater than 0"
            )
