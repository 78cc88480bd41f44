# aleatoric/domain/protocols/entities/grouped_repetition.py
from typing import List, Optional, Sequence

from aleatoric.domain.generators.discrete_generator import DiscreteGenerator

from ..errors import InvalidArgumentError
from ..services.series_principle import SeriesPrinciple
from .number_protocol import NumberProtocol
from .protocol_params import GroupedRepetitionParams, ProtocolType
from .range import Range


class GroupedRepetition(NumberProtocol):
    """
    Repeats each selected number a number of times taken from groupings.

    When a group ends, a grouping length and a number are each chosen
    serially (no grouping and no number is used twice before all of them
    have been), and the number is returned that many times in a row.
    Groupings and numbers run as two independent series.
    """
    protocol_type = ProtocolType.GROUPED_REPETITION

    def __init__(self, range_: Optional[Range] = None, groupings: Optional[Sequence[int]] = None,
                 number_generator: Optional[DiscreteGenerator] = None,
                 grouping_generator: Optional[DiscreteGenerator] = None):
        groupings = list(groupings) if groupings is not None else [1]
        self._check_groupings(groupings)

        super().__init__(range_ if range_ is not None else Range(0, 1))
        self._groupings = groupings
        self._number_generator = number_generator if number_generator is not None else DiscreteGenerator()
        self._grouping_generator = grouping_generator if grouping_generator is not None else DiscreteGenerator()
        self._series_principle = SeriesPrinciple()
        self._grouping_count = 0
        self._current_number = None
        self._initialise()

    def get_integer_number(self) -> int:
        if self._series_principle.series_is_complete(self._grouping_generator):
            self._series_principle.reset_series(self._grouping_generator)

        if self._series_principle.series_is_complete(self._number_generator):
            self._series_principle.reset_series(self._number_generator)

        if self._grouping_count == 0:
            grouping_index = self._series_principle.get_number(self._grouping_generator)
            self._grouping_count = self._groupings[grouping_index]
            self._current_number = self._series_principle.get_number(self._number_generator) + self._range.offset

        self._grouping_count -= 1
        return self._current_number

    def reset(self) -> None:
        self._initialise()
        self.logger.debug("Reset")

    def _current_params(self) -> GroupedRepetitionParams:
        return GroupedRepetitionParams(list(self._groupings))

    def _apply_params(self, new_range: Range, params: GroupedRepetitionParams) -> None:
        groupings = list(params.groupings) if params.groupings is not None else [1]
        self._check_groupings(groupings)

        self._groupings = groupings
        self._range = new_range
        self._initialise()

    def _initialise(self) -> None:
        self._number_generator.set_uniform(self._range.size, 1.0)
        self._grouping_generator.set_uniform(len(self._groupings), 1.0)
        self._grouping_count = 0

    @staticmethod
    def _check_groupings(groupings: List[int]) -> None:
        if not groupings or any(grouping < 1 for grouping in groupings):
            raise InvalidArgumentError(
                "groupings", "The groupings must not be empty and each must be an integer of 1 or more"
            )
