# aleatoric/domain/protocols/entities/subset.py
from typing import List, Optional

from aleatoric.domain.generators.discrete_generator import DiscreteGenerator
from aleatoric.domain.generators.uniform_generator import UniformGenerator

from ..errors import InvalidArgumentError
from ..services.series_principle import SeriesPrinciple
from .number_protocol import NumberProtocol
from .protocol_params import ProtocolType, SubsetParams
from .range import Range


class Subset(NumberProtocol):
    """
    Selects numbers with equal chance from a random subset of the range.

    The subset size is chosen at random between subset_min and subset_max,
    then filled with that many distinct numbers from the range. reset()
    builds a fresh subset, so both its size and its members change.
    """
    protocol_type = ProtocolType.SUBSET

    def __init__(self, range_: Optional[Range] = None, subset_min: Optional[int] = None,
                 subset_max: Optional[int] = None, uniform_generator: Optional[UniformGenerator] = None,
                 discrete_generator: Optional[DiscreteGenerator] = None):
        """
        Args:
            range_: Range the subset is drawn from
            subset_min: Smallest subset size, at least 1 (defaults to 1)
            subset_max: Largest subset size, at most the range size
                (defaults to the range size)
            uniform_generator: Generator choosing the subset size and then
                indices into the subset
            discrete_generator: Generator filling the subset
        """
        range_ = range_ if range_ is not None else Range(0, 1)
        subset_min = subset_min if subset_min is not None else 1
        subset_max = subset_max if subset_max is not None else range_.size
        self._check_subset_values(subset_min, subset_max, range_)

        super().__init__(range_)
        self._subset_min = subset_min
        self._subset_max = subset_max
        self._subset: List[int] = []
        self._uniform_generator = uniform_generator if uniform_generator is not None else UniformGenerator()
        self._discrete_generator = discrete_generator if discrete_generator is not None else DiscreteGenerator()
        self._series_principle = SeriesPrinciple()
        self._set_subset()

    @property
    def subset(self) -> List[int]:
        return list(self._subset)

    def get_integer_number(self) -> int:
        return self._subset[self._uniform_generator.get_number()]

    def reset(self) -> None:
        self._set_subset()
        self.logger.debug(f"Reset with new subset {self._subset}")

    def _current_params(self) -> SubsetParams:
        return SubsetParams(self._subset_min, self._subset_max)

    def _apply_params(self, new_range: Range, params: SubsetParams) -> None:
        subset_min = params.min if params.min is not None else 1
        subset_max = params.max if params.max is not None else new_range.size
        self._check_subset_values(subset_min, subset_max, new_range)

        self._subset_min = subset_min
        self._subset_max = subset_max
        self._range = new_range
        self._set_subset()

    def _set_subset(self) -> None:
        self._discrete_generator.set_uniform(self._range.size, 1.0)

        self._uniform_generator.set_distribution(self._subset_min, self._subset_max)
        subset_size = self._uniform_generator.get_number()

        self._subset = [
            self._series_principle.get_number(self._discrete_generator) + self._range.offset
            for _ in range(subset_size)
        ]

        # From here on the uniform generator picks indices into the subset
        self._uniform_generator.set_distribution(0, len(self._subset) - 1)

    @staticmethod
    def _check_subset_values(subset_min: int, subset_max: int, range_: Range) -> None:
        if subset_min < 1 or subset_min > subset_max:
            raise InvalidArgumentError(
                "subset_min",
                "The value passed as argument for subset_min must be at least 1 "
                "and no greater than subset_max"
            )

        if subset_max > range_.size:
            raise InvalidArgumentError(
                "subset_max",
                f"The value passed as argument for subset_max must be no greater "
                f"than the range size ({range_.size})"
            )
