# aleatoric/domain/generators/uniform_generator.py
from typing import Optional, Tuple

from aleatoric.infrastructure.rng.strategies.mersenne_rng import MersenneTwisterRNG
from aleatoric.infrastructure.rng.strategies.rng_strategy import RNGStrategy


class UniformGenerator:
    """
    Produces integers with equal probability from an inclusive interval.

    The interval can be replaced at any time with set_distribution(); the
    change applies from the next call to get_number().
    """
    def __init__(self, rng: Optional[RNGStrategy] = None, range_start: int = 0, range_end: int = 1):
        """
        Initialize the generator.

        Args:
            rng: Entropy source to draw from (an unseeded Mersenne Twister if omitted)
            range_start: Start of the interval (inclusive)
            range_end: End of the interval (inclusive)
        """
        self.rng = rng if rng is not None else MersenneTwisterRNG()
        self._start = range_start
        self._end = range_end

    def get_number(self) -> int:
        return self.rng.get_random_int(self._start, self._end)

    def set_distribution(self, range_start: int, range_end: int) -> None:
        self._start = range_start
        self._end = range_end

    def get_distribution(self) -> Tuple[int, int]:
        return self._start, self._end

    def __repr__(self) -> str:
        return f"UniformGenerator(start={self._start}, end={self._end})"
