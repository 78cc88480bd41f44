# aleatoric/infrastructure/rng/strategies/mersenne_rng.py
import random
from typing import Optional, Sequence


class MersenneTwisterRNG:
    """
    Random number generator using the Mersenne Twister algorithm (Python's default).
    """
    def __init__(self, seed_value: Optional[int] = None):
        """
        Initialize the RNG with an optional seed.

        Args:
            seed_value: Optional seed value for reproducible random numbers
        """
        # Dedicated instance, never the module level random state
        self._random = random.Random()

        if seed_value is not None:
            self.seed(seed_value)

    def get_random_int(self, min_val: int, max_val: int) -> int:
        """
        Get a random integer in the range [min_val, max_val].

        Args:
            min_val: Minimum value (inclusive)
            max_val: Maximum value (inclusive)

        Returns:
            Random integer in the specified range
        """
        return self._random.randint(min_val, max_val)

    def get_weighted_index(self, weights: Sequence[float]) -> int:
        """
        Get an index chosen according to the supplied weights.

        Args:
            weights: Non-negative weights with a positive sum

        Returns:
            Selected index

        Raises:
            ValueError: If no weight is positive
        """
        if not any(w > 0.0 for w in weights):
            raise ValueError("At least one weight must be greater than zero")
        return self._random.choices(range(len(weights)), weights=weights, k=1)[0]

    def seed(self, seed_value: int) -> None:
        """
        Set the seed for the RNG.

        Args:
            seed_value: Seed value to use
        """
        self._random.seed(seed_value)
