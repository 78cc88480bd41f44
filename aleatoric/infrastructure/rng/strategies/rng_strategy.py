# aleatoric/infrastructure/rng/strategies/rng_strategy.py
from typing import Protocol, Sequence


class RNGStrategy(Protocol):
    """Protocol defining the entropy source the number generators draw from."""

    def get_random_int(self, min_val: int, max_val: int) -> int:
        """
        Get a random integer in the range [min_val, max_val].

        Args:
            min_val: Minimum value (inclusive)
            max_val: Maximum value (inclusive)

        Returns:
            Random integer in the specified range
        """
        ...

    def get_weighted_index(self, weights: Sequence[float]) -> int:
        """
        Get an index into weights, chosen with probability proportional to
        the weight stored at that index.

        Args:
            weights: Non-negative weights with a positive sum

        Returns:
            Index in the range [0, len(weights))
        """
        ...

    def seed(self, seed_value: int) -> None:
        """
        Set the seed for the RNG.

        Args:
            seed_value: Seed value to use
        """
        ...
