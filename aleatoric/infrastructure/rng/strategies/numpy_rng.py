# aleatoric/infrastructure/rng/strategies/numpy_rng.py
import numpy as np
from typing import Optional, Sequence


class NumpyRNG:
    """
    Random number generator backed by a NumPy Generator (PCG64).
    """
    def __init__(self, seed_value: Optional[int] = None):
        """
        Initialize the RNG with an optional seed.

        Args:
            seed_value: Optional seed value for reproducible random numbers
        """
        # Dedicated Generator instance to avoid global state issues
        self.rng = np.random.default_rng(seed_value)

    def get_random_int(self, min_val: int, max_val: int) -> int:
        """
        Get a random integer in the range [min_val, max_val].

        Args:
            min_val: Minimum value (inclusive)
            max_val: Maximum value (inclusive)

        Returns:
            Random integer in the specified range
        """
        # integers() is [min, max) unless endpoint is set
        return int(self.rng.integers(min_val, max_val, endpoint=True))

    def get_weighted_index(self, weights: Sequence[float]) -> int:
        """
        Get an index chosen according to the supplied weights.

        The weights are normalised to probabilities before sampling, so they
        only need to be non-negative with a positive sum.

        Args:
            weights: Non-negative weights with a positive sum

        Returns:
            Selected index

        Raises:
            ValueError: If no weight is positive
        """
        weights_array = np.asarray(weights, dtype=float)
        total = weights_array.sum()
        if total <= 0.0:
            raise ValueError("At least one weight must be greater than zero")
        return int(self.rng.choice(len(weights_array), p=weights_array / total))

    def seed(self, seed_value: int) -> None:
        """
        Set the seed for the RNG.

        Args:
            seed_value: Seed value to use
        """
        self.rng = np.random.default_rng(seed_value)
