# aleatoric/domain/generators/discrete_generator.py
from typing import List, Optional, Sequence

from aleatoric.infrastructure.rng.strategies.mersenne_rng import MersenneTwisterRNG
from aleatoric.infrastructure.rng.strategies.rng_strategy import RNGStrategy


class DiscreteGenerator:
    """
    Produces indices according to a mutable vector of weights.

    get_number() returns an index in [0, len(vector)) where the chance of each
    index is its weight divided by the sum of all weights. The weights do not
    need to sum to 1.0 and a weight of 0.0 excludes its index.
    """
    def __init__(self, rng: Optional[RNGStrategy] = None, distribution_vector: Optional[Sequence[float]] = None):
        """
        Initialize the generator.

        Args:
            rng: Entropy source to draw from (an unseeded Mersenne Twister if omitted)
            distribution_vector: Initial weights. Defaults to [1.0, 1.0]
                (heads or tails).
        """
        self.rng = rng if rng is not None else MersenneTwisterRNG()
        self._vector: List[float] = []
        self.set_distribution_vector(distribution_vector if distribution_vector is not None else [1.0, 1.0])

    def get_number(self) -> int:
        """
        Select an index according to the current weights.

        Raises:
            ValueError: If no weight in the vector is positive
        """
        return self.rng.get_weighted_index(self._vector)

    def set_distribution_vector(self, distribution_vector: Sequence[float]) -> None:
        """Replace the whole vector with a copy of distribution_vector."""
        self._vector = [float(w) for w in distribution_vector]

    def set_uniform(self, vector_size: int, uniform_value: float) -> None:
        """
        Replace the vector with one of vector_size items all set to uniform_value.

        Args:
            vector_size: Length of the new vector
            uniform_value: Weight given to every index
        """
        self._vector = [float(uniform_value)] * vector_size

    def update_weight(self, index: int, new_value: float) -> None:
        self._vector[index] = float(new_value)

    def update_all_weights(self, uniform_value: float) -> None:
        """Set every weight to uniform_value, keeping the vector length."""
        self._vector = [float(uniform_value)] * len(self._vector)

    def get_distribution_vector(self) -> List[float]:
        return list(self._vector)

    def __len__(self) -> int:
        return len(self._vector)

    def __repr__(self) -> str:
        return f"DiscreteGenerator(size={len(self._vector)})"
