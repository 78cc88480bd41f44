# aleatoric/domain/protocols/services/series_principle.py
from aleatoric.domain.generators.discrete_generator import DiscreteGenerator


class SeriesPrinciple:
    """
    Selection without replacement on top of a discrete generator.

    Every index picked has its weight set to 0.0 so it cannot be picked again
    until the series is reset. Callers check series_is_complete() and call
    reset_series() before each pick, so each index is produced exactly once
    per series while the order, including the first index of a new series, is
    unconstrained.
    """

    def get_number(self, generator: DiscreteGenerator) -> int:
        """Pick an index and remove it from the remainder of the series."""
        selected = generator.get_number()
        generator.update_weight(selected, 0.0)
        return selected

    def series_is_complete(self, generator: DiscreteGenerator) -> bool:
        return all(weight <= 0.0 for weight in generator.get_distribution_vector())

    def reset_series(self, generator: DiscreteGenerator) -> None:
        generator.update_all_weights(1.0)
