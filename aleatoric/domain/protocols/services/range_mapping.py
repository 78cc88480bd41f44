# aleatoric/domain/protocols/services/range_mapping.py
from typing import Tuple

from ..entities.range import Range


def get_max_step_sub_range(last_selected: int, max_step: int, range_start: int, range_end: int) -> Tuple[int, int]:
    """
    Get the sub-range within max_step of last_selected, clipped to the range.

    Traversal never wraps: a sub-range running off either end of the range is
    curtailed at that end.

    Args:
        last_selected: Number the sub-range is centred on
        max_step: Largest distance allowed from last_selected
        range_start: Start of the enclosing range (inclusive)
        range_end: End of the enclosing range (inclusive)

    Returns:
        (sub_range_start, sub_range_end) tuple
    """
    sub_range_start = last_selected - max_step
    if sub_range_start < range_start or sub_range_start > range_end:
        sub_range_start = range_start

    sub_range_end = last_selected + max_step
    if sub_range_end < range_start or sub_range_end > range_end:
        sub_range_end = range_end

    return sub_range_start, sub_range_end


def normalize(value: float, range_min: int, range_max: int) -> float:
    return (value - range_min) / (range_max - range_min)


def scale_to_range(normalized_value: float, range_min: int, range_max: int) -> float:
    return normalized_value * (range_max - range_min) + range_min


def map_to_range(value: float, from_range: Range, to_range: Range) -> float:
    """Linearly map value from one range onto another."""
    normalized = normalize(value, from_range.start, from_range.end)
    return scale_to_range(normalized, to_range.start, to_range.end)
