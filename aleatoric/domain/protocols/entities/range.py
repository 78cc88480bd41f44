# aleatoric/domain/protocols/entities/range.py
from dataclasses import dataclass, field
from typing import Iterator, Tuple

from ..errors import InvalidRangeError


@dataclass(frozen=True)
class Range:
    """
    Inclusive integer interval that every protocol selects numbers from.

    The offset equals the start and is used to convert between generator
    indices (always zero based) and values in the range. A range always holds
    at least two numbers.
    """
    start: int
    end: int
    offset: int = field(init=False)
    size: int = field(init=False)

    def __post_init__(self):
        if self.end <= self.start:
            raise InvalidRangeError(self.start, self.end)
        object.__setattr__(self, "offset", self.start)
        object.__setattr__(self, "size", self.end - self.start + 1)

    def contains(self, number: int) -> bool:
        """Return True if number lies within the range, both ends included."""
        return self.start <= number <= self.end

    def contains_real(self, number: float) -> bool:
        """Floating point variant of contains()."""
        return float(self.start) <= number <= float(self.end)

    def as_tuple(self) -> Tuple[int, int]:
        return self.start, self.end

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start, self.end + 1))

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"Range(start={self.start}, end={self.end})"
