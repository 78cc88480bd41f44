# aleatoric/domain/protocols/entities/protocol_params.py
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Union

from ..errors import InvalidArgumentError
from .range import Range


class ProtocolType(Enum):
    """Tag identifying each protocol in the family."""
    ADJACENT_STEPS = "adjacent_steps"
    BASIC = "basic"
    CYCLE = "cycle"
    GRANULAR_WALK = "granular_walk"
    GROUPED_REPETITION = "grouped_repetition"
    NO_REPETITION = "no_repetition"
    PERIODIC = "periodic"
    PRECISION = "precision"
    RATIO = "ratio"
    SERIAL = "serial"
    SUBSET = "subset"
    WALK = "walk"

    @classmethod
    def from_value(cls, value: Union["ProtocolType", str]) -> "ProtocolType":
        """
        Resolve a ProtocolType from itself or its string value.

        Raises:
            InvalidArgumentError: If the value names no protocol
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise InvalidArgumentError("protocol_type", f"Protocol type not recognised: {value}") from None


@dataclass
class AdjacentStepsParams:
    protocol_type: ClassVar[ProtocolType] = ProtocolType.ADJACENT_STEPS


@dataclass
class BasicParams:
    protocol_type: ClassVar[ProtocolType] = ProtocolType.BASIC


@dataclass
class CycleParams:
    bidirectional: bool = False
    reverse_direction: bool = False
    protocol_type: ClassVar[ProtocolType] = ProtocolType.CYCLE


@dataclass
class GranularWalkParams:
    deviation_factor: float = 1.0
    protocol_type: ClassVar[ProtocolType] = ProtocolType.GRANULAR_WALK


@dataclass
class GroupedRepetitionParams:
    groupings: List[int] = field(default_factory=lambda: [1])
    protocol_type: ClassVar[ProtocolType] = ProtocolType.GROUPED_REPETITION


@dataclass
class NoRepetitionParams:
    protocol_type: ClassVar[ProtocolType] = ProtocolType.NO_REPETITION


@dataclass
class PeriodicParams:
    chance_of_repetition: float = 0.0
    protocol_type: ClassVar[ProtocolType] = ProtocolType.PERIODIC


@dataclass
class PrecisionParams:
    # None means an equal share for every number in the range
    distribution: Optional[List[float]] = None
    protocol_type: ClassVar[ProtocolType] = ProtocolType.PRECISION


@dataclass
class RatioParams:
    # None means a ratio of 1 for every number in the range
    ratios: Optional[List[int]] = None
    protocol_type: ClassVar[ProtocolType] = ProtocolType.RATIO


@dataclass
class SerialParams:
    protocol_type: ClassVar[ProtocolType] = ProtocolType.SERIAL


@dataclass
class SubsetParams:
    # None means 1 for min and the range size for max
    min: Optional[int] = None
    max: Optional[int] = None
    protocol_type: ClassVar[ProtocolType] = ProtocolType.SUBSET


@dataclass
class WalkParams:
    max_step: int = 1
    protocol_type: ClassVar[ProtocolType] = ProtocolType.WALK


ProtocolParams = Union[
    AdjacentStepsParams,
    BasicParams,
    CycleParams,
    GranularWalkParams,
    GroupedRepetitionParams,
    NoRepetitionParams,
    PeriodicParams,
    PrecisionParams,
    RatioParams,
    SerialParams,
    SubsetParams,
    WalkParams,
]

PARAMS_BY_TYPE = {
    ProtocolType.ADJACENT_STEPS: AdjacentStepsParams,
    ProtocolType.BASIC: BasicParams,
    ProtocolType.CYCLE: CycleParams,
    ProtocolType.GRANULAR_WALK: GranularWalkParams,
    ProtocolType.GROUPED_REPETITION: GroupedRepetitionParams,
    ProtocolType.NO_REPETITION: NoRepetitionParams,
    ProtocolType.PERIODIC: PeriodicParams,
    ProtocolType.PRECISION: PrecisionParams,
    ProtocolType.RATIO: RatioParams,
    ProtocolType.SERIAL: SerialParams,
    ProtocolType.SUBSET: SubsetParams,
    ProtocolType.WALK: WalkParams,
}

# Payloads whose contents are tied to the size of the range
RANGE_SIZED_TYPES = (ProtocolType.PRECISION, ProtocolType.RATIO, ProtocolType.SUBSET)


def default_params(protocol_type: ProtocolType, range_: Optional[Range] = None) -> ProtocolParams:
    """
    Build the default payload for a protocol.

    Range sized payloads are filled for range_ when one is given: uniform
    ratios, an equal share distribution and a subset spanning 1 to the range
    size.
    """
    if range_ is not None:
        if protocol_type is ProtocolType.RATIO:
            return RatioParams([1] * range_.size)
        if protocol_type is ProtocolType.PRECISION:
            return PrecisionParams([1.0 / range_.size] * range_.size)
        if protocol_type is ProtocolType.SUBSET:
            return SubsetParams(1, range_.size)
    return PARAMS_BY_TYPE[protocol_type]()


def params_from_dict(protocol_type: Union[ProtocolType, str], data: Optional[Dict[str, Any]] = None) -> ProtocolParams:
    """
    Build a payload from a plain dictionary, e.g. one read from YAML.

    Raises:
        InvalidArgumentError: If the type is unknown or the dictionary holds
            fields the payload does not have
    """
    protocol_type = ProtocolType.from_value(protocol_type)
    params_class = PARAMS_BY_TYPE[protocol_type]
    try:
        return params_class(**(data or {}))
    except TypeError as e:
        raise InvalidArgumentError("params", f"Invalid parameters for {protocol_type.value}: {e}") from e


@dataclass
class NumberProtocolConfig:
    """
    Range plus protocol payload: the unit passed to set_params() and
    returned by get_params().

    The payload class carries the tag identifying the active protocol.
    """
    range: Range
    params: ProtocolParams

    @property
    def active_protocol(self) -> ProtocolType:
        return self.params.protocol_type

    @classmethod
    def from_range(cls, range_: Range, protocol_type: ProtocolType) -> "NumberProtocolConfig":
        return cls(range_, default_params(protocol_type, range_))

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a dictionary in the layout used by protocol config files.

        Returns:
            Dictionary with type, range and params keys
        """
        return {
            "type": self.active_protocol.value,
            "range": [self.range.start, self.range.end],
            "params": asdict(self.params),
        }
