# aleatoric/domain/protocols/factories/protocol_factory.py
import logging
from typing import Any, Dict, Optional, Sequence, Union

from aleatoric.domain.generators.discrete_generator import DiscreteGenerator
from aleatoric.domain.generators.uniform_generator import UniformGenerator
from aleatoric.infrastructure.rng.rng_provider import RNGProvider

from ..entities.adjacent_steps import AdjacentSteps
from ..entities.basic import Basic
from ..entities.cycle import Cycle
from ..entities.granular_walk import GranularWalk
from ..entities.grouped_repetition import GroupedRepetition
from ..entities.no_repetition import NoRepetition
from ..entities.number_protocol import NumberProtocol
from ..entities.periodic import Periodic
from ..entities.precision import Precision
from ..entities.protocol_params import (
    ProtocolParams, ProtocolType, default_params, params_from_dict
)
from ..entities.range import Range
from ..entities.ratio import Ratio
from ..entities.serial import Serial
from ..entities.subset import Subset
from ..entities.walk import Walk
from ..errors import InvalidArgumentError

# Protocols that return a caller chosen first number
INITIAL_SELECTION_TYPES = (
    ProtocolType.ADJACENT_STEPS,
    ProtocolType.CYCLE,
    ProtocolType.GRANULAR_WALK,
    ProtocolType.PERIODIC,
    ProtocolType.PRECISION,
    ProtocolType.WALK,
)


class ProtocolFactory:
    """
    Factory for creating NumberProtocol instances.

    Every generator a protocol owns gets its own RNG strategy from the
    provider. With a seed, the strategies are derived from it stream by
    stream so a factory reproduces the same protocols in the same order.
    """
    def __init__(self, rng_provider: Optional[RNGProvider] = None,
                 rng_strategy_name: str = "mersenne", seed: Optional[int] = None):
        """
        Initialize the protocol factory.

        Args:
            rng_provider: Optional RNG provider (created if not provided)
            rng_strategy_name: Name of RNG strategy to use
            seed: Optional base seed for every generator created
        """
        self.logger = logging.getLogger("domain.protocols.factory")
        self.rng_provider = rng_provider if rng_provider is not None else RNGProvider()
        self.rng_strategy_name = rng_strategy_name
        self.seed = seed
        self._next_stream = 0

        self._builders = {
            ProtocolType.ADJACENT_STEPS: self._create_adjacent_steps,
            ProtocolType.BASIC: self._create_basic,
            ProtocolType.CYCLE: self._create_cycle,
            ProtocolType.GRANULAR_WALK: self._create_granular_walk,
            ProtocolType.GROUPED_REPETITION: self._create_grouped_repetition,
            ProtocolType.NO_REPETITION: self._create_no_repetition,
            ProtocolType.PERIODIC: self._create_periodic,
            ProtocolType.PRECISION: self._create_precision,
            ProtocolType.RATIO: self._create_ratio,
            ProtocolType.SERIAL: self._create_serial,
            ProtocolType.SUBSET: self._create_subset,
            ProtocolType.WALK: self._create_walk,
        }

    def create(self, protocol_type: Union[ProtocolType, str], range_: Range,
               params: Union[ProtocolParams, Dict[str, Any], None] = None,
               initial_selection: Optional[int] = None) -> NumberProtocol:
        """
        Create a new protocol instance.

        Args:
            protocol_type: ProtocolType or its string value, e.g. "walk"
            range_: Range the protocol produces numbers from
            params: Payload dataclass, plain dictionary, or None for defaults
            initial_selection: Optional first number, for the protocols
                that support one

        Returns:
            Initialized NumberProtocol

        Raises:
            InvalidArgumentError: If the type is unknown, the payload does not
                belong to the type, or the protocol rejects its arguments
        """
        protocol_type = ProtocolType.from_value(protocol_type)

        if params is None:
            params = default_params(protocol_type, range_)
        elif isinstance(params, dict):
            params = params_from_dict(protocol_type, params)

        if params.protocol_type is not protocol_type:
            raise InvalidArgumentError(
                "params",
                f"Params for {params.protocol_type.value} cannot configure a {protocol_type.value} protocol"
            )

        if initial_selection is not None and protocol_type not in INITIAL_SELECTION_TYPES:
            raise InvalidArgumentError(
                "initial_selection",
                f"The {protocol_type.value} protocol does not take an initial selection"
            )

        self.logger.debug(f"Creating {protocol_type.value} protocol over {range_} with {params}")
        return self._builders[protocol_type](range_, params, initial_selection)

    def create_from_config(self, config: Dict[str, Any]) -> NumberProtocol:
        """
        Create a protocol from a configuration dictionary.

        Args:
            config: Dictionary with 'type' and 'range' keys and optional
                'params' and 'initial_selection' keys

        Returns:
            Initialized NumberProtocol

        Example config:
            {"type": "walk", "range": [1, 12], "params": {"max_step": 2}}
        """
        if "type" not in config or "range" not in config:
            raise InvalidArgumentError("config", "Protocol config needs both 'type' and 'range'")

        return self.create(
            config["type"],
            self._range_from_config(config["range"]),
            config.get("params"),
            config.get("initial_selection"),
        )

    def create_from_file(self, config_loader, file_path: str) -> Dict[str, NumberProtocol]:
        """
        Create the protocols named in a configuration file.

        Args:
            config_loader: Configuration loader instance
            file_path: Path to a file with a 'protocols' mapping, validated
                against the packaged protocol config schema

        Returns:
            Dictionary mapping protocol names to NumberProtocol instances
        """
        self.logger.info(f"Creating protocols from file: {file_path}")

        config = config_loader.load_protocol_config(file_path)
        return self.create_multiple(config.get("protocols", {}))

    def create_multiple(self, configs: Dict[str, Dict[str, Any]]) -> Dict[str, NumberProtocol]:
        """
        Create protocols from a mapping of names to configurations.

        Args:
            configs: Dictionary mapping protocol names to config dictionaries

        Returns:
            Dictionary mapping protocol names to NumberProtocol instances
        """
        protocols = {}
        for name, config in configs.items():
            try:
                protocols[name] = self.create_from_config(config)
            except InvalidArgumentError as e:
                self.logger.error(f"Failed to create protocol {name}: {str(e)}")
                raise

        self.logger.info(f"Created {len(protocols)} protocols")
        return protocols

    @staticmethod
    def _range_from_config(value: Union[Range, Sequence[int], Dict[str, int]]) -> Range:
        if isinstance(value, Range):
            return value
        if isinstance(value, dict):
            return Range(value["start"], value["end"])
        if len(value) != 2:
            raise InvalidArgumentError("range", f"A range needs exactly a start and an end, got {value}")
        return Range(value[0], value[1])

    def _rng(self):
        stream = self._next_stream
        self._next_stream += 1
        return self.rng_provider.spawn(self.rng_strategy_name, self.seed, stream)

    def _uniform(self) -> UniformGenerator:
        return UniformGenerator(self._rng())

    def _discrete(self) -> DiscreteGenerator:
        return DiscreteGenerator(self._rng())

    def _create_adjacent_steps(self, range_, params, initial_selection):
        return AdjacentSteps(range_, initial_selection, self._discrete())

    def _create_basic(self, range_, params, initial_selection):
        return Basic(range_, self._uniform())

    def _create_cycle(self, range_, params, initial_selection):
        return Cycle(range_, params.bidirectional, params.reverse_direction, initial_selection)

    def _create_granular_walk(self, range_, params, initial_selection):
        return GranularWalk(range_, params.deviation_factor, initial_selection, self._uniform())

    def _create_grouped_repetition(self, range_, params, initial_selection):
        return GroupedRepetition(range_, params.groupings, self._discrete(), self._discrete())

    def _create_no_repetition(self, range_, params, initial_selection):
        return NoRepetition(range_, self._discrete())

    def _create_periodic(self, range_, params, initial_selection):
        return Periodic(range_, params.chance_of_repetition, initial_selection, self._discrete())

    def _create_precision(self, range_, params, initial_selection):
        return Precision(range_, params.distribution, initial_selection, self._discrete())

    def _create_ratio(self, range_, params, initial_selection):
        return Ratio(range_, params.ratios, self._discrete())

    def _create_serial(self, range_, params, initial_selection):
        return Serial(range_, self._discrete())

    def _create_subset(self, range_, params, initial_selection):
        return Subset(range_, params.min, params.max, self._uniform(), self._discrete())

    def _create_walk(self, range_, params, initial_selection):
        return Walk(range_, params.max_step, initial_selection, self._uniform())
