# aleatoric/__init__.py
from aleatoric.domain.producers.collections_producer import CollectionsProducer
from aleatoric.domain.producers.numbers_producer import NumbersProducer
from aleatoric.domain.protocols.entities.protocol_params import NumberProtocolConfig, ProtocolType
from aleatoric.domain.protocols.entities.range import Range
from aleatoric.domain.protocols.errors import InvalidArgumentError, InvalidRangeError, ProtocolError
from aleatoric.domain.protocols.factories.protocol_factory import ProtocolFactory

__all__ = [
    "CollectionsProducer",
    "InvalidArgumentError",
    "InvalidRangeError",
    "NumberProtocolConfig",
    "NumbersProducer",
    "ProtocolError",
    "ProtocolFactory",
    "ProtocolType",
    "Range",
]
