# aleatoric/application/registry/protocol_registry.py
import logging
from typing import Dict, List, Optional

from aleatoric.domain.protocols.entities.number_protocol import NumberProtocol
from aleatoric.domain.protocols.factories.protocol_factory import ProtocolFactory


class ProtocolRegistry:
    """
    Registry of named protocol instances.
    Combines aspects of repository and factory to manage protocol lifecycle.
    """
    def __init__(self, config_loader, protocol_factory: Optional[ProtocolFactory] = None):
        """
        Initialize the protocol registry.

        Args:
            config_loader: Configuration loader for protocol configs
            protocol_factory: Optional protocol factory (created if not provided)
        """
        self.logger = logging.getLogger("application.registry.protocol")
        self.config_loader = config_loader

        if protocol_factory is None:
            self.protocol_factory = ProtocolFactory()
        else:
            self.protocol_factory = protocol_factory

        self.protocols: Dict[str, NumberProtocol] = {}

    def load_protocols(self, config_path: str) -> List[str]:
        """
        Load every protocol named in a configuration file.

        Args:
            config_path: Path to a YAML file with a 'protocols' mapping

        Returns:
            List of loaded protocol names
        """
        self.logger.info(f"Loading protocols from {config_path}")

        protocols = self.protocol_factory.create_from_file(self.config_loader, config_path)
        self.protocols.update(protocols)

        self.logger.info(f"Loaded {len(protocols)} protocols")
        return list(protocols.keys())

    def load_from_config(self, config: Dict) -> List[str]:
        """
        Load the protocols from an already parsed configuration.

        Args:
            config: Configuration dictionary with a 'protocols' mapping

        Returns:
            List of loaded protocol names
        """
        protocols = self.protocol_factory.create_multiple(config.get("protocols", {}))
        self.protocols.update(protocols)
        return list(protocols.keys())

    def get_protocol(self, name: str) -> Optional[NumberProtocol]:
        """
        Get a protocol by name.

        Returns:
            NumberProtocol instance or None if not found
        """
        if name not in self.protocols:
            self.logger.warning(f"Protocol not found: {name}")
            return None

        return self.protocols[name]

    def get_protocol_names(self) -> List[str]:
        return list(self.protocols.keys())

    def get_protocol_count(self) -> int:
        return len(self.protocols)

    def add_protocol(self, name: str, protocol: NumberProtocol) -> None:
        self.protocols[name] = protocol
        self.logger.debug(f"Added protocol {name} to registry")

    def remove_protocol(self, name: str) -> bool:
        """
        Remove a protocol from the registry.

        Returns:
            True if removed, False if not found
        """
        if name in self.protocols:
            del self.protocols[name]
            self.logger.debug(f"Removed protocol {name} from registry")
            return True

        self.logger.warning(f"Cannot remove protocol {name}: not found")
        return False

    def reset_all(self) -> None:
        """Reset every registered protocol to its as-constructed state."""
        for protocol in self.protocols.values():
            protocol.reset()
        self.logger.debug(f"Reset {len(self.protocols)} protocols")

    def clear(self) -> None:
        self.protocols.clear()
        self.logger.info("Cleared protocol registry")
