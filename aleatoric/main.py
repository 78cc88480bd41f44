# aleatoric/main.py
import argparse
import logging
import sys

from aleatoric.application.registry.protocol_registry import ProtocolRegistry
from aleatoric.domain.producers.numbers_producer import NumbersProducer
from aleatoric.domain.protocols.errors import ProtocolError
from aleatoric.domain.protocols.factories.protocol_factory import ProtocolFactory
from aleatoric.infrastructure.config.loaders.yaml_loader import ConfigError, YamlConfigLoader
from aleatoric.infrastructure.config.validators.schema_validator import SchemaValidator
from aleatoric.infrastructure.logging.log_manager import initialize_logging
from aleatoric.infrastructure.rng.rng_provider import RNGProvider


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Aleatoric number protocol generator")

    parser.add_argument(
        "-c", "--config",
        required=True,
        help="Path to protocol configuration file"
    )

    parser.add_argument(
        "-n", "--count",
        type=int,
        default=16,
        help="Number of values to generate per protocol"
    )

    parser.add_argument(
        "-p", "--protocol",
        action="append",
        default=None,
        help="Name of a configured protocol to run (repeatable, default: all)"
    )

    parser.add_argument(
        "--decimal",
        action="store_true",
        help="Generate decimal numbers instead of integers"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output"
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point: print a generated sequence for each configured protocol."""
    args = parse_arguments(argv)

    config_loader = YamlConfigLoader(SchemaValidator())

    try:
        config = config_loader.load_protocol_config(args.config)
    except ConfigError as e:
        print(f"Error loading configuration: {str(e)}", file=sys.stderr)
        return 1

    log_config = config.get("logging", {})
    if args.verbose:
        log_config["level"] = "DEBUG"
        log_config["console_level"] = "DEBUG"

    initialize_logging(log_config)
    logger = logging.getLogger("application.main")

    try:
        rng_config = config.get("rng", {})
        factory = ProtocolFactory(
            RNGProvider(),
            rng_config.get("strategy", "mersenne"),
            rng_config.get("seed")
        )
        registry = ProtocolRegistry(config_loader, factory)
        registry.load_from_config(config)

        names = args.protocol or registry.get_protocol_names()
        unknown = [name for name in names if registry.get_protocol(name) is None]
        if unknown:
            logger.error(f"Unknown protocols: {', '.join(unknown)}")
            return 1

        for name in names:
            producer = NumbersProducer(registry.get_protocol(name))
            if args.decimal:
                values = producer.get_decimal_collection(args.count)
            else:
                values = producer.get_integer_collection(args.count)
            print(f"{name}: {' '.join(str(value) for value in values)}")

        return 0

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except ProtocolError as e:
        logger.error(f"Invalid protocol configuration: {str(e)}")
        return 1
    finally:
        logging.shutdown()


if __name__ == "__main__":
    sys.exit(main())
