# tests/test_config_loader.py
import unittest
import sys
import os
import shutil
import tempfile

# Add package root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from aleatoric.domain.protocols.factories.protocol_factory import ProtocolFactory
from aleatoric.infrastructure.config.loaders.yaml_loader import (
    PROTOCOL_CONFIG_SCHEMA, ConfigError, FileNotFoundConfigError, SchemaValidationError,
    YamlConfigLoader, YamlParseError
)
from aleatoric.infrastructure.config.validators.schema_validator import SchemaValidator

EXAMPLE_CONFIG = os.path.join(os.path.dirname(__file__), '..', 'config', 'protocols.yaml')

VALID_CONFIG = """
rng:
  strategy: numpy
  seed: 3
protocols:
  melody:
    type: walk
    range: [1, 12]
    params: {max_step: 2}
    initial_selection: 6
"""

INVALID_CONFIG = """
protocols:
  melody:
    type: brownian
    range: [1]
"""


class TestYamlConfigLoader(unittest.TestCase):
    """Test cases for loading and validating protocol configuration."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.loader = YamlConfigLoader(SchemaValidator())

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def write(self, filename, content):
        path = os.path.join(self.temp_dir, filename)
        with open(path, 'w', encoding='utf-8') as file:
            file.write(content)
        return path

    def test_load_protocol_config(self):
        config = self.loader.load_protocol_config(self.write("valid.yaml", VALID_CONFIG))

        self.assertEqual(config["rng"], {"strategy": "numpy", "seed": 3})
        self.assertEqual(config["protocols"]["melody"]["range"], [1, 12])

    def test_schema_violation(self):
        path = self.write("invalid.yaml", INVALID_CONFIG)

        with self.assertRaises(SchemaValidationError) as context:
            self.loader.load_protocol_config(path)

        self.assertGreaterEqual(len(context.exception.errors), 2)

    def test_schema_violation_outside_strict_mode(self):
        path = self.write("invalid.yaml", INVALID_CONFIG)

        config = self.loader.set_strict_mode(False).load_protocol_config(path)

        self.assertEqual(config["protocols"]["melody"]["type"], "brownian")

    def test_missing_file(self):
        missing = os.path.join(self.temp_dir, "missing.yaml")

        with self.assertRaises(FileNotFoundConfigError):
            self.loader.load_file(missing)

        self.loader.set_strict_mode(False)
        self.assertEqual(self.loader.load_file(missing, default_config={"protocols": {}}), {"protocols": {}})

    def test_parse_error(self):
        path = self.write("broken.yaml", "protocols: [unclosed\n")

        with self.assertRaises(YamlParseError):
            self.loader.load_file(path)

    def test_empty_file(self):
        self.assertEqual(self.loader.load_file(self.write("empty.yaml", "")), {})

    def test_load_directory(self):
        self.write("first.yaml", VALID_CONFIG)
        self.write("second.yml", "protocols: {}\n")
        self.write("notes.txt", "ignored")

        configs = self.loader.load_directory(self.temp_dir, PROTOCOL_CONFIG_SCHEMA)

        self.assertEqual(sorted(configs), ["first", "second"])

    def test_load_directory_missing(self):
        with self.assertRaises(FileNotFoundConfigError):
            self.loader.load_directory(os.path.join(self.temp_dir, "nowhere"))

    def test_load_with_fallbacks(self):
        missing = os.path.join(self.temp_dir, "missing.yaml")
        valid = self.write("valid.yaml", VALID_CONFIG)

        config = self.loader.load_with_fallbacks([missing, valid], PROTOCOL_CONFIG_SCHEMA)

        self.assertIn("melody", config["protocols"])
        self.assertTrue(self.loader.strict_mode)

        with self.assertRaises(ConfigError):
            self.loader.load_with_fallbacks([missing])

    def test_example_config_builds(self):
        config = self.loader.load_protocol_config(EXAMPLE_CONFIG)
        factory = ProtocolFactory(seed=config["rng"]["seed"])

        protocols = factory.create_multiple(config["protocols"])

        self.assertEqual(set(protocols), set(config["protocols"]))


class TestSchemaValidator(unittest.TestCase):
    """Test cases for the SchemaValidator."""

    def setUp(self):
        self.validator = SchemaValidator()
        self.schema = {
            "type": "object",
            "properties": {"seed": {"type": "integer"}},
            "required": ["seed"]
        }

    def test_valid(self):
        self.assertEqual(self.validator.validate({"seed": 1}, self.schema), (True, []))

    def test_invalid(self):
        is_valid, errors = self.validator.validate({"seed": "one"}, self.schema)

        self.assertFalse(is_valid)
        self.assertEqual(len(errors), 1)
        self.assertIn("seed", errors[0])

    def test_invalid_schema(self):
        is_valid, errors = self.validator.validate({}, {"type": "not-a-type"})

        self.assertFalse(is_valid)
        self.assertTrue(errors[0].startswith("Schema error"))


if __name__ == "__main__":
    unittest.main()
