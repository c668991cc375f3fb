"""YAML configuration for the compound generator."""

from .generator_yaml_parser import GeneratorYAMLParser, DEFAULT_CONFIG_PATH

__all__ = [
    "GeneratorYAMLParser",
    "DEFAULT_CONFIG_PATH"
]
