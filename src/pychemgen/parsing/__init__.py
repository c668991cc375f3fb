"""
Configuration and entry points for pychemgen.

This package handles YAML generator settings and the convenience API
that wires a registry, a configuration and a generator together.
"""

from .api import create_generator, generate_compound, load_generator_config
from .config.generator_yaml_parser import GeneratorYAMLParser
from .validation.errors import ConfigError, UnknownConfigKeyError

__all__ = [
    'create_generator',
    'generate_compound',
    'load_generator_config',
    'GeneratorYAMLParser',
    'ConfigError',
    'UnknownConfigKeyError'
]
