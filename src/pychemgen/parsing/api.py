import logging
from pathlib import Path
from typing import Optional, Union

from pychemgen.core.compound import Compound
from pychemgen.core.element_registry import ElementRegistry
from pychemgen.core.generator import CompoundGenerator, GeneratorConfig, make_rng
from pychemgen.data.elements.element_data import default_registry
from pychemgen.parsing.config.generator_yaml_parser import GeneratorYAMLParser

logger = logging.getLogger(__name__)


def load_generator_config(yaml_path: Union[str, Path]) -> GeneratorConfig:
    """
    Load generator settings from a YAML configuration file.
    Args:
        yaml_path: Path to the YAML configuration file
    Returns:
        The validated generator configuration
    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the YAML content is invalid
    """
    logger.info("Loading generator config from: %s", yaml_path)
    return GeneratorYAMLParser(yaml_path).create_config()


def create_generator(yaml_path: Optional[Union[str, Path]] = None,
                     registry: Optional[ElementRegistry] = None) -> CompoundGenerator:
    """
    Create a compound generator.

    This function serves as the main entry point for building generators. The
    built-in element table is used when no registry is given, and default
    settings are used when no configuration file is given.
    Args:
        yaml_path: Optional path to a YAML configuration file
        registry: Optional pre-populated element registry
    Returns:
        A ready-to-use CompoundGenerator
    Examples:
        generator = create_generator()
        compound = generator.generate(seed=42)

        generator = create_generator('settings.yaml', registry=my_registry)
    """
    config = load_generator_config(yaml_path) if yaml_path is not None else GeneratorConfig()
    if registry is None:
        registry = default_registry()
    logger.info("Creating generator with %r", registry)
    return CompoundGenerator(registry, config)


def generate_compound(seed: int, generator: Optional[CompoundGenerator] = None,
                      max_attempts: Optional[int] = None) -> Optional[Compound]:
    """
    Generate a compound, retrying until one forms or the attempts run out.

    All attempts draw from one random generator seeded with ``seed``, so the
    result is reproducible.
    Args:
        seed: Integer seed
        generator: Generator to use; a default one when omitted
        max_attempts: Attempt budget; the generator's configured budget when omitted
    Returns:
        The first compound formed, or None if every attempt came back empty
    """
    if generator is None:
        generator = create_generator()
    attempts = max_attempts if max_attempts is not None else generator.config.max_attempts
    if attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {attempts}")
    rng = make_rng(seed)
    for attempt in range(1, attempts + 1):
        compound = generator.generate(rng=rng)
        if compound is not None:
            logger.info("Generated %s on attempt %d (seed=%d)", compound, attempt, seed)
            return compound
        logger.debug("Attempt %d for seed %d produced no compound", attempt, seed)
    logger.warning("No compound generated for seed %d after %d attempts", seed, attempts)
    return None
