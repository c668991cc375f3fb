import logging
from difflib import get_close_matches
from pathlib import Path
from typing import Any, Dict, Union

from ruamel.yaml import YAML, constructor, error, scanner

from pychemgen.core.generator import GeneratorConfig
from pychemgen.parsing.config.yaml_keys import (GENERATOR_KEY, TRANSITION_THRESHOLD_KEY, ROLL_MAX_KEY,
                                                PAIRED_ATOMS_KEY, MIN_KEY, MAX_KEY, MAX_ATTEMPTS_KEY)
from pychemgen.parsing.validation.errors import UnknownConfigKeyError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent.parent / "data" / "config" / "default_generator.yaml"


class BaseFileParser:
    """Base class for parsing configuration files."""

    def __init__(self, config_path: Union[str, Path]) -> None:
        self.config_path = Path(config_path)
        self.config = self._load_config()
        logger.info("Successfully loaded configuration from: %s", self.config_path)

    def _load_config(self) -> Dict[str, Any]:
        raise NotImplementedError("Subclasses must implement _load_config method")


class YAMLFileParser(BaseFileParser):
    """Parser for YAML configuration files."""

    def _load_config(self) -> Dict[str, Any]:
        yaml = YAML(typ='safe')
        yaml.allow_duplicate_keys = False
        try:
            logger.debug("Loading YAML file: %s", self.config_path)
            with open(self.config_path, 'r') as f:
                config = yaml.load(f)
            logger.debug("YAML file loaded successfully, found %d top-level keys", len(config) if config else 0)
            return config if config is not None else {}
        except FileNotFoundError as e:
            logger.error("YAML file not found: %s", self.config_path)
            raise FileNotFoundError(f"YAML file not found: {self.config_path}") from e
        except constructor.DuplicateKeyError as e:
            logger.error("Duplicate key found in YAML file %s: %s", self.config_path, e)
            raise ValueError(f"Duplicate key in {self.config_path}: {str(e)}") from e
        except scanner.ScannerError as e:
            logger.error("YAML syntax error in file %s: %s", self.config_path, e)
            raise ValueError(f"YAML syntax error in {self.config_path}: {str(e)}") from e
        except error.YAMLError as e:
            logger.error("Error parsing YAML file %s: %s", self.config_path, e)
            raise ValueError(f"Error parsing {self.config_path}: {str(e)}") from e


class GeneratorYAMLParser(YAMLFileParser):
    """Parser for compound generator settings in YAML format."""

    VALID_GENERATOR_KEYS = {
        TRANSITION_THRESHOLD_KEY,
        ROLL_MAX_KEY,
        PAIRED_ATOMS_KEY,
        MAX_ATTEMPTS_KEY,
    }
    VALID_PAIRED_ATOMS_KEYS = {MIN_KEY, MAX_KEY}

    # --- Constructor ---
    def __init__(self, yaml_path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> None:
        super().__init__(yaml_path)
        self._validate_config()

    # --- Public API ---
    def create_config(self) -> GeneratorConfig:
        """Create a GeneratorConfig; keys missing from the file keep their defaults."""
        section = self.config.get(GENERATOR_KEY) or {}
        kwargs = {}
        if TRANSITION_THRESHOLD_KEY in section:
            kwargs["transition_threshold"] = section[TRANSITION_THRESHOLD_KEY]
        if ROLL_MAX_KEY in section:
            kwargs["roll_max"] = section[ROLL_MAX_KEY]
        paired_atoms = section.get(PAIRED_ATOMS_KEY) or {}
        if MIN_KEY in paired_atoms:
            kwargs["paired_atoms_min"] = paired_atoms[MIN_KEY]
        if MAX_KEY in paired_atoms:
            kwargs["paired_atoms_max"] = paired_atoms[MAX_KEY]
        if MAX_ATTEMPTS_KEY in section:
            kwargs["max_attempts"] = section[MAX_ATTEMPTS_KEY]
        try:
            config = GeneratorConfig(**kwargs)
        except ValueError as e:
            logger.error("Invalid generator settings in %s: %s", self.config_path, e)
            raise ValueError(f"Invalid generator settings in {self.config_path}: {str(e)}") from e
        logger.info("Created generator config from %s: %s", self.config_path, config)
        return config

    # --- Validation ---
    def _validate_config(self) -> None:
        if not isinstance(self.config, dict):
            raise ValueError(f"Root of {self.config_path} must be a mapping, got {type(self.config).__name__}")
        self._check_keys("<root>", self.config, {GENERATOR_KEY})
        section = self.config.get(GENERATOR_KEY)
        if section is None:
            logger.debug("No '%s' section in %s, using defaults", GENERATOR_KEY, self.config_path)
            return
        if not isinstance(section, dict):
            raise ValueError(f"'{GENERATOR_KEY}' must be a mapping, got {type(section).__name__}")
        self._check_keys(GENERATOR_KEY, section, self.VALID_GENERATOR_KEYS)
        paired_atoms = section.get(PAIRED_ATOMS_KEY)
        if paired_atoms is not None:
            if not isinstance(paired_atoms, dict):
                raise ValueError(f"'{PAIRED_ATOMS_KEY}' must be a mapping with '{MIN_KEY}' and/or '{MAX_KEY}'")
            self._check_keys(PAIRED_ATOMS_KEY, paired_atoms, self.VALID_PAIRED_ATOMS_KEYS)

    @staticmethod
    def _check_keys(section: str, mapping: Dict[str, Any], valid_keys: set) -> None:
        for key in mapping:
            if key not in valid_keys:
                matches = get_close_matches(str(key), sorted(valid_keys), n=1)
                raise UnknownConfigKeyError(section, key, sorted(valid_keys), matches[0] if matches else None)
