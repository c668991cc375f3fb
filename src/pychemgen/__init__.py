"""
pychemgen - Procedural names and formulas for chemical compounds.

This library combines elements with integer ionic charges into net-neutral
compounds and names them, e.g. "Iron (III) Chloride" with formula "Fe^1Cl^3".

Key Features:
- Charge balancing with integer atom counts
- Naming with multiplicity prefixes, "-ide" endings and oxidation-state numerals
- Multi-valent transition elements with lowest-first charge selection
- Deterministic seeded generation over an explicit element registry
- YAML generator configuration

Main Components:
- Core: Element model, compounds, registry and generator
- Algorithms: Naming helpers and charge balancing
- Parsing: YAML configuration and the convenience API
- Data: Built-in element table and generation constants
"""

try:
    from ._version import version as __version__
except ImportError:
    try:
        from importlib.metadata import version, PackageNotFoundError
        try:
            __version__ = version("pychemgen")
        except PackageNotFoundError:
            __version__ = "0.1.0+unknown"
    except ImportError:
        __version__ = "0.1.0+unknown"

# Core definitions
from .core.compound import Compound
from .core.elements import ElementKind, IonicElement, TransitionElement
from .core.element_registry import ElementRegistry
from .core.generator import CompoundGenerator, GeneratorConfig, generate_random_compound
from .core.exceptions import CompoundError, RomanNumeralRangeError

# Algorithms
from .algorithms.naming import element_name_to_ion, roman_numeral, superscript
from .algorithms.balancing import atoms_required_to_balance

# Main API functions
from .parsing.api import create_generator, generate_compound, load_generator_config

# Data
from .data.elements.element_data import default_registry, element_map

__all__ = [
    # Version
    '__version__',

    # Core classes
    'Compound',
    'ElementKind',
    'IonicElement',
    'TransitionElement',
    'ElementRegistry',
    'CompoundGenerator',
    'GeneratorConfig',
    'CompoundError',
    'RomanNumeralRangeError',

    # Algorithms
    'element_name_to_ion',
    'roman_numeral',
    'superscript',
    'atoms_required_to_balance',

    # Main API
    'generate_random_compound',
    'create_generator',
    'generate_compound',
    'load_generator_config',

    # Data
    'default_registry',
    'element_map'
]
