"""
Core data structures and compound generation.

This module contains the element model, the compound value type, the
element registry and the generator that combines them.
"""

from .exceptions import CompoundError, RomanNumeralRangeError, ElementDefinitionError, ElementRegistryError
from .compound import Compound
from .elements import ElementKind, IonicElement, TransitionElement
from .element_registry import ElementRegistry
from .generator import CompoundGenerator, GeneratorConfig, generate_random_compound

__all__ = [
    "Compound",
    "ElementKind",
    "IonicElement",
    "TransitionElement",
    "ElementRegistry",
    "CompoundGenerator",
    "GeneratorConfig",
    "generate_random_compound",
    "CompoundError",
    "RomanNumeralRangeError",
    "ElementDefinitionError",
    "ElementRegistryError"
]
