"""
Generation constants and element definitions.

The built-in element table lives in ``pychemgen.data.elements``.
"""

from .constants.generation_constants import GenerationConstants, ErrorMessages

__all__ = [
    "GenerationConstants",
    "ErrorMessages"
]
