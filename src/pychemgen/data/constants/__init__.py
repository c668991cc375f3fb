"""Generation constants for pychemgen."""

from .generation_constants import GenerationConstants, ErrorMessages

__all__ = [
    "GenerationConstants",
    "ErrorMessages"
]
