"""Chemical element data and definitions."""

from .element_data import (
    element_map, default_registry, IONIC_ELEMENTS, TRANSITION_ELEMENTS,
    HYDROGEN, OXYGEN, SULFUR, CHLORINE, SODIUM, MAGNESIUM, ALUMINIUM,
    IRON, COPPER, CHROMIUM, MANGANESE
)

__all__ = [
    "element_map", "default_registry", "IONIC_ELEMENTS", "TRANSITION_ELEMENTS",
    # Individual elements for direct access
    "HYDROGEN", "OXYGEN", "SULFUR", "CHLORINE", "SODIUM", "MAGNESIUM", "ALUMINIUM",
    "IRON", "COPPER", "CHROMIUM", "MANGANESE"
]
