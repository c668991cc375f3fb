from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class GenerationConstants:
    """Constants used by the compound generator and naming helpers."""
    # Primary element roll
    ROLL_MIN: Final[int] = 0
    ROLL_MAX: Final[int] = 100
    TRANSITION_THRESHOLD: Final[int] = 50  # rolls strictly above pick a transition element
    # Paired element atom count (inclusive)
    MIN_PAIRED_ATOMS: Final[int] = 1
    MAX_PAIRED_ATOMS: Final[int] = 3
    # Naming
    MAX_ROMAN_NUMERAL: Final[int] = 10
    UNMAPPED_PREFIX: Final[str] = "(10+)"
    SUPERSCRIPT_MARKER: Final[str] = "^"
    # Caller-level retry policy
    DEFAULT_MAX_ATTEMPTS: Final[int] = 25
    # numpy seeds must be non-negative
    SEED_MODULUS: Final[int] = 1 << 64


@dataclass(frozen=True)
class ErrorMessages:
    """Standardized error message templates."""
    ROMAN_NUMERAL_OUT_OF_RANGE: Final[str] = "Roman numeral lookup supports 1..{max_value}, got {value}"
    EMPTY_ELEMENT_FIELD: Final[str] = "Element {field} must be a non-empty string, got {value!r}"
    EMPTY_CHARGE_LIST: Final[str] = "Transition element '{symbol}' must define at least one charge"
    INVALID_CHARGE: Final[str] = "Charge for '{symbol}' must be an integer, got {value!r}"
    DUPLICATE_SYMBOL: Final[str] = "Element symbol '{symbol}' is already registered"
