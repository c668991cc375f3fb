"""Custom exceptions for pychemgen core functionality."""
import logging

from pychemgen.data.constants import ErrorMessages, GenerationConstants

logger = logging.getLogger(__name__)


class CompoundError(Exception):
    """Base exception for all compound-related errors."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("CompoundError raised: %s", message)


class RomanNumeralRangeError(CompoundError):
    """Exception raised when a value falls outside the roman numeral table."""

    def __init__(self, value, max_value: int = GenerationConstants.MAX_ROMAN_NUMERAL):
        self.value = value
        self.max_value = max_value
        super().__init__(ErrorMessages.ROMAN_NUMERAL_OUT_OF_RANGE.format(max_value=max_value, value=value))


class ElementDefinitionError(CompoundError):
    """Exception raised when element data violates the ingestion contract."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("ElementDefinitionError raised: %s", message)


class ElementRegistryError(CompoundError):
    """Exception raised when an element cannot be registered."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(ErrorMessages.DUPLICATE_SYMBOL.format(symbol=symbol))
