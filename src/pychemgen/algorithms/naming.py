import logging
from typing import Dict, Tuple

from pychemgen.core.exceptions import RomanNumeralRangeError
from pychemgen.data.constants import GenerationConstants

logger = logging.getLogger(__name__)

ROMAN_NUMERALS: Tuple[str, ...] = ("I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X")

MULTIPLICITY_PREFIXES: Dict[int, str] = {
    1: "mono",
    2: "di",
    3: "tri",
    4: "tetra",
    5: "penta",
    6: "hexa",
    7: "hepta",
    8: "octo",
    9: "nona",
    10: "deca",
}

# Order matters: only the first matching suffix is replaced.
ION_SUFFIXES: Tuple[str, ...] = ("ine", "ogen", "ygen", "orous", "on", "ium", "ur")
ION_ENDING = "ide"
VOWELS = frozenset("aeiou")


def roman_numeral(value: int) -> str:
    """
    Return the roman numeral for a value in the supported table.
    Args:
        value: Integer between 1 and 10 inclusive.
    Returns:
        str: Roman numeral string.
    Raises:
        RomanNumeralRangeError: If the value is outside the table.
    """
    if isinstance(value, bool) or not isinstance(value, int) \
            or not 1 <= value <= GenerationConstants.MAX_ROMAN_NUMERAL:
        raise RomanNumeralRangeError(value)
    return ROMAN_NUMERALS[value - 1]


def superscript(count: int) -> str:
    """Format an atom count as a 'power of' marker, e.g. ``^2``."""
    return f"{GenerationConstants.SUPERSCRIPT_MARKER}{count}"


def multiplicity_prefix(amount: int) -> str:
    """Return the greek multiplicity prefix, or the placeholder for unmapped amounts."""
    return MULTIPLICITY_PREFIXES.get(amount, GenerationConstants.UNMAPPED_PREFIX)


def element_name_to_ion(name: str, prefix: str = "", change_ending: bool = True) -> str:
    """
    Build the ion name fragment used inside compound names.

    A trailing prefix vowel is dropped when the name starts with a vowel
    ("hepta" + "Oxygen" -> "Heptoxide"), the first recognized suffix is
    replaced with "-ide" when ``change_ending`` is set, and the first
    letter of the result is capitalized.
    Args:
        name: Base element name.
        prefix: Optional multiplicity prefix such as "di" or "tri".
        change_ending: Whether to mutate the suffix to "-ide".
    Returns:
        str: Capitalized ion name.
    """
    if prefix and name and prefix[-1].lower() in VOWELS and name[0].lower() in VOWELS:
        logger.debug("Eliding trailing vowel of prefix '%s' before '%s'", prefix, name)
        prefix = prefix[:-1]
    if change_ending:
        for suffix in ION_SUFFIXES:
            if name.endswith(suffix):
                logger.debug("Replacing suffix '%s' of '%s' with '%s'", suffix, name, ION_ENDING)
                name = name[:-len(suffix)] + ION_ENDING
                break
    if prefix and name:
        name = name[0].lower() + name[1:]
    completed = prefix + name
    if not completed:
        return completed
    return completed[0].upper() + completed[1:]
