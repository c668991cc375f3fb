"""
Naming and charge-balancing algorithms.

Stateless helpers shared by the element model: roman numerals, formula
superscripts, multiplicity prefixes, ion name construction and the
integer charge-balancing rule.
"""

from .balancing import atoms_required_to_balance
from .naming import (element_name_to_ion, multiplicity_prefix, roman_numeral, superscript,
                     MULTIPLICITY_PREFIXES, ROMAN_NUMERALS, ION_SUFFIXES)

__all__ = [
    "atoms_required_to_balance",
    "element_name_to_ion",
    "multiplicity_prefix",
    "roman_numeral",
    "superscript",
    "MULTIPLICITY_PREFIXES",
    "ROMAN_NUMERALS",
    "ION_SUFFIXES"
]
