"""Unit tests for naming helpers."""

import pytest
from pychemgen.algorithms.naming import (element_name_to_ion, multiplicity_prefix, roman_numeral, superscript,
                                         MULTIPLICITY_PREFIXES, ROMAN_NUMERALS)
from pychemgen.core.exceptions import CompoundError, RomanNumeralRangeError

class TestElementNameToIon:
    """Test cases for ion name construction."""
    def test_prefix_vowel_elision(self):
        """Test that the trailing prefix vowel is dropped before a vowel."""
        assert element_name_to_ion("Oxygen", "hepta", True) == "Heptoxide"
        assert element_name_to_ion("Oxygen", "mono") == "Monoxide"

    def test_no_elision_without_vowel_clash(self):
        """Test that the prefix stays intact before a consonant."""
        assert element_name_to_ion("Sulfur", "di", True) == "Disulfide"
        assert element_name_to_ion("Chlorine", "tri") == "Trichloride"

    def test_suffix_replacement(self):
        """Test each recognized suffix is replaced with -ide."""
        assert element_name_to_ion("Chlorine") == "Chloride"
        assert element_name_to_ion("Hydrogen") == "Hydride"
        assert element_name_to_ion("Oxygen") == "Oxide"
        assert element_name_to_ion("Phosphorous") == "Phosphide"
        assert element_name_to_ion("Carbon") == "Carbide"
        assert element_name_to_ion("Selenium") == "Selenide"
        assert element_name_to_ion("Sulfur") == "Sulfide"

    def test_only_trailing_suffix_is_replaced(self):
        """Test that a suffix appearing mid-name is left alone."""
        assert element_name_to_ion("Iodine") == "Iodide"
        assert element_name_to_ion("Ononon") == "Ononide"

    def test_unmatched_name_passes_through(self):
        """Test that names without a known suffix are unchanged."""
        assert element_name_to_ion("Gold") == "Gold"
        assert element_name_to_ion("Zinc") == "Zinc"

    def test_change_ending_disabled(self):
        """Test that the suffix is kept when change_ending is False."""
        assert element_name_to_ion("Sodium", change_ending=False) == "Sodium"
        assert element_name_to_ion("Hydrogen", "di", False) == "Dihydrogen"

    def test_first_letter_capitalized(self):
        """Test that the result always starts with a capital letter."""
        assert element_name_to_ion("oxygen") == "Oxide"
        assert element_name_to_ion("gold", change_ending=False) == "Gold"

    def test_placeholder_prefix(self):
        """Test that the unmapped placeholder prefix is joined as-is."""
        assert element_name_to_ion("Oxygen", "(10+)") == "(10+)oxide"

class TestRomanNumeral:
    """Test cases for roman numeral lookup."""
    def test_supported_range(self):
        """Test every supported value."""
        expected = ["I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X"]
        assert [roman_numeral(n) for n in range(1, 11)] == expected
        assert list(ROMAN_NUMERALS) == expected

    @pytest.mark.parametrize("value", [0, -1, 11, 100])
    def test_out_of_range_raises(self, value):
        """Test that values outside 1..10 fail loudly."""
        with pytest.raises(RomanNumeralRangeError) as exc_info:
            roman_numeral(value)
        assert exc_info.value.value == value
        assert exc_info.value.max_value == 10
        assert isinstance(exc_info.value, CompoundError)

    def test_non_integer_raises(self):
        """Test that non-integers are rejected."""
        with pytest.raises(RomanNumeralRangeError):
            roman_numeral(2.0)
        with pytest.raises(RomanNumeralRangeError):
            roman_numeral(True)

class TestFormattingHelpers:
    """Test cases for superscript and multiplicity prefixes."""
    def test_superscript(self):
        assert superscript(1) == "^1"
        assert superscript(12) == "^12"

    def test_multiplicity_prefix_table(self):
        """Test the mapped prefixes."""
        assert multiplicity_prefix(1) == "mono"
        assert multiplicity_prefix(2) == "di"
        assert multiplicity_prefix(7) == "hepta"
        assert multiplicity_prefix(10) == "deca"
        assert len(MULTIPLICITY_PREFIXES) == 10

    def test_multiplicity_prefix_unmapped(self):
        """Test that unmapped amounts render as the placeholder."""
        assert multiplicity_prefix(11) == "(10+)"
        assert multiplicity_prefix(0) == "(10+)"
