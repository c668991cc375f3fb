"""Unit tests for constants modules."""

from pychemgen.data.constants import GenerationConstants, ErrorMessages

class TestGenerationConstants:
    """Test cases for GenerationConstants."""
    def test_roll_range(self):
        assert GenerationConstants.ROLL_MIN == 0
        assert GenerationConstants.ROLL_MAX == 100
        assert GenerationConstants.ROLL_MIN <= GenerationConstants.TRANSITION_THRESHOLD <= GenerationConstants.ROLL_MAX

    def test_paired_atom_range(self):
        assert GenerationConstants.MIN_PAIRED_ATOMS == 1
        assert GenerationConstants.MAX_PAIRED_ATOMS == 3

    def test_naming_constants(self):
        assert GenerationConstants.MAX_ROMAN_NUMERAL == 10
        assert GenerationConstants.UNMAPPED_PREFIX == "(10+)"
        assert GenerationConstants.SUPERSCRIPT_MARKER == "^"

class TestErrorMessages:
    """Test cases for ErrorMessages."""
    def test_templates_format(self):
        message = ErrorMessages.ROMAN_NUMERAL_OUT_OF_RANGE.format(max_value=10, value=11)
        assert "11" in message and "10" in message
        assert "Fe" in ErrorMessages.DUPLICATE_SYMBOL.format(symbol="Fe")
