"""Unit tests for the Compound value type."""

import pytest
from pychemgen.core.compound import Compound

class TestCompound:
    """Test cases for Compound."""
    def test_formula_from_mapping_keeps_insertion_order(self):
        """Test formula construction from an ordered mapping."""
        compound = Compound.from_composition("Iron (III) Oxide", {"Fe": 2, "O": 3})
        assert compound.name == "Iron (III) Oxide"
        assert compound.formula == "Fe^2O^3"
        assert compound.composition == (("Fe", 2), ("O", 3))
        assert compound.oxidation_state is None

    def test_formula_from_pairs(self):
        compound = Compound.from_composition("Sodium Chloride", [("Na", 1), ("Cl", 1)])
        assert compound.formula == "Na^1Cl^1"
        assert compound.symbols == ("Na", "Cl")
        assert compound.atom_count == 2

    def test_single_element_compound(self):
        compound = Compound.from_composition("Helium", {"He": 1})
        assert compound.formula == "He^1"

    def test_oxidation_state_recorded(self):
        compound = Compound.from_composition("Copper (II) Chloride", {"Cu": 1, "Cl": 2}, oxidation_state=2)
        assert compound.oxidation_state == 2

    def test_compound_is_immutable(self):
        compound = Compound.from_composition("Helium", {"He": 1})
        with pytest.raises(AttributeError):
            compound.name = "Neon"

    def test_to_dict_and_str(self):
        compound = Compound.from_composition("Sodium Chloride", {"Na": 1, "Cl": 1})
        assert compound.to_dict() == {"name": "Sodium Chloride", "formula": "Na^1Cl^1"}
        assert str(compound) == "Sodium Chloride (Na^1Cl^1)"

    def test_equality_by_value(self):
        first = Compound.from_composition("Helium", {"He": 1})
        second = Compound.from_composition("Helium", [("He", 1)])
        assert first == second
