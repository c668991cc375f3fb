import logging
from dataclasses import dataclass
from enum import Enum, auto
from collections.abc import Iterable
from typing import ClassVar, Optional, Tuple, Union

from pychemgen.algorithms.balancing import atoms_required_to_balance
from pychemgen.algorithms.naming import element_name_to_ion, multiplicity_prefix, roman_numeral
from pychemgen.core.compound import Compound
from pychemgen.core.exceptions import ElementDefinitionError
from pychemgen.data.constants import ErrorMessages

logger = logging.getLogger(__name__)


# --- Enum ---
class ElementKind(Enum):
    IONIC = auto()
    TRANSITION = auto()


def _validate_identity(name: str, symbol: str) -> None:
    for field_name, value in (("name", name), ("symbol", symbol)):
        if not isinstance(value, str) or not value.strip():
            raise ElementDefinitionError(ErrorMessages.EMPTY_ELEMENT_FIELD.format(field=field_name, value=value))


def _validate_charge(symbol: str, charge) -> None:
    if isinstance(charge, bool) or not isinstance(charge, int):
        raise ElementDefinitionError(ErrorMessages.INVALID_CHARGE.format(symbol=symbol, value=charge))


@dataclass(frozen=True, eq=False)
class IonicElement:
    """Element with a single fixed charge."""
    kind: ClassVar[ElementKind] = ElementKind.IONIC

    name: str
    symbol: str
    charge: int
    electronegativity: float
    metal: bool = False

    def __post_init__(self) -> None:
        _validate_identity(self.name, self.symbol)
        _validate_charge(self.symbol, self.charge)
        object.__setattr__(self, "electronegativity", float(self.electronegativity))
        object.__setattr__(self, "metal", bool(self.metal))

    @property
    def possible_charges(self) -> Tuple[int, ...]:
        return (self.charge,)

    def ion_name(self, prefix: str = "", change_ending: bool = True) -> str:
        return element_name_to_ion(self.name, prefix, change_ending)

    def prefix_for(self, amount: int) -> str:
        """Multiplicity prefix for this element; metals never take one."""
        if self.metal:
            return ""
        return multiplicity_prefix(amount)

    def covalent_bond(self, paired_element: "IonicElement", paired_count: int) -> Optional[Compound]:
        """
        Bond this element with ``paired_count`` atoms of another ionic element.

        The element with the lower electronegativity is named first with its
        ending unchanged; the other one takes the "-ide" ending.
        Args:
            paired_element: The ionic element to bond with.
            paired_count: Number of atoms of the paired element.
        Returns:
            Optional[Compound]: The compound, or None if the charges cannot be balanced.
        """
        opposing_charge = paired_count * paired_element.charge
        atoms = atoms_required_to_balance(self.charge, opposing_charge)
        if atoms is None:
            logger.warning("Cannot balance %s (%+d) against %d x %s (%+d)",
                           self.symbol, self.charge, paired_count, paired_element.symbol, paired_element.charge)
            return None
        current = (self, atoms)
        paired = (paired_element, paired_count)
        # Ties leave the paired element on the electronegative side
        electronegative = current if self.electronegativity > paired_element.electronegativity else paired
        electropositive = paired if electronegative is current else current

        positive_element, positive_count = electropositive
        negative_element, negative_count = electronegative
        positive_prefix = positive_element.prefix_for(positive_count) if positive_count > 1 else ""
        negative_prefix = negative_element.prefix_for(negative_count)

        name = (f"{positive_element.ion_name(positive_prefix, change_ending=False)} "
                f"{negative_element.ion_name(negative_prefix)}")
        compound = Compound.from_composition(name, ((positive_element.symbol, positive_count),
                                                    (negative_element.symbol, negative_count)))
        logger.info("Covalent bond produced %s", compound)
        return compound


@dataclass(frozen=True, eq=False)
class TransitionElement:
    """Element with several possible oxidation states, kept in ascending order."""
    kind: ClassVar[ElementKind] = ElementKind.TRANSITION

    name: str
    symbol: str
    charges: Tuple[int, ...]

    def __post_init__(self) -> None:
        _validate_identity(self.name, self.symbol)
        charges = tuple(self.charges) if isinstance(self.charges, Iterable) else ()
        if not charges:
            raise ElementDefinitionError(ErrorMessages.EMPTY_CHARGE_LIST.format(symbol=self.symbol))
        for charge in charges:
            _validate_charge(self.symbol, charge)
        object.__setattr__(self, "charges", tuple(sorted(charges)))

    @property
    def possible_charges(self) -> Tuple[int, ...]:
        return self.charges

    def ion_name(self, prefix: str = "", change_ending: bool = True) -> str:
        return element_name_to_ion(self.name, prefix, change_ending)

    def select_charge(self, opposing_charge: int) -> Optional[Tuple[int, int]]:
        """Return the first (charge, atoms) pair that balances ``opposing_charge``, lowest charge first."""
        for charge in self.charges:
            atoms = atoms_required_to_balance(charge, opposing_charge)
            if atoms is not None:
                logger.debug("%s balances %d using charge %+d with %d atoms",
                             self.symbol, opposing_charge, charge, atoms)
                return charge, atoms
        return None

    def bond(self, paired_element: IonicElement, paired_count: int) -> Optional[Compound]:
        """
        Bond this element with ``paired_count`` atoms of an ionic element.
        Args:
            paired_element: The ionic element to bond with.
            paired_count: Number of atoms of the paired element.
        Returns:
            Optional[Compound]: The compound, or None if no charge state balances.
        Raises:
            RomanNumeralRangeError: If the selected charge has no roman numeral.
        """
        opposing_charge = paired_count * paired_element.charge
        selection = self.select_charge(opposing_charge)
        if selection is None:
            logger.warning("No charge of %s %s balances %d x %s (%+d)",
                           self.symbol, list(self.charges), paired_count,
                           paired_element.symbol, paired_element.charge)
            return None
        charge, atoms = selection
        name = f"{self.name} ({roman_numeral(charge)}) {paired_element.ion_name()}"
        compound = Compound.from_composition(name, ((self.symbol, atoms), (paired_element.symbol, paired_count)),
                                             oxidation_state=charge)
        logger.info("Transition bond produced %s", compound)
        return compound


Element = Union[IonicElement, TransitionElement]
