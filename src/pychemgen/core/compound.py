import logging
from dataclasses import dataclass
from collections.abc import Mapping
from typing import Dict, Iterable, Optional, Tuple, Union

from pychemgen.algorithms.naming import superscript

logger = logging.getLogger(__name__)

Composition = Tuple[Tuple[str, int], ...]


@dataclass(frozen=True)
class Compound:
    """
    Immutable snapshot of a generated compound.

    Elements are referenced by symbol only, so a compound stays valid
    independently of the registry it was generated from.
    """
    name: str
    formula: str
    composition: Composition = ()
    # Oxidation state chosen for the transition element, None for ionic compounds
    oxidation_state: Optional[int] = None

    @classmethod
    def from_composition(cls, name: str,
                         composition: Union[Mapping[str, int], Iterable[Tuple[str, int]]],
                         oxidation_state: Optional[int] = None) -> "Compound":
        """
        Create a compound and its formula from ordered (symbol, count) pairs.
        Args:
            name: Display name of the compound.
            composition: Mapping or iterable of (symbol, count) pairs; insertion order is kept.
            oxidation_state: Charge selected for a transition element, if any.
        Returns:
            Compound: The finished compound.
        """
        pairs = composition.items() if isinstance(composition, Mapping) else composition
        pairs = tuple((str(symbol), int(count)) for symbol, count in pairs)
        formula = "".join(f"{symbol}{superscript(count)}" for symbol, count in pairs)
        logger.debug("Built formula '%s' for compound '%s'", formula, name)
        return cls(name=name, formula=formula, composition=pairs, oxidation_state=oxidation_state)

    @property
    def atom_count(self) -> int:
        """Total number of atoms in the compound."""
        return sum(count for _, count in self.composition)

    @property
    def symbols(self) -> Tuple[str, ...]:
        return tuple(symbol for symbol, _ in self.composition)

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "formula": self.formula}

    def __str__(self) -> str:
        return f"{self.name} ({self.formula})"
