import logging
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from pychemgen.core.compound import Compound
from pychemgen.core.element_registry import ElementRegistry
from pychemgen.core.elements import Element, ElementKind, IonicElement
from pychemgen.data.constants import GenerationConstants

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratorConfig:
    """Tunable settings of a compound generator."""
    transition_threshold: int = GenerationConstants.TRANSITION_THRESHOLD
    roll_max: int = GenerationConstants.ROLL_MAX
    paired_atoms_min: int = GenerationConstants.MIN_PAIRED_ATOMS
    paired_atoms_max: int = GenerationConstants.MAX_PAIRED_ATOMS
    max_attempts: int = GenerationConstants.DEFAULT_MAX_ATTEMPTS

    def __post_init__(self) -> None:
        for field_name in ("transition_threshold", "roll_max", "paired_atoms_min",
                           "paired_atoms_max", "max_attempts"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"'{field_name}' must be an integer, got {value!r}")
        if self.roll_max < GenerationConstants.ROLL_MIN:
            raise ValueError(f"roll_max must be at least {GenerationConstants.ROLL_MIN}, got {self.roll_max}")
        # ROLL_MIN - 1 always selects a transition element, roll_max never does
        if not GenerationConstants.ROLL_MIN - 1 <= self.transition_threshold <= self.roll_max:
            raise ValueError(f"transition_threshold must lie within [{GenerationConstants.ROLL_MIN - 1}, "
                             f"{self.roll_max}], got {self.transition_threshold}")
        if self.paired_atoms_min < 1:
            raise ValueError(f"paired_atoms_min must be at least 1, got {self.paired_atoms_min}")
        if self.paired_atoms_max < self.paired_atoms_min:
            raise ValueError(f"paired_atoms_max ({self.paired_atoms_max}) must not be less than "
                             f"paired_atoms_min ({self.paired_atoms_min})")
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create a seeded generator; negative seeds are folded into the unsigned 64-bit range."""
    if seed is not None and seed < 0:
        seed = seed % GenerationConstants.SEED_MODULUS
    return np.random.default_rng(seed)


class CompoundGenerator:
    """Picks a primary element, finds a charge-cancelling partner and bonds them."""

    def __init__(self, registry: ElementRegistry, config: Optional[GeneratorConfig] = None) -> None:
        self.registry = registry
        self.config = config if config is not None else GeneratorConfig()
        logger.debug("CompoundGenerator initialized with %r and %s", registry, self.config)

    # --- Public API ---
    def generate(self, seed: Optional[int] = None, rng: Optional[np.random.Generator] = None) -> Optional[Compound]:
        """
        Generate one compound.

        The same seed and registry always produce the same compound. Pass
        ``rng`` instead to draw a sequence of compounds from one generator.
        Args:
            seed: Seed for a fresh random generator.
            rng: Existing generator to draw from; takes precedence over ``seed``.
        Returns:
            Optional[Compound]: The compound, or None if this round produced nothing.
        """
        if rng is None:
            rng = make_rng(seed)
        primary = self._pick_primary(rng)
        if primary is None:
            return None
        if primary.kind is ElementKind.IONIC and primary.charge == 0:
            logger.info("Neutral element %s forms a compound on its own", primary.symbol)
            return Compound.from_composition(primary.name, ((primary.symbol, 1),))

        candidates = self.find_pairing_candidates(primary)
        if not candidates:
            logger.warning("No pairing candidates for %s with charges %s",
                           primary.symbol, list(primary.possible_charges))
            return None
        paired = candidates[0]
        if len(candidates) > 1:
            paired = candidates[int(rng.integers(0, len(candidates)))]
        paired_count = int(rng.integers(self.config.paired_atoms_min, self.config.paired_atoms_max + 1))
        logger.debug("Pairing %s with %d x %s", primary.symbol, paired_count, paired.symbol)

        if primary.kind is ElementKind.TRANSITION:
            return primary.bond(paired, paired_count)
        elif primary.kind is ElementKind.IONIC:
            return primary.covalent_bond(paired, paired_count)
        raise TypeError(f"Unsupported element kind: {primary.kind}")

    def find_pairing_candidates(self, primary: Element) -> List[IonicElement]:
        """Return the ionic elements, other than ``primary``, whose charge negates one of its charges."""
        charges = set(primary.possible_charges)
        candidates = [element for element in self.registry.ionic_elements
                      if element is not primary and -element.charge in charges]
        logger.debug("Found %d pairing candidates for %s", len(candidates), primary.symbol)
        return candidates

    # --- Internal ---
    def _pick_primary(self, rng: np.random.Generator) -> Optional[Element]:
        roll = int(rng.integers(GenerationConstants.ROLL_MIN, self.config.roll_max + 1))
        if roll > self.config.transition_threshold:
            pool = self.registry.transition_elements
            label = "transition"
        else:
            pool = self.registry.ionic_elements
            label = "ionic"
        if not pool:
            logger.warning("Roll %d selected the %s registry, which is empty", roll, label)
            return None
        primary = pool[int(rng.integers(0, len(pool)))]
        logger.debug("Roll %d selected %s element %s", roll, label, primary.symbol)
        return primary


def generate_random_compound(seed: int, registry: Optional[ElementRegistry] = None,
                             config: Optional[GeneratorConfig] = None) -> Optional[Compound]:
    """
    Generate a compound deterministically from ``seed``.
    Args:
        seed: Integer seed.
        registry: Elements to draw from; the built-in table when omitted.
        config: Generator settings; defaults when omitted.
    Returns:
        Optional[Compound]: The compound, or None if no compound could be formed.
    """
    if registry is None:
        from pychemgen.data.elements.element_data import default_registry
        registry = default_registry()
    return CompoundGenerator(registry, config).generate(seed)
