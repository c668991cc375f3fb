import logging
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from pychemgen.core.compound import Compound
from pychemgen.core.elements import Element, ElementKind, IonicElement, TransitionElement
from pychemgen.core.exceptions import ElementRegistryError

logger = logging.getLogger(__name__)


class ElementRegistry:
    """
    Ordered collection of ionic and transition elements.

    Populated once by the caller and then only read by the generator.
    Symbols are unique across both lists.
    """

    def __init__(self, elements: Optional[Iterable[Element]] = None) -> None:
        self._ionic: List[IonicElement] = []
        self._transition: List[TransitionElement] = []
        self._by_symbol: Dict[str, Element] = {}
        if elements is not None:
            self.extend(elements)

    @classmethod
    def from_elements(cls, ionic: Iterable[IonicElement] = (),
                      transition: Iterable[TransitionElement] = ()) -> "ElementRegistry":
        registry = cls()
        registry.extend(ionic)
        registry.extend(transition)
        return registry

    # --- Population ---
    def register(self, element: Element) -> Element:
        """Append an element to the list matching its kind."""
        if element.symbol in self._by_symbol:
            raise ElementRegistryError(element.symbol)
        if element.kind is ElementKind.IONIC:
            self._ionic.append(element)
        elif element.kind is ElementKind.TRANSITION:
            self._transition.append(element)
        else:
            raise TypeError(f"Unsupported element kind: {element.kind}")
        self._by_symbol[element.symbol] = element
        logger.debug("Registered %s element %s (%s)", element.kind.name.lower(), element.symbol, element.name)
        return element

    def extend(self, elements: Iterable[Element]) -> None:
        count = 0
        for element in elements:
            self.register(element)
            count += 1
        logger.info("Registered %d elements (ionic=%d, transition=%d)",
                    count, len(self._ionic), len(self._transition))

    def add_ionic(self, name: str, symbol: str, charge: int, electronegativity: float,
                  metal: bool = False) -> IonicElement:
        return self.register(IonicElement(name, symbol, charge, electronegativity, metal))

    def add_transition(self, name: str, symbol: str, charges: Sequence[int]) -> TransitionElement:
        return self.register(TransitionElement(name, symbol, tuple(charges)))

    # --- Lookup ---
    @property
    def ionic_elements(self) -> Tuple[IonicElement, ...]:
        return tuple(self._ionic)

    @property
    def transition_elements(self) -> Tuple[TransitionElement, ...]:
        return tuple(self._transition)

    def get(self, symbol: str) -> Element:
        """Return the element registered under ``symbol``; raises KeyError if unknown."""
        try:
            return self._by_symbol[symbol]
        except KeyError:
            logger.error("Unknown element symbol: %s", symbol)
            raise

    def net_charge(self, compound: Compound) -> int:
        """
        Recompute the total charge of a compound from the registered elements.
        Transition elements contribute the oxidation state recorded on the compound.
        """
        total = 0
        for symbol, count in compound.composition:
            element = self.get(symbol)
            if element.kind is ElementKind.IONIC:
                total += element.charge * count
            elif element.kind is ElementKind.TRANSITION:
                if compound.oxidation_state is None:
                    raise ValueError(f"Compound '{compound.name}' has no oxidation state for {symbol}")
                total += compound.oxidation_state * count
            else:
                raise TypeError(f"Unsupported element kind: {element.kind}")
        return total

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._by_symbol

    def __len__(self) -> int:
        return len(self._by_symbol)

    def __iter__(self) -> Iterator[Element]:
        yield from self._ionic
        yield from self._transition

    def __repr__(self) -> str:
        return f"ElementRegistry(ionic={len(self._ionic)}, transition={len(self._transition)})"
