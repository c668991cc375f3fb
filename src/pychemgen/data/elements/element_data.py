from pychemgen.core.element_registry import ElementRegistry
from pychemgen.core.elements import IonicElement, TransitionElement

# Electronegativity on the Pauling scale; noble gases carry 0.0
# Charges are the most common ionic charge of each element

# --- Alkali metals ---
LITHIUM = IonicElement(name="Lithium", symbol="Li", charge=1, electronegativity=0.98, metal=True)
SODIUM = IonicElement(name="Sodium", symbol="Na", charge=1, electronegativity=0.93, metal=True)
POTASSIUM = IonicElement(name="Potassium", symbol="K", charge=1, electronegativity=0.82, metal=True)
RUBIDIUM = IonicElement(name="Rubidium", symbol="Rb", charge=1, electronegativity=0.82, metal=True)
CAESIUM = IonicElement(name="Caesium", symbol="Cs", charge=1, electronegativity=0.79, metal=True)

# --- Alkaline earth metals ---
BERYLLIUM = IonicElement(name="Beryllium", symbol="Be", charge=2, electronegativity=1.57, metal=True)
MAGNESIUM = IonicElement(name="Magnesium", symbol="Mg", charge=2, electronegativity=1.31, metal=True)
CALCIUM = IonicElement(name="Calcium", symbol="Ca", charge=2, electronegativity=1.00, metal=True)
STRONTIUM = IonicElement(name="Strontium", symbol="Sr", charge=2, electronegativity=0.95, metal=True)
BARIUM = IonicElement(name="Barium", symbol="Ba", charge=2, electronegativity=0.89, metal=True)

# --- Other main group elements ---
HYDROGEN = IonicElement(name="Hydrogen", symbol="H", charge=1, electronegativity=2.20)
BORON = IonicElement(name="Boron", symbol="B", charge=3, electronegativity=2.04)
ALUMINIUM = IonicElement(name="Aluminium", symbol="Al", charge=3, electronegativity=1.61, metal=True)
# Carbon carries its carbide charge and pairs with the +4 elements
CARBON = IonicElement(name="Carbon", symbol="C", charge=-4, electronegativity=2.55)
SILICON = IonicElement(name="Silicon", symbol="Si", charge=4, electronegativity=1.90)
NITROGEN = IonicElement(name="Nitrogen", symbol="N", charge=-3, electronegativity=3.04)
# Name uses the "orous" ending so it becomes "phosphide"
PHOSPHORUS = IonicElement(name="Phosphorous", symbol="P", charge=-3, electronegativity=2.19)
OXYGEN = IonicElement(name="Oxygen", symbol="O", charge=-2, electronegativity=3.44)
SULFUR = IonicElement(name="Sulfur", symbol="S", charge=-2, electronegativity=2.58)
SELENIUM = IonicElement(name="Selenium", symbol="Se", charge=-2, electronegativity=2.55)

# --- Halogens ---
FLUORINE = IonicElement(name="Fluorine", symbol="F", charge=-1, electronegativity=3.98)
CHLORINE = IonicElement(name="Chlorine", symbol="Cl", charge=-1, electronegativity=3.16)
BROMINE = IonicElement(name="Bromine", symbol="Br", charge=-1, electronegativity=2.96)
IODINE = IonicElement(name="Iodine", symbol="I", charge=-1, electronegativity=2.66)

# --- Noble gases ---
HELIUM = IonicElement(name="Helium", symbol="He", charge=0, electronegativity=0.0)
NEON = IonicElement(name="Neon", symbol="Ne", charge=0, electronegativity=0.0)
ARGON = IonicElement(name="Argon", symbol="Ar", charge=0, electronegativity=0.0)

# --- Transition metals ---
TITANIUM = TransitionElement(name="Titanium", symbol="Ti", charges=(2, 3, 4))
VANADIUM = TransitionElement(name="Vanadium", symbol="V", charges=(2, 3, 4, 5))
CHROMIUM = TransitionElement(name="Chromium", symbol="Cr", charges=(2, 3, 6))
MANGANESE = TransitionElement(name="Manganese", symbol="Mn", charges=(2, 3, 4, 6, 7))
IRON = TransitionElement(name="Iron", symbol="Fe", charges=(2, 3))
COBALT = TransitionElement(name="Cobalt", symbol="Co", charges=(2, 3))
NICKEL = TransitionElement(name="Nickel", symbol="Ni", charges=(2, 3))
COPPER = TransitionElement(name="Copper", symbol="Cu", charges=(1, 2))
TIN = TransitionElement(name="Tin", symbol="Sn", charges=(2, 4))
PLATINUM = TransitionElement(name="Platinum", symbol="Pt", charges=(2, 4))
GOLD = TransitionElement(name="Gold", symbol="Au", charges=(1, 3))
MERCURY = TransitionElement(name="Mercury", symbol="Hg", charges=(1, 2))
LEAD = TransitionElement(name="Lead", symbol="Pb", charges=(2, 4))
OSMIUM = TransitionElement(name="Osmium", symbol="Os", charges=(2, 3, 4, 6, 8))

IONIC_ELEMENTS = (
    HYDROGEN, LITHIUM, SODIUM, POTASSIUM, RUBIDIUM, CAESIUM,
    BERYLLIUM, MAGNESIUM, CALCIUM, STRONTIUM, BARIUM,
    BORON, ALUMINIUM, CARBON, SILICON, NITROGEN, PHOSPHORUS,
    OXYGEN, SULFUR, SELENIUM, FLUORINE, CHLORINE, BROMINE, IODINE,
    HELIUM, NEON, ARGON,
)

TRANSITION_ELEMENTS = (
    TITANIUM, VANADIUM, CHROMIUM, MANGANESE, IRON, COBALT, NICKEL,
    COPPER, TIN, PLATINUM, GOLD, MERCURY, LEAD, OSMIUM,
)

element_map = {element.symbol: element for element in IONIC_ELEMENTS + TRANSITION_ELEMENTS}


def default_registry() -> ElementRegistry:
    """Return a new registry populated with the built-in element table."""
    return ElementRegistry.from_elements(IONIC_ELEMENTS, TRANSITION_ELEMENTS)
