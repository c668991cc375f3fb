"""Shared pytest fixtures for pychemgen tests."""
import pytest

from pychemgen.core.element_registry import ElementRegistry
from pychemgen.core.elements import IonicElement, TransitionElement
from pychemgen.core.generator import CompoundGenerator, GeneratorConfig
from pychemgen.data.elements.element_data import default_registry, element_map

@pytest.fixture
def sodium():
    return element_map['Na']

@pytest.fixture
def chlorine():
    return element_map['Cl']

@pytest.fixture
def oxygen():
    return element_map['O']

@pytest.fixture
def iron_two_three():
    """Iron with charges given out of order to check sorting."""
    return TransitionElement(name="Iron", symbol="Fe", charges=(3, 2))

@pytest.fixture
def sample_registry():
    """Small registry with alkali metals, halogens, oxygen and iron."""
    return ElementRegistry.from_elements(
        ionic=[
            IonicElement("Sodium", "Na", 1, 0.93, metal=True),
            IonicElement("Chlorine", "Cl", -1, 3.16),
            IonicElement("Potassium", "K", 1, 0.82, metal=True),
            IonicElement("Oxygen", "O", -2, 3.44),
        ],
        transition=[TransitionElement("Iron", "Fe", (2, 3))]
    )

@pytest.fixture
def full_registry():
    """Registry populated with the built-in element table."""
    return default_registry()

@pytest.fixture
def ionic_only_config():
    """Config whose roll never selects a transition element."""
    return GeneratorConfig(transition_threshold=100, roll_max=100)

@pytest.fixture
def transition_only_config():
    """Config whose roll always selects a transition element."""
    return GeneratorConfig(transition_threshold=-1, roll_max=100)

@pytest.fixture
def default_generator(full_registry):
    return CompoundGenerator(full_registry)
