"""Test imports work correctly."""

import pytest

def test_all_imports():
    """Test that all modules can be imported without circular dependencies."""
    try:
        import pychemgen
        import pychemgen.core
        import pychemgen.algorithms
        import pychemgen.parsing
        import pychemgen.data
        from pychemgen.core.generator import CompoundGenerator
        from pychemgen.core.elements import IonicElement, TransitionElement
        from pychemgen.algorithms.naming import element_name_to_ion
        from pychemgen.data.elements import element_map
        from pychemgen.parsing.config import GeneratorYAMLParser
    except ImportError as e:
        pytest.fail(f"Import failed: {e}")

def test_public_api():
    import pychemgen
    for name in pychemgen.__all__:
        assert hasattr(pychemgen, name), f"pychemgen.{name} missing"
    assert isinstance(pychemgen.__version__, str)
