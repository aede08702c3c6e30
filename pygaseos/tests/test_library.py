#!/usr/bin/env python3
"""
Validation tests for the component library module.
Run with: python3 -m pytest pygaseos/tests/ -v
Or standalone: python3 pygaseos/tests/test_library.py
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
from pygaseos.library import component_library
from pygaseos.constants import COMPONENTS

lib = component_library()

# =============================================================================
# Component lookups
# =============================================================================

def test_all_components_present():
    """Library holds every component in canonical order"""
    assert lib.components == list(COMPONENTS)
    assert len(lib.df) == 21

def test_methane_properties():
    """Methane critical point and molar masses"""
    assert abs(lib.prop('methane', 'Tc_K') - 190.564) < 1e-9
    assert abs(lib.prop('METHANE', 'mw_gerg') - 16.04246) < 1e-9
    assert abs(lib.prop('methane', 'MW_DETAIL') - 16.043) < 1e-9
    assert lib.prop('methane', 'Name') == 'Methane'

def test_all_properties():
    """ALL returns every property in order"""
    vals = lib.prop('argon', 'ALL')
    assert len(vals) == len(lib.property_list)
    assert vals[0] == 'Argon'

def test_unknown_component():
    """Unknown components are rejected"""
    try:
        lib.prop('xenon', 'Tc_K')
        assert False, "Should have raised ValueError"
    except ValueError:
        pass

def test_unknown_property():
    """Unknown properties are rejected"""
    try:
        lib.prop('methane', 'Omega')
        assert False, "Should have raised ValueError"
    except ValueError:
        pass

def test_table():
    """Tabulated library lists each component"""
    text = lib.table()
    for comp in COMPONENTS:
        assert comp in text


if __name__ == '__main__':
    tests = [v for k, v in list(globals().items()) if k.startswith('test_')]
    failed = 0
    for test in tests:
        try:
            test()
            print(f"  PASS: {test.__name__}")
        except Exception as e:
            failed += 1
            print(f"  FAIL: {test.__name__}: {e}")
    sys.exit(1 if failed > 0 else 0)
