#!/usr/bin/env python3
"""
Validation tests for composition, classes and validate modules.
Run with: python3 -m pytest pygaseos/tests/ -v
Or standalone: python3 pygaseos/tests/test_composition.py
"""

import sys
import os
import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
from pygaseos.composition import Composition, as_composition
from pygaseos.classes import (CompositionError, EmptyCompositionError, BadSumCompositionError,
                              composition_error, eos_method, density_flag)
from pygaseos.validate import validate_methods
from pygaseos.constants import COMPONENTS, NC

AIR = dict(nitrogen=0.78, oxygen=0.21, argon=0.009, carbon_dioxide=0.0004, water=0.0006)

# =============================================================================
# Composition record
# =============================================================================

def test_air_sums_to_one():
    """Air composition sums to unity and passes check"""
    air = Composition(**AIR)
    assert abs(air.sum() - 1.0) < 1e-10, f"Sum={air.sum()}"
    assert air.check() is None

def test_normalize():
    """Normalize scales percentages to fractions"""
    comp = Composition(methane=50.0, ethane=50.0)
    comp.normalize()
    assert abs(comp.methane - 0.5) < 1e-10
    assert abs(comp.ethane - 0.5) < 1e-10
    assert abs(comp.sum() - 1.0) < 1e-12

def test_normalize_empty():
    """Normalizing an empty composition is rejected"""
    try:
        Composition().normalize()
        assert False, "Should have raised EmptyCompositionError"
    except EmptyCompositionError:
        pass

def test_empty_composition():
    """All zero composition is Empty"""
    try:
        Composition().check()
        assert False, "Should have raised EmptyCompositionError"
    except EmptyCompositionError as e:
        assert e.kind == composition_error.EMPTY
        assert isinstance(e, CompositionError)
        assert isinstance(e, ValueError)

def test_bad_sum_composition():
    """Composition summing to 2.0 is BadSum"""
    try:
        Composition(methane=1.0, ethane=1.0).check()
        assert False, "Should have raised BadSumCompositionError"
    except BadSumCompositionError as e:
        assert e.kind == composition_error.BADSUM
        assert abs(e.total - 2.0) < 1e-12

def test_sum_tolerance():
    """Deviation of 1e-6 from unity is accepted, 1e-4 is not"""
    Composition(methane=1.0 + 1e-6).check()
    try:
        Composition(methane=1.0 + 1e-4).check()
        assert False, "Should have raised BadSumCompositionError"
    except BadSumCompositionError:
        pass

def test_array_order():
    """Array conversion follows canonical component order"""
    comp = Composition(methane=0.9, argon=0.1)
    x = comp.to_array()
    assert x.shape == (NC,)
    assert x[0] == 0.9 and x[20] == 0.1
    assert Composition.from_array(x) == comp

def test_from_array_length():
    """Arrays of the wrong length are rejected"""
    try:
        Composition.from_array(np.ones(20) / 20)
        assert False, "Should have raised ValueError"
    except ValueError:
        pass

def test_from_dict_unknown_key():
    """Unknown component names are rejected"""
    try:
        Composition.from_dict({'methane': 0.9, 'unobtainium': 0.1})
        assert False, "Should have raised ValueError"
    except ValueError:
        pass

def test_dict_round_trip():
    """to_dict keys match component order"""
    comp = Composition(**AIR)
    d = comp.to_dict()
    assert list(d) == list(COMPONENTS)
    assert Composition.from_dict(d) == comp

def test_as_composition():
    """as_composition accepts records, dictionaries and sequences"""
    comp = Composition(**AIR)
    assert as_composition(comp) is comp
    assert as_composition(AIR) == comp
    assert as_composition(comp.to_array()) == comp

# =============================================================================
# Method validation
# =============================================================================

def test_validate_strings():
    """Strings map case-insensitively to enum members"""
    assert validate_methods(['eos'], ['gerg']) == eos_method.GERG
    eos, flag = validate_methods(['eos', 'flag'], ['DETAIL', 'check'])
    assert eos == eos_method.DETAIL
    assert flag == density_flag.CHECK

def test_validate_ints_and_members():
    """Integer codes and enum members are accepted for flags"""
    assert validate_methods(['flag'], [2]) == density_flag.LIQUID
    assert validate_methods(['flag'], [density_flag.NONE]) == density_flag.NONE

def test_validate_invalid():
    """Unknown names and codes raise ValueError"""
    for bad in ['PENG_ROBINSON', 7, 1.5]:
        try:
            validate_methods(['eos'], [bad])
            assert False, f"Should have raised ValueError for {bad}"
        except ValueError:
            pass


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
