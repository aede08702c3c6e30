#!/usr/bin/env python3
"""
Validation tests for the gas module and property bundles.
Run with: python3 -m pytest pygaseos/tests/ -v
Or standalone: python3 pygaseos/tests/test_gas.py
"""

import sys
import os
import math
import pandas as pd

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
import pygaseos.gas as gas
from pygaseos.detail import Detail
from pygaseos.gerg import Gerg2008
from pygaseos.composition import Composition
from pygaseos.classes import eos_method, IterationFailError
from pygaseos.shared_fns import PropertyBundle, PROPERTY_UNITS, newton_log_volume_step, planck_einstein

RTOL = 1e-9

FULL = [0.77824, 0.02, 0.06, 0.08, 0.03, 0.0015, 0.003, 0.0005, 0.00165, 0.00215, 0.00088,
        0.00024, 0.00015, 0.00009, 0.004, 0.005, 0.002, 0.0001, 0.0025, 0.007, 0.001]


def rel_err(calc, ref):
    return abs(calc - ref) / abs(ref)

# =============================================================================
# Calculator selection
# =============================================================================

def test_calculator_selection():
    """eos names and members select the matching calculator"""
    assert isinstance(gas.calculator('DETAIL'), Detail)
    assert isinstance(gas.calculator('gerg'), Gerg2008)
    assert isinstance(gas.calculator(eos_method.DETAIL), Detail)
    assert isinstance(gas.calculator(), Gerg2008)

def test_invalid_eos():
    """Unknown eos names are rejected"""
    try:
        gas.gas_den(300.0, 1000.0, FULL, eos='SRK')
        assert False, "Should have raised ValueError"
    except ValueError:
        pass

# =============================================================================
# One-off state point functions
# =============================================================================

def test_gas_den():
    """Density for each equation of state"""
    d_gerg = gas.gas_den(400.0, 50000.0, FULL)
    d_detail = gas.gas_den(400.0, 50000.0, FULL, eos='DETAIL')
    assert abs(d_gerg - 12.79828626082062) < 1e-10, f"GERG D={d_gerg}"
    assert abs(d_detail - 12.80792403648801) < 1e-10, f"DETAIL D={d_detail}"

def test_gas_z():
    """Compressibility factor for each equation of state"""
    z_gerg = gas.gas_z(400.0, 50000.0, FULL)
    z_detail = gas.gas_z(400.0, 50000.0, FULL, eos='DETAIL')
    assert abs(z_gerg - 1.174690666383717) < 1e-9, f"GERG Z={z_gerg}"
    assert abs(z_detail - 1.173801364147326) < 1e-9, f"DETAIL Z={z_detail}"

def test_gas_p():
    """Pressure from temperature and density"""
    p = gas.gas_p(291.15, 7.558334, FULL)
    assert rel_err(p, 13050.037472144) < 1e-9, f"P={p}"
    p_detail = gas.gas_p(400.0, 12.80792403648801, FULL, eos='DETAIL')
    assert rel_err(p_detail, 50000.0) < 1e-8, f"P={p_detail}"

def test_gas_mw():
    """Molar mass differs slightly between the two equations of state"""
    mw_gerg = gas.gas_mw(FULL)
    mw_detail = gas.gas_mw(FULL, eos='DETAIL')
    assert rel_err(mw_gerg, 20.5427445016) < RTOL
    assert rel_err(mw_detail, 20.54333051) < RTOL

def test_gas_props():
    """Property bundle for a reference state"""
    props = gas.gas_props(400.0, 50000.0, FULL)
    assert isinstance(props, PropertyBundle)
    assert abs(props.d - 12.79828626082062) < 1e-10
    assert rel_err(props.w, 714.4248840596024) < RTOL
    props = gas.gas_props(400.0, 50000.0, FULL, eos='DETAIL')
    assert rel_err(props.w, 712.6393684057903) < RTOL

def test_gas_den_failure():
    """Solver failures propagate to the caller"""
    try:
        gas.gas_den(300.0, -5.0, FULL)
        assert False, "Should have raised IterationFailError"
    except IterationFailError:
        pass

def test_composition_forms():
    """Compositions may be records, dictionaries or arrays"""
    comp = Composition.from_array(FULL)
    d1 = gas.gas_den(300.0, 5000.0, comp)
    d2 = gas.gas_den(300.0, 5000.0, comp.to_dict())
    d3 = gas.gas_den(300.0, 5000.0, FULL)
    assert d1 == d2 == d3

# =============================================================================
# Property bundles
# =============================================================================

def test_bundle_outputs():
    """Bundle converts to dictionary, pandas series and text report"""
    props = gas.gas_props(400.0, 50000.0, FULL)
    d = props.to_dict()
    assert list(d) == list(PROPERTY_UNITS)
    series = props.to_series()
    assert isinstance(series, pd.Series)
    assert series['z'] == props.z
    report = props.report()
    assert 'Property' in report and 'Units' in report
    assert 'kPa/(mol/l)' in report

# =============================================================================
# Shared numerics
# =============================================================================

def test_newton_step_converged():
    """No step is taken when the pressure already matches"""
    assert newton_log_volume_step(5000.0, math.log(5000.0), 2.0, 2500.0) == 0.0

def test_newton_step_direction():
    """Pressure too high gives a negative correction, so log(v) increases"""
    vdiff = newton_log_volume_step(6000.0, math.log(5000.0), 2.0, 2500.0)
    assert vdiff < 0

def test_planck_einstein_skips_zero():
    """Oscillators with zero characteristic temperature contribute nothing"""
    assert planck_einstein([1.0, 1.0, 1.0, 1.0], [0.0, 0.0, 0.0, 0.0], 300.0) == (0.0, 0.0, 0.0)
    s0, s1, s2 = planck_einstein([1.0, 0.0, 0.0, 0.0], [600.0, 0.0, 0.0, 0.0], 300.0)
    assert abs(s0 - math.log(math.sinh(2.0))) < 1e-12
    assert abs(s1 - 2.0 / math.tanh(2.0)) < 1e-12
    assert abs(s2 - (2.0 / math.sinh(2.0)) ** 2) < 1e-12


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
