#!/usr/bin/env python3
"""
Validation tests for the DETAIL equation of state module.
Reference values from the AGA8 Part 1 published example at 400 K and 50 MPa.
Run with: python3 -m pytest pygaseos/tests/ -v
Or standalone: python3 pygaseos/tests/test_detail.py
"""

import sys
import os
import math
import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
from pygaseos.detail import Detail
from pygaseos.composition import Composition
from pygaseos.constants import RDETAIL, JT_IDEAL
from pygaseos.classes import (PressureTooLowError, IterationFailError, DensityError,
                              EmptyCompositionError, density_error)

RTOL = 1e-9
DTOL = 1e-10

FULL = [0.77824, 0.02, 0.06, 0.08, 0.03, 0.0015, 0.003, 0.0005, 0.00165, 0.00215, 0.00088,
        0.00024, 0.00015, 0.00009, 0.004, 0.005, 0.002, 0.0001, 0.0025, 0.007, 0.001]

LEAN = dict(methane=0.965, nitrogen=0.003, carbon_dioxide=0.006, ethane=0.018, propane=0.0045,
            isobutane=0.001, n_butane=0.001, isopentane=0.0005, n_pentane=0.0003, hexane=0.0007)

REFERENCE = {
    'mm': 20.54333051,
    'z': 1.173801364147326,
    'dp_dd': 6971.387690924090,
    'd2p_dd2': 1118.803636639520,
    'dp_dt': 235.6641493068212,
    'u': -2739.134175817231,
    'h': 1164.699096269404,
    's': -38.54882684677111,
    'cv': 39.12076154430332,
    'cp': 58.54617672380667,
    'w': 712.6393684057903,
    'g': 16584.22983497785,
    'jt': 7.432969304794577e-5,
    'kappa': 2.672509225184606,
}
D_REF = 12.80792403648801


def rel_err(calc, ref):
    return abs(calc - ref) / abs(ref)


def reference_state():
    aga = Detail(comp=FULL, t=400.0, p=50000.0)
    aga.density()
    aga.properties()
    return aga

# =============================================================================
# Published reference state
# =============================================================================

def test_reference_density():
    """Density at 400 K, 50 MPa matches published value"""
    aga = Detail(comp=FULL, t=400.0, p=50000.0)
    d = aga.density()
    assert abs(d - D_REF) < DTOL, f"D={d}, expected {D_REF}"
    assert d == aga.d

def test_reference_properties():
    """All properties at 400 K, 50 MPa match published values"""
    aga = reference_state()
    assert abs(aga.z - REFERENCE['z']) < DTOL, f"Z={aga.z}"
    for name, ref in REFERENCE.items():
        val = getattr(aga, name)
        assert rel_err(val, ref) < RTOL, f"{name}={val}, expected {ref}"

def test_properties_pressure_consistent():
    """Pressure set by properties matches the solved pressure"""
    aga = reference_state()
    assert rel_err(aga.p, 50000.0) < 1e-8, f"P={aga.p}"

def test_d2p_dtd_not_calculated():
    """DETAIL leaves d2P/dTdD at zero"""
    aga = reference_state()
    assert aga.d2p_dtd == 0.0

def test_molar_mass():
    """Molar mass of the full composition"""
    aga = Detail(comp=FULL)
    assert rel_err(aga.molar_mass(), REFERENCE['mm']) < RTOL

def test_lean_gas_density():
    """Density of a lean natural gas at metering conditions"""
    aga = Detail(comp=Composition(**LEAN), t=291.15, p=14601.325)
    d = aga.density()
    assert abs(d - 7.7314) < 1e-3, f"D={d}"

# =============================================================================
# Pressure and density consistency
# =============================================================================

def test_pressure_round_trip():
    """pressure() at the solved density recovers the input pressure"""
    for t, p in [(250.0, 1000.0), (300.0, 10000.0), (400.0, 50000.0)]:
        aga = Detail(comp=FULL, t=t, p=p)
        aga.density()
        p2 = aga.pressure()
        assert rel_err(p2, p) < 1e-7, f"T={t}, P={p}, recovered {p2}"

def test_negative_density_seed():
    """A negative density is used as the initial guess"""
    aga = Detail(comp=FULL, t=400.0, p=50000.0, d=-12.0)
    d = aga.density()
    assert abs(d - D_REF) < 1e-8, f"D={d}"

def test_properties_idempotent():
    """Repeated properties() calls give identical results"""
    aga = reference_state()
    first = aga.property_bundle()
    aga.properties()
    second = aga.property_bundle()
    assert first == second

def test_cached_mixture_terms():
    """Composition changes below 1e-7 reuse cached mixture terms"""
    aga = Detail(comp=FULL, t=400.0, d=D_REF)
    p1 = aga.pressure()
    aga.x = aga.x.copy()
    aga.x[0] += 1e-9
    p2 = aga.pressure()
    assert p1 == p2, f"P changed from {p1} to {p2}"

def test_composition_change_recalculates():
    """Larger composition changes are picked up"""
    aga = Detail(comp=FULL, t=400.0, d=D_REF)
    p1 = aga.pressure()
    aga.set_composition(Composition(**LEAN))
    p2 = aga.pressure()
    assert abs(p1 - p2) > 1.0

# =============================================================================
# Zero density limits
# =============================================================================

def test_zero_density_limits():
    """At zero density properties reduce to their ideal gas limits"""
    aga = Detail(comp=FULL, t=300.0, d=0.0)
    aga.properties()
    rt = RDETAIL * 300.0
    assert aga.z == 1.0
    assert aga.p == 0.0
    assert abs(aga.h - (aga.u + rt)) < 1e-9
    assert abs(aga.g - (aga.a + rt)) < 1e-9
    assert abs(aga.cp - (aga.cv + RDETAIL)) < 1e-12
    assert aga.d2p_dd2 == 0.0
    assert aga.jt == JT_IDEAL
    for name in ['u', 'h', 's', 'cv', 'cp', 'w', 'g', 'kappa']:
        assert math.isfinite(getattr(aga, name)), f"{name} is not finite"

# =============================================================================
# Failure modes
# =============================================================================

def test_zero_pressure():
    """Zero pressure raises PressureTooLowError with density zero"""
    aga = Detail(comp=FULL, t=300.0, p=0.0)
    try:
        aga.density()
        assert False, "Should have raised PressureTooLowError"
    except PressureTooLowError as e:
        assert e.kind == density_error.PRESSURE_TOO_LOW
        assert e.d == 0.0
        assert aga.d == 0.0

def test_negative_pressure():
    """Negative pressure fails and reports the ideal gas density"""
    aga = Detail(comp=FULL, t=300.0, p=-100.0)
    try:
        aga.density()
        assert False, "Should have raised IterationFailError"
    except IterationFailError as e:
        assert isinstance(e, DensityError)
        assert e.kind == density_error.ITERATION_FAIL
        expected = -100.0 / RDETAIL / 300.0
        assert abs(e.d - expected) < 1e-12
        assert aga.d == e.d

def test_iteration_budget_exhausted():
    """Pure water at 300 K, 1 MPa does not converge and falls back to the ideal gas density"""
    aga = Detail(comp=Composition(water=1.0), t=300.0, p=1000.0)
    try:
        aga.density()
        assert False, "Should have raised IterationFailError"
    except IterationFailError as e:
        assert e.kind == density_error.ITERATION_FAIL
        assert abs(e.d - 1000.0 / RDETAIL / 300.0) < 1e-12
        assert aga.d == e.d

def test_empty_composition():
    """An all zero composition is rejected"""
    try:
        Detail(comp=np.zeros(21))
        assert False, "Should have raised EmptyCompositionError"
    except EmptyCompositionError:
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
