#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pyGasEOS - AGA8 DETAIL and GERG-2008 natural gas equations of state
              Copyright (C) 2022, Mark Burgoyne

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.

          Contact author at mark.w.burgoyne@gmail.com
"""

from pygaseos.classes import eos_method
from pygaseos.validate import validate_methods
from pygaseos.detail import Detail
from pygaseos.gerg import Gerg2008
from pygaseos.shared_fns import PropertyBundle


def calculator(eos='GERG', comp=None):
    """ Returns a new calculator for the chosen equation of state
        eos: 'DETAIL' or 'GERG' (or an eos_method member). Defaults to 'GERG'
        comp: Optional Composition, dictionary of mole fractions or 21 element array
    """
    eos = validate_methods(['eos'], [eos])
    if eos == eos_method.DETAIL:
        return Detail(comp=comp)
    return Gerg2008(comp=comp)


def _solve(t, p, comp, eos, flag):
    calc = calculator(eos, comp)
    calc.t, calc.p = t, p
    if isinstance(calc, Gerg2008):
        calc.density(flag)
    else:
        calc.density()
    return calc


def gas_den(t: float, p: float, comp, eos: str = 'GERG', flag: int = 0) -> float:
    """ Returns molar density (mol/l)
        t: Temperature (K)
        p: Pressure (kPa)
        comp: Composition, dictionary of mole fractions or 21 element array
        eos: 'DETAIL' or 'GERG'. Defaults to 'GERG'
        flag: GERG-2008 density flag (0 = NONE, 1 = CHECK, 2 = LIQUID). Ignored by DETAIL
    """
    return _solve(t, p, comp, eos, flag).d


def gas_z(t: float, p: float, comp, eos: str = 'GERG', flag: int = 0) -> float:
    """ Returns compressibility factor. Arguments as for gas_den """
    calc = _solve(t, p, comp, eos, flag)
    calc.pressure()
    return calc.z


def gas_p(t: float, d: float, comp, eos: str = 'GERG') -> float:
    """ Returns pressure (kPa) at temperature t (K) and molar density d (mol/l) """
    calc = calculator(eos, comp)
    calc.t, calc.d = t, d
    return calc.pressure()


def gas_mw(comp, eos: str = 'GERG') -> float:
    """ Returns molar mass (g/mol) of the composition """
    return calculator(eos, comp).molar_mass()


def gas_props(t: float, p: float, comp, eos: str = 'GERG', flag: int = 0) -> PropertyBundle:
    """ Returns a PropertyBundle with all properties at t (K) and p (kPa). Arguments as for gas_den """
    calc = _solve(t, p, comp, eos, flag)
    calc.properties()
    return calc.property_bundle()
