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

from dataclasses import dataclass, fields, asdict
import math

import pandas as pd
from tabulate import tabulate

# Units for each field reported by PropertyBundle
PROPERTY_UNITS = {
    'd': 'mol/l',
    'mm': 'g/mol',
    'z': '-',
    'dp_dd': 'kPa/(mol/l)',
    'd2p_dd2': 'kPa/(mol/l)^2',
    'dp_dt': 'kPa/K',
    'u': 'J/mol',
    'h': 'J/mol',
    's': 'J/(mol-K)',
    'cv': 'J/(mol-K)',
    'cp': 'J/(mol-K)',
    'w': 'm/s',
    'g': 'J/mol',
    'jt': 'K/kPa',
    'kappa': '-',
}


@dataclass
class PropertyBundle:
    """ Flat record of the properties derived from an equation of state at one state point """
    d: float = 0.0  # Molar density (mol/l)
    mm: float = 0.0  # Molar mass (g/mol)
    z: float = 0.0  # Compressibility factor
    dp_dd: float = 0.0  # First derivative of pressure with respect to density at constant temperature
    d2p_dd2: float = 0.0  # Second derivative of pressure with respect to density at constant temperature
    dp_dt: float = 0.0  # First derivative of pressure with respect to temperature at constant density
    u: float = 0.0  # Internal energy (J/mol)
    h: float = 0.0  # Enthalpy (J/mol)
    s: float = 0.0  # Entropy (J/(mol-K))
    cv: float = 0.0  # Isochoric heat capacity (J/(mol-K))
    cp: float = 0.0  # Isobaric heat capacity (J/(mol-K))
    w: float = 0.0  # Speed of sound (m/s)
    g: float = 0.0  # Gibbs energy (J/mol)
    jt: float = 0.0  # Joule-Thomson coefficient (K/kPa)
    kappa: float = 0.0  # Isentropic exponent

    @classmethod
    def from_calculator(cls, calc):
        return cls(**{f.name: float(getattr(calc, f.name)) for f in fields(cls)})

    def to_dict(self) -> dict:
        return asdict(self)

    def to_series(self) -> pd.Series:
        return pd.Series(self.to_dict(), name='value')

    def report(self, floatfmt='.6g') -> str:
        table = [[name, PROPERTY_UNITS[name], val] for name, val in self.to_dict().items()]
        return tabulate(table, headers=['Property', 'Units', 'Value'], floatfmt=floatfmt)


def newton_log_volume_step(p_eval, plog, d, dp_dd):
    """ Newton increment in log(v) that drives log(P) towards plog.
        p_eval: Pressure evaluated at density d (kPa)
        plog: log of the target pressure
        d: Density (mol/l)
        dp_dd: dP/dD at d
    """
    dpdlv = -d * dp_dd  # d(p)/d[log(v)]
    return (math.log(p_eval) - plog) * p_eval / dpdlv


def planck_einstein(n0, th0, t):
    """ Sums of the Planck-Einstein oscillator terms for one component.
        n0: Four oscillator amplitudes
        th0: Four characteristic temperatures (K). Oscillators 1 and 3 are sinh terms, 2 and 4 cosh.
             A zero temperature skips the oscillator
        t: Temperature (K)
        Returns (s0, s1, s2): sum of amplitude * log(hyperbolic), sum of the tau-derivative terms,
        and sum of the second derivative terms
    """
    s0 = s1 = s2 = 0.0
    for j in range(4):
        if th0[j] > 0:
            n = n0[j]
            th0t = th0[j] / t
            ep = math.exp(th0t)
            em = 1 / ep
            hsn = (ep - em) / 2
            hcn = (ep + em) / 2
            if j % 2 == 0:  # sinh
                loghyp = math.log(abs(hsn))
                s0 += n * loghyp
                s1 += n * th0t * hcn / hsn
                s2 += n * (th0t / hsn) ** 2
            else:  # cosh
                loghyp = math.log(abs(hcn))
                s0 -= n * loghyp
                s1 -= n * th0t * hsn / hcn
                s2 += n * (th0t / hcn) ** 2
    return s0, s1, s2
