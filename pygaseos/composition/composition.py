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

from dataclasses import dataclass, fields, astuple

import numpy as np

from pygaseos.constants import COMPONENTS, NC, EMPTY_TOL, SUM_TOL
from pygaseos.classes import EmptyCompositionError, BadSumCompositionError


@dataclass
class Composition:
    """ Gas composition as mole fractions of the 21 components common to
        the DETAIL and GERG-2008 equations of state. Unspecified components default to zero.

        e.g. air = Composition(nitrogen=0.78, oxygen=0.21, argon=0.009, carbon_dioxide=0.0004, water=0.0006)
    """
    methane: float = 0.0
    nitrogen: float = 0.0
    carbon_dioxide: float = 0.0
    ethane: float = 0.0
    propane: float = 0.0
    isobutane: float = 0.0
    n_butane: float = 0.0
    isopentane: float = 0.0
    n_pentane: float = 0.0
    hexane: float = 0.0
    heptane: float = 0.0
    octane: float = 0.0
    nonane: float = 0.0
    decane: float = 0.0
    hydrogen: float = 0.0
    oxygen: float = 0.0
    carbon_monoxide: float = 0.0
    water: float = 0.0
    hydrogen_sulfide: float = 0.0
    helium: float = 0.0
    argon: float = 0.0

    def sum(self) -> float:
        return float(sum(astuple(self)))

    def normalize(self):
        """ Scales all fractions in place so they sum to 1.0 """
        total = self.sum()
        if abs(total) < EMPTY_TOL:
            raise EmptyCompositionError('Cannot normalize an empty composition', total)
        factor = 1.0 / total
        for f in fields(self):
            setattr(self, f.name, getattr(self, f.name) * factor)
        return self

    def check(self):
        """ Raises EmptyCompositionError if all fractions are ~zero,
            or BadSumCompositionError if the fractions do not sum to 1.0 within 1e-5
        """
        total = self.sum()
        if abs(total) < EMPTY_TOL:
            raise EmptyCompositionError('Composition is empty', total)
        if abs(total - 1.0) > SUM_TOL:
            raise BadSumCompositionError(f'Composition sums to {total}, not 1.0', total)

    def to_array(self) -> np.ndarray:
        return np.array(astuple(self), dtype=float)

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_array(cls, x):
        x = np.asarray(x, dtype=float).ravel()
        if x.size != NC:
            raise ValueError(f'Expected {NC} mole fractions in component order, got {x.size}')
        return cls(*[float(v) for v in x])

    @classmethod
    def from_dict(cls, mapping):
        unknown = [k for k in mapping if k not in COMPONENTS]
        if unknown:
            raise ValueError(f'Unknown components {unknown}. Choose from {list(COMPONENTS)}')
        return cls(**{k: float(v) for k, v in mapping.items()})


def as_composition(comp) -> Composition:
    """ Accepts a Composition, a dictionary keyed by component name, or a 21 element sequence """
    if isinstance(comp, Composition):
        return comp
    if isinstance(comp, dict):
        return Composition.from_dict(comp)
    return Composition.from_array(comp)
