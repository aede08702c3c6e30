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

from enum import Enum


class eos_method(Enum):  # Equation of state used for property calculations
    DETAIL = 0
    GERG = 1


class density_flag(Enum):  # Density solver mode for GERG-2008
    NONE = 0  # Return first converged root
    CHECK = 1  # Verify root with a properties call
    LIQUID = 2  # Seed iteration with a liquid-like density


class composition_error(Enum):  # Reasons a composition is rejected
    EMPTY = 0
    BADSUM = 1


class density_error(Enum):  # Reasons the density solver fails
    PRESSURE_TOO_LOW = 0
    ITERATION_FAIL = 1


class_dic = {
    'eos': eos_method,
    'flag': density_flag,
}


class CompositionError(ValueError):
    """ Raised when a composition cannot be used by either equation of state """
    kind = None

    def __init__(self, message, total=None):
        super().__init__(message)
        self.total = total


class EmptyCompositionError(CompositionError):
    kind = composition_error.EMPTY


class BadSumCompositionError(CompositionError):
    kind = composition_error.BADSUM


class DensityError(RuntimeError):
    """ Raised when the density solver cannot return a density for the requested state.
        The solver has already set the calculator density to the ideal gas fallback (or zero)
        before raising, and that value is carried here as .d
    """
    kind = None

    def __init__(self, message, d=0.0):
        super().__init__(message)
        self.d = d


class PressureTooLowError(DensityError):
    kind = density_error.PRESSURE_TOO_LOW


class IterationFailError(DensityError):
    kind = density_error.ITERATION_FAIL
