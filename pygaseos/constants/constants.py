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


# Constants
RDETAIL = 8.31451  # Gas constant used by the DETAIL equation, J/(mol-K)
RGERG = 8.314472  # Gas constant used by GERG-2008, J/(mol-K)
EPSILON = 1e-15
NC = 21  # Number of components
XTOL = 1e-7  # Change in x, T or Tr that triggers recalculation of cached terms
TOLR = 1e-7  # Convergence tolerance on log(v) step in density iterations
VLOG_MIN = -7.0  # Admissible range for log(v) in density iterations
VLOG_MAX = 100.0
T0 = 298.15  # Ideal gas reference temperature (K)
P0 = 101.325  # Ideal gas reference pressure (kPa)
EMPTY_TOL = 1e-10  # Sum of fractions below this is an empty composition
SUM_TOL = 1e-5  # Allowed deviation of sum of fractions from unity
JT_IDEAL = 1e20  # Joule-Thomson placeholder at zero density

COMPONENTS = (
    'methane',
    'nitrogen',
    'carbon_dioxide',
    'ethane',
    'propane',
    'isobutane',
    'n_butane',
    'isopentane',
    'n_pentane',
    'hexane',
    'heptane',
    'octane',
    'nonane',
    'decane',
    'hydrogen',
    'oxygen',
    'carbon_monoxide',
    'water',
    'hydrogen_sulfide',
    'helium',
    'argon',
)

COMPONENT_NAMES = (
    'Methane', 'Nitrogen', 'Carbon dioxide', 'Ethane', 'Propane', 'Isobutane',
    'n-Butane', 'Isopentane', 'n-Pentane', 'Hexane', 'Heptane', 'Octane', 'Nonane',
    'Decane', 'Hydrogen', 'Oxygen', 'Carbon monoxide', 'Water', 'Hydrogen sulfide',
    'Helium', 'Argon',
)

# Ideal gas parameters, as published (before reference state adjustment)
# [n1, n2, n3, n4, n5, n6, n7]: log term, 1/T term, log(T) term, then one amplitude
# per Planck-Einstein oscillator in TH0I
N0I = (
    (29.83843397, -15999.69151, 4.00088, 0.76315, 0.0046, 8.74432, -4.46921),
    (17.56770785, -2801.729072, 3.50031, 0.13732, -0.1466, 0.90066, 0.0),
    (20.65844696, -4902.171516, 3.50002, 2.04452, -1.06044, 2.03366, 0.01393),
    (36.73005938, -23639.65301, 4.00263, 4.33939, 1.23722, 13.1974, -6.01989),
    (44.70909619, -31236.63551, 4.02939, 6.60569, 3.197, 19.1921, -8.37267),
    (34.30180349, -38525.50276, 4.06714, 8.97575, 5.25156, 25.1423, 16.1388),
    (36.53237783, -38957.80933, 4.33944, 9.44893, 6.89406, 24.4618, 14.7824),
    (43.17218626, -51198.30946, 4.0, 11.7618, 20.1101, 33.1688, 0.0),
    (42.67837089, -45215.83, 4.0, 8.95043, 21.836, 33.4032, 0.0),
    (46.99717188, -52746.83318, 4.0, 11.6977, 26.8142, 38.6164, 0.0),
    (52.07631631, -57104.81056, 4.0, 13.7266, 30.4707, 43.5561, 0.0),
    (57.25830934, -60546.76385, 4.0, 15.6865, 33.8029, 48.1731, 0.0),
    (62.09646901, -66600.12837, 4.0, 18.0241, 38.1235, 53.3415, 0.0),
    (65.93909154, -74131.45483, 4.0, 21.0069, 43.4931, 58.3657, 0.0),
    (13.07520288, -5836.943696, 2.47906, 0.95806, 0.45444, 1.56039, -1.3756),
    (16.8017173, -2318.32269, 3.50146, 1.07558, 1.01334, 0.0, 0.0),
    (17.45786899, -2635.244116, 3.50055, 1.02865, 0.00493, 0.0, 0.0),
    (21.57882705, -7766.733078, 4.00392, 0.01059, 0.98763, 3.06904, 0.0),
    (21.5830944, -6069.035869, 4.0, 3.11942, 1.00243, 0.0, 0.0),
    (10.04639507, -745.375, 2.5, 0.0, 0.0, 0.0, 0.0),
    (10.04639507, -745.375, 2.5, 0.0, 0.0, 0.0, 0.0),
)

# Planck-Einstein characteristic temperatures (K). Oscillators 1 and 3 are sinh
# terms, 2 and 4 are cosh terms. Zero means the oscillator is absent.
TH0I = (
    (820.659, 178.41, 1062.82, 1090.53),
    (662.738, 680.562, 1740.06, 0.0),
    (919.306, 865.07, 483.553, 341.109),
    (559.314, 223.284, 1031.38, 1071.29),
    (479.856, 200.893, 955.312, 1027.29),
    (438.27, 198.018, 1905.02, 893.765),
    (468.27, 183.636, 1914.1, 903.185),
    (292.503, 910.237, 1919.37, 0.0),
    (178.67, 840.538, 1774.25, 0.0),
    (182.326, 859.207, 1826.59, 0.0),
    (169.789, 836.195, 1760.46, 0.0),
    (158.922, 815.064, 1693.07, 0.0),
    (156.854, 814.882, 1693.79, 0.0),
    (164.947, 836.264, 1750.24, 0.0),
    (228.734, 326.843, 1651.71, 1671.69),
    (2235.71, 1116.69, 0.0, 0.0),
    (1550.45, 704.525, 0.0, 0.0),
    (268.795, 1141.41, 2507.37, 0.0),
    (1833.63, 847.181, 0.0, 0.0),
    (0.0, 0.0, 0.0, 0.0),
    (0.0, 0.0, 0.0, 0.0),
)
