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

import logging
import math

import numpy as np

from pygaseos.constants import (RDETAIL, EPSILON, NC, XTOL, TOLR, VLOG_MIN, VLOG_MAX, T0, P0,
                                JT_IDEAL, N0I, TH0I)
from pygaseos.constants import detail_constants as dc
from pygaseos.classes import PressureTooLowError, IterationFailError
from pygaseos.composition import as_composition
from pygaseos.shared_fns import PropertyBundle, newton_log_volume_step, planck_einstein

logger = logging.getLogger(__name__)

MAX_ITER = 20  # Maximum density iterations

# =============================================================================
# Tables derived once from the published coefficients
# =============================================================================
AN = np.array([t.an for t in dc.DETAIL_TERMS])
BN = np.array([t.bn for t in dc.DETAIL_TERMS])
KN = np.array([t.kn for t in dc.DETAIL_TERMS])
UN = np.array([t.un for t in dc.DETAIL_TERMS])
GN = np.array([t.g for t in dc.DETAIL_TERMS])
QN = np.array([t.q for t in dc.DETAIL_TERMS])
FN = np.array([t.f for t in dc.DETAIL_TERMS])
COEFT1 = RDETAIL * (UN - 1)
COEFT2 = COEFT1 * UN
IS_CSN = np.arange(dc.NTERMS) >= dc.NCSN  # Terms with composition dependent Csn
IS_BS = np.arange(dc.NTERMS) < dc.NBS  # Terms in the second virial coefficient


def _sparse(values, n=NC):
    a = np.zeros(n)
    for i, v in values.items():
        a[i] = v
    return a


def _binary(entries, n=NC):
    # Symmetric matrix with unit diagonal from an (i, j) keyed upper triangle
    m = np.ones((n, n))
    for (i, j), v in entries.items():
        m[i, j] = v
        m[j, i] = v
    return m


def _build_tables():
    mmi = np.array(dc.MMI)
    ei = np.array(dc.EI)
    ki = np.array(dc.KI)
    gi = np.array(dc.GI)
    qi = _sparse(dc.QI)
    fi = _sparse(dc.FI)
    si = _sparse(dc.SI)
    wi = _sparse(dc.WI)
    eij = _binary(dc.EIJ)
    uij = _binary(dc.UIJ)
    kij = _binary(dc.KIJ)
    gij = _binary(dc.GIJ)

    ki25 = ki ** 2.5
    ei25 = ei ** 2.5

    # Second virial coefficient terms for each pair, bsnij2[i, j, n]
    gmix = gij * (gi[:, None] + gi[None, :]) / 2
    bsnij2 = np.zeros((NC, NC, dc.NBS))
    for n, term in enumerate(dc.DETAIL_TERMS[:dc.NBS]):
        bsnij = np.ones((NC, NC))
        if term.g:
            bsnij = gmix.copy()
        if term.q:
            bsnij *= np.outer(qi, qi)
        if term.f:
            bsnij *= np.outer(fi, fi)
        if term.s:
            bsnij *= np.outer(si, si)
        if term.w:
            bsnij *= np.outer(wi, wi)
        bsnij2[:, :, n] = (term.an * (eij * np.sqrt(np.outer(ei, ei))) ** term.un
                           * np.outer(ki, ki) ** 1.5 * bsnij)

    kij5 = (kij ** 5 - 1) * np.outer(ki25, ki25)
    uij5 = (uij ** 5 - 1) * np.outer(ei25, ei25)
    gij5 = (gij - 1) * (gi[:, None] + gi[None, :]) / 2

    # Ideal gas terms referenced to T0 and P0
    n0i = np.array(N0I, dtype=float)
    n0i[:, 2] -= 1
    n0i[:, 0] -= math.log(P0 / RDETAIL / T0)

    return dict(mmi=mmi, gi=gi, qi=qi, fi=fi, ki25=ki25, ei25=ei25, bsnij2=bsnij2,
                kij5=kij5, uij5=uij5, gij5=gij5, n0i=n0i, th0i=np.array(TH0I, dtype=float))


TABLES = _build_tables()


class Detail():
    """ AGA8 Part 1 DETAIL equation of state for natural gas mixtures

            Inputs (may also be set directly as attributes between calls):
                comp: Composition, dictionary of component mole fractions, or 21 element array (optional)
                t: Temperature (K)
                p: Pressure (kPa)
                d: Molar density (mol/l). A negative value is used as the initial guess by density()

            Calculated properties, populated by properties():
                .z, .mm, .dp_dd, .d2p_dd2, .dp_dt, .u, .h, .s, .cv, .cp, .w, .g, .jt, .kappa, .a
                .d2p_dtd is not available from DETAIL and is left at zero

            Usage example:
                aga = Detail(comp=Composition(methane=0.9, ethane=0.1), t=300.0, p=5000.0)
                aga.density()
                aga.properties()
                aga.z
    """
    def __init__(self, comp=None, t=0.0, p=0.0, d=0.0):
        self.t = t                        # Temperature (K)
        self.p = p                        # Pressure (kPa)
        self.d = d                        # Molar density (mol/l)
        self.x = np.zeros(NC)             # Mole fractions in component order
        self.z = 0.0                      # Compressibility factor
        self.mm = 0.0                     # Molar mass (g/mol)
        self.dp_dd = 0.0                  # dP/dD [kPa/(mol/l)]
        self.d2p_dd2 = 0.0                # d2P/dD2 [kPa/(mol/l)^2]
        self.d2p_dtd = 0.0                # d2P/dTdD, not calculated
        self.dp_dt = 0.0                  # dP/dT (kPa/K)
        self.u = 0.0                      # Internal energy (J/mol)
        self.h = 0.0                      # Enthalpy (J/mol)
        self.s = 0.0                      # Entropy [J/(mol-K)]
        self.cv = 0.0                     # Isochoric heat capacity [J/(mol-K)]
        self.cp = 0.0                     # Isobaric heat capacity [J/(mol-K)]
        self.w = 0.0                      # Speed of sound (m/s)
        self.g = 0.0                      # Gibbs energy (J/mol)
        self.jt = 0.0                     # Joule-Thomson coefficient (K/kPa)
        self.kappa = 0.0                  # Isentropic exponent
        self.a = 0.0                      # Helmholtz energy (J/mol)

        self._tables = TABLES
        self._dp_dd_save = 0.0            # dP/dD from the last pressure() call
        self._xold = np.zeros(NC)         # Composition the mixture terms were last evaluated at
        self._told = 0.0                  # Temperature the T^-un powers were last evaluated at
        self._tun = np.zeros(dc.NTERMS)
        self._k3 = 0.0                    # Mixture size parameter K^3
        self._bs = np.zeros(dc.NTERMS)    # Second virial coefficient terms (first NBS used)
        self._csn = np.zeros(dc.NTERMS)   # Third and higher virial coefficient terms
        self._a0 = np.zeros(3)
        self._ar = np.zeros((4, 4))

        if comp is not None:
            self.set_composition(comp)

    def set_composition(self, comp):
        """ Checks the composition and copies it into the calculator.
            Raises EmptyCompositionError or BadSumCompositionError
        """
        comp = as_composition(comp)
        comp.check()
        self.x = comp.to_array()

    def molar_mass(self) -> float:
        self.mm = float(np.dot(self.x, self._tables['mmi']))
        return self.mm

    def _x_terms(self):
        # Composition dependent terms, skipped if no fraction has moved by more than XTOL
        if not np.any(np.abs(self.x - self._xold) > XTOL):
            return
        self._xold = self.x.copy()
        logger.debug('DETAIL mixture terms recalculated')
        tb = self._tables
        x = np.where(self.x > 0, self.x, 0.0)

        # Pure fluid plus binary contributions. Binary matrices have zero diagonals,
        # so the symmetric quadratic forms give the 2*xi*xj weighting for i != j
        k3 = np.dot(x, tb['ki25']) ** 2 + x @ tb['kij5'] @ x
        u = np.dot(x, tb['ei25']) ** 2 + x @ tb['uij5'] @ x
        g = np.dot(x, tb['gi']) + x @ tb['gij5'] @ x
        q = np.dot(x, tb['qi'])
        f = np.dot(x * x, tb['fi'])
        self._bs = np.zeros(dc.NTERMS)
        self._bs[:dc.NBS] = np.einsum('i,j,ijn->n', x, x, tb['bsnij2'])

        self._k3 = k3 ** 0.6
        u = u ** 0.2

        csn = AN * u ** UN
        csn = np.where(GN, csn * g, csn)
        csn = np.where(QN, csn * q * q, csn)
        csn = np.where(FN, csn * f, csn)
        self._csn = np.where(IS_CSN, csn, 0.0)

    def _alpha0(self):
        # Ideal gas Helmholtz energy (J/mol) and its temperature derivatives
        tb = self._tables
        t = self.t
        a0 = np.zeros(3)
        logd = math.log(self.d) if self.d > EPSILON else math.log(EPSILON)
        logt = math.log(t)
        for i in range(NC):
            x = self.x[i]
            if x > 0:
                n0 = tb['n0i'][i]
                logxd = logd + math.log(x)
                s0, s1, s2 = planck_einstein(n0[3:], tb['th0i'][i], t)
                a0[0] += x * (logxd + n0[0] + n0[1] / t - n0[2] * logt + s0)
                a0[1] += x * (logxd + n0[0] - n0[2] * (1 + logt) + s0 - s1)
                a0[2] += -x * (n0[2] + s2)
        a0[0] *= RDETAIL * t
        a0[1] *= RDETAIL
        a0[2] *= RDETAIL
        self._a0 = a0

    def _alphar(self, itau=0):
        """ Residual Helmholtz energy and its derivatives.
            ar[0, 0..3] - ar, D*dar/dD, D^2*d2ar/dD2, D^3*d3ar/dD3 (J/mol)
            ar[1, 0], ar[1, 1] - dar/dT, D*d2ar/dDdT [J/(mol-K)]
            ar[2, 0] - T*d2ar/dT2 [J/(mol-K)]
            Temperature derivatives are only evaluated when itau > 0
        """
        ar = np.zeros((4, 4))
        if abs(self.t - self._told) > XTOL:
            self._tun = self.t ** -UN
        self._told = self.t

        d = self.d
        dred = self._k3 * d
        dknn = np.ones(10)
        for n in range(1, 10):
            dknn[n] = dred * dknn[n - 1]
        expn = np.ones(5)
        expn[1:] = np.exp(-dknn[1:5])
        rt = RDETAIL * self.t

        sumb = np.where(IS_BS, (self._bs * d - self._csn * dred) * self._tun, 0.0)
        sum0 = self._csn * dknn[BN] * self._tun * expn[KN]
        bkd = BN - KN * dknn[KN]
        ckd = KN * KN * dknn[KN]
        coefd1 = bkd
        coefd2 = bkd * (bkd - 1) - ckd
        coefd3 = (bkd - 2) * coefd2 + ckd * (1 - KN - 2 * bkd)

        s0 = sum0 + sumb
        s1 = sum0 * coefd1 + sumb
        s2 = sum0 * coefd2
        s3 = sum0 * coefd3
        ar[0, 0] = rt * s0.sum()
        ar[0, 1] = rt * s1.sum()
        ar[0, 2] = rt * s2.sum()
        ar[0, 3] = rt * s3.sum()
        if itau > 0:
            ar[1, 1] = -np.dot(COEFT1, s1)
            ar[1, 0] = -np.dot(COEFT1, s0)
            ar[2, 0] = np.dot(COEFT2, s0)
        self._ar = ar

    def pressure(self) -> float:
        """ Returns pressure (kPa) at the current temperature and density.
            Also sets z and the dP/dD used by the density iteration
        """
        self._x_terms()
        self._alphar(0)
        self.z = 1 + self._ar[0, 1] / RDETAIL / self.t
        p = self.d * RDETAIL * self.t * self.z
        self._dp_dd_save = RDETAIL * self.t + 2 * self._ar[0, 1] + self._ar[0, 2]
        return p

    def density(self) -> float:
        """ Solves for molar density (mol/l) at the current temperature and pressure.
            A negative self.d is used as the initial estimate, otherwise the ideal gas density is used.
            No phase boundary checks are made; a two phase state point returns a metastable density.

            Raises PressureTooLowError if |p| is ~zero (d set to 0), or IterationFailError if the
            iteration diverges or does not converge within 20 steps (d set to the ideal gas density)
        """
        if abs(self.p) < EPSILON:
            self.d = 0.0
            logger.warning('DETAIL density requested at zero pressure')
            raise PressureTooLowError('Pressure is too low to solve for density', self.d)
        if self.p < 0:
            return self._density_failed()
        if self.d > -EPSILON:
            self.d = self.p / RDETAIL / self.t  # Ideal gas estimate
        else:
            self.d = abs(self.d)
        plog = math.log(self.p)
        vlog = -math.log(self.d)
        for _ in range(MAX_ITER):
            if vlog < VLOG_MIN or vlog > VLOG_MAX:
                break
            self.d = math.exp(-vlog)
            p2 = self.pressure()
            if self._dp_dd_save < EPSILON or p2 < EPSILON:
                vlog += 0.1
            else:
                vdiff = newton_log_volume_step(p2, plog, self.d, self._dp_dd_save)
                vlog -= vdiff
                if abs(vdiff) < TOLR:
                    self.d = math.exp(-vlog)
                    return self.d
        return self._density_failed()

    def _density_failed(self):
        self.d = self.p / RDETAIL / self.t
        logger.warning(f'DETAIL density failed to converge at T={self.t} K, P={self.p} kPa. Ideal gas density returned')
        raise IterationFailError('DETAIL density iteration failed to converge, ideal gas density returned', self.d)

    def properties(self):
        """ Calculates all properties at the current temperature and density.
            Call density() first if only pressure is known
        """
        mm = self.molar_mass()
        self._x_terms()
        self._alpha0()
        self._alphar(2)
        a0, ar = self._a0, self._ar

        rt = RDETAIL * self.t
        self.z = 1 + ar[0, 1] / rt
        self.p = self.d * rt * self.z
        self.dp_dd = rt + 2 * ar[0, 1] + ar[0, 2]
        self.dp_dt = self.d * RDETAIL + self.d * ar[1, 1]
        self.a = a0[0] + ar[0, 0]
        self.s = -a0[1] - ar[1, 0]
        self.u = self.a + self.t * self.s
        self.cv = -(a0[2] + ar[2, 0])
        if self.d > EPSILON:
            self.h = self.u + self.p / self.d
            self.g = self.a + self.p / self.d
            self.cp = self.cv + self.t * (self.dp_dt / self.d) ** 2 / self.dp_dd
            self.d2p_dd2 = (2 * ar[0, 1] + 4 * ar[0, 2] + ar[0, 3]) / self.d
            self.jt = (self.t / self.d * self.dp_dt / self.dp_dd - 1) / self.cp / self.d
        else:
            self.h = self.u + rt
            self.g = self.a + rt
            self.cp = self.cv + RDETAIL
            self.d2p_dd2 = 0.0
            self.jt = JT_IDEAL
        w2 = 1000 * self.cp / self.cv * self.dp_dd / mm
        self.w = math.sqrt(max(w2, 0.0))
        self.kappa = self.w * self.w * mm / (rt * 1000 * self.z)
        self.d2p_dtd = 0.0

    def property_bundle(self) -> PropertyBundle:
        return PropertyBundle.from_calculator(self)
