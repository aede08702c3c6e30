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

from pygaseos.constants import (RGERG, RDETAIL, EPSILON, NC, XTOL, TOLR, VLOG_MIN, VLOG_MAX, T0, P0,
                                JT_IDEAL, N0I, TH0I)
from pygaseos.constants import gerg_constants as gc
from pygaseos.classes import IterationFailError, EmptyCompositionError
from pygaseos.composition import as_composition
from pygaseos.shared_fns import PropertyBundle, newton_log_volume_step, planck_einstein
from pygaseos.validate import validate_methods

logger = logging.getLogger(__name__)

MAX_ITER = 50  # Maximum density iterations
RESTART_ITERS = (20, 30, 40)  # Iterations at which the search is restarted from a new seed
RESTART_SEEDS = (3.0, 2.5, 2.0)  # Multiples of the pseudo-critical density used as restart seeds


# =============================================================================
# Tables derived once from the published coefficients
# =============================================================================
class PureFluid():
    """ Pure fluid residual terms. The first kpol terms are polynomial, the rest exponential """
    def __init__(self, noik, form):
        self.n = np.array(noik, dtype=float)
        self.c = np.array(form['c'], dtype=int)
        self.d = np.array(form['d'], dtype=int)
        self.t = np.array(form['t'], dtype=float)
        self.kpol = int(np.sum(self.c == 0))


class Departure():
    """ Binary departure function. Exponential terms are stored in the expanded form
        exp(c*del^2 + e*del + g) of exp(-eta*(del-epsilon)^2 - beta*(del-gamma))
    """
    def __init__(self, kpol, terms):
        terms = np.array(terms, dtype=float)
        self.kpol = kpol
        self.n = terms[:, 0]
        self.d = terms[:, 1].astype(int)
        self.t = terms[:, 2]
        eta, eps, beta, gam = terms[kpol:, 3], terms[kpol:, 4], terms[kpol:, 5], terms[kpol:, 6]
        self.g = -eta * eps ** 2 + beta * gam
        self.e = 2 * eta * eps - beta
        self.c = -eta


def _build_tables():
    dc_ = np.array(gc.DC)
    tc = np.array(gc.TC)
    vc3 = 1 / dc_ ** (1 / 3) / 2
    tc2 = np.sqrt(tc)

    # Reducing functions
    bv = np.ones((NC, NC))
    gv = np.ones((NC, NC))
    bt = np.ones((NC, NC))
    gt = np.ones((NC, NC))
    for (i, j), (bvij, gvij, btij, gtij) in gc.REDUCING.items():
        bv[i, j], gv[i, j], bt[i, j], gt[i, j] = bvij, gvij, btij, gtij
    for i in range(NC):
        gv[i, i] = 1 / dc_[i]
        gt[i, i] = tc[i]
        for j in range(i + 1, NC):
            gv[i, j] = gv[i, j] * bv[i, j] * (vc3[i] + vc3[j]) ** 3
            gt[i, j] = gt[i, j] * bt[i, j] * tc2[i] * tc2[j]
            bv[i, j] = bv[i, j] ** 2
            bt[i, j] = bt[i, j] ** 2

    # Ideal gas terms, rescaled from the gas constant they were fitted with and
    # referenced to T0 and P0
    rsr = RDETAIL / RGERG
    n0i = np.array(N0I, dtype=float)
    n0i[:, 2] -= 1
    n0i[:, 1] += T0
    n0i *= rsr
    n0i[:, 1] -= T0
    n0i[:, 0] -= math.log(P0 / RGERG / T0)

    pure = [PureFluid(gc.NOIK[i], gc.PURE_FORMS[i]) for i in range(NC)]
    models = {mn: Departure(kpol, terms) for mn, (kpol, terms) in gc.DEPARTURE_MODELS.items()}

    return dict(mmi=np.array(gc.MMI), dc=dc_, tc=tc, bv=bv, gv=gv, bt=bt, gt=gt, n0i=n0i,
                th0i=np.array(TH0I, dtype=float), pure=pure, models=models)


TABLES = _build_tables()


def _poly_sums(ar, ndt, d, t, itau):
    # Accumulates polynomial terms n*del^d*tau^t into ar
    ndtd = ndt * d
    ar[0, 1] += ndtd.sum()
    ar[0, 2] += (ndtd * (d - 1)).sum()
    if itau > 0:
        ndtt = ndt * t
        ar[0, 0] += ndt.sum()
        ar[1, 0] += ndtt.sum()
        ar[2, 0] += (ndtt * (t - 1)).sum()
        ar[1, 1] += (ndtt * d).sum()
        ar[1, 2] += (ndtt * d * (d - 1)).sum()
        ar[0, 3] += (ndtd * (d - 1) * (d - 2)).sum()


class Gerg2008():
    """ GERG-2008 equation of state for natural gases and other mixtures (AGA8 Part 2)

            Inputs (may also be set directly as attributes between calls):
                comp: Composition, dictionary of component mole fractions, or 21 element array (optional)
                t: Temperature (K)
                p: Pressure (kPa)
                d: Molar density (mol/l). A negative value is used as the initial guess by density()

            Calculated properties, populated by properties():
                .z, .mm, .dp_dd, .d2p_dd2, .d2p_dtd, .dp_dt, .u, .h, .s, .cv, .cp, .w, .g, .jt, .kappa, .a

            properties() works from the current density and does not check that density() has been
            called first.

            Usage example:
                gerg = Gerg2008(comp=Composition(methane=0.9, ethane=0.1), t=300.0, p=5000.0)
                gerg.density()
                gerg.properties()
                gerg.w
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
        self.d2p_dtd = 0.0                # d2P/dTdD [kPa/(mol/l)/K]
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
        self._xold = np.zeros(NC)         # Composition the reducing parameters were last evaluated at
        self._drold = 0.0                 # Reducing density (mol/l)
        self._trold = 0.0                 # Reducing temperature (K)
        self._told = 0.0                  # Temperature the tau powers were last evaluated at
        self._trold2 = 0.0                # Reducing temperature the tau powers were last evaluated at
        self._taup = [np.zeros(len(pf.n)) for pf in TABLES['pure']]
        self._taupijk = {mn: np.zeros(m.kpol) for mn, m in TABLES['models'].items()}
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

    def pseudo_critical_point(self):
        """ Returns (dcx, tcx), the mole fraction weighted critical density (mol/l) and temperature (K) """
        tcx = float(np.dot(self.x, self._tables['tc']))
        vcx = float(np.dot(self.x, 1 / self._tables['dc']))
        dcx = 1 / vcx if vcx > EPSILON else 0.0
        return dcx, tcx

    def _present(self):
        return [i for i in range(NC) if self.x[i] > EPSILON]

    def _pairs(self):
        # Departure function pairs with both components present
        x = self.x
        return [(i, j, mn, fij) for (i, j), (mn, fij) in gc.DEPARTURE_PAIRS.items()
                if x[i] > EPSILON and x[j] > EPSILON]

    def _reducing_parameters(self):
        """ Returns reducing density and temperature (dr, tr) for the current composition.
            Cached until a fraction moves by more than XTOL, which also invalidates the tau powers
        """
        if not np.any(np.abs(self.x - self._xold) > XTOL):
            return self._drold, self._trold
        self._xold = self.x.copy()
        logger.debug('GERG-2008 reducing parameters recalculated')
        self._told = 0.0
        self._trold2 = 0.0

        tb = self._tables
        x = self.x
        present = self._present()
        vr = tr = 0.0
        for a, i in enumerate(present):
            f = 1.0
            for j in present[a:]:
                xij = f * (x[i] * x[j]) * (x[i] + x[j])
                vr += xij * tb['gv'][i, j] / (tb['bv'][i, j] * x[i] + x[j])
                tr += xij * tb['gt'][i, j] / (tb['bt'][i, j] * x[i] + x[j])
                f = 2.0
        dr = 1 / vr if vr > EPSILON else 0.0
        self._drold = dr
        self._trold = tr
        return dr, tr

    def _alpha0(self):
        # Ideal gas Helmholtz energy and its temperature derivatives, all dimensionless:
        # a0[0] = a0/RT, a0[1] = tau*d(a0/RT)/dtau, a0[2] = tau^2*d2(a0/RT)/dtau^2
        tb = self._tables
        t = self.t
        a0 = np.zeros(3)
        logd = math.log(self.d) if self.d > EPSILON else math.log(EPSILON)
        logt = math.log(t)
        for i in self._present():
            x = self.x[i]
            n0 = tb['n0i'][i]
            logxd = logd + math.log(x)
            s0, s1, s2 = planck_einstein(n0[3:], tb['th0i'][i], t)
            a0[0] += x * (logxd + n0[0] + n0[1] / t - n0[2] * logt + s0)
            a0[1] += x * (n0[2] + n0[1] / t + s1)
            a0[2] += -x * (n0[2] + s2)
        self._a0 = a0

    def _t_terms(self, lntau):
        # Tau powers of the pure fluid and polynomial departure terms
        tb = self._tables
        for i in self._present():
            pf = tb['pure'][i]
            self._taup[i] = pf.n * np.exp(pf.t * lntau)
        for i, j, mn, fij in self._pairs():
            m = tb['models'][mn]
            self._taupijk[mn] = m.n[:m.kpol] * np.exp(m.t[:m.kpol] * lntau)

    def _alphar(self, itau=0):
        """ Residual Helmholtz energy and its derivatives, dimensionless:
            ar[0, 1..3] - del^k * d^k(ar)/ddel^k
            ar[0, 0], ar[1, 0], ar[2, 0] - ar, tau*dar/dtau, tau^2*d2ar/dtau2
            ar[1, 1], ar[1, 2] - tau*del*d2ar/dtau/ddel, tau*del^2*d3ar/dtau/ddel2
            Only ar[0, 1] and ar[0, 2] are evaluated unless itau > 0
        """
        tb = self._tables
        ar = np.zeros((4, 4))
        dr, tr = self._reducing_parameters()
        if dr <= 0:
            raise EmptyCompositionError('No composition has been set', float(self.x.sum()))
        delta = self.d / dr
        tau = tr / self.t
        lntau = math.log(tau)
        delp = np.ones(8)
        for k in range(1, 8):
            delp[k] = delp[k - 1] * delta
        expd = np.exp(-delp)

        if abs(self.t - self._told) > XTOL or abs(tr - self._trold2) > XTOL:
            self._t_terms(lntau)
        self._told = self.t
        self._trold2 = tr

        # Pure fluid contributions
        for i in self._present():
            x = self.x[i]
            pf = tb['pure'][i]
            kp = pf.kpol
            taup = self._taup[i]
            d, t = pf.d[:kp], pf.t[:kp]
            _poly_sums(ar, x * delp[d] * taup[:kp], d, t, itau)

            c, d, t = pf.c[kp:], pf.d[kp:], pf.t[kp:]
            ndt = x * delp[d] * taup[kp:] * expd[c]
            ex = c * delp[c]
            ex2 = d - ex
            ex3 = ex2 * (ex2 - 1)
            ar[0, 1] += (ndt * ex2).sum()
            ar[0, 2] += (ndt * (ex3 - c * ex)).sum()
            if itau > 0:
                ndtt = ndt * t
                ar[0, 0] += ndt.sum()
                ar[1, 0] += ndtt.sum()
                ar[2, 0] += (ndtt * (t - 1)).sum()
                ar[1, 1] += (ndtt * ex2).sum()
                ar[1, 2] += (ndtt * (ex3 - c * ex)).sum()
                ar[0, 3] += (ndt * (ex3 * (ex2 - 2) - ex * (3 * ex2 - 3 + c) * c)).sum()

        # Binary departure contributions
        for i, j, mn, fij in self._pairs():
            m = tb['models'][mn]
            kp = m.kpol
            xijf = self.x[i] * self.x[j] * fij
            d = m.d[:kp]
            _poly_sums(ar, xijf * delp[d] * self._taupijk[mn], d, m.t[:kp], itau)
            if len(m.n) == kp:
                continue

            d, t = m.d[kp:], m.t[kp:]
            cij0 = m.c * delp[2]
            eij0 = m.e * delta
            ndt = xijf * m.n[kp:] * delp[d] * np.exp(cij0 + eij0 + m.g + t * lntau)
            ex = d + 2 * cij0 + eij0
            ex2 = ex * ex - d + 2 * cij0
            ar[0, 1] += (ndt * ex).sum()
            ar[0, 2] += (ndt * ex2).sum()
            if itau > 0:
                ndtt = ndt * t
                ar[0, 0] += ndt.sum()
                ar[1, 0] += ndtt.sum()
                ar[2, 0] += (ndtt * (t - 1)).sum()
                ar[1, 1] += (ndtt * ex).sum()
                ar[1, 2] += (ndtt * ex2).sum()
                ar[0, 3] += (ndt * (ex * (ex2 - 2 * (d - 2 * cij0)) + 2 * d)).sum()
        self._ar = ar

    def pressure(self) -> float:
        """ Returns pressure (kPa) at the current temperature and density.
            Also sets z and the dP/dD used by the density iteration
        """
        self._alphar(0)
        self.z = 1 + self._ar[0, 1]
        p = self.d * RGERG * self.t * self.z
        self._dp_dd_save = RGERG * self.t * (1 + 2 * self._ar[0, 1] + self._ar[0, 2])
        return p

    def density(self, flag=0) -> float:
        """ Solves for molar density (mol/l) at the current temperature and pressure.

            flag: density_flag member, name or integer
                  0 / 'NONE'   - Return the first converged root
                  1 / 'CHECK'  - Reject roots with non-positive p, dP/dD, d2P/dTdD, cv, cp or w
                  2 / 'LIQUID' - As CHECK, but start from 3x the pseudo-critical density
            A negative self.d is used as the initial estimate instead.

            Raises IterationFailError when all restarts are exhausted, the iteration budget runs out,
            or a checked root is unstable. self.d is set to the ideal gas density in that case
        """
        iflag = validate_methods(['flag'], [flag]).value
        nfail = 0
        ifail = False
        dcx, _ = self.pseudo_critical_point()
        if self.p <= 0:
            return self._density_failed()

        if self.d > -EPSILON:
            self.d = self.p / RGERG / self.t  # Ideal gas estimate
            if iflag == 2:
                self.d = dcx * 3
        else:
            self.d = abs(self.d)
        plog = math.log(self.p)
        vlog = -math.log(self.d)

        for it in range(1, MAX_ITER + 1):
            if vlog < VLOG_MIN or vlog > VLOG_MAX or it in RESTART_ITERS or ifail:
                ifail = False
                if nfail >= len(RESTART_SEEDS):
                    return self._density_failed()
                self.d = dcx * RESTART_SEEDS[nfail]
                nfail += 1
                logger.debug(f'GERG-2008 density restart {nfail} at iteration {it}, seed {self.d} mol/l')
                vlog = -math.log(self.d)
            self.d = math.exp(-vlog)
            p2 = self.pressure()
            if self._dp_dd_save < EPSILON or p2 < EPSILON:
                vinc = -0.1 if self.d > dcx else 0.1
                if it > 5:
                    vinc /= 2
                if 10 < it < 20:
                    vinc /= 5
                vlog += vinc
            else:
                vdiff = newton_log_volume_step(p2, plog, self.d, self._dp_dd_save)
                vlog -= vdiff
                if abs(vdiff) < TOLR:
                    if self._dp_dd_save < 0:
                        ifail = True
                    else:
                        self.d = math.exp(-vlog)
                        if iflag > 0 and not self._stable():
                            return self._density_failed('unstable root')
                        return self.d
        return self._density_failed()

    def _stable(self):
        p = self.properties()
        return not (p <= 0 or self.dp_dd <= 0 or self.d2p_dtd <= 0
                    or self.cv <= 0 or self.cp <= 0 or self.w <= 0)

    def _density_failed(self, reason='failed to converge'):
        self.d = self.p / RGERG / self.t
        logger.warning(f'GERG-2008 density {reason} at T={self.t} K, P={self.p} kPa. Ideal gas density returned')
        raise IterationFailError(f'GERG-2008 density iteration {reason}, ideal gas density returned', self.d)

    def properties(self) -> float:
        """ Calculates all properties at the current temperature and density, and returns the
            pressure (kPa) they correspond to. self.p is left unchanged.
            Call density() first if only pressure is known
        """
        self.molar_mass()
        self._alpha0()
        self._alphar(1)
        a0, ar = self._a0, self._ar

        rt = RGERG * self.t
        self.z = 1 + ar[0, 1]
        p = self.d * rt * self.z
        self.dp_dd = rt * (1 + 2 * ar[0, 1] + ar[0, 2])
        self.dp_dt = self.d * RGERG * (1 + ar[0, 1] - ar[1, 1])
        self.d2p_dtd = RGERG * (1 + 2 * ar[0, 1] + ar[0, 2] - 2 * ar[1, 1] - ar[1, 2])
        self.a = rt * (a0[0] + ar[0, 0])
        self.g = rt * (1 + ar[0, 1] + a0[0] + ar[0, 0])
        self.u = rt * (a0[1] + ar[1, 0])
        self.h = rt * (1 + ar[0, 1] + a0[1] + ar[1, 0])
        self.s = RGERG * (a0[1] + ar[1, 0] - a0[0] - ar[0, 0])
        self.cv = -RGERG * (a0[2] + ar[2, 0])
        if self.d > EPSILON:
            self.cp = self.cv + self.t * (self.dp_dt / self.d) * (self.dp_dt / self.d) / self.dp_dd
            self.d2p_dd2 = rt * (2 * ar[0, 1] + 4 * ar[0, 2] + ar[0, 3]) / self.d
            self.jt = (self.t / self.d * self.dp_dt / self.dp_dd - 1) / self.cp / self.d
        else:
            self.cp = self.cv + RGERG
            self.d2p_dd2 = 0.0
            self.jt = JT_IDEAL
        w2 = 1000 * self.cp / self.cv * self.dp_dd / self.mm
        self.w = math.sqrt(max(w2, 0.0))
        self.kappa = self.w ** 2 * self.mm / (rt * 1000 * self.z)
        return p

    def property_bundle(self) -> PropertyBundle:
        return PropertyBundle.from_calculator(self)
