"""
pygaseos
===================================

--------------------------------------------------------------------
AGA8 DETAIL and GERG-2008 equations of state for natural gas mixtures
--------------------------------------------------------------------

Calculates density, compressibility and derived thermodynamic properties of natural gas
mixtures from temperature, pressure and a 21 component composition using either;

- AGA8 Part 1 DETAIL equation of state
- GERG-2008 equation of state (AGA8 Part 2)

Each equation of state is a stateful calculator (detail.Detail, gerg.Gerg2008) holding
temperature, pressure, density and composition, with derived properties populated by
properties(). The gas module wraps these for one-off state point calculations.

Units: T (K), P (kPa), D (mol/l), energies (J/mol)

"""

submodules = [
    'classes',
    'composition',
    'constants',
    'detail',
    'gas',
    'gerg',
    'library',
    'shared_fns',
    'validate'
]

__all__ = submodules

import importlib

def __dir__():
    return __all__


def __getattr__(name):
    if name in submodules:
        return importlib.import_module(f'pygaseos.{name}')
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(
                f"Module 'pygaseos' has no attribute '{name}'"
            )
