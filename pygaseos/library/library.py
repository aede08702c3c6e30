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

import pandas as pd
from tabulate import tabulate

from pygaseos.constants import COMPONENTS, COMPONENT_NAMES
from pygaseos.constants import detail_constants as dc
from pygaseos.constants import gerg_constants as gc


class component_library:
    """ Pure component data for the 21 components, keyed by component name
        e.g. component_library().prop('methane', 'Tc_K')
    """
    def __init__(self):
        self.df = pd.DataFrame({
            'Component': list(COMPONENTS),
            'Name': list(COMPONENT_NAMES),
            'MW_DETAIL': list(dc.MMI),
            'MW_GERG': list(gc.MMI),
            'Tc_K': list(gc.TC),
            'Dc_mol_per_l': list(gc.DC),
        })
        self.components = self.df['Component'].tolist()
        self.names = self.df['Name'].tolist()
        self.property_list = ['Name', 'MW_DETAIL', 'MW_GERG', 'Tc_K', 'Dc_mol_per_l']
        self.dics = {}
        for col in self.property_list:
            self.dics[col.upper()] = dict(zip(self.df['Component'], self.df[col]))

    def prop(self, comp, prop):
        """ Returns a property for a component, or a list of all properties if prop = 'ALL' """
        comp = comp.lower()
        if comp not in self.components:
            raise ValueError(f"Component '{comp}' not in library. Choose from {self.components}")
        prop = prop.upper()
        if prop == 'ALL':
            return [self.dics[p.upper()][comp] for p in self.property_list]
        if prop not in self.dics:
            raise ValueError(f"Property '{prop}' not in library. Choose from {self.property_list}")
        return self.dics[prop][comp]

    def table(self) -> str:
        return tabulate(self.df, headers='keys', showindex=False)
