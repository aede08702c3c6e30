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

from pygaseos.classes import class_dic


def validate_methods(names, variables):
    """ Converts method names or integer codes into their enum members.
        names: List of class_dic keys, e.g. ['eos', 'flag']
        variables: Matching list of strings, ints or enum members
        Returns a single member if one variable was passed, else the list
    """
    variables = list(variables)
    for m, method in enumerate(names):
        if method not in class_dic:
            raise ValueError(f"Unknown method class '{method}'. Choose from {list(class_dic)}")
        cls = class_dic[method]
        var = variables[m]
        if isinstance(var, Enum):
            if not isinstance(var, cls):
                raise ValueError(f"{var} is not a valid {cls.__name__}")
            continue
        if isinstance(var, str):
            try:
                variables[m] = cls[var.upper()]
            except KeyError:
                raise ValueError(f"An incorrect {method} was specified: '{var}'. "
                                 f"Choose from {[e.name for e in cls]}") from None
        elif isinstance(var, (int,)) and not isinstance(var, bool):
            try:
                variables[m] = cls(var)
            except ValueError:
                raise ValueError(f"An incorrect {method} was specified: {var}. "
                                 f"Choose from {[e.value for e in cls]}") from None
        else:
            raise ValueError(f"An incorrect {method} was specified: {var!r}")
    if len(variables) == 1:
        return variables[0]
    else:
        return variables
