"""
Physical constants, component ordering and the published coefficient
tables for the AGA8 DETAIL and GERG-2008 equations of state.
"""

from .constants import *
from . import detail_constants, gerg_constants
