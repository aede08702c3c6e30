from .gerg import Gerg2008
