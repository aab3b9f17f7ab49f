"""
Chord-and-tangent arithmetic on real elliptic curves y^2 = x^3 + ax + b, with the construction geometry needed to draw it.
"""

from .EC import *
from .EC.operations import *
from .error import *
from .logging_config import setup_logging
from . import tolerance

__all__ = ['Curve', 'Point', 'INF', 'Infinity', 'POINT',
           'Construction', 'Line', 'negate', 'add', 'double', 'subtract', 'scalar_multiply', 'construction_line', 'reflection',
           'CurveError', 'DegenerateConstruction', 'PointError',
           'setup_logging', 'tolerance']

__version__ = "0.1"
