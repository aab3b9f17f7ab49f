"""Floating point tolerances shared by every comparison in the package.

Membership compares y^2 against x^3 + ax + b and uses a looser threshold than
coordinate equality.
"""

__all__ = ['EPS_SINGULAR', 'EPS_POINT', 'EPS_ADD', 'EPS_MEMBERSHIP', 'EPS_SNAP', 'DISPLAY_PRECISION', 'is_zero', 'close']

# |discriminant| below this marks a singular curve; also the y^2 == 0 test in Curve.y_values
EPS_SINGULAR = 1e-9

# Coordinate-wise point equality
EPS_POINT = 1e-9

# Degenerate cases of the chord-and-tangent construction
EPS_ADD = 1e-9

# |y^2 - f(x)| below this means the point lies on the curve
EPS_MEMBERSHIP = 1e-6

# Snapping and reflection alignment
EPS_SNAP = 1e-6

# Decimals shown by str(Point)
DISPLAY_PRECISION = 4


def is_zero(value: float, eps: float) -> bool:
    return abs(value) < eps


def close(u: float, v: float, eps: float) -> bool:
    """Strict |u - v| < eps, the comparison used throughout the group law"""
    return abs(u - v) < eps
