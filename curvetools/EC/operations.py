"""
Chord-and-tangent group law on a real elliptic curve.

add and double return a Construction: besides the result R they carry the
third intersection R' of the secant or tangent with the curve (R is R'
reflected across the x axis) and the line itself, so that a plot of the
construction needs no curve arithmetic of its own.

https://en.wikipedia.org/wiki/Elliptic_curve#The_group_law
"""
import logging
from dataclasses import dataclass
from numbers import Real
from typing import NamedTuple, Optional, Tuple

from curvetools.EC import Curve, Point, INF, POINT
from curvetools.error import CurveError, DegenerateConstruction
from curvetools.tolerance import EPS_ADD, EPS_SNAP, is_zero, close

__all__ = ['Line', 'Construction', 'negate', 'add', 'double', 'subtract', 'scalar_multiply', 'construction_line', 'reflection']

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Line:
    """y = slope * x + intercept, or the vertical line x = x0 when slope is None"""
    slope: Optional[float]
    intercept: Optional[float]
    x0: Optional[float] = None

    @classmethod
    def through(cls, point: Point, slope: float) -> 'Line':
        return cls(slope, point.y - slope * point.x)

    @classmethod
    def vertical(cls, x: float) -> 'Line':
        return cls(None, None, x)

    @property
    def is_vertical(self) -> bool:
        return self.slope is None

    def y_at(self, x: float) -> float:
        if self.is_vertical:
            raise CurveError(f'The vertical line x = {self.x0} is not a function of x')
        return self.slope * x + self.intercept

    def __str__(self):
        if self.is_vertical:
            return f'x = {self.x0}'
        return f'y = {self.slope}x + {self.intercept}'


class Construction(NamedTuple):
    result: POINT
    intermediate: Optional[Point]
    line: Optional[Line] = None
    anomaly: Optional[DegenerateConstruction] = None

    @property
    def is_degenerate(self) -> bool:
        return self.anomaly is not None


def _secant_slope(P: Point, Q: Point) -> float:
    return (Q.y - P.y) / (Q.x - P.x)


def _tangent_slope(P: Point, curve: Curve) -> float:
    return (3 * P.x * P.x + curve.a) / (2 * P.y)


def _third_intersection(P: Point, m: float, x3: float) -> Construction:
    """Intersect the line through P with slope m at x3 and reflect"""
    y = m * (x3 - P.x) + P.y
    return Construction(Point(x3, -y), Point(x3, y), Line.through(P, m))


def negate(P: POINT) -> POINT:
    return P.negate()


def add(P: POINT, Q: POINT, curve: Curve) -> Construction:
    if P.is_inf():
        return Construction(Q, None)
    if Q.is_inf():
        return Construction(P, None)

    # Q = -P, which includes P = Q on the x axis
    if close(P.x, Q.x, EPS_ADD) and is_zero(P.y + Q.y, EPS_ADD):
        return Construction(INF, None, Line.vertical(P.x))

    if P.equals(Q):
        return double(P, curve)

    if close(P.x, Q.x, EPS_ADD):
        # distinct x-aligned points that are not negations cannot both lie on one curve
        anomaly = DegenerateConstruction('Vertical secant through distinct, non-negating points', P, Q)
        logger.error(f"{anomaly.message}: P={P}, Q={Q} on {curve}")
        return Construction(INF, None, Line.vertical(P.x), anomaly)

    m = _secant_slope(P, Q)
    x3 = m * m - P.x - Q.x
    return _third_intersection(P, m, x3)


def double(P: POINT, curve: Curve) -> Construction:
    if P.is_inf():
        return Construction(INF, None)

    # vertical tangent, P has order two
    if is_zero(P.y, EPS_ADD):
        return Construction(INF, None, Line.vertical(P.x))

    m = _tangent_slope(P, curve)
    x3 = m * m - 2 * P.x
    return _third_intersection(P, m, x3)


def subtract(P: POINT, Q: POINT, curve: Curve) -> Construction:
    return add(P, negate(Q), curve)


def scalar_multiply(k: int, P: POINT, curve: Curve) -> POINT:
    """Double-and-add over the bits of k, least significant first.

    Non-integral k is truncated. Only the final point is returned, there is no
    single construction behind a scalar multiple.
    """
    assert isinstance(k, Real), 'Multiplication is only defined between a point and a number'
    if k < 0:
        return scalar_multiply(-k, negate(P), curve)
    if k == 0 or P.is_inf():
        return INF

    k = int(k)
    result = INF
    current = P
    bit = 0
    while k > 0:
        if k & 1:
            result = add(result, current, curve).result
        current = double(current, curve).result
        logger.debug("bit %d: result=%s, current=%s", bit, result, current)
        k >>= 1
        bit += 1
    return result


def construction_line(P: POINT, Q: POINT, curve: Curve) -> Optional[Line]:
    """The secant through P and Q, or the tangent at P when they are equal"""
    if P.is_inf() or Q.is_inf():
        return None
    if P.equals(Q):
        if is_zero(P.y, EPS_ADD):
            return Line.vertical(P.x)
        return Line.through(P, _tangent_slope(P, curve))
    if close(P.x, Q.x, EPS_ADD):
        return Line.vertical(P.x)
    return Line.through(P, _secant_slope(P, Q))


def reflection(construction: Construction) -> Optional[Tuple[Point, Point]]:
    """The (R', R) segment across the x axis, if there is one to draw"""
    r_prime, r = construction.intermediate, construction.result
    if r_prime is None or r_prime.is_inf() or r.is_inf():
        return None
    if not close(r_prime.x, r.x, EPS_SNAP):
        logger.warning(f"R'={r_prime} and R={r} do not share an x coordinate")
        return None
    # R' on the x axis reflects onto itself
    if r_prime.equals(r):
        return None
    return r_prime, r
