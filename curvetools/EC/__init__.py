import logging
import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Union, Tuple, List, Optional, Sequence, Iterable

from curvetools.error import PointError
from curvetools.tolerance import EPS_SINGULAR, EPS_POINT, EPS_MEMBERSHIP, DISPLAY_PRECISION, is_zero, close

__all__ = ['AbstractPoint', 'Point', 'Infinity', 'INF', 'POINT', 'Curve']

logger = logging.getLogger(__name__)


def _format(n: float) -> str:
    return "0" if is_zero(n, EPS_POINT) else f"{n:.{DISPLAY_PRECISION}f}"


class AbstractPoint:
    """Common interface of finite points and the point at infinity"""

    __slots__ = ()

    # equality is approximate
    __hash__ = None

    def is_inf(self) -> bool:
        raise NotImplementedError

    def equals(self, other: 'AbstractPoint') -> bool:
        raise NotImplementedError

    def negate(self) -> 'AbstractPoint':
        raise NotImplementedError

    @property
    def coords(self) -> Tuple[float, float]:
        raise NotImplementedError

    def __eq__(self, other):
        if not isinstance(other, AbstractPoint):
            return NotImplemented
        return self.equals(other)

    def __neg__(self):
        return self.negate()


@dataclass(frozen=True, eq=False, repr=False)
class Point(AbstractPoint):
    """A finite point (x, y). It does not know which curve it belongs to."""
    x: float
    y: float

    def __post_init__(self):
        assert isinstance(self.x, Real) and isinstance(self.y, Real), f"Point coordinates must be real numbers, got {self.x!r}, {self.y!r}"
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    @classmethod
    def from_pair(cls, pair: Sequence[float]) -> 'Point':
        try:
            x, y = pair
            return cls(float(x), float(y))
        except (TypeError, ValueError):
            raise PointError(f'Expected an (x, y) pair of numbers, got {pair!r}')

    def is_inf(self) -> bool:
        return False

    def equals(self, other: AbstractPoint) -> bool:
        if other.is_inf():
            return False
        return close(self.x, other.x, EPS_POINT) and close(self.y, other.y, EPS_POINT)

    def negate(self) -> 'Point':
        return Point(self.x, -self.y)

    @property
    def coords(self) -> Tuple[float, float]:
        return self.x, self.y

    def __getitem__(self, index):
        return (self.x, self.y)[index]

    def __str__(self):
        return f"({_format(self.x)}, {_format(self.y)})"

    def __repr__(self):
        return f"Point({self.x}, {self.y})"


class Infinity(AbstractPoint):
    """The point at infinity O, identity element of the group law"""

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_inf(self) -> bool:
        return True

    def equals(self, other: AbstractPoint) -> bool:
        return other.is_inf()

    def negate(self) -> 'Infinity':
        return self

    @property
    def coords(self):
        raise PointError('The point at infinity has no coordinates')

    def __str__(self):
        return "O"

    def __repr__(self):
        return "INF"


INF = Infinity()
assert INF.is_inf()
POINT = Union[Point, Infinity]


@dataclass(frozen=True)
class Curve:
    """The real curve y^2 = x^3 + ax + b in short Weierstrass form.

    Singular parameters are accepted; the discriminant is exposed so that the
    caller can decide what to do about them.
    """
    a: float
    b: float
    discriminant: float = field(init=False)

    def __post_init__(self):
        assert isinstance(self.a, Real) and isinstance(self.b, Real), f"Curve parameters must be real numbers, got {self.a!r}, {self.b!r}"
        object.__setattr__(self, 'a', float(self.a))
        object.__setattr__(self, 'b', float(self.b))
        object.__setattr__(self, 'discriminant', -16 * (4 * self.a * self.a * self.a + 27 * self.b * self.b))

        if self.is_singular:
            logger.warning(f"Curve {self} might be singular (discriminant = {self.discriminant:.4f})")

    @property
    def is_smooth(self) -> bool:
        return not is_zero(self.discriminant, EPS_SINGULAR)

    @property
    def is_singular(self) -> bool:
        return not self.is_smooth

    def f(self, x: float) -> float:
        """Compute x^3 + ax + b, the value y^2 must take at x"""
        return x * x * x + self.a * x + self.b

    def is_point_on_curve(self, point: POINT) -> bool:
        if point.is_inf():
            return True
        return is_zero(point.y * point.y - self.f(point.x), EPS_MEMBERSHIP)

    def __contains__(self, point: POINT):
        assert isinstance(point, AbstractPoint), 'Membership is only defined for points'
        return self.is_point_on_curve(point)

    def y_values(self, x: float) -> Tuple[float, ...]:
        """Real solutions of y^2 = f(x), upper branch first.

        Returns () where the curve has no point above x, (0.0,) where it
        touches the x axis and (sqrt(f(x)), -sqrt(f(x))) otherwise.
        """
        ysq = self.f(x)
        if ysq < 0:
            return ()
        if is_zero(ysq, EPS_SINGULAR):
            return (0.0,)
        y = math.sqrt(ysq)
        return y, -y

    def nearest_point(self, x: float, y: float) -> Optional[Point]:
        """Snap a picked position (x, y) onto the curve branch above x closest to y"""
        ys = self.y_values(x)
        if not ys:
            return None
        if len(ys) == 1:
            return Point(x, ys[0])
        upper, lower = ys
        return Point(x, upper if abs(y - upper) <= abs(y - lower) else lower)

    @staticmethod
    def linspace(x_min: float, x_max: float, n: int) -> List[float]:
        assert n >= 2, 'At least two samples are needed'
        step = (x_max - x_min) / (n - 1)
        return [x_min + i * step for i in range(n)]

    def trace(self, xs: Iterable[float]) -> Tuple[List[List[Point]], List[List[Point]]]:
        """Sample both branches of the curve over xs.

        Returns (upper, lower), each a list of polylines. A sample without a
        real point starts a new polyline, which separates the bounded oval
        from the unbounded component. Where the curve touches the x axis the
        lower branch uses y = 0.
        """
        upper = []
        lower = []
        gap = True
        for x in xs:
            ys = self.y_values(x)
            if not ys:
                gap = True
                continue
            if gap:
                upper.append([])
                lower.append([])
                gap = False
            upper[-1].append(Point(x, ys[0]))
            lower[-1].append(Point(x, ys[-1]))
        return upper, lower

    def point_add(self, P1: POINT, P2: POINT) -> POINT:
        from curvetools.EC.operations import add
        return add(P1, P2, self).result

    def point_double(self, P: POINT) -> POINT:
        from curvetools.EC.operations import double
        return double(P, self).result

    def point_mul(self, P: POINT, k: int) -> POINT:
        from curvetools.EC.operations import scalar_multiply
        return scalar_multiply(k, P, self)

    def __str__(self):
        return f'y^2 = x^3 + {self.a}x + {self.b}'
