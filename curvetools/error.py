class CurveError(Exception):
    def __init__(self, message, *points):
        super().__init__(message, *points)
        self.message = message
        self.points = points

    def __str__(self):
        return self.message


class DegenerateConstruction(CurveError):
    """The chord or tangent could not be built from the given points.

    Only reachable with points that do not lie on the same curve. It is
    attached to the returned Construction instead of being raised.
    """
    pass


class PointError(CurveError):
    pass
