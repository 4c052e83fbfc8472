"""Bezier curves evaluated with De Casteljau's algorithm."""

from . import base
from . import errors

def de_casteljau(points, t):
    """Evaluate the Bezier curve with the given control points at t.

    Parameters:
        points: sequence of n >= 1 control points; the curve has degree n-1.
        t: parameter; 0 and 1 give the first and last control point. Values
            outside of [0, 1] continue the same polynomial.

    The blend is convex for t in [0, 1] and merely affine outside of it, which
    is still exact polynomial extrapolation. A fresh working list is used for
    every call."""
    n = len(points)
    if n == 1:
        return points[0]
    work = list(points)
    for r in range(1, n):
        for i in range(n - r):
            work[i] = base.lerp(work[i], work[i+1], t)
    return work[0]


class Bezier(base.Curve):
    """Bezier curve of degree len(points)-1 over the given domain.

    Parameters:
        points: sequence of control points.
        domain: (start, end) parameter values mapped to the curve's first and
            last control point; (0, 1) by default.
    """
    def __init__(self, points, domain=(0, 1)):
        points = base.as_points(points)
        if len(points) < 1:
            raise errors.TooFewPointsError('Bezier curve', len(points), 1)
        start, end = domain
        if len(points) > 1 and not start < end:
            raise errors.KnotVectorError(f'The domain of a Bezier curve must have start < end, got [{start}, {end}].')
        self.points = points
        self._domain = (start, end)

    @property
    def degree(self):
        return len(self.points) - 1

    def domain(self):
        return self._domain

    def evaluate(self, t):
        start, end = self._domain
        if len(self.points) > 1:
            t = (t - start) / (end - start)
        return de_casteljau(self.points, t)
