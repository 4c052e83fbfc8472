"""Rational curves via homogeneous coordinates.

A rational curve (e.g. a NURBS) weights each control point P_i by w_i. It is
evaluated by blending the lifted points (w_i * P_i, w_i) with the ordinary
algorithm of the underlying curve and dividing the blended point by the
blended weight at the end (the perspective divide).

Only positive weights are accepted: a convex blend of positive weights is
positive, so the divide can never fail for parameters inside the domain.
"""

from . import base
from . import bezier
from . import bspline
from . import errors

class Homogeneous:
    """A point in homogeneous coordinates: the weighted point and its weight.

    Closed under addition and multiplication by a scalar, so it satisfies the
    point contract of the base module and can be blended like any point."""
    __slots__ = ('rational', 'weight')

    def __init__(self, rational, weight):
        self.rational = rational
        self.weight = weight

    @classmethod
    def lift(cls, point, weight):
        return cls(point * weight, weight)

    def __add__(self, other):
        return Homogeneous(self.rational + other.rational, self.weight + other.weight)

    def __mul__(self, scalar):
        return Homogeneous(self.rational * scalar, self.weight * scalar)

    def project(self):
        """Return the point in ordinary coordinates."""
        return self.rational * (1 / self.weight)

    def __repr__(self):
        return f'Homogeneous({self.rational!r}, {self.weight!r})'


def lift_points(points, weights):
    """Pair control points with their weights as Homogeneous points.

    Raises LengthMismatchError if the counts differ and DegenerateWeightError
    for any weight that is not positive."""
    points = base.as_points(points)
    weights = tuple(weights)
    if len(points) != len(weights):
        raise errors.LengthMismatchError(f'{len(weights)} weights given for {len(points)} points: '
            'a rational curve needs exactly one weight per point.')
    for i, weight in enumerate(weights):
        if not weight > 0:
            raise errors.DegenerateWeightError(i, weight)
    return tuple(Homogeneous.lift(point, weight) for point, weight in zip(points, weights))


class Rational(base.Curve):
    """Wrap a curve over Homogeneous points and project its output.

    The wrapped curve keeps its own domain and parameter handling; this class
    only performs the perspective divide after each evaluation."""
    def __init__(self, inner):
        self.inner = inner

    def domain(self):
        return self.inner.domain()

    def evaluate(self, t):
        return self.inner.evaluate(t).project()

    def _lifted(self):
        # Linear keeps its points as 'elements'
        lifted = getattr(self.inner, 'points', None)
        if lifted is None:
            lifted = self.inner.elements
        return lifted

    def control_points(self):
        """Return the control points of the wrapped curve, without weights."""
        return [point.project() for point in self._lifted()]

    def weights(self):
        return [point.weight for point in self._lifted()]

    def insert_knot(self, u, times=1):
        if not hasattr(self.inner, 'insert_knot'):
            raise TypeError(f'Knots can only be inserted into rational B-splines, not into {type(self.inner).__name__} curves.')
        return Rational(self.inner.insert_knot(u, times))

    def to_bezier(self):
        if not hasattr(self.inner, 'to_bezier'):
            raise TypeError(f'Only rational B-splines can be split into Bezier curves, not {type(self.inner).__name__} curves.')
        return [Rational(segment) for segment in self.inner.to_bezier()]


def rational_bezier(points, weights, domain=(0, 1)):
    return Rational(bezier.Bezier(lift_points(points, weights), domain))

def nurbs(knots, points, weights, degree=None):
    """Return a non-uniform rational B-spline.

    Parameters:
        knots: full knot vector (see knots module).
        points: control points.
        weights: one positive weight per control point.
        degree: degree of the curve, or None to derive it from the knots.
    """
    return Rational(bspline.BSpline(knots, lift_points(points, weights), degree))
