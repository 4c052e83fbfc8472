"""B-spline curves evaluated with De Boor's algorithm.

A B-spline of degree d with N control points and the knot vector t (N + d + 1
knots, see the knots module) is a piecewise polynomial over [t[d], t[N]].
Each evaluation blends the d+1 control points that influence the knot span
containing the parameter. Parameters outside of the domain use the first or
last span, i.e. the end polynomial pieces are continued; use the extrapolate
module for other behaviors.

A Bezier curve of degree d is the B-spline with the knot vector
[a]*(d+1) + [b]*(d+1), and both evaluate to the same points.
"""

import bisect

from . import base
from . import bezier
from . import errors
from . import knots as knots_module

def de_boor(knots, points, degree, span, t):
    """Evaluate a B-spline at t, given the span k with knots[k] <= t < knots[k+1].

    Parameters:
        knots: full knot vector.
        points: control points.
        degree: degree d of the curve.
        span: index k of the knot span to use (degree <= k < len(points)).
        t: parameter value.

    Where two knots of a blend coincide the blending factor is taken as 0, so
    the lower-index point carries through unchanged."""
    d = degree
    work = [points[span - d + j] for j in range(d + 1)]
    for r in range(1, d + 1):
        for j in range(d, r - 1, -1):
            left = knots[span - d + j]
            right = knots[span + 1 + j - r]
            if right == left:
                alpha = 0
            else:
                alpha = (t - left) / (right - left)
            work[j] = base.lerp(work[j-1], work[j], alpha)
    return work[d]


class BSpline(base.Curve):
    """B-spline curve over a full knot vector.

    Parameters:
        knots: full, non-decreasing knot vector of len(points) + degree + 1 values.
        points: control points (see the base module for the point contract).
        degree: degree of the curve. If None, it is derived from the number of
            knots and points.

    Raises a ConstructionError subclass if the knots, degree and points do not
    fit together."""
    def __init__(self, knots, points, degree=None):
        points = base.as_points(points)
        if degree is None:
            degree = len(knots) - len(points) - 1
        self.knot_vector = knots_module.KnotVector(knots, degree, len(points))
        self.points = points

    @property
    def knots(self):
        return self.knot_vector.knots

    @property
    def degree(self):
        return self.knot_vector.degree

    def domain(self):
        return self.knot_vector.domain()

    def evaluate(self, t):
        span = self.knot_vector.find_span(t)
        return de_boor(self.knot_vector.knots, self.points, self.degree, span, t)

    def insert_knot(self, u, times=1):
        """Return an equivalent B-spline with the knot u inserted 'times' times.

        Every insertion adds one control point without changing the shape of
        the curve (Boehm's algorithm). u must lie in [t_min, t_max) and its
        multiplicity may not exceed degree + 1 afterwards."""
        start, end = self.domain()
        if not start <= u < end:
            raise ValueError(f'Knots can only be inserted in [{start}, {end}), not at {u}.')
        multiplicity = self.knot_vector.multiplicity(u)
        if multiplicity + times > self.degree + 1:
            raise errors.KnotMultiplicityError(u, multiplicity + times, self.degree)
        knots, points = list(self.knots), list(self.points)
        for _ in range(times):
            knots, points = _insert_once(knots, points, self.degree, u)
        return BSpline(knots, points, self.degree)

    def to_bezier(self):
        """Convert a clamped B-spline into the sequence of Bezier curves of the
        same degree that it is made of.

        Returns a list of Bezier curves, one per non-empty knot span, each with
        the span as its domain."""
        if not self.knot_vector.is_clamped():
            raise ValueError('Only clamped B-splines can be converted to Bezier curves.')
        d = self.degree
        start, end = self.domain()
        spline = self
        # raising every interior knot to multiplicity d+1 removes all continuity
        # constraints between the spans, leaving independent groups of d+1 points
        breakpoints = sorted(set(k for k in self.knots if start < k < end))
        for u in breakpoints:
            missing = d + 1 - spline.knot_vector.multiplicity(u)
            if missing:
                spline = spline.insert_knot(u, missing)
        bounds = [start] + breakpoints + [end]
        points = spline.points
        return [bezier.Bezier(points[i*(d+1):(i+1)*(d+1)], domain=(bounds[i], bounds[i+1]))
            for i in range(len(bounds) - 1)]


def _insert_once(knots, points, degree, u):
    d = degree
    k = bisect.bisect_right(knots, u) - 1
    new_points = points[:k-d+1]
    for i in range(k - d + 1, k + 1):
        alpha = (u - knots[i]) / (knots[i+d] - knots[i])
        new_points.append(base.lerp(points[i-1], points[i], alpha))
    new_points.extend(points[k:])
    return knots[:k+1] + [u] + knots[k+1:], new_points
