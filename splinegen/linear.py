import bisect

from . import base
from . import errors

class Linear(base.Curve):
    """Piecewise-linear interpolation of elements placed at the given knots.

    Parameters:
        knots: non-decreasing sequence of N parameter values.
        elements: sequence of N points (see base module for the contract).

    The domain is [knots[0], knots[-1]]. Outside of it the first or last
    segment is continued as a straight line. A knot value given twice
    produces a jump; at the jump the right-hand element is returned, except
    at the very end of the domain."""
    def __init__(self, knots, elements):
        elements = base.as_points(elements)
        knots = tuple(knots)
        n = len(elements)
        if n < 1:
            raise errors.TooFewPointsError('linear interpolation', n, 1)
        if len(knots) != n:
            raise errors.LengthMismatchError(f'{len(knots)} knots given for {n} elements: '
                'linear interpolation needs exactly one knot per element.')
        for i in range(1, n):
            if knots[i] < knots[i-1]:
                raise errors.KnotOrderError(i)
        if n > 1 and not knots[0] < knots[-1]:
            raise errors.KnotVectorError('All knots are equal, so the domain of the interpolation is empty.')
        self.knots = knots
        self.elements = elements
        if n > 1:
            self._first = next(i for i in range(n-1) if knots[i] < knots[i+1])
            self._last = next(i for i in range(n-2, -1, -1) if knots[i] < knots[i+1])

    def domain(self):
        return self.knots[0], self.knots[-1]

    def _segment(self, t):
        if t >= self.knots[-1]:
            return self._last
        i = bisect.bisect_right(self.knots, t) - 1
        if i < 0:
            return self._first
        return i

    def evaluate(self, t):
        if len(self.elements) == 1:
            return self.elements[0]
        i = self._segment(t)
        start, end = self.knots[i], self.knots[i+1]
        return base.lerp(self.elements[i], self.elements[i+1], (t - start) / (end - start))
