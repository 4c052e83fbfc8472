"""Knot vectors for B-spline curves.

A B-spline of degree d over N control points needs N + d + 1 non-decreasing
knots. The curve is defined over [knot[d], knot[N]] (0-based indices); knots
outside of that range only shape the blending near the ends of the domain.

Three ways of writing the knots are understood when building a curve:
 - 'legacy': the full vector of N + d + 1 knots, as above.
 - 'open': the full vector without its first and last knot (N + d - 1 knots).
   Those two knots never take part in an evaluation, so they are redundant.
 - 'clamped': only the breakpoints (N - d + 1 knots). The first and last
   breakpoint are repeated to multiplicity d + 1, so that the curve starts at
   its first control point and ends at its last.
"""

import bisect
import numpy

from . import errors

MODES = ('legacy', 'open', 'clamped')

class KnotVector:
    """Validated knot vector for a curve of the given degree and number of
    control points.

    Raises TooFewPointsError, DegreeTooHighError or a KnotVectorError subclass
    if the knots cannot describe such a curve."""
    def __init__(self, knots, degree, num_points):
        knots = tuple(knots.tolist() if isinstance(knots, numpy.ndarray) else knots)
        if num_points < 1:
            raise errors.TooFewPointsError('B-spline', num_points, 1)
        if degree < 0:
            raise errors.ConstructionError(f'The degree of a curve cannot be negative, got {degree}.')
        if degree >= num_points:
            raise errors.DegreeTooHighError(degree, num_points)
        expected = num_points + degree + 1
        if len(knots) != expected:
            raise errors.KnotLengthError(len(knots), expected)
        for i in range(1, len(knots)):
            if knots[i] < knots[i-1]:
                raise errors.KnotOrderError(i)
        for value, run in _runs(knots):
            if run > degree + 1:
                raise errors.KnotMultiplicityError(value, run, degree)
        if not knots[degree] < knots[num_points]:
            raise errors.KnotVectorError(f'The domain [{knots[degree]}, {knots[num_points]}] defined by the knots is empty.')
        self.knots = knots
        self.degree = degree
        self.num_points = num_points
        # first and last spans of non-zero width inside of the domain
        self._first_span = next(k for k in range(degree, num_points) if knots[k] < knots[k+1])
        self._last_span = next(k for k in range(num_points-1, degree-1, -1) if knots[k] < knots[k+1])

    def __len__(self):
        return len(self.knots)

    def __getitem__(self, i):
        return self.knots[i]

    def __iter__(self):
        return iter(self.knots)

    def __repr__(self):
        return f'KnotVector({list(self.knots)!r}, degree={self.degree}, num_points={self.num_points})'

    def domain(self):
        return self.knots[self.degree], self.knots[self.num_points]

    def find_span(self, t):
        """Return the index k of the knot interval with knot[k] <= t < knot[k+1].

        Only spans inside the domain are considered, i.e. degree <= k < N.
        When several knots equal t, the highest such span is chosen. The upper
        end of the domain, and anything beyond it, belongs to the last span of
        non-zero width; anything below the domain belongs to the first."""
        d, n = self.degree, self.num_points
        if t >= self.knots[n]:
            return self._last_span
        position = bisect.bisect_right(self.knots, t, d, n)
        if position == d:
            return self._first_span
        return position - 1

    def multiplicity(self, value):
        """Return the number of knots equal to value."""
        return sum(1 for k in self.knots if k == value)

    def is_clamped(self):
        """True if both ends of the domain have multiplicity degree + 1, which
        makes the curve start and end at its first and last control point."""
        d, n = self.degree, self.num_points
        start, end = self.domain()
        return all(k == start for k in self.knots[:d+1]) and all(k == end for k in self.knots[n:])


def _runs(knots):
    run = 1
    for i in range(1, len(knots) + 1):
        if i < len(knots) and knots[i] == knots[i-1]:
            run += 1
        else:
            yield knots[i-1], run
            run = 1

def full_knots(knots, num_points, degree=None, mode='legacy'):
    """Convert knots given in one of the MODES into a full knot vector.

    Parameters:
        knots: sequence of knot values.
        num_points: number of control points of the curve.
        degree: degree of the curve, or None to derive it from the number of
            knots and control points.
        mode: 'legacy', 'open' or 'clamped' (see module docstring).

    Returns: (full_knots, degree)
    """
    knots = list(knots)
    m = len(knots)
    if degree is not None and degree < 0:
        raise errors.ConstructionError(f'The degree of a curve cannot be negative, got {degree}.')
    if mode == 'legacy':
        if degree is None:
            degree = m - num_points - 1
        expected = num_points + degree + 1
    elif mode == 'open':
        if degree is None:
            degree = m - num_points + 1
        expected = num_points + degree - 1
    elif mode == 'clamped':
        if degree is None:
            degree = num_points - m + 1
        expected = num_points - degree + 1
    else:
        raise ValueError(f'Knot mode must be one of {", ".join(MODES)}, not "{mode}".')
    if num_points < 1:
        raise errors.TooFewPointsError('B-spline', num_points, 1)
    if degree < 0 or expected < 1:
        raise errors.KnotLengthError(m, f'a number matching {num_points} control points')
    if m != expected:
        raise errors.KnotLengthError(m, expected)
    if mode == 'open':
        knots = knots[:1] + knots + knots[-1:]
    elif mode == 'clamped':
        knots = clamp_knots(knots, degree)
    return knots, degree

def clamp_knots(breakpoints, degree):
    """Repeat the first and last breakpoint degree more times."""
    breakpoints = list(breakpoints)
    return breakpoints[:1] * degree + breakpoints + breakpoints[-1:] * degree

def equidistant(count, start=0, end=1):
    """Return count equally-spaced knots from start to end (inclusive)."""
    return numpy.linspace(start, end, count).tolist()

def equidistant_step(count, start, step):
    """Return count knots beginning at start, each step apart."""
    return [start + i * step for i in range(count)]

def open_uniform(num_points, degree, domain=(0, 1)):
    """Return a clamped, uniformly spaced full knot vector for num_points
    control points and the given degree, spanning the given domain."""
    if degree >= num_points:
        raise errors.DegreeTooHighError(degree, num_points)
    return clamp_knots(equidistant(num_points - degree + 1, *domain), degree)

def uniform(num_points, degree, mode='legacy', domain=(0, 1)):
    """Return a full knot vector of equally-spaced knots.

    In 'legacy' and 'clamped' mode this is the clamped vector of open_uniform(),
    and the curve is defined over the whole domain. In 'open' mode the
    num_points + degree - 1 knots of the open writing are spread evenly from
    domain[0] to domain[1] and none of them is repeated, so the curve is
    defined only over the inner part [knot[degree], knot[num_points]] of the
    full vector. Open uniform knots need a degree of at least 1."""
    if mode not in MODES:
        raise ValueError(f'Knot mode must be one of {", ".join(MODES)}, not "{mode}".')
    if mode != 'open':
        return open_uniform(num_points, degree, domain)
    if degree >= num_points:
        raise errors.DegreeTooHighError(degree, num_points)
    if degree < 1:
        raise errors.ConstructionError(f'Equidistant knots in open mode need a degree of at least 1, got {degree}.')
    knots, degree = full_knots(equidistant(num_points + degree - 1, *domain), num_points, degree, 'open')
    return knots

def degree_from_quantity(quantity, num_points, mode='legacy'):
    """Return the degree of a curve over num_points control points whose knot
    vector, written in the given mode, has 'quantity' knots."""
    if mode == 'legacy':
        degree = quantity - num_points - 1
    elif mode == 'open':
        degree = quantity - num_points + 1
    elif mode == 'clamped':
        degree = num_points - quantity + 1
    else:
        raise ValueError(f'Knot mode must be one of {", ".join(MODES)}, not "{mode}".')
    if degree < 0:
        raise errors.KnotLengthError(quantity, f'a number matching {num_points} control points')
    return degree
