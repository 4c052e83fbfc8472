"""Shared curve interface and the capability contracts for points and scalars.

Scalars (parameters, knots, weights) must order, add, subtract, multiply and
divide, and mix with the integers 0 and 1: float, numpy floating types,
fractions.Fraction and decimal.Decimal all qualify.

Points (control points and results) must support point + point and
point * scalar, with the scalar on the right. Python numbers and numpy arrays
qualify, as does any user type (e.g. a color class) providing __add__ and
__mul__. Nothing is checked at runtime: a type that does not meet the contract
fails with the usual TypeError at the first blend.
"""

import numpy

def as_points(points):
    """Return the control points as an immutable tuple.

    A numpy array, or a sequence of numpy arrays or lists/tuples of numbers,
    is copied into a read-only float array and split into rows (or scalars,
    for 1-d input), so that callers mutating their input afterwards cannot
    alter a curve. Any other sequence is kept element by element as given;
    such points (numbers or user types) must not be mutated by the caller."""
    if isinstance(points, numpy.ndarray):
        array = numpy.array(points, dtype=float)
    else:
        points = list(points)
        if not points or not all(isinstance(p, (list, tuple, numpy.ndarray)) for p in points):
            return tuple(points)
        array = numpy.array(points, dtype=float)
    array.setflags(write=False)
    return tuple(array)

def lerp(a, b, t):
    """Affine blend of two points: a at t=0, b at t=1."""
    return a * (1 - t) + b * t


class Curve:
    """Uniform 'evaluate at parameter' interface shared by every curve and wrapper.

    Subclasses provide evaluate(t) and domain(); everything else is derived.
    Instances are immutable and evaluation keeps no state between calls, so a
    single curve can be evaluated from many threads at once."""

    def evaluate(self, t):
        raise NotImplementedError()

    def domain(self):
        """Return (t_min, t_max), the parameter range the curve is defined over."""
        raise NotImplementedError()

    def __call__(self, t):
        return self.evaluate(t)

    def evaluate_sequence(self, parameters):
        """Return a lazy iterable of the curve evaluated at each parameter.

        Each iteration starts over from the beginning of 'parameters', so the
        result can be consumed repeatedly as long as 'parameters' itself is a
        collection (rather than a one-shot iterator)."""
        return Evaluations(self, parameters)

    def sample(self, num_points):
        """Return num_points evaluations equally spaced across the domain.

        Returns an array of shape (num_points,) for scalar curves or
        (num_points, d) for curves with d-dimensional array points."""
        start, end = self.domain()
        positions = numpy.linspace(float(start), float(end), num_points)
        return numpy.array([self.evaluate(t) for t in positions])

    def chain(self, other):
        return Chain(self, other)

    def extrapolated(self, strategy):
        """Wrap the curve so that parameters outside of its domain are handled
        by the given extrapolation strategy (an instance or a name: 'clamp',
        'extrapolate', 'wrap' or 'error')."""
        from . import extrapolate
        return extrapolate.Extrapolated(self, strategy)


class Evaluations:
    def __init__(self, curve, parameters):
        self.curve = curve
        self.parameters = parameters

    def __iter__(self):
        evaluate = self.curve.evaluate
        for t in self.parameters:
            yield evaluate(t)


class Chain(Curve):
    """Feed the output of one curve into another as its parameter.

    The domain is that of the first curve; typically the first curve is a
    scalar easing or reparameterization of the second."""
    def __init__(self, first, second):
        self.first = first
        self.second = second

    def evaluate(self, t):
        return self.second.evaluate(self.first.evaluate(t))

    def domain(self):
        return self.first.domain()


class Stack(Curve):
    """Combine several curves into one whose points are the concatenation of
    the individual outputs at the same parameter, e.g. three scalar curves
    into one 3-d curve."""
    def __init__(self, *curves):
        if not curves:
            raise ValueError('At least one curve is required.')
        self.curves = curves

    def evaluate(self, t):
        return numpy.hstack([curve.evaluate(t) for curve in self.curves])

    def domain(self):
        domains = [curve.domain() for curve in self.curves]
        return max(d[0] for d in domains), min(d[1] for d in domains)
