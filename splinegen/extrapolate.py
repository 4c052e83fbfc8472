"""Strategies for evaluating a curve outside of its domain.

Each strategy has an apply(t, curve) method. Parameters inside of the domain
[t_min, t_max] are always passed to the curve unchanged; the strategies only
differ in what happens outside:
 - Clamp: evaluate at the nearest end of the domain.
 - Extrapolate: evaluate the curve at t anyway, continuing its end pieces.
 - Wrap: map t back into the domain, repeating the curve periodically.
 - Raise: raise OutOfDomainError.
"""

import warnings

from . import base
from . import errors

class Clamp:
    def apply(self, t, curve):
        start, end = curve.domain()
        if t < start:
            t = start
        elif t > end:
            t = end
        return curve.evaluate(t)

class Extrapolate:
    def apply(self, t, curve):
        return curve.evaluate(t)

class Wrap:
    def apply(self, t, curve):
        start, end = curve.domain()
        if start <= t <= end:
            return curve.evaluate(t)
        width = end - start
        if width == 0:
            return curve.evaluate(start)
        offset = (t - start) % width
        # decimal.Decimal keeps the sign of the dividend
        if offset < 0:
            offset += width
        return curve.evaluate(start + offset)

class Raise:
    def apply(self, t, curve):
        start, end = curve.domain()
        if not start <= t <= end:
            raise errors.OutOfDomainError(t, (start, end))
        return curve.evaluate(t)

STRATEGIES = {
    'clamp': Clamp,
    'extrapolate': Extrapolate,
    'wrap': Wrap,
    'error': Raise,
    'none': Raise,
}

def get_strategy(strategy):
    """Return a strategy instance given an instance or one of the names in STRATEGIES."""
    if isinstance(strategy, str):
        try:
            return STRATEGIES[strategy.lower()]()
        except KeyError:
            raise ValueError(f'Unknown extrapolation strategy "{strategy}": '
                f'use one of {", ".join(sorted(STRATEGIES))}.') from None
    if not hasattr(strategy, 'apply'):
        raise TypeError(f'{strategy!r} is not an extrapolation strategy.')
    return strategy


class Extrapolated(base.Curve):
    """Curve wrapper that routes every evaluation through an extrapolation strategy.

    The domain reported is still that of the wrapped curve."""
    def __init__(self, curve, strategy):
        self.curve = curve
        self.strategy = get_strategy(strategy)
        if isinstance(self.strategy, Extrapolate) and _has_unclamped_knots(curve):
            warnings.warn('Extrapolating a B-spline whose end knots are not clamped: the end polynomial '
                'pieces are continued, but the curve does not pass through its end control points.',
                RuntimeWarning, stacklevel=2)

    def domain(self):
        return self.curve.domain()

    def evaluate(self, t):
        return self.strategy.apply(t, self.curve)


def _has_unclamped_knots(curve):
    # look through wrappers (Rational, Extrapolated) for a knot vector
    while curve is not None:
        knot_vector = getattr(curve, 'knot_vector', None)
        if knot_vector is not None:
            return not knot_vector.is_clamped()
        curve = getattr(curve, 'inner', getattr(curve, 'curve', None))
    return False
