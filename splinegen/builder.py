"""Build curves from control points, knots, weights and a degree.

build() is the single entry point; linear(), bezier(), bspline() and nurbs()
are shortcuts for the individual curve kinds. All of them either return a
finished curve or raise a ConstructionError subclass (see the errors module):
 - TooFewPointsError: no control points were given.
 - LengthMismatchError / KnotLengthError: the numbers of knots, weights and
   points do not fit together.
 - KnotOrderError: the knots are not non-decreasing.
 - KnotMultiplicityError: a knot is repeated more than degree + 1 times.
 - DegenerateWeightError: a weight is zero (or negative).
 - DegreeTooHighError: the degree needs more control points than given.

Example:
    curve = builder.bspline([[0, 0], [1, 2], [3, 2], [4, 0]], degree=2, extrapolation='clamp')
    curve.evaluate(0.5)
"""

from . import base
from . import bezier as bezier_module
from . import bspline as bspline_module
from . import errors
from . import extrapolate
from . import geometry
from . import homogeneous
from . import knots as knots_module
from . import linear as linear_module

KINDS = ('linear', 'bezier', 'bspline')
DEFAULT_DOMAIN = (0, 1)
DEFAULT_MODE = 'legacy'

def default_degree(num_points):
    """Degree used for a B-spline if neither degree nor knots are given: 1 if
    there are two or three points, otherwise 3 (0 for a single point)."""
    if num_points < 2:
        return 0
    if num_points < 4:
        return 1
    return 3

def build(points, knots=None, weights=None, degree=None, kind=None, mode=DEFAULT_MODE,
        domain=None, extrapolation=None, quantity=None):
    """Construct a curve.

    Parameters:
        points: control points (see the base module for the point contract).
        knots: for 'linear', one knot per point (or 'chord' for knots spaced
            by the distances between the points); for 'bspline', a knot
            vector written according to 'mode' (see the knots module). If
            None, equidistant knots spanning 'domain' are used (see
            knots.uniform for how 'mode' shapes them).
        weights: if not None, one positive weight per point, making the
            curve rational.
        degree: curve degree. For 'bspline', None means derived from the
            knots or from 'quantity', or default_degree() if neither is given.
            For 'bezier' it must be None or len(points) - 1, and for 'linear'
            None or 1.
        kind: 'linear', 'bezier' or 'bspline'. If None, 'bspline' is chosen
            when knots, degree or quantity are given and 'bezier' otherwise.
        mode: 'legacy', 'open' or 'clamped': how the B-spline knots are written.
        domain: (start, end) of the parameter range when knots are not given
            explicitly; DEFAULT_DOMAIN if None.
        extrapolation: None to return the bare curve, or a strategy (name or
            instance, see the extrapolate module) to wrap it with.
        quantity: for 'bspline' without explicit knots, the number of
            equidistant knots (written according to 'mode') instead of the
            degree.

    Returns: a curve object providing evaluate(t) and domain().
    """
    points = base.as_points(points)
    if kind is None:
        if isinstance(knots, str):
            kind = 'linear'
        elif knots is not None or degree is not None or quantity is not None:
            kind = 'bspline'
        else:
            kind = 'bezier'
    if kind not in KINDS:
        raise ValueError(f'Curve kind must be one of {", ".join(KINDS)}, not "{kind}".')
    if len(points) < 1:
        raise errors.TooFewPointsError(f'{kind} curve', len(points), 1)
    if isinstance(knots, str) and kind != 'linear':
        raise errors.ConstructionError(f'The knot parameterization "{knots}" is only available '
            f'for linear curves, not for a {kind} curve.')
    if quantity is not None:
        if kind != 'bspline':
            raise errors.ConstructionError(f'A knot quantity can only be given for B-splines, not for a {kind} curve.')
        if knots is not None or degree is not None:
            raise errors.ConstructionError('A knot quantity cannot be combined with knots or a degree.')
    if domain is None:
        domain = DEFAULT_DOMAIN
    elements = points if weights is None else homogeneous.lift_points(points, weights)

    if kind == 'linear':
        if degree is not None and degree != 1:
            raise errors.ConstructionError(f'Linear interpolation has degree 1, not {degree}.')
        if knots is None:
            knots = knots_module.equidistant(len(points), *domain)
        elif isinstance(knots, str):
            if knots != 'chord':
                raise ValueError(f'Unknown knot parameterization "{knots}".')
            knots = geometry.chord_length_knots(points, domain)
        curve = linear_module.Linear(knots, elements)
    elif kind == 'bezier':
        if knots is not None:
            raise errors.ConstructionError('Bezier curves take a domain, not knots.')
        if degree is not None and degree != len(points) - 1:
            if degree > len(points) - 1:
                raise errors.DegreeTooHighError(degree, len(points))
            raise errors.ConstructionError(f'A Bezier curve with {len(points)} points has degree '
                f'{len(points)-1}, not {degree}.')
        curve = bezier_module.Bezier(elements, domain)
    else:
        if knots is None:
            if quantity is not None:
                degree = knots_module.degree_from_quantity(quantity, len(points), mode)
            elif degree is None:
                degree = default_degree(len(points))
            full = knots_module.uniform(len(points), degree, mode, domain)
        else:
            full, degree = knots_module.full_knots(knots, len(points), degree, mode)
        curve = bspline_module.BSpline(full, elements, degree)

    if weights is not None:
        curve = homogeneous.Rational(curve)
    if extrapolation is not None:
        curve = extrapolate.Extrapolated(curve, extrapolation)
    return curve

def linear(points, knots=None, domain=None, weights=None, extrapolation=None):
    return build(points, knots=knots, weights=weights, kind='linear', domain=domain,
        extrapolation=extrapolation)

def bezier(points, domain=None, weights=None, extrapolation=None):
    return build(points, weights=weights, kind='bezier', domain=domain, extrapolation=extrapolation)

def bspline(points, knots=None, degree=None, mode=DEFAULT_MODE, domain=None, weights=None,
        extrapolation=None, quantity=None):
    return build(points, knots=knots, weights=weights, degree=degree, kind='bspline', mode=mode,
        domain=domain, extrapolation=extrapolation, quantity=quantity)

def nurbs(points, weights, knots=None, degree=None, mode=DEFAULT_MODE, domain=None, extrapolation=None,
        quantity=None):
    """Shortcut for a rational B-spline: bspline() with weights required."""
    return bspline(points, knots=knots, degree=degree, mode=mode, domain=domain, weights=weights,
        extrapolation=extrapolation, quantity=quantity)
