"""Conversion between B-spline curves and scipy.interpolate spline representations.

The tuple form (t, c, k) follows the convention of FITPACK-based code: t is
the full knot array, c the coefficients (shape (n,) for scalar splines and
(n, d) for parametric splines in d dimensions), and k the degree."""

import numpy
from scipy import interpolate

from . import bspline

def to_tck(spline):
    """Return the (t, c, k) tuple of a B-spline with numeric control points."""
    t = numpy.asarray(spline.knots, dtype=float)
    c = numpy.asarray(spline.points, dtype=float)
    return t, c, spline.degree

def from_tck(tck):
    """Build a B-spline from a (t, c, k) tuple.

    FITPACK pads the coefficient array to the length of the knot array; any
    coefficients beyond the len(t) - k - 1 that the knots support are dropped."""
    t, c, k = tck
    t = numpy.asarray(t, dtype=float)
    c = numpy.asarray(c, dtype=float)
    n = len(t) - k - 1
    return bspline.BSpline(t, c[:n], k)

def to_scipy(spline, extrapolate=True):
    """Return an equivalent scipy.interpolate.BSpline.

    With extrapolate=True, scipy continues the end polynomial pieces outside
    of the domain, as BSpline.evaluate does."""
    t, c, k = to_tck(spline)
    return interpolate.BSpline(t, c, k, extrapolate=extrapolate)
