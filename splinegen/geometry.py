import numpy

def _as_polyline(points):
    points = numpy.asarray(points, dtype=float)
    if points.ndim == 1:
        points = points[:, numpy.newaxis]
    return points

def cumulative_distances(points, unit=True):
    """Return cumulative distances along a polyline.

    Parameters:
    points: array of shape (n,m) consisting of n points in m dimensions, or of
          shape (n) for points on a line.
    unit: if True, return distances divided by total length of the curve,
          if False, return actual arc lengths."""
    points = _as_polyline(points)
    distances = numpy.concatenate([[0], numpy.add.accumulate(numpy.sqrt(((points[:-1] - points[1:])**2).sum(axis=1)))])
    if unit and distances[-1] > 0:
        distances /= distances[-1]
    return distances

def chord_length_knots(points, domain=(0, 1)):
    """Return one knot per point, spaced in proportion to the distances
    between consecutive points and spanning the given domain.

    Used as knots for a linear interpolation, this makes the parameter
    advance at a roughly constant speed along the polyline."""
    start, end = domain
    if len(points) == 1:
        return [start]
    return (start + cumulative_distances(points, unit=True) * (end - start)).tolist()

def arc_length(curve, num_points=None):
    """Approximate the arc-length of a curve by evaluating it at num_points
    positions across its domain and calculating the length of the resulting
    polyline. If num_points is None, 100 positions are used."""
    if num_points is None:
        num_points = 100
    points = _as_polyline(curve.sample(num_points))
    return numpy.sqrt(((points[:-1] - points[1:])**2).sum(axis=1)).sum()
