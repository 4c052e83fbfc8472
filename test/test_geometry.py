"""Polyline distances and arc length."""

import numpy
import pytest

from splinegen import builder
from splinegen import geometry
from splinegen import homogeneous


def test_cumulative_distances():
    points = [[0, 0], [3, 4], [3, 10]]
    numpy.testing.assert_allclose(geometry.cumulative_distances(points, unit=False), [0, 5, 11])
    numpy.testing.assert_allclose(geometry.cumulative_distances(points), [0, 5 / 11, 1])

def test_cumulative_distances_on_a_line():
    numpy.testing.assert_allclose(geometry.cumulative_distances([0, 2, 3], unit=False), [0, 2, 3])

def test_chord_length_knots():
    assert geometry.chord_length_knots([[0, 0], [3, 4], [3, 10]], domain=(0, 11)) == pytest.approx([0, 5, 11])
    assert geometry.chord_length_knots([[1, 1]], domain=(2, 3)) == [2]

def test_arc_length_of_segment():
    curve = builder.linear([[0, 0], [3, 4]])
    assert geometry.arc_length(curve) == pytest.approx(5)

def test_arc_length_of_circle(circle_nurbs_parameters):
    knots, points, weights = circle_nurbs_parameters
    curve = homogeneous.nurbs(knots, points, weights)
    assert geometry.arc_length(curve, 2000) == pytest.approx(2 * numpy.pi, rel=1e-5)
