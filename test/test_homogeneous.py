"""Rational curves in homogeneous coordinates."""

import math

import numpy
import pytest

from splinegen import bezier
from splinegen import bspline
from splinegen import builder
from splinegen import errors
from splinegen import homogeneous
from splinegen import knots


class TestHomogeneous:
    def test_lift_and_project(self):
        point = homogeneous.Homogeneous.lift(2.0, 4)
        assert point.rational == 8.0
        assert point.weight == 4
        assert point.project() == 2.0

    def test_arithmetic(self):
        a = homogeneous.Homogeneous.lift(numpy.array([1.0, 2.0]), 2.0)
        b = homogeneous.Homogeneous.lift(numpy.array([3.0, 4.0]), 1.0)
        blended = a * 0.5 + b * 0.5
        numpy.testing.assert_allclose(blended.rational, [2.5, 4.0])
        assert blended.weight == 1.5


class TestLiftPoints:
    def test_zero_weight(self):
        with pytest.raises(errors.DegenerateWeightError) as excinfo:
            homogeneous.lift_points([0.0, 1.0, 2.0], [1.0, 0.0, 1.0])
        assert excinfo.value.index == 1
        assert isinstance(excinfo.value, errors.ConstructionError)

    def test_negative_weight(self):
        with pytest.raises(errors.DegenerateWeightError):
            homogeneous.lift_points([0.0, 1.0], [1.0, -2.0])

    def test_count_mismatch(self):
        with pytest.raises(errors.LengthMismatchError):
            homogeneous.lift_points([0.0, 1.0, 2.0], [1.0, 1.0])


class TestRational:
    def test_weight_one_reduces_to_bspline(self, six_points):
        full = knots.open_uniform(6, 3)
        plain = bspline.BSpline(full, six_points)
        rational = homogeneous.nurbs(full, six_points, [1.0] * 6)
        for t in numpy.linspace(0, 1, 50):
            numpy.testing.assert_array_equal(rational.evaluate(t), plain.evaluate(t))

    def test_weight_one_reduces_to_bezier(self, cubic_points):
        plain = bezier.Bezier(cubic_points)
        rational = homogeneous.rational_bezier(cubic_points, [1, 1, 1, 1])
        for t in numpy.linspace(0, 1, 50):
            numpy.testing.assert_array_equal(rational.evaluate(t), plain.evaluate(t))

    def test_quarter_circle(self):
        points = [[1, 0], [1, 1], [0, 1]]
        weights = [1, math.sqrt(2) / 2, 1]
        for curve in [homogeneous.rational_bezier(points, weights),
                homogeneous.nurbs([0, 0, 0, 1, 1, 1], points, weights)]:
            samples = numpy.array([curve.evaluate(t) for t in numpy.linspace(0, 1, 30)])
            numpy.testing.assert_allclose(numpy.linalg.norm(samples, axis=1), 1, rtol=1e-12)

    def test_full_circle(self, circle_nurbs_parameters):
        knot_values, points, weights = circle_nurbs_parameters
        curve = homogeneous.nurbs(knot_values, points, weights)
        assert curve.domain() == (0, 1)
        samples = curve.sample(200)
        numpy.testing.assert_allclose(numpy.linalg.norm(samples, axis=1), 1, rtol=1e-12)
        numpy.testing.assert_allclose(curve.evaluate(0.25), [0, 1], atol=1e-12)
        numpy.testing.assert_allclose(curve.evaluate(0.5), [-1, 0], atol=1e-12)

    def test_weights_pull_towards_point(self):
        light = homogeneous.rational_bezier([0.0, 1.0, 0.0], [1, 1, 1])
        heavy = homogeneous.rational_bezier([0.0, 1.0, 0.0], [1, 5, 1])
        assert heavy.evaluate(0.5) > light.evaluate(0.5)

    def test_control_points_and_weights(self, circle_nurbs_parameters):
        knot_values, points, weights = circle_nurbs_parameters
        curve = homogeneous.nurbs(knot_values, points, weights)
        numpy.testing.assert_allclose(numpy.array(curve.control_points()), points, atol=1e-12)
        assert curve.weights() == pytest.approx(weights)

    def test_insert_knot(self, circle_nurbs_parameters):
        knot_values, points, weights = circle_nurbs_parameters
        curve = homogeneous.nurbs(knot_values, points, weights)
        refined = curve.insert_knot(0.1)
        assert len(refined.weights()) == 10
        for t in numpy.linspace(0, 1, 40):
            numpy.testing.assert_allclose(refined.evaluate(t), curve.evaluate(t), atol=1e-12)

    def test_to_bezier(self, circle_nurbs_parameters):
        knot_values, points, weights = circle_nurbs_parameters
        curve = homogeneous.nurbs(knot_values, points, weights)
        segments = curve.to_bezier()
        assert len(segments) == 4
        for segment in segments:
            start, end = segment.domain()
            for t in numpy.linspace(start, end, 5):
                numpy.testing.assert_allclose(segment.evaluate(t), curve.evaluate(t), atol=1e-12)

    def test_zero_weight_rejected_at_construction(self):
        with pytest.raises(errors.DegenerateWeightError):
            homogeneous.nurbs([0, 0, 1, 1], [0.0, 1.0], [0.0, 1.0])


class TestRationalOtherCurves:
    def test_linear_control_points(self):
        curve = builder.linear([0.0, 10.0], weights=[1, 2])
        assert curve.control_points() == [0.0, 10.0]
        assert curve.weights() == [1, 2]

    def test_bezier_control_points(self):
        curve = homogeneous.rational_bezier([0.0, 5.0, 10.0], [1, 2, 1])
        assert curve.control_points() == [0.0, 5.0, 10.0]
        assert curve.weights() == [1, 2, 1]

    def test_knot_operations_need_a_bspline(self):
        curve = homogeneous.rational_bezier([0.0, 5.0, 10.0], [1, 2, 1])
        with pytest.raises(TypeError):
            curve.insert_knot(0.5)
        with pytest.raises(TypeError):
            builder.linear([0.0, 10.0], weights=[1, 2]).to_bezier()
