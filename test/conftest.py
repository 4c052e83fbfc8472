"""Shared test fixtures."""

import math

import numpy
import pytest


class Color:
    """Minimal user-defined point type: only addition and scaling."""
    def __init__(self, r, g, b):
        self.r = r
        self.g = g
        self.b = b

    def __add__(self, other):
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __mul__(self, scalar):
        return Color(self.r * scalar, self.g * scalar, self.b * scalar)

    def as_tuple(self):
        return self.r, self.g, self.b


@pytest.fixture
def color_type():
    return Color


@pytest.fixture
def cubic_points():
    return numpy.array([[0, 0], [1, 2], [3, 2], [4, 0]], dtype=float)


@pytest.fixture
def six_points():
    return numpy.array([[0, 0], [1, 3], [2, -1], [4, 4], [5, 0], [7, 2]], dtype=float)


@pytest.fixture
def nonuniform_knots():
    # 8 control points, degree 3, double interior knot at 0.5
    return [0, 0, 0, 0, 0.2, 0.5, 0.5, 0.7, 1, 1, 1, 1]


@pytest.fixture
def eight_points():
    return numpy.random.RandomState(0).uniform(-5, 5, size=(8, 2))


@pytest.fixture
def circle_nurbs_parameters():
    w = math.sqrt(2) / 2
    points = [[1, 0], [1, 1], [0, 1], [-1, 1], [-1, 0], [-1, -1], [0, -1], [1, -1], [1, 0]]
    weights = [1, w, 1, w, 1, w, 1, w, 1]
    knots = [0, 0, 0, 0.25, 0.25, 0.5, 0.5, 0.75, 0.75, 1, 1, 1]
    return knots, points, weights
