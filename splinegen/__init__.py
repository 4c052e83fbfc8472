'''
# splinegen

Interpolation, extrapolation and smoothing curves through control points of
any type that can be added and scaled (numbers, numpy vectors, colors...).

Curves
------
Every curve is immutable and provides evaluate(t) (also callable as curve(t)),
domain(), evaluate_sequence(parameters) and sample(num_points).
 - builder: construct any of the curves below from points, knots, weights and a degree.
 - linear: piecewise-linear interpolation between elements placed at knots.
 - bezier: Bezier curves evaluated with De Casteljau's algorithm.
 - bspline: B-splines evaluated with De Boor's algorithm; knot insertion and conversion to Bezier segments.
 - homogeneous: rational curves (NURBS, rational Bezier) by blending in homogeneous coordinates.
 - extrapolate: clamp, extrapolate, wrap or reject parameters outside of a curve's domain.
 - base: the shared curve interface, chaining and stacking of curves.

Support
-------
 - knots: knot vector validation, span lookup, and helpers for equidistant and clamped knots.
 - errors: exceptions raised while building or evaluating curves.
 - geometry: cumulative distances, chord-length knots and arc length of curves.
 - interop: conversion to and from scipy.interpolate (t, c, k) splines.
'''
