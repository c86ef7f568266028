#--------------------------------------------------------------------------
#     This file is part of RingSketch - ring perception for chemical sketches
#
#     This program is free software; you can redistribute it and/or modify
#     it under the terms of the GNU General Public License as published by
#     the Free Software Foundation; either version 2 of the License, or
#     (at your option) any later version.
#
#     This program is distributed in the hope that it will be useful,
#     but WITHOUT ANY WARRANTY; without even the implied warranty of
#     MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#     GNU General Public License for more details.
#
#     Complete text of GNU GPL can be found in the file LICENSE in the
#     main directory of the program
#
#--------------------------------------------------------------------------


"""Plain 2-D vector helpers shared by ring and placement code."""

# Standard Library
import math


EPSILON = 1e-9


#============================================
def subtract(p1, p2):
	return (p1[0] - p2[0], p1[1] - p2[1])


#============================================
def add(p1, p2):
	return (p1[0] + p2[0], p1[1] + p2[1])


#============================================
def scale(vector, factor):
	return (vector[0] * factor, vector[1] * factor)


#============================================
def midpoint(p1, p2):
	return ((p1[0] + p2[0]) / 2.0, (p1[1] + p2[1]) / 2.0)


#============================================
def distance(p1, p2):
	return math.hypot(p1[0] - p2[0], p1[1] - p2[1])


#============================================
def cross_product(v1, v2):
	"""Return the z component of v1 x v2."""
	return (v1[0] * v2[1]) - (v1[1] * v2[0])


#============================================
def perpendicular(vector):
	"""Return the vector rotated by +90 degrees."""
	return (-vector[1], vector[0])


#============================================
def normalize(vector):
	"""Return a unit vector, or None for a zero-length vector."""
	length = math.hypot(vector[0], vector[1])
	if length <= EPSILON:
		return None
	return (vector[0] / length, vector[1] / length)


#============================================
def centroid(points):
	"""Return the arithmetic mean of a sequence of (x, y) points."""
	points = list(points)
	if not points:
		return None
	sum_x = sum(point[0] for point in points)
	sum_y = sum(point[1] for point in points)
	return (sum_x / len(points), sum_y / len(points))


#============================================
def turn(origin, first, second):
	"""Return 1 for a left turn origin -> first -> second, -1 for right, 0 if collinear."""
	value = cross_product(subtract(first, origin), subtract(second, origin))
	if abs(value) < EPSILON:
		return 0
	return 1 if value > 0 else -1


#============================================
def _within_bounds(point, seg_start, seg_end):
	for axis in (0, 1):
		low = min(seg_start[axis], seg_end[axis]) - EPSILON
		high = max(seg_start[axis], seg_end[axis]) + EPSILON
		if not low <= point[axis] <= high:
			return False
	return True


#============================================
def segments_intersect(a1, a2, b1, b2):
	"""Return True when the closed segments a1-a2 and b1-b2 share a point.

	Touching endpoints and collinear overlaps count as intersections.
	"""
	b1_turn = turn(a1, a2, b1)
	b2_turn = turn(a1, a2, b2)
	a1_turn = turn(b1, b2, a1)
	a2_turn = turn(b1, b2, a2)
	if b1_turn * b2_turn < 0 and a1_turn * a2_turn < 0:
		return True
	touching = (
		(b1_turn, b1, a1, a2),
		(b2_turn, b2, a1, a2),
		(a1_turn, a1, b1, b2),
		(a2_turn, a2, b1, b2),
	)
	return any(
		side == 0 and _within_bounds(point, seg_start, seg_end)
		for side, point, seg_start, seg_end in touching
	)
