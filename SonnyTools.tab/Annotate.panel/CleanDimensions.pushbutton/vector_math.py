# -*- coding: utf-8 -*-
"""Point and vector helpers on plain tuples.

This module is intentionally Revit-free so it can be unit-tested outside Revit.
All points are tuples: (x, y) or (x, y, z). 2D inputs get z = 0.
"""

import math

from tolerances import (
    COARSE_TOLERANCE,
    GENERAL_TOLERANCE,
    HIGH_PRECISION,
    STANDARD_PRECISION,
    are_equal,
)


def _pt3(p):
    if len(p) >= 3:
        return (float(p[0]), float(p[1]), float(p[2]))
    return (float(p[0]), float(p[1]), 0.0)


def _flat(p):
    p = _pt3(p)
    return (p[0], p[1], 0.0)


def add(a, b):
    a, b = _pt3(a), _pt3(b)
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def sub(a, b):
    a, b = _pt3(a), _pt3(b)
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def scale(v, s):
    v = _pt3(v)
    return (v[0] * s, v[1] * s, v[2] * s)


def negate(v):
    return scale(v, -1.0)


def dot(a, b):
    a, b = _pt3(a), _pt3(b)
    return (a[0] * b[0]) + (a[1] * b[1]) + (a[2] * b[2])


def cross(a, b):
    a, b = _pt3(a), _pt3(b)
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def length(v):
    return math.sqrt(dot(v, v))


def normalize(v):
    ln = length(v)
    if ln < HIGH_PRECISION:
        return (0.0, 0.0, 0.0)
    return scale(v, 1.0 / ln)


def distance(a, b):
    return length(sub(a, b))


def distance_2d(a, b):
    return math.sqrt((a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2)


def min_distance_to_points(point, points):
    return min(distance(p, point) for p in points)


# ---------------------- comparison ----------------------

def is_almost_equal_2d(a, b, tol=GENERAL_TOLERANCE):
    if b is None:
        return False
    return are_equal(a[0], b[0], tol) and are_equal(a[1], b[1], tol)


def is_almost_equal_3d(a, b, tol=GENERAL_TOLERANCE):
    if b is None:
        return False
    a, b = _pt3(a), _pt3(b)
    return is_almost_equal_2d(a, b, tol) and are_equal(a[2], b[2], tol)


def is_point_on_line(line_start, line_end, direction):
    """True when the start->end vector runs along ``direction``."""
    if length(direction) < HIGH_PRECISION:
        return False

    v = sub(line_end, line_start)
    if length(v) < COARSE_TOLERANCE:
        return True

    return length(cross(v, normalize(direction))) < COARSE_TOLERANCE


def distinct_points(points):
    out = []
    seen = set()
    for p in points:
        k = _pt3(p)
        if k in seen:
            continue
        seen.add(k)
        out.append(p)
    return out


# ---------------------- directions ----------------------

def are_vectors_parallel(a, b, tol=GENERAL_TOLERANCE):
    return is_almost_equal_3d(a, b, tol) or is_almost_equal_3d(a, negate(b), tol)


def is_parallel(a, b):
    a, b = normalize(a), normalize(b)
    return is_almost_equal_3d(a, b) or is_almost_equal_3d(a, negate(b))


def is_same_direction(a, b):
    return dot(a, b) == 1


def is_perpendicular(a, b):
    return dot(a, b) == 0


def perpendicular_vector(v):
    v = _pt3(v)
    return (-v[1], v[0], v[2])


def clockwise_angle_between(a, b):
    d = b[0] * a[0] + b[1] * a[1]
    det = b[1] * a[0] - b[0] * a[1]
    return -math.atan2(det, d)


def are_directions_perpendicular_2d(a, b):
    return (
        are_equal(abs(a[0]), abs(b[1])) or are_equal(abs(a[1]), abs(b[0]))
    ) and not are_equal(abs(a[1]), abs(a[0]))


def is_up_z(direction):
    return are_equal(normalize(direction)[2], 1.0)


def is_down_z(direction):
    return are_equal(normalize(direction)[2], -1.0)


def is_opposite_direction(a, b):
    # Only X and Y are compared; Y is expected mirrored.
    return abs(a[0] - b[0]) < GENERAL_TOLERANCE and abs(a[1] + b[1]) < GENERAL_TOLERANCE


def angle_to(a, b):
    la, lb = length(a), length(b)
    if la < HIGH_PRECISION or lb < HIGH_PRECISION:
        return 0.0
    c = dot(a, b) / (la * lb)
    return math.acos(max(-1.0, min(1.0, c)))


def angle_to_2d(a, b):
    return angle_to(_flat(a), _flat(b))


# ---------------------- planes / polygons / lines ----------------------

def distance_point_to_plane(point, plane_normal, plane_origin):
    n = _pt3(plane_normal)
    nl = length(n)
    if nl < HIGH_PRECISION:
        raise ValueError("Plane normal has zero length")
    d = dot(n, negate(plane_origin))
    return abs(dot(n, point) + d) / nl


def centroid(points):
    if not points:
        raise ValueError("centroid() of an empty point list")
    acc = (0.0, 0.0, 0.0)
    for p in points:
        acc = add(acc, p)
    return scale(acc, 1.0 / len(points))


def is_clockwise(p1, p2, p3):
    return cross(sub(p2, p1), sub(p3, p1))[2] < 0


def line_intersection_2d(p1, d1, p2, d2):
    """Intersection of two infinite lines in XY, or None when parallel."""
    p1, p2 = _flat(p1), _flat(p2)
    d1, d2 = normalize(_flat(d1)), normalize(_flat(d2))

    denom = d1[0] * d2[1] - d1[1] * d2[0]
    if abs(denom) < HIGH_PRECISION:
        return None

    t = ((p2[0] - p1[0]) * d2[1] - (p2[1] - p1[1]) * d2[0]) / denom
    return (p1[0] + t * d1[0], p1[1] + t * d1[1], 0.0)


def is_acute_angle_2d(first, apex, third):
    return dot(_flat(sub(first, apex)), _flat(sub(third, apex))) > 0


def is_point_on_segment_2d(start, end, point, tol=GENERAL_TOLERANCE):
    return abs(distance_2d(start, end) - distance_2d(start, point) - distance_2d(end, point)) < tol


def is_point_on_segment_3d(start, end, point, tol=GENERAL_TOLERANCE):
    return abs(distance(start, end) - distance(start, point) - distance(end, point)) < tol


def point_in_polygon(point, vertices):
    """Even-odd ray casting in XY."""
    x, y = point[0], point[1]
    inside = False
    n = len(vertices)
    j = n - 1
    for i in range(n):
        xi, yi = vertices[i][0], vertices[i][1]
        xj, yj = vertices[j][0], vertices[j][1]
        if (yi > y) != (yj > y):
            x_cross = (xj - xi) * (y - yi) / (yj - yi) + xi
            if x < x_cross:
                inside = not inside
        j = i
    return inside


def line_midpoint(start, end):
    return scale(add(start, end), 0.5)


def offset_line(start, end, direction, offset):
    shift = scale(direction, offset)
    return add(start, shift), add(end, shift)


def project_on_line(point, line_start, line_end):
    axis = sub(line_end, line_start)
    ln2 = dot(axis, axis)
    if ln2 < HIGH_PRECISION:
        return _pt3(line_start)
    t = dot(sub(point, line_start), axis) / ln2
    return add(line_start, scale(axis, t))


def line_contains_point(line_start, line_end, point, tol=STANDARD_PRECISION):
    return is_almost_equal_3d(project_on_line(point, line_start, line_end), point, tol)


# ---------------------- formatting ----------------------

def point_key(p):
    p = _pt3(p)
    return "{}_{}_{}".format(round(p[0], 9), round(p[1], 9), round(p[2], 9))


def point_xy_text(p):
    return "{}, {}".format(round(p[0], 6), round(p[1], 6))
