# -*- coding: utf-8 -*-
"""Memoized element/view lookups for a single command run.

A QuerySession is created per run and dropped afterwards; nothing is
cached across runs. Revit handles are read duck-typed (X/Y/Z, Min/Max,
Location.Point / Location.Curve) so fakes work in tests.
"""

from dimension_host import element_id_value
from vector_math import centroid, is_almost_equal_3d, line_midpoint


def xyz_tuple(pt):
    if pt is None:
        return None
    return (float(pt.X), float(pt.Y), float(pt.Z))


class QuerySession(object):
    def __init__(self):
        self._is_plan = {}
        self._bbox = {}
        self._center = {}
        self._dimensions = {}

    def _key(self, element, view=None):
        eid = element_id_value(getattr(element, "Id", None))
        if view is None:
            return eid
        return (eid, element_id_value(getattr(view, "Id", None)))

    def is_view_plan(self, view):
        key = self._key(view)
        if key not in self._is_plan:
            direction = xyz_tuple(view.ViewDirection)
            self._is_plan[key] = (
                is_almost_equal_3d(direction, (0.0, 0.0, 1.0))
                or is_almost_equal_3d(direction, (0.0, 0.0, -1.0))
            )
        return self._is_plan[key]

    def bounding_box(self, element, view):
        key = self._key(element, view)
        if key not in self._bbox:
            self._bbox[key] = element.get_BoundingBox(view)
        return self._bbox[key]

    def center_point(self, element, view):
        key = self._key(element, view)
        if key in self._center:
            return self._center[key]

        result = None
        if self.is_view_plan(view):
            location = getattr(element, "Location", None)
            point = getattr(location, "Point", None)
            curve = getattr(location, "Curve", None)
            if point is not None:
                result = xyz_tuple(point)
            elif curve is not None:
                result = line_midpoint(xyz_tuple(curve.GetEndPoint(0)), xyz_tuple(curve.GetEndPoint(1)))

        if result is None:
            bbox = self.bounding_box(element, view)
            if bbox is not None:
                result = centroid([xyz_tuple(bbox.Min), xyz_tuple(bbox.Max)])

        self._center[key] = result
        return result

    def dimensions_in_view(self, view, collector_factory):
        key = self._key(view)
        if key not in self._dimensions:
            self._dimensions[key] = [d for d in collector_factory(view)]
        return self._dimensions[key]
