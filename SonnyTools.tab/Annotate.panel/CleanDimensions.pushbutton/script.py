# -*- coding: utf-8 -*-
__title__ = "Clean\nDimensions"
__doc__ = "Remove near-zero segments from the selected (or all visible) dimensions and rebuild them."

import os
import sys

from run_log import CleanupRun
from cleanup_config import config_path, ft_to_mm, load_config
from dimension_cleanup import clean_dimensions
from dimension_host import RevitDimensionHost
from query_session import QuerySession
from vector_math import point_xy_text

from Autodesk.Revit.DB import (
    Dimension,
    DimensionType,
    FilteredElementCollector,
    Transaction,
)
from Autodesk.Revit.UI import TaskDialog


uidoc = __revit__.ActiveUIDocument
doc = uidoc.Document

TITLE = "Clean Dimensions"


def find_dimension_type(name):
    if not name:
        return None
    for dt in FilteredElementCollector(doc).OfClass(DimensionType):
        try:
            if dt.Name == name:
                return dt
        except Exception:
            continue
    return None


def selected_dimensions():
    out = []
    for eid in uidoc.Selection.GetElementIds():
        el = doc.GetElement(eid)
        if isinstance(el, Dimension):
            out.append(el)
    return out


def view_dimensions(view):
    return FilteredElementCollector(doc, view.Id).OfClass(Dimension).WhereElementIsNotElementType()


def collect_targets(view, session, selection_only):
    dims = selected_dimensions()
    if dims and selection_only:
        return dims
    return session.dimensions_in_view(view, view_dimensions)


def run_command():
    view = uidoc.ActiveView
    if view is None or view.IsTemplate:
        TaskDialog.Show(TITLE, "Run this command in a drawing view.")
        sys.exit()

    cfg = load_config(config_path(os.path.dirname(__file__)))
    run = CleanupRun()
    session = QuerySession()
    run.log("View: {} (plan: {})".format(view.Name, session.is_view_plan(view)))
    run.log("Minimum segment: {:.2f} mm".format(ft_to_mm(cfg["minimum_segment_value_ft"])))

    dims = collect_targets(view, session, bool(cfg.get("selection_only", True)))
    if not dims:
        TaskDialog.Show(TITLE, "No dimensions found in the selection or the active view.")
        return

    for d in dims:
        center = session.center_point(d, view)
        if center is not None:
            run.log("Target {} at {}".format(d.Id, point_xy_text(center)))

    dim_type = find_dimension_type(cfg.get("dimension_type_name"))
    host = RevitDimensionHost(doc)

    t = Transaction(doc, "Clean Dimensions")
    t.Start()
    try:
        summary = clean_dimensions(dims, view, host, config=cfg, dimension_type=dim_type, log=run)
        t.Commit()
    except Exception as ex:
        t.RollBack()
        run.save_error("clean_dimensions", ex)
        TaskDialog.Show(TITLE, "Dimension cleanup failed.\n{}".format(ex))
        return

    run.save_json("summary.json", summary)
    TaskDialog.Show(
        TITLE,
        "Kept: {kept}\nRebuilt: {rebuilt}\nDeleted: {deleted}\nDropped: {dropped}\nFailed: {failed}\n\nLog saved to:\n{dir}".format(
            dir=run.run_dir, **summary
        ),
    )


# Avoid side effects when pyRevit inspects/imports this module at startup.
if __name__ == "__main__":
    run_command()
