# -*- coding: utf-8 -*-
"""Remove too-small segments from dimensions and rebuild them.

All document changes go through a host object exposing
``delete_annotation(element_id)`` and
``build_annotation(view, line, references, dimension_type=None)``
(see dimension_host.RevitDimensionHost). Callers own the transaction;
clean_dimensions additionally wraps each dimension in
``host.begin_item()`` / ``commit_item()`` / ``rollback_item()`` so a failed
rebuild leaves the original dimension in place.
"""

from cleanup_config import default_config
from dimension_host import element_id_value, snapshot_dimension
from segment_filter import (
    ACTION_DELETE,
    ACTION_KEEP,
    ACTION_NO_REPLACEMENT,
    ACTION_REBUILD,
    can_create_dimension,
    plan_segment_cleanup,
)


def _plan_for(snapshot, minimum_value, config):
    cfg = config or default_config()
    return plan_segment_cleanup(
        snapshot.segment_values,
        snapshot.references,
        snapshot.overall_value,
        minimum_value,
        tolerances=cfg.get("tolerances"),
        collapse_trailing_duplicate=bool(cfg.get("collapse_trailing_duplicate", False)),
    )


def remove_small_segments(dimension, dimension_line, view, minimum_value, host,
                          dimension_type=None, config=None, plan_out=None):
    """Return the cleaned dimension, or None when nothing replaces it.

    ``plan_out`` (a dict) receives the plan when given.
    """
    snapshot = snapshot_dimension(dimension)
    plan = _plan_for(snapshot, minimum_value, config)
    if plan_out is not None:
        plan_out.update(plan)

    action = plan["action"]
    if action == ACTION_KEEP:
        return dimension

    # Every other outcome removes the original first.
    host.delete_annotation(snapshot.element_id)

    if action in (ACTION_DELETE, ACTION_NO_REPLACEMENT):
        return None

    refs = plan["references"]
    if not can_create_dimension(refs):
        return None
    return host.build_annotation(view, dimension_line, refs, dimension_type)


def create_dimension(host, view, line, references, dimension_type=None,
                     minimum_value=None, config=None):
    references = list(references)
    dimension = host.build_annotation(view, line, references, dimension_type)
    if minimum_value is None:
        return dimension

    cleaned = remove_small_segments(
        dimension, line, view, float(minimum_value), host,
        dimension_type=dimension_type, config=config,
    )
    if cleaned is not None:
        return cleaned
    return host.build_annotation(view, line, references, dimension_type)


def _dimension_line(dimension):
    return dimension.Curve


def clean_dimensions(dimensions, view, host, config=None, dimension_type=None,
                     log=None, line_getter=None):
    cfg = config or default_config()
    minimum_value = float(cfg["minimum_segment_value_ft"])
    line_getter = line_getter or _dimension_line

    summary = {
        "kept": 0,
        "deleted": 0,
        "rebuilt": 0,
        "dropped": 0,
        "failed": 0,
        "details": [],
    }
    counters = {
        ACTION_KEEP: "kept",
        ACTION_DELETE: "deleted",
        ACTION_REBUILD: "rebuilt",
        ACTION_NO_REPLACEMENT: "dropped",
    }

    for dim in dimensions:
        detail = {"element_id": element_id_value(getattr(dim, "Id", None))}
        plan = {}
        host.begin_item()
        try:
            line = line_getter(dim)
            remove_small_segments(
                dim, line, view, minimum_value, host,
                dimension_type=dimension_type, config=cfg, plan_out=plan,
            )
            host.commit_item()
            action = plan.get("action")
            summary[counters[action]] += 1
            detail["action"] = action
            detail["reason"] = plan.get("reason")
            detail["reference_count"] = len(plan.get("references") or [])
        except Exception as ex:
            host.rollback_item()
            summary["failed"] += 1
            detail["action"] = "failed"
            detail["rolled_back"] = True
            detail["error"] = str(ex)
            if log is not None:
                log.log("Dimension {} failed: {}".format(detail["element_id"], ex))
        else:
            if log is not None:
                log.log("Dimension {}: {} ({})".format(detail["element_id"], detail["action"], detail["reason"]))
        summary["details"].append(detail)

    return summary
