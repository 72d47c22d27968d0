# -*- coding: utf-8 -*-
"""Decide which references of a multi-segment dimension survive cleanup.

This module is Revit-free. References are opaque: they are only copied
into the output list, never compared or inspected. Segment values are
floats or None (Revit reports None for segments it cannot measure).

The planner returns a dict:

    {"action": "delete" | "keep" | "rebuild" | "no_replacement",
     "references": [...],
     "reason": "..."}
"""

from tolerances import STANDARD_PRECISION


ACTION_DELETE = "delete"
ACTION_KEEP = "keep"
ACTION_REBUILD = "rebuild"
ACTION_NO_REPLACEMENT = "no_replacement"


def is_degenerate(value, tolerance=STANDARD_PRECISION):
    # Unmeasured segments are not counted as degenerate.
    return value is not None and abs(value) < tolerance


def has_degenerate_segment(segment_values, tolerance=STANDARD_PRECISION):
    for v in segment_values:
        if is_degenerate(v, tolerance):
            return True
    return False


def is_zero_value_dimension(segment_values, references, overall_value, tolerance=STANDARD_PRECISION):
    return (
        len(segment_values) == 0
        and len(references) == 2
        and overall_value is not None
        and abs(overall_value) < tolerance
    )


def _meets(value, threshold):
    return value is not None and value >= threshold


def _exceeds(value, threshold):
    return value is not None and value > threshold


def filter_references(segment_values, references, threshold):
    """Keep the first reference, then the closing reference of each segment
    whose signed value is at least ``threshold``."""
    kept = []
    if references:
        kept.append(references[0])

    for i, value in enumerate(segment_values):
        if _meets(value, threshold):
            kept.append(references[i + 1])
    return kept


def should_include_last_reference(segment_values, threshold):
    if not segment_values:
        return False
    return _exceeds(segment_values[-1], threshold)


def can_create_dimension(references):
    return bool(references) and len(references) >= 2


def plan_segment_cleanup(segment_values, references, overall_value, threshold,
                         tolerances=None, collapse_trailing_duplicate=False):
    segment_values = list(segment_values or [])
    references = list(references or [])
    eps = (tolerances or {}).get("standard", STANDARD_PRECISION)

    if is_zero_value_dimension(segment_values, references, overall_value, eps):
        return {
            "action": ACTION_DELETE,
            "references": [],
            "reason": "zero-length dimension",
        }

    if not has_degenerate_segment(segment_values, eps):
        return {
            "action": ACTION_KEEP,
            "references": references,
            "reason": "no degenerate segment",
        }

    kept = filter_references(segment_values, references, threshold)

    # Checked independently of the loop above: a last segment strictly above
    # the threshold appends the closing reference a second time.
    if should_include_last_reference(segment_values, threshold):
        last_ref = references[-1]
        if not (collapse_trailing_duplicate and kept and kept[-1] is last_ref):
            kept.append(last_ref)

    if not can_create_dimension(kept):
        return {
            "action": ACTION_NO_REPLACEMENT,
            "references": kept,
            "reason": "fewer than 2 references after pruning",
        }

    return {
        "action": ACTION_REBUILD,
        "references": kept,
        "reason": "kept {} of {} references".format(len(kept), len(references)),
    }
