# -*- coding: utf-8 -*-
"""Named tolerance regimes used by dimension cleanup and point helpers.

Values are in Revit internal units (feet) where they apply to lengths.
"""

HIGH_PRECISION = 1.0e-09
STANDARD_PRECISION = 1.0e-04
GENERAL_TOLERANCE = 1.0e-03
COARSE_TOLERANCE = 0.01
DOT_PRODUCT_TOLERANCE = 1.0e-07


def default_tolerances():
    return {
        "high": HIGH_PRECISION,
        "standard": STANDARD_PRECISION,
        "general": GENERAL_TOLERANCE,
        "coarse": COARSE_TOLERANCE,
        "dot_product": DOT_PRODUCT_TOLERANCE,
    }


def merge_tolerances(patch):
    out = default_tolerances()
    for k, v in (patch or {}).items():
        if k not in out or v is None:
            continue
        try:
            out[k] = abs(float(v))
        except (TypeError, ValueError):
            continue
    return out


def are_equal(a, b, tol=STANDARD_PRECISION):
    return abs(a - b) < tol


def is_zero(value, tol=STANDARD_PRECISION):
    return abs(value) < tol
