# -*- coding: utf-8 -*-
"""Settings for the dimension cleanup command."""

import json
import os

from tolerances import default_tolerances, merge_tolerances

MM_PER_FT = 304.8
CONFIG_FILE_NAME = "dimension_cleanup_config.json"


def mm_to_ft(v):
    return float(v) / MM_PER_FT


def ft_to_mm(v):
    return float(v) * MM_PER_FT


def default_config():
    return {
        "minimum_segment_value_ft": mm_to_ft(10.0),
        "collapse_trailing_duplicate": False,
        "dimension_type_name": None,
        "selection_only": True,
        "tolerances": default_tolerances(),
    }


def _merge(base, patch):
    out = dict(base)
    for k, v in (patch or {}).items():
        if k == "tolerances":
            out[k] = merge_tolerances(v)
        else:
            out[k] = v
    return out


def config_path(script_dir=None):
    env_path = os.environ.get("CLEANUP_CONFIG_PATH")
    if env_path:
        return env_path
    base = script_dir or os.path.dirname(os.path.abspath(__file__))
    return os.path.join(base, CONFIG_FILE_NAME)


def load_config(path):
    data = default_config()
    try:
        if path and os.path.isfile(path):
            with open(path, "r") as f:
                parsed = json.load(f)
            if isinstance(parsed, dict):
                data = _merge(data, parsed)
    except (IOError, OSError, ValueError):
        pass

    # "minimum_segment_value_mm" is accepted as a convenience for hand-edited files.
    mm_value = data.pop("minimum_segment_value_mm", None)
    if mm_value is not None:
        try:
            data["minimum_segment_value_ft"] = mm_to_ft(mm_value)
        except (TypeError, ValueError):
            pass
    return data
