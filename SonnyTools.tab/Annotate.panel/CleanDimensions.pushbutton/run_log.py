# -*- coding: utf-8 -*-
"""Per-run log folder for the dimension cleanup command.

Designed to run under IronPython (pyRevit) and CPython tests.
"""

import datetime
import json
import os
import traceback


def _ensure_dir(path):
    if not os.path.isdir(path):
        os.makedirs(path)
    return path


def default_log_root():
    env_root = os.environ.get("DIMCLEAN_LOG_ROOT")
    if env_root:
        return env_root
    return os.path.join(os.path.expanduser("~"), ".sonnytools", "dimension_cleanup")


def pick_log_root(preferred=None):
    try:
        return _ensure_dir(preferred or default_log_root())
    except OSError:
        return _ensure_dir(os.path.join(os.getcwd(), "dimension_cleanup"))


def _run_id():
    now = datetime.datetime.now()
    return "{}_{}".format(now.strftime("%Y%m%d_%H%M%S"), now.strftime("%f")[-4:])


class CleanupRun(object):
    def __init__(self, root=None, run_name=None):
        self.root = pick_log_root(root)
        self.run_name = run_name or _run_id()
        self.run_dir = _ensure_dir(os.path.join(self.root, self.run_name))

    def path(self, name):
        return os.path.join(self.run_dir, name)

    def save_json(self, name, payload):
        p = self.path(name)
        with open(p, "w") as f:
            json.dump(payload, f, indent=2, sort_keys=True)
        return p

    def log(self, message):
        now = datetime.datetime.now().strftime("%H:%M:%S")
        p = self.path("run_log.txt")
        with open(p, "a") as f:
            f.write("[{}] {}\n".format(now, message))
        return p

    def save_error(self, stage, exc):
        payload = {
            "stage": stage,
            "error": str(exc),
            "traceback": traceback.format_exc(),
        }
        self.save_json("errors.json", payload)
        self.log("ERROR {}: {}".format(stage, exc))
