"""Profiling helpers for the exporter.

When `profile=1` is passed, the exporter records wall-clock time per phase and
writes it next to the output as `<output>.profile.json`. The profile is not
part of the x64dbg database.
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Any

from export_config import PROFILE_FILE_SUFFIX
from outputs.io import write_json


def profile_path(output_path) -> str:
    return str(output_path) + PROFILE_FILE_SUFFIX


class ExportProfiler:
    def __init__(self, output_path=None):
        self.output_path = output_path
        self.timings: dict[str, dict[str, Any]] = {}
        self.metadata: dict[str, Any] = {}

    @contextmanager
    def phase(self, name):
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            self.add_timing(name, elapsed)

    def add_timing(self, name, seconds):
        if not name or seconds is None:
            return
        entry = self.timings.get(name)
        if entry is None:
            entry = {"seconds": 0.0, "count": 0}
            self.timings[name] = entry
        entry["seconds"] += float(seconds)
        entry["count"] += 1

    def build_payload(self):
        return {
            "version": 1,
            "unit": "seconds",
            "phases": self.timings,
            "metadata": self.metadata,
        }

    def write_profile(self):
        if not self.output_path:
            return None
        path = profile_path(self.output_path)
        write_json(path, self.build_payload())
        return path
