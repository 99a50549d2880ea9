"""Argument parsing helpers for the Ghidra exporter script.

Ghidra scripts receive a flat list of strings. The exporter keeps parsing logic
lightweight by supporting:
- `-h/--help` to print usage
- a positional output file path
- `key=value` overrides
"""

from __future__ import annotations

from typing import Any

from export_config import DEFAULT_BOOKMARK_CATEGORY, ERROR_FILE_SUFFIX

TRUE_VALUES = ("1", "true", "yes", "on")


def _default_options() -> dict[str, Any]:
    return {
        "bookmark_category": DEFAULT_BOOKMARK_CATEGORY,
        "module": None,
        "profile": 0,
    }


def _parse_flag(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        lowered = (value or "").strip().lower()
        return 1 if lowered in TRUE_VALUES else 0


def parse_args(args: list[str], log=print) -> tuple[str | None, dict[str, Any], bool]:
    options = _default_options()
    out_path: str | None = None
    show_help = False

    for arg in args:
        if arg in ("-h", "--help"):
            show_help = True
            continue
        # Accept key=value overrides to keep headless invocation simple.
        if "=" in arg:
            key, value = arg.split("=", 1)
            if key == "out":
                out_path = value
            elif key == "profile":
                options[key] = _parse_flag(value)
            elif key == "bookmark_category":
                if value.strip():
                    options[key] = value.strip()
                else:
                    log("Invalid value for %s: %r" % (key, value))
            elif key == "module":
                options[key] = value.strip() or None
            else:
                log("Unknown option: %s" % key)
        elif out_path is None:
            out_path = arg
        else:
            log("Ignoring extra argument: %s" % arg)

    return out_path, options, show_help


def print_usage(log=print):
    log("x64dbg database exporter")
    log("Usage:")
    log("  <script> <output.json> [key=value ...]")
    log("Options:")
    log("  bookmark_category=<name> (default: %s)" % DEFAULT_BOOKMARK_CATEGORY)
    log("  module=<name> (default: program name)")
    log("  profile=0|1")


def error_path(out_path: str) -> str:
    return out_path + ERROR_FILE_SUFFIX
