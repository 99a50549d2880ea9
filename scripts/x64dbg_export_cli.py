#!/usr/bin/env python
import os
import shutil
import sys
from pathlib import Path

from export_cli import TRUE_VALUES, error_path
from export_config import DEFAULT_OUT_DIR, DEFAULT_OUTPUT_SUFFIX

SCRIPT_NAME = "x64dbg_export.py"

OPTION_KEYS = ("analyze", "bookmark_category", "module", "profile")


def usage(exit_code=1):
    print("Usage:", file=sys.stderr)
    print("  x64dbg_export <binary> [-o <output.json>] [key=value ...]", file=sys.stderr)
    print("Options:", file=sys.stderr)
    print("  analyze=0|1            run Ghidra auto-analysis (default: 1)", file=sys.stderr)
    print("  bookmark_category=...  bookmark category to export (default: Note)", file=sys.stderr)
    print("  module=...             module name recorded on every entry", file=sys.stderr)
    print("  profile=0|1            write phase timings next to the output", file=sys.stderr)
    print(
        "Default output: %s/<binary name>%s" % (DEFAULT_OUT_DIR, DEFAULT_OUTPUT_SUFFIX),
        file=sys.stderr,
    )
    raise SystemExit(exit_code)


def is_option(arg):
    if arg.startswith("-"):
        return True
    # Paths may contain "=", so only known keys count as options.
    return "=" in arg and arg.split("=", 1)[0] in OPTION_KEYS


def parse_args(argv):
    binary_path = None
    out_path = None
    script_args = []
    idx = 0
    count = len(argv)
    while idx < count:
        arg = argv[idx]
        idx += 1
        if arg in ("-h", "--help"):
            usage(0)
        if arg in ("-o", "--output"):
            if idx >= count:
                print("Missing value for -o/--output.", file=sys.stderr)
                usage(1)
            out_path = argv[idx]
            idx += 1
            continue
        if is_option(arg):
            script_args.append(arg)
            continue
        if binary_path is None:
            binary_path = arg
        else:
            script_args.append(arg)
    if not binary_path:
        usage(1)
    return binary_path, out_path, script_args


def split_analyze_option(script_args):
    """Pop `analyze=` from the script args; it configures PyGhidra, not the script."""
    analyze = True
    remaining = []
    for arg in script_args:
        if arg.startswith("analyze="):
            value = arg.split("=", 1)[1].strip().lower()
            analyze = value in TRUE_VALUES
            continue
        remaining.append(arg)
    return analyze, remaining


def default_output_path(binary_file):
    return Path(DEFAULT_OUT_DIR) / (binary_file.name + DEFAULT_OUTPUT_SUFFIX)


def resolve_binary(binary_path):
    binary_file = Path(binary_path)
    if binary_file.is_file():
        return binary_file
    resolved = shutil.which(binary_path)
    if resolved:
        resolved_path = Path(resolved)
        if resolved_path.is_file():
            return resolved_path
    print(f"Binary not found: {binary_path}", file=sys.stderr)
    print("Hint: provide a full path or a binary available in PATH.", file=sys.stderr)
    raise SystemExit(1)


def resolve_script_path():
    root_dir = Path(
        os.environ.get("X64DBG_EXPORT_ROOT", Path(__file__).resolve().parent.parent)
    ).resolve()
    for candidate in (root_dir / "scripts" / SCRIPT_NAME, Path(__file__).resolve().parent / SCRIPT_NAME):
        if candidate.is_file():
            return candidate
    print(
        f"Could not locate scripts/{SCRIPT_NAME}. Run from repo root or set X64DBG_EXPORT_ROOT.",
        file=sys.stderr,
    )
    raise SystemExit(1)


def check_export_result(output_path):
    failure_path = Path(error_path(str(output_path)))
    if failure_path.is_file():
        print(f"x64dbg export failed; see {failure_path}", file=sys.stderr)
        raise SystemExit(1)
    if not output_path.is_file():
        print(f"x64dbg export failed; missing {output_path}", file=sys.stderr)
        raise SystemExit(1)


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    binary_path, out_path, script_args = parse_args(argv)
    analyze, script_args = split_analyze_option(script_args)
    binary_file = resolve_binary(binary_path)

    install_dir = os.environ.get("GHIDRA_INSTALL_DIR")
    if not install_dir:
        print("GHIDRA_INSTALL_DIR is not set; PyGhidra needs a Ghidra install.", file=sys.stderr)
        raise SystemExit(1)

    from pyghidra import core as pyghidra_core

    script_path = resolve_script_path()

    # Ghidra's ProjectLocator requires an absolute path.
    output_path = Path(out_path or default_output_path(binary_file)).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    project_dir = output_path.parent / "ghidra_project"
    for path in (output_path, Path(error_path(str(output_path)))):
        try:
            path.unlink()
        except FileNotFoundError:
            pass

    with pyghidra_core._flat_api(
        str(binary_file),
        str(project_dir),
        binary_file.stem,
        analyze=analyze,
        program_name=binary_file.name,
        nested_project_location=False,
        install_dir=Path(install_dir),
    ) as script:
        script.run(str(script_path), [str(output_path)] + script_args)

    check_export_result(output_path)
    print(str(output_path))


if __name__ == "__main__":
    main(sys.argv[1:])
