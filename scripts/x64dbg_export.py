# Export functions, comments and bookmarks to an x64dbg database (JSON).
#@author
#@category x64dbg
#@menupath Tools.x64dbg.Export Database
#@toolbar
#@runtime PyGhidra

import os
import sys
import traceback

try:
    script_dir = os.path.dirname(os.path.abspath(__file__))
except Exception:
    script_dir = None
if script_dir and script_dir not in sys.path:
    sys.path.insert(0, script_dir)

from export_cli import error_path, parse_args, print_usage
from export_profile import ExportProfiler
from outputs.io import write_text
from pipeline.export import export_program, format_summary
from ghidra.program.model.listing import CodeUnit
from ghidra.util import SystemUtilities

# x64dbg has one comment slot per address; pre, post and plate comments are dropped.
COMMENT_KINDS = (
    ("eol", CodeUnit.EOL_COMMENT),
    ("repeatable", CodeUnit.REPEATABLE_COMMENT),
)


def _clear_stale_error(path):
    try:
        os.unlink(path)
    except FileNotFoundError:
        pass


def main():
    args = getScriptArgs()
    out_path, options, show_help = parse_args(list(args))
    if show_help:
        print_usage()
        return
    if out_path is None:
        if SystemUtilities.isInHeadlessMode():
            print("Output path required in headless mode.")
            print_usage()
            return
        out_path = askFile(
            "Select Output File (Type desired name if file does not exist)", "Ok"
        ).getAbsolutePath()
    out_path = os.path.abspath(str(out_path))
    failure_path = error_path(out_path)
    _clear_stale_error(failure_path)

    profiler = ExportProfiler(out_path) if options.get("profile") == 1 else None
    try:
        summary = export_program(
            currentProgram,
            out_path,
            comment_kinds=COMMENT_KINDS,
            bookmark_category=options["bookmark_category"],
            module=options.get("module"),
            profiler=profiler,
        )
    except Exception:
        try:
            write_text(failure_path, traceback.format_exc())
        except OSError:
            pass
        print("x64dbg export failed; see %s" % failure_path)
        raise
    finally:
        if profiler is not None:
            profiler.write_profile()
    print(format_summary(summary))
    print("x64dbg export complete: %s" % out_path)


main()
