"""Collection stage for the x64dbg database export."""

from __future__ import annotations

from typing import Any

from collectors.bookmarks import collect_bookmarks
from collectors.comments import collect_comments
from collectors.functions import collect_functions
from export_config import DEFAULT_BOOKMARK_CATEGORY
from export_primitives import module_name
from pipeline.phases import phase
from pipeline.types import ExportDatabase


def new_database(program: Any, module: str | None = None) -> ExportDatabase:
    return ExportDatabase(
        module=module_name(module or program.getName()),
        image_base=program.getImageBase(),
    )


def collect_database(
    program: Any,
    *,
    comment_kinds: Any,
    bookmark_category: str = DEFAULT_BOOKMARK_CATEGORY,
    module: str | None = None,
    profiler: Any = None,
    log=print,
) -> ExportDatabase:
    database = new_database(program, module)

    log("Running function extraction...")
    with phase(profiler, "collect_functions"):
        collect_functions(program, database)

    log("Running comment extraction...")
    with phase(profiler, "collect_comments"):
        collect_comments(program, database, comment_kinds)

    log("Running bookmarks extraction...")
    with phase(profiler, "collect_bookmarks"):
        collect_bookmarks(program, database, bookmark_category)

    return database
