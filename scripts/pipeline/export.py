"""One export run: collect the program annotations, render, write."""

from __future__ import annotations

from typing import Any

from export_config import DEFAULT_BOOKMARK_CATEGORY, X64DBG_EXPORT_VERSION
from outputs.writers import write_database
from pipeline.collect import collect_database
from pipeline.phases import phase


def export_program(
    program: Any,
    output_path: Any,
    *,
    comment_kinds: Any,
    bookmark_category: str = DEFAULT_BOOKMARK_CATEGORY,
    module: str | None = None,
    profiler: Any = None,
    log=print,
) -> dict[str, Any]:
    database = collect_database(
        program,
        comment_kinds=comment_kinds,
        bookmark_category=bookmark_category,
        module=module,
        profiler=profiler,
        log=log,
    )
    with phase(profiler, "write_output"):
        write_database(output_path, database)

    summary: dict[str, Any] = {"output": str(output_path), "module": database.module}
    summary.update(database.counts())
    if profiler is not None:
        profiler.metadata["exporter_version"] = X64DBG_EXPORT_VERSION
        profiler.metadata.update(summary)
    return summary


def format_summary(summary: dict[str, Any]) -> str:
    return "Exported %d functions, %d labels, %d comments, %d bookmarks for %s" % (
        summary.get("functions", 0),
        summary.get("labels", 0),
        summary.get("comments", 0),
        summary.get("bookmarks", 0),
        summary.get("module") or "<unnamed>",
    )
