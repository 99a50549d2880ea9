"""Field allow-list for the x64dbg database JSON document.

The rendered document is a compatibility contract with x64dbg: four arrays
whose objects carry exactly the fields listed here, in this order. Anything
else on the in-memory records (such as the cached image base on the
database) is never emitted.
"""

from __future__ import annotations

from typing import Any

from pipeline.types import ExportDatabase

COMMON_FIELDS = ("module", "manual")

DATABASE_SCHEMA: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("bookmarks", COMMON_FIELDS + ("address",)),
    ("functions", COMMON_FIELDS + ("start", "end", "icount")),
    ("labels", COMMON_FIELDS + ("address", "text")),
    ("comments", COMMON_FIELDS + ("address", "text")),
)


def render_entry(entry: Any, fields: tuple[str, ...]) -> dict[str, Any]:
    return {name: getattr(entry, name) for name in fields}


def render_database(database: ExportDatabase) -> dict[str, list[dict[str, Any]]]:
    payload: dict[str, list[dict[str, Any]]] = {}
    for key, fields in DATABASE_SCHEMA:
        payload[key] = [render_entry(entry, fields) for entry in getattr(database, key)]
    return payload
