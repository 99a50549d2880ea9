"""Writers for the x64dbg database document."""

from __future__ import annotations

from typing import Any

from outputs.io import render_json, write_text
from outputs.schema import render_database
from pipeline.types import ExportDatabase


def database_json(database: ExportDatabase) -> str:
    return render_json(render_database(database))


def write_database(path: Any, database: ExportDatabase) -> None:
    write_text(path, database_json(database))
