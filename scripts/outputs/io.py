"""Output filesystem helpers.

The JSON formatting (indentation, key order, ASCII escaping) is stable so that
two exports of an unchanged program are byte-identical and diff cleanly.
"""

from __future__ import annotations

import json
import os
import stat
import tempfile
from typing import Any

PathLike = str | os.PathLike[str]


def ensure_dir(path: PathLike) -> None:
    os.makedirs(path, exist_ok=True)


def render_json(obj: Any) -> str:
    return json.dumps(obj, indent=2, ensure_ascii=True) + "\n"


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def _target_mode(target: str) -> int:
    # Match what open(target, "w") would leave behind.
    try:
        return stat.S_IMODE(os.stat(target).st_mode)
    except FileNotFoundError:
        return 0o666 & ~_current_umask()


def write_text(path: PathLike, content: str) -> None:
    """Replace `path` with `content` or leave it untouched on failure.

    The text goes to a temporary sibling first and is renamed into place, so
    readers never observe a truncated file.
    """
    target = os.path.abspath(os.fspath(path))
    directory = os.path.dirname(target)
    ensure_dir(directory)
    fd, tmp_path = tempfile.mkstemp(
        prefix="." + os.path.basename(target) + ".",
        suffix=".tmp",
        dir=directory,
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(tmp_path, _target_mode(target))
        os.replace(tmp_path, target)
    except BaseException:
        try:
            os.unlink(tmp_path)
        except FileNotFoundError:
            pass
        raise


def write_json(path: PathLike, obj: Any) -> None:
    write_text(path, render_json(obj))
