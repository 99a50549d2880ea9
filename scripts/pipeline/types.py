"""In-memory model of an x64dbg database export."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class BookmarkEntry:
    module: str
    address: str
    manual: bool = True


@dataclass(frozen=True)
class FunctionEntry:
    module: str
    start: str
    end: str
    icount: str
    manual: bool = True


@dataclass(frozen=True)
class LabelEntry:
    """A named address; x64dbg stores comments in the same shape."""

    module: str
    address: str
    text: str
    manual: bool = True


@dataclass
class ExportDatabase:
    """Entities collected for one export run, kept in discovery order.

    `image_base` is captured once so every entity shares the same base. It is
    bookkeeping only and never part of the rendered document.
    """

    module: str
    image_base: Any
    bookmarks: list[BookmarkEntry] = field(default_factory=list)
    functions: list[FunctionEntry] = field(default_factory=list)
    labels: list[LabelEntry] = field(default_factory=list)
    comments: list[LabelEntry] = field(default_factory=list)

    def add_function(self, start: str, end: str, icount: str, name: str) -> None:
        # Functions are exported both as ranges and as name labels.
        self.functions.append(FunctionEntry(self.module, start, end, icount))
        self.labels.append(LabelEntry(self.module, start, name))

    def add_comment(self, address: str, text: str | None) -> bool:
        if not text:
            return False
        self.comments.append(LabelEntry(self.module, address, text))
        return True

    def add_bookmark(self, address: str) -> None:
        self.bookmarks.append(BookmarkEntry(self.module, address))

    def counts(self) -> dict[str, int]:
        return {
            "bookmarks": len(self.bookmarks),
            "functions": len(self.functions),
            "labels": len(self.labels),
            "comments": len(self.comments),
        }
