"""
Pytest configuration and in-memory stand-ins for the Ghidra program model.
"""

import sys
from pathlib import Path

import pytest

# Add scripts to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

EOL = 0
PRE = 1
POST = 2
PLATE = 3
REPEATABLE = 4

COMMENT_KINDS = (("eol", EOL), ("repeatable", REPEATABLE))


class FakeAddress:
    def __init__(self, offset):
        self.offset = offset

    def getOffset(self):
        return self.offset

    def toString(self):
        return "%08x" % self.offset


class FakeBody:
    """Address set covering the half-open range [start, stop)."""

    def __init__(self, start, stop):
        self.start = start
        self.stop = stop

    def getMinAddress(self):
        return FakeAddress(self.start)

    def getMaxAddress(self):
        return FakeAddress(self.stop - 1)

    def getNumAddresses(self):
        return self.stop - self.start


class FakeFunction:
    def __init__(self, name, start, stop):
        self.name = name
        self.body = FakeBody(start, stop)

    def getName(self):
        return self.name

    def getBody(self):
        return self.body


class FakeFunctionManager:
    def __init__(self, functions):
        self.functions = functions

    def getFunctions(self, forward):
        return iter(self.functions if forward else list(reversed(self.functions)))


class FakeCodeUnit:
    def __init__(self, comments):
        self.comments = comments

    def getComment(self, comment_type):
        return self.comments.get(comment_type)


class FakeListing:
    def __init__(self, code_units, orphan_addresses=()):
        self.code_units = code_units
        self.orphan_addresses = list(orphan_addresses)

    def getCommentAddressIterator(self, memory, forward):
        addresses = sorted(set(self.code_units) | set(self.orphan_addresses))
        return iter([FakeAddress(offset) for offset in addresses])

    def getCodeUnitAt(self, addr):
        return self.code_units.get(addr.getOffset())


class FakeBookmark:
    def __init__(self, category, offset):
        self.category = category
        self.offset = offset

    def getAddress(self):
        return FakeAddress(self.offset)


class FakeBookmarkManager:
    def __init__(self, bookmarks):
        self.bookmarks = bookmarks

    def getBookmarksIterator(self, category):
        return iter([bm for bm in self.bookmarks if bm.category == category])


class FakeProgram:
    def __init__(
        self,
        name="Target.EXE",
        image_base=0x400000,
        functions=(),
        comments=None,
        orphan_comment_addresses=(),
        bookmarks=(),
    ):
        self.name = name
        self.image_base = FakeAddress(image_base)
        self.function_manager = FakeFunctionManager(list(functions))
        code_units = {
            offset: FakeCodeUnit(kinds) for offset, kinds in (comments or {}).items()
        }
        self.listing = FakeListing(code_units, orphan_comment_addresses)
        self.bookmark_manager = FakeBookmarkManager(list(bookmarks))

    def getName(self):
        return self.name

    def getImageBase(self):
        return self.image_base

    def getFunctionManager(self):
        return self.function_manager

    def getListing(self):
        return self.listing

    def getMemory(self):
        return None

    def getBookmarkManager(self):
        return self.bookmark_manager


@pytest.fixture
def make_program():
    """Build a fake program; keyword arguments mirror FakeProgram."""
    return FakeProgram


@pytest.fixture
def sample_program():
    """Program from the reference scenario: `main` with an inline comment."""
    return FakeProgram(
        name="Sample.exe",
        image_base=0x400000,
        functions=[FakeFunction("main", 0x401000, 0x401050)],
        comments={0x401010: {EOL: "init"}},
        bookmarks=[FakeBookmark("Note", 0x401020), FakeBookmark("Analysis", 0x402000)],
    )


@pytest.fixture
def quiet():
    """Logger that swallows progress lines."""
    lines = []
    return lines.append
