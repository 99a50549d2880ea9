"""Bookmark collection for a single bookmark category."""

from export_config import DEFAULT_BOOKMARK_CATEGORY
from export_primitives import relative_hex


def collect_bookmarks(program, database, category=DEFAULT_BOOKMARK_CATEGORY):
    count = 0
    manager = program.getBookmarkManager()
    for bookmark in manager.getBookmarksIterator(category):
        database.add_bookmark(relative_hex(bookmark.getAddress(), database.image_base))
        count += 1
    return count
