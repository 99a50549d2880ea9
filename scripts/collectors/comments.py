"""End-of-line and repeatable comment collection.

Ghidra also stores pre, post and plate comments. x64dbg has a single comment
slot per address, so only the two inline kinds are exported and each present
kind becomes its own entry. `comment_kinds` pairs a kind name with the
host's comment type id (Ghidra's `CodeUnit.EOL_COMMENT` and
`CodeUnit.REPEATABLE_COMMENT`).
"""

from export_primitives import relative_hex


def iter_commented_code_units(program):
    listing = program.getListing()
    for addr in listing.getCommentAddressIterator(program.getMemory(), True):
        cu = listing.getCodeUnitAt(addr)
        # Comments can outlive the code unit they were attached to.
        if cu is None:
            continue
        yield addr, cu


def collect_comments(program, database, comment_kinds):
    count = 0
    for addr, cu in iter_commented_code_units(program):
        address = relative_hex(addr, database.image_base)
        for _kind, comment_type in comment_kinds:
            if database.add_comment(address, cu.getComment(comment_type)):
                count += 1
    return count
