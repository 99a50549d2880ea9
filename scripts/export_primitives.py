"""Low-level exporter primitives.

This module holds small, dependency-free helpers shared across collectors and
writers: Ghidra address conversion and image-base-relative formatting.
"""

from __future__ import annotations

from typing import Any


class ExportError(Exception):
    """Base class for exporter failures."""


class AddressRangeError(ExportError, ValueError):
    """Raised when an address lies below the program image base."""


def addr_offset(addr: Any) -> int:
    """Return the numeric offset of a Ghidra `Address` (or a plain int)."""
    if isinstance(addr, int):
        return addr
    return int(addr.getOffset())


def hex_token(value: int) -> str:
    return "0x%x" % value


def relative_hex(addr: Any, image_base: Any) -> str:
    """Render `addr` as a `0x`-prefixed lower-case offset from `image_base`.

    The host keeps every exported address inside the loaded image, so an
    address below the base points at a broken program model rather than data
    worth exporting.
    """
    offset = addr_offset(addr) - addr_offset(image_base)
    if offset < 0:
        raise AddressRangeError(
            "Address %s lies below image base %s"
            % (hex_token(addr_offset(addr)), hex_token(addr_offset(image_base)))
        )
    return hex_token(offset)


def module_name(name: str | None) -> str:
    return (name or "").lower()
