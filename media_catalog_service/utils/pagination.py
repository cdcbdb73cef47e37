"""Offset-based pagination over in-memory result sets.

Cursors are decimal offsets serialized as strings. The full result set is
rebuilt on every call, so a cursor only stays accurate while the catalog is
unchanged: items inserted or deleted between page requests can shift the
remaining pages.
"""

from typing import Any, Optional, Sequence

from media_catalog_service.errors import InvalidCursorError


def encode_cursor(offset: int) -> str:
    """Encode an offset as a cursor string."""
    return str(offset)


def decode_cursor(cursor: Optional[str]) -> int:
    """
    Decode a cursor string back to an offset.

    Args:
        cursor: Cursor from a previous page, or None/empty for the first page

    Returns:
        Offset into the result set

    Raises:
        InvalidCursorError: If the cursor is not a non-negative integer
    """
    if cursor is None or cursor == "":
        return 0

    cursor = str(cursor).strip()
    if not (cursor.isascii() and cursor.isdigit()):
        raise InvalidCursorError(f"Invalid cursor: {cursor!r}")

    return int(cursor)


def paginate(items: Sequence[Any], cursor: Optional[str], num_items: int) -> dict[str, Any]:
    """
    Slice one page out of a fully sorted result set.

    Args:
        items: Complete, already sorted result set
        cursor: Cursor returned by the previous page (None for the first)
        num_items: Page size

    Returns:
        Dict with ``page``, ``is_done`` and ``continue_cursor``
    """
    if num_items < 1:
        raise ValueError("num_items must be at least 1")

    start = decode_cursor(cursor)
    end = start + num_items
    is_done = end >= len(items)

    return {
        "page": list(items[start:end]),
        "is_done": is_done,
        "continue_cursor": None if is_done else encode_cursor(end),
    }
