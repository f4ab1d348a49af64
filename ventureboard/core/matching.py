"""Lookup helpers for resolving user-supplied names and ids."""

from collections.abc import Iterable, Sequence
from typing import TypeVar


T = TypeVar("T")


def _get_text(item: object, key: str) -> str | None:
    """Safely get a string attribute value from an item."""
    value = getattr(item, key, None)
    return value if isinstance(value, str) else None


def match_exact(
    items: Iterable[T],
    query: str,
    *,
    keys: Sequence[str] = ("name",),
) -> T | None:
    """Case-insensitive exact match, trying each key in priority order.

    No partial or word matching: "Acme" does not match "Acme Labs".

    Args:
        items: Records to search
        query: User's search query
        keys: Attribute names to compare, highest priority first

    Returns:
        First item matching the earliest key, or None
    """
    query_lower = query.lower().strip()
    if not query_lower:
        return None

    candidates = list(items)
    for key in keys:
        for item in candidates:
            value = _get_text(item, key)
            if value is not None and value.lower().strip() == query_lower:
                return item
    return None


def match_id_prefix(items: Iterable[T], query: str, *, key: str = "id") -> T | None:
    """Match an exact id, or an id prefix that is unique among items.

    List output shows shortened ids, so callers routinely pass a prefix back.
    Ambiguous prefixes resolve to None.
    """
    query = query.strip()
    if not query:
        return None

    candidates = list(items)
    for item in candidates:
        if _get_text(item, key) == query:
            return item

    matches = [item for item in candidates if (v := _get_text(item, key)) and v.startswith(query)]
    return matches[0] if len(matches) == 1 else None
