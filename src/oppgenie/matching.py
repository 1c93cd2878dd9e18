"""Shared text matching utilities for filtering and search."""

from typing import Iterable, Optional

REMOTE = "remote"


def _normalize_for_match(text: Optional[str]) -> str:
    """Lowercase and strip for matching; empty string if None."""
    return (text or "").lower().strip()


def contains_term(text: Optional[str], term: Optional[str]) -> bool:
    """Case-insensitive substring match. An empty term matches nothing."""
    needle = _normalize_for_match(term)
    if not needle:
        return False
    return needle in (text or "").lower()


def any_field_contains(fields: Iterable[Optional[str]], term: Optional[str]) -> bool:
    """True if term appears (case-insensitive) in any of the given fields."""
    return any(contains_term(f, term) for f in fields)


def location_matches(location: Optional[str], wanted: Optional[str]) -> bool:
    """
    Location filter: substring of the record's location, or the record is Remote.
    A record without a location never matches a set filter.
    """
    loc = _normalize_for_match(location)
    if not loc:
        return False
    return loc == REMOTE or _normalize_for_match(wanted) in loc
