"""Tests for shared text matching utilities."""

from oppgenie.matching import any_field_contains, contains_term, location_matches


def test_contains_term_case_insensitive() -> None:
    assert contains_term("Climate Research Intern", "research")
    assert contains_term("Climate Research Intern", "CLIMATE")


def test_contains_term_empty_term_matches_nothing() -> None:
    assert not contains_term("anything", "")
    assert not contains_term("anything", "   ")
    assert not contains_term("anything", None)


def test_contains_term_none_text() -> None:
    assert not contains_term(None, "x")


def test_any_field_contains() -> None:
    assert any_field_contains(["Title", None, "python"], "PYTH")
    assert not any_field_contains(["Title", None], "rust")


def test_location_substring() -> None:
    assert location_matches("New York, NY", "york")
    assert not location_matches("Boston, MA", "york")


def test_location_remote_always_matches() -> None:
    assert location_matches("Remote", "Berlin")
    assert location_matches("remote", "Berlin")
    assert location_matches("  REMOTE ", "Berlin")


def test_location_missing_never_matches() -> None:
    assert not location_matches(None, "Berlin")
    assert not location_matches("", "Berlin")


def test_remote_hybrid_is_not_wildcard() -> None:
    """Only the literal value Remote is a wildcard."""
    assert not location_matches("Remote (US only)", "Berlin")
    assert location_matches("Remote (US only)", "us only")
