"""Filter rules: each returns (passed, explanation, rule_id)."""

from typing import Optional

from oppgenie.matching import any_field_contains, location_matches
from oppgenie.models.criteria import SearchCriteria
from oppgenie.models.opportunity import Opportunity


def _is_set(value: Optional[str]) -> bool:
    return bool(value and value.strip())


def apply_location_rule(opp: Opportunity, criteria: SearchCriteria) -> tuple[bool, str, str]:
    """
    Location: case-insensitive substring of opp.location; "Remote" always matches.
    Opportunities without a location are excluded once a location is set.
    """
    if not _is_set(criteria.location):
        return True, "Location filter not set", "location"

    if not _is_set(opp.location):
        return False, "Excluded: no location on opportunity", "location"

    if location_matches(opp.location, criteria.location):
        return True, f"Matches location: {opp.location}", "location"

    return False, f"Excluded: location {opp.location} does not match '{criteria.location}'", "location"


def apply_query_rule(opp: Opportunity, criteria: SearchCriteria) -> tuple[bool, str, str]:
    """Free text: substring of title, description, organization or any tag."""
    if not _is_set(criteria.query):
        return True, "Query filter not set", "query"

    fields = [opp.title, opp.description, opp.organization, *opp.tags]
    if any_field_contains(fields, criteria.query):
        return True, f"Matches query: {criteria.query}", "query"

    return False, f"Excluded: query '{criteria.query}' not found", "query"


def apply_type_rule(opp: Opportunity, criteria: SearchCriteria) -> tuple[bool, str, str]:
    """Type: exact match, case-insensitive."""
    if not _is_set(criteria.type):
        return True, "Type filter not set", "type"

    if opp.type.lower() == criteria.type.strip().lower():
        return True, f"Matches type: {opp.type}", "type"

    return False, f"Excluded: type {opp.type or 'unknown'} is not {criteria.type}", "type"


def apply_category_rule(opp: Opportunity, criteria: SearchCriteria) -> tuple[bool, str, str]:
    """Category: exact match, case-insensitive."""
    if not _is_set(criteria.category):
        return True, "Category filter not set", "category"

    if opp.category.lower() == criteria.category.strip().lower():
        return True, f"Matches category: {opp.category}", "category"

    return False, f"Excluded: category {opp.category or 'unknown'} is not {criteria.category}", "category"
