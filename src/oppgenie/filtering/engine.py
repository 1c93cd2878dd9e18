"""Filter engine with pluggable rules and explanation trail."""

from typing import Callable, Optional

from pydantic import BaseModel, Field

from oppgenie.models.criteria import SearchCriteria
from oppgenie.models.opportunity import Opportunity

from .rules import (
    apply_category_rule,
    apply_location_rule,
    apply_query_rule,
    apply_type_rule,
)


class FilterResult(BaseModel):
    """Result of filtering an opportunity against search criteria."""

    passed: bool = Field(..., description="All filters passed")
    explanations: list[str] = Field(default_factory=list)
    opportunity: Opportunity = Field(..., description="The opportunity that was filtered")
    excluded_by_rule: Optional[str] = Field(
        default=None,
        description="First rule that excluded (location|query|type|category)",
    )


RuleFn = Callable[[Opportunity, SearchCriteria], tuple[bool, str, str]]


class FilterEngine:
    """
    Applies search criteria to opportunities.
    filter() runs every rule so the explanation trail is complete and records
    the first failing rule as excluded_by_rule. matches() only answers yes or no.
    """

    def __init__(self, criteria: SearchCriteria):
        self.criteria = criteria
        self._rules: list[RuleFn] = [
            apply_location_rule,
            apply_query_rule,
            apply_type_rule,
            apply_category_rule,
        ]

    def matches(self, opp: Opportunity) -> bool:
        """True when every rule passes. Stops at the first failing rule."""
        return all(rule(opp, self.criteria)[0] for rule in self._rules)

    def filter(self, opp: Opportunity) -> FilterResult:
        """Run every rule and keep its explanation, in rule order."""
        outcomes = [rule(opp, self.criteria) for rule in self._rules]
        failed = [rule_id for passed, _, rule_id in outcomes if not passed]
        return FilterResult(
            passed=not failed,
            explanations=[explanation for _, explanation, _ in outcomes],
            opportunity=opp,
            excluded_by_rule=failed[0] if failed else None,
        )

    def filter_many(self, opportunities: list[Opportunity]) -> list[FilterResult]:
        """One FilterResult per opportunity, passed or not."""
        return [self.filter(opp) for opp in opportunities]
