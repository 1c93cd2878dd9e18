"""Aggregation: fetch from every source → dedupe → filter, plus trending and latest views."""

import logging
import random
from typing import Optional, Sequence

from oppgenie.connectors.base import BaseConnector
from oppgenie.connectors.curated import CuratedConnector, load_curated_data
from oppgenie.connectors.placeholder import PlaceholderConnector
from oppgenie.connectors.registry import ConnectorRegistry
from oppgenie.filtering import FilterEngine
from oppgenie.matching import any_field_contains, location_matches
from oppgenie.models.criteria import SearchCriteria
from oppgenie.models.opportunity import Opportunity
from oppgenie.models.trending import TrendingTag

logger = logging.getLogger(__name__)

TRENDING_LIMIT = 10


def default_connectors() -> list[BaseConnector]:
    """One instance of every default source, in fetch order."""
    return [ConnectorRegistry.get(s) for s in ConnectorRegistry.default_sources()]


def dedupe_by_id(opportunities: Sequence[Opportunity]) -> list[Opportunity]:
    """Keep the first record for each id."""
    seen: set[str] = set()
    unique: list[Opportunity] = []
    for opp in opportunities:
        if opp.id in seen:
            logger.debug("Dropping duplicate opportunity %s", opp.id)
            continue
        seen.add(opp.id)
        unique.append(opp)
    return unique


def filter_by_location(opportunities: Sequence[Opportunity], location: Optional[str]) -> list[Opportunity]:
    """
    Keep records whose location contains `location` (case-insensitive) or is Remote.
    An empty filter returns everything.
    """
    if not location or not location.strip():
        return list(opportunities)
    return [o for o in opportunities if location_matches(o.location, location)]


def fetch_all_opportunities(
    query: str = "",
    location: str = "",
    *,
    connectors: Optional[Sequence[BaseConnector]] = None,
    include_placeholders: int = 0,
    rng: Optional[random.Random] = None,
) -> list[Opportunity]:
    """
    Run every connector in order and concatenate the results.
    Sources that fail contribute nothing. Adds `include_placeholders`
    synthetic entries at the end, then applies the location filter.
    """
    sources = list(connectors) if connectors is not None else default_connectors()
    if include_placeholders > 0:
        sources.append(PlaceholderConnector(count=include_placeholders, rng=rng))

    filters = {"location": location} if location else None
    combined: list[Opportunity] = []
    for connector in sources:
        batch = connector.fetch_all(query=query or None, filters=filters)
        logger.info("Fetched %d opportunities from %s", len(batch), connector.source_id)
        combined.extend(batch)

    return filter_by_location(dedupe_by_id(combined), location)


def search_opportunities(
    query: str,
    *,
    opportunities: Optional[Sequence[Opportunity]] = None,
) -> list[Opportunity]:
    """Case-insensitive substring search over title, description, organization and tags."""
    pool = list(opportunities) if opportunities is not None else fetch_all_opportunities()
    if not query or not query.strip():
        return pool
    return [
        o
        for o in pool
        if any_field_contains([o.title, o.description, o.organization, *o.tags], query)
    ]


def get_trending(
    limit: int = TRENDING_LIMIT,
    *,
    opportunities: Optional[Sequence[Opportunity]] = None,
    rng: Optional[random.Random] = None,
) -> list[Opportunity]:
    """
    Uniform random selection of distinct records from the aggregated set.
    `limit` is capped at TRENDING_LIMIT.
    """
    pool = dedupe_by_id(opportunities if opportunities is not None else fetch_all_opportunities())
    rng = rng or random.Random()
    count = min(max(limit, 0), TRENDING_LIMIT, len(pool))
    return rng.sample(pool, count)


def filter_opportunities(
    opportunities: Sequence[Opportunity],
    criteria: SearchCriteria,
) -> list[Opportunity]:
    """Opportunities passing every rule in criteria."""
    engine = FilterEngine(criteria)
    return [o for o in opportunities if engine.matches(o)]


def latest_opportunities(*, type: Optional[str] = None, query: str = "") -> list[Opportunity]:
    """Latest-postings board, optionally narrowed by type and search term."""
    latest = CuratedConnector().fetch_all(filters={"section": "latest"})
    return filter_opportunities(latest, SearchCriteria(type=type, query=query or None))


def trending_tags() -> list[TrendingTag]:
    """Popular topic cards, most listings first."""
    tags = [TrendingTag.model_validate(t) for t in load_curated_data().get("trending_tags") or []]
    return sorted(tags, key=lambda t: t.count, reverse=True)
