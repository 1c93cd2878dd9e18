"""Registry for discovering and instantiating connectors."""

from typing import Type

from oppgenie.connectors.backend import (
    IndeedJobsConnector,
    InternshipsConnector,
    LinkedInJobsConnector,
    VolunteerConnector,
)
from oppgenie.connectors.base import BaseConnector
from oppgenie.connectors.curated import CuratedConnector
from oppgenie.connectors.github import GitHubConnector
from oppgenie.connectors.placeholder import PlaceholderConnector


class ConnectorRegistry:
    """Discovers and provides source connectors."""

    _connectors: dict[str, Type[BaseConnector]] = {
        "github": GitHubConnector,
        "indeed": IndeedJobsConnector,
        "internships": InternshipsConnector,
        "volunteer": VolunteerConnector,
        "linkedin": LinkedInJobsConnector,
        "curated": CuratedConnector,
        "placeholder": PlaceholderConnector,
    }

    # Synthetic data is opt-in.
    _opt_in: frozenset[str] = frozenset({"placeholder"})

    @classmethod
    def get(cls, source_id: str, **kwargs) -> BaseConnector:
        """Instantiate the connector for source_id (any case); kwargs go to its constructor."""
        try:
            connector_cls = cls._connectors[source_id.lower()]
        except KeyError:
            raise ValueError(
                f"Unknown source: {source_id}. Available: {', '.join(cls._connectors)}"
            ) from None
        return connector_cls(**kwargs)

    @classmethod
    def available_sources(cls) -> list[str]:
        """Every registered source id, opt-in ones included, in fetch order."""
        return [*cls._connectors]

    @classmethod
    def default_sources(cls) -> list[str]:
        """Sources queried by the aggregator when none are given, in fetch order."""
        return [s for s in cls._connectors if s not in cls._opt_in]
