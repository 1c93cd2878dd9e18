"""Abstract base class for source connectors."""

import json
import logging
from abc import ABC, abstractmethod
from typing import Optional

import httpx
from pydantic import ValidationError

from oppgenie.models.opportunity import Opportunity
from oppgenie.models.raw import RawOpportunity

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0

# Failures that degrade a source to an empty result instead of propagating.
SOURCE_ERRORS = (
    httpx.HTTPError,
    json.JSONDecodeError,
    ValidationError,
    KeyError,
    TypeError,
    AttributeError,
    ValueError,
)


class BaseConnector(ABC):
    """
    Standard interface for opportunity source connectors.
    Connectors implement search and normalize; fetch_all never raises on
    network or response-shape errors.
    """

    source_id: str = ""

    @abstractmethod
    def search(self, query: Optional[str] = None, filters: Optional[dict] = None) -> list[RawOpportunity]:
        """
        List or search listings; returns raw format from source.
        """
        pass

    @abstractmethod
    def normalize(self, raw: RawOpportunity) -> Opportunity:
        """
        Convert raw record to Opportunity.
        """
        pass

    def fetch_all(self, query: Optional[str] = None, filters: Optional[dict] = None) -> list[Opportunity]:
        """
        Search then normalize each result.
        Any network or shape failure is logged and yields an empty list, so
        callers see either a complete batch or nothing.
        """
        try:
            raw_list = self.search(query=query, filters=filters)
            return [self.normalize(r) for r in raw_list]
        except SOURCE_ERRORS as e:
            logger.warning("Fetch failed for %s: %s", self.source_id or type(self).__name__, e)
            return []
