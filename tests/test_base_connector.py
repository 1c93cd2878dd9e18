"""Unit tests for BaseConnector interface."""

import httpx

from oppgenie.connectors.base import BaseConnector
from oppgenie.models.opportunity import Opportunity
from oppgenie.models.raw import RawOpportunity


class ConcreteConnector(BaseConnector):
    """Concrete implementation for testing base behavior."""

    source_id = "test"

    def search(self, query=None, filters=None):
        return [
            RawOpportunity(data={"id": "1", "title": "A"}),
            RawOpportunity(data={"id": "2", "title": "B"}),
        ]

    def normalize(self, raw: RawOpportunity) -> Opportunity:
        return Opportunity(id=f"test-{raw.data['id']}", title=raw.data["title"])


class BrokenSearchConnector(ConcreteConnector):
    def search(self, query=None, filters=None):
        raise httpx.ConnectError("down")


class BrokenNormalizeConnector(ConcreteConnector):
    def normalize(self, raw: RawOpportunity) -> Opportunity:
        if raw.data["id"] == "2":
            raise KeyError("title")
        return super().normalize(raw)


class TestBaseConnector:
    """Tests for BaseConnector default implementations."""

    def test_fetch_all_uses_search_and_normalize(self) -> None:
        """fetch_all calls search then normalizes each result."""
        results = ConcreteConnector().fetch_all()
        assert [o.id for o in results] == ["test-1", "test-2"]
        assert results[1].title == "B"

    def test_search_failure_returns_empty(self) -> None:
        assert BrokenSearchConnector().fetch_all() == []

    def test_partial_normalize_failure_returns_empty(self) -> None:
        """One bad record discards the batch rather than returning a partial list."""
        assert BrokenNormalizeConnector().fetch_all() == []

    def test_failure_is_logged(self, caplog) -> None:
        with caplog.at_level("WARNING"):
            BrokenSearchConnector().fetch_all()
        assert "Fetch failed for test" in caplog.text
