"""Unit tests for ConnectorRegistry."""

import pytest

from oppgenie.connectors.registry import ConnectorRegistry


class TestConnectorRegistry:
    """Tests for ConnectorRegistry."""

    def test_get_github(self) -> None:
        """Registry returns GitHub connector for 'github'."""
        connector = ConnectorRegistry.get("github")
        assert connector.source_id == "github"

    def test_get_case_insensitive(self) -> None:
        """Registry is case-insensitive."""
        c1 = ConnectorRegistry.get("Volunteer")
        c2 = ConnectorRegistry.get("volunteer")
        assert c1.source_id == c2.source_id

    def test_unknown_source_raises(self) -> None:
        """Unknown source raises ValueError."""
        with pytest.raises(ValueError, match="Unknown source: monster"):
            ConnectorRegistry.get("monster")

    def test_unknown_source_lists_available(self) -> None:
        with pytest.raises(ValueError, match="github, indeed"):
            ConnectorRegistry.get("monster")

    def test_kwargs_passed_to_connector(self) -> None:
        connector = ConnectorRegistry.get("placeholder", count=3, seed=1)
        assert len(connector.fetch_all()) == 3

    def test_available_sources(self) -> None:
        sources = ConnectorRegistry.available_sources()
        for expected in ("github", "indeed", "internships", "volunteer", "linkedin", "curated", "placeholder"):
            assert expected in sources

    def test_default_sources_exclude_placeholder(self) -> None:
        defaults = ConnectorRegistry.default_sources()
        assert "placeholder" not in defaults
        assert defaults[0] == "github"
        assert "curated" in defaults
