"""Unit tests for the curated (static) connector."""

from pathlib import Path

from oppgenie.connectors.curated import CuratedConnector, load_curated_data


class TestCuratedConnector:
    """Tests for bundled curated data."""

    def test_curated_section(self) -> None:
        """Featured programmes are tagged with the Custom source."""
        opps = CuratedConnector().fetch_all(filters={"section": "curated"})
        assert [o.id for o in opps] == ["custom-1", "custom-2"]
        assert opps[0].title == "UN Young Leaders Programme"
        assert opps[0].organization == "United Nations"
        assert all(o.source == "Custom" for o in opps)
        assert opps[1].tags == ["Healthcare", "Fellowship", "Global Health"]

    def test_latest_section(self) -> None:
        opps = CuratedConnector().fetch_all(filters={"section": "latest"})
        assert len(opps) == 5
        assert opps[0].title == "Youth Coding Mentor"
        assert opps[0].posted == "2024-03-15"

    def test_all_sections_by_default(self) -> None:
        opps = CuratedConnector().fetch_all()
        assert len(opps) == 7
        assert len({o.id for o in opps}) == 7

    def test_unknown_section_returns_empty(self) -> None:
        assert CuratedConnector().fetch_all(filters={"section": "archive"}) == []

    def test_query(self) -> None:
        opps = CuratedConnector().fetch_all("fellowship")
        assert [o.id for o in opps] == ["custom-2"]

    def test_custom_data_path(self, tmp_path: Path) -> None:
        path = tmp_path / "curated.yaml"
        path.write_text(
            "curated:\n"
            "  - id: custom-9\n"
            "    title: Local Hackathon\n"
            "    source: Meetup\n"
        )
        opps = CuratedConnector(data_path=path).fetch_all()
        assert [(o.id, o.source) for o in opps] == [("custom-9", "Meetup")]

    def test_trending_tags_present(self) -> None:
        data = load_curated_data()
        assert len(data["trending_tags"]) == 6
