"""Unit tests for synthetic placeholder listings."""

import base64
import random

import pytest

from oppgenie.connectors.placeholder import PlaceholderConnector, placeholder_logo


class TestPlaceholderConnector:
    """Tests for PlaceholderConnector."""

    def test_count_and_ids(self) -> None:
        opps = PlaceholderConnector(count=5, seed=1).fetch_all()
        assert [o.id for o in opps] == ["mock-1", "mock-2", "mock-3", "mock-4", "mock-5"]
        assert all(o.source == "Placeholder" for o in opps)

    def test_deterministic_for_seed(self) -> None:
        a = PlaceholderConnector(count=8, seed=42).fetch_all()
        b = PlaceholderConnector(count=8, rng=random.Random(42)).fetch_all()
        assert a == b

    def test_zero_count(self) -> None:
        assert PlaceholderConnector(count=0).fetch_all() == []

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(ValueError, match="count must be >= 0"):
            PlaceholderConnector(count=-1)

    def test_count_filter_override(self) -> None:
        assert len(PlaceholderConnector(count=3, seed=0).fetch_all(filters={"count": 6})) == 6

    def test_logo_is_data_uri(self) -> None:
        [opp] = PlaceholderConnector(count=1, seed=3).fetch_all()
        assert opp.logo is not None
        assert opp.logo.startswith("data:image/svg+xml;base64,")


class TestPlaceholderLogo:
    def test_initial_in_svg(self) -> None:
        uri = placeholder_logo("northwind")
        svg = base64.b64decode(uri.split(",", 1)[1]).decode()
        assert ">N</text>" in svg

    def test_empty_text(self) -> None:
        svg = base64.b64decode(placeholder_logo("  ").split(",", 1)[1]).decode()
        assert ">?</text>" in svg
