"""Curated connector: hand-picked listings shipped as package data."""

from pathlib import Path
from typing import Any, Optional

import yaml

from oppgenie.connectors.base import BaseConnector
from oppgenie.models.opportunity import Opportunity
from oppgenie.models.raw import RawOpportunity

CURATED_DATA_PATH = Path(__file__).parent.parent / "data" / "curated.yaml"

SECTIONS = ("curated", "latest")


def load_curated_data(path: str | Path = CURATED_DATA_PATH) -> dict[str, Any]:
    """Load the curated YAML document (curated, latest, trending_tags)."""
    return yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}


class CuratedConnector(BaseConnector):
    """
    Static listings: featured programmes ("curated") and the latest-postings
    board ("latest"). No network access.
    """

    source_id = "curated"

    def __init__(self, data_path: str | Path = CURATED_DATA_PATH):
        self._data_path = Path(data_path)

    def search(
        self,
        query: Optional[str] = None,
        filters: Optional[dict] = None,
    ) -> list[RawOpportunity]:
        """
        filters: optional dict with 'section' key: 'curated' | 'latest' | 'all' (default: 'all').
        query: optional keyword filter on title/description.
        """
        section = (filters or {}).get("section", "all")
        if section != "all" and section not in SECTIONS:
            raise ValueError(f"Unknown curated section: {section}")
        data = load_curated_data(self._data_path)
        wanted = SECTIONS if section == "all" else (section,)
        raw_list = [RawOpportunity(data=dict(item)) for s in wanted for item in data.get(s) or []]

        if query:
            q = query.lower()
            raw_list = [
                r
                for r in raw_list
                if q in (r.data.get("title") or "").lower()
                or q in (r.data.get("description") or "").lower()
            ]
        return raw_list

    def normalize(self, raw: RawOpportunity) -> Opportunity:
        """Curated entries already use the Opportunity field names."""
        d = dict(raw.data)
        d.setdefault("source", "Custom")
        return Opportunity.model_validate(d)
