"""Search criteria model for filtering aggregated opportunities."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field


class SearchCriteria(BaseModel):
    """Client-side filters. Empty or missing values mean "not set"."""

    query: Optional[str] = Field(default=None, description="Free-text substring")
    location: Optional[str] = Field(default=None, description="Location substring; 'Remote' always matches")
    type: Optional[str] = Field(default=None, description="e.g. 'Internship', 'Volunteer'")
    category: Optional[str] = None

    @classmethod
    def from_yaml(cls, path: str | Path) -> "SearchCriteria":
        """Load criteria from YAML file. Supports nested (filters) or flat structure."""
        data = yaml.safe_load(Path(path).read_text()) or {}
        filters = data.get("filters", {}) or {}

        def _get(key: str):
            value = filters.get(key, data.get(key))
            return str(value) if value is not None else None

        return cls.model_validate(
            {
                "query": _get("query"),
                "location": _get("location"),
                "type": _get("type"),
                "category": _get("category"),
            }
        )
