"""Placeholder connector: synthetic listings for demos and empty upstreams."""

import random
from base64 import b64encode
from typing import Optional

from oppgenie.connectors.base import BaseConnector
from oppgenie.models.opportunity import Opportunity
from oppgenie.models.raw import RawOpportunity

_ROLES = (
    ("Frontend Developer", "Job", "Technology", ["react", "typescript"]),
    ("Backend Engineer", "Job", "Technology", ["python", "apis"]),
    ("Data Science Intern", "Internship", "Technology", ["python", "machine-learning"]),
    ("UX Research Intern", "Internship", "Education", ["design", "research"]),
    ("Community Tutor", "Volunteer", "Social", ["education", "mentorship"]),
    ("Climate Campaign Volunteer", "Volunteer", "Environment", ["climate", "outreach"]),
    ("Open Source Maintainer Apprentice", "Open Source", "Technology", ["open-source", "git"]),
)
_ORGANIZATIONS = ("Acme Labs", "Brightpath", "Northwind", "Greenleaf Trust", "Orbit Systems", "Civic Hub")
_LOCATIONS = ("Remote", "New York, NY", "London, UK", "Bengaluru, India", "Berlin, Germany", "Toronto, ON")
_DEADLINES = ("Ongoing", "Rolling", "2025-01-31", "2025-03-15", "2025-06-30")


def placeholder_logo(text: str) -> str:
    """SVG data URI showing the first letter of text."""
    initial = (text.strip()[:1] or "?").upper()
    svg = (
        '<svg xmlns="http://www.w3.org/2000/svg" width="64" height="64">'
        '<rect width="64" height="64" rx="12" fill="#6366f1"/>'
        '<text x="32" y="42" font-size="28" text-anchor="middle" fill="#fff">'
        f"{initial}</text></svg>"
    )
    return "data:image/svg+xml;base64," + b64encode(svg.encode()).decode()


class PlaceholderConnector(BaseConnector):
    """
    Generates synthetic listings. Deterministic for a given seed or injected rng.
    """

    source_id = "placeholder"

    def __init__(self, count: int = 10, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        if count < 0:
            raise ValueError("count must be >= 0")
        self.count = count
        self._rng = rng or random.Random(seed)

    def search(
        self,
        query: Optional[str] = None,
        filters: Optional[dict] = None,
    ) -> list[RawOpportunity]:
        """Generate filters['count'] (default: self.count) entries."""
        count = (filters or {}).get("count", self.count)
        raw_list: list[RawOpportunity] = []
        for i in range(1, count + 1):
            title, kind, category, tags = self._rng.choice(_ROLES)
            raw_list.append(
                RawOpportunity(
                    data={
                        "n": i,
                        "title": title,
                        "type": kind,
                        "category": category,
                        "tags": list(tags),
                        "organization": self._rng.choice(_ORGANIZATIONS),
                        "location": self._rng.choice(_LOCATIONS),
                        "deadline": self._rng.choice(_DEADLINES),
                    }
                )
            )
        if query:
            q = query.lower()
            raw_list = [r for r in raw_list if q in r.data["title"].lower()]
        return raw_list

    def normalize(self, raw: RawOpportunity) -> Opportunity:
        d = raw.data
        return Opportunity(
            id=f"mock-{d['n']}",
            title=d["title"],
            organization=d["organization"],
            type=d["type"],
            deadline=d["deadline"],
            eligibility="Open to all",
            link="",
            description=f"{d['title']} at {d['organization']}. Placeholder listing.",
            category=d["category"],
            source="Placeholder",
            location=d["location"],
            tags=d["tags"],
            logo=placeholder_logo(d["organization"]),
        )
