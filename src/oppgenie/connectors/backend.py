"""Connectors for the internal listing endpoints (jobs, internships, volunteering).

These endpoints are served by a companion backend that is not part of this
package. Until it exists they answer with errors or empty collections; the
base connector turns both into an empty result.
"""

import os
from typing import Optional

import httpx

from oppgenie.connectors.base import DEFAULT_TIMEOUT, BaseConnector
from oppgenie.models.opportunity import Opportunity
from oppgenie.models.raw import RawOpportunity

DEFAULT_API_BASE_URL = "http://localhost:8000"


class BackendListingConnector(BaseConnector):
    """
    Shared GET /api/<endpoint>?location=... flow. Response shape: {"items": [...]}.
    Subclasses set the endpoint path and the item keys that differ per feed.
    """

    endpoint: str = ""
    id_prefix: str = ""
    listing_type: str = ""
    source_name: str = ""
    default_category: str = "Work"

    organization_key: str = "company"
    tags_key: str = "skills"
    logo_key: str = "company_logo"

    def __init__(self, client: Optional[httpx.Client] = None, base_url: Optional[str] = None):
        base_url = base_url or os.environ.get("OPPGENIE_API_BASE_URL") or DEFAULT_API_BASE_URL
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(timeout=DEFAULT_TIMEOUT, follow_redirects=True)

    @property
    def url(self) -> str:
        return f"{self._base_url}{self.endpoint}"

    def search(
        self,
        query: Optional[str] = None,
        filters: Optional[dict] = None,
    ) -> list[RawOpportunity]:
        """
        Fetch listings for an optional location (filters['location']).
        query: optional keyword filter applied client-side to title/description.
        """
        location = (filters or {}).get("location") or ""
        resp = self._client.get(self.url, params={"location": location})
        resp.raise_for_status()
        items = resp.json()["items"]
        if not isinstance(items, list):
            raise TypeError(f"Expected list of items, got {type(items).__name__}")
        raw_list = [RawOpportunity(data=item) for item in items]

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
        """Convert a backend listing item to Opportunity."""
        d = raw.data
        return Opportunity(
            id=f"{self.id_prefix}-{d['id']}",
            title=(d.get("title") or "").strip() or "Untitled",
            organization=(d.get(self.organization_key) or "").strip(),
            type=self.listing_type,
            deadline=d.get("deadline") or "",
            eligibility=d.get("eligibility") or "",
            link=d.get("url") or "",
            description=d.get("description") or "",
            category=d.get("category") or self.default_category,
            source=self.source_name,
            location=d.get("location"),
            posted=d.get("posted_at"),
            tags=list(d.get(self.tags_key) or []),
            logo=d.get(self.logo_key),
        )


class IndeedJobsConnector(BackendListingConnector):
    """Job listings proxied from Indeed."""

    source_id = "indeed"
    endpoint = "/api/indeed-jobs"
    id_prefix = "in"
    listing_type = "Job"
    source_name = "Indeed"


class InternshipsConnector(BackendListingConnector):
    """Internship listings."""

    source_id = "internships"
    endpoint = "/api/internships"
    id_prefix = "int"
    listing_type = "Internship"
    source_name = "Internships"
    default_category = "Education"


class VolunteerConnector(BackendListingConnector):
    """Volunteer roles; organizations rather than companies."""

    source_id = "volunteer"
    endpoint = "/api/volunteer"
    id_prefix = "vol"
    listing_type = "Volunteer"
    source_name = "Volunteer"
    default_category = "Social"

    organization_key = "organization"
    tags_key = "categories"
    logo_key = "organization_logo"


class LinkedInJobsConnector(BackendListingConnector):
    """Job listings proxied from LinkedIn."""

    source_id = "linkedin"
    endpoint = "/api/linkedin-jobs"
    id_prefix = "li"
    listing_type = "Job"
    source_name = "LinkedIn"
