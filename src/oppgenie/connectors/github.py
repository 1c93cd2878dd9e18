"""GitHub connector: repositories with good-first issues, via the public search API."""

import os
from typing import Optional

import httpx

from oppgenie.connectors.base import DEFAULT_TIMEOUT, BaseConnector
from oppgenie.models.opportunity import Opportunity
from oppgenie.models.raw import RawOpportunity


class GitHubConnector(BaseConnector):
    """
    Connector for open-source contribution opportunities on GitHub.
    Searches repositories that advertise good-first issues, most recently
    updated first.
    """

    source_id = "github"

    SEARCH_URL = "https://api.github.com/search/repositories"
    PER_PAGE = 10
    DEFAULT_QUERY = "good-first-issues:>0 help-wanted-issues:>0"

    DEFAULT_HEADERS = {
        "User-Agent": "oppgenie/0.1 (opportunity aggregator)",
        "Accept": "application/vnd.github+json",
    }

    def __init__(self, client: Optional[httpx.Client] = None, token: Optional[str] = None):
        token = token if token is not None else os.environ.get("GITHUB_TOKEN")
        headers = dict(self.DEFAULT_HEADERS)
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = client or httpx.Client(
            timeout=DEFAULT_TIMEOUT,
            follow_redirects=True,
            headers=headers,
        )

    def build_query(self, query: Optional[str] = None) -> str:
        """Search qualifier: free text restricted to repos with good-first issues."""
        if query and query.strip():
            return f"{query.strip()} in:name,description,readme good-first-issues:>0"
        return self.DEFAULT_QUERY

    def search(
        self,
        query: Optional[str] = None,
        filters: Optional[dict] = None,
    ) -> list[RawOpportunity]:
        """Fetch one page of repositories, sorted by update time."""
        params = {
            "q": self.build_query(query),
            "sort": "updated",
            "order": "desc",
            "per_page": (filters or {}).get("per_page", self.PER_PAGE),
        }
        resp = self._client.get(self.SEARCH_URL, params=params)
        resp.raise_for_status()
        payload = resp.json()
        items = payload["items"]
        if not isinstance(items, list):
            raise TypeError(f"Expected list of items, got {type(items).__name__}")
        return [RawOpportunity(data=item) for item in items]

    def normalize(self, raw: RawOpportunity) -> Opportunity:
        """Convert a repository search item to Opportunity."""
        d = raw.data
        owner = d["owner"]
        tags = [t for t in [d.get("language"), *(d.get("topics") or [])] if t is not None]

        return Opportunity(
            id=f"gh-{d['id']}",
            title=d["name"],
            organization=owner["login"],
            type="Open Source",
            deadline="Ongoing",
            eligibility="Open to all contributors",
            link=d.get("html_url") or "",
            description=d.get("description") or "No description available",
            category="Technology",
            source="GitHub",
            location="Remote",
            posted=d.get("created_at"),
            tags=tags,
            logo=owner.get("avatar_url"),
        )
