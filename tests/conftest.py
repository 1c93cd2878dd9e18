"""Pytest fixtures for oppgenie tests."""

from typing import Any, Callable

import httpx
import pytest

from oppgenie.models.opportunity import Opportunity


def json_client(payload: Any, status_code: int = 200) -> httpx.Client:
    """httpx client whose every request answers with the given JSON payload."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)

    return httpx.Client(transport=httpx.MockTransport(handler))


def recording_client(payload: Any, requests: list[httpx.Request], status_code: int = 200) -> httpx.Client:
    """Like json_client, but appends each request to `requests`."""

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(status_code, json=payload)

    return httpx.Client(transport=httpx.MockTransport(handler))


def failing_client(exc: Exception) -> httpx.Client:
    """httpx client whose every request raises exc."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise exc

    return httpx.Client(transport=httpx.MockTransport(handler))


def text_client(body: str, status_code: int = 200) -> httpx.Client:
    """httpx client answering with a raw (possibly non-JSON) body."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=body)

    return httpx.Client(transport=httpx.MockTransport(handler))


@pytest.fixture
def sample_github_repo() -> dict[str, Any]:
    """One item from the GitHub repository search API."""
    return {
        "id": 123,
        "name": "first-contributions",
        "owner": {"login": "firstcontributions", "avatar_url": "https://avatars.example.com/u/1"},
        "created_at": "2016-02-01T10:00:00Z",
        "description": "Help beginners to contribute to open source projects",
        "html_url": "https://github.com/firstcontributions/first-contributions",
        "language": "Python",
        "topics": ["beginner-friendly", "hacktoberfest"],
    }


@pytest.fixture
def sample_github_payload(sample_github_repo: dict[str, Any]) -> dict[str, Any]:
    """Search API response with one repository."""
    return {"total_count": 1, "incomplete_results": False, "items": [sample_github_repo]}


@pytest.fixture
def sample_job_item() -> dict[str, Any]:
    """One item from the jobs/internships backend endpoints."""
    return {
        "id": 7,
        "title": "Junior Data Analyst",
        "company": "Datacorp",
        "location": "Toronto, ON",
        "posted_at": "2024-03-01",
        "deadline": "2024-04-01",
        "description": "Analyse product data with SQL and Python.",
        "url": "https://jobs.example.com/7",
        "skills": ["sql", "python"],
        "company_logo": "https://logos.example.com/datacorp.png",
    }


@pytest.fixture
def sample_volunteer_item() -> dict[str, Any]:
    """One item from the volunteer backend endpoint."""
    return {
        "id": 9,
        "title": "Food Bank Helper",
        "organization": "City Food Bank",
        "location": "Remote",
        "posted_at": "2024-03-02",
        "deadline": "Ongoing",
        "description": "Coordinate deliveries.",
        "url": "https://volunteer.example.com/9",
        "categories": ["community", "food"],
        "organization_logo": "https://logos.example.com/foodbank.png",
    }


@pytest.fixture
def make_opp() -> Callable[..., Opportunity]:
    """Factory for Opportunity with sensible defaults."""

    def _make(**kwargs) -> Opportunity:
        defaults = {
            "id": "custom-1",
            "title": "Open Source Mentorship",
            "organization": "Code for Change",
            "type": "Volunteer",
            "description": "Mentor new contributors.",
            "category": "Technology",
            "source": "Custom",
            "location": "Remote",
            "tags": ["mentorship", "python"],
        }
        defaults.update(kwargs)
        return Opportunity(**defaults)

    return _make
