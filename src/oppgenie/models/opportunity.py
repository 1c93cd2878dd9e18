"""Normalized opportunity model."""

from typing import Optional

from pydantic import BaseModel, Field


class Opportunity(BaseModel):
    """Common listing record produced by all source connectors."""

    id: str = Field(..., description="Source-prefixed ID, e.g. 'gh-123'")

    title: str = ""
    organization: str = ""
    type: str = ""
    deadline: str = ""
    eligibility: str = ""
    link: str = ""
    description: str = ""
    category: str = ""
    source: str = ""

    location: Optional[str] = None
    posted: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    logo: Optional[str] = Field(default=None, description="URL or data: URI placeholder")
