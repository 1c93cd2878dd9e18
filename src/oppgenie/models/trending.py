"""Trending tag model."""

from pydantic import BaseModel


class TrendingTag(BaseModel):
    """A popular topic card: how many listings carry it and its growth in percent."""

    name: str
    count: int
    category: str
    trend: int
    description: str = ""
