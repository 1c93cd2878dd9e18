"""Data models for normalized opportunities, search criteria and chat messages."""

from oppgenie.models.chat import ChatMessage
from oppgenie.models.criteria import SearchCriteria
from oppgenie.models.opportunity import Opportunity
from oppgenie.models.raw import RawOpportunity
from oppgenie.models.trending import TrendingTag

__all__ = ["ChatMessage", "Opportunity", "RawOpportunity", "SearchCriteria", "TrendingTag"]
