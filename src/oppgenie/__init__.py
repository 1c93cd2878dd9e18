"""Opportunity aggregation and chat assistant."""

from oppgenie.errors import ChatConfigurationError, OppGenieError

__all__ = ["ChatConfigurationError", "OppGenieError"]
