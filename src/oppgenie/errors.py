"""Exceptions raised by oppgenie."""


class OppGenieError(Exception):
    """Base class for oppgenie errors."""


class ChatConfigurationError(OppGenieError):
    """Chat assistant is missing required configuration (e.g. API token)."""
