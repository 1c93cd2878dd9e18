"""Source connectors for opportunity aggregation."""

from oppgenie.connectors.base import BaseConnector
from oppgenie.connectors.registry import ConnectorRegistry

__all__ = ["BaseConnector", "ConnectorRegistry"]
