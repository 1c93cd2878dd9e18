"""Chat assistant backed by a hosted language model."""

from oppgenie.chat.assistant import (
    CONFIGURATION_ISSUE_MESSAGE,
    GENERIC_ERROR_MESSAGE,
    HIGH_TRAFFIC_MESSAGE,
    TIMED_OUT_MESSAGE,
    generate_response,
)

__all__ = [
    "CONFIGURATION_ISSUE_MESSAGE",
    "GENERIC_ERROR_MESSAGE",
    "HIGH_TRAFFIC_MESSAGE",
    "TIMED_OUT_MESSAGE",
    "generate_response",
]
