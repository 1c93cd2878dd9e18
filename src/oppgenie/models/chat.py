"""Chat message model."""

from typing import Literal

from pydantic import BaseModel


class ChatMessage(BaseModel):
    """One turn of a conversation with the assistant."""

    role: Literal["user", "assistant"]
    content: str
