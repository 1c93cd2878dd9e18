"""Chat request function. Supports a raw text-generation endpoint and an OpenAI-compatible chat API.

Failures never reach the caller as exceptions (except missing configuration):
they are mapped to a short user-facing string shown in place of the reply.
No retries.
"""

import logging
import os
from typing import Any, Optional, Sequence, Union

import httpx
import openai
from openai import OpenAI

from oppgenie.errors import ChatConfigurationError
from oppgenie.models.chat import ChatMessage

from .prompts import ASSISTANT_MARKER, PERSONAS, build_prompt

logger = logging.getLogger(__name__)

HIGH_TRAFFIC_MESSAGE = "I'm currently experiencing high traffic. Please try again in a moment."
CONFIGURATION_ISSUE_MESSAGE = (
    "There seems to be a configuration issue with the assistant. Please check the API token."
)
TIMED_OUT_MESSAGE = "The request timed out. Please try again."
GENERIC_ERROR_MESSAGE = "I apologize, but I encountered an error. Please try again."

DEFAULT_MODEL_URL = "https://api-inference.huggingface.co/models/mistralai/Mistral-7B-Instruct-v0.2"
DEFAULT_CHAT_BASE_URL = "https://router.huggingface.co/v1"
DEFAULT_CHAT_MODEL = "mistralai/Mistral-7B-Instruct-v0.2"
DEFAULT_TIMEOUT = 30.0

MODES = ("prompt", "chat")

GENERATION_PARAMETERS = {
    "max_new_tokens": 500,
    "temperature": 0.7,
    "top_p": 0.95,
    "repetition_penalty": 1.15,
    "do_sample": True,
}

_STATUS_MESSAGES = {
    429: HIGH_TRAFFIC_MESSAGE,
    401: CONFIGURATION_ISSUE_MESSAGE,
}

MessageLike = Union[ChatMessage, dict[str, Any]]


class ResponseShapeError(ValueError):
    """Endpoint answered 2xx but not in the expected shape."""


def classify_failure(status_code: Optional[int] = None, *, timed_out: bool = False) -> str:
    """Map a failed request to the user-facing fallback string."""
    if timed_out:
        return TIMED_OUT_MESSAGE
    return _STATUS_MESSAGES.get(status_code, GENERIC_ERROR_MESSAGE)


def resolve_token(token: Optional[str] = None) -> str:
    """Explicit token, else OPPGENIE_HF_TOKEN, else HF_TOKEN. Raises when none is set."""
    if token is None:
        token = os.environ.get("OPPGENIE_HF_TOKEN") or os.environ.get("HF_TOKEN")
    if not token or not token.strip():
        raise ChatConfigurationError(
            "API token not found. Set OPPGENIE_HF_TOKEN (or HF_TOKEN) in the environment."
        )
    return token.strip()


def _resolve_mode(mode: Optional[str]) -> str:
    mode = (mode or os.environ.get("OPPGENIE_CHAT_MODE") or "prompt").lower()
    if mode not in MODES:
        raise ChatConfigurationError(f"Unknown chat mode: {mode}. Available: {list(MODES)}")
    return mode


def _resolve_system_prompt(persona: str) -> str:
    if persona not in PERSONAS:
        raise ChatConfigurationError(f"Unknown persona: {persona}. Available: {list(PERSONAS)}")
    return PERSONAS[persona]


def extract_assistant_reply(generated_text: str) -> str:
    """Text after the last 'Assistant:' marker (the whole text if there is none)."""
    reply = generated_text.split(ASSISTANT_MARKER)[-1].strip()
    if not reply:
        raise ResponseShapeError("Could not extract assistant response")
    return reply


def _generate_from_prompt(
    messages: list[ChatMessage],
    token: str,
    system_prompt: str,
    client: Optional[httpx.Client],
) -> str:
    """POST one prompt string to a text-generation endpoint."""
    url = os.environ.get("OPPGENIE_HF_MODEL_URL") or DEFAULT_MODEL_URL
    prompt = build_prompt([(m.role, m.content) for m in messages], system_prompt)
    headers = {"Authorization": f"Bearer {token}", "Content-Type": "application/json"}
    body = {"inputs": prompt, "parameters": GENERATION_PARAMETERS}

    logger.info("Sending prompt request to %s", url)
    if client is None:
        with httpx.Client(timeout=DEFAULT_TIMEOUT) as own_client:
            resp = own_client.post(url, json=body, headers=headers)
            resp.raise_for_status()
            data = resp.json()
    else:
        resp = client.post(url, json=body, headers=headers)
        resp.raise_for_status()
        data = resp.json()

    if not isinstance(data, list) or not data or not isinstance(data[0], dict):
        raise ResponseShapeError(f"Invalid response format from API: {data!r:.200}")
    generated = data[0].get("generated_text")
    if not isinstance(generated, str):
        raise ResponseShapeError("Response is missing generated_text")
    return extract_assistant_reply(generated)


def _generate_from_chat(
    messages: list[ChatMessage],
    token: str,
    system_prompt: str,
    client: Optional[OpenAI],
) -> str:
    """Structured role/content request to an OpenAI-compatible chat completion API."""
    client = client or OpenAI(
        api_key=token,
        base_url=os.environ.get("OPPGENIE_CHAT_BASE_URL") or DEFAULT_CHAT_BASE_URL,
        timeout=DEFAULT_TIMEOUT,
        max_retries=0,
    )
    payload = [{"role": "system", "content": system_prompt}] + [
        {"role": m.role, "content": m.content} for m in messages
    ]
    response = client.chat.completions.create(
        model=os.environ.get("OPPGENIE_CHAT_MODEL") or DEFAULT_CHAT_MODEL,
        messages=payload,
        temperature=GENERATION_PARAMETERS["temperature"],
        top_p=GENERATION_PARAMETERS["top_p"],
        max_tokens=GENERATION_PARAMETERS["max_new_tokens"],
    )
    try:
        text = response.choices[0].message.content
    except (AttributeError, IndexError, TypeError) as e:
        raise ResponseShapeError("Invalid chat completion response") from e
    if text is not None and not isinstance(text, str):
        raise ResponseShapeError(f"Chat completion content is not text: {type(text).__name__}")
    if not text or not text.strip():
        raise ResponseShapeError("Empty chat completion response")
    return text.strip()


def generate_response(
    messages: Sequence[MessageLike],
    *,
    token: Optional[str] = None,
    mode: Optional[str] = None,
    persona: str = "default",
    client: Any = None,
) -> str:
    """
    Ask the assistant for the next reply in a conversation.

    mode: "prompt" (text-generation endpoint, httpx) or "chat" (OpenAI-compatible
    API, openai client). Defaults to OPPGENIE_CHAT_MODE, then "prompt".
    client: optional httpx.Client (prompt mode) or OpenAI client (chat mode).

    Raises ChatConfigurationError before any network call when the token is
    missing or the mode/persona is unknown. Every request failure returns a
    fallback string instead of raising.
    """
    token = resolve_token(token)
    resolved_mode = _resolve_mode(mode)
    system_prompt = _resolve_system_prompt(persona)
    history = [m if isinstance(m, ChatMessage) else ChatMessage.model_validate(m) for m in messages]

    try:
        if resolved_mode == "chat":
            return _generate_from_chat(history, token, system_prompt, client)
        return _generate_from_prompt(history, token, system_prompt, client)
    except httpx.TimeoutException as e:
        logger.warning("Chat request timed out: %s", e)
        return classify_failure(timed_out=True)
    except httpx.HTTPStatusError as e:
        logger.warning("Chat request failed with status %s: %s", e.response.status_code, e.response.text[:200])
        return classify_failure(e.response.status_code)
    except openai.APITimeoutError as e:
        logger.warning("Chat request timed out: %s", e)
        return classify_failure(timed_out=True)
    except openai.APIStatusError as e:
        logger.warning("Chat request failed with status %s: %s", e.status_code, e.message)
        return classify_failure(e.status_code)
    except (httpx.HTTPError, openai.APIError) as e:
        logger.warning("Chat request failed: %s", e)
        return classify_failure()
    except ValueError as e:
        logger.warning("Unexpected chat response: %s", e)
        return classify_failure()

