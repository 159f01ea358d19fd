"""Gemini text generation adapter.

Calls the Gemini ``generateContent`` REST endpoint with a single user prompt
and returns the concatenated text of the first candidate.

Wire Format
-----------
Request::

    POST {gemini_api_base}/models/{gemini_model}:generateContent
    x-goog-api-key: <key>

    {"contents": [{"parts": [{"text": "<prompt>"}]}]}

Response (abridged)::

    {"candidates": [{"content": {"parts": [{"text": "..."}]}}]}

A response without candidates (for example a prompt blocked by the safety
filters) is reported as a :class:`~podcraft.core.errors.GenerationError`.
"""

from __future__ import annotations

import logging

import httpx

from podcraft.core.adapters.base import AdapterBase, adapter_registry
from podcraft.core.config import PodcraftConfig
from podcraft.core.errors import GenerationError

logger = logging.getLogger(__name__)


class GeminiTextAdapter(AdapterBase):
    """Text adapter backed by the Gemini generative language API.

    Args:
        config: Gateway configuration (API key, model, base URL, timeout).
        transport: Optional httpx transport, used by tests to intercept
            requests.
    """

    name = "Gemini Text"
    description = "Text generation through the Gemini generateContent API"
    kind = "text"

    def __init__(self, config: PodcraftConfig, transport: httpx.BaseTransport | None = None) -> None:
        super().__init__(config)
        self._transport = transport

    @property
    def endpoint(self) -> str:
        base = self.config.gemini_api_base.rstrip("/")
        return f"{base}/models/{self.config.gemini_model}:generateContent"

    def invoke(self, payload: str) -> str:
        """Generate text for *payload* (the prompt).

        Returns:
            The generated text, unmodified.  Callers sanitize it.

        Raises:
            GenerationError: On empty prompt, transport failure, non-2xx
                status or a response with no text.
        """
        prompt = self._require_text(payload, "prompt")
        body = {"contents": [{"parts": [{"text": prompt}]}]}
        headers = {"x-goog-api-key": self.config.gemini_api_key.get_secret_value()}

        logger.debug(f"Requesting text from {self.config.gemini_model} ({len(prompt)} chars)")
        try:
            with httpx.Client(timeout=self.config.request_timeout, transport=self._transport) as client:
                response = client.post(self.endpoint, json=body, headers=headers)
        except httpx.TimeoutException as e:
            logger.error(f"Gemini request timed out after {self.config.request_timeout}s")
            raise GenerationError(self.kind, f"request timed out: {e}") from e
        except httpx.HTTPError as e:
            logger.error(f"Gemini request failed: {e}")
            raise GenerationError(self.kind, f"request failed: {e}") from e

        if not response.is_success:
            logger.error(f"Gemini returned status {response.status_code}: {response.text[:500]}")
            raise GenerationError(self.kind, _error_message(response), status=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise GenerationError(self.kind, "response was not valid JSON", status=response.status_code) from e

        text = _extract_text(data)
        if not text:
            reason = _block_reason(data)
            details = f"no text returned (blocked: {reason})" if reason else "no text returned"
            logger.error(f"Gemini response contained no text: {details}")
            raise GenerationError(self.kind, details, status=response.status_code)

        logger.info(f"Generated {len(text)} chars of text with {self.config.gemini_model}")
        return text


def _extract_text(data) -> str:
    """Concatenate the text parts of the first candidate.

    Any level of the reply that does not have the expected shape yields an
    empty string, which the caller reports as a ``GenerationError``.
    """
    if not isinstance(data, dict):
        return ""
    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], dict):
        return ""
    content = candidates[0].get("content")
    if not isinstance(content, dict):
        return ""
    parts = content.get("parts")
    if not isinstance(parts, list):
        return ""
    return "".join(part["text"] for part in parts if isinstance(part, dict) and isinstance(part.get("text"), str))


def _block_reason(data) -> str | None:
    """Return the prompt block reason reported by the provider, if any."""
    feedback = data.get("promptFeedback") if isinstance(data, dict) else None
    if not isinstance(feedback, dict):
        return None
    reason = feedback.get("blockReason")
    return reason if isinstance(reason, str) else None


def _error_message(response: httpx.Response) -> str:
    """Pull the provider's error message out of a failed response."""
    try:
        error = response.json().get("error") or {}
        message = error.get("message")
    except (ValueError, AttributeError):
        message = None
    return message or response.reason_phrase or f"HTTP {response.status_code}"


adapter_registry.register(GeminiTextAdapter)
