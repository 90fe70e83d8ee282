"""Gemini generateContent client with bounded exponential backoff.

Outcome of each attempt:
- 2xx: first candidate's first text part (or the fallback text)
- 429 / 5xx / transport error: retried after the next backoff delay
- any other status: terminal, no further attempts
"""
from __future__ import annotations
import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

import httpx

from seotools.common.config import GeminiConfig
from seotools.common.schema import (
    FALLBACK_TEXT,
    Failure,
    FailureKind,
    GenerationRequest,
    GenerationResult,
    Success,
)

LOGGER = logging.getLogger("seotools.client.gemini")

GENERIC_FAILURE = "API Request Failed"

Sleep = Callable[[float], Awaitable[None]]


@dataclass(frozen=True)
class _Retryable:
    message: str


def extract_text(data: Any) -> str:
    """Pull candidates[0].content.parts[0].text out of a response body."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return FALLBACK_TEXT
    if not isinstance(text, str) or not text:
        return FALLBACK_TEXT
    return text


def extract_error_message(response: httpx.Response) -> str:
    try:
        message = response.json()["error"]["message"]
    except (ValueError, KeyError, IndexError, TypeError):
        return GENERIC_FAILURE
    return message if isinstance(message, str) and message else GENERIC_FAILURE


def is_retryable_status(status: int) -> bool:
    return status == 429 or status >= 500


class GeminiClient:
    """Executes GenerationRequests; each call owns its own retry loop."""

    def __init__(
        self,
        config: GeminiConfig,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self.config = config
        self._http = http_client
        self._sleep = sleep

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        if self._http is not None:
            return await self._run(self._http, request)
        async with httpx.AsyncClient(timeout=self.config.timeout_s) as client:
            return await self._run(client, request)

    async def _run(self, client: httpx.AsyncClient, request: GenerationRequest) -> GenerationResult:
        delays = self.config.retry.delays_ms
        last_error = GENERIC_FAILURE
        attempts = self.config.retry.max_attempts
        for attempt in range(attempts):
            outcome = await self._attempt(client, request)
            if not isinstance(outcome, _Retryable):
                return outcome
            last_error = outcome.message
            if attempt == attempts - 1:
                break
            delay_ms = delays[attempt]
            LOGGER.warning(
                "Attempt %d/%d failed (%s); retrying in %dms",
                attempt + 1,
                attempts,
                last_error,
                delay_ms,
            )
            await self._sleep(delay_ms / 1000)

        LOGGER.error("Giving up after %d attempts: %s", attempts, last_error)
        return Failure(FailureKind.RETRIES_EXHAUSTED, last_error)

    async def _attempt(
        self, client: httpx.AsyncClient, request: GenerationRequest
    ) -> GenerationResult | _Retryable:
        try:
            r = await client.post(
                self.config.endpoint,
                params={"key": self.config.api_key},
                json=request.to_payload(),
            )
        except httpx.TransportError as e:
            return _Retryable(str(e) or type(e).__name__)

        if r.is_success:
            try:
                data = r.json()
            except ValueError as e:
                return _Retryable(f"Malformed response: {e}")
            return Success(extract_text(data))

        if is_retryable_status(r.status_code):
            return _Retryable(f"API Error: {r.status_code}")

        message = extract_error_message(r)
        LOGGER.error("Gemini request rejected (%d): %s", r.status_code, message)
        return Failure(FailureKind.CLIENT_ERROR, message)
