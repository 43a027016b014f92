"""Ollama generation client with retry, response parsing and template fallback."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any

import httpx
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from resume_maker.clients.errors import (
    BackendStatusError,
    BackendUnavailableError,
    GenerationError,
    ResponseParseError,
)
from resume_maker.config import OllamaConfig
from resume_maker.models.generation import (
    GeneratedSections,
    GenerationOutcome,
    GenerationRequest,
)
from resume_maker.pipeline.fallback import synthesize_fallback
from resume_maker.pipeline.prompt_builder import build_prompt
from resume_maker.utils.json_parser import extract_json

logger = logging.getLogger(__name__)

SECTION_KEYS = ("summary", "skills", "experience", "education")

Sleep = Callable[[float], Awaitable[None]]


def _section_text(value: Any) -> str:
    """Coerce a parsed JSON value into section text."""
    if not value:
        # null, false, 0 and empty containers all count as missing
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return "\n".join(str(item) for item in value)
    return str(value)


def parse_sections(response_text: str) -> GeneratedSections:
    """Parse model output into sections; missing keys become empty strings.

    Raises:
        ResponseParseError: if no JSON object can be found in the text.
    """
    data = extract_json(response_text)
    if data is None:
        raise ResponseParseError("No valid JSON found in AI response")
    return GeneratedSections(**{key: _section_text(data.get(key)) for key in SECTION_KEYS})


class GenerationClient:
    """Async client for an Ollama-compatible ``/api/generate`` endpoint.

    Build one per process from an ``OllamaConfig`` and share it; calls hold
    no mutable state beyond the HTTP connection pool.
    """

    def __init__(
        self,
        config: OllamaConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
        sleep: Sleep = asyncio.sleep,
    ):
        self.config = config or OllamaConfig()
        self.base_url = self.config.base_url.rstrip("/")
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient()
        self._sleep = sleep

    @property
    def is_mock_mode(self) -> bool:
        return self.config.mock_mode

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> GenerationClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def _payload(self, prompt: str) -> dict:
        return {
            "model": self.config.model,
            "prompt": prompt,
            "stream": False,
            "options": {
                "temperature": self.config.temperature,
                "top_p": self.config.top_p,
                "max_tokens": self.config.max_tokens,
            },
        }

    async def _call_backend(self, prompt: str) -> str:
        """Single POST to the backend; returns the raw ``response`` text."""
        try:
            response = await asyncio.wait_for(
                self._http.post(
                    f"{self.base_url}/api/generate",
                    json=self._payload(prompt),
                    timeout=self.config.timeout,
                ),
                self.config.timeout,
            )
        except httpx.ConnectError as e:
            raise BackendUnavailableError(
                "Ollama service is not available. Please ensure Ollama is running."
            ) from e
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            raise BackendUnavailableError(
                f"Ollama request timed out after {self.config.timeout}s"
            ) from e
        except httpx.HTTPError as e:
            raise BackendUnavailableError(f"Network error when calling Ollama: {e}") from e

        if not response.is_success:
            raise BackendStatusError(response.status_code, response.reason_phrase)

        try:
            body = response.json()
        except ValueError as e:
            raise ResponseParseError("Ollama response body is not JSON") from e
        text = body.get("response") if isinstance(body, dict) else None
        if not isinstance(text, str):
            raise ResponseParseError("Ollama response has no 'response' text field")
        return text

    def _retrying(self) -> AsyncRetrying:
        """Retry policy: transport and status failures, delay retry_delay * 2**(n-1).

        Parse failures are not retried. The last error is re-raised once
        ``max_retries`` attempts have failed.
        """
        return AsyncRetrying(
            stop=stop_after_attempt(self.config.max_retries),
            wait=wait_exponential(multiplier=self.config.retry_delay, exp_base=2),
            retry=retry_if_exception_type((BackendUnavailableError, BackendStatusError)),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            sleep=self._sleep,
            reraise=True,
        )

    async def generate_resume_outcome(self, request: GenerationRequest) -> GenerationOutcome:
        """Generate sections and report which path produced them. Never raises."""
        started = time.monotonic()
        if self.config.mock_mode:
            return GenerationOutcome(
                sections=synthesize_fallback(request),
                source="mock",
                elapsed_seconds=time.monotonic() - started,
            )

        attempts = 0
        try:
            prompt = build_prompt(request)
            async for attempt in self._retrying():
                with attempt:
                    attempts = attempt.retry_state.attempt_number
                    text = await self._call_backend(prompt)
            sections = parse_sections(text)
        except GenerationError as e:
            logger.warning(
                "AI generation failed after %d attempt(s), using fallback: %s", attempts, e
            )
            error = str(e)
        except Exception as e:
            logger.error("Unexpected error during AI generation, using fallback", exc_info=True)
            error = f"{type(e).__name__}: {e}"
        else:
            logger.debug("AI generation succeeded after %d attempt(s)", attempts)
            return GenerationOutcome(
                sections=sections,
                source="model",
                attempts=attempts,
                elapsed_seconds=time.monotonic() - started,
            )

        return GenerationOutcome(
            sections=synthesize_fallback(request),
            source="fallback",
            attempts=attempts,
            elapsed_seconds=time.monotonic() - started,
            error=error,
        )

    async def generate_resume(self, request: GenerationRequest) -> GeneratedSections:
        """Generate the four resume sections for ``request``.

        Falls back to template content on any generation failure, so the
        result always has all four fields.
        """
        outcome = await self.generate_resume_outcome(request)
        return outcome.sections

    async def check_health(self) -> bool:
        """Return True if the backend answers its model listing with 2xx."""
        if self.config.mock_mode:
            return True
        try:
            response = await self._http.get(
                f"{self.base_url}/api/tags",
                timeout=self.config.health_timeout,
            )
        except Exception as e:
            logger.warning("Ollama not available: %s", e)
            return False
        return response.is_success
