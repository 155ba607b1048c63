"""
Text generation through the Google Gemini API.
"""

import logging
import time
from typing import Any, Optional, Protocol

import httpx
from google import genai
from google.genai import errors, types

from ..core.config import Settings

log = logging.getLogger(__name__)


class GenerationError(Exception):
    """The generation provider could not produce a response."""


class GenerationTimeoutError(GenerationError):
    """The generation provider did not answer within the configured timeout."""


class GenerationClient(Protocol):
    def generate(self, prompt: str) -> str: ...


class GeminiGenerationClient:
    backoffs = (0.4, 0.8, 1.6)

    def __init__(
        self,
        model: str,
        api_key: str = "",
        timeout_sec: float = 30.0,
        max_retries: int = 1,
        client: Optional[Any] = None,
    ):
        self.model = model
        self.api_key = api_key
        self.timeout_sec = timeout_sec
        self.max_retries = max(0, max_retries)
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiGenerationClient":
        return cls(
            model=settings.gemini_default_model,
            api_key=settings.gemini_api_key,
            timeout_sec=settings.generation_timeout_sec,
            max_retries=settings.generation_max_retries,
        )

    @property
    def client(self) -> Any:
        # Built lazily so the app can start without credentials.
        if self._client is None:
            try:
                self._client = genai.Client(
                    api_key=self.api_key or None,
                    http_options=types.HttpOptions(timeout=int(self.timeout_sec * 1000)),
                )
            except ValueError as e:
                raise GenerationError(f"Gemini client is not configured: {e}") from e
        return self._client

    def generate(self, prompt: str) -> str:
        attempt = 0
        while True:
            attempt += 1
            try:
                response = self.client.models.generate_content(model=self.model, contents=prompt)
                return response.text or ""
            except httpx.TimeoutException as e:
                log.warning(f"Generation timed out after {self.timeout_sec}s (attempt {attempt})")
                if attempt > self.max_retries:
                    raise GenerationTimeoutError(f"Model {self.model} timed out") from e
                self._wait_before_retry(attempt)
            except (errors.ServerError, httpx.TransportError) as e:
                log.warning(f"Generation failed (attempt {attempt}): {e}")
                if attempt > self.max_retries:
                    raise GenerationError(f"Model {self.model} unavailable: {e}") from e
                self._wait_before_retry(attempt)
            except errors.APIError as e:
                log.error(f"Generation rejected by provider: {e}")
                raise GenerationError(f"Model {self.model} rejected the request: {e}") from e

    def _wait_before_retry(self, attempt: int) -> None:
        delay = self.backoffs[min(attempt, len(self.backoffs)) - 1]
        log.info(f"Retrying generation in {delay:.1f}s")
        time.sleep(delay)
