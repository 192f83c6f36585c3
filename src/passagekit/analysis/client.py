"""Client for the Gemini ``generateContent`` API used for narrative analysis."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

import httpx

from ..config import AnalysisConfig
from ..logging_utils import log_event

logger = logging.getLogger(__name__)

_RETRYABLE_STATUS = {429, 500, 502, 503, 504}


class AnalysisError(RuntimeError):
    """Raised when the analysis service cannot produce a completion."""


@dataclass(slots=True)
class GeminiClient:
    """Synchronous text-in/text-out wrapper around ``generateContent``."""

    api_key: str
    config: AnalysisConfig = field(default_factory=AnalysisConfig)
    transport: Optional[httpx.BaseTransport] = None
    sleep: Callable[[float], None] = time.sleep
    _client: httpx.Client = field(init=False, repr=False)
    _endpoint: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ValueError("api_key is required")
        self._client = httpx.Client(
            base_url=self.config.base_url.rstrip("/"),
            timeout=httpx.Timeout(self.config.timeout_s),
            headers={"Content-Type": "application/json"},
            transport=self.transport,
        )
        self._endpoint = f"/models/{self.config.model}:generateContent"

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "GeminiClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __call__(self, prompt: str) -> str:
        return self.generate(prompt)

    def generate(self, prompt: str) -> str:
        """Send ``prompt`` and return the first candidate's text."""

        cfg = self.config
        payload = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": cfg.temperature,
                "maxOutputTokens": cfg.max_output_tokens,
                "topP": cfg.top_p,
                "topK": cfg.top_k,
            },
        }
        log_event("analysis_request", model=cfg.model, prompt_chars=len(prompt))

        for attempt in range(1, cfg.max_retries + 1):
            try:
                response = self._client.post(self._endpoint, params={"key": self.api_key}, json=payload)
            except httpx.HTTPError as exc:
                logger.warning("Analysis request failed on attempt %d/%d: %s", attempt, cfg.max_retries, exc)
                self._backoff(attempt)
                continue

            if response.status_code == 200:
                return self._extract_text(response)

            if response.status_code in _RETRYABLE_STATUS:
                logger.warning(
                    "Analysis service returned status %s on attempt %d/%d; backing off",
                    response.status_code,
                    attempt,
                    cfg.max_retries,
                )
                self._backoff(attempt)
                continue

            raise AnalysisError(f"Unexpected status {response.status_code}: {response.text[:400]}")

        raise AnalysisError("Exceeded maximum retries for analysis request")

    @staticmethod
    def _extract_text(response: httpx.Response) -> str:
        try:
            data = response.json()
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            raise AnalysisError(f"Malformed completion payload: {response.text[:400]}") from exc
        if not isinstance(text, str):
            raise AnalysisError("Unexpected response content type")
        return text

    def _backoff(self, attempt: int) -> None:
        if attempt >= self.config.max_retries:
            return
        self.sleep(min(self.config.backoff_base**attempt, 30.0))
