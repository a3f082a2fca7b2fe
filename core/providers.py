"""Text generation provider interface and the Gemini REST implementation."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable

import httpx

from core.config import DEFAULT_MODEL, DEFAULT_TIMEOUT_S
from core.errors import (
    ConfigurationError,
    EmptyResponseError,
    UnparseableResponseError,
    UpstreamStatusError,
    UpstreamTimeoutError,
    UpstreamTransportError,
)

logger = logging.getLogger(__name__)

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"

# Texts some upstream shapes return instead of an actual answer
PLACEHOLDER_TEXTS = {"no response received.", "no response received"}


class TextProvider(ABC):
    """Base interface for text generation providers."""

    provider_name: str = "base"

    @abstractmethod
    def generate(self, prompt: str) -> str:
        ...


# --- Response extractors, tried in order ---

def _parts_text(parts: Any) -> str:
    if not isinstance(parts, list):
        return ""
    return "".join(
        p["text"] for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str)
    )


def _candidates(data: dict) -> list[dict]:
    candidates = data.get("candidates")
    if not isinstance(candidates, list):
        return []
    return [c for c in candidates if isinstance(c, dict)]


def _join(chunks: list[str]) -> str | None:
    text = "\n\n".join(c for c in chunks if c.strip())
    return text or None


def extract_candidate_parts(data: dict) -> str | None:
    """candidates[].content.parts[].text"""
    chunks = []
    for candidate in _candidates(data):
        content = candidate.get("content")
        if isinstance(content, dict):
            chunks.append(_parts_text(content.get("parts")))
    return _join(chunks)


def extract_candidate_content_blocks(data: dict) -> str | None:
    """candidates[].content[].parts[].text"""
    chunks = []
    for candidate in _candidates(data):
        content = candidate.get("content")
        if isinstance(content, list):
            chunks.append("".join(
                _parts_text(block.get("parts")) for block in content if isinstance(block, dict)
            ))
    return _join(chunks)


def extract_candidate_text(data: dict) -> str | None:
    """candidates[].content[0].text or candidates[].text"""
    chunks = []
    for candidate in _candidates(data):
        content = candidate.get("content")
        text = ""
        if isinstance(content, list) and content and isinstance(content[0], dict):
            first = content[0].get("text")
            text = first if isinstance(first, str) else ""
        if not text and isinstance(candidate.get("text"), str):
            text = candidate["text"]
        chunks.append(text)
    return _join(chunks)


def extract_output_parts(data: dict) -> str | None:
    """output[].content[].parts[].text"""
    output = data.get("output")
    if not isinstance(output, list):
        return None
    chunks = []
    for item in output:
        if not isinstance(item, dict) or not isinstance(item.get("content"), list):
            continue
        chunks.append("".join(
            _parts_text(c.get("parts")) for c in item["content"] if isinstance(c, dict)
        ))
    return _join(chunks)


def extract_top_level_text(data: dict) -> str | None:
    """generatedText or text"""
    for key in ("generatedText", "text"):
        value = data.get(key)
        if isinstance(value, str) and value.strip():
            return value
    return None


EXTRACTORS: list[Callable[[dict], str | None]] = [
    extract_candidate_parts,
    extract_candidate_content_blocks,
    extract_candidate_text,
    extract_output_parts,
    extract_top_level_text,
]


def extract_text(data: Any) -> str:
    """Return the first non-empty text found by the extractors.

    Raises UnparseableResponseError when no known shape matches and
    EmptyResponseError when the only text found is a placeholder.
    """
    if not isinstance(data, dict):
        raise UnparseableResponseError("Generation API response is not a JSON object.")

    for extractor in EXTRACTORS:
        try:
            text = extractor(data)
        except (TypeError, AttributeError) as exc:
            raise UnparseableResponseError(f"Malformed generation API response: {exc}") from exc
        if not isinstance(text, str):
            continue
        text = text.strip()
        if text.lower() in PLACEHOLDER_TEXTS:
            raise EmptyResponseError("Generation API returned placeholder text.")
        if text:
            return text

    if _candidates(data):
        # Candidates present but empty, e.g. blocked by safety filters
        raise EmptyResponseError("Generation API returned no text.")
    raise UnparseableResponseError("Unrecognized generation API response shape.")


class GeminiProvider(TextProvider):
    """Google Gemini generateContent over plain HTTPS."""

    provider_name = "gemini"

    def __init__(
        self,
        api_key: str | None,
        model: str = DEFAULT_MODEL,
        timeout: float = DEFAULT_TIMEOUT_S,
        temperature: float = 0.8,
        max_output_tokens: int = 512,
        base_url: str = GEMINI_BASE_URL,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.api_key = (api_key or "").strip()
        self.model = model or DEFAULT_MODEL
        self.timeout = timeout
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self.base_url = base_url.rstrip("/")
        self._transport = transport
        if not self.api_key:
            raise ConfigurationError("Server not configured (missing API_KEY).")

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def build_payload(self, prompt: str) -> dict[str, Any]:
        return {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self.temperature,
                "maxOutputTokens": self.max_output_tokens,
            },
        }

    def generate(self, prompt: str) -> str:
        logger.info("Generating text via Gemini model=%s prompt_len=%d", self.model, len(prompt))
        headers = {"Content-Type": "application/json", "x-goog-api-key": self.api_key}

        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as http:
                resp = http.post(self.endpoint, json=self.build_payload(prompt), headers=headers)
        except httpx.TimeoutException as exc:
            raise UpstreamTimeoutError(f"Generation API timed out after {self.timeout}s") from exc
        except httpx.HTTPError as exc:
            raise UpstreamTransportError(f"Generation API request failed: {exc.__class__.__name__}") from exc

        try:
            data = resp.json()
        except ValueError:
            data = None

        if not resp.is_success:
            raise UpstreamStatusError(resp.status_code, data if data is not None else resp.text[:2000])
        if data is None:
            raise UnparseableResponseError("Generation API returned a non-JSON body.")

        text = extract_text(data)
        logger.info("Gemini response received model=%s resp_len=%d", self.model, len(text))
        return text
