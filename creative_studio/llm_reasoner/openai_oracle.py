# openai_oracle.py
import json
import asyncio
import logging
import aiohttp
from typing import Any, Dict, Optional, Protocol
from urllib.parse import urlparse

from creative_studio.core.config import settings

logger = logging.getLogger(__name__)


class OracleError(Exception):
    """Raised when the generation provider fails or returns an unusable payload."""


class GenerationOracle(Protocol):
    async def complete(self, system_prompt: str, user_prompt: str, temperature: float) -> str:
        ...

    async def generate_image(self, prompt: str, size: str, quality: str) -> str:
        ...


def _first_entry(data: Any, key: str) -> dict:
    """Return the first object of ``data[key]``, which must be a non-empty list of objects."""
    if not isinstance(data, dict):
        raise OracleError("Provider response is not a JSON object")
    entries = data.get(key)
    if not isinstance(entries, list) or not entries:
        raise OracleError(f"Provider response has no {key}")
    entry = entries[0]
    if not isinstance(entry, dict):
        raise OracleError(f"Provider response has a malformed {key} entry")
    return entry


def extract_completion_text(data: Any) -> str:
    """Pull the assistant message out of a chat/completions response body."""
    message = _first_entry(data, "choices").get("message")
    if not isinstance(message, dict):
        raise OracleError("Completion response has no message")
    content = message.get("content")
    if not isinstance(content, str) or not content.strip():
        raise OracleError("Completion response has empty content")
    return content


def extract_image_url(data: Any) -> str:
    """Pull the first image URL out of an images/generations response body."""
    url = _first_entry(data, "data").get("url")
    if not isinstance(url, str) or not url:
        raise OracleError("Failed to generate image URL")
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise OracleError(f"Image response returned a malformed URL: {url[:100]}")
    return url


class OpenAIOracle:
    """Text and image generation against an OpenAI-compatible REST API.

    Each call makes exactly one attempt; retry policy belongs to the caller.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        text_model: Optional[str] = None,
        image_model: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
    ):
        self.api_key = api_key or settings.OPENAI_API_KEY
        self.base_url = (base_url or settings.OPENAI_BASE_URL).rstrip("/")
        self.text_model = text_model or settings.OPENAI_TEXT_MODEL
        self.image_model = image_model or settings.OPENAI_IMAGE_MODEL
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds or settings.ORACLE_TIMEOUT_SECONDS)

    async def complete(self, system_prompt: str, user_prompt: str, temperature: float) -> str:
        payload = {
            "model": self.text_model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "temperature": temperature,
        }
        data = await self._post("chat/completions", payload)
        return extract_completion_text(data)

    async def generate_image(self, prompt: str, size: str, quality: str) -> str:
        payload = {
            "model": self.image_model,
            "prompt": prompt,
            "size": size,
            "quality": quality,
            "n": 1,
            "response_format": "url",
        }
        data = await self._post("images/generations", payload)
        return extract_image_url(data)

    async def _post(self, path: str, payload: Dict[str, Any]) -> Any:
        url = f"{self.base_url}/{path}"
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.post(url, headers=headers, json=payload) as response:
                    text = await response.text()
                    status = response.status
        except asyncio.TimeoutError as e:
            logger.warning("⏰ Generation provider timeout on %s", path)
            raise OracleError(f"Generation provider timed out on {path}") from e
        except aiohttp.ClientError as e:
            logger.warning("⚠️ Generation provider request to %s failed: %s", path, e)
            raise OracleError(f"Generation provider request failed: {e}") from e

        if status != 200:
            logger.error("❌ Generation provider returned status %s: %.300s", status, text)
            raise OracleError(f"Generation provider error {status}: {text[:200]}")

        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            logger.error("Generation provider returned invalid JSON: %.300s", text)
            raise OracleError("Generation provider returned invalid JSON") from e


_oracle: Optional[OpenAIOracle] = None


def get_oracle() -> GenerationOracle:
    """FastAPI dependency returning the process-wide oracle."""
    global _oracle
    if _oracle is None:
        _oracle = OpenAIOracle()
    return _oracle
