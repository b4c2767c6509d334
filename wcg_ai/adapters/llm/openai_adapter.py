"""OpenAI-compatible chat completions adapter (aiohttp) — implements LLMPort."""

import asyncio
import sys
from datetime import datetime
from typing import Any, Dict, List, Optional

import aiohttp

from wcg_ai.config import AssistantConfig
from wcg_ai.infrastructure.usage import UsageTracker


def _log(msg: str):
    print(msg, file=sys.stderr)


class LLMRequestError(RuntimeError):
    """Transport failure, non-success status, or unusable response envelope."""


def _error_message(data: Any, status: int) -> str:
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if error:
            return str(error)
    return f"HTTP {status}"


def extract_content(data: Any) -> str:
    """Pull choices[0].message.content out of a completion envelope."""
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise LLMRequestError(f"Malformed completion response: {e!r}")
    if not isinstance(content, str) or not content.strip():
        raise LLMRequestError("Completion response has no text content")
    return content


class OpenAIChatAdapter:
    """Single-shot chat completion client. Implements LLMPort protocol."""

    def __init__(
        self,
        config: AssistantConfig,
        usage_tracker: Optional[UsageTracker] = None,
    ):
        self.config = config
        self.usage_tracker = usage_tracker or UsageTracker(
            usage_file=config.usage_file,
            limits=config.usage_limits,
        )

    @property
    def is_configured(self) -> bool:
        return self.config.is_remote_configured

    @property
    def endpoint(self) -> str:
        return f"{self.config.base_url.rstrip('/')}/chat/completions"

    async def complete(
        self,
        messages: List[Dict[str, str]],
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> str:
        if not self.is_configured:
            raise LLMRequestError("No API key configured")
        self.usage_tracker.check_limits()

        body = {
            "model": model or self.config.model,
            "messages": messages,
            "temperature": self.config.temperature if temperature is None else temperature,
            "max_tokens": max_tokens or self.config.max_tokens,
        }
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.api_key}",
        }
        timeout = aiohttp.ClientTimeout(total=self.config.timeout_seconds)

        _log(f"[{datetime.now().isoformat()}] Requesting completion ({body['model']})")
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(self.endpoint, json=body, headers=headers) as resp:
                    data = await resp.json(content_type=None)
                    if resp.status >= 400:
                        raise LLMRequestError(
                            f"API error {resp.status}: {_error_message(data, resp.status)}"
                        )
        except aiohttp.ClientError as e:
            raise LLMRequestError(f"Request failed: {e}") from e
        except asyncio.TimeoutError:
            raise LLMRequestError(f"Timeout ({self.config.timeout_seconds:g}s)")
        except ValueError as e:
            raise LLMRequestError(f"Response is not JSON: {e}") from e

        content = extract_content(data)
        _log(f"[{datetime.now().isoformat()}] Completed")
        self.usage_tracker.record_call()
        warning = self.usage_tracker.get_warning()
        if warning:
            _log(warning)
        return content
