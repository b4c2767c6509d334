"""Outbound ports — interfaces for external system adapters."""

from typing import Dict, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class LLMPort(Protocol):
    """Interface for chat-completion backends."""

    async def complete(
        self,
        messages: List[Dict[str, str]],
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> str: ...


@runtime_checkable
class StoragePort(Protocol):
    """Interface for persistent storage."""

    def load(self, key: str) -> list: ...
    def save(self, key: str, data: list) -> None: ...
