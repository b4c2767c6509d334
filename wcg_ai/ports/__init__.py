"""Port interfaces (Hexagonal Architecture)."""

from wcg_ai.ports.outbound import LLMPort, StoragePort

__all__ = [
    "LLMPort",
    "StoragePort",
]
