"""Storage adapters."""

from wcg_ai.adapters.storage.json_store import JsonStorage

__all__ = ["JsonStorage"]
