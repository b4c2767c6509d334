"""Adapters for external systems (LLM endpoint, file storage)."""
