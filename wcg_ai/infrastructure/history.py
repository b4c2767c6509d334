"""Persisted conversation history for the assistant chat."""

import sys
from typing import List, Optional

from wcg_ai.domain.models import ConversationMessage
from wcg_ai.ports.outbound import StoragePort

HISTORY_KEY = "wcg_ai_messages"


def _log(msg: str):
    print(msg, file=sys.stderr)


class ConversationHistory:
    """Ordered list of ConversationMessage backed by a StoragePort."""

    def __init__(
        self,
        storage: StoragePort,
        key: str = HISTORY_KEY,
        max_messages: Optional[int] = None,
    ):
        self._storage = storage
        self._key = key
        self._max_messages = max_messages
        self._messages: List[ConversationMessage] = self._load()

    def _load(self) -> List[ConversationMessage]:
        messages = []
        for raw in self._storage.load(self._key):
            try:
                messages.append(ConversationMessage.from_dict(raw))
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                _log(f"Skipping stored message: {e}")
        return messages

    def _save(self):
        self._storage.save(self._key, [m.to_dict() for m in self._messages])

    def load(self) -> List[ConversationMessage]:
        return list(self._messages)

    def append(self, message: ConversationMessage):
        self._messages.append(message)
        if self._max_messages is not None and len(self._messages) > self._max_messages:
            self._messages = self._messages[-self._max_messages:]
        self._save()

    def last_assistant(self) -> Optional[ConversationMessage]:
        for message in reversed(self._messages):
            if message.role == "assistant":
                return message
        return None

    def clear(self):
        self._messages = []
        self._save()
        _log("conversation history cleared")

    def __len__(self) -> int:
        return len(self._messages)
