"""Application service: chat turns and action clicks wired to storage."""

import sys
from typing import Any, Dict, Optional

from wcg_ai.adapters.storage.json_store import JsonStorage
from wcg_ai.config import AssistantConfig
from wcg_ai.domain.assistant import Assistant
from wcg_ai.domain.handlers import ActionOutcome, apply_action
from wcg_ai.domain.models import Action, ConversationMessage
from wcg_ai.infrastructure.dashboard_store import DashboardStore
from wcg_ai.infrastructure.history import ConversationHistory
from wcg_ai.ports.outbound import LLMPort, StoragePort


def _log(msg: str):
    print(msg, file=sys.stderr)


class AssistantApp:
    """Keeps history and dashboard on disk between turns."""

    def __init__(
        self,
        config: Optional[AssistantConfig] = None,
        storage: Optional[StoragePort] = None,
        llm: Optional[LLMPort] = None,
    ):
        self.config = config or AssistantConfig.from_env()
        self.storage = storage or JsonStorage(self.config.storage_dir)
        self.assistant = Assistant(self.config, llm=llm)
        self.history = ConversationHistory(self.storage)
        self.dashboard_store = DashboardStore(self.storage)
        self.dashboard: Dict[str, Any] = self.dashboard_store.load()

    @property
    def mode(self) -> str:
        return self.assistant.mode

    async def send(self, text: str) -> ConversationMessage:
        """Record the user turn, ask the assistant, record and return its reply."""
        prior = self.history.load()
        self.history.append(ConversationMessage.user(text))
        reply = await self.assistant.respond(text, prior, self.dashboard)
        message = ConversationMessage.assistant(reply)
        self.history.append(message)
        return message

    def run_action(self, action: Action) -> ActionOutcome:
        outcome = apply_action(action, self.dashboard)
        self.dashboard = outcome.dashboard
        if outcome.changed:
            self.dashboard_store.save(self.dashboard)
        if outcome.toast:
            _log(outcome.toast)
        return outcome

    def clear_history(self):
        self.history.clear()
