"""WCG AI — assistant orchestration for the creative-operations dashboard."""

__version__ = "0.1.0"

from wcg_ai.config import AssistantConfig, UsageLimitsConfig
from wcg_ai.domain.assistant import Assistant, generate_response
from wcg_ai.domain.models import Action, AssistantReply, ConversationMessage

__all__ = [
    "AssistantConfig",
    "UsageLimitsConfig",
    "Assistant",
    "generate_response",
    "Action",
    "AssistantReply",
    "ConversationMessage",
]
