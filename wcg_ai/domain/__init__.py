"""Domain layer — pure Python, no framework dependencies."""

from wcg_ai.domain.models import (
    ACTION_TYPES,
    Action,
    AssistantReply,
    ConversationMessage,
)
from wcg_ai.domain.action_parser import ParsedResponse, extract_actions, parse_actions, strip_actions
from wcg_ai.domain.context import DashboardContextSummary, summarize
from wcg_ai.domain.fallback import FALLBACK_RULES, resolve_local
from wcg_ai.domain.assistant import Assistant, build_messages, generate_response, resolve_remote
from wcg_ai.domain.handlers import ActionOutcome, UnknownActionError, apply_action
from wcg_ai.domain.persona import SYSTEM_PROMPT

__all__ = [
    "ACTION_TYPES",
    "Action",
    "AssistantReply",
    "ConversationMessage",
    "ParsedResponse",
    "extract_actions",
    "parse_actions",
    "strip_actions",
    "DashboardContextSummary",
    "summarize",
    "FALLBACK_RULES",
    "resolve_local",
    "Assistant",
    "build_messages",
    "generate_response",
    "resolve_remote",
    "ActionOutcome",
    "UnknownActionError",
    "apply_action",
    "SYSTEM_PROMPT",
]
