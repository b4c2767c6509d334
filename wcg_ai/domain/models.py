"""Domain data models — pure Python dataclasses."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence, Tuple

ROLE_USER = "user"
ROLE_ASSISTANT = "assistant"
ROLES = (ROLE_USER, ROLE_ASSISTANT)

# Closed set of action types the dashboard knows how to execute
ACTION_TYPES = (
    "create_project",
    "create_content",
    "create_brand",
    "create_experiment",
    "generate_plan",
    "schedule_post",
    "add_brand_voice",
)


def new_id() -> str:
    return uuid.uuid4().hex[:12]


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class Action:
    """Executable suggestion attached to an assistant reply."""

    id: str
    type: str  # one of ACTION_TYPES
    label: str
    payload: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "label": self.label,
            "payload": dict(self.payload),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Action":
        payload = data.get("payload")
        return cls(
            id=str(data.get("id") or new_id()),
            type=str(data["type"]),
            label=str(data.get("label", "")),
            payload=dict(payload) if isinstance(payload, dict) else {},
        )


@dataclass
class AssistantReply:
    """Return shape shared by the remote and local resolution paths."""

    content: str
    actions: List[Action] = field(default_factory=list)


@dataclass(frozen=True)
class ConversationMessage:
    """One chat turn. Immutable; only assistant turns carry actions."""

    id: str
    role: str
    content: str
    timestamp: str
    actions: Tuple[Action, ...] = ()

    def __post_init__(self):
        if self.role not in ROLES:
            raise ValueError(f"Unknown message role: {self.role!r}")
        if self.role == ROLE_USER and self.actions:
            raise ValueError("User messages cannot carry actions")
        if not isinstance(self.actions, tuple):
            object.__setattr__(self, "actions", tuple(self.actions))

    @classmethod
    def user(cls, content: str, timestamp: Optional[str] = None) -> "ConversationMessage":
        return cls(
            id=new_id(),
            role=ROLE_USER,
            content=content,
            timestamp=timestamp or _now_iso(),
        )

    @classmethod
    def assistant(
        cls,
        reply: AssistantReply,
        timestamp: Optional[str] = None,
    ) -> "ConversationMessage":
        return cls(
            id=new_id(),
            role=ROLE_ASSISTANT,
            content=reply.content,
            timestamp=timestamp or _now_iso(),
            actions=tuple(reply.actions),
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "role": self.role,
            "content": self.content,
            "timestamp": self.timestamp,
        }
        if self.role == ROLE_ASSISTANT:
            data["actions"] = [a.to_dict() for a in self.actions]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConversationMessage":
        raw_actions: Sequence[Any] = data.get("actions") or ()
        return cls(
            id=str(data.get("id") or new_id()),
            role=str(data["role"]),
            content=str(data.get("content", "")),
            timestamp=str(data.get("timestamp") or _now_iso()),
            actions=tuple(Action.from_dict(a) for a in raw_actions),
        )
