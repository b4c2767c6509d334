"""Action block parsing for assistant replies.

Pure Python, no framework dependencies.

Only ``type``, ``label`` and ``payload`` are read from a block; any other
top-level keys the model adds are ignored, and ``id`` is always fresh.
A block that fails to decode is skipped on its own and never aborts the
rest of the parse.
"""

from __future__ import annotations

import json
import re
import sys
from dataclasses import dataclass, field
from typing import Any, List, Optional

from wcg_ai.domain.models import ACTION_TYPES, Action, new_id

# Action block regex: [ACTION] {json} [/ACTION]
# An [ACTION] with no closing tag never matches and stays in the text.
ACTION_RE = re.compile(r"\[ACTION\](.*?)\[/ACTION\]", re.DOTALL)


def _log(msg: str):
    print(msg, file=sys.stderr)


@dataclass
class ParsedResponse:
    clean_text: str
    actions: List[Action] = field(default_factory=list)


def default_label(action_type: str) -> str:
    return action_type.replace("_", " ").title()


def _build_action(body: str) -> Optional[Action]:
    try:
        data: Any = json.loads(body)
    except (ValueError, RecursionError) as e:
        _log(f"Failed to parse action: {e}")
        return None
    if not isinstance(data, dict):
        _log(f"Skipping action block: expected a JSON object, got {type(data).__name__}")
        return None

    action_type = data.get("type")
    if action_type not in ACTION_TYPES:
        _log(f"Skipping action block with unknown type: {action_type!r}")
        return None

    label = data.get("label")
    payload = data.get("payload")
    return Action(
        id=new_id(),
        type=action_type,
        label=str(label) if label else default_label(action_type),
        payload=payload if isinstance(payload, dict) else {},
    )


def parse_actions(text: str) -> List[Action]:
    """Extract well-formed action blocks, in document order."""
    actions = []
    for body in ACTION_RE.findall(text or ""):
        action = _build_action(body)
        if action is not None:
            actions.append(action)
    return actions


def strip_actions(text: str) -> str:
    """Remove all action blocks from text."""
    return ACTION_RE.sub("", text or "").strip()


def extract_actions(raw_text: str) -> ParsedResponse:
    """Split raw model output into display text and parsed actions."""
    return ParsedResponse(
        clean_text=strip_actions(raw_text),
        actions=parse_actions(raw_text),
    )
