"""Assistant orchestration — one user turn in, one reply out.

Two paths per call:
- REMOTE: a credential is configured; the prompt goes to the LLM port and
  the reply is run through the action parser.
- LOCAL: no credential, or the remote path failed for any reason; the
  deterministic fallback answers.

generate_response never raises; the worst case is the fallback reply.
"""

import sys
from typing import Any, Callable, Dict, List, Optional, Sequence

from wcg_ai.config import AssistantConfig
from wcg_ai.domain.action_parser import extract_actions
from wcg_ai.domain.context import summarize
from wcg_ai.domain.fallback import resolve_local
from wcg_ai.domain.models import AssistantReply, ConversationMessage
from wcg_ai.domain.persona import build_system_prompt
from wcg_ai.ports.outbound import LLMPort


def _log(msg: str):
    print(msg, file=sys.stderr)


def build_messages(
    user_text: str,
    history: Sequence[ConversationMessage],
    dashboard: Any,
) -> List[Dict[str, str]]:
    """System block with context, prior turns in order, then the new turn."""
    messages = [{"role": "system", "content": build_system_prompt(summarize(dashboard))}]
    messages.extend({"role": msg.role, "content": msg.content} for msg in history)
    messages.append({"role": "user", "content": user_text})
    return messages


async def resolve_remote(
    user_text: str,
    history: Sequence[ConversationMessage],
    dashboard: Any,
    llm: LLMPort,
    config: AssistantConfig,
) -> AssistantReply:
    """Ask the model; fall back to resolve_local on any failure."""
    try:
        messages = build_messages(user_text, history, dashboard)
        raw = await llm.complete(
            messages,
            model=config.model,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
        )
        if not isinstance(raw, str):
            raise TypeError(f"LLM returned {type(raw).__name__}, expected str")
        parsed = extract_actions(raw)
        return AssistantReply(content=parsed.clean_text, actions=parsed.actions)
    except Exception as e:
        _log(f"Remote assistant failed, using local fallback: {e}")
        return resolve_local(user_text, dashboard)


def create_llm(config: AssistantConfig) -> LLMPort:
    from wcg_ai.adapters.llm.openai_adapter import OpenAIChatAdapter
    return OpenAIChatAdapter(config)


async def generate_response(
    user_text: str,
    history: Sequence[ConversationMessage],
    dashboard: Any,
    config: AssistantConfig,
    llm: Optional[LLMPort] = None,
    llm_factory: Callable[[AssistantConfig], LLMPort] = create_llm,
) -> AssistantReply:
    """Entry point for one chat turn."""
    if not config.is_remote_configured:
        return resolve_local(user_text, dashboard)
    if llm is None:
        try:
            llm = llm_factory(config)
        except Exception as e:
            _log(f"Could not create LLM client, using local fallback: {e}")
            return resolve_local(user_text, dashboard)
    return await resolve_remote(user_text, history or (), dashboard, llm, config)


class Assistant:
    """Holds a config and (optionally) an LLM client across turns.

    Per-call config overrides let callers switch credentials without
    touching the environment.
    """

    def __init__(self, config: Optional[AssistantConfig] = None, llm: Optional[LLMPort] = None):
        self.config = config or AssistantConfig()
        self._llm = llm

    @property
    def mode(self) -> str:
        return "remote" if self.config.is_remote_configured else "local"

    def _client(self, config: AssistantConfig) -> Optional[LLMPort]:
        if not config.is_remote_configured:
            return None
        if config is not self.config:
            # overrides get a client built from their own credential
            return create_llm(config)
        if self._llm is None:
            self._llm = create_llm(config)
        return self._llm

    async def respond(
        self,
        user_text: str,
        history: Sequence[ConversationMessage],
        dashboard: Any,
        config: Optional[AssistantConfig] = None,
    ) -> AssistantReply:
        cfg = config or self.config
        try:
            llm = self._client(cfg)
        except Exception as e:
            _log(f"Could not create LLM client, using local fallback: {e}")
            return resolve_local(user_text, dashboard)
        return await generate_response(user_text, history, dashboard, cfg, llm=llm)
