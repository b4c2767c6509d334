"""Deterministic keyword responder used when no model is reachable.

Rules are checked in FALLBACK_RULES order against the lower-cased message;
the first rule with a keyword contained in the message wins. Nothing here
does I/O or uses randomness, so the same input always yields the same reply.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

from wcg_ai.domain.context import DashboardContextSummary, summarize
from wcg_ai.domain.models import Action, AssistantReply


@dataclass(frozen=True)
class ActionTemplate:
    type: str
    label: str
    payload: Tuple[Tuple[str, Any], ...] = ()

    def build(self, rule_name: str) -> Action:
        return Action(
            id=f"local-{rule_name}",
            type=self.type,
            label=self.label,
            payload=dict(self.payload),
        )


@dataclass(frozen=True)
class FallbackRule:
    name: str
    keywords: Tuple[str, ...]
    render: Callable[[DashboardContextSummary], str]
    action: Optional[ActionTemplate] = None

    def matches(self, lowered: str) -> bool:
        return any(keyword in lowered for keyword in self.keywords)

    def reply(self, summary: DashboardContextSummary) -> AssistantReply:
        actions = [self.action.build(self.name)] if self.action else []
        return AssistantReply(content=self.render(summary), actions=actions)


def _project_text(summary: DashboardContextSummary) -> str:
    return (
        "I see you're interested in creating a new project. Here are your options:\n\n"
        "• Start a brand new project\n"
        "• Convert an existing idea into a project\n"
        "• Create a project based on your current brand focus\n\n"
        "What type of project would you like to start?"
    )


def _content_text(summary: DashboardContextSummary) -> str:
    return (
        "Let's create some content. I can help you:\n\n"
        "• Generate a content brief\n"
        "• Create a social post\n"
        "• Plan a content series\n"
        "• Add content to your library\n\n"
        "What would you like to focus on?"
    )


def _brand_text(summary: DashboardContextSummary) -> str:
    return (
        "Your brand is your foundation. Let me help you with:\n\n"
        "• Define your brand voice\n"
        "• Create a color palette\n"
        "• Develop brand guidelines\n"
        "• Build a brand kit\n\n"
        "Which would be most helpful?"
    )


def _experiment_text(summary: DashboardContextSummary) -> str:
    return (
        "Let's plan your next move. I can help you:\n\n"
        "• Design an A/B test\n"
        "• Create a launch checklist\n"
        "• Plan a growth experiment\n"
        "• Test new content formats\n\n"
        "What would you like to explore?"
    )


def _plan_text(summary: DashboardContextSummary) -> str:
    return (
        "Let me help you create a strategic plan. Based on your current work:\n\n"
        f"• You have {summary.project_count} active projects\n"
        f"• {summary.content_count} pieces of content\n"
        f"• {summary.brand_count} brand profiles\n\n"
        "I can generate:\n"
        "• A quarterly plan\n"
        "• A content calendar\n"
        "• A growth roadmap\n\n"
        "What planning horizon interests you?"
    )


def _ideas_text(summary: DashboardContextSummary) -> str:
    return (
        "Here are my top recommendations for you:\n\n"
        f"1. **Focus on Content Consistency**: You have {summary.content_count} pieces. "
        "Next step: establish a posting schedule.\n\n"
        f"2. **Expand Your Brand**: With {summary.brand_count} brand profile(s), "
        "it's time to deepen your brand guidelines.\n\n"
        "3. **Test & Learn**: Create 2-3 micro experiments this month to find what resonates.\n\n"
        f"4. **Project Clarity**: Review your {summary.project_count} projects "
        "and prioritize the top 3.\n\n"
        "Which would you like to dive into?"
    )


def _generic_text(summary: DashboardContextSummary) -> str:
    return (
        "How can I assist you today? I can help with:\n\n"
        "• **Creating projects** - Build and organize your work\n"
        "• **Content planning** - Write briefs, posts, and calendars\n"
        "• **Brand building** - Define voice, visuals, and guidelines\n"
        "• **Experiments** - Design tests and growth initiatives\n"
        "• **Strategic planning** - Create plans and roadmaps\n"
        "• **Smart recommendations** - What you should focus on next\n\n"
        "What would you like to work on?"
    )


# Priority order matters: "new post" is a project request, not a content one.
FALLBACK_RULES: Tuple[FallbackRule, ...] = (
    FallbackRule(
        name="project",
        keywords=("project", "new"),
        render=_project_text,
        action=ActionTemplate(
            type="create_project",
            label="Create New Project",
            payload=(("name", "Untitled Project"), ("type", "active")),
        ),
    ),
    FallbackRule(
        name="content",
        keywords=("content", "post", "write"),
        render=_content_text,
        action=ActionTemplate(
            type="create_content",
            label="Create Content Task",
            payload=(("title", "New Content Piece"), ("type", "Social Post")),
        ),
    ),
    FallbackRule(
        name="brand",
        keywords=("brand", "voice", "visual"),
        render=_brand_text,
        action=ActionTemplate(
            type="add_brand_voice",
            label="Define Brand Voice",
            payload=(("name", "My Brand Voice"),),
        ),
    ),
    FallbackRule(
        name="experiment",
        keywords=("launch", "experiment", "test"),
        render=_experiment_text,
        action=ActionTemplate(
            type="create_experiment",
            label="Design Experiment",
            payload=(("name", "A/B Test"), ("type", "ab-test")),
        ),
    ),
    FallbackRule(
        name="plan",
        keywords=("plan", "strategy"),
        render=_plan_text,
        action=ActionTemplate(
            type="generate_plan",
            label="Generate Plan",
            payload=(("scope", "quarterly"),),
        ),
    ),
    FallbackRule(
        name="ideas",
        keywords=("idea", "suggest", "recommend"),
        render=_ideas_text,
    ),
)

GENERIC_RULE = FallbackRule(name="generic", keywords=(), render=_generic_text)


def match_rule(user_text: str) -> FallbackRule:
    """Return the first matching rule, or GENERIC_RULE."""
    lowered = (user_text or "").lower()
    for rule in FALLBACK_RULES:
        if rule.matches(lowered):
            return rule
    return GENERIC_RULE


def resolve_local(user_text: str, dashboard: Any) -> AssistantReply:
    """Answer without any network access."""
    return match_rule(user_text).reply(summarize(dashboard))


def describe_rules() -> Dict[str, Tuple[str, ...]]:
    """Rule name -> keywords, in priority order (used by the CLI help)."""
    return {rule.name: rule.keywords for rule in FALLBACK_RULES}
