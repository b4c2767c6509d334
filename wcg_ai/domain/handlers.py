"""Action handlers — apply an accepted Action to the dashboard.

The assistant only proposes actions; these run when the user clicks one.
Each handler returns a new dashboard mapping and leaves its input untouched.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional

from wcg_ai.domain.context import summarize
from wcg_ai.domain.models import Action, new_id

DEFAULT_BRAND_COLORS = ["#000000", "#ffffff", "#666666"]

BRAND_VOICE_FRAMEWORK = {
    "tone": "Professional, creative, and supportive",
    "values": ["Authenticity", "Innovation", "Community"],
    "do": ["Be genuine", "Share insights", "Encourage others"],
    "dont": ["Hype", "Pressure", "Jargon"],
}


class UnknownActionError(ValueError):
    """Raised for an action type with no handler."""


@dataclass
class ActionOutcome:
    dashboard: Dict[str, Any]
    toast: Optional[str]
    follow_up: str
    changed: bool = False


def _now(now: Optional[datetime]) -> str:
    return (now or datetime.now(timezone.utc)).isoformat()


def _list(dashboard: Mapping[str, Any], key: str) -> List[Any]:
    items = dashboard.get(key)
    return list(items) if isinstance(items, (list, tuple)) else []


def _prepend(dashboard: Mapping[str, Any], key: str, record: Dict[str, Any]) -> Dict[str, Any]:
    updated = dict(dashboard)
    updated[key] = [record] + _list(dashboard, key)
    return updated


def _create_project(action: Action, dashboard: Mapping[str, Any], timestamp: str) -> ActionOutcome:
    payload = action.payload
    project = {
        "id": new_id(),
        "name": payload.get("name") or "New Project",
        "type": payload.get("type") or "active",
        "description": "",
        "helpNeeded": [],
        "status": "active",
        "createdAt": timestamp,
    }
    updated = _prepend(dashboard, "projects", project)
    updated["activity"] = _list(dashboard, "activity") + [{
        "id": new_id(),
        "type": "project",
        "title": f"Created project: {project['name']}",
        "timestamp": timestamp,
        "action": "created",
    }]
    return ActionOutcome(
        dashboard=updated,
        toast=f"Created project: {project['name']}",
        follow_up=(
            f"Great! I've created a new project called \"{project['name']}\". "
            "What would you like to do next?"
        ),
        changed=True,
    )


def _create_content(action: Action, dashboard: Mapping[str, Any], timestamp: str) -> ActionOutcome:
    payload = action.payload
    content = {
        "id": new_id(),
        "title": payload.get("title") or "New Content",
        "type": payload.get("type") or "Social Post",
        "content": "",
        "status": "draft",
        "createdAt": timestamp,
        "tags": ["ai-generated"],
    }
    return ActionOutcome(
        dashboard=_prepend(dashboard, "content", content),
        toast="Created content task",
        follow_up=(
            f"Perfect! I've created a new {content['type']}. "
            "Now let's add details to make it compelling."
        ),
        changed=True,
    )


def _create_brand(action: Action, dashboard: Mapping[str, Any], timestamp: str) -> ActionOutcome:
    payload = action.payload
    brand = {
        "id": new_id(),
        "name": payload.get("name") or "My Brand",
        "description": payload.get("description") or "",
        "colors": payload.get("colors") or list(DEFAULT_BRAND_COLORS),
        "voice": payload.get("voice") or "Professional, creative",
    }
    return ActionOutcome(
        dashboard=_prepend(dashboard, "brands", brand),
        toast=f"Created brand: {brand['name']}",
        follow_up=(
            "Excellent! I've created your brand profile. Let's develop it further "
            "with your unique voice and visual identity."
        ),
        changed=True,
    )


def _add_brand_voice(action: Action, dashboard: Mapping[str, Any], timestamp: str) -> ActionOutcome:
    voice = BRAND_VOICE_FRAMEWORK
    return ActionOutcome(
        dashboard=dict(dashboard),
        toast="Brand voice framework created",
        follow_up=(
            "Here's your brand voice framework:\n\n"
            f"**Tone:** {voice['tone']}\n"
            f"**Values:** {', '.join(voice['values'])}\n\n"
            f"**Do:** {', '.join(voice['do'])}\n"
            f"**Don't:** {', '.join(voice['dont'])}\n\n"
            "You can refine this further in your Brand Builder page."
        ),
    )


def _create_experiment(action: Action, dashboard: Mapping[str, Any], timestamp: str) -> ActionOutcome:
    payload = action.payload
    experiment = {
        "id": new_id(),
        "name": payload.get("name") or "New Experiment",
        "type": payload.get("type") or "ab-test",
        "description": payload.get("description") or "Testing new approach",
        "status": "active",
        "createdAt": timestamp,
    }
    return ActionOutcome(
        dashboard=_prepend(dashboard, "experiments", experiment),
        toast="Created experiment",
        follow_up=(
            f"Great! I've created an experiment: \"{experiment['name']}\". "
            "Let's define your hypothesis and success metrics."
        ),
        changed=True,
    )


def render_plan(scope: str, dashboard: Mapping[str, Any]) -> str:
    """Plan text for a generate_plan action; unknown scopes get the roadmap."""
    if scope == "quarterly":
        summary = summarize(dashboard)
        return (
            "# Quarterly Plan\n\n"
            "**Month 1: Foundation**\n"
            "• Solidify your brand voice and guidelines\n"
            "• Create 12 content pieces (4 per week)\n"
            "• Launch 2 growth experiments\n"
            "• Engage with community\n\n"
            "**Month 2: Expansion**\n"
            "• Run A/B tests on top performers\n"
            "• Publish long-form content\n"
            "• Build 1 collaboration\n"
            "• Analyze data\n\n"
            "**Month 3: Optimization**\n"
            "• Double down on what works\n"
            "• Plan next quarter\n"
            "• Build audience\n"
            "• Prepare for launches\n\n"
            f"**Current Status:** {summary.project_count} projects, "
            f"{summary.content_count} content pieces, "
            f"{summary.brand_count} brand profile(s)"
        )
    if scope == "content":
        return (
            "# Content Calendar (Next 4 Weeks)\n\n"
            "**Week 1:** Foundation\n• Mon: Introduction post\n• Wed: Value post\n• Fri: Community post\n\n"
            "**Week 2:** Building\n• Mon: Tutorial\n• Wed: Case study\n• Fri: Behind-the-scenes\n\n"
            "**Week 3:** Engagement\n• Mon: Q&A\n• Wed: Collaboration\n• Fri: Reflection\n\n"
            "**Week 4:** Growth\n• Mon: Announcement\n• Wed: Launch\n• Fri: Recap\n\n"
            "Ready to start creating?"
        )
    return (
        "# Growth Roadmap\n\n"
        "**Phase 1: Build (Weeks 1-4)**\n"
        "Focus on consistency and quality. Post regularly, engage authentically.\n\n"
        "**Phase 2: Test (Weeks 5-8)**\n"
        "Run experiments. Track what resonates. Optimize based on data.\n\n"
        "**Phase 3: Scale (Weeks 9-12)**\n"
        "Double down on winning formats. Build collaborations. Grow audience.\n\n"
        "**Phase 4: Monetize (Weeks 13+)**\n"
        "Explore opportunities aligned with your brand and audience.\n\n"
        "Remember: sustainable growth beats viral spikes every time."
    )


def _generate_plan(action: Action, dashboard: Mapping[str, Any], timestamp: str) -> ActionOutcome:
    scope = action.payload.get("scope") or "quarterly"
    return ActionOutcome(
        dashboard=dict(dashboard),
        toast=None,
        follow_up=render_plan(str(scope), dashboard),
    )


def _schedule_post(action: Action, dashboard: Mapping[str, Any], timestamp: str) -> ActionOutcome:
    return ActionOutcome(
        dashboard=dict(dashboard),
        toast="Post scheduled for optimal engagement time",
        follow_up=(
            "Your post has been scheduled! I analyzed your audience and scheduled it "
            "for maximum engagement. Check your Content Studio to see all scheduled posts."
        ),
    )


HANDLERS: Dict[str, Callable[[Action, Mapping[str, Any], str], ActionOutcome]] = {
    "create_project": _create_project,
    "create_content": _create_content,
    "create_brand": _create_brand,
    "add_brand_voice": _add_brand_voice,
    "create_experiment": _create_experiment,
    "generate_plan": _generate_plan,
    "schedule_post": _schedule_post,
}


def apply_action(
    action: Action,
    dashboard: Optional[Mapping[str, Any]],
    now: Optional[datetime] = None,
) -> ActionOutcome:
    handler = HANDLERS.get(action.type)
    if handler is None:
        raise UnknownActionError(f"Unsupported action type: {action.type!r}")
    return handler(action, dashboard or {}, _now(now))
