"""Dashboard context summary for prompt embedding.

Reduces the full dashboard snapshot to counts and a few names so the
system prompt stays small regardless of how much the user has stored.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

RECENT_CONTENT_LIMIT = 3


@dataclass
class DashboardContextSummary:
    project_count: int = 0
    project_names: List[str] = field(default_factory=list)
    brand_count: int = 0
    brand_names: List[str] = field(default_factory=list)
    content_count: int = 0
    recent_content: List[str] = field(default_factory=list)
    experiment_count: int = 0

    def to_prompt_dict(self) -> Dict[str, Any]:
        return {
            "projectCount": self.project_count,
            "projectNames": list(self.project_names),
            "brandCount": self.brand_count,
            "brandNames": list(self.brand_names),
            "contentCount": self.content_count,
            "recentContent": list(self.recent_content),
            "experimentCount": self.experiment_count,
        }


def _get(obj: Any, key: str) -> Any:
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def _collection(dashboard: Any, key: str) -> List[Any]:
    try:
        items = _get(dashboard, key)
    except Exception:
        return []
    if isinstance(items, (list, tuple)):
        return list(items)
    return []


def _names(records: List[Any], key: str) -> List[str]:
    names = []
    for record in records:
        try:
            value = _get(record, key)
        except Exception:
            continue
        if value is not None and value != "":
            names.append(str(value))
    return names


def summarize(dashboard: Any) -> DashboardContextSummary:
    """Project the dashboard onto a DashboardContextSummary. Never raises."""
    projects = _collection(dashboard, "projects")
    brands = _collection(dashboard, "brands")
    content = _collection(dashboard, "content")
    experiments = _collection(dashboard, "experiments")
    return DashboardContextSummary(
        project_count=len(projects),
        project_names=_names(projects, "name"),
        brand_count=len(brands),
        brand_names=_names(brands, "name"),
        content_count=len(content),
        recent_content=_names(content[:RECENT_CONTENT_LIMIT], "title"),
        experiment_count=len(experiments),
    )
