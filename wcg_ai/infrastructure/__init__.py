"""Infrastructure: usage limits and local persistence."""

from wcg_ai.infrastructure.dashboard_store import DASHBOARD_COLLECTIONS, DashboardStore
from wcg_ai.infrastructure.history import ConversationHistory
from wcg_ai.infrastructure.usage import UsageLimitExceeded, UsageTracker

__all__ = [
    "DASHBOARD_COLLECTIONS",
    "DashboardStore",
    "ConversationHistory",
    "UsageLimitExceeded",
    "UsageTracker",
]
