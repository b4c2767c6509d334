"""Dashboard collections persisted one key per collection."""

from typing import Any, Dict, Mapping

from wcg_ai.ports.outbound import StoragePort

DASHBOARD_COLLECTIONS = (
    "creators",
    "projects",
    "brands",
    "content",
    "launchPages",
    "products",
    "orders",
    "notes",
    "experiments",
    "services",
    "activity",
)


class DashboardStore:
    def __init__(self, storage: StoragePort, prefix: str = "dashboard_"):
        self._storage = storage
        self._prefix = prefix

    def load(self) -> Dict[str, Any]:
        return {
            name: self._storage.load(f"{self._prefix}{name}")
            for name in DASHBOARD_COLLECTIONS
        }

    def save(self, dashboard: Mapping[str, Any]):
        for name in DASHBOARD_COLLECTIONS:
            items = dashboard.get(name)
            if isinstance(items, (list, tuple)):
                self._storage.save(f"{self._prefix}{name}", list(items))
