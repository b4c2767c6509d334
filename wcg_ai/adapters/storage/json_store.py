"""Directory of JSON list files backing chat history and dashboard collections.

Each key (``wcg_ai_messages``, ``dashboard_projects``, ...) maps to one
``<key>.json`` file holding a JSON list. A file that cannot be decoded is
renamed to ``<key>.json.bad`` and read as empty, so the next save starts
clean while the broken data stays on disk for inspection.
"""

import json
import re
import sys
from pathlib import Path
from typing import List

_UNSAFE_CHARS_RE = re.compile(r"[^A-Za-z0-9_.-]")


def _log(msg: str):
    print(msg, file=sys.stderr)


def file_stem(key: str) -> str:
    """Map a storage key onto a file name stem inside the storage dir."""
    stem = _UNSAFE_CHARS_RE.sub("_", key).strip(".")
    return stem or "_"


class JsonStorage:
    """StoragePort over ``<storage_dir>/<key>.json`` files."""

    def __init__(self, storage_dir: str = "memory"):
        self._storage_dir = Path(storage_dir)
        self._storage_dir.mkdir(parents=True, exist_ok=True)

    @property
    def storage_dir(self) -> Path:
        return self._storage_dir

    def path_for(self, key: str) -> Path:
        return self._storage_dir / f"{file_stem(key)}.json"

    def load(self, key: str) -> list:
        path = self.path_for(key)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError as e:
            _log(f"[storage] Could not read {path.name}: {e}")
            return []

        try:
            data = json.loads(text)
        except (ValueError, RecursionError) as e:
            self._quarantine(path, f"invalid JSON ({e})")
            return []
        if not isinstance(data, list):
            self._quarantine(path, f"expected a list, found {type(data).__name__}")
            return []
        return data

    def save(self, key: str, data: List) -> None:
        path = self.path_for(key)
        tmp = path.with_name(path.name + ".tmp")
        tmp.write_text(json.dumps(list(data), ensure_ascii=False, indent=2), encoding="utf-8")
        try:
            tmp.replace(path)
        except OSError:
            tmp.unlink(missing_ok=True)
            raise

    def _quarantine(self, path: Path, reason: str):
        bad = path.with_name(path.name + ".bad")
        try:
            path.replace(bad)
        except OSError as e:
            _log(f"[storage] {path.name}: {reason}; could not move aside: {e}")
            return
        _log(f"[storage] {path.name}: {reason}; moved to {bad.name}")
