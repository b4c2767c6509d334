"""Configuration loaded from the environment (.env supported)."""

import os
import sys
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 1000
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_STORAGE_DIR = "memory"

# Values copied from .env.example that should not count as a credential
PLACEHOLDER_KEYS = ("your_key_here", "your_api_key_here", "sk-...", "changeme")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        _stderr_print(f"Invalid {name}={raw!r}, falling back to {default}")
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        _stderr_print(f"Invalid {name}={raw!r}, falling back to {default}")
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    return raw in ("1", "true", "yes", "on")


@dataclass
class UsageLimitsConfig:
    max_calls_per_minute: int = 20
    max_calls_per_hour: int = 200
    max_calls_per_day: int = 2000
    min_call_interval_seconds: int = 0
    warning_threshold_pct: int = 80
    paused: bool = False


@dataclass
class AssistantConfig:
    """Settings for the assistant; an empty api_key selects the local fallback."""

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: int = DEFAULT_MAX_TOKENS
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    storage_dir: str = DEFAULT_STORAGE_DIR
    usage_limits: UsageLimitsConfig = field(default_factory=UsageLimitsConfig)

    @property
    def is_remote_configured(self) -> bool:
        key = (self.api_key or "").strip()
        return bool(key) and key.lower() not in PLACEHOLDER_KEYS

    @property
    def usage_file(self) -> str:
        return os.path.join(self.storage_dir, "usage.json")

    @classmethod
    def from_env(cls) -> "AssistantConfig":
        """Create AssistantConfig from environment variables."""
        api_key = os.getenv("WCG_AI_API_KEY", "").strip() or os.getenv("OPENAI_API_KEY", "").strip()
        return cls(
            api_key=api_key,
            base_url=os.getenv("WCG_AI_BASE_URL", DEFAULT_BASE_URL).strip().rstrip("/") or DEFAULT_BASE_URL,
            model=os.getenv("WCG_AI_MODEL", DEFAULT_MODEL).strip() or DEFAULT_MODEL,
            temperature=_env_float("WCG_AI_TEMPERATURE", DEFAULT_TEMPERATURE),
            max_tokens=_env_int("WCG_AI_MAX_TOKENS", DEFAULT_MAX_TOKENS),
            timeout_seconds=_env_float("WCG_AI_TIMEOUT", DEFAULT_TIMEOUT_SECONDS),
            storage_dir=os.getenv("WCG_AI_STORAGE_DIR", DEFAULT_STORAGE_DIR).strip() or DEFAULT_STORAGE_DIR,
            usage_limits=UsageLimitsConfig(
                max_calls_per_minute=_env_int("WCG_AI_MAX_CALLS_PER_MINUTE", 20),
                max_calls_per_hour=_env_int("WCG_AI_MAX_CALLS_PER_HOUR", 200),
                max_calls_per_day=_env_int("WCG_AI_MAX_CALLS_PER_DAY", 2000),
                paused=_env_bool("WCG_AI_PAUSED", False),
            ),
        )
