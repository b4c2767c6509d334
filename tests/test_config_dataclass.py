"""Tests for the typed AssistantConfig dataclass."""

import os

import pytest

from wcg_ai.config import (
    DEFAULT_BASE_URL,
    DEFAULT_MODEL,
    AssistantConfig,
    UsageLimitsConfig,
)

ENV_VARS = (
    "WCG_AI_API_KEY",
    "OPENAI_API_KEY",
    "WCG_AI_BASE_URL",
    "WCG_AI_MODEL",
    "WCG_AI_TEMPERATURE",
    "WCG_AI_MAX_TOKENS",
    "WCG_AI_TIMEOUT",
    "WCG_AI_STORAGE_DIR",
    "WCG_AI_PAUSED",
    "WCG_AI_MAX_CALLS_PER_MINUTE",
    "WCG_AI_MAX_CALLS_PER_HOUR",
    "WCG_AI_MAX_CALLS_PER_DAY",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestUsageLimitsConfig:
    def test_defaults(self):
        c = UsageLimitsConfig()
        assert c.max_calls_per_minute == 20
        assert c.max_calls_per_day == 2000
        assert c.paused is False

    def test_custom(self):
        c = UsageLimitsConfig(max_calls_per_day=100, paused=True)
        assert c.max_calls_per_day == 100
        assert c.paused is True


class TestAssistantConfig:
    def test_defaults(self):
        c = AssistantConfig()
        assert c.api_key == ""
        assert c.base_url == DEFAULT_BASE_URL
        assert c.model == DEFAULT_MODEL
        assert c.temperature == 0.7
        assert c.max_tokens == 1000
        assert c.is_remote_configured is False
        assert isinstance(c.usage_limits, UsageLimitsConfig)

    def test_remote_configured(self):
        assert AssistantConfig(api_key="sk-abc").is_remote_configured is True

    @pytest.mark.parametrize("key", ["", "   ", "your_key_here", "YOUR_API_KEY_HERE"])
    def test_placeholder_not_configured(self, key):
        assert AssistantConfig(api_key=key).is_remote_configured is False

    def test_usage_file(self):
        c = AssistantConfig(storage_dir="data")
        assert c.usage_file == os.path.join("data", "usage.json")


class TestFromEnv:
    def test_empty_env(self, clean_env):
        c = AssistantConfig.from_env()
        assert c.api_key == ""
        assert c.is_remote_configured is False
        assert c.model == DEFAULT_MODEL

    def test_wcg_key_preferred(self, clean_env):
        clean_env.setenv("WCG_AI_API_KEY", "sk-wcg")
        clean_env.setenv("OPENAI_API_KEY", "sk-openai")
        assert AssistantConfig.from_env().api_key == "sk-wcg"

    def test_openai_key_fallback(self, clean_env):
        clean_env.setenv("OPENAI_API_KEY", "sk-openai")
        assert AssistantConfig.from_env().api_key == "sk-openai"

    def test_overrides(self, clean_env):
        clean_env.setenv("WCG_AI_BASE_URL", "http://localhost:11434/v1/")
        clean_env.setenv("WCG_AI_MODEL", "llama3")
        clean_env.setenv("WCG_AI_TEMPERATURE", "0.1")
        clean_env.setenv("WCG_AI_MAX_TOKENS", "256")
        clean_env.setenv("WCG_AI_STORAGE_DIR", "/tmp/wcg")
        clean_env.setenv("WCG_AI_PAUSED", "yes")
        c = AssistantConfig.from_env()
        assert c.base_url == "http://localhost:11434/v1"
        assert c.model == "llama3"
        assert c.temperature == 0.1
        assert c.max_tokens == 256
        assert c.storage_dir == "/tmp/wcg"
        assert c.usage_limits.paused is True

    def test_invalid_numbers_fall_back(self, clean_env, capsys):
        clean_env.setenv("WCG_AI_TEMPERATURE", "warm")
        clean_env.setenv("WCG_AI_MAX_TOKENS", "lots")
        c = AssistantConfig.from_env()
        assert c.temperature == 0.7
        assert c.max_tokens == 1000
        assert "WCG_AI_TEMPERATURE" in capsys.readouterr().err
