"""Tests for domain/fallback.py — deterministic local responder."""

import pytest

from wcg_ai.domain.fallback import (
    FALLBACK_RULES,
    GENERIC_RULE,
    describe_rules,
    match_rule,
    resolve_local,
)


def _dashboard(projects=2, brands=1, content=0):
    return {
        "projects": [{"name": f"P{i}"} for i in range(projects)],
        "brands": [{"name": f"B{i}"} for i in range(brands)],
        "content": [{"title": f"C{i}"} for i in range(content)],
    }


class TestRuleOrder:
    def test_priority_order(self):
        assert [r.name for r in FALLBACK_RULES] == [
            "project", "content", "brand", "experiment", "plan", "ideas",
        ]

    @pytest.mark.parametrize("text,rule", [
        ("Create a new project", "project"),
        ("Generate a content brief", "content"),
        ("Define my brand voice", "brand"),
        ("Design a micro-experiment", "experiment"),
        ("help me plan my next quarter", "plan"),
        ("What do you suggest?", "ideas"),
        ("xyz unrelated gibberish", "generic"),
    ])
    def test_match(self, text, rule):
        assert match_rule(text).name == rule

    def test_first_match_wins(self):
        # mentions both "post" and "new"; project comes first
        assert match_rule("write a new post").name == "project"
        assert match_rule("test my brand").name == "brand"

    def test_case_insensitive(self):
        assert match_rule("STRATEGY please").name == "plan"

    def test_empty_text_is_generic(self):
        assert match_rule("") is GENERIC_RULE

    def test_describe_rules(self):
        rules = describe_rules()
        assert list(rules)[0] == "project"
        assert "strategy" in rules["plan"]


class TestResolveLocal:
    def test_plan_scenario(self):
        reply = resolve_local("help me plan my next quarter", _dashboard(2, 1, 0))
        assert "2" in reply.content
        assert "1" in reply.content
        assert "You have 2 active projects" in reply.content
        assert "1 brand profiles" in reply.content
        assert len(reply.actions) == 1
        assert reply.actions[0].type == "generate_plan"
        assert reply.actions[0].payload == {"scope": "quarterly"}

    def test_generic_has_no_actions(self):
        reply = resolve_local("xyz unrelated gibberish", {})
        assert reply.actions == []
        assert "How can I assist you today?" in reply.content

    def test_ideas_has_no_actions(self):
        reply = resolve_local("any ideas?", _dashboard(3, 0, 5))
        assert reply.actions == []
        assert "You have 5 pieces" in reply.content
        assert "Review your 3 projects" in reply.content

    @pytest.mark.parametrize("text,action_type", [
        ("new project", "create_project"),
        ("write something", "create_content"),
        ("visual identity", "add_brand_voice"),
        ("launch checklist", "create_experiment"),
    ])
    def test_single_static_action(self, text, action_type):
        reply = resolve_local(text, {})
        assert len(reply.actions) == 1
        assert reply.actions[0].type == action_type
        assert reply.actions[0].label

    def test_deterministic(self):
        dash = _dashboard()
        first = resolve_local("help me plan", dash)
        second = resolve_local("help me plan", dash)
        assert first == second

    def test_always_non_empty(self):
        for text in ["", "   ", "project", "??", "plan"]:
            assert resolve_local(text, None).content.strip()

    def test_does_not_mutate_dashboard(self):
        dash = _dashboard()
        before = repr(dash)
        resolve_local("plan", dash)
        assert repr(dash) == before

    def test_payload_is_a_fresh_dict(self):
        first = resolve_local("new project", {})
        first.actions[0].payload["name"] = "changed"
        second = resolve_local("new project", {})
        assert second.actions[0].payload["name"] == "Untitled Project"
