"""Tests for domain/action_parser.py — pure Python, no network."""

import json

from wcg_ai.domain.action_parser import (
    ACTION_RE,
    ParsedResponse,
    default_label,
    extract_actions,
    parse_actions,
    strip_actions,
)


def _block(data) -> str:
    return f"[ACTION]\n{json.dumps(data)}\n[/ACTION]"


class TestExtractActions:
    def test_single_action(self):
        raw = 'Sure![ACTION]\n{"type":"create_project","label":"Go"}\n[/ACTION]'
        result = extract_actions(raw)
        assert isinstance(result, ParsedResponse)
        assert result.clean_text == "Sure!"
        assert len(result.actions) == 1
        assert result.actions[0].type == "create_project"
        assert result.actions[0].label == "Go"

    def test_malformed_only(self):
        result = extract_actions("[ACTION]not json[/ACTION]")
        assert result.clean_text == ""
        assert result.actions == []

    def test_no_delimiters(self):
        result = extract_actions("  just a reply \n")
        assert result.clean_text == "just a reply"
        assert result.actions == []

    def test_empty_text(self):
        result = extract_actions("")
        assert result.clean_text == ""
        assert result.actions == []

    def test_multiple_actions_keep_order(self):
        raw = (
            "Intro. "
            + _block({"type": "create_content", "label": "A"})
            + " middle "
            + _block({"type": "schedule_post", "label": "B"})
            + " outro"
        )
        result = extract_actions(raw)
        assert [a.label for a in result.actions] == ["A", "B"]
        assert result.clean_text == "Intro.  middle  outro"

    def test_round_trip_interleaved(self):
        pieces = ["first ", "second ", "third"]
        blocks = [
            _block({"type": "create_brand", "label": "one"}),
            _block({"type": "generate_plan", "label": "two", "payload": {"scope": "content"}}),
        ]
        raw = pieces[0] + blocks[0] + pieces[1] + blocks[1] + pieces[2]
        result = extract_actions(raw)
        assert len(result.actions) == 2
        assert result.clean_text == "".join(pieces).strip()
        assert result.actions[1].payload == {"scope": "content"}

    def test_malformed_region_tolerated(self):
        raw = (
            "Plan below. "
            + _block({"type": "generate_plan", "label": "Plan"})
            + " [ACTION]{broken json,,}[/ACTION] done"
        )
        result = extract_actions(raw)
        assert len(result.actions) == 1
        assert result.actions[0].type == "generate_plan"
        assert "[ACTION]" not in result.clean_text
        assert "broken" not in result.clean_text
        assert result.clean_text == "Plan below.   done"

    def test_deeply_nested_region_skipped(self):
        nested = "[" * 100000 + "]" * 100000
        raw = (
            "keep "
            + f"[ACTION]{nested}[/ACTION] "
            + _block({"type": "create_project", "label": "Go"})
        )
        result = extract_actions(raw)
        assert [a.type for a in result.actions] == ["create_project"]
        assert result.clean_text == "keep"

    def test_unterminated_block_left_in_text(self):
        raw = 'Here you go [ACTION]{"type":"create_project"}'
        result = extract_actions(raw)
        assert result.actions == []
        assert result.clean_text == raw

    def test_fresh_ids_override_model_ids(self):
        raw = _block({"id": "model-id", "type": "create_project", "label": "x"}) * 2
        result = extract_actions(raw)
        ids = [a.id for a in result.actions]
        assert "model-id" not in ids
        assert len(set(ids)) == 2


class TestParseActions:
    def test_unknown_type_dropped(self):
        raw = _block({"type": "delete_everything", "label": "no"})
        assert parse_actions(raw) == []

    def test_missing_type_dropped(self):
        assert parse_actions(_block({"label": "no type"})) == []

    def test_non_object_dropped(self):
        assert parse_actions("[ACTION][1, 2, 3][/ACTION]") == []

    def test_missing_label_defaults(self):
        actions = parse_actions(_block({"type": "create_experiment"}))
        assert actions[0].label == "Create Experiment"

    def test_payload_kept(self):
        payload = {"name": "Spring Drop", "tags": ["a", "b"], "budget": 1200}
        actions = parse_actions(_block({"type": "create_project", "label": "Go", "payload": payload}))
        assert actions[0].payload == payload

    def test_extra_top_level_keys_ignored(self):
        actions = parse_actions(_block({
            "type": "create_brand", "label": "Go", "payload": {"name": "X"}, "priority": "high",
        }))
        assert actions[0].payload == {"name": "X"}
        assert "priority" not in actions[0].to_dict()

    def test_non_object_payload_replaced(self):
        actions = parse_actions(_block({"type": "create_project", "label": "Go", "payload": "oops"}))
        assert actions[0].payload == {}

    def test_multiline_json(self):
        raw = """[ACTION]
{
  "type": "schedule_post",
  "label": "Schedule",
  "payload": { "platform": "instagram" }
}
[/ACTION]"""
        actions = parse_actions(raw)
        assert len(actions) == 1
        assert actions[0].payload["platform"] == "instagram"


class TestStripActions:
    def test_strips_all(self):
        text = "hello [ACTION]{}[/ACTION] world"
        assert strip_actions(text) == "hello  world"

    def test_strips_malformed_too(self):
        assert strip_actions("[ACTION]nope[/ACTION]") == ""

    def test_no_actions(self):
        assert strip_actions("just text") == "just text"


class TestHelpers:
    def test_default_label(self):
        assert default_label("add_brand_voice") == "Add Brand Voice"

    def test_regex_is_non_greedy(self):
        text = "[ACTION]a[/ACTION] x [ACTION]b[/ACTION]"
        assert ACTION_RE.findall(text) == ["a", "b"]
