"""Tests for script generation."""

import re

import pytest

from form_codegen.generator.constants import SCRIPT_HEADER, SUBMIT_HANDLER
from form_codegen.generator.script import build_script, infer_field_shape, rule_trigger
from form_codegen.models.field_definitions import FIELD_KINDS, parse_form_items


def _section(script: str, opener: str) -> str:
    """Text between an object literal opener and its closing ``});``."""
    return script.split(opener, 1)[1].split("});", 1)[0]


def _rule_keys(script: str) -> list[str]:
    rules = _section(script, "const rules = reactive<Record<string, any[]>>({")
    return re.findall(r"^  (\w+): \[$", rules, re.MULTILINE)


class TestFieldShape:
    """Tests for type inference and default synthesis."""

    @pytest.mark.parametrize(
        "kind, ts_type, default",
        [
            ("checkbox", "string[]", "[]"),
            ("number", "number", "0"),
            ("switch", "boolean", "false"),
            ("date", "Date | null", "null"),
            ("input", "string", "''"),
            ("textarea", "string", "''"),
            ("select", "string", "''"),
            ("radio", "string", "''"),
            ("rating", "string", "''"),
        ],
    )
    def test_shape_per_kind(self, kind, ts_type, default):
        """Test the type and default inferred for each kind."""
        item = parse_form_items([{"id": 1, "type": kind, "label": "X", "field": "x"}])[0]
        shape = infer_field_shape(item)
        assert shape.ts_type == ts_type
        assert shape.default == default

    def test_declaration_matches_initial_value(self):
        """Test that interface and data entries agree for every kind."""
        items = parse_form_items([
            {"id": i, "type": kind, "label": kind, "field": f"f_{kind}"}
            for i, kind in enumerate(FIELD_KINDS)
        ])
        script = build_script(items)
        for item in items:
            shape = infer_field_shape(item)
            assert f"  {item.field}: {shape.ts_type};" in script
            assert f"  {item.field}: {shape.default}" in script

    def test_triggers(self):
        """Test that selects validate on change and others on blur."""
        select, radio = parse_form_items([
            {"id": 1, "type": "select", "label": "S", "field": "s"},
            {"id": 2, "type": "radio", "label": "R", "field": "r"},
        ])
        assert rule_trigger(select) == "change"
        assert rule_trigger(radio) == "blur"


class TestBuildScript:
    """Tests for build_script."""

    def test_name_age_scenario(self):
        """Test the documented name/age example."""
        items = parse_form_items([
            {"id": 1, "field": "name", "type": "input", "label": "Name", "required": True},
            {"id": 2, "field": "age", "type": "number", "label": "Age", "min": 0, "max": 120},
        ])
        script = build_script(items)

        assert "interface FormData {\n  name: string;\n  age: number;\n}" in script
        assert _section(script, "const formData = reactive<FormData>({") == (
            "\n  name: '',\n  age: 0\n"
        )
        assert _rule_keys(script) == ["name"]
        assert (
            "  name: [\n"
            "    { required: true, message: 'please enter Name', trigger: 'blur' }\n"
            "  ]"
        ) in script

    def test_select_rule_on_change(self):
        """Test that a required select gets a change trigger."""
        items = parse_form_items([
            {
                "id": 1,
                "type": "select",
                "label": "Role",
                "field": "role",
                "required": True,
                "options": [{"label": "A", "value": 1}, {"label": "B", "value": 2}],
            },
        ])
        assert "trigger: 'change'" in build_script(items)

    def test_rules_only_for_required(self):
        """Test that rule keys are exactly the required fields, in input order."""
        items = parse_form_items([
            {"id": 1, "type": "input", "label": "A", "field": "a", "required": True},
            {"id": 2, "type": "input", "label": "B", "field": "b"},
            {"id": 3, "type": "date", "label": "C", "field": "c", "required": True},
            {"id": 4, "type": "switch", "label": "D", "field": "d", "required": False},
            {"id": 5, "type": "select", "label": "E", "field": "e", "required": True},
        ])
        assert _rule_keys(build_script(items)) == ["a", "c", "e"]

    def test_rule_message_escaped(self):
        """Test that apostrophes in the rule message are escaped."""
        items = parse_form_items([
            {"id": 1, "type": "input", "label": "Owner's name", "field": "owner", "required": True},
        ])
        assert "message: 'please enter Owner\\'s name'" in build_script(items)

    def test_entries_follow_input_order(self):
        """Test that initial values follow input order."""
        items = parse_form_items([
            {"id": 1, "type": "switch", "label": "Z", "field": "z"},
            {"id": 2, "type": "number", "label": "Y", "field": "y"},
            {"id": 3, "type": "checkbox", "label": "X", "field": "x"},
        ])
        data = _section(build_script(items), "const formData = reactive<FormData>({")
        assert data == "\n  z: false,\n  y: 0,\n  x: []\n"

    def test_fixed_header_and_handler(self):
        """Test the fixed imports and submit handler."""
        lines = build_script([]).split("\n")
        assert lines[: len(SCRIPT_HEADER)] == SCRIPT_HEADER
        assert lines[-len(SUBMIT_HANDLER):] == SUBMIT_HANDLER
        assert "  if (!form.value) return;" in lines
        assert "      return false;" in lines

    def test_duplicate_fields_not_detected(self):
        """Test that a repeated field key is emitted once per descriptor, in input order."""
        items = parse_form_items([
            {"id": 1, "type": "input", "label": "First", "field": "a", "required": True},
            {"id": 2, "type": "number", "label": "Second", "field": "a", "required": True},
        ])
        script = build_script(items)

        assert "interface FormData {\n  a: string;\n  a: number;\n}" in script
        data = _section(script, "const formData = reactive<FormData>({")
        assert data == "\n  a: '',\n  a: 0\n"
        assert _rule_keys(script) == ["a", "a"]
        assert script.index("please enter First") < script.index("please enter Second")

    def test_empty_form(self):
        """Test that an empty list still yields empty literals."""
        script = build_script([])
        assert "interface FormData {\n}" in script
        assert _rule_keys(script) == []
