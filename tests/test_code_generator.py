"""Tests for the CodeGenerator facade."""

import pytest
from pydantic import ValidationError

from form_codegen import CodeGenerator, generate_component
from form_codegen.generator.constants import STYLE_BLOCK
from form_codegen.models.field_definitions import BaseFormItem, FieldOption, SelectFormItem

FIELDS = [
    {"id": 1, "field": "name", "type": "input", "label": "Name", "required": True},
    {"id": 2, "field": "age", "type": "number", "label": "Age", "min": 0, "max": 120},
    {
        "id": 3,
        "field": "role",
        "type": "select",
        "label": "Role",
        "required": True,
        "options": [{"label": "A", "value": 1}, {"label": "B", "value": 2}],
    },
    {"id": 4, "field": "quote", "type": "textarea", "label": 'Say "Hi"'},
]


class TestCodeGenerator:
    """Tests for CodeGenerator."""

    def test_deterministic(self):
        """Test that repeated calls return identical strings."""
        generator = CodeGenerator()
        assert generator.generate_template(FIELDS) == generator.generate_template(FIELDS)
        assert generator.generate_script(FIELDS) == CodeGenerator().generate_script(list(FIELDS))
        assert generator.generate_style() == generator.generate_style()

    def test_input_not_mutated(self):
        """Test that the caller's descriptors are left untouched."""
        snapshot = [dict(item) for item in FIELDS]
        CodeGenerator().generate_component(FIELDS)
        assert FIELDS == snapshot

    def test_template_scenario(self):
        """Test the controls, bounds, options and escaping in the markup."""
        template = CodeGenerator().generate_template(FIELDS)
        assert template.count('<el-input v-model="formData.name"') == 1
        assert '<el-input-number v-model="formData.age" :min="0" :max="120"' in template
        assert template.count("<el-option ") == 2
        assert template.index('label="A" value="1"') < template.index('label="B" value="2"')
        assert 'label="Say \\"Hi\\""' in template

    def test_models_and_mappings_agree(self):
        """Test that models and equivalent mappings give the same output."""
        model = SelectFormItem(
            id=1,
            label="Role",
            field="role",
            required=True,
            options=[FieldOption(label="A", value=1)],
        )
        mapping = {
            "id": 1,
            "type": "select",
            "label": "Role",
            "field": "role",
            "required": True,
            "options": [{"label": "A", "value": 1}],
        }
        generator = CodeGenerator()
        assert generator.generate_template([model]) == generator.generate_template([mapping])
        assert generator.generate_script([model]) == generator.generate_script([mapping])

    def test_style_is_constant(self):
        """Test that the style block is the fixed scoped block."""
        assert CodeGenerator().generate_style() == "\n".join(STYLE_BLOCK)
        assert CodeGenerator().generate_style().startswith("<style scoped>")

    def test_invalid_descriptor_raises(self):
        """Test that a descriptor without label or field is rejected."""
        with pytest.raises(ValidationError):
            CodeGenerator().generate_template([{"id": 1, "type": "input"}])

    def test_base_model_descriptor(self):
        """Test generating from a plain BaseFormItem."""
        item = BaseFormItem(id=1, type="input", label="Name", field="name")
        template = CodeGenerator().generate_template([item])
        assert '<el-input v-model="formData.name" placeholder="please enter Name"' in template

    def test_generator_accepts_iterables(self):
        """Test that a generator expression is consumed once and validated."""
        script = CodeGenerator().generate_script(item for item in FIELDS)
        assert "  role: string;" in script


class TestGenerateComponent:
    """Tests for generate_component."""

    def test_artifacts(self):
        """Test that the component matches the per-artifact calls."""
        generator = CodeGenerator()
        component = generate_component(FIELDS)
        assert component.template == generator.generate_template(FIELDS)
        assert component.script == generator.generate_script(FIELDS)
        assert component.style == generator.generate_style()

    def test_without_style(self):
        """Test generating a component without the style block."""
        component = generate_component(FIELDS, include_style=False)
        assert component.style == ""
        assert "<style" not in component.to_sfc()

    def test_sfc_order(self):
        """Test the block order of the assembled .vue file."""
        sfc = generate_component(FIELDS).to_sfc()
        assert sfc.index("<template>") < sfc.index("<script setup") < sfc.index("<style scoped>")
