"""
Artifact builders for form-codegen.

Each builder is a pure function over already validated descriptors.
"""

from form_codegen.generator.escaping import escape_string, js_value
from form_codegen.generator.script import FieldShape, build_script, infer_field_shape, rule_trigger
from form_codegen.generator.style import build_style
from form_codegen.generator.template import build_template, render_control, render_form_item

__all__ = [
    "escape_string",
    "js_value",
    "FieldShape",
    "build_script",
    "infer_field_shape",
    "rule_trigger",
    "build_style",
    "build_template",
    "render_control",
    "render_form_item",
]
