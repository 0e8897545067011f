"""
form-codegen: Vue + Element Plus form code generation.

Turn an ordered list of field descriptors into the template, script and
style blocks of a ready-to-use form component.

Simple Usage:
    from form_codegen import generate_component

    component = generate_component([
        {"id": 1, "type": "input", "label": "Name", "field": "name", "required": True},
        {"id": 2, "type": "select", "label": "Role", "field": "role",
         "options": [{"label": "Admin", "value": 1}, {"label": "User", "value": 2}]},
    ])

    print(component.template)
    print(component.script)
    print(component.to_sfc())  # complete .vue file body

Per-artifact Usage:
    from form_codegen import CodeGenerator

    generator = CodeGenerator()
    template = generator.generate_template(fields)
    script = generator.generate_script(fields)
    style = generator.generate_style()

Agents and MCP:
    from form_codegen.tools import generate_vue_form_tool
    from form_codegen.mcp_server import run_mcp_server
"""

from form_codegen.code_generator import (
    CodeGenerator,
    generate_component,
)
from form_codegen.generator import (
    FieldShape,
    escape_string,
    infer_field_shape,
)
from form_codegen.models.field_definitions import (
    FIELD_KINDS,
    BaseFormItem,
    CheckboxFormItem,
    DateFormItem,
    FieldOption,
    FormItem,
    InputFormItem,
    NumberFormItem,
    RadioFormItem,
    SelectFormItem,
    SwitchFormItem,
    TextareaFormItem,
    UnknownFormItem,
    parse_form_items,
)
from form_codegen.models.component_output import GeneratedComponent

__all__ = [
    # Main interface
    "CodeGenerator",
    "generate_component",
    # Input models
    "FIELD_KINDS",
    "BaseFormItem",
    "CheckboxFormItem",
    "DateFormItem",
    "FieldOption",
    "FormItem",
    "InputFormItem",
    "NumberFormItem",
    "RadioFormItem",
    "SelectFormItem",
    "SwitchFormItem",
    "TextareaFormItem",
    "UnknownFormItem",
    "parse_form_items",
    # Output models
    "GeneratedComponent",
    # Helpers
    "FieldShape",
    "escape_string",
    "infer_field_shape",
]

__version__ = "0.1.0"
