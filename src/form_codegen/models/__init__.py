"""
Data models for form-codegen.

This module contains Pydantic models for:
- Field descriptors (tagged union over the field kinds)
- Generated component output
"""

from form_codegen.models.field_definitions import (
    FIELD_KINDS,
    BaseFormItem,
    CheckboxFormItem,
    DateFormItem,
    FieldOption,
    FormItem,
    InputFormItem,
    NumberFormItem,
    OptionFormItem,
    RadioFormItem,
    SelectFormItem,
    SwitchFormItem,
    TextareaFormItem,
    UnknownFormItem,
    parse_form_items,
)
from form_codegen.models.component_output import GeneratedComponent

__all__ = [
    # Descriptors
    "FIELD_KINDS",
    "BaseFormItem",
    "CheckboxFormItem",
    "DateFormItem",
    "FieldOption",
    "FormItem",
    "InputFormItem",
    "NumberFormItem",
    "OptionFormItem",
    "RadioFormItem",
    "SelectFormItem",
    "SwitchFormItem",
    "TextareaFormItem",
    "UnknownFormItem",
    "parse_form_items",
    # Output
    "GeneratedComponent",
]
