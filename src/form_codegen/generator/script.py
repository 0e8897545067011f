"""
Script generation.

Renders the ``<script setup lang="ts">`` block: the ``FormData`` interface,
the reactive initial data, the validation rules of required fields and the
submit handler.
"""

import logging
from typing import NamedTuple, Sequence

from form_codegen.generator.constants import (
    ENTER_PREFIX,
    SCRIPT_HEADER,
    SUBMIT_HANDLER,
)
from form_codegen.generator.escaping import escape_string
from form_codegen.models.field_definitions import BaseFormItem

logger = logging.getLogger(__name__)


class FieldShape(NamedTuple):
    """TypeScript type of a field and the literal it starts with."""

    ts_type: str
    default: str


_FIELD_SHAPES: dict[str, FieldShape] = {
    "checkbox": FieldShape("string[]", "[]"),
    "number": FieldShape("number", "0"),
    "switch": FieldShape("boolean", "false"),
    "date": FieldShape("Date | null", "null"),
}

_TEXT_SHAPE = FieldShape("string", "''")


def infer_field_shape(item: BaseFormItem) -> FieldShape:
    """Shape of a field's value; every kind not listed holds text."""
    return _FIELD_SHAPES.get(item.type, _TEXT_SHAPE)


def rule_trigger(item: BaseFormItem) -> str:
    """Selects validate on change, everything else on blur."""
    return "change" if item.type == "select" else "blur"


def _render_rule(item: BaseFormItem) -> str:
    return (
        f"  {item.field}: [\n"
        f"    {{ required: true, message: '{ENTER_PREFIX}{escape_string(item.label)}', "
        f"trigger: '{rule_trigger(item)}' }}\n"
        f"  ]"
    )


def build_script(items: Sequence[BaseFormItem]) -> str:
    """
    Build the ``<script setup>`` block for validated descriptors.

    Interface members and initial values follow input order. Only
    descriptors with ``required=True`` get a rule entry.
    """
    lines = list(SCRIPT_HEADER)

    lines.append("interface FormData {")
    for item in items:
        lines.append(f"  {item.field}: {infer_field_shape(item).ts_type};")
    lines.extend(["}", ""])

    lines.extend(["// Form data", "const formData = reactive<FormData>({"])
    lines.append(",\n".join(f"  {item.field}: {infer_field_shape(item).default}" for item in items))
    lines.extend(["});", ""])

    required_items = [item for item in items if item.required]
    lines.extend(["// Form validation rules", "const rules = reactive<Record<string, any[]>>({"])
    lines.append(",\n".join(_render_rule(item) for item in required_items))
    lines.extend(["});", ""])

    lines.extend(SUBMIT_HANDLER)

    logger.debug(f"Rendered script for {len(items)} fields, {len(required_items)} rules")
    return "\n".join(lines)
