"""
Template (markup) generation.

Renders the ``<template>`` block: an ``el-form`` wrapper, one
``el-form-item`` per descriptor in input order, and a submit button.
"""

import logging
from typing import Callable, Sequence

from form_codegen.generator.constants import (
    DEFAULT_NUMBER_MAX,
    DEFAULT_NUMBER_MIN,
    ENTER_PREFIX,
    SELECT_PREFIX,
    TEMPLATE_FOOTER,
    TEMPLATE_HEADER,
)
from form_codegen.generator.escaping import escape_string, js_value
from form_codegen.models.field_definitions import (
    BaseFormItem,
    CheckboxFormItem,
    DateFormItem,
    InputFormItem,
    NumberFormItem,
    OptionFormItem,
    RadioFormItem,
    SelectFormItem,
    SwitchFormItem,
    TextareaFormItem,
)

logger = logging.getLogger(__name__)


def _placeholder(item: BaseFormItem, prefix: str) -> str:
    # An empty placeholder counts as missing
    return escape_string(item.placeholder or f"{prefix}{item.label}")


def _render_input(item: InputFormItem) -> list[str]:
    return [
        f'      <el-input v-model="formData.{item.field}" '
        f'placeholder="{_placeholder(item, ENTER_PREFIX)}" '
        f':disabled="{js_value(item.disabled)}"></el-input>'
    ]


def _render_textarea(item: TextareaFormItem) -> list[str]:
    return [
        f'      <el-input type="textarea" v-model="formData.{item.field}" '
        f'placeholder="{_placeholder(item, ENTER_PREFIX)}" '
        f':disabled="{js_value(item.disabled)}"></el-input>'
    ]


def _render_number(item: NumberFormItem) -> list[str]:
    minimum = item.min if item.min is not None else DEFAULT_NUMBER_MIN
    maximum = item.max if item.max is not None else DEFAULT_NUMBER_MAX
    return [
        f'      <el-input-number v-model="formData.{item.field}" '
        f':min="{js_value(minimum)}" :max="{js_value(maximum)}" '
        f':disabled="{js_value(item.disabled)}"></el-input-number>'
    ]


def _render_select(item: SelectFormItem) -> list[str]:
    lines = [
        f'      <el-select v-model="formData.{item.field}" '
        f'placeholder="{_placeholder(item, SELECT_PREFIX)}" '
        f':disabled="{js_value(item.disabled)}">'
    ]
    for option in item.options:
        lines.append(
            f'        <el-option label="{escape_string(option.label)}" '
            f'value="{js_value(option.value)}"></el-option>'
        )
    lines.append("      </el-select>")
    return lines


def _render_choice_group(item: OptionFormItem, tag: str) -> list[str]:
    """Radio and checkbox groups share one shape: value as label, caption as body."""
    lines = [
        f'      <{tag}-group v-model="formData.{item.field}" '
        f':disabled="{js_value(item.disabled)}">'
    ]
    for option in item.options:
        lines.append(
            f'        <{tag} label="{js_value(option.value)}">'
            f"{escape_string(option.label)}</{tag}>"
        )
    lines.append(f"      </{tag}-group>")
    return lines


def _render_radio(item: RadioFormItem) -> list[str]:
    return _render_choice_group(item, "el-radio")


def _render_checkbox(item: CheckboxFormItem) -> list[str]:
    return _render_choice_group(item, "el-checkbox")


def _render_date(item: DateFormItem) -> list[str]:
    return [
        "      <el-date-picker",
        f'        v-model="formData.{item.field}"',
        '        type="date"',
        f'        placeholder="{_placeholder(item, SELECT_PREFIX)}"',
        f'        :disabled="{js_value(item.disabled)}">',
        "      </el-date-picker>",
    ]


def _render_switch(item: SwitchFormItem) -> list[str]:
    return [
        f'      <el-switch v-model="formData.{item.field}" '
        f':disabled="{js_value(item.disabled)}"></el-switch>'
    ]


_CONTROL_RENDERERS: dict[str, Callable[..., list[str]]] = {
    "input": _render_input,
    "textarea": _render_textarea,
    "number": _render_number,
    "select": _render_select,
    "radio": _render_radio,
    "checkbox": _render_checkbox,
    "date": _render_date,
    "switch": _render_switch,
}


def render_control(item: BaseFormItem) -> list[str]:
    """
    Render the control lines for one descriptor.

    Dispatch is on ``item.type``, so subclasses of a variant render like it.
    Kinds without a renderer (``UnknownFormItem``) produce no lines, leaving
    the surrounding form item as a label-only wrapper.
    """
    renderer = _CONTROL_RENDERERS.get(item.type)
    if renderer is None:
        logger.debug(f"No control for field '{item.field}' of type '{item.type}'")
        return []
    return renderer(item)


def render_form_item(item: BaseFormItem) -> list[str]:
    """Render the ``el-form-item`` block of one descriptor."""
    lines = [
        "    <el-form-item",
        f'      label="{escape_string(item.label)}"',
        f'      prop="{item.field}"',
        f'      :required="{js_value(item.required)}">',
    ]
    lines.extend(render_control(item))
    lines.append("    </el-form-item>")
    return lines


def build_template(items: Sequence[BaseFormItem]) -> str:
    """
    Build the ``<template>`` block for validated descriptors.

    Args:
        items: Descriptors in display order.

    Returns:
        The markup artifact, lines joined with ``\\n``.
    """
    lines = list(TEMPLATE_HEADER)
    for item in items:
        lines.extend(render_form_item(item))
    lines.extend(TEMPLATE_FOOTER)
    logger.debug(f"Rendered template for {len(items)} fields")
    return "\n".join(lines)
