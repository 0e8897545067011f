"""
Code generation tools.

Function tools that let an agent-driven form builder turn the
descriptors it assembled into component source code.
"""

import json
import logging
from typing import Any

from agents import RunContextWrapper, function_tool
from pydantic import ValidationError

from form_codegen.code_generator import CodeGenerator
from form_codegen.config import get_config

logger = logging.getLogger(__name__)


def generate_component_json(fields_json: str, include_style: bool = True) -> str:
    """
    Generate a component from a JSON array of descriptors.

    Malformed input is reported as an error document instead of raised,
    so the calling agent can read what went wrong.
    """
    config = get_config()

    try:
        items = json.loads(fields_json)
        if not isinstance(items, list):
            raise ValueError("Expected a JSON array of field descriptors")
        component = CodeGenerator().generate_component(items, include_style=include_style)
    except (json.JSONDecodeError, ValidationError, ValueError) as e:
        logger.error(f"Component generation failed: {type(e).__name__}: {e}")
        return json.dumps({
            "error": True,
            "message": str(e),
        })

    return json.dumps(component.to_dict(), indent=config.indent_json_output)


@function_tool
async def generate_vue_form_tool(
    ctx: RunContextWrapper[Any],
    fields_json: str,
    include_style: bool = True,
) -> str:
    """
    Generate Vue + Element Plus form code from field descriptors.

    Use this tool once the form's fields are known and the user wants
    source code for the form component.

    Args:
        fields_json: JSON array of field descriptors. Each has id, type
            (input, textarea, number, select, radio, checkbox, date, switch),
            label, field, optional placeholder, required, disabled, options
            (for select/radio/checkbox) and min/max (for number).
            Example: [{"id": 1, "type": "input", "label": "Name", "field": "name", "required": true}]
        include_style: Whether to include the scoped style block.

    Returns:
        JSON string with template, script, style and the assembled
        single-file component (sfc), or an error document.
    """
    return generate_component_json(fields_json, include_style=include_style)
