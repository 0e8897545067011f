"""
MCP Tool definitions for form-codegen.

Wraps the code generator as MCP tools.
"""

import logging
from typing import Any

from pydantic import ValidationError

from form_codegen.code_generator import CodeGenerator
from form_codegen.models.field_definitions import FIELD_KINDS

logger = logging.getLogger("form-codegen-mcp")


def mcp_generate_vue_form(
    fields: list[dict[str, Any]],
    include_style: bool = True,
) -> dict[str, Any]:
    """
    MCP-compatible wrapper for component generation.

    Args:
        fields: Field descriptors in display order.
        include_style: Whether to include the scoped style block.

    Returns:
        Dictionary with the generated artifacts:
        {
            "template": "<template>...",
            "script": "<script setup lang=\\"ts\\">...",
            "style": "<style scoped>...",
            "sfc": "...",
        }

    Raises:
        pydantic.ValidationError: If a descriptor lacks a base attribute
    """
    component = CodeGenerator().generate_component(fields, include_style=include_style)
    logger.info(f"Generated form component with {len(fields)} fields")
    return component.to_dict()


def mcp_generate_form_style() -> dict[str, Any]:
    """MCP-compatible wrapper for the constant style block."""
    return {"style": CodeGenerator().generate_style()}


def call_mcp_tool(name: str, arguments: dict[str, Any]) -> dict[str, Any]:
    """
    Dispatch a tool call by name.

    Errors are returned as ``{"error": ...}`` documents so the client sees them.
    """
    if name == "generate_vue_form":
        fields = arguments.get("fields")
        if not isinstance(fields, list):
            return {"error": "'fields' must be an array of field descriptors"}
        try:
            return mcp_generate_vue_form(
                fields=fields,
                include_style=arguments.get("include_style", True),
            )
        except ValidationError as e:
            logger.error(f"Error in generate_vue_form: {e}")
            return {"error": str(e)}
    elif name == "generate_form_style":
        return mcp_generate_form_style()
    else:
        return {"error": f"Unknown tool: {name}"}


def get_mcp_tools() -> list[dict]:
    """
    Get MCP tool definitions for registration with MCP server.

    Returns list of tool schemas compatible with MCP protocol.
    """
    return [
        {
            "name": "generate_vue_form",
            "description": """
Generate Vue 3 + Element Plus form component code from field descriptors.

WHEN TO USE:
- When the user has described the fields of a form and wants source code
- When a form builder needs the template, script and style of a form

HOW TO USE:
- Provide ALL fields in a SINGLE call, in display order
- Each "field" key must be a valid identifier and unique in the form
- select, radio and checkbox fields need "options"

RETURNS:
A JSON object with template, script, style and sfc (the complete .vue file).
""".strip(),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "fields": {
                        "type": "array",
                        "description": "Field descriptors in display order",
                        "items": {
                            "type": "object",
                            "properties": {
                                "id": {"type": "integer"},
                                "type": {"type": "string", "enum": list(FIELD_KINDS)},
                                "label": {"type": "string"},
                                "field": {"type": "string"},
                                "placeholder": {"type": "string"},
                                "required": {"type": "boolean", "default": False},
                                "disabled": {"type": "boolean", "default": False},
                                "options": {
                                    "type": "array",
                                    "items": {
                                        "type": "object",
                                        "properties": {
                                            "label": {"type": "string"},
                                            "value": {"type": ["string", "number"]},
                                        },
                                        "required": ["label", "value"],
                                    },
                                },
                                "min": {"type": "number"},
                                "max": {"type": "number"},
                            },
                            "required": ["id", "type", "label", "field"],
                        },
                    },
                    "include_style": {
                        "type": "boolean",
                        "description": "Whether to include the scoped style block (default: true)",
                        "default": True,
                    },
                },
                "required": ["fields"],
            },
        },
        {
            "name": "generate_form_style",
            "description": "Return the scoped style block shared by all generated forms.",
            "inputSchema": {
                "type": "object",
                "properties": {},
            },
        },
    ]
