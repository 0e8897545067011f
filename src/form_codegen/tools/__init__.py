"""
Function tools for form-codegen.

These tools can be handed to agents that build forms.
"""

from form_codegen.tools.codegen_tools import (
    generate_component_json,
    generate_vue_form_tool,
)

__all__ = [
    "generate_component_json",  # Core helper function
    "generate_vue_form_tool",  # Function tool wrapper
]
