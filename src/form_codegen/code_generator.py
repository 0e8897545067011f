"""
Form Code Generator.

This is the main entry point for form-codegen.
It provides a simple interface: give it field descriptors, get back the
template, script and style of a Vue + Element Plus form component.
"""

from typing import Any, Iterable

from form_codegen.generator import build_script, build_style, build_template
from form_codegen.models.component_output import GeneratedComponent
from form_codegen.models.field_definitions import parse_form_items


class CodeGenerator:
    """
    Stateless generator for form component source code.

    Usage:
        generator = CodeGenerator()

        fields = [
            {"id": 1, "type": "input", "label": "Name", "field": "name", "required": True},
            {"id": 2, "type": "number", "label": "Age", "field": "age", "max": 120},
        ]

        template = generator.generate_template(fields)
        script = generator.generate_script(fields)
        style = generator.generate_style()

    Descriptors may be models or plain mappings. Each call validates its
    own snapshot of the list and keeps nothing between calls, so one
    instance can be shared freely.
    """

    def generate_template(self, items: Iterable[Any]) -> str:
        """
        Generate the ``<template>`` block.

        Args:
            items: Field descriptors in display order.

        Returns:
            Markup lines joined with ``\\n``.

        Raises:
            pydantic.ValidationError: If a mapping lacks a base attribute.
        """
        return build_template(parse_form_items(items))

    def generate_script(self, items: Iterable[Any]) -> str:
        """
        Generate the ``<script setup lang="ts">`` block.

        Args:
            items: Field descriptors in display order.

        Returns:
            Script lines joined with ``\\n``.
        """
        return build_script(parse_form_items(items))

    def generate_style(self) -> str:
        """Generate the constant ``<style scoped>`` block."""
        return build_style()

    def generate_component(
        self,
        items: Iterable[Any],
        include_style: bool = True,
    ) -> GeneratedComponent:
        """
        Generate all artifacts from one validated snapshot of the descriptors.

        Args:
            items: Field descriptors in display order.
            include_style: Whether to fill the style artifact.

        Returns:
            GeneratedComponent with template, script and style
        """
        form_items = parse_form_items(items)
        return GeneratedComponent(
            template=build_template(form_items),
            script=build_script(form_items),
            style=build_style() if include_style else "",
        )


def generate_component(
    items: Iterable[Any],
    include_style: bool = True,
) -> GeneratedComponent:
    """
    Convenience function to generate a form component.

    Example:
        >>> from form_codegen import generate_component
        >>> component = generate_component([
        ...     {"id": 1, "type": "switch", "label": "Active", "field": "active"},
        ... ])
        >>> print(component.to_sfc())
    """
    return CodeGenerator().generate_component(items, include_style=include_style)
