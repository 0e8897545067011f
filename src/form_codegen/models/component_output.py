"""
Generated component output model.

Holds the three artifacts produced for one descriptor list and knows how
to assemble them into a single-file component.
"""

from pydantic import BaseModel, Field


class GeneratedComponent(BaseModel):
    """The markup, script and style artifacts of one generated form."""

    template: str = Field(..., description="<template> block")
    script: str = Field(..., description="<script setup> block")
    style: str = Field(default="", description="<style scoped> block, empty when omitted")

    model_config = {"frozen": True}

    def to_sfc(self) -> str:
        """Join the artifacts into the body of a .vue file."""
        blocks = [self.template, self.script]
        if self.style:
            blocks.append(self.style)
        return "\n\n".join(blocks) + "\n"

    def to_dict(self) -> dict[str, str]:
        """Export artifacts plus the assembled component."""
        return {
            "template": self.template,
            "script": self.script,
            "style": self.style,
            "sfc": self.to_sfc(),
        }
