"""Style generation."""

from form_codegen.generator.constants import STYLE_BLOCK


def build_style() -> str:
    """Return the scoped style block; it does not vary with the fields."""
    return "\n".join(STYLE_BLOCK)
