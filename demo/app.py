"""
form-codegen Demo - Interactive Form Code Generation Playground

This Gradio app lets you:
1. Paste a JSON array of field descriptors (or start from the sample)
2. Generate the Vue + Element Plus component
3. Copy the template, script, style or the whole .vue file
"""

import json

import gradio as gr
from pydantic import ValidationError

from form_codegen import generate_component
from form_codegen.config import get_config

SAMPLE_FIELDS = [
    {"id": 1, "type": "input", "label": "Name", "field": "name", "required": True},
    {"id": 2, "type": "number", "label": "Age", "field": "age", "min": 0, "max": 120},
    {
        "id": 3,
        "type": "select",
        "label": "Role",
        "field": "role",
        "required": True,
        "options": [{"label": "Admin", "value": 1}, {"label": "User", "value": 2}],
    },
    {"id": 4, "type": "date", "label": "Start date", "field": "start_date"},
    {"id": 5, "type": "switch", "label": "Active", "field": "active"},
]


def generate(fields_json: str, include_style: bool):
    """Generate the component artifacts from the descriptor JSON."""
    if not fields_json.strip():
        return "❌ Please enter at least one field descriptor", "", "", "", ""

    try:
        items = json.loads(fields_json)
    except json.JSONDecodeError as e:
        return f"❌ Invalid JSON: {e}", "", "", "", ""

    if not isinstance(items, list):
        return "❌ Expected a JSON array of field descriptors", "", "", "", ""

    try:
        component = generate_component(items, include_style=include_style)
    except ValidationError as e:
        return f"❌ Invalid field descriptor:\n```\n{e}\n```", "", "", "", ""

    status = f"## ✅ Generated component with {len(items)} fields"
    return status, component.template, component.script, component.style, component.to_sfc()


# Create Gradio Interface
with gr.Blocks(title="form-codegen Demo") as demo:
    gr.Markdown("""
# 📝 form-codegen Demo

**How it works:**
1. Describe your fields as JSON (id, type, label, field, required, ...)
2. Click "Generate Code"
3. Copy the generated blocks into your project
    """)

    with gr.Row():
        with gr.Column(scale=1):
            fields_input = gr.Code(
                label="📋 Field Descriptors",
                language="json",
                value=json.dumps(SAMPLE_FIELDS, indent=2),
            )
            style_input = gr.Checkbox(label="Include style block", value=True)
            generate_btn = gr.Button("🚀 Generate Code", variant="primary", size="lg")
            result_md = gr.Markdown(label="Result")

        with gr.Column(scale=1):
            with gr.Tab("Template"):
                template_output = gr.Code(label="<template>", language="html")
            with gr.Tab("Script"):
                script_output = gr.Code(label="<script>", language="typescript")
            with gr.Tab("Style"):
                style_output = gr.Code(label="<style>", language="css")
            with gr.Tab(".vue file"):
                sfc_output = gr.Code(label="Component", language="html")

    generate_btn.click(
        fn=generate,
        inputs=[fields_input, style_input],
        outputs=[result_md, template_output, script_output, style_output, sfc_output],
    )


if __name__ == "__main__":
    demo.launch(server_name="0.0.0.0", server_port=get_config().demo_port)
