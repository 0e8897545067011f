"""
Field descriptor models for form code generation.

A form is described as an ordered list of descriptors, one per field.
Each descriptor is a variant of a tagged union keyed on ``type``; only the
variants that need them carry ``options`` (select, radio, checkbox) or
``min``/``max`` (number). Descriptors whose ``type`` is not one of the known
kinds validate into ``UnknownFormItem`` so that editors emitting newer kinds
still get a best-effort component.
"""

from typing import Annotated, Any, Iterable, Literal, Union

from pydantic import BaseModel, Discriminator, Field, Tag, TypeAdapter

FIELD_KINDS = (
    "input",
    "textarea",
    "number",
    "select",
    "radio",
    "checkbox",
    "date",
    "switch",
)

UNKNOWN_KIND = "unknown"


class FieldOption(BaseModel):
    """A selectable entry for select, radio and checkbox fields."""

    label: str = Field(..., description="Caption shown to the user")
    value: str | int | float = Field(..., description="Value bound when selected")

    model_config = {"frozen": True}


class BaseFormItem(BaseModel):
    """
    Attributes shared by every field descriptor.

    ``field`` is used verbatim as the key of the generated data object,
    so callers must supply a valid identifier that is unique within the list.
    """

    id: int = Field(..., description="Editor bookkeeping id")
    type: str = Field(..., description="Field kind")
    label: str = Field(..., description="Human-readable caption")
    field: str = Field(..., description="Binding key in the generated data object")
    placeholder: str | None = Field(
        default=None,
        description="Hint text; synthesized from the label when absent",
    )
    required: bool = Field(default=False, description="Whether the field is required")
    disabled: bool = Field(default=False, description="Whether the control is disabled")

    model_config = {"frozen": True}


class OptionFormItem(BaseFormItem):
    """Base for descriptors rendering a list of option entries."""

    options: list[FieldOption] = Field(
        default_factory=list,
        description="Ordered option entries",
    )


class InputFormItem(BaseFormItem):
    type: Literal["input"] = "input"


class TextareaFormItem(BaseFormItem):
    type: Literal["textarea"] = "textarea"


class NumberFormItem(BaseFormItem):
    type: Literal["number"] = "number"
    min: int | float | None = Field(default=None, description="Lower bound (default 0)")
    max: int | float | None = Field(default=None, description="Upper bound (default 1000)")


class SelectFormItem(OptionFormItem):
    type: Literal["select"] = "select"


class RadioFormItem(OptionFormItem):
    type: Literal["radio"] = "radio"


class CheckboxFormItem(OptionFormItem):
    type: Literal["checkbox"] = "checkbox"


class DateFormItem(BaseFormItem):
    type: Literal["date"] = "date"


class SwitchFormItem(BaseFormItem):
    type: Literal["switch"] = "switch"


class UnknownFormItem(BaseFormItem):
    """
    Descriptor of a kind this generator does not know.

    Rendered as a labelled wrapper without a control and typed as text
    in the generated script.
    """


def _form_item_tag(value: Any) -> str:
    """Select the union arm for raw mappings and model instances alike."""
    if isinstance(value, dict):
        kind = value.get("type")
    else:
        kind = getattr(value, "type", None)
    if kind in FIELD_KINDS:
        return kind
    return UNKNOWN_KIND


FormItem = Annotated[
    Union[
        Annotated[InputFormItem, Tag("input")],
        Annotated[TextareaFormItem, Tag("textarea")],
        Annotated[NumberFormItem, Tag("number")],
        Annotated[SelectFormItem, Tag("select")],
        Annotated[RadioFormItem, Tag("radio")],
        Annotated[CheckboxFormItem, Tag("checkbox")],
        Annotated[DateFormItem, Tag("date")],
        Annotated[SwitchFormItem, Tag("switch")],
        Annotated[UnknownFormItem, Tag(UNKNOWN_KIND)],
    ],
    Discriminator(_form_item_tag),
]

_form_items_adapter: TypeAdapter[list[FormItem]] = TypeAdapter(list[FormItem])

FORM_ITEM_VARIANTS: dict[str, type[BaseFormItem]] = {
    "input": InputFormItem,
    "textarea": TextareaFormItem,
    "number": NumberFormItem,
    "select": SelectFormItem,
    "radio": RadioFormItem,
    "checkbox": CheckboxFormItem,
    "date": DateFormItem,
    "switch": SwitchFormItem,
    UNKNOWN_KIND: UnknownFormItem,
}


def _as_variant_input(value: Any) -> Any:
    # Models of another class (e.g. a plain BaseFormItem) are re-read from their fields
    if isinstance(value, BaseModel):
        variant = FORM_ITEM_VARIANTS[_form_item_tag(value)]
        if not isinstance(value, variant):
            return value.model_dump()
    return value


def parse_form_items(raw: Iterable[Any]) -> list[BaseFormItem]:
    """
    Validate descriptors into their tagged variants.

    Accepts plain mappings (for example decoded editor JSON) as well as
    already-built models. Instances of a variant (or a subclass of one)
    pass through unchanged; any other model is validated from its fields.

    Raises:
        pydantic.ValidationError: If a descriptor lacks a base attribute
            such as ``label`` or ``field``.
    """
    return _form_items_adapter.validate_python([_as_variant_input(value) for value in raw])
