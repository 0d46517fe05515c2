"""Field factory: fresh fields with per-kind defaults."""

from __future__ import annotations

import uuid

from form_layout.schema.model import Field
from form_layout.schema.properties import (
    ButtonProperties,
    ChoiceProperties,
    ComponentType,
    FieldProperties,
    FileUploadProperties,
    HeadingProperties,
    NumberProperties,
    SectionProperties,
    TextProperties,
    properties_class_for,
)

_DEFAULT_OPTIONS = ("Option 1", "Option 2", "Option 3")

DEFAULT_LABELS: dict[ComponentType, str] = {
    ComponentType.TEXT_INPUT: "Text Input",
    ComponentType.EMAIL_INPUT: "Email Input",
    ComponentType.PASSWORD_INPUT: "Password Input",
    ComponentType.NUMBER_INPUT: "Number Input",
    ComponentType.TEXTAREA: "Text Area",
    ComponentType.RICH_TEXT: "Rich Text Editor",
    ComponentType.SELECT: "Select Dropdown",
    ComponentType.MULTI_SELECT: "Multi-Select",
    ComponentType.CHECKBOX: "Checkbox",
    ComponentType.RADIO_GROUP: "Radio Group",
    ComponentType.DATE_PICKER: "Date Picker",
    ComponentType.FILE_UPLOAD: "File Upload",
    ComponentType.SIGNATURE: "Digital Signature",
    ComponentType.SECTION_DIVIDER: "Section Title",
    ComponentType.HEADING: "Heading",
    ComponentType.BUTTON: "Button",
}

DEFAULT_PROPERTIES: dict[ComponentType, FieldProperties] = {
    ComponentType.TEXT_INPUT: TextProperties(placeholder="Enter text..."),
    ComponentType.EMAIL_INPUT: TextProperties(placeholder="Enter email address..."),
    ComponentType.PASSWORD_INPUT: TextProperties(placeholder="Enter password..."),
    ComponentType.NUMBER_INPUT: NumberProperties(
        placeholder="Enter a number...", minimum=0, step=1
    ),
    ComponentType.TEXTAREA: TextProperties(placeholder="Enter your message..."),
    ComponentType.RICH_TEXT: TextProperties(placeholder="Enter rich text content..."),
    ComponentType.SELECT: ChoiceProperties(options=_DEFAULT_OPTIONS),
    ComponentType.MULTI_SELECT: ChoiceProperties(options=_DEFAULT_OPTIONS),
    ComponentType.CHECKBOX: ChoiceProperties(options=_DEFAULT_OPTIONS),
    ComponentType.RADIO_GROUP: ChoiceProperties(options=_DEFAULT_OPTIONS),
    ComponentType.FILE_UPLOAD: FileUploadProperties(
        accepted_file_types=".pdf,.doc,.docx,.jpg,.png"
    ),
    ComponentType.SECTION_DIVIDER: SectionProperties(
        description="Section description (optional)"
    ),
    ComponentType.HEADING: HeadingProperties(level=2),
    ComponentType.BUTTON: ButtonProperties(button_type="primary", text="Submit"),
}


def new_field_id() -> str:
    return f"field_{uuid.uuid4().hex[:12]}"


def create_field(
    component_type: ComponentType | str,
    *,
    label: str | None = None,
    field_id: str | None = None,
) -> Field:
    """Create a field with a fresh id and the defaults for its kind.

    Raises ValueError for an unknown component type.
    """
    ctype = ComponentType(component_type)
    properties = DEFAULT_PROPERTIES.get(ctype)
    if properties is None:
        properties = properties_class_for(ctype)()
    return Field(
        id=field_id or new_field_id(),
        component_type=ctype,
        label=DEFAULT_LABELS[ctype] if label is None else label,
        properties=properties,
    )
