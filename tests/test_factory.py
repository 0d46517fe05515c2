"""Tests for the field factory."""

import pytest

from form_layout.factory import DEFAULT_LABELS, create_field, new_field_id
from form_layout.schema.properties import (
    ChoiceProperties,
    ComponentType,
    HeadingProperties,
    NumberProperties,
    SignatureProperties,
)


@pytest.mark.parametrize("ctype", list(ComponentType))
def test_every_kind_has_a_label_and_valid_defaults(ctype):
    field = create_field(ctype)
    assert field.component_type is ctype
    assert field.label == DEFAULT_LABELS[ctype]
    assert field.id.startswith("field_")


def test_choice_defaults():
    field = create_field("radio_group")
    assert isinstance(field.properties, ChoiceProperties)
    assert field.properties.options == ("Option 1", "Option 2", "Option 3")


def test_number_and_heading_defaults():
    assert create_field("number_input").properties == NumberProperties(
        placeholder="Enter a number...", minimum=0, step=1
    )
    assert create_field("heading").properties == HeadingProperties(level=2)
    assert isinstance(create_field("signature").properties, SignatureProperties)


def test_overrides():
    field = create_field(ComponentType.EMAIL_INPUT, label="Work email", field_id="email")
    assert field.id == "email"
    assert field.label == "Work email"


def test_ids_are_unique():
    assert len({new_field_id() for _ in range(200)}) == 200


def test_unknown_type():
    with pytest.raises(ValueError):
        create_field("slider")
