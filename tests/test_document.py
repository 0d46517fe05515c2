"""Tests for JSON canvas documents."""

import json

import pytest

from form_layout.schema.document import (
    canvas_from_data,
    canvas_to_data,
    dumps,
    load_canvas,
    loads,
    save_canvas,
)
from form_layout.schema.model import Canvas, Field, RowGroup
from form_layout.schema.properties import (
    ChoiceProperties,
    ComponentType,
    TextProperties,
)


def _make_canvas():
    return Canvas((
        Field("name", "text_input", "Full name",
              TextProperties(placeholder="Jane Doe", required=True, max_length=80)),
        RowGroup("r1", (
            Field("country", "select", "Country",
                  ChoiceProperties(options=("NZ", "AU"))),
            Field("dob", "date_picker", "Date of birth"),
        )),
    ))


def test_document_shape():
    data = canvas_to_data(_make_canvas())
    assert data[0]["type"] == "field"
    assert data[0]["componentType"] == "text_input"
    assert data[0]["properties"]["max_length"] == 80
    assert data[1]["type"] == "row_group"
    assert data[1]["children"][0]["properties"]["options"] == ["NZ", "AU"]


def test_save_and_load(tmp_path):
    canvas = _make_canvas()
    path = tmp_path / "form.json"
    save_canvas(canvas, path)
    text = path.read_text()
    assert text.endswith("\n")
    assert load_canvas(path) == canvas


def test_missing_properties_get_defaults():
    canvas = loads(json.dumps([
        {"type": "field", "id": "c", "componentType": "checkbox"},
    ]))
    field = canvas.nodes[0]
    assert field.component_type is ComponentType.CHECKBOX
    assert field.label == ""
    assert field.properties == ChoiceProperties()


def test_empty_document():
    assert loads("[]") == Canvas()
    assert dumps(Canvas(), indent=None) == "[]"


@pytest.mark.parametrize(
    "data, match",
    [
        ({"nodes": []}, "JSON array"),
        ([{"type": "column", "id": "x"}], r"\[0\]: unknown node type"),
        ([{"type": "field", "id": "x", "componentType": "slider"}], "unknown componentType"),
        ([{"type": "field", "componentType": "text_input"}], r"\[0\]\.id"),
        (
            [{"type": "field", "id": "x", "componentType": "text_input",
              "properties": {"colour": "red"}}],
            "unknown keys for text_input: colour",
        ),
        (
            [{"type": "field", "id": "x", "componentType": "heading",
              "properties": {"level": 9}}],
            r"\[0\]\.properties",
        ),
        (
            [{"type": "row_group", "id": "r", "children": [
                {"type": "field", "id": "a", "componentType": "text_input"},
                {"type": "row_group", "id": "r2", "children": []},
            ]}],
            r"\[0\]\.children\[1\]: row groups cannot be nested",
        ),
        (
            [{"type": "row_group", "id": "r", "children": [
                {"type": "field", "id": "a", "componentType": "text_input"},
            ]}],
            "Invalid canvas",
        ),
        (
            [{"type": "field", "id": "a", "componentType": "text_input"},
             {"type": "field", "id": "a", "componentType": "email_input"}],
            "Duplicate id 'a'",
        ),
        (
            [{"type": "field", "id": "s", "componentType": "select",
              "properties": {"options": "abc"}}],
            "options must be a list of strings",
        ),
        (
            [{"type": "field", "id": "s", "componentType": "radio_group",
              "properties": {"options": ["Yes", 2]}}],
            "options must be strings",
        ),
        (
            [{"type": "field", "id": "c", "componentType": "checkbox",
              "properties": {"required": "yes"}}],
            "required must be true or false",
        ),
        (
            [{"type": "field", "id": "u", "componentType": "file_upload",
              "properties": {"multiple": 1}}],
            "multiple must be true or false",
        ),
        (
            [{"type": "field", "id": "n", "componentType": "number_input",
              "properties": {"minimum": "0"}}],
            "minimum must be a number",
        ),
        (
            [{"type": "field", "id": "n", "componentType": "number_input",
              "properties": {"step": True}}],
            "step must be a number",
        ),
        (
            [{"type": "field", "id": "t", "componentType": "textarea",
              "properties": {"max_length": 12.5}}],
            "max_length must be an integer",
        ),
        (
            [{"type": "field", "id": "t", "componentType": "text_input",
              "properties": {"placeholder": None}}],
            "placeholder must be a string",
        ),
    ],
)
def test_invalid_documents(data, match):
    with pytest.raises(ValueError, match=match):
        canvas_from_data(data)


def test_not_json():
    with pytest.raises(ValueError, match="Not valid JSON"):
        loads("[{")
