"""Tests for the canvas data model."""

import pytest

from form_layout.schema.model import (
    Canvas,
    Field,
    InRow,
    RowGroup,
    TopLevel,
    validate_canvas,
)
from form_layout.schema.properties import (
    ChoiceProperties,
    ComponentType,
    HeadingProperties,
    NumberProperties,
    TextProperties,
)


def _f(node_id, ctype="text_input"):
    return Field(node_id, ctype, node_id.upper())


def _make_canvas():
    """[A, row r(B, C), D]"""
    return Canvas((_f("a"), RowGroup("r", (_f("b"), _f("c"))), _f("d")))


def test_field_defaults_properties_for_kind():
    field = Field("x", "number_input")
    assert field.component_type is ComponentType.NUMBER_INPUT
    assert isinstance(field.properties, NumberProperties)


def test_field_rejects_mismatched_properties():
    with pytest.raises(ValueError, match="ChoiceProperties"):
        Field("x", "select", properties=TextProperties())


def test_field_rejects_unknown_type():
    with pytest.raises(ValueError):
        Field("x", "horizontal_layout")


def test_field_rejects_empty_id():
    with pytest.raises(ValueError):
        Field("", "text_input")


def test_row_group_rejects_nested_rows():
    inner = RowGroup("inner", (_f("a"), _f("b")))
    with pytest.raises(ValueError, match="only hold fields"):
        RowGroup("outer", (_f("c"), inner))


def test_choice_options_stored_as_tuple():
    props = ChoiceProperties(options=["Yes", "No"])
    assert props.options == ("Yes", "No")
    # Frozen values stay hashable
    hash(props)


def test_choice_options_must_be_unique():
    with pytest.raises(ValueError, match="Duplicate"):
        ChoiceProperties(options=("Yes", "Yes"))


def test_choice_options_not_split_from_string():
    """A bare string is refused instead of becoming one option per letter."""
    with pytest.raises(ValueError, match="list of strings"):
        ChoiceProperties(options="abc")


@pytest.mark.parametrize(
    "make",
    [
        lambda: TextProperties(required="yes"),
        lambda: TextProperties(min_length="3"),
        lambda: NumberProperties(maximum=[10]),
        lambda: NumberProperties(required=1),
        lambda: ChoiceProperties(options=("a", None)),
        lambda: HeadingProperties(level=2.0),
    ],
)
def test_property_value_types_checked(make):
    with pytest.raises(ValueError):
        make()


def test_heading_level_bounds():
    with pytest.raises(ValueError):
        HeadingProperties(level=7)


def test_number_range_checked():
    with pytest.raises(ValueError):
        NumberProperties(minimum=10, maximum=1)
    with pytest.raises(ValueError):
        NumberProperties(step=0)


def test_locate_top_level_and_in_row():
    canvas = _make_canvas()
    assert canvas.locate("a") == TopLevel(0)
    assert canvas.locate("r") == TopLevel(1)
    assert canvas.locate("c") == InRow("r", 1)
    assert canvas.locate("d") == TopLevel(2)
    assert canvas.locate("zzz") is None


def test_top_index_resolves_row_children_to_row_slot():
    canvas = _make_canvas()
    assert canvas.top_index(InRow("r", 1)) == 1
    assert canvas.top_index(TopLevel(2)) == 2


def test_parent_row():
    canvas = _make_canvas()
    assert canvas.parent_row("b").id == "r"
    assert canvas.parent_row("a") is None


def test_fields_in_visual_order():
    canvas = _make_canvas()
    assert [f.id for f in canvas.fields()] == ["a", "b", "c", "d"]
    assert canvas.field_count() == 4
    assert canvas.ids() == ["a", "r", "b", "c", "d"]


def test_without_does_not_touch_original():
    canvas = _make_canvas()
    smaller = canvas.without(InRow("r", 0))
    assert [f.id for f in smaller.fields()] == ["a", "c", "d"]
    assert canvas.field_count() == 4


def test_with_nodes_builds_new_canvas():
    canvas = _make_canvas()
    reversed_canvas = canvas.with_nodes(reversed(canvas.nodes))
    assert [n.id for n in reversed_canvas.nodes] == ["d", "r", "a"]
    assert isinstance(reversed_canvas.nodes, tuple)
    assert [n.id for n in canvas.nodes] == ["a", "r", "d"]


def test_with_nodes_checks_node_types():
    with pytest.raises(ValueError, match="fields or row groups"):
        _make_canvas().with_nodes(["not a node"])


def test_inserted_into_row():
    canvas = _make_canvas()
    bigger = canvas.inserted(InRow("r", 1), _f("x"))
    assert [c.id for c in bigger.nodes[1].children] == ["b", "x", "c"]


def test_inserted_row_into_row_refused():
    canvas = _make_canvas()
    row = RowGroup("r2", (_f("x"), _f("y")))
    with pytest.raises(ValueError):
        canvas.inserted(InRow("r", 0), row)


def test_replaced_top_level():
    canvas = _make_canvas()
    result = canvas.replaced(TopLevel(0), _f("z"))
    assert [n.id for n in result.nodes] == ["z", "r", "d"]


def test_validate_canvas_clean():
    assert validate_canvas(_make_canvas()) == []


def test_validate_canvas_reports_small_and_large_rows():
    canvas = Canvas((
        RowGroup("small", (_f("a"),)),
        RowGroup("big", tuple(_f(c) for c in "bcdef")),
    ))
    errors = validate_canvas(canvas)
    assert len(errors) == 2
    assert "small" in errors[0]
    assert "maximum 4" in errors[1]


def test_validate_canvas_reports_duplicate_ids():
    canvas = Canvas((_f("a"), RowGroup("r", (_f("a"), _f("b")))))
    errors = validate_canvas(canvas)
    assert any("Duplicate id 'a'" in e for e in errors)
