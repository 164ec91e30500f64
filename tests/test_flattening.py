import logging

from remittance_tabulator.flattening import flatten, flatten_object, to_json_text


def test_flat_object_is_unchanged():
    doc = {"a": 1, "b": "two", "c": None, "d": True}
    assert flatten(doc) == [doc]


def test_nested_objects_use_dotted_keys():
    doc = {"a": {"b": {"c": 1}, "d": 2}, "e": 3}
    assert flatten(doc) == [{"a.b.c": 1, "a.d": 2, "e": 3}]


def test_arrays_become_json_text_leaves():
    assert flatten({"a": {"b": [1, 2, 3]}}) == [{"a.b": "[1,2,3]"}]
    assert flatten({"items": [{"x": "é"}]}) == [{"items": '[{"x":"é"}]'}]


def test_empty_nested_object_contributes_no_keys():
    assert flatten({"a": {}, "b": 1}) == [{"b": 1}]


def test_list_of_objects_passes_through():
    doc = [{"a": 1, "n": {"x": 1}}, {"b": 2}]
    rows = flatten(doc)
    assert rows == doc
    assert rows[0] is not doc[0]


def test_non_object_items_in_passthrough_are_wrapped():
    assert flatten([{"a": 1}, 5]) == [{"a": 1}, {"value": 5}]


def test_list_of_scalars_is_keyed_by_position():
    # Only a leading mapping triggers passthrough; lists led by arrays, scalars
    # or null are flattened by position instead.
    assert flatten([1, [2, 3], {"a": 4}]) == [{"0": 1, "1": "[2,3]", "2.a": 4}]
    assert flatten([]) == [{}]


def test_scalars_are_wrapped_in_value():
    assert flatten(7) == [{"value": 7}]
    assert flatten("x") == [{"value": "x"}]
    assert flatten(None) == [{"value": None}]


def test_key_collision_keeps_later_value(caplog):
    with caplog.at_level(logging.WARNING, logger="remittance_tabulator.flattening"):
        row = flatten_object({"a.b": 1, "a": {"b": 2}})
    assert row == {"a.b": 2}
    assert "collides" in caplog.text


def test_to_json_text_is_compact():
    assert to_json_text([1, {"a": None}]) == '[1,{"a":null}]'
