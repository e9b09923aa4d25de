"""Blank-field stripping applied to update payloads."""

from paddock_api.core.remove_blanks import remove_blank_fields


def test_removes_empty_and_whitespace_strings():
    assert remove_blank_fields({"title": "", "text": "foo", "note": "   "}) == {"text": "foo"}


def test_keeps_non_string_falsy_values():
    body = {"count": 0, "flag": False, "items": [], "owner": None}
    assert remove_blank_fields(body) == body


def test_strips_nested_dicts_and_lists():
    body = {"paddock": {"title": "", "steps": [{"title": ""}, {"title": "x"}]}}
    assert remove_blank_fields(body) == {"paddock": {"steps": [{}, {"title": "x"}]}}


def test_does_not_mutate_input():
    body = {"title": ""}
    remove_blank_fields(body)
    assert body == {"title": ""}


def test_non_mapping_passes_through():
    assert remove_blank_fields("text") == "text"
