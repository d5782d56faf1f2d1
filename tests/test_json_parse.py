from __future__ import annotations

import pytest

from utils.json_parse import parse_json_object


def test_plain_object() -> None:
    assert parse_json_object('{"a": 1}') == {"a": 1}


def test_code_fences_and_trailing_commas_are_repaired() -> None:
    raw = '```json\n{"skills": ["Go", "Python",],}\n```'

    assert parse_json_object(raw) == {"skills": ["Go", "Python"]}


def test_prose_around_the_object_is_ignored() -> None:
    raw = 'Sure! Here it is: {"name": "Ada", "nested": {"k": "}"}} Hope that helps.'

    assert parse_json_object(raw) == {"name": "Ada", "nested": {"k": "}"}}


@pytest.mark.parametrize("raw", ["", "no json", "[1, 2]"])
def test_unrecoverable_input_raises(raw: str) -> None:
    with pytest.raises(ValueError):
        parse_json_object(raw)
