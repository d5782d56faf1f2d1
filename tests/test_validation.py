from __future__ import annotations

import pytest

from wizard.step_registry import StepDefinition, get_step, validate_step_sequence
from wizard.validation import (
    REQUIRED_MESSAGE,
    evaluate_step,
    evaluate_submission,
    is_value_present,
    missing_required_fields,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, False),
        ("", False),
        ("   ", False),
        ("x", True),
        ([], False),
        (["", " "], False),
        (["Python"], True),
        ({}, False),
        ({"a": ""}, False),
        ({"a": "b"}, True),
        (False, False),
        (True, True),
        (0, False),
        (3, True),
    ],
)
def test_is_value_present(value: object, expected: bool) -> None:
    assert is_value_present(value) is expected


def test_missing_required_fields_reports_blank_values_in_order() -> None:
    step = StepDefinition(id=1, key="basics", title="Basics", required_fields=("title", "location"))

    assert missing_required_fields(step, {"title": " ", "location": ""}) == ["title", "location"]
    assert missing_required_fields(step, {"title": "Dev", "location": "Accra"}) == []


def test_evaluate_step_builds_required_messages() -> None:
    step = StepDefinition(id=1, key="skills", title="Skills", required_fields=("skills",))

    gate = evaluate_step(step, {"skills": []})

    assert not gate.passed
    assert gate.missing == ("skills",)
    assert gate.errors == {"skills": REQUIRED_MESSAGE}


def test_extra_required_depends_on_other_answers() -> None:
    step = StepDefinition(
        id=1,
        key="account",
        title="Account",
        required_fields=("email",),
        extra_required=lambda fields: ("company_name",) if fields.get("role") == "employer" else (),
    )

    assert evaluate_step(step, {"email": "a@b.c", "role": "seeker"}).passed
    assert evaluate_step(step, {"email": "a@b.c", "role": "employer"}).missing == ("company_name",)


def test_submission_checks_every_step_then_cross_field_rules() -> None:
    steps = (
        StepDefinition(id=1, key="one", title="One", required_fields=("a",)),
        StepDefinition(
            id=2,
            key="two",
            title="Two",
            submit_checks=(lambda fields: ("b", "must equal a") if fields.get("a") != fields.get("b") else None,),
        ),
    )

    missing = evaluate_submission(steps, {"a": "", "b": "x"})
    assert missing.missing == ("a",)
    assert "b" not in missing.errors

    mismatch = evaluate_submission(steps, {"a": "x", "b": "y"})
    assert not mismatch.passed
    assert mismatch.errors == {"b": "must equal a"}

    assert evaluate_submission(steps, {"a": "x", "b": "x"}).passed


def test_step_sequence_must_be_consecutive_and_unique() -> None:
    with pytest.raises(ValueError):
        validate_step_sequence([])
    with pytest.raises(ValueError):
        validate_step_sequence([StepDefinition(id=2, key="a", title="A")])
    with pytest.raises(ValueError):
        validate_step_sequence(
            [StepDefinition(id=1, key="a", title="A"), StepDefinition(id=2, key="a", title="B")]
        )


def test_get_step_raises_for_unknown_id() -> None:
    steps = validate_step_sequence([StepDefinition(id=1, key="a", title="A")])

    assert get_step(steps, 1).key == "a"
    with pytest.raises(KeyError):
        get_step(steps, 2)


def test_label_for_falls_back_to_humanised_key() -> None:
    step = StepDefinition(id=1, key="a", title="A", field_labels={"title": "Job title"})

    assert step.label_for("title") == "Job title"
    assert step.label_for("salary_min") == "Salary min"
