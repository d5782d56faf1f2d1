from __future__ import annotations

from wizard.store import (
    FormStateStore,
    add_unique,
    append_record,
    remove_record,
    remove_value,
    toggle_value,
    update_record,
)


def test_set_field_replaces_value_and_accepts_incomplete_answers() -> None:
    store = FormStateStore({"title": "Old"})

    store.set_field("title", "")
    store.set_field("salary_min", "not a number")

    assert store["title"] == ""
    assert store.get("salary_min") == "not a number"
    assert "missing" not in store


def test_snapshot_is_independent_of_the_store() -> None:
    store = FormStateStore({"skills": ["Python"]})

    snapshot = store.snapshot()
    snapshot["skills"].append("Go")

    assert store["skills"] == ["Python"]


def test_reset_restores_a_copy_of_initial_values() -> None:
    initial = {"skills": []}
    store = FormStateStore({"skills": ["Python"], "extra": 1})

    store.reset(initial)
    store["skills"].append("Go")

    assert "extra" not in store
    assert initial == {"skills": []}


def test_add_unique_is_idempotent_and_ignores_blanks() -> None:
    skills = add_unique([], "  React ")
    skills = add_unique(skills, "React")
    skills = add_unique(skills, "   ")

    assert skills == ["React"]


def test_add_unique_returns_a_new_list() -> None:
    original = ["Python"]

    updated = add_unique(original, "Go")

    assert original == ["Python"]
    assert updated == ["Python", "Go"]


def test_remove_value_of_absent_item_is_a_no_op() -> None:
    assert remove_value(["Python", "Go"], "Rust") == ["Python", "Go"]
    assert remove_value(None, "Rust") == []


def test_toggle_value_adds_then_removes() -> None:
    selected = toggle_value([], "Docker")
    assert selected == ["Docker"]
    assert toggle_value(selected, "Docker") == []


def test_record_helpers_copy_instead_of_mutating() -> None:
    template = {"company": "", "role": ""}
    records = append_record([], template)
    records = append_record(records, template)

    updated = update_record(records, 1, "company", "Acme")

    assert records[1]["company"] == ""
    assert updated[1]["company"] == "Acme"
    assert template == {"company": "", "role": ""}


def test_update_record_out_of_range_leaves_records_unchanged() -> None:
    records = [{"company": "Acme"}]

    assert update_record(records, 3, "company", "Other") == records
    assert update_record(records, -1, "company", "Other") == records


def test_remove_record_drops_only_the_given_index() -> None:
    records = [{"title": "a"}, {"title": "b"}, {"title": "c"}]

    assert remove_record(records, 1) == [{"title": "a"}, {"title": "c"}]
    assert remove_record(records, 9) == records
