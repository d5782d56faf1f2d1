from __future__ import annotations

from typing import Any

from flows import profile
from models.ai import ParsedResume
from wizard.session import SessionContext


def _controller(fake_client: Any, session: SessionContext) -> Any:
    return profile.build_controller(client=fake_client, session=session)


def test_adding_a_skill_twice_keeps_one_and_removing_absent_is_a_no_op(
    fake_client: Any, signed_in_session: SessionContext
) -> None:
    controller = _controller(fake_client, signed_in_session)

    profile.add_skill(controller, "React")
    profile.add_skill(controller, "React")
    assert controller.store["skills"] == ["React"]

    profile.remove_skill(controller, "Django")
    assert controller.store["skills"] == ["React"]


def test_toggle_skill_from_suggestions(fake_client: Any, signed_in_session: SessionContext) -> None:
    controller = _controller(fake_client, signed_in_session)

    profile.toggle_skill(controller, "Python")
    profile.toggle_skill(controller, "Docker")
    profile.toggle_skill(controller, "Python")

    assert controller.store["skills"] == ["Docker"]


def test_personal_step_requires_names_and_email(fake_client: Any, signed_in_session: SessionContext) -> None:
    controller = _controller(fake_client, signed_in_session)
    controller.set_field("first_name", "Ada")

    assert not controller.advance().accepted
    assert set(controller.state.errors) == {"last_name", "email"}


def test_experience_records_are_edited_through_copies(fake_client: Any, signed_in_session: SessionContext) -> None:
    controller = _controller(fake_client, signed_in_session)
    before = controller.store["experiences"]

    profile.add_experience(controller)
    profile.update_experience(controller, 1, "company", "Paystack")
    profile.update_experience(controller, 7, "company", "Ignored")

    experiences = controller.store["experiences"]
    assert len(before) == 1
    assert len(experiences) == 2
    assert experiences[1]["company"] == "Paystack"

    profile.remove_experience(controller, 0)
    assert [record["company"] for record in controller.store["experiences"]] == ["Paystack"]


def test_submit_patches_profile_without_blank_records(fake_client: Any, signed_in_session: SessionContext) -> None:
    controller = _controller(fake_client, signed_in_session)
    controller.set_field("first_name", "Ada")
    controller.set_field("last_name", "Okafor")
    controller.set_field("email", "ada@example.com")
    profile.update_experience(controller, 0, "company", "Flutterwave")
    profile.update_experience(controller, 0, "current", True)
    profile.update_experience(controller, 0, "end_date", "2023-01")
    profile.add_experience(controller)
    profile.add_skill(controller, "Python")
    controller.jump_to(4)

    result = controller.submit()

    assert result.accepted
    name, body = fake_client.calls[0]
    assert name == "update_profile"
    assert body["skills"] == ["Python"]
    assert len(body["experiences"]) == 1
    assert body["experiences"][0]["company"] == "Flutterwave"
    assert body["experiences"][0].get("end_date") is None
    assert body["portfolio"] == []
    assert result.submission is not None and result.submission.redirect_to == "/dashboard/seeker"


def test_parsed_resume_fills_blanks_only(fake_client: Any, signed_in_session: SessionContext) -> None:
    controller = _controller(fake_client, signed_in_session)
    controller.set_field("email", "typed@example.com")
    profile.add_skill(controller, "Go")

    parsed = ParsedResume.model_validate(
        {
            "name": "Ada Lovelace Okafor",
            "email": "resume@example.com",
            "headline": "Engineer",
            "skills": ["Go", "Python"],
            "experience": [{"company": "Andela", "role": "Developer", "startDate": "2020-01", "endDate": "Present"}],
        }
    )
    profile.apply_parsed_resume(controller, parsed)

    store = controller.store
    assert store["first_name"] == "Ada"
    assert store["last_name"] == "Lovelace Okafor"
    assert store["email"] == "typed@example.com"
    assert store["headline"] == "Engineer"
    assert store["skills"] == ["Go", "Python"]
    assert len(store["experiences"]) == 1
    assert store["experiences"][0]["company"] == "Andela"
    assert store["experiences"][0]["current"] is True
