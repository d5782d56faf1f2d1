from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from core.errors import ServerError
from flows import job_posting
from integrations.jobboard_api import JobBoardClient
from models.ai import GeneratedJobDescription
from wizard.session import SessionContext
from wizard.submission import LOGIN_REQUIRED_MESSAGE


def _fill_required(controller: Any) -> None:
    controller.set_field("title", "Senior Frontend Developer")
    controller.set_field("location", "Lagos, Nigeria")
    controller.set_field("description", "Build the product.")
    job_posting.add_skill(controller, "React")


def test_blank_title_blocks_next_then_basics_lead_to_details(
    fake_client: Any, signed_in_session: SessionContext
) -> None:
    controller = job_posting.build_controller(client=fake_client, session=signed_in_session)

    assert not controller.can_advance()
    assert not controller.advance().accepted
    assert controller.current_step == 1

    controller.set_field("title", "Backend Engineer")
    controller.set_field("location", "Lagos")

    assert controller.advance().accepted
    assert controller.current_step == 2


def test_basics_step_blocks_until_title_and_location(fake_client: Any, signed_in_session: SessionContext) -> None:
    controller = job_posting.build_controller(client=fake_client, session=signed_in_session)

    controller.set_field("title", "Engineer")
    assert not controller.advance().accepted
    assert set(controller.state.errors) == {"location"}

    controller.set_field("location", "Accra")
    assert controller.advance().accepted
    assert controller.current_step == 2


def test_requirements_step_needs_at_least_one_skill(fake_client: Any, signed_in_session: SessionContext) -> None:
    controller = job_posting.build_controller(client=fake_client, session=signed_in_session)
    controller.jump_to(3)

    assert not controller.advance().accepted

    job_posting.add_skill(controller, "TypeScript")
    assert controller.advance().accepted


def test_skills_are_added_once_and_removal_of_absent_skill_is_harmless(
    fake_client: Any, signed_in_session: SessionContext
) -> None:
    controller = job_posting.build_controller(client=fake_client, session=signed_in_session)

    job_posting.add_skill(controller, "React")
    job_posting.add_skill(controller, "React")
    job_posting.remove_skill(controller, "Vue")

    assert controller.store["skills"] == ["React"]


def test_unauthenticated_submit_prompts_login_and_keeps_answers(fake_client: Any) -> None:
    controller = job_posting.build_controller(client=fake_client, session=SessionContext({}))
    _fill_required(controller)
    controller.jump_to(5)

    result = controller.submit()

    assert not result.accepted
    assert fake_client.calls == []
    assert controller.state.requires_login
    assert controller.state.notice == LOGIN_REQUIRED_MESSAGE
    assert controller.store["title"] == "Senior Frontend Developer"


def test_submit_posts_coerced_payload(fake_client: Any, signed_in_session: SessionContext) -> None:
    controller = job_posting.build_controller(client=fake_client, session=signed_in_session)
    _fill_required(controller)
    controller.set_field("remote", True)
    controller.set_field("salary_min", "500,000")
    controller.set_field("salary_max", "800000")
    controller.set_field("salary_currency", "NGN")
    controller.jump_to(5)

    result = controller.submit()

    assert result.accepted
    assert result.submission is not None
    assert result.submission.redirect_to == "/dashboard/employer"
    name, body = fake_client.calls[0]
    assert name == "create_job"
    assert body["is_remote"] is True
    assert body["salary_min"] == 500000
    assert body["salary_max"] == 800000
    assert body["salary_currency"] == "NGN"
    assert body["skills"] == ["React"]
    assert "application_email" not in body
    assert "remote" not in body


def test_salary_range_inversion_is_reported(fake_client: Any, signed_in_session: SessionContext) -> None:
    controller = job_posting.build_controller(client=fake_client, session=signed_in_session)
    _fill_required(controller)
    controller.set_field("salary_min", "900")
    controller.set_field("salary_max", "100")
    controller.jump_to(5)

    result = controller.submit()

    assert not result.accepted
    assert fake_client.calls == []
    assert controller.state.notice


def test_server_error_is_surfaced_without_retry(fake_client: Any, signed_in_session: SessionContext) -> None:
    fake_client.error = ServerError("The job board is having trouble right now.", status=503)
    controller = job_posting.build_controller(client=fake_client, session=signed_in_session)
    _fill_required(controller)
    controller.jump_to(5)

    result = controller.submit()

    assert not result.accepted
    assert len(fake_client.calls) == 1
    assert controller.state.notice == "The job board is having trouble right now."


def test_misconfigured_api_url_is_surfaced_as_notice(signed_in_session: SessionContext) -> None:
    client = JobBoardClient(base_url="localhost:8000/api", token_provider=lambda: signed_in_session.access_token)
    controller = job_posting.build_controller(client=client, session=signed_in_session)
    _fill_required(controller)
    controller.jump_to(5)

    result = controller.submit()

    assert not result.accepted
    assert not controller.state.submitted
    assert controller.state.notice
    assert controller.current_step == 5


def test_payload_rejects_non_numeric_salary() -> None:
    fields = job_posting.initial_fields()
    fields.update(title="Dev", location="Remote", description="x", salary_min="lots")

    with pytest.raises(ValidationError):
        job_posting.to_payload(fields)


def test_format_helpers() -> None:
    assert job_posting.format_job_type("full_time") == "Full Time"
    assert job_posting.format_salary_range({"salary_currency": "USD", "salary_min": "10", "salary_max": ""}) == "From USD 10"
    assert job_posting.format_salary_range({}) == "Not specified"


def test_generated_description_does_not_overwrite_typed_answers(
    fake_client: Any, signed_in_session: SessionContext
) -> None:
    controller = job_posting.build_controller(client=fake_client, session=signed_in_session)
    controller.set_field("description", "Typed by the employer")
    job_posting.add_skill(controller, "React")

    draft = GeneratedJobDescription(
        description="Drafted",
        responsibilities=["Ship features"],
        skills=["React", "GraphQL"],
    )
    job_posting.apply_generated_description(controller, draft)

    assert controller.store["description"] == "Typed by the employer"
    assert controller.store["responsibilities"] == "- Ship features"
    assert controller.store["skills"] == ["React", "GraphQL"]


def test_job_info_collects_requirements_and_skills() -> None:
    info = job_posting.job_info_from_fields(
        {"title": " Dev ", "requirements": "- 3 years\n\n- English", "skills": ["Go"]},
        company="Acme",
    )

    assert info.title == "Dev"
    assert info.company == "Acme"
    assert info.requirements == ["3 years", "English", "Go"]
