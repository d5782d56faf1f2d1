"""Job posting wizard: five steps from basics to preview."""

from __future__ import annotations

from typing import Any, Final, MutableMapping

from integrations.jobboard_api import JobBoardClient
from models.ai import GeneratedJobDescription, JobInfo
from models.job_posting import CURRENCIES, EXPERIENCE_LEVELS, JOB_TYPES, JobPostingPayload
from wizard.controller import WizardController
from wizard.session import SessionContext
from wizard.step_registry import StepDefinition
from wizard.store import add_unique, remove_value
from wizard.submission import SubmissionHandler
from wizard.types import Fields

FLOW_ID: Final[str] = "job_posting"

STEPS: Final[tuple[StepDefinition, ...]] = (
    StepDefinition(
        id=1,
        key="basics",
        title="Basics",
        required_fields=("title", "location"),
        description="Job title, location and employment type.",
        field_labels={"title": "Job title", "location": "Location", "job_type": "Job type", "remote": "Remote"},
    ),
    StepDefinition(
        id=2,
        key="details",
        title="Details",
        required_fields=("description",),
        description="Describe the role and its day-to-day.",
        field_labels={"description": "Job description", "responsibilities": "Key responsibilities"},
    ),
    StepDefinition(
        id=3,
        key="requirements",
        title="Requirements",
        required_fields=("skills",),
        field_labels={
            "experience_level": "Experience level",
            "requirements": "Requirements",
            "skills": "Required skills",
        },
    ),
    StepDefinition(
        id=4,
        key="compensation",
        title="Compensation",
        field_labels={
            "salary_min": "Minimum salary",
            "salary_max": "Maximum salary",
            "salary_currency": "Currency",
            "benefits": "Benefits",
            "application_deadline": "Application deadline",
        },
    ),
    StepDefinition(id=5, key="preview", title="Preview", description="Review the posting before publishing."),
)


def initial_fields() -> dict[str, Any]:
    return {
        "title": "",
        "location": "",
        "job_type": "full_time",
        "remote": False,
        "description": "",
        "responsibilities": "",
        "requirements": "",
        "skills": [],
        "experience_level": "mid",
        "salary_min": "",
        "salary_max": "",
        "salary_currency": "USD",
        "benefits": "",
        "application_deadline": "",
        "application_email": "",
        "application_url": "",
    }


def format_job_type(job_type: str) -> str:
    """Return ``"full_time"`` as ``"Full Time"``."""

    return " ".join(part.capitalize() for part in (job_type or "").split("_") if part)


def format_salary_range(fields: Fields) -> str:
    """Return a human readable salary range for the preview."""

    currency = fields.get("salary_currency") or "USD"
    minimum = str(fields.get("salary_min") or "").strip()
    maximum = str(fields.get("salary_max") or "").strip()
    if minimum and maximum:
        return f"{currency} {minimum} - {maximum}"
    if minimum:
        return f"From {currency} {minimum}"
    if maximum:
        return f"Up to {currency} {maximum}"
    return "Not specified"


def add_skill(controller: WizardController, skill: str) -> None:
    controller.set_field("skills", add_unique(controller.store.get("skills"), skill))


def remove_skill(controller: WizardController, skill: str) -> None:
    controller.set_field("skills", remove_value(controller.store.get("skills"), skill))


def job_info_from_fields(fields: Fields, *, company: str = "") -> JobInfo:
    """Seed for the AI description draft, built from the basics step."""

    requirements = [line.strip("-• ").strip() for line in str(fields.get("requirements") or "").splitlines()]
    return JobInfo(
        title=str(fields.get("title") or "").strip(),
        company=company,
        location=str(fields.get("location") or "").strip(),
        job_type=str(fields.get("job_type") or ""),
        requirements=[item for item in requirements if item] + list(fields.get("skills") or []),
    )


def apply_generated_description(controller: WizardController, draft: GeneratedJobDescription) -> None:
    """Copy an AI draft into the wizard; answers the employer already gave win."""

    store = controller.store
    if draft.description and not str(store.get("description") or "").strip():
        controller.set_field("description", draft.description.strip())
    if draft.responsibilities and not str(store.get("responsibilities") or "").strip():
        controller.set_field("responsibilities", "\n".join(f"- {item}" for item in draft.responsibilities))
    if draft.requirements and not str(store.get("requirements") or "").strip():
        controller.set_field("requirements", "\n".join(f"- {item}" for item in draft.requirements))
    if draft.benefits and not str(store.get("benefits") or "").strip():
        controller.set_field("benefits", "\n".join(f"- {item}" for item in draft.benefits))
    skills = list(store.get("skills") or [])
    for skill in draft.skills:
        skills = add_unique(skills, skill)
    controller.set_field("skills", skills)


def to_payload(fields: Fields) -> JobPostingPayload:
    return JobPostingPayload.from_fields(dict(fields))


def build_controller(
    *,
    client: JobBoardClient,
    session: SessionContext,
    session_state: MutableMapping[str, Any] | None = None,
) -> WizardController:
    handler = SubmissionHandler(
        serializer=to_payload,
        send=client.create_job,
        session=session,
        requires_auth=True,
        success_message="Job posted successfully!",
        redirect_to="/dashboard/employer",
        name=FLOW_ID,
    )
    return WizardController(
        steps=STEPS,
        initial_fields=initial_fields(),
        submission_handler=handler,
        wizard_id=FLOW_ID,
        session_state=session_state,
    )


__all__ = [
    "CURRENCIES",
    "EXPERIENCE_LEVELS",
    "FLOW_ID",
    "JOB_TYPES",
    "STEPS",
    "add_skill",
    "apply_generated_description",
    "build_controller",
    "format_job_type",
    "format_salary_range",
    "initial_fields",
    "job_info_from_fields",
    "remove_skill",
    "to_payload",
]
