"""Candidate profile wizard: personal details, experience, skills, portfolio."""

from __future__ import annotations

from typing import Any, Final, MutableMapping

from integrations.jobboard_api import JobBoardClient
from models.ai import ParsedResume
from models.candidate_profile import CandidateProfilePayload
from wizard.controller import WizardController
from wizard.session import SessionContext
from wizard.step_registry import StepDefinition
from wizard.store import (
    add_unique,
    append_record,
    remove_record,
    remove_value,
    toggle_value,
    update_record,
)
from wizard.submission import SubmissionHandler
from wizard.types import Fields
from wizard.validation import is_value_present

FLOW_ID: Final[str] = "profile"

SKILL_SUGGESTIONS: Final[tuple[str, ...]] = (
    "React",
    "TypeScript",
    "Next.js",
    "Node.js",
    "Python",
    "Django",
    "AWS",
    "Docker",
    "PostgreSQL",
    "MongoDB",
    "GraphQL",
    "Tailwind CSS",
    "Vue.js",
    "Angular",
    "Java",
    "Go",
    "Kubernetes",
    "CI/CD",
)

EXPERIENCE_TEMPLATE: Final[dict[str, Any]] = {
    "company": "",
    "role": "",
    "start_date": "",
    "end_date": "",
    "current": False,
    "description": "",
}
PORTFOLIO_TEMPLATE: Final[dict[str, Any]] = {"title": "", "url": "", "description": ""}

STEPS: Final[tuple[StepDefinition, ...]] = (
    StepDefinition(
        id=1,
        key="personal",
        title="Personal",
        required_fields=("first_name", "last_name", "email"),
        field_labels={
            "first_name": "First name",
            "last_name": "Last name",
            "email": "Email",
            "phone": "Phone",
            "location": "Location",
            "headline": "Professional headline",
            "bio": "Bio",
        },
    ),
    StepDefinition(id=2, key="experience", title="Experience", field_labels={"experiences": "Work experience"}),
    StepDefinition(id=3, key="skills", title="Skills", required_fields=("skills",), field_labels={"skills": "Skills"}),
    StepDefinition(id=4, key="portfolio", title="Portfolio", field_labels={"portfolio": "Portfolio"}),
)


def initial_fields() -> dict[str, Any]:
    return {
        "first_name": "",
        "last_name": "",
        "email": "",
        "phone": "",
        "location": "",
        "headline": "",
        "bio": "",
        "experiences": [dict(EXPERIENCE_TEMPLATE)],
        "skills": [],
        "portfolio": [dict(PORTFOLIO_TEMPLATE)],
    }


def add_skill(controller: WizardController, skill: str) -> None:
    """Add ``skill`` once; repeated adds keep a single entry."""

    controller.set_field("skills", add_unique(controller.store.get("skills"), skill))


def remove_skill(controller: WizardController, skill: str) -> None:
    """Remove ``skill``; removing a skill that is not listed changes nothing."""

    controller.set_field("skills", remove_value(controller.store.get("skills"), skill))


def toggle_skill(controller: WizardController, skill: str) -> None:
    controller.set_field("skills", toggle_value(controller.store.get("skills"), skill))


def add_experience(controller: WizardController) -> None:
    controller.set_field("experiences", append_record(controller.store.get("experiences"), EXPERIENCE_TEMPLATE))


def update_experience(controller: WizardController, index: int, key: str, value: Any) -> None:
    controller.set_field("experiences", update_record(controller.store.get("experiences"), index, key, value))


def remove_experience(controller: WizardController, index: int) -> None:
    controller.set_field("experiences", remove_record(controller.store.get("experiences"), index))


def add_portfolio_item(controller: WizardController) -> None:
    controller.set_field("portfolio", append_record(controller.store.get("portfolio"), PORTFOLIO_TEMPLATE))


def update_portfolio_item(controller: WizardController, index: int, key: str, value: Any) -> None:
    controller.set_field("portfolio", update_record(controller.store.get("portfolio"), index, key, value))


def remove_portfolio_item(controller: WizardController, index: int) -> None:
    controller.set_field("portfolio", remove_record(controller.store.get("portfolio"), index))


def _split_name(full_name: str) -> tuple[str, str]:
    parts = full_name.split()
    if not parts:
        return "", ""
    return parts[0], " ".join(parts[1:])


def apply_parsed_resume(controller: WizardController, parsed: ParsedResume) -> None:
    """Prefill the profile from a parsed resume without overwriting typed answers."""

    store = controller.store
    first_name, last_name = _split_name(parsed.name)
    scalar_updates = {
        "first_name": first_name,
        "last_name": last_name,
        "email": parsed.email,
        "phone": parsed.phone,
        "location": parsed.location,
        "headline": parsed.headline,
        "bio": parsed.summary,
    }
    for key, value in scalar_updates.items():
        if value and not is_value_present(store.get(key)):
            controller.set_field(key, value.strip())

    skills = list(store.get("skills") or [])
    for skill in parsed.skills:
        skills = add_unique(skills, skill)
    controller.set_field("skills", skills)

    if parsed.experience:
        existing = [
            record
            for record in (store.get("experiences") or [])
            if is_value_present({key: value for key, value in record.items() if key != "current"})
        ]
        imported = [
            {
                **EXPERIENCE_TEMPLATE,
                "company": entry.company,
                "role": entry.role,
                "start_date": entry.start_date,
                "end_date": entry.end_date,
                "current": entry.end_date.strip().lower() in {"present", "current", "now"},
                "description": entry.description,
            }
            for entry in parsed.experience
        ]
        controller.set_field("experiences", existing + imported)


def to_payload(fields: Fields) -> CandidateProfilePayload:
    return CandidateProfilePayload.from_fields(dict(fields))


def build_controller(
    *,
    client: JobBoardClient,
    session: SessionContext,
    session_state: MutableMapping[str, Any] | None = None,
) -> WizardController:
    handler = SubmissionHandler(
        serializer=to_payload,
        send=client.update_profile,
        session=session,
        requires_auth=True,
        success_message="Profile saved successfully!",
        redirect_to="/dashboard/seeker",
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
    "EXPERIENCE_TEMPLATE",
    "FLOW_ID",
    "PORTFOLIO_TEMPLATE",
    "SKILL_SUGGESTIONS",
    "STEPS",
    "add_experience",
    "add_portfolio_item",
    "add_skill",
    "apply_parsed_resume",
    "build_controller",
    "initial_fields",
    "remove_experience",
    "remove_portfolio_item",
    "remove_skill",
    "to_payload",
    "toggle_skill",
    "update_experience",
    "update_portfolio_item",
]
