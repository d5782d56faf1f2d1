"""Signup wizard: choose a role, then create the account."""

from __future__ import annotations

import re
from typing import Any, Final, Mapping, MutableMapping

from integrations.jobboard_api import JobBoardClient
from models.signup import SignupPayload
from wizard.controller import DispatchResult, WizardController
from wizard.session import SessionContext
from wizard.step_registry import StepDefinition
from wizard.submission import SubmissionHandler
from wizard.types import FieldKey, Fields

FLOW_ID: Final[str] = "signup"

ROLES: Final[dict[str, str]] = {
    "seeker": "I'm looking for a job",
    "employer": "I'm hiring",
}

PASSWORD_MISMATCH_MESSAGE: Final[str] = "Passwords do not match"
TERMS_REQUIRED_MESSAGE: Final[str] = "Please agree to the terms and conditions"
STRENGTH_LABELS: Final[tuple[str, ...]] = ("Weak", "Fair", "Good", "Strong")
TOO_WEAK_LABEL: Final[str] = "Too weak"


def _employer_fields(fields: Fields) -> tuple[FieldKey, ...]:
    return ("company_name",) if fields.get("role") == "employer" else ()


def _passwords_match(fields: Fields) -> tuple[FieldKey, str] | None:
    if fields.get("password") != fields.get("confirm_password"):
        return "confirm_password", PASSWORD_MISMATCH_MESSAGE
    return None


def _terms_accepted(fields: Fields) -> tuple[FieldKey, str] | None:
    if fields.get("agreed_to_terms") is not True:
        return "agreed_to_terms", TERMS_REQUIRED_MESSAGE
    return None


STEPS: Final[tuple[StepDefinition, ...]] = (
    StepDefinition(
        id=1,
        key="role",
        title="Role",
        required_fields=("role",),
        description="Tell us how you will use the job board.",
        field_labels={"role": "Account type"},
    ),
    StepDefinition(
        id=2,
        key="account",
        title="Account",
        required_fields=("full_name", "email", "password", "confirm_password"),
        extra_required=_employer_fields,
        submit_checks=(_passwords_match, _terms_accepted),
        field_labels={
            "full_name": "Full name",
            "company_name": "Company name",
            "email": "Email",
            "password": "Password",
            "confirm_password": "Confirm password",
            "agreed_to_terms": "Terms and conditions",
        },
    ),
)


def initial_fields() -> dict[str, Any]:
    return {
        "role": "",
        "full_name": "",
        "company_name": "",
        "email": "",
        "password": "",
        "confirm_password": "",
        "agreed_to_terms": False,
    }


def choose_role(controller: WizardController, role: str) -> DispatchResult:
    """Record ``role`` and move on to the account step."""

    if role not in ROLES:
        raise ValueError(f"Unknown role: {role!r}")
    controller.set_field("role", role)
    return controller.advance()


def password_strength(password: str | None) -> int:
    """Score ``password`` from 0 to 4: one point each for length, upper case, digits and symbols."""

    if not password:
        return 0
    score = 0
    if len(password) >= 8:
        score += 1
    if re.search(r"[A-Z]", password):
        score += 1
    if re.search(r"[0-9]", password):
        score += 1
    if re.search(r"[^A-Za-z0-9]", password):
        score += 1
    return score


def strength_label(score: int) -> str:
    if 1 <= score <= len(STRENGTH_LABELS):
        return STRENGTH_LABELS[score - 1]
    return TOO_WEAK_LABEL


def to_payload(fields: Fields) -> SignupPayload:
    return SignupPayload.from_fields(dict(fields))


def _token_from_response(response: Any) -> str | None:
    if not isinstance(response, Mapping):
        return None
    tokens = response.get("tokens")
    for source in (response, tokens if isinstance(tokens, Mapping) else {}):
        for key in ("access", "access_token", "token"):
            value = source.get(key)
            if isinstance(value, str) and value.strip():
                return value
    return None


def sign_in_from_response(session: SessionContext, response: Any) -> bool:
    """Sign in with the token returned by the register endpoint, if any."""

    token = _token_from_response(response)
    if token is None:
        return False
    user = response.get("user") if isinstance(response.get("user"), Mapping) else None
    session.sign_in(token, user)
    return True


def build_controller(
    *,
    client: JobBoardClient,
    session: SessionContext,
    session_state: MutableMapping[str, Any] | None = None,
) -> WizardController:
    handler = SubmissionHandler(
        serializer=to_payload,
        send=client.register,
        session=session,
        requires_auth=False,
        success_message="Account created successfully!",
        redirect_to="/dashboard",
        on_success=lambda response: sign_in_from_response(session, response),
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
    "FLOW_ID",
    "PASSWORD_MISMATCH_MESSAGE",
    "ROLES",
    "STEPS",
    "STRENGTH_LABELS",
    "TERMS_REQUIRED_MESSAGE",
    "build_controller",
    "choose_role",
    "initial_fields",
    "password_strength",
    "sign_in_from_response",
    "strength_label",
    "to_payload",
]
