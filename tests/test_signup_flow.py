from __future__ import annotations

from typing import Any

import pytest

from core.errors import ApiError
from flows import signup
from wizard.session import SessionContext, SessionEvent


def _account_step(fake_client: Any, session: SessionContext, role: str = "seeker") -> Any:
    controller = signup.build_controller(client=fake_client, session=session)
    signup.choose_role(controller, role)
    controller.set_field("full_name", "Ada Okafor")
    controller.set_field("email", "ada@example.com")
    controller.set_field("password", "Secret123!")
    controller.set_field("confirm_password", "Secret123!")
    controller.set_field("agreed_to_terms", True)
    return controller


def test_choosing_a_role_advances_to_the_account_step(fake_client: Any) -> None:
    controller = signup.build_controller(client=fake_client, session=SessionContext({}))

    assert not controller.advance().accepted

    result = signup.choose_role(controller, "employer")

    assert result.accepted
    assert controller.current_step == 2
    assert controller.store["role"] == "employer"


def test_unknown_role_is_rejected(fake_client: Any) -> None:
    controller = signup.build_controller(client=fake_client, session=SessionContext({}))

    with pytest.raises(ValueError):
        signup.choose_role(controller, "admin")


def test_password_mismatch_blocks_submit_and_keeps_step(fake_client: Any) -> None:
    controller = _account_step(fake_client, SessionContext({}))
    controller.set_field("confirm_password", "Different1!")

    result = controller.submit()

    assert not result.accepted
    assert controller.current_step == 2
    assert controller.state.errors == {"confirm_password": "Passwords do not match"}
    assert fake_client.calls == []


def test_terms_must_be_accepted(fake_client: Any) -> None:
    controller = _account_step(fake_client, SessionContext({}))
    controller.set_field("agreed_to_terms", False)

    controller.submit()

    assert controller.state.errors == {"agreed_to_terms": "Please agree to the terms and conditions"}
    assert fake_client.calls == []


def test_employers_must_name_their_company(fake_client: Any) -> None:
    controller = _account_step(fake_client, SessionContext({}), role="employer")

    assert not controller.submit().accepted
    assert "company_name" in controller.state.errors

    controller.set_field("company_name", "Acme Ltd")
    assert controller.submit().accepted
    _, body = fake_client.calls[0]
    assert body["role"] == "EMPLOYER"
    assert body["company_name"] == "Acme Ltd"


def test_seeker_payload_omits_company_and_password_confirmation(fake_client: Any) -> None:
    controller = _account_step(fake_client, SessionContext({}))
    controller.set_field("company_name", "Leftover")

    assert controller.submit().accepted

    name, body = fake_client.calls[0]
    assert name == "register"
    assert body == {
        "email": "ada@example.com",
        "password": "Secret123!",
        "full_name": "Ada Okafor",
        "role": "SEEKER",
    }


def test_signup_needs_no_session_and_signs_in_from_response(fake_client: Any) -> None:
    events: list[SessionEvent] = []
    session = SessionContext({})
    session.subscribe(lambda event, _context: events.append(event))
    fake_client.response = {"user": {"email": "ada@example.com"}, "tokens": {"access": "jwt-token"}}
    controller = _account_step(fake_client, session)

    result = controller.submit()

    assert result.accepted
    assert result.submission is not None and result.submission.redirect_to == "/dashboard"
    assert session.access_token == "jwt-token"
    assert session.user == {"email": "ada@example.com"}
    assert events == [SessionEvent.SIGNED_IN]


def test_register_failure_is_shown_inline(fake_client: Any) -> None:
    fake_client.error = ApiError("A user with that email already exists.", status=400)
    controller = _account_step(fake_client, SessionContext({}))

    result = controller.submit()

    assert not result.accepted
    assert controller.state.notice == "A user with that email already exists."
    assert not controller.state.submitted


@pytest.mark.parametrize(
    ("password", "score", "label"),
    [
        ("", 0, "Too weak"),
        ("abc", 0, "Too weak"),
        ("abcdefgh", 1, "Weak"),
        ("Abcdefgh", 2, "Fair"),
        ("Abcdefg1", 3, "Good"),
        ("Abcdef1!", 4, "Strong"),
    ],
)
def test_password_strength(password: str, score: int, label: str) -> None:
    assert signup.password_strength(password) == score
    assert signup.strength_label(score) == label
