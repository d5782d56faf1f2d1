"""Concrete wizard flows built on the ``wizard`` core."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, MutableMapping

from flows import job_posting, profile, signup
from integrations.jobboard_api import JobBoardClient
from wizard.controller import WizardController
from wizard.session import SessionContext

ControllerFactory = Callable[..., WizardController]


@dataclass(frozen=True)
class FlowSpec:
    """Registry entry for a wizard flow."""

    id: str
    label: str
    build: ControllerFactory
    requires_auth: bool = True


FLOWS: dict[str, FlowSpec] = {
    job_posting.FLOW_ID: FlowSpec(job_posting.FLOW_ID, "Post a job", job_posting.build_controller),
    profile.FLOW_ID: FlowSpec(profile.FLOW_ID, "Complete your profile", profile.build_controller),
    signup.FLOW_ID: FlowSpec(signup.FLOW_ID, "Sign up", signup.build_controller, requires_auth=False),
}

DEFAULT_FLOW = job_posting.FLOW_ID


def build_flow(
    flow_id: str,
    *,
    client: JobBoardClient,
    session: SessionContext,
    session_state: MutableMapping[str, Any] | None = None,
) -> WizardController:
    """Return the controller for ``flow_id``.

    Raises:
        KeyError: If ``flow_id`` is not registered.
    """

    return FLOWS[flow_id].build(client=client, session=session, session_state=session_state)


__all__ = ["DEFAULT_FLOW", "FLOWS", "FlowSpec", "build_flow"]
