"""Streamlit pages for the wizard flows, keyed by flow id."""

from __future__ import annotations

from .base import WizardPage, render_wizard
from .job_posting import PAGE as JOB_POSTING_PAGE
from .profile import PAGE as PROFILE_PAGE
from .signup import PAGE as SIGNUP_PAGE

WIZARD_PAGES: dict[str, WizardPage] = {
    page.flow_id: page for page in (JOB_POSTING_PAGE, PROFILE_PAGE, SIGNUP_PAGE)
}

__all__ = ["WIZARD_PAGES", "WizardPage", "render_wizard"]
