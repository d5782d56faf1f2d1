from __future__ import annotations

import streamlit as st

import config as app_config
from components import widget_factory as wf
from components.chip_multiselect import render_chip_editor
from constants.keys import UIKeys
from core.errors import AIError
from flows import job_posting as flow
from llm import generate_job_description
from wizard.controller import WizardController

from .base import WizardPage, ai_error_key, render_ai_error


def _render_basics(controller: WizardController) -> None:
    wf.text_input(controller, "title", placeholder="e.g. Senior Frontend Developer")
    wf.text_input(controller, "location", placeholder="e.g. Lagos, Nigeria")
    type_col, remote_col = st.columns([2, 1])
    with type_col:
        wf.select(controller, "job_type", flow.JOB_TYPES, format_func=flow.format_job_type)
    with remote_col:
        st.write("")
        wf.checkbox(controller, "remote", "Remote position")


def _generate_draft(controller: WizardController) -> None:
    fields = controller.state.fields
    if not str(fields.get("title") or "").strip():
        st.session_state[ai_error_key(controller)] = "Add a job title first so the assistant knows what to write."
        return
    company = str(st.session_state.get(UIKeys.JOB_AI_COMPANY) or "").strip()
    try:
        draft = generate_job_description(flow.job_info_from_fields(fields, company=company))
    except AIError as exc:
        st.session_state[ai_error_key(controller)] = str(exc)
        return
    flow.apply_generated_description(controller, draft)


def _render_details(controller: WizardController) -> None:
    with st.expander("Draft with AI", expanded=False):
        st.text_input("Company name (optional)", key=UIKeys.JOB_AI_COMPANY)
        st.button(
            "Generate description",
            key=controller.session_keys.namespace("ai_generate"),
            disabled=not app_config.is_llm_enabled(),
            help=None if app_config.is_llm_enabled() else "Set OPENAI_API_KEY to enable the assistant.",
            on_click=_generate_draft,
            args=(controller,),
        )
        render_ai_error(controller)
    wf.text_area(controller, "description", placeholder="Describe the role, the team and the impact.", height=220)
    wf.text_area(controller, "responsibilities", placeholder="One responsibility per line", height=140)


def _render_requirements(controller: WizardController) -> None:
    wf.select(controller, "experience_level", flow.EXPERIENCE_LEVELS, format_func=flow.format_job_type)
    wf.text_area(controller, "requirements", placeholder="One requirement per line", height=140)
    render_chip_editor(controller, "skills", on_add=flow.add_skill, on_remove=flow.remove_skill)


def _render_compensation(controller: WizardController) -> None:
    min_col, max_col, currency_col = st.columns([2, 2, 1])
    with min_col:
        wf.text_input(controller, "salary_min", placeholder="e.g. 500,000")
    with max_col:
        wf.text_input(controller, "salary_max", placeholder="e.g. 800,000")
    with currency_col:
        wf.select(controller, "salary_currency", flow.CURRENCIES)
    wf.text_area(controller, "benefits", placeholder="Health insurance, learning budget, ...", height=120)
    wf.text_input(controller, "application_deadline", placeholder="YYYY-MM-DD")
    wf.text_input(controller, "application_email", "Application email", placeholder="jobs@company.com")
    wf.text_input(controller, "application_url", "Application URL", placeholder="https://")


def _render_preview(controller: WizardController) -> None:
    fields = controller.state.fields
    with st.container(border=True):
        st.markdown(f"### {fields.get('title') or 'Untitled position'}")
        meta = [str(fields.get("location") or "Location not set"), flow.format_job_type(fields.get("job_type", ""))]
        if fields.get("remote"):
            meta.append("Remote")
        st.caption(" · ".join(meta))
        st.markdown(f"**Salary:** {flow.format_salary_range(fields)}")
        st.markdown(f"**Experience:** {flow.format_job_type(fields.get('experience_level', ''))}")
        if fields.get("skills"):
            st.markdown("**Skills:** " + ", ".join(fields["skills"]))
        st.markdown("**Description**")
        st.write(fields.get("description") or "-")
        for key, heading in (("responsibilities", "Responsibilities"), ("requirements", "Requirements"), ("benefits", "Benefits")):
            if str(fields.get(key) or "").strip():
                st.markdown(f"**{heading}**")
                st.write(fields[key])


PAGE = WizardPage(
    flow_id=flow.FLOW_ID,
    title="Post a job",
    subtitle="Reach thousands of qualified candidates in five short steps.",
    submit_label="Publish job",
    success_hint="Your listing now appears on the employer dashboard.",
    renderers={
        "basics": _render_basics,
        "details": _render_details,
        "requirements": _render_requirements,
        "compensation": _render_compensation,
        "preview": _render_preview,
    },
)
