from __future__ import annotations

import streamlit as st

import config as app_config
from components import widget_factory as wf
from components.chip_multiselect import render_chip_button_grid, render_chip_editor
from constants.keys import UIKeys
from core.errors import AIError, ResumeExtractionError
from flows import profile as flow
from llm import parse_resume
from utils.resume_files import SUPPORTED_RESUME_EXTENSIONS, extract_resume_text
from wizard.controller import WizardController

from .base import WizardPage, ai_error_key, render_ai_error


def _parse_uploaded_resume(controller: WizardController) -> None:
    upload = st.session_state.get(UIKeys.RESUME_UPLOADER)
    if upload is None:
        st.session_state[ai_error_key(controller)] = "Upload a resume first."
        return
    try:
        text = extract_resume_text(upload)
        parsed = parse_resume(text)
    except ResumeExtractionError as exc:
        st.session_state[ai_error_key(controller)] = exc.message
        return
    except AIError as exc:
        st.session_state[ai_error_key(controller)] = str(exc)
        return
    flow.apply_parsed_resume(controller, parsed)


def _render_personal(controller: WizardController) -> None:
    with st.expander("Import from resume", expanded=False):
        st.file_uploader(
            "Resume",
            type=[extension.lstrip(".") for extension in SUPPORTED_RESUME_EXTENSIONS],
            key=UIKeys.RESUME_UPLOADER,
        )
        st.button(
            "Parse resume",
            key=controller.session_keys.namespace("ai_parse"),
            disabled=not app_config.is_llm_enabled(),
            help=None if app_config.is_llm_enabled() else "Set OPENAI_API_KEY to enable the assistant.",
            on_click=_parse_uploaded_resume,
            args=(controller,),
        )
        render_ai_error(controller)

    first_col, last_col = st.columns(2)
    with first_col:
        wf.text_input(controller, "first_name")
    with last_col:
        wf.text_input(controller, "last_name")
    wf.text_input(controller, "email", placeholder="you@example.com")
    phone_col, location_col = st.columns(2)
    with phone_col:
        wf.text_input(controller, "phone", placeholder="+234 800 000 0000")
    with location_col:
        wf.text_input(controller, "location", placeholder="City, Country")
    wf.text_input(controller, "headline", placeholder="e.g. Full-stack engineer")
    wf.text_area(controller, "bio", height=120)


def _render_experience(controller: WizardController) -> None:
    records = controller.store.get("experiences") or []
    for index, record in enumerate(records):
        with st.container(border=True):
            company_col, role_col = st.columns(2)
            with company_col:
                wf.record_text_input(controller, "experiences", index, "company", "Company", on_update=flow.update_experience)
            with role_col:
                wf.record_text_input(controller, "experiences", index, "role", "Role", on_update=flow.update_experience)
            start_col, end_col = st.columns(2)
            with start_col:
                wf.record_text_input(
                    controller, "experiences", index, "start_date", "Start", placeholder="YYYY-MM", on_update=flow.update_experience
                )
            with end_col:
                if not record.get("current"):
                    wf.record_text_input(
                        controller, "experiences", index, "end_date", "End", placeholder="YYYY-MM", on_update=flow.update_experience
                    )
            wf.record_checkbox(controller, "experiences", index, "current", "I currently work here", on_update=flow.update_experience)
            wf.record_text_input(
                controller, "experiences", index, "description", "Description", multiline=True, on_update=flow.update_experience
            )
            if len(records) > 1:
                st.button(
                    "Remove",
                    key=controller.session_keys.namespace(f"experiences:remove:{index}"),
                    on_click=flow.remove_experience,
                    args=(controller, index),
                )
    st.button(
        "+ Add experience",
        key=controller.session_keys.namespace("experiences:add"),
        on_click=flow.add_experience,
        args=(controller,),
    )


def _render_skills(controller: WizardController) -> None:
    render_chip_editor(controller, "skills", on_add=flow.add_skill, on_remove=flow.remove_skill)
    st.caption("Suggestions")
    render_chip_button_grid(
        flow.SKILL_SUGGESTIONS,
        key_prefix=controller.session_keys.namespace("skills:suggestions"),
        on_click=lambda skill: flow.toggle_skill(controller, skill),
        selected=controller.store.get("skills") or [],
        columns=6,
    )


def _render_portfolio(controller: WizardController) -> None:
    records = controller.store.get("portfolio") or []
    for index in range(len(records)):
        with st.container(border=True):
            wf.record_text_input(controller, "portfolio", index, "title", "Project title", on_update=flow.update_portfolio_item)
            wf.record_text_input(
                controller, "portfolio", index, "url", "Link", placeholder="https://", on_update=flow.update_portfolio_item
            )
            wf.record_text_input(
                controller, "portfolio", index, "description", "Description", multiline=True, on_update=flow.update_portfolio_item
            )
            if len(records) > 1:
                st.button(
                    "Remove",
                    key=controller.session_keys.namespace(f"portfolio:remove:{index}"),
                    on_click=flow.remove_portfolio_item,
                    args=(controller, index),
                )
    st.button(
        "+ Add project",
        key=controller.session_keys.namespace("portfolio:add"),
        on_click=flow.add_portfolio_item,
        args=(controller,),
    )


PAGE = WizardPage(
    flow_id=flow.FLOW_ID,
    title="Complete your profile",
    subtitle="A complete profile gets up to five times more views from employers.",
    submit_label="Save profile",
    success_hint="Your profile is live on the seeker dashboard.",
    renderers={
        "personal": _render_personal,
        "experience": _render_experience,
        "skills": _render_skills,
        "portfolio": _render_portfolio,
    },
)
