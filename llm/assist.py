"""AI helpers that prefill the wizards: resume parsing and job description drafts."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from core.errors import AIResponseError
from llm.client import call_json
from llm.prompts import (
    JOB_DESCRIPTION_SYSTEM_PROMPT,
    RESUME_SYSTEM_PROMPT,
    build_job_description_prompt,
    build_resume_prompt,
)
from models.ai import GeneratedJobDescription, JobInfo, ParsedResume

logger = logging.getLogger("hiring_wizards.llm")

# Resume text beyond this is dropped before prompting
MAX_RESUME_CHARS = 12000


def parse_resume(resume_text: str, *, client: Any | None = None) -> ParsedResume:
    """Extract structured profile data from ``resume_text``.

    Raises:
        ValueError: If ``resume_text`` is blank.
        AIUnavailableError: When the model cannot be reached.
        AIResponseError: When the answer does not match the resume shape.
    """

    text = (resume_text or "").strip()
    if not text:
        raise ValueError("Resume text is empty")
    payload = call_json(RESUME_SYSTEM_PROMPT, build_resume_prompt(text[:MAX_RESUME_CHARS]), client=client)
    try:
        return ParsedResume.model_validate(payload)
    except ValidationError as exc:
        logger.warning("Resume payload did not validate: %s", exc)
        raise AIResponseError("Could not parse resume data") from exc


def generate_job_description(info: JobInfo, *, client: Any | None = None) -> GeneratedJobDescription:
    """Draft a job description from the basics the employer entered."""

    payload = call_json(JOB_DESCRIPTION_SYSTEM_PROMPT, build_job_description_prompt(info), client=client, temperature=0.7)
    try:
        return GeneratedJobDescription.model_validate(payload)
    except ValidationError as exc:
        logger.warning("Job description payload did not validate: %s", exc)
        raise AIResponseError("Could not generate a job description") from exc


__all__ = ["MAX_RESUME_CHARS", "generate_job_description", "parse_resume"]
