"""Prompt templates for the AI helpers."""

from __future__ import annotations

import textwrap

from models.ai import JobInfo

RESUME_SYSTEM_PROMPT = (
    "You extract structured data from resumes for a job board. "
    "Answer with a single JSON object and nothing else."
)

JOB_DESCRIPTION_SYSTEM_PROMPT = (
    "You write clear, inclusive job descriptions for employers on an African job board. "
    "Answer with a single JSON object and nothing else."
)

_RESUME_TEMPLATE = textwrap.dedent(
    """\
    Parse the following resume and extract structured data.

    Resume:
    {resume}

    Return JSON in this exact format:
    {{
      "name": "Full Name",
      "email": "email@example.com",
      "phone": "+1234567890",
      "location": "City, Country",
      "headline": "Professional Title",
      "summary": "Brief professional summary",
      "skills": ["skill1", "skill2"],
      "experience": [
        {{"company": "Company Name", "role": "Job Title", "start_date": "2020-01",
          "end_date": "2023-12", "description": "Job description"}}
      ],
      "education": [
        {{"institution": "University Name", "degree": "Degree Name", "field": "Field of Study", "year": "2020"}}
      ]
    }}
    Use empty strings or empty lists for anything the resume does not state."""
)

_JOB_DESCRIPTION_TEMPLATE = textwrap.dedent(
    """\
    Generate a professional job description.

    Title: {title}
    Company: {company}
    Location: {location}
    Type: {job_type}
    Key requirements: {requirements}

    Return JSON:
    {{
      "title": "Job Title",
      "description": "Two or three paragraph overview",
      "responsibilities": ["responsibility 1", "responsibility 2"],
      "requirements": ["requirement 1", "requirement 2"],
      "benefits": ["benefit 1", "benefit 2"],
      "skills": ["skill 1", "skill 2"]
    }}"""
)


def build_resume_prompt(resume_text: str) -> str:
    return _RESUME_TEMPLATE.format(resume=resume_text)


def build_job_description_prompt(info: JobInfo) -> str:
    return _JOB_DESCRIPTION_TEMPLATE.format(
        title=info.title,
        company=info.company or "Not specified",
        location=info.location or "Not specified",
        job_type=info.job_type.replace("_", " ") or "Not specified",
        requirements=", ".join(info.requirements) or "Not specified",
    )


__all__ = [
    "JOB_DESCRIPTION_SYSTEM_PROMPT",
    "RESUME_SYSTEM_PROMPT",
    "build_job_description_prompt",
    "build_resume_prompt",
]
