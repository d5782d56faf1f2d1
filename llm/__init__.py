"""AI helper exports."""

from __future__ import annotations

from llm.assist import generate_job_description, parse_resume

__all__ = ["generate_job_description", "parse_resume"]
