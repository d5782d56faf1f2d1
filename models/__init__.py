"""Pydantic models for wizard payloads and AI helper responses."""

from .ai import GeneratedJobDescription, JobInfo, ParsedResume
from .candidate_profile import CandidateProfilePayload, ExperienceEntry, PortfolioItem
from .job_posting import JobPostingPayload
from .signup import SignupPayload

__all__ = [
    "CandidateProfilePayload",
    "ExperienceEntry",
    "GeneratedJobDescription",
    "JobInfo",
    "JobPostingPayload",
    "ParsedResume",
    "PortfolioItem",
    "SignupPayload",
]
