"""Pydantic models for the job posting wizard and its API payload."""

from __future__ import annotations

import re
from datetime import date
from typing import Any, ClassVar, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

JobType = Literal["full_time", "part_time", "contract", "internship", "freelance"]
ExperienceLevel = Literal["entry", "mid", "senior", "lead", "executive"]
Currency = Literal["USD", "EUR", "GBP", "NGN", "GHS", "KES"]

JOB_TYPES: tuple[str, ...] = ("full_time", "part_time", "contract", "internship", "freelance")
EXPERIENCE_LEVELS: tuple[str, ...] = ("entry", "mid", "senior", "lead", "executive")
CURRENCIES: tuple[str, ...] = ("USD", "EUR", "GBP", "NGN", "GHS", "KES")

_NON_DIGITS_RE = re.compile(r"[,\s_]")


def _blank_to_none(value: object) -> object | None:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class _StepModel(BaseModel):
    """Base for per-step views over the shared field map."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)


class JobBasics(_StepModel):
    """Step 1: what and where."""

    title: str = ""
    location: str = ""
    job_type: JobType = "full_time"
    remote: bool = False


class JobDetails(_StepModel):
    """Step 2: the role in prose."""

    description: str = ""
    responsibilities: str = ""


class JobRequirements(_StepModel):
    """Step 3: who fits."""

    experience_level: ExperienceLevel = "mid"
    requirements: str = ""
    skills: List[str] = Field(default_factory=list)


class JobCompensation(_StepModel):
    """Step 4: pay, perks and how to apply."""

    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    salary_currency: Currency = "USD"
    benefits: str = ""
    application_deadline: Optional[date] = None
    application_email: str = ""
    application_url: str = ""

    @field_validator("salary_min", "salary_max", mode="before")
    @classmethod
    def _coerce_salary(cls, value: object) -> object | None:
        """Accept ``"50,000"`` style input and treat blanks as unset."""

        value = _blank_to_none(value)
        if isinstance(value, str):
            return _NON_DIGITS_RE.sub("", value)
        return value

    @field_validator("application_deadline", mode="before")
    @classmethod
    def _coerce_deadline(cls, value: object) -> object | None:
        return _blank_to_none(value)

    @model_validator(mode="after")
    def _check_salary_range(self) -> "JobCompensation":
        if self.salary_min is not None and self.salary_max is not None and self.salary_min > self.salary_max:
            raise ValueError("Salary minimum cannot exceed maximum.")
        return self


class JobPostingPayload(BaseModel):
    """Request body for ``POST /jobs/``."""

    model_config = ConfigDict(extra="forbid")

    STEP_MODELS: ClassVar[tuple[type[_StepModel], ...]] = (
        JobBasics,
        JobDetails,
        JobRequirements,
        JobCompensation,
    )

    title: str
    location: str
    job_type: JobType
    is_remote: bool
    description: str
    responsibilities: str = ""
    requirements: str = ""
    skills: List[str] = Field(default_factory=list)
    experience_level: ExperienceLevel
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    salary_currency: Currency = "USD"
    benefits: str = ""
    application_deadline: Optional[date] = None
    application_email: Optional[str] = None
    application_url: Optional[str] = None

    @classmethod
    def from_fields(cls, fields: dict[str, Any]) -> "JobPostingPayload":
        """Build the payload from the wizard's field map, one step model at a time."""

        merged: dict[str, Any] = {}
        for model in cls.STEP_MODELS:
            merged.update(model.model_validate(fields).model_dump())
        merged["is_remote"] = merged.pop("remote")
        for key in ("application_email", "application_url"):
            merged[key] = merged.get(key) or None
        return cls.model_validate(merged)


__all__ = [
    "CURRENCIES",
    "EXPERIENCE_LEVELS",
    "JOB_TYPES",
    "JobBasics",
    "JobCompensation",
    "JobDetails",
    "JobPostingPayload",
    "JobRequirements",
]
