"""Response models for the AI helpers (resume parsing, job description drafts)."""

from __future__ import annotations

from typing import List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class _Lenient(BaseModel):
    """Models are fed LLM output, so unknown keys are ignored and nulls become blanks."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def _none_to_default(cls, value: object, info: ValidationInfo) -> object:
        if value is None:
            field_name = info.field_name
            annotation = cls.model_fields[field_name].annotation if field_name else None
            return [] if getattr(annotation, "__origin__", None) is list else ""
        return value


class ParsedExperience(_Lenient):
    company: str = ""
    role: str = ""
    start_date: str = Field(default="", validation_alias=AliasChoices("start_date", "startDate"))
    end_date: str = Field(default="", validation_alias=AliasChoices("end_date", "endDate"))
    description: str = ""


class ParsedEducation(_Lenient):
    institution: str = ""
    degree: str = ""
    field: str = ""
    year: str = ""


class ParsedResume(_Lenient):
    """Structured data extracted from a resume."""

    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    headline: str = ""
    summary: str = ""
    skills: List[str] = Field(default_factory=list)
    experience: List[ParsedExperience] = Field(default_factory=list)
    education: List[ParsedEducation] = Field(default_factory=list)


class JobInfo(BaseModel):
    """Seed information for a generated job description."""

    title: str
    company: str = ""
    location: str = ""
    job_type: str = ""
    requirements: List[str] = Field(default_factory=list)


class GeneratedJobDescription(_Lenient):
    title: str = ""
    description: str = ""
    responsibilities: List[str] = Field(default_factory=list)
    requirements: List[str] = Field(default_factory=list)
    benefits: List[str] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)


__all__ = [
    "GeneratedJobDescription",
    "JobInfo",
    "ParsedEducation",
    "ParsedExperience",
    "ParsedResume",
]
