"""Pydantic models for the candidate profile wizard."""

from __future__ import annotations

from typing import Any, ClassVar, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wizard.validation import is_value_present


class ExperienceEntry(BaseModel):
    """One work-experience record; list order is display order."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    company: str = ""
    role: str = ""
    start_date: str = ""
    end_date: Optional[str] = ""
    current: bool = False
    description: str = ""

    @field_validator("end_date", mode="after")
    @classmethod
    def _blank_end_date(cls, value: Optional[str]) -> Optional[str]:
        return value or None


class PortfolioItem(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    title: str = ""
    url: str = ""
    description: str = ""


def _present_records(records: object) -> list[dict[str, Any]]:
    if not isinstance(records, list):
        return []
    kept: list[dict[str, Any]] = []
    for record in records:
        if not isinstance(record, dict):
            continue
        # ``current`` alone does not make a record worth sending
        meaningful = {key: value for key, value in record.items() if key != "current"}
        if is_value_present(meaningful):
            kept.append(record)
    return kept


class _StepModel(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)


class PersonalInfo(_StepModel):
    """Step 1."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    headline: str = ""
    bio: str = ""


class ExperienceHistory(_StepModel):
    """Step 2."""

    experiences: List[ExperienceEntry] = Field(default_factory=list)

    @field_validator("experiences", mode="before")
    @classmethod
    def _drop_blank_records(cls, value: object) -> list[dict[str, Any]]:
        return _present_records(value)


class SkillSet(_StepModel):
    """Step 3."""

    skills: List[str] = Field(default_factory=list)


class Portfolio(_StepModel):
    """Step 4."""

    portfolio: List[PortfolioItem] = Field(default_factory=list)

    @field_validator("portfolio", mode="before")
    @classmethod
    def _drop_blank_records(cls, value: object) -> list[dict[str, Any]]:
        return _present_records(value)


class CandidateProfilePayload(BaseModel):
    """Request body for ``PATCH /auth/profile/``."""

    model_config = ConfigDict(extra="forbid")

    STEP_MODELS: ClassVar[tuple[type[_StepModel], ...]] = (
        PersonalInfo,
        ExperienceHistory,
        SkillSet,
        Portfolio,
    )

    first_name: str
    last_name: str
    email: str
    phone: str = ""
    location: str = ""
    headline: str = ""
    bio: str = ""
    experiences: List[ExperienceEntry] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    portfolio: List[PortfolioItem] = Field(default_factory=list)

    @classmethod
    def from_fields(cls, fields: dict[str, Any]) -> "CandidateProfilePayload":
        merged: dict[str, Any] = {}
        for model in cls.STEP_MODELS:
            merged.update(model.model_validate(fields).model_dump())
        for entry in merged["experiences"]:
            if entry.get("current"):
                entry["end_date"] = None
        return cls.model_validate(merged)


__all__ = [
    "CandidateProfilePayload",
    "ExperienceEntry",
    "ExperienceHistory",
    "PersonalInfo",
    "Portfolio",
    "PortfolioItem",
    "SkillSet",
]
