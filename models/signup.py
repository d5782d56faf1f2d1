"""Pydantic models for the signup wizard."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator

AccountRole = Literal["seeker", "employer"]


class SignupPayload(BaseModel):
    """Request body for ``POST /auth/register/``."""

    model_config = ConfigDict(extra="forbid")

    email: str
    password: str
    full_name: str
    role: Literal["SEEKER", "EMPLOYER"]
    company_name: Optional[str] = None

    @field_validator("email", "full_name", "company_name", mode="before")
    @classmethod
    def _strip(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    @field_validator("role", mode="before")
    @classmethod
    def _upper_role(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def from_fields(cls, fields: dict[str, Any]) -> "SignupPayload":
        role = fields.get("role")
        return cls.model_validate(
            {
                "email": fields.get("email", ""),
                "password": fields.get("password", ""),
                "full_name": fields.get("full_name", ""),
                "role": role,
                "company_name": (fields.get("company_name") or None) if role == "employer" else None,
            }
        )


__all__ = ["AccountRole", "SignupPayload"]
