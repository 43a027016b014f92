"""Pydantic models for resume section generation."""

from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

TemplateType = Literal["fresher", "mid", "senior"]
SectionSource = Literal["model", "fallback", "mock"]


class ExperienceEntry(BaseModel):
    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    company: str
    position: str
    start_date: date
    end_date: date | None = None
    description: str | None = None
    achievements: list[str] = Field(default_factory=list)


class GenerationRequest(BaseModel):
    """Structured input for a single generation attempt.

    Accepts snake_case field names as well as the camelCase keys used by
    API clients (``experienceHistory``, ``templateType`` ...).
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    skills: list[str]
    experience_history: list[ExperienceEntry] = Field(default_factory=list)
    job_description: str | None = None
    template_type: TemplateType

    @field_validator("skills")
    @classmethod
    def _strip_skills(cls, skills: list[str]) -> list[str]:
        cleaned = [s.strip() for s in skills]
        if any(not s for s in cleaned):
            raise ValueError("skills must be non-empty strings")
        return cleaned

    @property
    def has_experience(self) -> bool:
        return bool(self.experience_history)


class GeneratedSections(BaseModel):
    summary: str = ""
    skills: str = ""
    experience: str = ""
    education: str = ""


class GenerationOutcome(BaseModel):
    """Generated sections plus how they were produced."""

    sections: GeneratedSections
    source: SectionSource
    attempts: int = 0
    elapsed_seconds: float = 0.0
    error: str | None = None  # set when a fallback replaced model output
