"""Data models for resume section generation."""

from resume_maker.models.generation import (
    ExperienceEntry,
    GeneratedSections,
    GenerationOutcome,
    GenerationRequest,
    SectionSource,
    TemplateType,
)
from resume_maker.models.health import HealthReport, ServiceStatuses

__all__ = [
    "ExperienceEntry",
    "GeneratedSections",
    "GenerationOutcome",
    "GenerationRequest",
    "HealthReport",
    "SectionSource",
    "ServiceStatuses",
    "TemplateType",
]
