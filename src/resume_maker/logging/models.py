"""Usage logging data models."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from resume_maker.models.generation import GenerationOutcome


class UsageLog(BaseModel):
    """Single usage log entry for one resume generation."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = Field(default_factory=datetime.now)
    template_type: str  # "fresher" | "mid" | "senior"
    model: str
    source: str  # "model" | "fallback" | "mock"
    attempts: int = 0
    elapsed_seconds: float = 0.0
    success: bool = True
    error_message: str | None = None

    @classmethod
    def from_outcome(
        cls,
        outcome: GenerationOutcome,
        template_type: str,
        model: str,
    ) -> UsageLog:
        return cls(
            template_type=template_type,
            model=model,
            source=outcome.source,
            attempts=outcome.attempts,
            elapsed_seconds=outcome.elapsed_seconds,
            success=outcome.source != "fallback",
            error_message=outcome.error,
        )
