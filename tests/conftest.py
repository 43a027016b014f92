"""Shared test fixtures."""

from __future__ import annotations

import json
from datetime import date

import pytest

from resume_maker.config import OllamaConfig
from resume_maker.models.generation import ExperienceEntry, GenerationRequest

MODEL_OUTPUT = json.dumps({
    "summary": "Backend engineer with six years of Python.",
    "skills": "Python, FastAPI, PostgreSQL",
    "experience": "Senior Engineer at Acme: built the billing platform",
    "education": "B.Sc. Computer Science",
})


@pytest.fixture
def sample_experience() -> list[ExperienceEntry]:
    return [
        ExperienceEntry(
            company="Acme",
            position="Senior Engineer",
            start_date=date(2020, 3, 1),
            description="Built the billing platform",
            achievements=["Cut invoice latency 40%", "Led migration to PostgreSQL"],
        ),
        ExperienceEntry(
            company="Globex",
            position="Engineer",
            start_date=date(2017, 1, 1),
            end_date=date(2020, 2, 1),
        ),
    ]


@pytest.fixture
def fresher_request() -> GenerationRequest:
    return GenerationRequest(skills=["Python", "SQL"], template_type="fresher")


@pytest.fixture
def mid_request(sample_experience) -> GenerationRequest:
    return GenerationRequest(
        skills=["Python", "FastAPI", "PostgreSQL", "Docker"],
        experience_history=sample_experience,
        job_description="Backend engineer for a payments team",
        template_type="mid",
    )


@pytest.fixture
def senior_request() -> GenerationRequest:
    return GenerationRequest(skills=["Go", "Kubernetes"], template_type="senior")


@pytest.fixture
def ollama_config() -> OllamaConfig:
    return OllamaConfig(base_url="http://ollama.test", model="test-model")


@pytest.fixture
def model_output() -> str:
    return MODEL_OUTPUT
