"""Load generation requests from YAML or JSON files."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from resume_maker.models.generation import GenerationRequest


def parse_request(data: object) -> GenerationRequest:
    """Validate a decoded document as a GenerationRequest."""
    if not isinstance(data, dict):
        raise ValueError(f"Request must be a mapping, got {type(data).__name__}")
    try:
        return GenerationRequest.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid generation request: {e}") from e


def load_request(file_path: str | Path) -> GenerationRequest:
    """Load a request file. JSON is read through the YAML loader."""
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Request file not found: {path}")
    return parse_request(yaml.safe_load(path.read_text(encoding="utf-8")))
