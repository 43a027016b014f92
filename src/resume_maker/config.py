"""Application configuration loaded from config.yaml and the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path

import yaml


@dataclass(frozen=True)
class OllamaConfig:
    base_url: str = "http://localhost:11434"
    model: str = "llama2"
    timeout: float = 60
    health_timeout: float = 5
    max_retries: int = 3
    retry_delay: float = 1.0
    temperature: float = 0.7
    top_p: float = 0.9
    max_tokens: int = 2000
    mock_mode: bool = False

    def __post_init__(self) -> None:
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {self.base_url!r}")
        if self.timeout < 1:
            raise ValueError(f"timeout must be >= 1, got {self.timeout}")
        if self.health_timeout < 1:
            raise ValueError(f"health_timeout must be >= 1, got {self.health_timeout}")
        if not 1 <= self.max_retries <= 10:
            raise ValueError(f"max_retries must be between 1 and 10, got {self.max_retries}")
        if self.retry_delay < 0:
            raise ValueError(f"retry_delay must be >= 0, got {self.retry_delay}")
        if not 0 <= self.temperature <= 2:
            raise ValueError(f"temperature must be between 0 and 2, got {self.temperature}")
        if not 0 <= self.top_p <= 1:
            raise ValueError(f"top_p must be between 0 and 1, got {self.top_p}")
        if self.max_tokens < 1:
            raise ValueError(f"max_tokens must be >= 1, got {self.max_tokens}")


@dataclass(frozen=True)
class UsageConfig:
    enabled: bool = True
    db_path: str = "~/.resume-maker/usage.db"

    @property
    def resolved_db_path(self) -> Path:
        return Path(self.db_path).expanduser()


@dataclass(frozen=True)
class AppConfig:
    ollama: OllamaConfig = field(default_factory=OllamaConfig)
    usage: UsageConfig = field(default_factory=UsageConfig)
    environment: str = "development"


def _apply_env(config: AppConfig, env: Mapping[str, str]) -> AppConfig:
    """Override file settings with OLLAMA_*, AI_MOCK_MODE and APP_ENV."""
    ollama_overrides: dict = {}
    if env.get("OLLAMA_BASE_URL"):
        ollama_overrides["base_url"] = env["OLLAMA_BASE_URL"]
    if env.get("OLLAMA_MODEL"):
        ollama_overrides["model"] = env["OLLAMA_MODEL"]
    if "AI_MOCK_MODE" in env:
        # Only the literal "true" switches mock mode on.
        ollama_overrides["mock_mode"] = env["AI_MOCK_MODE"].strip().lower() == "true"

    if ollama_overrides:
        config = replace(config, ollama=replace(config.ollama, **ollama_overrides))
    if env.get("APP_ENV"):
        config = replace(config, environment=env["APP_ENV"])
    return config


def load_config(
    path: str | Path | None = None,
    env: Mapping[str, str] | None = None,
) -> AppConfig:
    """Load config from YAML file, falling back to defaults, then apply env overrides."""
    if path is None:
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    config = AppConfig(
        ollama=OllamaConfig(**raw.get("ollama", {})),
        usage=UsageConfig(**raw.get("usage", {})),
        environment=raw.get("environment", "development"),
    )
    return _apply_env(config, os.environ if env is None else env)
