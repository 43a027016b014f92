"""Pydantic models for the service health report."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

ServiceStatus = Literal["connected", "disconnected"]


class ServiceStatuses(BaseModel):
    ollama: ServiceStatus = "disconnected"


class HealthReport(BaseModel):
    status: Literal["healthy", "unhealthy"]
    uptime: float  # seconds
    timestamp: str  # ISO 8601
    version: str
    environment: str
    mock_mode: bool = False
    services: ServiceStatuses
