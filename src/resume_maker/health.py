"""Service health report."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone

from resume_maker.clients.generation_client import GenerationClient
from resume_maker.models.health import HealthReport, ServiceStatuses

logger = logging.getLogger(__name__)

PROCESS_STARTED_AT = time.monotonic()


async def build_health_report(
    client: GenerationClient,
    started_at: float = PROCESS_STARTED_AT,
    environment: str = "development",
    version: str = "0.1.0",
) -> HealthReport:
    """Probe the generation backend and summarize service health.

    ``started_at`` is a ``time.monotonic()`` reading. Never raises: an
    unexpected error produces an "unhealthy" report.
    """
    timestamp = datetime.now(timezone.utc).isoformat()
    uptime = time.monotonic() - started_at
    try:
        connected = await client.check_health()
    except Exception:
        logger.error("Health check failed", exc_info=True)
        return HealthReport(
            status="unhealthy",
            uptime=uptime,
            timestamp=timestamp,
            version=version,
            environment=environment,
            mock_mode=client.is_mock_mode,
            services=ServiceStatuses(ollama="disconnected"),
        )

    return HealthReport(
        status="healthy",
        uptime=uptime,
        timestamp=timestamp,
        version=version,
        environment=environment,
        mock_mode=client.is_mock_mode,
        services=ServiceStatuses(ollama="connected" if connected else "disconnected"),
    )
