"""Tests for UsageLog model and UsageStore."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from resume_maker.logging.models import UsageLog
from resume_maker.logging.usage_store import UsageStore
from resume_maker.models.generation import GeneratedSections, GenerationOutcome


def _log(**overrides) -> UsageLog:
    fields = {"template_type": "mid", "model": "llama2", "source": "model", "attempts": 1}
    fields.update(overrides)
    return UsageLog(**fields)


# --- UsageLog model tests ---


class TestUsageLog:
    def test_create_minimal(self):
        log = UsageLog(template_type="fresher", model="llama2", source="mock")
        assert log.source == "mock"
        assert log.success is True
        assert log.attempts == 0
        assert log.id  # uuid auto-generated

    def test_unique_ids(self):
        assert _log().id != _log().id

    def test_timestamp_auto(self):
        before = datetime.now()
        log = _log()
        after = datetime.now()
        assert before <= log.timestamp <= after

    def test_from_fallback_outcome(self):
        outcome = GenerationOutcome(
            sections=GeneratedSections(),
            source="fallback",
            attempts=3,
            elapsed_seconds=7.5,
            error="Ollama service is not available.",
        )
        log = UsageLog.from_outcome(outcome, template_type="senior", model="llama2")
        assert log.success is False
        assert log.attempts == 3
        assert log.elapsed_seconds == 7.5
        assert log.error_message == "Ollama service is not available."

    def test_from_model_outcome(self):
        outcome = GenerationOutcome(sections=GeneratedSections(), source="model", attempts=1)
        log = UsageLog.from_outcome(outcome, template_type="mid", model="mistral")
        assert log.success is True
        assert log.model == "mistral"
        assert log.error_message is None


# --- UsageStore tests ---


@pytest.fixture
def store(tmp_path: Path) -> UsageStore:
    return UsageStore(db_path=tmp_path / "test_usage.db")


class TestUsageStore:
    def test_save_and_get(self, store: UsageStore):
        log = _log(template_type="senior")
        store.save_log(log)
        logs = store.get_logs()
        assert len(logs) == 1
        assert logs[0].id == log.id
        assert logs[0].template_type == "senior"
        assert logs[0].timestamp == log.timestamp

    def test_get_by_source(self, store: UsageStore):
        store.save_log(_log(source="model"))
        store.save_log(_log(source="fallback", success=False))
        store.save_log(_log(source="model"))

        assert len(store.get_logs(source="model")) == 2
        fallback = store.get_logs(source="fallback")
        assert len(fallback) == 1
        assert fallback[0].success is False

    def test_get_logs_limit(self, store: UsageStore):
        for _ in range(10):
            store.save_log(_log())
        logs = store.get_logs(limit=3)
        assert len(logs) == 3

    def test_get_logs_newest_first(self, store: UsageStore):
        older = _log(timestamp=datetime(2026, 1, 1, 9, 0))
        newer = _log(timestamp=datetime(2026, 1, 2, 9, 0))
        store.save_log(older)
        store.save_log(newer)
        assert [log.id for log in store.get_logs()] == [newer.id, older.id]

    def test_get_logs_empty(self, store: UsageStore):
        assert store.get_logs() == []

    def test_monthly_stats(self, store: UsageStore):
        store.save_log(_log(source="model", attempts=1, elapsed_seconds=2.0))
        store.save_log(_log(source="model", attempts=2, elapsed_seconds=4.0))
        store.save_log(_log(source="fallback", attempts=3, elapsed_seconds=9.0, success=False))
        store.save_log(_log(source="mock", attempts=0, elapsed_seconds=0.0))

        stats = store.get_monthly_stats()
        assert stats["total_runs"] == 4
        assert stats["fallback_count"] == 1
        assert stats["mock_count"] == 1
        assert stats["fallback_rate"] == 25.0
        assert stats["avg_attempts"] == 1.5
        assert stats["avg_elapsed_seconds"] == 3.75

    def test_monthly_stats_empty(self, store: UsageStore):
        stats = store.get_monthly_stats()
        assert stats["total_runs"] == 0
        assert stats["fallback_rate"] == 0.0
        assert stats["avg_attempts"] is None

    def test_monthly_stats_excludes_previous_months(self, store: UsageStore):
        store.save_log(_log(timestamp=datetime(2000, 1, 15)))
        assert store.get_monthly_stats()["total_runs"] == 0
