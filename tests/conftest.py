"""Pytest fixtures for prom-analyzer tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from prom_analyzer.config import PromAnalyzerSettings

PROMETHEUS_URL = "http://prometheus.test/api/v1"
ANTHROPIC_URL = "http://anthropic.test/v1"
API_KEY = "test-key"

ENV_VARS = (
    "PROMETHEUS_BASE_URL",
    "ANTHROPIC_BASE_URL",
    "ANTHROPIC_API_KEY",
    "PROM_ANALYZER_TIMEOUT",
    "PROM_ANALYZER_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep the developer's environment and .env file out of every test."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def full_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set all required configuration in the environment."""
    monkeypatch.setenv("PROMETHEUS_BASE_URL", PROMETHEUS_URL)
    monkeypatch.setenv("ANTHROPIC_BASE_URL", ANTHROPIC_URL)
    monkeypatch.setenv("ANTHROPIC_API_KEY", API_KEY)


@pytest.fixture
def settings() -> PromAnalyzerSettings:
    return PromAnalyzerSettings(
        prometheus_base_url=PROMETHEUS_URL,
        anthropic_base_url=ANTHROPIC_URL,
        anthropic_api_key=API_KEY,
        _env_file=None,
    )


# =============================================================================
# Response Factories - Use these to build backend payloads without duplication
# =============================================================================


@pytest.fixture
def prometheus_payload() -> Callable[..., dict]:
    """Factory for a Prometheus range query response body."""

    def _make(
        labels: dict[str, str] | None = None,
        values: list[list[Any]] | None = None,
        status: str = "success",
        series: list[dict] | None = None,
    ) -> dict:
        if series is None:
            series = [
                {
                    "metric": labels if labels is not None else {"instance": "api-prod"},
                    "values": values
                    if values is not None
                    else [[1700000000.0, "0.42"], [1700000300.0, "0.47"]],
                }
            ]
        return {
            "status": status,
            "data": {"resultType": "matrix", "result": series},
        }

    return _make


@pytest.fixture
def anthropic_payload() -> Callable[..., dict]:
    """Factory for a Messages API response body."""

    def _make(
        text: str = "No anomalies detected.",
        input_tokens: int = 120,
        output_tokens: int = 340,
        model: str = "claude-3-5-haiku-20241022",
        content: list[dict] | None = None,
    ) -> dict:
        return {
            "id": "msg_01",
            "type": "message",
            "role": "assistant",
            "model": model,
            "stop_reason": "end_turn",
            "usage": {"input_tokens": input_tokens, "output_tokens": output_tokens},
            "content": content if content is not None else [{"type": "text", "text": text}],
        }

    return _make
