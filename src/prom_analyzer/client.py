"""Async client for the Prometheus HTTP API."""

from __future__ import annotations

import logging
from typing import Self

import httpx

from prom_analyzer.errors import BackendError, DecodeError, InputError
from prom_analyzer.models import PrometheusResponse, TimeRange
from prom_analyzer.utils.decorators import handle_backend_errors

logger = logging.getLogger(__name__)

BACKEND = "Prometheus"

DEFAULT_CPU_QUERY = (
    "sum(irate(node_cpu_seconds_total{instance='api-prod',job='node_exporter', mode='system'}[5m]))"
    " / scalar(count(count(node_cpu_seconds_total{instance='api-prod',job='node_exporter'})"
    " by (cpu)))"
)
DEFAULT_STEP = "5m"


class PrometheusClient:
    """Async client for the Prometheus range query API.

    Args:
        base_url: API base URL including the version prefix
            (e.g., http://localhost:9090/api/v1).
        timeout: Request timeout in seconds.
    """

    def __init__(self, base_url: str, timeout: float = 30.0) -> None:
        """Initialize the Prometheus client."""
        self._base_url = base_url
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> Self:
        """Enter async context and open the httpx client."""
        self._client = httpx.AsyncClient(base_url=self._base_url, timeout=self._timeout)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit async context and close httpx client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def base_url(self) -> str:
        """The Prometheus API base URL."""
        return self._base_url

    @handle_backend_errors(BACKEND, "querying metric range")
    async def query_range(
        self,
        query: str,
        time_range: TimeRange,
        step: str = DEFAULT_STEP,
    ) -> PrometheusResponse:
        """Run a range query.

        Args:
            query: PromQL expression.
            time_range: Window to evaluate the expression over.
            step: Resolution step (e.g., "5m").

        Returns:
            The decoded envelope. status is always "success" and data is set.

        Raises:
            RuntimeError: If client is not connected.
            InputError: If query is empty.
            TransportError: If Prometheus cannot be reached.
            BackendError: On a non-2xx reply or a non-success status field.
            DecodeError: If the body is not a valid query response.
        """
        if self._client is None:
            raise RuntimeError("Client not connected. Use async with context.")
        if not query:
            raise InputError("query must not be empty")

        logger.debug(
            "Querying %s/query_range start=%d end=%d (%.0f days) step=%s",
            self._base_url,
            time_range.start,
            time_range.end,
            time_range.days,
            step,
        )
        resp = await self._client.post(
            "/query_range",
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            data={
                "query": query,
                "start": str(time_range.start),
                "end": str(time_range.end),
                "step": step,
            },
        )
        resp.raise_for_status()

        try:
            envelope = PrometheusResponse.model_validate(resp.json())
        except ValueError as e:
            raise DecodeError(
                f"Unexpected {BACKEND} response during range query: {e}",
                BACKEND,
                body=resp.text,
            ) from e

        if envelope.status != "success":
            detail = envelope.error or "no error message"
            if envelope.error_type:
                detail = f"{envelope.error_type}: {detail}"
            raise BackendError(
                f"{BACKEND} returned status '{envelope.status}' for range query ({detail})",
                BACKEND,
                status_code=resp.status_code,
                body=resp.text,
            )

        if envelope.data is None:
            raise DecodeError(
                f"{BACKEND} response for range query has no data",
                BACKEND,
                body=resp.text,
            )

        for warning in envelope.warnings:
            logger.warning("%s warning: %s", BACKEND, warning)

        logger.info(
            "Fetched %d series (%s) from %s",
            len(envelope.data.result),
            envelope.data.result_type,
            BACKEND,
        )
        return envelope


__all__ = ["DEFAULT_CPU_QUERY", "DEFAULT_STEP", "PrometheusClient"]
