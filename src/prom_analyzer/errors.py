"""Error taxonomy and mapping from httpx exceptions."""

from __future__ import annotations

import httpx


class PromAnalyzerError(Exception):
    """Base prom-analyzer error."""


class ConfigError(PromAnalyzerError):
    """Required configuration is missing or invalid."""


class InputError(PromAnalyzerError):
    """User or caller input cannot be used."""


class TransportError(PromAnalyzerError):
    """Cannot reach a backend (connection failure, timeout)."""

    def __init__(self, message: str, backend: str) -> None:
        super().__init__(message)
        self.backend = backend


class BackendError(PromAnalyzerError):
    """Backend answered with a non-success HTTP status or status field."""

    def __init__(
        self,
        message: str,
        backend: str,
        status_code: int | None = None,
        body: str = "",
    ) -> None:
        super().__init__(message)
        self.backend = backend
        self.status_code = status_code
        self.body = body


class DecodeError(PromAnalyzerError):
    """Response body does not match the expected shape."""

    def __init__(self, message: str, backend: str, body: str = "") -> None:
        super().__init__(message)
        self.backend = backend
        self.body = body


def handle_http_error(e: httpx.HTTPError, backend: str, operation: str) -> PromAnalyzerError:
    """Convert httpx exceptions to prom-analyzer errors.

    Args:
        e: The exception to convert.
        backend: Human readable backend name (e.g., "Prometheus").
        operation: Description of the operation that failed.

    Returns:
        A PromAnalyzerError with an appropriate message.
    """
    if isinstance(e, httpx.ConnectError):
        return TransportError(f"Cannot connect to {backend} during {operation}: {e}", backend)

    if isinstance(e, httpx.TimeoutException):
        return TransportError(f"{backend} request timed out during {operation}", backend)

    if isinstance(e, httpx.HTTPStatusError):
        status = e.response.status_code
        return BackendError(
            f"{backend} error ({status}) during {operation}: {e.response.text}",
            backend,
            status_code=status,
            body=e.response.text,
        )

    return TransportError(f"{backend} transport error during {operation}: {e}", backend)


__all__ = [
    "BackendError",
    "ConfigError",
    "DecodeError",
    "InputError",
    "PromAnalyzerError",
    "TransportError",
    "handle_http_error",
]
