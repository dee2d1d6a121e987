"""Error handling decorators for backend clients."""

from __future__ import annotations

from functools import wraps
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any


def handle_backend_errors(backend: str, operation: str) -> Callable:
    """Decorator to convert httpx exceptions to prom-analyzer errors.

    Args:
        backend: Backend name used in error messages (e.g., "Prometheus").
        operation: Description of the operation (e.g., "querying range").

    Returns:
        Decorated async function that raises only PromAnalyzerError subclasses
        for HTTP failures.
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            import httpx

            from prom_analyzer.errors import handle_http_error

            try:
                return await func(*args, **kwargs)
            except httpx.HTTPError as e:
                raise handle_http_error(e, backend, operation) from e

        return wrapper

    return decorator


__all__ = ["handle_backend_errors"]
