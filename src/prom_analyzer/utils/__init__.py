"""Shared utility modules for prom-analyzer.

- timerange: Query window computation
- decorators: Backend error mapping for client methods
"""

from prom_analyzer.utils.decorators import handle_backend_errors
from prom_analyzer.utils.timerange import get_range_date

__all__ = [
    "get_range_date",
    "handle_backend_errors",
]
