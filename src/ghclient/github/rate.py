"""Last-known rate limit, shared across clients.

The cached value is advisory: it reflects whichever call finished last, and
may be stale if other clients (or other processes) used the same quota since.
Use `Client.rate_limits()` for an authoritative value.
"""

import logging
import threading

from .types import Rate

logger = logging.getLogger(__name__)


class RateCache:
    """Holds one immutable Rate, replaced whole on every update."""

    def __init__(self, rate: Rate | None = None):
        self._lock = threading.Lock()
        self._rate = rate

    def get(self) -> Rate | None:
        with self._lock:
            return self._rate

    def record(self, rate: Rate) -> None:
        with self._lock:
            self._rate = rate
        if rate.limit and rate.remaining == 0:
            logger.warning(f"GitHub rate limit exhausted, resets at {rate.reset}")

    def clear(self) -> None:
        with self._lock:
            self._rate = None


# Process-wide default used by every client that isn't given its own cache
rate_cache = RateCache()
