"""
Per-operation metrics for the inventory API.

Every inventory operation (get_item, create_item, ...) is tracked with
how often it ran, how each call ended (ok, not_found, conflict,
rate_limited, error) and its average latency over the most recent calls.
Rate limit rejections are also counted per request path, which covers
endpoints that are not inventory operations such as ``/metrics``.

System metrics (CPU, memory, disk) come from psutil and are collected in
a worker thread.
"""

from asyncio import to_thread
from collections import Counter, deque
from dataclasses import dataclass, field
from enum import StrEnum
from logging import getLogger
from threading import Lock
from time import perf_counter
from types import TracebackType
from typing import Any, Self

from psutil import cpu_percent, disk_usage, virtual_memory
from slowapi.errors import RateLimitExceeded

from inventory_api.errors import ItemConflictError, ItemNotFoundError
from inventory_api.utils.helpers import file_logger

logger = file_logger(getLogger(__name__))

_BYTES_PER_MB: int = 1024 * 1024
_LATENCY_WINDOW: int = 500
_CPU_SAMPLE_INTERVAL: float = 0.1


class Outcome(StrEnum):
    """How an inventory operation ended."""

    OK = "ok"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    RATE_LIMITED = "rate_limited"
    ERROR = "error"


def classify(exc: BaseException | None) -> Outcome:
    """Map the exception an operation raised, if any, to its outcome."""
    match exc:
        case None:
            return Outcome.OK
        case ItemNotFoundError():
            return Outcome.NOT_FOUND
        case ItemConflictError():
            return Outcome.CONFLICT
        case RateLimitExceeded():
            return Outcome.RATE_LIMITED
        case _:
            return Outcome.ERROR


@dataclass(slots=True)
class OperationStats:
    """Outcome counts and a sliding latency window for one operation."""

    outcomes: Counter[Outcome] = field(default_factory=Counter)
    latencies: deque[float] = field(default_factory=lambda: deque(maxlen=_LATENCY_WINDOW))
    _window_sum: float = field(default=0.0, repr=False)

    @property
    def calls(self) -> int:
        return sum(self.outcomes.values())

    @property
    def avg_ms(self) -> float:
        """Average latency in milliseconds over the window."""
        if not self.latencies:
            return 0.0
        return round(self._window_sum / len(self.latencies) * 1000, 3)

    def record(self, outcome: Outcome, duration: float) -> None:
        if len(self.latencies) == self.latencies.maxlen:
            self._window_sum -= self.latencies[0]
        self.latencies.append(duration)
        self._window_sum += duration
        self.outcomes[outcome] += 1

    def snapshot(self) -> dict[str, Any]:
        return {
            "calls": self.calls,
            "outcomes": {outcome.value: n for outcome, n in self.outcomes.items()},
            "avg_ms": self.avg_ms,
        }


class InventoryMetrics:
    """Thread-safe registry of OperationStats keyed by operation name."""

    __slots__ = ("_lock", "_operations", "_rate_limited")

    def __init__(self) -> None:
        self._lock = Lock()
        self._operations: dict[str, OperationStats] = {}
        self._rate_limited: Counter[str] = Counter()

    def record(self, operation: str, outcome: Outcome, duration: float) -> None:
        with self._lock:
            self._operations.setdefault(operation, OperationStats()).record(outcome, duration)

    def record_rate_limited(self, path: str) -> None:
        with self._lock:
            self._rate_limited[path] += 1

    def count(self, operation: str, outcome: Outcome) -> int:
        """Number of calls to ``operation`` that ended with ``outcome``."""
        with self._lock:
            stats = self._operations.get(operation)
            return stats.outcomes[outcome] if stats else 0

    def snapshot(self) -> dict[str, Any]:
        """
        Get a point-in-time copy of every counter.

        Returns:
            ``{"operations": {name: {"calls", "outcomes", "avg_ms"}},
            "rate_limited": {path: count}}``
        """
        with self._lock:
            return {
                "operations": {
                    name: stats.snapshot() for name, stats in sorted(self._operations.items())
                },
                "rate_limited": dict(self._rate_limited),
            }


inventory_metrics = InventoryMetrics()


class OperationTimer:
    """
    Async context manager that records one inventory operation.

    The outcome is derived from the exception leaving the block; the
    exception itself is never suppressed.
    """

    __slots__ = ("_operation", "_metrics", "_started")

    def __init__(self, operation: str, metrics: InventoryMetrics | None = None) -> None:
        self._operation = operation
        self._metrics = metrics or inventory_metrics
        self._started = 0.0

    async def __aenter__(self) -> Self:
        self._started = perf_counter()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        outcome = classify(exc_val)
        self._metrics.record(self._operation, outcome, perf_counter() - self._started)
        if outcome is Outcome.ERROR:
            logger.warning(f"{self._operation} failed with {exc_type.__name__}")


def _system_snapshot() -> dict[str, Any]:
    memory = virtual_memory()
    return {
        "cpu_percent": cpu_percent(interval=_CPU_SAMPLE_INTERVAL),
        "memory": {
            "percent": memory.percent,
            "used_mb": round(memory.used / _BYTES_PER_MB, 2),
            "total_mb": round(memory.total / _BYTES_PER_MB, 2),
        },
        "disk_percent": disk_usage("/").percent,
    }


async def get_system_metrics() -> dict[str, Any]:
    """
    Get host CPU, memory and disk usage.

    Returns:
        Dictionary containing system metrics or error information.
    """
    try:
        return await to_thread(_system_snapshot)
    except OSError as e:
        logger.exception("Failed to get system metrics: OS error")
        return {"error": f"Failed to collect system metrics: {e}"}
    except Exception:
        logger.exception("Failed to get system metrics: unexpected error")
        return {"error": "Failed to collect system metrics"}
