from inventory_api.managers.metrics import (
    InventoryMetrics,
    OperationTimer,
    Outcome,
    get_system_metrics,
    inventory_metrics,
)
from inventory_api.managers.rate_limiter import (
    close_limiter,
    limiter,
    rate_limit_exceeded_handler,
    read_limit,
    write_limit,
)

__all__ = [
    "InventoryMetrics",
    "OperationTimer",
    "Outcome",
    "close_limiter",
    "get_system_metrics",
    "inventory_metrics",
    "limiter",
    "rate_limit_exceeded_handler",
    "read_limit",
    "write_limit",
]
