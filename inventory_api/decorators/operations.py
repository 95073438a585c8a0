from collections.abc import Awaitable, Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from inventory_api.managers.metrics import InventoryMetrics, OperationTimer

P = ParamSpec("P")
R = TypeVar("R")


def track_operation(
    operation: str,
    metrics: InventoryMetrics | None = None,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """
    Record each call of an inventory route under ``operation``.

    Place it above ``@limiter.limit`` so rejected calls count as
    ``rate_limited``.

    Example:
        @track_operation("get_item")
        @limiter.limit(settings.RATE_LIMIT_READ)
        async def get_item(item_id: int, request: Request, response: Response) -> Item:
            ...
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            async with OperationTimer(operation, metrics):
                return await func(*args, **kwargs)

        return wrapper

    return decorator
