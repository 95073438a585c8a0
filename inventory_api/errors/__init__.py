from inventory_api.errors.base import BaseAppError, create_exception_handler
from inventory_api.errors.inventory import (
    InventoryError,
    ItemConflictError,
    ItemNotFoundError,
    inventory_exception_handler,
)
from inventory_api.errors.validation import validation_exception_handler

__all__ = [
    "BaseAppError",
    "InventoryError",
    "ItemConflictError",
    "ItemNotFoundError",
    "create_exception_handler",
    "inventory_exception_handler",
    "validation_exception_handler",
]
