"""Custom exceptions for the inventory store."""

from logging import getLogger

from starlette.status import HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND

from inventory_api.configs import ITEM_ID_EXISTS, ITEM_ID_NOT_FOUND
from inventory_api.errors.base import BaseAppError, create_exception_handler
from inventory_api.utils.helpers import file_logger

logger = file_logger(getLogger(__name__))


class InventoryError(BaseAppError):
    """Base exception for inventory operations."""

    def __init__(self, detail: str, status_code: int) -> None:
        super().__init__(detail, status_code)


class ItemNotFoundError(InventoryError):
    """Raised when an item id, or the name filter on it, does not match."""

    def __init__(self, detail: str = ITEM_ID_NOT_FOUND) -> None:
        super().__init__(detail, HTTP_404_NOT_FOUND)


class ItemConflictError(InventoryError):
    """Raised when creating an item under an id that is already taken."""

    def __init__(self, detail: str = ITEM_ID_EXISTS) -> None:
        super().__init__(detail, HTTP_400_BAD_REQUEST)


inventory_exception_handler = create_exception_handler(logger)
