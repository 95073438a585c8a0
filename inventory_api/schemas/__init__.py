from inventory_api.schemas.health import HealthCheckResponse, InventoryStatus
from inventory_api.schemas.items import DeleteResponse, Item, ItemList, ItemUpdate

__all__ = [
    "DeleteResponse",
    "HealthCheckResponse",
    "InventoryStatus",
    "Item",
    "ItemList",
    "ItemUpdate",
]
