"""Repository layer for inventory storage."""

from inventory_api.repositories.inventory import InventoryStore, inventory_store

__all__ = ["InventoryStore", "inventory_store"]
