"""In-memory inventory store keyed by integer item id."""

from logging import getLogger

from inventory_api.configs import (
    ITEM_DELETED,
    ITEM_ID_EXISTS,
    ITEM_ID_MISSING,
    ITEM_ID_NOT_FOUND,
    ITEM_NAME_NOT_FOUND,
)
from inventory_api.errors import ItemConflictError, ItemNotFoundError
from inventory_api.schemas import Item, ItemUpdate
from inventory_api.utils.helpers import file_logger

logger = file_logger(getLogger(__name__))


class InventoryStore:
    """
    Process-lifetime mapping of item id to Item.

    The store starts empty and is never persisted. Every id it holds maps
    to a fully formed Item; create rejects duplicates, update merges
    non-null fields into the stored item, delete removes the entry.

    Attributes:
        _items: Backing dictionary, keyed by item id.
    """

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: dict[int, Item] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def get_item(self, item_id: int, name: str | None = None) -> Item:
        """
        Get an item by id, optionally checking its name.

        Args:
            item_id: Item id.
            name: When given, must equal the stored item's name.

        Returns:
            Item: The stored item.

        Raises:
            ItemNotFoundError: The id is absent, or the name does not match.
        """
        if item_id not in self._items:
            raise ItemNotFoundError(ITEM_ID_NOT_FOUND)

        item = self._items[item_id]
        if name is not None and item.name != name:
            raise ItemNotFoundError(ITEM_NAME_NOT_FOUND)
        return item

    def create_item(self, item_id: int, item: Item) -> Item:
        """
        Store a new item under an unused id.

        Args:
            item_id: Item id.
            item: Item to store.

        Returns:
            Item: The stored item.

        Raises:
            ItemConflictError: The id is already taken.
        """
        if item_id in self._items:
            raise ItemConflictError(ITEM_ID_EXISTS)

        self._items[item_id] = item
        logger.debug(f"Stored item {item_id}, inventory size {len(self._items)}")
        return item

    def update_item(self, item_id: int, item_update: ItemUpdate) -> Item:
        """
        Overwrite the non-null fields of an existing item in place.

        Args:
            item_id: Item id.
            item_update: Partial item; None fields are ignored.

        Returns:
            Item: The updated item.

        Raises:
            ItemNotFoundError: The id is absent.
        """
        if item_id not in self._items:
            raise ItemNotFoundError(ITEM_ID_MISSING)

        existing_item = self._items[item_id]
        for field, value in item_update.model_dump(exclude_none=True).items():
            setattr(existing_item, field, value)
        return existing_item

    def delete_item(self, item_id: int) -> dict[str, str]:
        """
        Remove an item.

        Args:
            item_id: Item id.

        Returns:
            dict[str, str]: Success message.

        Raises:
            ItemNotFoundError: The id is absent.
        """
        if item_id not in self._items:
            raise ItemNotFoundError(ITEM_ID_MISSING)

        del self._items[item_id]
        return dict(ITEM_DELETED)

    def list_items(self) -> list[Item]:
        """Return a snapshot of every stored item."""
        return list(self._items.values())

    def clear(self) -> int:
        """Remove every item and return how many were removed."""
        count = len(self._items)
        self._items.clear()
        logger.info(f"Cleared {count} items from inventory")
        return count


# In-memory database shared by the routes
inventory_store = InventoryStore()
