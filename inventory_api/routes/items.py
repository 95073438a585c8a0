from logging import getLogger

from fastapi import APIRouter, Query, Request, Response
from fastapi.responses import ORJSONResponse

from inventory_api.decorators import track_operation
from inventory_api.managers import read_limit, write_limit
from inventory_api.repositories import inventory_store
from inventory_api.schemas import DeleteResponse, Item, ItemList, ItemUpdate
from inventory_api.utils.helpers import file_logger

logger = file_logger(getLogger(__name__))

router = APIRouter(tags=["items"])

_NOT_FOUND = {
    404: {
        "description": "Item not found",
        "content": {"application/json": {"example": {"detail": "Item ID not found."}}},
    },
}
_EXISTS = {
    400: {
        "description": "Item already exists",
        "content": {"application/json": {"example": {"detail": "Item ID already exists"}}},
    },
}


# --- Routes ---
@router.get(
    "/get-item/{item_id}",
    summary="Get specific item",
    response_class=ORJSONResponse,
    response_model=Item,
    responses=_NOT_FOUND,
)
@track_operation("get_item")
@read_limit
async def get_item(
    item_id: int,
    request: Request,
    response: Response,
    name: str | None = Query(None, description="Only match when the item has this name"),
) -> Item:
    """
    Get specific item.

    When ``name`` is given the stored item must carry that name,
    otherwise the lookup fails with 404.
    """
    logger.info(f"Fetching item {item_id}")
    return inventory_store.get_item(item_id, name)


@router.get(
    "/all-items",
    summary="Get all items",
    response_class=ORJSONResponse,
    response_model=ItemList,
)
@track_operation("list_items")
@read_limit
async def get_all_items(request: Request, response: Response) -> ItemList:
    """Get all items."""
    logger.info("Fetching all items")
    return ItemList(items=inventory_store.list_items())


@router.post(
    "/create-item/{item_id}",
    summary="Create new item",
    response_class=ORJSONResponse,
    response_model=Item,
    responses=_EXISTS,
)
@track_operation("create_item")
@write_limit
async def create_item(item_id: int, item: Item, request: Request, response: Response) -> Item:
    """
    Create new item.

    Fails with 400 when the id is already taken.
    """
    logger.info(f"Creating item {item_id}: {item.name}")
    return inventory_store.create_item(item_id, item)


@router.put(
    "/update-item/{item_id}",
    summary="Update specific item",
    response_class=ORJSONResponse,
    response_model=Item,
    responses=_NOT_FOUND,
)
@track_operation("update_item")
@write_limit
async def update_item(
    item_id: int,
    item_update: ItemUpdate,
    request: Request,
    response: Response,
) -> Item:
    """
    Update item.

    Only fields sent with a non-null value are overwritten.
    """
    logger.info(f"Updating item {item_id}")
    return inventory_store.update_item(item_id, item_update)


@router.delete(
    "/delete-item/{item_id}",
    summary="Delete specific item",
    response_class=ORJSONResponse,
    response_model=DeleteResponse,
    responses=_NOT_FOUND,
)
@track_operation("delete_item")
@write_limit
async def delete_item(item_id: int, request: Request, response: Response) -> dict[str, str]:
    """Delete item."""
    logger.info(f"Deleting item {item_id}")
    return inventory_store.delete_item(item_id)
