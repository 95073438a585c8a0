from inventory_api.routes.items import router as items_router

__all__ = ["items_router"]
