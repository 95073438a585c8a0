from inventory_api.configs.settings import (
    ENV_FILE,
    ITEM_DELETED,
    ITEM_ID_EXISTS,
    ITEM_ID_MISSING,
    ITEM_ID_NOT_FOUND,
    ITEM_NAME_NOT_FOUND,
    LimiterConfig,
    Settings,
    settings,
)

__all__ = [
    "ENV_FILE",
    "ITEM_DELETED",
    "ITEM_ID_EXISTS",
    "ITEM_ID_MISSING",
    "ITEM_ID_NOT_FOUND",
    "ITEM_NAME_NOT_FOUND",
    "LimiterConfig",
    "Settings",
    "settings",
]
