from inventory_api.decorators.operations import track_operation

__all__ = ["track_operation"]
