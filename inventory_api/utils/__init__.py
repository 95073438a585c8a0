"""Utility helper functions."""

from inventory_api.utils.helpers import file_logger, get_summary, host, today_str

__all__ = [
    "file_logger",
    "get_summary",
    "host",
    "today_str",
]
