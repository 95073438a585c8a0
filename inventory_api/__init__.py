"""Inventory API - in-memory inventory CRUD service built on FastAPI."""

from inventory_api.main import app

__all__ = ["app"]
