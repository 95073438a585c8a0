from pydantic import BaseModel, Field


class InventoryStatus(BaseModel):
    """Inventory summary nested in the health check."""

    items: int = Field(description="Number of stored items")


class HealthCheckResponse(BaseModel):
    """Health check response model."""

    version: str = Field(description="API version")
    status: str = Field(description="Overall health status")
    timestamp: str = Field(description="Current timestamp")
    inventory: InventoryStatus = Field(description="Inventory store status")
