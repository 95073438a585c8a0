from pydantic import BaseModel, ConfigDict, Field


# Pydantic models
class Item(BaseModel):
    """Item model. Assignments are validated, so a stored item stays fully formed."""

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(..., description="Item name", examples=["Milk"])
    price: float = Field(..., description="Item price", examples=[3.99])
    description: str | None = Field(None, description="Item description", examples=["1 litre"])


class ItemUpdate(BaseModel):
    """Item update model. Fields left as None keep their stored value."""

    name: str | None = Field(None, description="Item name", examples=["Oat milk"])
    price: float | None = Field(None, description="Item price", examples=[4.49])
    description: str | None = None


class ItemList(BaseModel):
    """Every stored item."""

    items: list[Item]


class DeleteResponse(BaseModel):
    """Response model for a deleted item."""

    model_config = ConfigDict(populate_by_name=True)

    success: str = Field(..., alias="Success", examples=["Item deleted!"])
