"""API request and response models."""

from typing import Optional

from pydantic import BaseModel, Field


class PickingItem(BaseModel):
    """One row of the picking list."""

    product_name: str = Field(..., description="Physical product name")
    quantity: int = Field(..., ge=1, description="Units needed across all orders")

    model_config = {
        "json_schema_extra": {
            "example": {"product_name": "Scented Candle", "quantity": 4},
        }
    }


class ErrorResponse(BaseModel):
    """Error response model."""

    message: str
    error: str
    detail: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    services: dict[str, str]
