"""Pydantic schemas for shopping cart API."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class CartItemCreate(BaseModel):
    """Fields read from an add-to-cart body.

    Values are taken as sent. The service decides on truthiness alone, and
    only converts ``qty`` and ``order_type`` when the row is built.
    """

    item_id: Any = None
    qty: Any = None
    order_type: Any = None

    @classmethod
    def from_body(cls, body: Any) -> "CartItemCreate":
        """Read the fields from a JSON object; anything else has none."""
        if isinstance(body, dict):
            return cls.model_validate(body)
        return cls()


class CartItemResponse(BaseModel):
    """Schema for a cart item."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "profile_id": "00uhjfrwdWAQvD8JV4x6",
                "item_id": "42",
                "qty": 2,
                "order_type": "delivery",
            }
        },
    )

    id: int
    profile_id: str
    item_id: str
    qty: int
    order_type: str
