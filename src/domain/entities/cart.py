"""Shopping cart domain entity."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class CartItem:
    """An item placed in a profile's shopping cart."""

    profile_id: str
    item_id: str
    qty: int
    order_type: str
    id: int | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)
