"""Shopping cart repository protocol."""

from typing import Protocol

from domain.entities.cart import CartItem


class ICartRepository(Protocol):
    """Repository interface for CartItem entities."""

    async def get_for_profile(self, profile_id: str) -> list[CartItem]:
        """Get every item in a profile's cart."""
        ...

    async def add(self, item: CartItem) -> CartItem:
        """Add an item to a cart."""
        ...

    async def remove(self, profile_id: str, item_id: str) -> int:
        """Remove an item from a cart and return the number of rows deleted."""
        ...

    async def clear(self, profile_id: str) -> int:
        """Empty a profile's cart and return the number of rows deleted."""
        ...
