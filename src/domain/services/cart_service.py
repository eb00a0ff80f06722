"""Shopping cart service layer."""

from collections.abc import Callable
from typing import Any

import structlog

from core.exceptions import (
    CartItemNotFoundError,
    CartStorageError,
    InvalidCartItemError,
    StorageError,
)
from domain.entities.cart import CartItem
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class CartService:
    """Service layer for shopping cart operations."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_cart(self, profile_id: str) -> list[CartItem]:
        """Get the items in a profile's cart."""
        try:
            async with self._uow_factory() as uow:
                return await uow.cart.get_for_profile(profile_id)
        except StorageError as exc:
            logger.error("cart_get_failed", profile_id=profile_id, error=exc.message)
            raise CartStorageError("getting cart") from exc

    async def add_item(
        self,
        profile_id: str,
        item_id: Any,
        qty: Any,
        order_type: Any,
    ) -> CartItem:
        """Add an item to a profile's cart.

        All three fields must be truthy, so ``qty=0`` is rejected along with
        missing values. Types are not checked here: a ``qty`` the cart table
        cannot hold fails like any other write.
        """
        if not (item_id and qty and order_type):
            raise InvalidCartItemError()

        try:
            item = CartItem(
                profile_id=profile_id,
                item_id=str(item_id),
                qty=int(qty),
                order_type=str(order_type),
            )
        except (TypeError, ValueError) as exc:
            logger.error("cart_add_failed", profile_id=profile_id, error=str(exc))
            raise CartStorageError("adding to cart") from exc

        try:
            async with self._uow_factory() as uow:
                created = await uow.cart.add(item)
                await uow.commit()
                return created
        except StorageError as exc:
            logger.error(
                "cart_add_failed",
                profile_id=profile_id,
                item_id=item.item_id,
                error=exc.message,
            )
            raise CartStorageError("adding to cart") from exc

    async def remove_item(self, profile_id: str, item_id: str) -> int:
        """Remove an item from a profile's cart.

        Raises:
            CartItemNotFoundError: If nothing matched
        """
        try:
            async with self._uow_factory() as uow:
                count = await uow.cart.remove(profile_id, item_id)
                await uow.commit()
        except StorageError as exc:
            logger.error(
                "cart_remove_failed",
                profile_id=profile_id,
                item_id=item_id,
                error=exc.message,
            )
            raise CartStorageError("removing from cart") from exc

        if count == 0:
            raise CartItemNotFoundError(profile_id, item_id)
        return count
