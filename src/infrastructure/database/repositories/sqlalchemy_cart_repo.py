"""SQLAlchemy implementation of the shopping cart repository."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.cart import CartItem
from infrastructure.database.errors import storage_errors
from infrastructure.database.models import CartItemModel


class SQLAlchemyCartRepository:
    """SQLAlchemy implementation of ICartRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @storage_errors
    async def get_for_profile(self, profile_id: str) -> list[CartItem]:
        """Get every item in a profile's cart, oldest first."""
        stmt = (
            select(CartItemModel)
            .where(CartItemModel.profile_id == profile_id)
            .order_by(CartItemModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    @storage_errors
    async def add(self, item: CartItem) -> CartItem:
        """Add an item to a cart."""
        model = CartItemModel(
            profile_id=item.profile_id,
            item_id=item.item_id,
            qty=item.qty,
            order_type=item.order_type,
            created_at=item.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    @storage_errors
    async def remove(self, profile_id: str, item_id: str) -> int:
        """Remove an item from a cart."""
        stmt = delete(CartItemModel).where(
            CartItemModel.profile_id == profile_id,
            CartItemModel.item_id == item_id,
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount or 0  # type: ignore[attr-defined]

    @storage_errors
    async def clear(self, profile_id: str) -> int:
        """Remove every item from a profile's cart."""
        stmt = delete(CartItemModel).where(CartItemModel.profile_id == profile_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount or 0  # type: ignore[attr-defined]

    def _to_entity(self, model: CartItemModel) -> CartItem:
        """Convert ORM model to domain entity."""
        return CartItem(
            id=model.id,
            profile_id=model.profile_id,
            item_id=model.item_id,
            qty=model.qty,
            order_type=model.order_type,
            created_at=model.created_at,
        )
