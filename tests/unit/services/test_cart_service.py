"""Unit tests for CartService."""

import pytest

from core.exceptions import (
    CartItemNotFoundError,
    CartStorageError,
    InvalidCartItemError,
    StorageError,
)
from domain.entities.cart import CartItem
from domain.services.cart_service import CartService
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def service(uow: FakeUnitOfWork) -> CartService:
    return CartService(lambda: uow)


class TestGetCart:
    @pytest.mark.asyncio
    async def test_returns_items(self, service: CartService, uow: FakeUnitOfWork, profile_id: str):
        item = CartItem(profile_id=profile_id, item_id="7", qty=1, order_type="pickup", id=1)
        uow.cart.get_for_profile.return_value = [item]

        result = await service.get_cart(profile_id)

        assert result == [item]
        uow.cart.get_for_profile.assert_called_once_with(profile_id)

    @pytest.mark.asyncio
    async def test_storage_failure_hides_details(
        self, service: CartService, uow: FakeUnitOfWork, profile_id: str
    ):
        uow.cart.get_for_profile.side_effect = StorageError("relation does not exist")

        with pytest.raises(CartStorageError) as exc_info:
            await service.get_cart(profile_id)

        assert exc_info.value.status_code == 500
        assert exc_info.value.payload == {
            "message": "A server error has occurred while getting cart"
        }


class TestAddItem:
    @pytest.mark.asyncio
    async def test_adds_item_with_path_profile(
        self, service: CartService, uow: FakeUnitOfWork, profile_id: str
    ):
        uow.cart.add.side_effect = lambda item: item

        result = await service.add_item(profile_id, item_id=42, qty=3, order_type="delivery")

        added = uow.cart.add.call_args.args[0]
        assert added.profile_id == profile_id
        assert added.item_id == "42"
        assert added.qty == 3
        assert added.order_type == "delivery"
        assert result is added
        assert uow.committed

    @pytest.mark.parametrize(
        "item_id, qty, order_type",
        [
            (None, 1, "delivery"),
            ("42", None, "delivery"),
            ("42", 0, "delivery"),
            ("42", 1, None),
            ("42", 1, ""),
        ],
    )
    @pytest.mark.asyncio
    async def test_rejects_falsy_fields(
        self,
        service: CartService,
        uow: FakeUnitOfWork,
        profile_id: str,
        item_id: str | None,
        qty: int | None,
        order_type: str | None,
    ):
        with pytest.raises(InvalidCartItemError) as exc_info:
            await service.add_item(profile_id, item_id=item_id, qty=qty, order_type=order_type)

        assert exc_info.value.status_code == 400
        assert exc_info.value.payload == "Must include item_id, qty, and order_type to add to cart"
        uow.cart.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_truthy_values_of_any_type_are_stored(
        self, service: CartService, uow: FakeUnitOfWork, profile_id: str
    ):
        uow.cart.add.side_effect = lambda item: item

        result = await service.add_item(profile_id, item_id=3, qty="2", order_type=5)

        assert result.qty == 2
        assert result.order_type == "5"
        assert uow.committed

    @pytest.mark.parametrize("qty", ["abc", {"n": 1}, [1]])
    @pytest.mark.asyncio
    async def test_qty_the_table_cannot_hold(
        self, service: CartService, uow: FakeUnitOfWork, profile_id: str, qty: object
    ):
        with pytest.raises(CartStorageError) as exc_info:
            await service.add_item(profile_id, item_id="1", qty=qty, order_type="pickup")

        assert exc_info.value.status_code == 500
        assert exc_info.value.payload == {
            "message": "A server error has occurred while adding to cart"
        }
        uow.cart.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_storage_failure(
        self, service: CartService, uow: FakeUnitOfWork, profile_id: str
    ):
        uow.cart.add.side_effect = StorageError("foreign key violation")

        with pytest.raises(CartStorageError) as exc_info:
            await service.add_item(profile_id, item_id="1", qty=1, order_type="pickup")

        assert exc_info.value.message == "A server error has occurred while adding to cart"


class TestRemoveItem:
    @pytest.mark.asyncio
    async def test_removes_item(self, service: CartService, uow: FakeUnitOfWork, profile_id: str):
        uow.cart.remove.return_value = 1

        assert await service.remove_item(profile_id, "42") == 1

        uow.cart.remove.assert_called_once_with(profile_id, "42")
        assert uow.committed

    @pytest.mark.asyncio
    async def test_raises_when_nothing_removed(
        self, service: CartService, uow: FakeUnitOfWork, profile_id: str
    ):
        uow.cart.remove.return_value = 0

        with pytest.raises(CartItemNotFoundError) as exc_info:
            await service.remove_item(profile_id, "42")

        assert exc_info.value.status_code == 404
        assert exc_info.value.payload == {
            "message": f"no items with id 42 in profile {profile_id}'s shopping cart"
        }

    @pytest.mark.asyncio
    async def test_storage_failure(
        self, service: CartService, uow: FakeUnitOfWork, profile_id: str
    ):
        uow.cart.remove.side_effect = StorageError("deadlock detected")

        with pytest.raises(CartStorageError) as exc_info:
            await service.remove_item(profile_id, "42")

        assert exc_info.value.message == "A server error has occurred while removing from cart"
