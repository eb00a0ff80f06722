"""Integration tests for the SQLAlchemy repositories and unit of work."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from core.exceptions import ProfileAlreadyExistsError, StorageError
from domain.entities.cart import CartItem
from domain.entities.profile import Profile
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


def _profile(id: str = "00uhjfrwdWAQvD8JV4x6", name: str = "Frank Martinez") -> Profile:
    return Profile(id=id, email="frank@example.com", name=name)


class TestProfileRepository:
    @pytest.mark.asyncio
    async def test_create_and_get(self, session_factory: async_sessionmaker[AsyncSession]):
        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            await uow.profiles.create(_profile())
            await uow.commit()

        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            found = await uow.profiles.get("00uhjfrwdWAQvD8JV4x6")

        assert found is not None
        assert found.name == "Frank Martinez"
        assert found.role == 1

    @pytest.mark.asyncio
    async def test_duplicate_primary_key(
        self, session_factory: async_sessionmaker[AsyncSession]
    ):
        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            await uow.profiles.create(_profile())
            await uow.commit()

        with pytest.raises(ProfileAlreadyExistsError):
            async with SQLAlchemyUnitOfWork(session_factory) as uow:
                await uow.profiles.create(_profile(name="Impostor"))
                await uow.commit()

        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            found = await uow.profiles.get("00uhjfrwdWAQvD8JV4x6")

        assert found is not None
        assert found.name == "Frank Martinez"

    @pytest.mark.asyncio
    async def test_update_and_delete_missing(
        self, session_factory: async_sessionmaker[AsyncSession]
    ):
        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            assert await uow.profiles.update(_profile(id="ghost")) is None
            assert await uow.profiles.delete("ghost") is False

    @pytest.mark.asyncio
    async def test_uncommitted_work_is_rolled_back(
        self, session_factory: async_sessionmaker[AsyncSession]
    ):
        with pytest.raises(RuntimeError):
            async with SQLAlchemyUnitOfWork(session_factory) as uow:
                await uow.profiles.create(_profile())
                raise RuntimeError("boom")

        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            assert await uow.profiles.get("00uhjfrwdWAQvD8JV4x6") is None


class TestCartRepository:
    @pytest.mark.asyncio
    async def test_add_remove_clear(self, session_factory: async_sessionmaker[AsyncSession]):
        profile_id = "00uhjfrwdWAQvD8JV4x6"
        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            await uow.profiles.create(_profile(id=profile_id))
            for item_id in ("1", "1", "2"):
                await uow.cart.add(
                    CartItem(profile_id=profile_id, item_id=item_id, qty=1, order_type="pickup")
                )
            await uow.commit()

        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            assert await uow.cart.remove(profile_id, "1") == 2
            assert await uow.cart.remove(profile_id, "1") == 0
            assert await uow.cart.clear(profile_id) == 1
            await uow.commit()

        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            assert await uow.cart.get_for_profile(profile_id) == []


class TestStorageErrors:
    @pytest.mark.asyncio
    async def test_driver_errors_become_storage_errors(self):
        """Without tables every query fails inside the driver."""
        engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
        factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
        try:
            async with SQLAlchemyUnitOfWork(factory) as uow:
                with pytest.raises(StorageError) as exc_info:
                    await uow.profiles.get("anything")
        finally:
            await engine.dispose()

        assert "no such table" in exc_info.value.message
