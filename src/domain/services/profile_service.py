"""Profile service layer with business logic."""

from collections.abc import Callable

import structlog

from core.exceptions import (
    ProfileAlreadyExistsError,
    ProfileDeleteError,
    ProfileLookupError,
    ProfileNotFoundError,
    ProfileStorageError,
    ProfileUpdateError,
    StorageError,
)
from domain.entities.profile import PROFILE_ROLE, Profile
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class ProfileService:
    """Service layer for Profile business logic.

    Every method is a terminal error boundary: storage failures are logged
    and re-raised as the application exception that carries the HTTP
    response for that route.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def list_profiles(self) -> list[Profile]:
        """Get all profiles holding the profile role."""
        try:
            async with self._uow_factory() as uow:
                return await uow.profiles.get_all_by_role(PROFILE_ROLE)
        except StorageError as exc:
            logger.error("profile_list_failed", error=exc.message)
            raise ProfileStorageError(exc.message) from exc

    async def get(self, profile_id: str) -> Profile:
        """Get a profile by ID."""
        try:
            async with self._uow_factory() as uow:
                profile = await uow.profiles.get(profile_id)
        except StorageError as exc:
            logger.error("profile_get_failed", profile_id=profile_id, error=exc.message)
            raise ProfileStorageError(exc.message, field="error") from exc

        if profile is None:
            raise ProfileNotFoundError(profile_id)
        return profile

    async def create(self, profile: Profile) -> Profile:
        """Create a profile.

        Uniqueness comes from the primary key: a concurrent create with the
        same ID fails on insert instead of slipping past a separate lookup.
        """
        try:
            async with self._uow_factory() as uow:
                created = await uow.profiles.create(profile)
                await uow.commit()
        except ProfileAlreadyExistsError:
            logger.info("profile_already_exists", profile_id=profile.id)
            raise
        except StorageError as exc:
            logger.error("profile_create_failed", profile_id=profile.id, error=exc.message)
            raise ProfileStorageError(exc.message) from exc

        logger.info("profile_created", profile_id=created.id)
        return created

    async def update(self, profile: Profile) -> Profile:
        """Replace the mutable fields of an existing profile."""
        async with self._uow_factory() as uow:
            try:
                existing = await uow.profiles.get(profile.id)
            except StorageError as exc:
                logger.error("profile_lookup_failed", profile_id=profile.id, error=exc.message)
                raise ProfileLookupError(profile.id, exc.message) from exc

            if existing is None:
                raise ProfileLookupError(profile.id, f"Profile not found: {profile.id}")

            try:
                updated = await uow.profiles.update(profile)
                await uow.commit()
            except StorageError as exc:
                logger.error("profile_update_failed", profile_id=profile.id, error=exc.message)
                raise ProfileUpdateError(profile.id, exc.message) from exc

        if updated is None:
            raise ProfileLookupError(profile.id, f"Profile not found: {profile.id}")
        return updated

    async def delete(self, profile_id: str) -> Profile:
        """Delete a profile together with its cart and return the removed profile."""
        try:
            async with self._uow_factory() as uow:
                profile = await uow.profiles.get(profile_id)
                if profile is None:
                    raise ProfileNotFoundError(profile_id)

                cleared = await uow.cart.clear(profile_id)
                await uow.profiles.delete(profile_id)
                await uow.commit()
        except StorageError as exc:
            logger.error("profile_delete_failed", profile_id=profile_id, error=exc.message)
            raise ProfileDeleteError(profile_id, exc.message) from exc

        logger.info("profile_deleted", profile_id=profile_id, cart_items_removed=cleared)
        return profile
