"""SQLAlchemy implementation of Profile repository."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import ProfileAlreadyExistsError
from domain.entities.profile import Profile
from infrastructure.database.errors import storage_errors
from infrastructure.database.models import ProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @storage_errors
    async def get(self, id: str) -> Profile | None:
        """Get a profile by ID."""
        model = await self._get_model(id)
        return self._to_entity(model) if model else None

    @storage_errors
    async def get_all_by_role(self, role: int) -> list[Profile]:
        """Get all profiles holding the given role."""
        stmt = select(ProfileModel).where(ProfileModel.role == role)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    @storage_errors
    async def create(self, profile: Profile) -> Profile:
        """Insert a profile, relying on the primary key for uniqueness."""
        model = self._to_model(profile)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            raise ProfileAlreadyExistsError(profile.id) from exc
        await self._session.refresh(model)
        return self._to_entity(model)

    @storage_errors
    async def update(self, profile: Profile) -> Profile | None:
        """Replace email, name and avatar of an existing profile."""
        model = await self._get_model(profile.id)
        if not model:
            return None

        model.email = profile.email
        model.name = profile.name
        model.avatar_url = profile.avatar_url

        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    @storage_errors
    async def delete(self, id: str) -> bool:
        """Delete a profile."""
        model = await self._get_model(id)
        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def _get_model(self, id: str) -> ProfileModel | None:
        stmt = select(ProfileModel).where(ProfileModel.id == id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            email=model.email,
            name=model.name,
            avatar_url=model.avatar_url,
            role=model.role,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Profile) -> ProfileModel:
        """Convert domain entity to ORM model."""
        return ProfileModel(
            id=entity.id,
            email=entity.email,
            name=entity.name,
            avatar_url=entity.avatar_url,
            role=entity.role,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
