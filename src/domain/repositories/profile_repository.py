"""Profile repository protocol."""

from typing import Protocol

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for Profile entities."""

    async def get(self, id: str) -> Profile | None:
        """Get a profile by ID."""
        ...

    async def get_all_by_role(self, role: int) -> list[Profile]:
        """Get all profiles holding the given role."""
        ...

    async def create(self, profile: Profile) -> Profile:
        """Insert a profile.

        Raises:
            ProfileAlreadyExistsError: If the ID is already taken
        """
        ...

    async def update(self, profile: Profile) -> Profile | None:
        """Replace email, name and avatar of an existing profile."""
        ...

    async def delete(self, id: str) -> bool:
        """Delete a profile and return success status."""
        ...
