"""Profile domain entity."""

from dataclasses import dataclass, field
from datetime import datetime

# Role marker for end-user profiles; other roles share the profiles table.
PROFILE_ROLE = 1

# ID assigned when a request body omits one.
UNASSIGNED_PROFILE_ID = "0"


@dataclass
class Profile:
    """Domain entity for a user profile.

    ``id`` is the identity provider's subject ID and never changes after
    creation.
    """

    id: str
    email: str
    name: str
    avatar_url: str | None = None
    role: int = PROFILE_ROLE
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at
