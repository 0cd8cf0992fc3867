"""Profile repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for Profile aggregates.

    A profile is loaded and saved together with its experience and
    education lists.
    """

    async def get_by_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user."""
        ...

    async def get_by_handle(self, handle: str) -> Profile | None:
        """Get a profile by its handle."""
        ...

    async def get_all(self) -> list[Profile]:
        """Get all profiles."""
        ...

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        ...

    async def update(self, profile: Profile) -> Profile:
        """Persist scalar fields and both sub-entry lists of a profile."""
        ...

    async def delete_for_user(self, user_id: UUID) -> bool:
        """Delete the profile owned by a user."""
        ...
