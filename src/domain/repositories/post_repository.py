"""Post repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.post import Post


class IPostRepository(Protocol):
    """Repository interface for Post aggregates (post + likes + comments)."""

    async def get(self, id: UUID) -> Post | None:
        """Get a post by ID."""
        ...

    async def get_all(self) -> list[Post]:
        """Get all posts, newest first."""
        ...

    async def create(self, post: Post) -> Post:
        """Create a new post."""
        ...

    async def update(self, post: Post) -> Post:
        """Persist text and the likes/comments lists of a post."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a post and return success status."""
        ...
