"""Post service layer with business logic."""

from typing import Any, Callable, List, Mapping
from uuid import UUID

import structlog
from sqlalchemy.exc import IntegrityError

from core.exceptions import (
    AlreadyLikedError,
    CommentNotFoundError,
    NotAuthorizedError,
    NotLikedError,
    PostNotFoundError,
    ValidationFailedError,
)
from domain.entities.post import Comment, Post
from domain.repositories.unit_of_work import IUnitOfWork
from domain.validation import text_value, validate_post_input
from infrastructure.database.errors import is_unique_violation

logger = structlog.get_logger()


class PostService:
    """Service layer for Post business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_all(self) -> List[Post]:
        """Get all posts, newest first."""
        async with self._uow_factory() as uow:
            return await uow.posts.get_all()

    async def get_by_id(self, post_id: UUID) -> Post:
        async with self._uow_factory() as uow:
            post = await uow.posts.get(post_id)
        if not post:
            raise PostNotFoundError("No post found with that ID")
        return post

    async def create(self, user_id: UUID, data: Mapping[str, Any]) -> Post:
        """Create a post. Name and avatar default to the author's account."""
        errors, is_valid = validate_post_input(data)
        if not is_valid:
            raise ValidationFailedError(errors)

        async with self._uow_factory() as uow:
            name, avatar = await self._author_snapshot(uow, user_id, data)
            post = Post(
                user_id=user_id,
                text=text_value(data, "text"),
                name=name,
                avatar=avatar,
            )
            created = await uow.posts.create(post)
            await uow.commit()

        logger.info("post_created", post_id=str(created.id), user_id=str(user_id))
        return created

    async def delete(self, post_id: UUID, user_id: UUID) -> None:
        """Delete a post. Only its author may do so."""
        async with self._uow_factory() as uow:
            post = await uow.posts.get(post_id)
            if not post:
                raise PostNotFoundError()
            if not post.is_owned_by(user_id):
                raise NotAuthorizedError()

            await uow.posts.delete(post_id)
            await uow.commit()

        logger.info("post_deleted", post_id=str(post_id), user_id=str(user_id))

    async def like(self, post_id: UUID, user_id: UUID) -> Post:
        async with self._uow_factory() as uow:
            post = await uow.posts.get(post_id)
            if not post:
                raise PostNotFoundError()
            if post.has_liked(user_id):
                raise AlreadyLikedError()

            post.add_like(user_id)
            try:
                updated = await uow.posts.update(post)
                await uow.commit()
            except IntegrityError as exc:
                await uow.rollback()
                # A concurrent like from the same user got there first
                if is_unique_violation(exc):
                    raise AlreadyLikedError() from exc
                raise
            return updated

    async def unlike(self, post_id: UUID, user_id: UUID) -> Post:
        async with self._uow_factory() as uow:
            post = await uow.posts.get(post_id)
            if not post:
                raise PostNotFoundError()
            if not post.remove_like(user_id):
                raise NotLikedError()

            updated = await uow.posts.update(post)
            await uow.commit()
            return updated

    async def add_comment(self, post_id: UUID, user_id: UUID, data: Mapping[str, Any]) -> Post:
        errors, is_valid = validate_post_input(data)
        if not is_valid:
            raise ValidationFailedError(errors)

        async with self._uow_factory() as uow:
            post = await uow.posts.get(post_id)
            if not post:
                raise PostNotFoundError()

            name, avatar = await self._author_snapshot(uow, user_id, data)
            post.add_comment(
                Comment(
                    user_id=user_id,
                    text=text_value(data, "text"),
                    name=name,
                    avatar=avatar,
                )
            )
            updated = await uow.posts.update(post)
            await uow.commit()
            return updated

    async def remove_comment(self, post_id: UUID, comment_id: UUID, user_id: UUID) -> Post:
        """Remove a comment. Allowed for the comment's author and the post's author."""
        async with self._uow_factory() as uow:
            post = await uow.posts.get(post_id)
            if not post:
                raise PostNotFoundError()

            comment = post.find_comment(comment_id)
            if not comment:
                raise CommentNotFoundError()
            if comment.user_id != user_id and not post.is_owned_by(user_id):
                raise NotAuthorizedError()

            post.remove_comment(comment_id)
            updated = await uow.posts.update(post)
            await uow.commit()
            return updated

    @staticmethod
    async def _author_snapshot(
        uow: IUnitOfWork, user_id: UUID, data: Mapping[str, Any]
    ) -> tuple[str | None, str | None]:
        """Name and avatar from the request, falling back to the user record."""
        name = text_value(data, "name") or None
        avatar = text_value(data, "avatar") or None
        if name and avatar:
            return name, avatar

        user = await uow.users.get(user_id)
        if user:
            name = name or user.name
            avatar = avatar or user.avatar
        return name, avatar
