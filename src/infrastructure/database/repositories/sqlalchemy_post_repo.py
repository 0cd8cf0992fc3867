"""SQLAlchemy implementation of Post repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.post import Comment, Like, Post
from infrastructure.database.models import CommentModel, LikeModel, PostModel


class SQLAlchemyPostRepository:
    """SQLAlchemy implementation of IPostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Post | None:
        """Get a post by ID, with its likes and comments."""
        model = await self._get_model(id)
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Post]:
        """Get all posts, newest first."""
        stmt = select(PostModel).order_by(PostModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, post: Post) -> Post:
        """Create a new post."""
        model = PostModel(
            id=post.id,
            user_id=post.user_id,
            text=post.text,
            name=post.name,
            avatar=post.avatar,
            created_at=post.created_at,
            likes=[],
            comments=[],
        )
        self._sync_children(model, post)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, post: Post) -> Post:
        """Update a post, syncing its likes and comments lists."""
        model = await self._get_model(post.id)

        if not model:
            raise ValueError(f"Post {post.id} not found")

        model.text = post.text
        model.name = post.name
        model.avatar = post.avatar
        self._sync_children(model, post)

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete a post (likes and comments go with it)."""
        model = await self._get_model(id)
        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def _get_model(self, id: UUID) -> PostModel | None:
        stmt = select(PostModel).where(PostModel.id == id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _sync_children(self, model: PostModel, entity: Post) -> None:
        """Make the model's child rows mirror the entity lists, in order.

        Rows missing from the entity are dropped as orphans.
        """
        existing_likes = {row.id: row for row in model.likes}
        likes = []
        for position, like in enumerate(entity.likes):
            row = existing_likes.get(like.id) or LikeModel(
                id=like.id,
                user_id=like.user_id,
                created_at=like.created_at,
            )
            row.position = position
            likes.append(row)
        model.likes = likes

        existing_comments = {row.id: row for row in model.comments}
        comments = []
        for position, comment in enumerate(entity.comments):
            row = existing_comments.get(comment.id) or CommentModel(
                id=comment.id,
                user_id=comment.user_id,
                text=comment.text,
                name=comment.name,
                avatar=comment.avatar,
                created_at=comment.created_at,
            )
            row.position = position
            comments.append(row)
        model.comments = comments

    def _to_entity(self, model: PostModel) -> Post:
        """Convert ORM model to domain entity."""
        return Post(
            id=model.id,
            user_id=model.user_id,
            text=model.text,
            name=model.name,
            avatar=model.avatar,
            likes=[
                Like(id=row.id, user_id=row.user_id, created_at=row.created_at)
                for row in model.likes
            ],
            comments=[
                Comment(
                    id=row.id,
                    user_id=row.user_id,
                    text=row.text,
                    name=row.name,
                    avatar=row.avatar,
                    created_at=row.created_at,
                )
                for row in model.comments
            ],
            created_at=model.created_at,
        )
