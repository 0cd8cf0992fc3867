"""Post domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class Like:
    """A user's like on a post."""

    user_id: UUID
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass
class Comment:
    """A comment on a post, with a snapshot of its author's name and avatar."""

    user_id: UUID
    text: str
    id: UUID = field(default_factory=uuid4)
    name: str | None = None
    avatar: str | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass
class Post:
    """Domain entity for a Post.

    Likes are ordered newest-first; comments in the order they were made.
    """

    user_id: UUID
    text: str
    id: UUID = field(default_factory=uuid4)
    name: str | None = None
    avatar: str | None = None
    likes: list[Like] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def is_owned_by(self, user_id: UUID) -> bool:
        return self.user_id == user_id

    def has_liked(self, user_id: UUID) -> bool:
        """Check whether the user already liked this post."""
        return any(like.user_id == user_id for like in self.likes)

    def add_like(self, user_id: UUID) -> Like:
        """Record a like at the front of the list."""
        like = Like(user_id=user_id)
        self.likes.insert(0, like)
        return like

    def remove_like(self, user_id: UUID) -> bool:
        """Remove the user's like. Returns False if the user never liked it."""
        for index, like in enumerate(self.likes):
            if like.user_id == user_id:
                del self.likes[index]
                return True
        return False

    def add_comment(self, comment: Comment) -> None:
        self.comments.append(comment)

    def find_comment(self, comment_id: UUID) -> Comment | None:
        return next((c for c in self.comments if c.id == comment_id), None)

    def remove_comment(self, comment_id: UUID) -> bool:
        """Remove a comment by id. Returns False if absent."""
        for index, comment in enumerate(self.comments):
            if comment.id == comment_id:
                del self.comments[index]
                return True
        return False
