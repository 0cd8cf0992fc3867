"""Unit tests for domain entities."""

from datetime import date
from uuid import uuid4

from core.security import gravatar_url, hash_password, verify_password
from domain.entities.post import Comment, Post
from domain.entities.profile import Experience, Profile, SocialLinks
from domain.entities.user import User


class TestUser:
    def test_email_is_normalized(self):
        user = User(name="Jane", email="  Jane@DevMail.IO ", password_hash="x")

        assert user.email == "jane@devmail.io"


class TestPost:
    def test_likes_newest_first(self):
        post = Post(user_id=uuid4(), text="Hello developers out there")
        first, second = uuid4(), uuid4()

        post.add_like(first)
        post.add_like(second)

        assert [like.user_id for like in post.likes] == [second, first]
        assert post.has_liked(first)

    def test_remove_like_only_when_present(self):
        post = Post(user_id=uuid4(), text="Hello developers out there")
        user_id = uuid4()

        assert post.remove_like(user_id) is False
        post.add_like(user_id)
        assert post.remove_like(user_id) is True
        assert post.likes == []

    def test_comments(self):
        post = Post(user_id=uuid4(), text="Hello developers out there")
        comment = Comment(user_id=uuid4(), text="Great post, thanks")

        post.add_comment(comment)

        assert post.find_comment(comment.id) is comment
        assert post.remove_comment(uuid4()) is False
        assert post.remove_comment(comment.id) is True
        assert post.find_comment(comment.id) is None


class TestProfile:
    def test_experience_front_insert_and_removal(self):
        profile = Profile(user_id=uuid4(), handle="jdoe", status="Developer")
        old = Experience(title="Intern", company="Acme", from_date=date(2018, 1, 1))
        new = Experience(title="Engineer", company="Initech", from_date=date(2020, 3, 1))

        profile.add_experience(old)
        profile.add_experience(new)

        assert profile.experience == [new, old]
        assert profile.remove_experience(old.id) is True
        assert profile.remove_experience(old.id) is False
        assert profile.experience == [new]

    def test_social_links_drop_empty(self):
        links = SocialLinks(twitter="https://twitter.com/jdoe", youtube=None)

        assert links.to_dict() == {"twitter": "https://twitter.com/jdoe"}


class TestSecurity:
    def test_password_hash_round_trip(self):
        hashed = hash_password("secret123")

        assert verify_password("secret123", hashed)
        assert not verify_password("secret124", hashed)

    def test_malformed_hash_does_not_verify(self):
        assert verify_password("secret123", "not-a-bcrypt-hash") is False

    def test_gravatar_is_case_insensitive(self):
        assert gravatar_url("Jane@DevMail.io") == gravatar_url("jane@devmail.io")
        assert "s=200" in gravatar_url("jane@devmail.io")
        assert "d=mm" in gravatar_url("jane@devmail.io")
