"""
Shared pytest fixtures for bloglist tests.

API tests run against a real container whose repositories are the
in-memory fakes below, so no MongoDB server is needed.
"""
from typing import Dict, Iterable, List, Optional
from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from bson.errors import InvalidId

from bloglist.core.config import Settings
from bloglist.core.security import TokenService
from bloglist.di.base_container import BaseContainer
from bloglist.di.providers import AuthProvider, PostProvider, SecurityProvider, StatisticsProvider
from bloglist.domain.exceptions import NotFoundError
from bloglist.domain.models.post import Post
from bloglist.domain.models.user import User
from bloglist.domain.repositories.post_repository import PostRepository
from bloglist.domain.repositories.user_repository import UserRepository


TEST_SECRET = "test_jwt_secret"


def _valid_id(value: Optional[str]) -> bool:
    try:
        ObjectId(value)
        return True
    except (InvalidId, TypeError):
        return False


class InMemoryUserRepository(UserRepository):
    """Dict-backed UserRepository that hands out ObjectId-style IDs"""

    def __init__(self) -> None:
        self.users: Dict[str, User] = {}

    async def find_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.username == username), None)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    async def find_by_ids(self, user_ids: Iterable[str]) -> List[User]:
        return [self.users[i] for i in user_ids if i in self.users]

    async def find_all(self) -> List[User]:
        return list(self.users.values())

    async def save(self, user: User) -> User:
        user = User(id=str(ObjectId()), username=user.username, name=user.name, password_hash=user.password_hash)
        self.users[user.id] = user
        return user


class InMemoryPostRepository(PostRepository):
    """Dict-backed PostRepository; keeps insertion order like a collection scan"""

    def __init__(self) -> None:
        self.posts: Dict[str, Post] = {}

    async def find_all(self) -> List[Post]:
        return list(self.posts.values())

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        if not _valid_id(post_id):
            return None
        return self.posts.get(post_id)

    async def save(self, post: Post) -> Post:
        if post.id is None:
            post = Post(
                id=str(ObjectId()),
                title=post.title,
                url=post.url,
                author=post.author,
                likes=post.likes,
                owner_user_id=post.owner_user_id,
            )
        elif post.id not in self.posts:
            raise NotFoundError("blog not found")
        self.posts[post.id] = post
        return post

    async def delete(self, post_id: str) -> bool:
        return self.posts.pop(post_id, None) is not None


@pytest.fixture
def mock_settings():
    """Settings double with test-friendly values (cheap bcrypt rounds)."""
    mock = MagicMock(spec=Settings)
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_bloglist"
    mock.jwt_secret_key = TEST_SECRET
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 60
    mock.password_hash_rounds = 4
    mock.log_level = "INFO"
    mock.cors_allow_origins = ["http://localhost:3000"]
    mock.require_owner_for_update = False
    mock.allow_anonymous_posts = False
    return mock


@pytest.fixture
def token_service():
    return TokenService(secret_key=TEST_SECRET, algorithm="HS256", expire_minutes=60)


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def post_repo():
    return InMemoryPostRepository()


@pytest.fixture
def container(mock_settings, user_repo, post_repo):
    """Container wired like DIContainer, but with in-memory repositories."""
    c = BaseContainer()
    c.register_singleton(Settings, mock_settings)
    SecurityProvider.register(c)
    c.register_singleton(UserRepository, user_repo)
    c.register_singleton(PostRepository, post_repo)
    AuthProvider.register(c)
    PostProvider.register(c)
    StatisticsProvider.register(c)
    return c


@pytest.fixture
def client(container, monkeypatch):
    """TestClient for the full app, resolving dependencies from the test container."""
    from fastapi.testclient import TestClient
    from bloglist.main import app

    monkeypatch.setattr("bloglist.di.container._container", container)
    with TestClient(app) as c:
        yield c
