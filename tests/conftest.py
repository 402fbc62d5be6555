"""Shared fixtures - JSON community fixture and in-process sources, no network."""

import json
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

from profilepage.data.base import ProfileDataSource
from profilepage.data.sqlite_source import SQLiteDataSource
from profilepage.models.post import Post
from profilepage.models.user import UserData


FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def community_path() -> Path:
    return FIXTURES_DIR / "community.json"


@pytest.fixture
def community(community_path) -> dict:
    """Users, posts, likes and follows from the community fixture."""
    return json.loads(community_path.read_text(encoding="utf-8"))


@pytest.fixture
def alice() -> UserData:
    return UserData(id="u_alice", name="Alice", username="alice1", bio="Gardener and amateur astronomer.")


@pytest.fixture
def make_post():
    """Build a Post with sensible defaults."""

    def _make(post_id: str, author_id: str = "u_alice", content: str = "hello") -> Post:
        return Post(
            id=post_id,
            author_id=author_id,
            content=content,
            created_at=datetime(2026, 6, 1, tzinfo=timezone.utc),
        )

    return _make


@pytest.fixture
def make_source(alice, make_post):
    """Build a mocked data source; ``user=None`` means the profile is missing."""

    def _make(user=alice, posts=None, liked_posts=None, following=True) -> AsyncMock:
        source = AsyncMock(spec=ProfileDataSource)
        source.get_profile_by_username.return_value = user
        source.get_user_posts.return_value = posts if posts is not None else [make_post("p1")]
        source.get_user_liked_posts.return_value = (
            liked_posts if liked_posts is not None else [make_post("p9", author_id="u_bob")]
        )
        source.is_following.return_value = following
        return source

    return _make


@pytest.fixture
def db_path(tmp_path) -> Path:
    return tmp_path / "profiles.db"


@pytest_asyncio.fixture
async def seeded_db(db_path, community) -> Path:
    """SQLite database loaded with the community fixture."""
    async with SQLiteDataSource(str(db_path)) as source:
        await source.load_fixture(community)
    return db_path
