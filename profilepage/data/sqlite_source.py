"""SQLite-backed data source."""

import asyncio
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import aiosqlite

from profilepage.data.base import ProfileDataSource
from profilepage.exceptions import DataSourceError
from profilepage.models.post import Post
from profilepage.models.user import UserData


SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id TEXT PRIMARY KEY,
    username TEXT NOT NULL UNIQUE,
    name TEXT,
    bio TEXT
);
CREATE TABLE IF NOT EXISTS posts (
    id TEXT PRIMARY KEY,
    author_id TEXT NOT NULL REFERENCES users(id),
    content TEXT NOT NULL,
    image TEXT,
    created_at REAL NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_posts_author ON posts(author_id, created_at);
CREATE TABLE IF NOT EXISTS likes (
    user_id TEXT NOT NULL REFERENCES users(id),
    post_id TEXT NOT NULL REFERENCES posts(id),
    created_at REAL NOT NULL,
    PRIMARY KEY (user_id, post_id)
);
CREATE TABLE IF NOT EXISTS follows (
    follower_id TEXT NOT NULL REFERENCES users(id),
    following_id TEXT NOT NULL REFERENCES users(id),
    PRIMARY KEY (follower_id, following_id)
);
"""

POST_COLUMNS = "p.id, p.author_id, p.content, p.image, p.created_at"


def _to_timestamp(value: datetime | float | str | None) -> float:
    if value is None:
        return time.time()
    if isinstance(value, datetime):
        return value.timestamp()
    if isinstance(value, str):
        return datetime.fromisoformat(value.replace("Z", "+00:00")).timestamp()
    return float(value)


def _row_to_post(row) -> Post:
    post_id, author_id, content, image, created_at = row
    return Post(
        id=post_id,
        author_id=author_id,
        content=content,
        image=image,
        created_at=datetime.fromtimestamp(created_at, tz=timezone.utc),
    )


class SQLiteDataSource(ProfileDataSource):
    """Profile data stored in a local SQLite database using aiosqlite."""

    def __init__(self, db_path: str = ".profilepage.db", viewer_id: str | None = None):
        """
        Initialize SQLite data source.

        Args:
            db_path: Path to SQLite database file
            viewer_id: User id of the current viewer, if any
        """
        super().__init__(viewer_id)
        self.db_path = Path(db_path)
        self._db: aiosqlite.Connection | None = None
        self._lock = asyncio.Lock()

    async def _ensure_db(self) -> aiosqlite.Connection:
        """Ensure database connection and schema exist."""
        async with self._lock:
            if self._db is None:
                db = None
                try:
                    db = await aiosqlite.connect(self.db_path)
                    await db.executescript(SCHEMA)
                    await db.commit()
                except aiosqlite.Error as e:
                    if db is not None:
                        await db.close()
                    raise DataSourceError(f"Cannot open {self.db_path}: {e}") from e
                self._db = db
        return self._db

    async def _fetchall(self, sql: str, params: tuple) -> list:
        db = await self._ensure_db()
        try:
            async with db.execute(sql, params) as cursor:
                return list(await cursor.fetchall())
        except aiosqlite.Error as e:
            raise DataSourceError(str(e)) from e

    async def _write(self, sql: str, params: tuple) -> None:
        db = await self._ensure_db()
        try:
            await db.execute(sql, params)
            await db.commit()
        except aiosqlite.Error as e:
            raise DataSourceError(str(e)) from e

    async def get_profile_by_username(self, username: str) -> UserData | None:
        rows = await self._fetchall(
            "SELECT id, name, username, bio FROM users WHERE username = ?",
            (username,),
        )
        if not rows:
            return None
        user_id, name, handle, bio = rows[0]
        return UserData(id=user_id, name=name, username=handle, bio=bio)

    async def get_user_posts(self, user_id: str) -> list[Post]:
        rows = await self._fetchall(
            f"SELECT {POST_COLUMNS} FROM posts p "
            "WHERE p.author_id = ? ORDER BY p.created_at DESC",
            (user_id,),
        )
        return [_row_to_post(row) for row in rows]

    async def get_user_liked_posts(self, user_id: str) -> list[Post]:
        rows = await self._fetchall(
            f"SELECT {POST_COLUMNS} FROM likes l JOIN posts p ON p.id = l.post_id "
            "WHERE l.user_id = ? ORDER BY l.created_at DESC",
            (user_id,),
        )
        return [_row_to_post(row) for row in rows]

    async def is_following(self, user_id: str) -> bool:
        if not self.viewer_id:
            return False
        rows = await self._fetchall(
            "SELECT 1 FROM follows WHERE follower_id = ? AND following_id = ?",
            (self.viewer_id, user_id),
        )
        return bool(rows)

    async def add_user(
        self,
        user_id: str,
        username: str,
        name: str | None = None,
        bio: str | None = None,
    ) -> UserData:
        """Insert or replace a user."""
        await self._write(
            "INSERT OR REPLACE INTO users (id, username, name, bio) VALUES (?, ?, ?, ?)",
            (user_id, username, name, bio),
        )
        return UserData(id=user_id, name=name, username=username, bio=bio)

    async def add_post(
        self,
        post_id: str,
        author_id: str,
        content: str,
        image: str | None = None,
        created_at: datetime | float | str | None = None,
    ) -> None:
        """Insert or replace a post."""
        await self._write(
            "INSERT OR REPLACE INTO posts (id, author_id, content, image, created_at) "
            "VALUES (?, ?, ?, ?, ?)",
            (post_id, author_id, content, image, _to_timestamp(created_at)),
        )

    async def add_like(
        self,
        user_id: str,
        post_id: str,
        created_at: datetime | float | str | None = None,
    ) -> None:
        """Record that a user liked a post."""
        await self._write(
            "INSERT OR REPLACE INTO likes (user_id, post_id, created_at) VALUES (?, ?, ?)",
            (user_id, post_id, _to_timestamp(created_at)),
        )

    async def add_follow(self, follower_id: str, following_id: str) -> None:
        """Record that one user follows another."""
        await self._write(
            "INSERT OR IGNORE INTO follows (follower_id, following_id) VALUES (?, ?)",
            (follower_id, following_id),
        )

    async def load_fixture(self, data: dict[str, Any]) -> dict[str, int]:
        """
        Load users, posts, likes and follows from a fixture mapping.

        Args:
            data: Mapping with optional "users", "posts", "likes" and
                "follows" lists of records

        Returns:
            Number of records loaded per section
        """
        counts = {}
        for user in data.get("users", []):
            await self.add_user(user["id"], user["username"], user.get("name"), user.get("bio"))
        counts["users"] = len(data.get("users", []))

        for post in data.get("posts", []):
            await self.add_post(
                post["id"],
                post["author_id"],
                post["content"],
                post.get("image"),
                post.get("created_at"),
            )
        counts["posts"] = len(data.get("posts", []))

        for like in data.get("likes", []):
            await self.add_like(like["user_id"], like["post_id"], like.get("created_at"))
        counts["likes"] = len(data.get("likes", []))

        for follow in data.get("follows", []):
            await self.add_follow(follow["follower_id"], follow["following_id"])
        counts["follows"] = len(data.get("follows", []))

        return counts

    async def close(self) -> None:
        """Close database connection."""
        if self._db is not None:
            await self._db.close()
            self._db = None
