"""Abstract data source interface."""

from abc import ABC, abstractmethod

from profilepage.models.post import Post
from profilepage.models.user import UserData


class ProfileDataSource(ABC):
    """
    Abstract base class for profile data access.

    The viewer, on whose behalf follow status is answered, is bound when
    the source is constructed.
    """

    def __init__(self, viewer_id: str | None = None):
        self.viewer_id = viewer_id

    @abstractmethod
    async def get_profile_by_username(self, username: str) -> UserData | None:
        """
        Look up a user by username.

        Args:
            username: Handle without the leading @

        Returns:
            UserData or None if no such user
        """
        ...

    @abstractmethod
    async def get_user_posts(self, user_id: str) -> list[Post]:
        """Posts authored by the user, newest first."""
        ...

    @abstractmethod
    async def get_user_liked_posts(self, user_id: str) -> list[Post]:
        """Posts the user has liked, most recent like first."""
        ...

    @abstractmethod
    async def is_following(self, user_id: str) -> bool:
        """Whether the bound viewer follows the user."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Cleanup connections and resources."""
        ...

    async def __aenter__(self) -> "ProfileDataSource":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - cleanup."""
        await self.close()
