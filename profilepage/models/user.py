"""User data model."""

from pydantic import BaseModel


class UserData(BaseModel):
    """Read-only projection of a user record."""

    id: str
    name: str | None = None
    username: str
    bio: str | None = None

    @property
    def display_name(self) -> str:
        """Name when set, otherwise the username."""
        return self.name or self.username
