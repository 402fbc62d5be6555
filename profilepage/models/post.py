"""Post data model."""

from datetime import datetime

from pydantic import BaseModel


class Post(BaseModel):
    """Represents a post authored by a user."""

    id: str
    author_id: str
    content: str
    image: str | None = None
    created_at: datetime
