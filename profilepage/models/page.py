"""Route input, view-model and page metadata models."""

from pydantic import BaseModel, Field, field_validator

from profilepage.models.post import Post
from profilepage.models.user import UserData


class ProfileParams(BaseModel):
    """Route parameters for a profile page."""

    username: str = Field(..., min_length=1)

    @field_validator("username", mode="before")
    @classmethod
    def _strip_handle(cls, value):
        if isinstance(value, str):
            return value.strip().lstrip("@")
        return value


class ProfileViewModel(BaseModel):
    """Data handed to the presentation layer for a single render."""

    user: UserData
    posts: list[Post] = []
    liked_posts: list[Post] = []
    is_following: bool = False


class Alternates(BaseModel):
    """Alternate URLs for the page head."""

    canonical: str


class PageMetadata(BaseModel):
    """Title and description used for page head generation."""

    title: str
    description: str
    alternates: Alternates | None = None
