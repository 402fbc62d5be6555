"""Pydantic models for profilepage."""

from profilepage.models.user import UserData
from profilepage.models.post import Post
from profilepage.models.page import (
    Alternates,
    PageMetadata,
    ProfileParams,
    ProfileViewModel,
)
from profilepage.models.outcome import NotFound, PageOutcome, Rendered

__all__ = [
    "UserData",
    "Post",
    "ProfileParams",
    "ProfileViewModel",
    "PageMetadata",
    "Alternates",
    "Rendered",
    "NotFound",
    "PageOutcome",
]
