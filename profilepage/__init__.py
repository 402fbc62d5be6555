"""profilepage - user profile page controller."""

from profilepage.models.user import UserData
from profilepage.models.post import Post
from profilepage.models.page import PageMetadata, ProfileParams, ProfileViewModel
from profilepage.models.outcome import NotFound, Rendered
from profilepage.config import PageConfig
from profilepage.core.controller import ProfilePage
from profilepage.core.metadata import generate_metadata
from profilepage.core.presenter import to_json, to_dict, save_json, load_json
from profilepage.data.sqlite_source import SQLiteDataSource

__version__ = "0.1.0"

__all__ = [
    # Main interface
    "ProfilePage",
    "PageConfig",
    "generate_metadata",
    "SQLiteDataSource",
    # Models
    "UserData",
    "Post",
    "ProfileParams",
    "ProfileViewModel",
    "PageMetadata",
    "Rendered",
    "NotFound",
    # Presentation
    "to_json",
    "to_dict",
    "save_json",
    "load_json",
    "__version__",
]
