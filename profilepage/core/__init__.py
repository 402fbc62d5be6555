"""Profile page controller, metadata and presentation hand-off."""

from profilepage.core.controller import ProfilePage
from profilepage.core.metadata import generate_metadata
from profilepage.core.settle import Settled, settle_all

__all__ = ["ProfilePage", "generate_metadata", "Settled", "settle_all"]
