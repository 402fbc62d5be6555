"""Page head metadata for profile routes."""

from pydantic import ValidationError

from profilepage.data.base import ProfileDataSource
from profilepage.logging import get_logger
from profilepage.models.page import Alternates, PageMetadata, ProfileParams

NOT_FOUND_METADATA = PageMetadata(
    title="Profile Not Found",
    description="The requested profile does not exist.",
)

FALLBACK_METADATA = PageMetadata(
    title="Profile",
    description="User profile page",
)

_log = get_logger("metadata")


async def generate_metadata(
    source: ProfileDataSource,
    params: ProfileParams | str,
    path_prefix: str = "/profile",
) -> PageMetadata:
    """
    Build title, description and canonical URL for a profile route.

    Never raises: lookup failures are logged and answered with generic
    fallback metadata.

    Args:
        source: Data source used to look up the profile
        params: Route parameters or a bare username
        path_prefix: Path under which profile pages are mounted

    Returns:
        PageMetadata for the route
    """
    username = params if isinstance(params, str) else params.username
    if isinstance(params, str):
        try:
            params = ProfileParams(username=params)
        except ValidationError:
            _log.info("metadata_invalid_username", username=username)
            return NOT_FOUND_METADATA.model_copy()

    try:
        user = await source.get_profile_by_username(params.username)
        if user is None:
            return NOT_FOUND_METADATA.model_copy()

        return PageMetadata(
            title=f"{user.display_name}'s Profile",
            description=user.bio or f"View {user.username}'s profile on our platform.",
            alternates=Alternates(
                canonical=f"{path_prefix.rstrip('/')}/{user.username}",
            ),
        )
    except Exception as e:
        _log.error("metadata_failed", username=username, error=str(e), exc_info=True)
        return FALLBACK_METADATA.model_copy()
