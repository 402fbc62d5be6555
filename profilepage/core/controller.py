"""Page controller - resolves a profile route into a render outcome."""

from pydantic import TypeAdapter, ValidationError

from profilepage.config import PageConfig
from profilepage.core.metadata import generate_metadata
from profilepage.core.settle import settle_all
from profilepage.data.base import ProfileDataSource
from profilepage.data.sqlite_source import SQLiteDataSource
from profilepage.logging import get_logger
from profilepage.models.outcome import NotFound, PageOutcome, Rendered
from profilepage.models.page import PageMetadata, ProfileParams, ProfileViewModel
from profilepage.models.post import Post

_POSTS = TypeAdapter(list[Post])
_FLAG = TypeAdapter(bool)


class ProfilePage:
    """
    Loads everything a profile page needs for a single request.

    Logging is configured once by the hosting process (API lifespan or
    CLI command), not per page.

    Example:
        async with ProfilePage(viewer_id="u_42") as page:
            outcome = await page.load("alice1")
            if outcome.kind == "rendered":
                print(outcome.view.user.username)
    """

    def __init__(
        self,
        config: PageConfig | None = None,
        viewer_id: str | None = None,
        source: ProfileDataSource | None = None,
    ):
        """
        Initialize the page controller.

        Args:
            config: PageConfig instance, uses defaults if None
            viewer_id: User id of the current viewer, for follow status
            source: Data source to use instead of the configured SQLite one
        """
        self.config = config or PageConfig()
        self.viewer_id = viewer_id
        self._source = source
        self._owns_source = source is None
        self._log = get_logger("profile_page")

    @property
    def source(self) -> ProfileDataSource:
        if self._source is None:
            raise RuntimeError("ProfilePage used outside of 'async with'")
        return self._source

    async def __aenter__(self) -> "ProfilePage":
        """Async context manager entry - open the data source."""
        if self._source is None:
            self._source = SQLiteDataSource(self.config.sqlite_path, viewer_id=self.viewer_id)
            self._owns_source = True

        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - close a source opened here."""
        if self._owns_source and self._source is not None:
            await self._source.close()
            self._source = None

    async def load(self, params: ProfileParams | str) -> PageOutcome:
        """
        Resolve a profile route.

        Args:
            params: Route parameters or a bare username

        Returns:
            Rendered with the view-model, or NotFound when the profile is
            missing or could not be loaded
        """
        username = params if isinstance(params, str) else params.username
        self._log.info("profile_load_start", username=username)
        source = self.source

        if isinstance(params, str):
            try:
                params = ProfileParams(username=params)
            except ValidationError:
                self._log.info("profile_invalid_username", username=username)
                return NotFound(username=username)

        try:
            user = await source.get_profile_by_username(params.username)
            if user is None:
                self._log.info("profile_not_found", username=params.username)
                return NotFound(username=params.username)

            posts, liked_posts, following = await settle_all(
                source.get_user_posts(user.id),
                source.get_user_liked_posts(user.id),
                source.is_following(user.id),
            )
            posts = posts.validated(_POSTS)
            liked_posts = liked_posts.validated(_POSTS)
            following = following.validated(_FLAG)

            for field, settled in (
                ("posts", posts),
                ("liked_posts", liked_posts),
                ("is_following", following),
            ):
                if not settled.ok:
                    self._log.debug(
                        "secondary_fetch_failed",
                        username=user.username,
                        field=field,
                        error=str(settled.error),
                    )

            view = ProfileViewModel(
                user=user,
                posts=posts.value_or([]),
                liked_posts=liked_posts.value_or([]),
                is_following=following.value_or(False),
            )
        except Exception as e:
            self._log.error("profile_load_failed", username=username, error=str(e), exc_info=True)
            return NotFound(username=username)

        self._log.info(
            "profile_load_complete",
            username=user.username,
            posts_count=len(view.posts),
            liked_posts_count=len(view.liked_posts),
        )
        return Rendered(view=view)

    async def metadata(self, params: ProfileParams | str) -> PageMetadata:
        """Page head metadata for the route; never raises."""
        return await generate_metadata(
            self.source,
            params,
            path_prefix=self.config.profile_path_prefix,
        )
