"""FastAPI web server for profile pages."""

from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import Depends, FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from profilepage import ProfilePage, PageConfig, __version__
from profilepage.core.metadata import NOT_FOUND_METADATA
from profilepage.core.presenter import metadata_to_dict, to_dict
from profilepage.logging import configure_logging
from profilepage.models.outcome import NotFound


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str


class ConfigResponse(BaseModel):
    """Current page configuration."""

    sqlite_path: str = Field(
        ...,
        description="SQLite database holding users, posts, likes and follows.",
        json_schema_extra={"example": ".profilepage.db"},
    )
    profile_path_prefix: str = Field(
        ...,
        description="Path under which profile pages are mounted. "
        "Used to build the canonical URL in page metadata.",
        json_schema_extra={"example": "/profile"},
    )
    log_level: str = Field(
        ...,
        description="Logging verbosity level. Options: 'DEBUG', 'INFO', 'WARNING', 'ERROR'.",
        json_schema_extra={"example": "INFO", "enum": ["DEBUG", "INFO", "WARNING", "ERROR"]},
    )
    log_format: str = Field(
        ...,
        description="Log output format. Options: 'console', 'json'.",
        json_schema_extra={"example": "console", "enum": ["console", "json"]},
    )


def get_config() -> PageConfig:
    """Configuration for the current request, read from the environment."""
    return PageConfig()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging once for the server process."""
    configure_logging(app.dependency_overrides.get(get_config, get_config)())
    yield


app = FastAPI(
    title="profilepage API",
    description="User profile pages and their metadata",
    version=__version__,
    lifespan=lifespan,
)


@app.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """Check API health status."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now().isoformat(),
    )


@app.get("/profile/{username}", tags=["Profiles"])
async def profile_page(
    username: str,
    viewer: str | None = Query(None, description="User id of the viewer, for follow status"),
    config: PageConfig = Depends(get_config),
):
    """
    Load a profile page view-model.

    Posts, liked posts and follow status are fetched concurrently; any of
    them that fails is returned empty (or false) instead of failing the page.
    """
    async with ProfilePage(config, viewer_id=viewer) as page:
        outcome = await page.load(username)

    if isinstance(outcome, NotFound):
        raise HTTPException(status_code=404, detail=NOT_FOUND_METADATA.description)

    return to_dict(outcome.view)


@app.get("/profile/{username}/metadata", tags=["Profiles"])
async def profile_metadata(
    username: str,
    config: PageConfig = Depends(get_config),
):
    """Page head metadata for a profile. Always succeeds."""
    async with ProfilePage(config) as page:
        metadata = await page.metadata(username)

    return metadata_to_dict(metadata)


@app.get(
    "/api/config",
    response_model=ConfigResponse,
    tags=["System"],
    summary="Get current configuration",
)
async def get_current_config(config: PageConfig = Depends(get_config)):
    """
    Get the active page configuration.

    **Configuration is set via environment variables** with the `PROFILEPAGE_` prefix:
    - `PROFILEPAGE_SQLITE_PATH=/var/lib/profiles.db`
    - `PROFILEPAGE_PROFILE_PATH_PREFIX=/u`
    - `PROFILEPAGE_LOG_FORMAT=json`
    """
    return ConfigResponse(
        sqlite_path=config.sqlite_path,
        profile_path_prefix=config.profile_path_prefix,
        log_level=config.log_level,
        log_format=config.log_format.value,
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
