"""Unit tests for presentation hand-off utilities."""

import json

import pytest

from profilepage.core.presenter import (
    load_json,
    metadata_to_dict,
    outcome_to_dict,
    save_json,
    to_dict,
    to_json,
)
from profilepage.models.outcome import NotFound, Rendered
from profilepage.models.page import Alternates, PageMetadata, ProfileViewModel


@pytest.fixture
def view(alice, make_post) -> ProfileViewModel:
    return ProfileViewModel(
        user=alice,
        posts=[make_post("p1")],
        liked_posts=[],
        is_following=True,
    )


class TestViewModelExport:
    """View-model serialization."""

    def test_to_dict_has_expected_keys(self, view):
        d = to_dict(view)
        assert set(d) == {"user", "posts", "liked_posts", "is_following"}

    def test_to_dict_dates_are_strings(self, view):
        d = to_dict(view)
        assert isinstance(d["posts"][0]["created_at"], str)

    def test_to_json_is_valid_json(self, view):
        parsed = json.loads(to_json(view))
        assert parsed["user"]["username"] == "alice1"
        assert parsed["is_following"] is True

    def test_save_json_creates_parent_dirs(self, view, tmp_path):
        path = save_json(view, tmp_path / "out" / "alice1.json")
        assert path.exists()
        assert load_json(path).user.id == "u_alice"


class TestMetadataExport:
    """Metadata serialization."""

    def test_omits_missing_alternates(self):
        meta = PageMetadata(title="Profile", description="User profile page")
        assert metadata_to_dict(meta) == {"title": "Profile", "description": "User profile page"}

    def test_includes_alternates(self):
        meta = PageMetadata(
            title="Alice's Profile",
            description="bio",
            alternates=Alternates(canonical="/profile/alice1"),
        )
        assert metadata_to_dict(meta)["alternates"] == {"canonical": "/profile/alice1"}


class TestOutcomeExport:
    """Outcome serialization."""

    def test_not_found(self):
        assert outcome_to_dict(NotFound(username="ghost")) == {
            "kind": "not_found",
            "username": "ghost",
        }

    def test_rendered(self, view):
        d = outcome_to_dict(Rendered(view=view))
        assert d["kind"] == "rendered"
        assert d["view"]["user"]["username"] == "alice1"
