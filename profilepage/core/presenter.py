"""Hand-off of page data to the presentation layer."""

from pathlib import Path

from profilepage.models.outcome import NotFound, PageOutcome
from profilepage.models.page import PageMetadata, ProfileViewModel


def to_dict(view: ProfileViewModel) -> dict:
    """
    Convert a view-model to a JSON-compatible dictionary.

    Args:
        view: ProfileViewModel to convert

    Returns:
        Dictionary representation
    """
    return view.model_dump(mode="json")


def to_json(view: ProfileViewModel, indent: int = 2) -> str:
    """
    Convert a view-model to a JSON string.

    Args:
        view: ProfileViewModel to serialize
        indent: JSON indentation level

    Returns:
        JSON string
    """
    return view.model_dump_json(indent=indent)


def save_json(
    view: ProfileViewModel,
    filepath: str | Path,
    indent: int = 2,
) -> Path:
    """
    Save a view-model to a JSON file.

    Args:
        view: ProfileViewModel to save
        filepath: Output file path
        indent: JSON indentation level

    Returns:
        Path to saved file
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(view.model_dump_json(indent=indent), encoding="utf-8")
    return path


def load_json(filepath: str | Path) -> ProfileViewModel:
    """Load a view-model previously written by save_json."""
    return ProfileViewModel.model_validate_json(Path(filepath).read_text(encoding="utf-8"))


def metadata_to_dict(metadata: PageMetadata) -> dict:
    """Metadata as a dictionary, leaving out alternates when there are none."""
    return metadata.model_dump(mode="json", exclude_none=True)


def outcome_to_dict(outcome: PageOutcome) -> dict:
    """
    Convert a page outcome for transport.

    Rendered outcomes carry the view-model; NotFound carries the username.
    """
    if isinstance(outcome, NotFound):
        return outcome.model_dump(mode="json")
    return {"kind": outcome.kind, "view": to_dict(outcome.view)}
