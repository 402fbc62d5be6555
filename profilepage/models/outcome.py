"""Terminal outcomes of a profile page request."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from profilepage.models.page import ProfileViewModel


class Rendered(BaseModel):
    """The profile exists and the view-model is ready to render."""

    kind: Literal["rendered"] = "rendered"
    view: ProfileViewModel


class NotFound(BaseModel):
    """The profile does not exist or could not be loaded."""

    kind: Literal["not_found"] = "not_found"
    username: str


PageOutcome = Annotated[Union[Rendered, NotFound], Field(discriminator="kind")]
