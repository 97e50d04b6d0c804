"""User level attribute: how an error should look to the user."""

from __future__ import annotations

from enum import StrEnum

from errorkit.attribute import LeveledErrorAttribute
from errorkit.query import attribute_of


class UserLevel(LeveledErrorAttribute, StrEnum):
    """Error level from the user's perspective, ordered ``info < warning < error``."""

    # E.g. "Cancelled".
    INFO = "info"
    # E.g. "Saved, but...".
    WARNING = "warning"
    ERROR = "error"

    @property
    def type_description(self) -> str:
        return "User level"


def user_level_of(error: BaseException) -> UserLevel | None:
    """Return latest attached user level, if any."""
    entry = attribute_of(error, UserLevel)
    return entry[0] if entry is not None else None
