"""Localization attribute: user-facing title and message.

Unlike messages fixed when an exception is constructed, a localization can
be attached anywhere between the raise site and the handler, and a later one
overrides an earlier one to better reflect the context the error reached.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from errorkit.attribute import ErrorAttribute
from errorkit.query import attribute_of


class Localization(ErrorAttribute, BaseModel):
    """Localized user message with optional title."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    title: str | None = None
    message: str

    @property
    def type_description(self) -> str:
        return "Localization"

    @property
    def value_description(self) -> list[str]:
        result: list[str] = []
        if self.title is not None:
            result.append(f"Title: {self.title}")
        result.append(f"Message: {self.message}")
        return result


def localization_of(error: BaseException) -> Localization | None:
    """Return latest attached localization, if any."""
    entry = attribute_of(error, Localization)
    return entry[0] if entry is not None else None
