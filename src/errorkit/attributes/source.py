"""Source attribute: which high-level component the error emerged from."""

from __future__ import annotations

from enum import StrEnum

from errorkit.attribute import EnumErrorAttribute
from errorkit.query import attribute_of


class Source(EnumErrorAttribute, StrEnum):
    """Component an error originates from."""

    # Logic error, bug, or failed internal operation.
    INTERNAL = "internal"
    # Third-party API or service failure.
    EXTERNAL = "external"
    # Invalid user input or request data.
    INPUT = "input"
    # Host failure, resource exhaustion, environment configuration.
    SYSTEM = "system"
    # Network outage, connectivity or protocol error.
    IO = "io"

    @property
    def type_description(self) -> str:
        return "Source"


def source_of(error: BaseException) -> Source | None:
    """Return latest attached source, if any."""
    entry = attribute_of(error, Source)
    return entry[0] if entry is not None else None
