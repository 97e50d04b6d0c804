"""Rank attribute: priority for addressing an issue."""

from __future__ import annotations

from enum import StrEnum

from errorkit.attribute import LeveledErrorAttribute
from errorkit.query import attribute_of, attributes_of


class Rank(LeveledErrorAttribute, StrEnum):
    """Importance of addressing an issue, regardless of its severity.

    An ``error`` in a minor service may rank ``low`` while a ``warning`` in
    billing ranks ``urgent``.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"

    @property
    def type_description(self) -> str:
        return "Rank"


def rank_of(error: BaseException) -> Rank | None:
    """Return latest attached rank, if any."""
    entry = attribute_of(error, Rank)
    return entry[0] if entry is not None else None


def highest_rank(error: BaseException) -> Rank | None:
    """Return highest rank ever attached, if any."""
    return max((attr for attr, _ in attributes_of(error, Rank)), default=None)
