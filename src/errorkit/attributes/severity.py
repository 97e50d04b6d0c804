"""Severity attribute: how bad an issue is for the system."""

from __future__ import annotations

from enum import StrEnum

from errorkit.attribute import LeveledErrorAttribute
from errorkit.query import attribute_of, attributes_of


class Severity(LeveledErrorAttribute, StrEnum):
    """Error severity in your system, ordered ``info < warning < error < critical``.

    The set is small on purpose. Severity is not priority (see ``Rank``) and
    not the user's perspective (see ``UserLevel``): invalid user input is
    typically ``info`` for the system but ``UserLevel.ERROR`` for the user.
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"

    @property
    def type_description(self) -> str:
        return "Severity"


def severity_of(error: BaseException) -> Severity | None:
    """Return latest attached severity, if any."""
    entry = attribute_of(error, Severity)
    return entry[0] if entry is not None else None


def highest_severity(error: BaseException) -> Severity | None:
    """Return highest severity ever attached, if any."""
    return max((attr for attr, _ in attributes_of(error, Severity)), default=None)
