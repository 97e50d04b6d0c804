"""Debug info attribute: arbitrary diagnostic values."""

from __future__ import annotations

from typing import Any

from errorkit.attribute import ErrorAttribute
from errorkit.provenance import SourceProvenance
from errorkit.query import attributes_of


class DebugInfo(ErrorAttribute):
    """Arbitrary values kept for debugging, e.g. ``DebugInfo(request_id, payload)``."""

    __slots__ = ("_values",)

    def __init__(self, *values: Any) -> None:
        self._values = values

    @property
    def values(self) -> tuple[Any, ...]:
        return self._values

    @property
    def type_description(self) -> str:
        return "Debug info"

    @property
    def value_description(self) -> list[str]:
        return [str(value) for value in self._values]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DebugInfo):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"DebugInfo{self._values!r}"


def debug_info_of(
    error: BaseException,
) -> list[tuple[tuple[Any, ...], SourceProvenance]]:
    """Return every attached debug value group with its provenance, latest first."""
    return [
        (attr.values, provenance)
        for attr, provenance in attributes_of(error, DebugInfo)
    ]
