"""Trace attribute: breadcrumb of the code locations an error passed."""

from __future__ import annotations

from errorkit.attribute import ErrorAttribute
from errorkit.provenance import SourceProvenance, capture_provenance
from errorkit.query import attributes_of


class Trace(ErrorAttribute):
    """Records the location (with column) where it is constructed."""

    __slots__ = ("_provenance",)

    def __init__(self, *, stacklevel: int = 1) -> None:
        self._provenance = capture_provenance(stacklevel, with_column=True)

    @property
    def provenance(self) -> SourceProvenance:
        return self._provenance

    @property
    def type_description(self) -> str:
        return "Trace"

    @property
    def value_description(self) -> list[str]:
        return [str(self._provenance)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Trace):
            return NotImplemented
        return self._provenance == other._provenance

    def __hash__(self) -> int:
        return hash(self._provenance)

    def __repr__(self) -> str:
        return f"Trace({self._provenance})"


def trace_of(error: BaseException) -> list[SourceProvenance]:
    """Return traced locations, most recent first."""
    return [attr.provenance for attr, _ in attributes_of(error, Trace)]
