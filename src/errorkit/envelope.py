"""AttributedError envelope: base error + identity + attribute entries.

An envelope is created by the first ``attach`` on a raw error and never
mutated afterwards. Re-attaching produces a new envelope that shares the
base, identity and prior entries of the previous one. Envelopes are never
nested: the base of an envelope is always a non-enveloped error.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable
from typing import Any, NamedTuple, Protocol, runtime_checkable

from errorkit.attribute import ErrorAttribute
from errorkit.identity import generate_error_id
from errorkit.provenance import SourceProvenance, capture_provenance

_LOGGER = logging.getLogger(__name__)


@runtime_checkable
class IdentifiableError(Protocol):
    """Error exposing a stable, hashable identity."""

    @property
    def error_id(self) -> Hashable:
        """Stable identity of this error occurrence."""
        ...


class AttributeEntry(NamedTuple):
    """One attached attribute and where it was attached."""

    attribute: ErrorAttribute
    provenance: SourceProvenance


class AttributedBaseException(BaseException):
    """Immutable container of attributes attached to a base error.

    Used directly for bases that are not ``Exception`` (``KeyboardInterrupt``,
    ``SystemExit``, ``asyncio.CancelledError``...) so ``except Exception``
    keeps letting them through. Entries are stored oldest first; query
    helpers read them newest first.
    """

    def __init__(
        self,
        base: BaseException,
        error_id: Hashable,
        entries: Iterable[AttributeEntry] = (),
    ) -> None:
        """Create envelope. Use ``attach`` or ``identifiable`` instead.

        Args:
            base: Original, non-enveloped error.
            error_id: Identity shared by the whole chain.
            entries: Attribute entries, oldest first.
        """
        super().__init__(base)
        self._base = base
        self._error_id = error_id
        self._entries = tuple(entries)
        self.__cause__ = base

    @property
    def base(self) -> BaseException:
        """Original error."""
        return self._base

    @property
    def error_id(self) -> Hashable:
        """Identity shared by every envelope of this chain."""
        return self._error_id

    @property
    def entries(self) -> tuple[AttributeEntry, ...]:
        """Attached entries, oldest first."""
        return self._entries

    def __str__(self) -> str:
        # Deferred: localization accessors depend on this module.
        from errorkit.attributes.localization import localization_of

        localization = localization_of(self)
        if localization is not None:
            return localization.message
        return str(self._base)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(base={self._base!r}, "
            f"error_id={self._error_id!r}, entries={len(self._entries)})"
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._base, self._error_id, self._entries))


class AttributedError(AttributedBaseException, Exception):
    """Envelope of an ``Exception`` base; catchable as ``Exception``."""


def _envelope(
    base: BaseException,
    error_id: Hashable,
    entries: Iterable[AttributeEntry] = (),
) -> AttributedBaseException:
    """Build envelope whose exception family matches the base."""
    if isinstance(base, Exception):
        return AttributedError(base, error_id, entries)
    return AttributedBaseException(base, error_id, entries)


def wrap(
    error: BaseException,
    attributes: Iterable[ErrorAttribute],
    provenance: SourceProvenance,
) -> AttributedBaseException:
    """Attach a group of attributes sharing one provenance.

    Identity is resolved once per chain: an envelope keeps its identity, an
    ``IdentifiableError`` lends its own, anything else gets a fresh one.

    Args:
        error: Raw error or existing envelope. Never mutated.
        attributes: Attributes in call order; the last one ranks most recent.
        provenance: Location recorded for every attribute of the group.

    Returns:
        New envelope with the group as its most recent entries.

    Raises:
        TypeError: If an attribute does not implement ``ErrorAttribute``.
        IdentityGenerationError: If a fresh identity is needed and the
            identity source fails.
    """
    group: list[AttributeEntry] = []
    for attribute in attributes:
        if not isinstance(attribute, ErrorAttribute):
            raise TypeError(
                f"Expected ErrorAttribute, got {type(attribute).__name__}"
            )
        group.append(AttributeEntry(attribute, provenance))

    if isinstance(error, AttributedBaseException):
        return _envelope(error.base, error.error_id, error.entries + tuple(group))
    if isinstance(error, IdentifiableError):
        _LOGGER.debug(
            "Seeding attributed %s with its own identity", type(error).__name__
        )
        return _envelope(error, error.error_id, group)
    error_id = generate_error_id()
    _LOGGER.debug(
        "Seeding attributed %s with generated identity %s",
        type(error).__name__,
        error_id,
    )
    return _envelope(error, error_id, group)


def attach(
    error: BaseException, *attributes: ErrorAttribute, stacklevel: int = 1
) -> AttributedBaseException:
    """Attach attributes to an error, recording the caller's file, line and column.

    ``raise attach(exc, Severity.WARNING, Tag("checkout"))``

    Args:
        error: Raw error or existing envelope.
        *attributes: Attributes to attach, in order.
        stacklevel: Caller to record as provenance. 1 is the direct caller;
            helpers wrapping ``attach`` pass 2 to record their own caller.

    Returns:
        New envelope.
    """
    provenance = capture_provenance(stacklevel, with_column=True)
    return wrap(error, attributes, provenance)


def base_of(error: BaseException) -> BaseException:
    """Return the original error, unwrapping an envelope if needed."""
    if isinstance(error, AttributedBaseException):
        return error.base
    return error


def identifiable(error: BaseException) -> BaseException:
    """Return an error exposing ``error_id``.

    The error itself when it already is identifiable (envelopes included),
    otherwise a fresh attribute-less envelope. Identity is not cached on raw
    errors: each call on the same raw error yields a new identity.

    Args:
        error: Any error.

    Returns:
        Error satisfying ``IdentifiableError``.
    """
    if isinstance(error, IdentifiableError):
        return error
    return _envelope(error, generate_error_id())
