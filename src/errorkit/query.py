"""Type-directed attribute queries over an AttributedError.

Attachment order is a stack: every query reads it top-down, so the most
recently attached attribute comes first (FILO). Within one ``attach`` call
the last argument is the most recent.
"""

from __future__ import annotations

from collections.abc import Callable
from types import UnionType
from typing import Union, cast, get_args, get_origin

from errorkit.attribute import ErrorAttribute
from errorkit.envelope import AttributedBaseException
from errorkit.provenance import SourceProvenance

type AttributeType[A] = type[A] | tuple[type[A], ...]
type _Matcher = Callable[[ErrorAttribute], bool]


def _matcher(attr_type: object) -> _Matcher:
    """Build attribute predicate for a class, generic alias, union or tuple.

    ``Tag[int]`` matches ``Tag`` instances whose type arguments accept them,
    see ``ErrorAttribute.matches_type_args``.
    """
    if isinstance(attr_type, tuple):
        matchers = [_matcher(item) for item in attr_type]
        return lambda attribute: any(match(attribute) for match in matchers)
    origin = get_origin(attr_type)
    if origin is None:
        if not isinstance(attr_type, type):
            raise TypeError(f"Cannot query attributes by {attr_type!r}")
        return lambda attribute: isinstance(attribute, attr_type)
    if origin is Union or origin is UnionType:
        return _matcher(get_args(attr_type))
    if not isinstance(origin, type):
        raise TypeError(f"Cannot query attributes by {attr_type!r}")
    args = get_args(attr_type)
    return lambda attribute: (
        isinstance(attribute, origin) and attribute.matches_type_args(args)
    )


def attributes_of[A](
    error: BaseException, attr_type: AttributeType[A]
) -> list[tuple[A, SourceProvenance]]:
    """Return every attribute of the given type, most recent first.

    ``attr_type`` may be a concrete attribute class, a shared base class, a
    parameterized generic such as ``Tag[int]``, a union, or a tuple of those.
    Matching is by runtime type only, never by value.

    Args:
        error: Any error.
        attr_type: Attribute class (or classes) to match.

    Returns:
        Matching ``(attribute, provenance)`` entries; empty when ``error`` is
        not an AttributedError or nothing matches.

    Raises:
        TypeError: If ``attr_type`` is not a class-like query.
    """
    match = _matcher(attr_type)
    if not isinstance(error, AttributedBaseException):
        return []
    return [
        cast(tuple[A, SourceProvenance], entry)
        for entry in reversed(error.entries)
        if match(entry.attribute)
    ]


def attribute_of[A](
    error: BaseException, attr_type: AttributeType[A]
) -> tuple[A, SourceProvenance] | None:
    """Return the most recently attached attribute of the given type.

    Args:
        error: Any error.
        attr_type: Attribute class (or classes) to match, as in ``attributes_of``.

    Returns:
        Latest matching ``(attribute, provenance)`` entry, or ``None``.

    Raises:
        TypeError: If ``attr_type`` is not a class-like query.
    """
    match = _matcher(attr_type)
    if not isinstance(error, AttributedBaseException):
        return None
    for entry in reversed(error.entries):
        if match(entry.attribute):
            return cast(tuple[A, SourceProvenance], entry)
    return None
