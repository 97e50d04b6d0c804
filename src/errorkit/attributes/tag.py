"""Tag attribute: free-form labels for tracking and categorization."""

from __future__ import annotations

from dataclasses import dataclass
from types import UnionType
from typing import Any, Literal, TypeVar, Union, get_args, get_origin

from errorkit.attribute import ErrorAttribute
from errorkit.query import attributes_of


def _payload_matches(value: Any, payload_type: Any) -> bool:
    """Runtime check of a tag payload against a type argument."""
    if payload_type is Any or isinstance(payload_type, TypeVar):
        return True
    origin = get_origin(payload_type)
    if origin is Union or origin is UnionType:
        return any(_payload_matches(value, arg) for arg in get_args(payload_type))
    if origin is Literal:
        return value in get_args(payload_type)
    target = origin or payload_type
    return isinstance(target, type) and isinstance(value, target)


@dataclass(frozen=True)
class Tag[T](ErrorAttribute):
    """Custom label: a feature, URL, epic, component, context object id...

    The payload may be a plain string or any value whose type scopes the tag.
    Queries by ``Tag[int]`` only match tags whose payload is an ``int``.
    """

    tag: T

    @property
    def type_description(self) -> str:
        return f"Tag<{type(self.tag).__name__}>"

    @property
    def value_description(self) -> list[str]:
        return [str(self.tag)]

    def matches_type_args(self, args: tuple[Any, ...]) -> bool:
        return all(_payload_matches(self.tag, arg) for arg in args[:1])


def tags_of[T](error: BaseException, of: type[T] | None = None) -> list[Any]:
    """Return tag payloads, most recent first.

    Args:
        error: Any error.
        of: Only return payloads that are instances of this type.

    Returns:
        Tag payloads in FILO order.
    """
    return [
        attr.tag
        for attr, _ in attributes_of(error, Tag)
        if of is None or isinstance(attr.tag, of)
    ]
