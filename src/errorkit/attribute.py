"""Error attribute capability shared by every attachable payload."""

from __future__ import annotations

from typing import Any


class ErrorAttribute:
    """Base for payloads that can be attached to an error.

    Subclasses are immutable records. Override ``type_description`` and
    ``value_description`` for a more readable ``describe()`` output.
    """

    __slots__ = ()

    @property
    def type_description(self) -> str:
        """Human-readable type label. Defaults to the class name."""
        return type(self).__name__

    @property
    def value_description(self) -> list[str]:
        """Human-readable value strings. Defaults to ``[str(self)]``."""
        return [str(self)]

    def matches_type_args(self, args: tuple[Any, ...]) -> bool:
        """Whether this instance fits a parameterized query such as ``Tag[int]``.

        Type arguments are erased at runtime, so the default accepts any.
        Generic attributes override this to check their payload.
        """
        return True


class EnumErrorAttribute(ErrorAttribute):
    """Mixin for ``StrEnum`` attributes: members equal only themselves.

    Without it ``str`` equality would make ``Severity.ERROR == "error"`` and
    ``Severity.ERROR == UserLevel.ERROR`` true.
    """

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return self is other

    def __ne__(self, other: object) -> bool:
        return self is not other

    def __hash__(self) -> int:
        return object.__hash__(self)


class LeveledErrorAttribute(EnumErrorAttribute):
    """Enum mixin ordering members by declaration order, not by value.

    Comparing members of different enums, or a member with a plain string,
    raises ``TypeError``.
    """

    __slots__ = ()

    @property
    def level(self) -> int:
        """Zero-based position of the member in its enum."""
        return list(type(self)).index(self)  # type: ignore[call-overload]

    def _other_level(self, other: Any, operator: str) -> int:
        if type(other) is not type(self):
            raise TypeError(
                f"'{operator}' not supported between instances of "
                f"{type(self).__name__!r} and {type(other).__name__!r}"
            )
        return other.level

    def __lt__(self, other: Any) -> bool:
        return self.level < self._other_level(other, "<")

    def __le__(self, other: Any) -> bool:
        return self.level <= self._other_level(other, "<=")

    def __gt__(self, other: Any) -> bool:
        return self.level > self._other_level(other, ">")

    def __ge__(self, other: Any) -> bool:
        return self.level >= self._other_level(other, ">=")
