"""Unit tests for type-directed attribute queries (FILO order)."""

from __future__ import annotations

from typing import Any

import pytest

from errorkit import (
    AttributedError,
    ErrorAttribute,
    LeveledErrorAttribute,
    Localization,
    Rank,
    Severity,
    Tag,
    attach,
    attribute_of,
    attributes_of,
    base_of,
    tags_of,
)


class Whoops(Exception):
    """Plain error without identity."""


def _throw_something() -> None:
    """Raise an error enriched at the raise site and in a handler."""
    try:
        raise attach(
            attach(
                attach(
                    Whoops(), Tag(0), Tag("0"), Tag(1), Tag("1"), Tag(2), Tag("2")
                ),
                Tag(3),
            ),
            Tag("3"),
        )
    except AttributedError as error:
        raise attach(
            attach(error, Tag(4), Tag(5)),
            Tag(6),
            Tag("4"),
            Tag("5"),
            Tag("6"),
        ) from error


@pytest.mark.unit
def test_order_is_first_in_last_out() -> None:
    """Attributes come back latest first across and within attach calls."""
    # Arrange - error enriched across stack frames
    result: BaseException | None = None
    try:
        _throw_something()
    except AttributedError as error:
        result = attach(
            attach(
                attach(error, Tag(7), Tag(8), Tag("7"), Tag(9)),
                Tag("8"),
                Tag("9"),
                Tag("10"),
            ),
            Tag(10),
        )
    assert result is not None

    # Act - query tags by payload type
    int_tags = tags_of(result, of=int)
    str_tags = tags_of(result, of=str)

    # Assert - FILO across every call group
    assert int_tags == [10, 9, 8, 7, 6, 5, 4, 3, 2, 1, 0]
    assert str_tags == ["10", "9", "8", "7", "6", "5", "4", "3", "2", "1", "0"]


@pytest.mark.unit
def test_scenario_mixed_tags_in_two_calls() -> None:
    """tag(0), tag("a") then tag(1): ints [1, 0], strings ["a"], latest int 1."""
    error = attach(attach(Whoops(), Tag(0), Tag("a")), Tag(1))

    assert tags_of(error, of=int) == [1, 0]
    assert tags_of(error, of=str) == ["a"]
    latest = attribute_of(error, Tag)
    assert latest is not None
    assert latest[0] == Tag(1)


@pytest.mark.unit
def test_group_order_across_three_calls() -> None:
    """C3's attributes in reverse argument order, then C2's, then C1's."""
    error = attach(Whoops(), Rank.LOW, Rank.MEDIUM)
    error = attach(error, Rank.HIGH)
    error = attach(error, Rank.URGENT, Rank.LOW)

    ranks = [attr for attr, _ in attributes_of(error, Rank)]

    assert ranks == [Rank.LOW, Rank.URGENT, Rank.HIGH, Rank.MEDIUM, Rank.LOW]


@pytest.mark.unit
def test_latest_wins_equals_first_of_all() -> None:
    """attribute_of is the head of attributes_of."""
    error = attach(Whoops(), Severity.INFO, Tag("x"))
    error = attach(error, Severity.CRITICAL)
    error = attach(error, Tag("y"), Severity.WARNING, Tag("z"))

    for attr_type in (Severity, Tag, Rank, Localization):
        everything = attributes_of(error, attr_type)
        latest = attribute_of(error, attr_type)
        assert latest == (everything[0] if everything else None)


@pytest.mark.unit
def test_type_isolation() -> None:
    """Attaching one type never changes results for another."""
    error = attach(Whoops(), Severity.ERROR)
    before = attributes_of(error, Severity)

    enriched = attach(error, Rank.HIGH, Tag("t"), Localization(message="m"))

    assert attributes_of(enriched, Severity) == before
    assert attribute_of(enriched, Severity) == before[0]


@pytest.mark.unit
def test_queries_on_raw_error_are_empty() -> None:
    """Error with no attributes: empty list, None, base is itself."""
    error = Whoops()

    assert attributes_of(error, Severity) == []
    assert attribute_of(error, Severity) is None
    assert base_of(error) is error


@pytest.mark.unit
def test_query_missing_type_on_envelope_is_empty() -> None:
    """Envelope without the requested type yields empty results."""
    error = attach(Whoops(), Tag(1))

    assert attributes_of(error, Severity) == []
    assert attribute_of(error, Severity) is None


@pytest.mark.unit
def test_query_by_shared_base_class_and_tuple() -> None:
    """Shared base classes and tuples of classes match every implementer."""
    error = attach(Whoops(), Severity.ERROR, Tag("t"), Rank.HIGH)

    leveled = [attr for attr, _ in attributes_of(error, LeveledErrorAttribute)]
    anything = [attr for attr, _ in attributes_of(error, ErrorAttribute)]
    either = [attr for attr, _ in attributes_of(error, (Severity, Tag))]

    assert leveled == [Rank.HIGH, Severity.ERROR]
    assert anything == [Rank.HIGH, Tag("t"), Severity.ERROR]
    assert either == [Tag("t"), Severity.ERROR]


@pytest.mark.unit
def test_query_matches_type_not_value() -> None:
    """Equal values of different types do not match each other."""
    error = attach(Whoops(), Tag("error"))

    assert attribute_of(error, Severity) is None
    assert tags_of(error) == ["error"]


@pytest.mark.unit
def test_query_entries_carry_provenance() -> None:
    """Each result pairs the attribute with the attach call location."""
    error = attach(Whoops(), Tag(1))
    error = attach(error, Tag(2))

    (second, second_at), (first, first_at) = attributes_of(error, Tag)

    assert (second, first) == (Tag(2), Tag(1))
    assert second_at.line == first_at.line + 1
    assert second_at.file_id.endswith("test_attribute_query.py")


@pytest.mark.unit
def test_query_by_parameterized_tag_filters_payload_type() -> None:
    """Tag[int] and Tag[str] select tags by payload, newest first."""
    # Arrange - mixed payloads over two calls
    error = attach(attach(Whoops(), Tag(0), Tag("a")), Tag(1))

    # Act - query by generic alias
    ints = [attr.tag for attr, _ in attributes_of(error, Tag[int])]
    strs = [attr.tag for attr, _ in attributes_of(error, Tag[str])]
    latest_str = attribute_of(error, Tag[str])

    # Assert - same answer as payload filtering
    assert ints == [1, 0] == tags_of(error, of=int)
    assert strs == ["a"]
    assert latest_str is not None
    assert latest_str[0] == Tag("a")


@pytest.mark.unit
def test_query_by_generic_unions_and_tuples() -> None:
    """Unions, Any and tuples of generic aliases are accepted."""
    error = attach(Whoops(), Tag(1), Tag("a"), Tag(2.5), Severity.ERROR)

    assert [a.tag for a, _ in attributes_of(error, Tag[int | str])] == ["a", 1]
    assert len(attributes_of(error, Tag[Any])) == 3
    assert [a for a, _ in attributes_of(error, (Tag[float], Severity))] == [
        Severity.ERROR,
        Tag(2.5),
    ]
    assert [a for a, _ in attributes_of(error, Tag[float] | Severity)] == [
        Severity.ERROR,
        Tag(2.5),
    ]


@pytest.mark.unit
def test_query_by_parameterized_tag_on_raw_error_is_empty() -> None:
    """Generic queries on a raw error behave like class queries."""
    error = Whoops()

    assert attributes_of(error, Tag[int]) == []
    assert attribute_of(error, Tag[int]) is None


@pytest.mark.unit
def test_query_rejects_non_class_queries() -> None:
    """Values that are not classes fail loudly instead of matching nothing."""
    error = attach(Whoops(), Tag(1))

    with pytest.raises(TypeError, match="Cannot query attributes"):
        attributes_of(error, "Tag")  # type: ignore[arg-type]
