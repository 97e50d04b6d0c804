"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import itertools
import uuid
from collections.abc import Iterator

import pytest

from errorkit.description import DescriptionSettings, set_description_settings
from errorkit.identity import set_identity_generator, use_identity_generator


@pytest.fixture(autouse=True)
def _restore_process_defaults() -> Iterator[None]:
    """Reset process-wide identity source and description settings after each test."""
    yield
    set_identity_generator(uuid.uuid4)
    set_description_settings(DescriptionSettings())


@pytest.fixture
def counting_ids() -> Iterator[list[str]]:
    """Deterministic identity source producing ``err-1``, ``err-2``...

    Yields:
        List of identities handed out so far.
    """
    issued: list[str] = []
    counter = itertools.count(1)

    def _next_id() -> str:
        value = f"err-{next(counter)}"
        issued.append(value)
        return value

    with use_identity_generator(_next_id):
        yield issued
