"""Error identity generation. Injectable source, uuid4 by default."""

from __future__ import annotations

import logging
import secrets
import uuid
from collections.abc import Callable, Hashable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

_LOGGER = logging.getLogger(__name__)

type IdentityGenerator = Callable[[], Hashable]


class IdentityGenerationError(RuntimeError):
    """Raised when the identity source cannot produce a usable identity.

    Fatal: never retried and never replaced by a fallback identity.
    """


class IdentityBackend(StrEnum):
    """Supported identity source identifiers."""

    UUID4 = "uuid4"
    UUID4_HEX = "uuid4_hex"
    TOKEN_HEX = "token_hex"  # nosec B105


class IdentitySettings(BaseModel):
    """Identity source configuration."""

    model_config = ConfigDict(extra="forbid")

    backend: IdentityBackend = IdentityBackend.UUID4
    token_bytes: int = Field(default=16, ge=16, le=64)


def _uuid4_hex() -> str:
    return uuid.uuid4().hex


def build_identity_generator(settings: IdentitySettings) -> IdentityGenerator:
    """Build identity generator for configured backend.

    Args:
        settings: Identity settings.

    Returns:
        Zero-argument callable producing hashable identities.
    """
    if settings.backend == IdentityBackend.UUID4_HEX:
        return _uuid4_hex
    if settings.backend == IdentityBackend.TOKEN_HEX:
        nbytes = settings.token_bytes

        def _token_hex() -> str:
            return secrets.token_hex(nbytes)

        return _token_hex
    return uuid.uuid4


_default_generator: IdentityGenerator = uuid.uuid4
_scoped_generator: ContextVar[IdentityGenerator | None] = ContextVar(
    "errorkit_identity_generator", default=None
)


def set_identity_generator(generator: IdentityGenerator) -> None:
    """Install process-wide default identity generator.

    Args:
        generator: Zero-argument callable producing hashable identities.
    """
    global _default_generator  # noqa: PLW0603
    _default_generator = generator


def get_identity_generator() -> IdentityGenerator:
    """Return generator in effect for the current context."""
    scoped = _scoped_generator.get()
    if scoped is not None:
        return scoped
    return _default_generator


@contextmanager
def use_identity_generator(generator: IdentityGenerator) -> Iterator[None]:
    """Override the identity generator for the current context only.

    Args:
        generator: Zero-argument callable producing hashable identities.

    Yields:
        None while the override is active.
    """
    token: Token[IdentityGenerator | None] = _scoped_generator.set(generator)
    try:
        yield
    finally:
        _scoped_generator.reset(token)


def generate_error_id() -> Hashable:
    """Generate a fresh error identity from the active source.

    Returns:
        New hashable identity.

    Raises:
        IdentityGenerationError: If the source fails or yields an unhashable value.
    """
    generator = get_identity_generator()
    try:
        value = generator()
    except Exception as exc:
        _LOGGER.error("Identity source %r failed: %s", generator, exc)
        raise IdentityGenerationError(f"Identity source failed: {exc}") from exc
    try:
        hash(value)
    except TypeError as exc:
        _LOGGER.error("Identity source %r returned unhashable value", generator)
        raise IdentityGenerationError(
            f"Identity source returned unhashable {type(value).__name__}"
        ) from exc
    return value
