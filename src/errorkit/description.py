"""Human-readable rendering of an AttributedError (presentation only)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from errorkit.envelope import AttributedBaseException
from errorkit.provenance import SourceProvenance


class DescriptionSettings(BaseModel):
    """Rendering options for ``describe``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    indent: str = "\t"
    show_identity: bool = True


_settings = DescriptionSettings()


def set_description_settings(settings: DescriptionSettings) -> None:
    """Install process-wide rendering options."""
    global _settings  # noqa: PLW0603
    _settings = settings


def get_description_settings() -> DescriptionSettings:
    """Return process-wide rendering options."""
    return _settings


def _type_name(value: object) -> str:
    return type(value).__name__


def _attribute_lines(error: AttributedBaseException, indent: str) -> list[str]:
    """Render entries newest first, one header per run of equal provenance."""
    lines: list[str] = []
    last: SourceProvenance | None = None
    for attribute, provenance in reversed(error.entries):
        if provenance != last:
            last = provenance
            lines.append(f"{indent * 2}@{provenance}")
        lines.append(f"{indent * 2}- {attribute.type_description}:")
        lines.extend(f"{indent * 3}- {value}" for value in attribute.value_description)
    return lines


def describe(
    error: BaseException, settings: DescriptionSettings | None = None
) -> str:
    """Render an error with its identity and attributes.

    Deterministic for a given input; the layout is not a stable format.

    Args:
        error: Any error. Non-enveloped errors render their type and value.
        settings: Optional rendering override; process-wide settings otherwise.

    Returns:
        Multi-line description.
    """
    effective = settings or get_description_settings()
    indent = effective.indent
    if not isinstance(error, AttributedBaseException):
        return f"{_type_name(error)}: {error}"
    lines = [
        f"{_type_name(error)} {{",
        f"{indent}base<{_type_name(error.base)}>: {error.base}",
    ]
    if effective.show_identity:
        lines.append(f"{indent}id<{_type_name(error.error_id)}>: {error.error_id}")
    lines.append(f"{indent}attributes [")
    lines.extend(_attribute_lines(error, indent))
    lines.append(f"{indent}]")
    lines.append("}")
    return "\n".join(lines)
