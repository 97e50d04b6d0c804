"""errorkit config models and loading helpers."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from errorkit.description import DescriptionSettings, set_description_settings
from errorkit.identity import (
    IdentitySettings,
    build_identity_generator,
    set_identity_generator,
)


class ErrorKitConfig(BaseModel):
    """Root errorkit configuration model."""

    model_config = ConfigDict(extra="forbid")

    identity: IdentitySettings = IdentitySettings()
    description: DescriptionSettings = DescriptionSettings()


class ErrorKitConfigError(RuntimeError):
    """Raised when errorkit config cannot be decoded or validated."""


def _decode_config_payload(path: Path) -> dict[str, object]:
    """Decode config payload from JSON or YAML.

    Args:
        path: Config file path.

    Returns:
        Parsed mapping payload.

    Raises:
        ErrorKitConfigError: If decode fails or payload is not an object.
    """
    raw = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ErrorKitConfigError(f"Invalid errorkit config JSON: {exc}") from exc
    else:
        try:
            payload = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise ErrorKitConfigError(f"Invalid errorkit config YAML: {exc}") from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ErrorKitConfigError(
            "Invalid errorkit config payload: root must be an object"
        )
    return payload


def load_config(path: Path) -> ErrorKitConfig:
    """Load errorkit config from disk, defaulting when missing.

    Args:
        path: Config file path.

    Returns:
        Parsed config, or defaults when file does not exist.

    Raises:
        ErrorKitConfigError: If payload decode or validation fails.
    """
    if not path.exists():
        return ErrorKitConfig()
    payload = _decode_config_payload(path)
    try:
        return ErrorKitConfig.model_validate(payload)
    except ValidationError as exc:
        raise ErrorKitConfigError(f"Invalid errorkit config payload: {exc}") from exc


def apply_config(config: ErrorKitConfig) -> None:
    """Install configured identity source and description settings process-wide.

    Args:
        config: Loaded config.
    """
    set_identity_generator(build_identity_generator(config.identity))
    set_description_settings(config.description)
