"""errorkit configuration loading."""

from errorkit.config.settings import (
    ErrorKitConfig,
    ErrorKitConfigError,
    apply_config,
    load_config,
)
from errorkit.description import DescriptionSettings
from errorkit.identity import IdentityBackend, IdentitySettings

__all__ = [
    "DescriptionSettings",
    "ErrorKitConfig",
    "ErrorKitConfigError",
    "IdentityBackend",
    "IdentitySettings",
    "apply_config",
    "load_config",
]
