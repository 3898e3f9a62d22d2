"""Settings module - seed and locale configuration."""

from faker_dispatch.settings.base import DEFAULT_LOCALE, FakerSettings
from faker_dispatch.settings.loader import (
    ENV_LOCALE,
    ENV_SEED,
    SettingsLoader,
    load_settings,
    parse_seed,
)

__all__ = [
    "DEFAULT_LOCALE",
    "ENV_LOCALE",
    "ENV_SEED",
    "FakerSettings",
    "SettingsLoader",
    "load_settings",
    "parse_seed",
]
