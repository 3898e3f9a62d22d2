"""Settings loader for YAML files and environment variables."""

import logging
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from faker_dispatch.settings.base import FakerSettings

logger = logging.getLogger(__name__)

ENV_SEED = "FAKER_DISPATCH_SEED"
ENV_LOCALE = "FAKER_DISPATCH_LOCALE"


class SettingsLoader:
    """Loads settings from YAML files and environment variables.

    A settings file looks like:

        seed: 11
        locale: en_GB
    """

    def load_file(self, path: Path | str) -> FakerSettings:
        """Load settings from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            Loaded FakerSettings instance

        Raises:
            FileNotFoundError: If the file does not exist
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return self._parse_settings(data)

    def load_from_string(self, content: str) -> FakerSettings:
        """Load settings from a YAML string."""
        data = yaml.safe_load(content)
        return self._parse_settings(data)

    def from_env(
        self,
        environ: Mapping[str, str] | None = None,
        base: FakerSettings | None = None,
    ) -> FakerSettings:
        """Apply environment overrides on top of base settings.

        An unparsable seed is logged and treated as 0.

        Args:
            environ: Environment mapping, defaults to os.environ
            base: Settings to override, defaults to FakerSettings()

        Returns:
            New FakerSettings instance
        """
        environ = os.environ if environ is None else environ
        updates: dict[str, Any] = {}

        if ENV_SEED in environ:
            updates["seed"] = parse_seed(environ[ENV_SEED])

        locale = environ.get(ENV_LOCALE, "").strip()
        if locale:
            updates["locale"] = locale

        return (base or FakerSettings()).model_copy(update=updates)

    def _parse_settings(self, data: Any) -> FakerSettings:
        """Parse settings data from YAML structure."""
        if data is None:
            return FakerSettings()
        if not isinstance(data, dict):
            raise ValueError("Settings file must contain a mapping")

        return FakerSettings.model_validate(data)


def parse_seed(value: str) -> int:
    """Parse a seed value; invalid input is logged and becomes 0."""
    try:
        return int(value.strip())
    except ValueError:
        logger.error("Invalid %s value %r, using a random seed", ENV_SEED, value)
        return 0


def load_settings(
    path: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
) -> FakerSettings:
    """Load settings from an optional file, then apply environment overrides.

    Args:
        path: Optional path to a YAML settings file
        environ: Environment mapping, defaults to os.environ

    Returns:
        Resolved FakerSettings instance
    """
    loader = SettingsLoader()
    base = loader.load_file(path) if path is not None else FakerSettings()
    return loader.from_env(environ, base=base)
