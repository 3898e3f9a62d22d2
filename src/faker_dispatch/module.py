"""Host module - how an embedding runtime exposes generators to scripts.

Each script instance gets a default generator seeded from the environment,
plus the ``Faker`` constructor for creating more with explicit seeds.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from faker_dispatch.dynamic.proxy import Faker
from faker_dispatch.registry.registry import get_registry
from faker_dispatch.settings.loader import SettingsLoader

logger = logging.getLogger(__name__)


@dataclass
class ModuleExports:
    """Values a script sees when importing the module."""

    default: Any
    named: dict[str, Any] = field(default_factory=dict)


class FakerModule:
    """Root module, shared by every script instance in the process."""

    def __init__(self):
        self._loader = SettingsLoader()

    def new_instance(self, environ: Mapping[str, str] | None = None) -> ModuleExports:
        """Create the exports for one script instance.

        The seed and locale are read once, here. A missing or invalid seed
        selects non-reproducible output.

        Args:
            environ: Environment mapping, defaults to os.environ

        Returns:
            ModuleExports with a default generator and the Faker constructor
        """
        settings = self._loader.from_env(environ)
        logger.debug("New module instance with seed=%d locale=%s", settings.seed, settings.locale)

        default = Faker(seed=settings.seed, locale=settings.locale, registry=get_registry())
        return ModuleExports(default=default, named={"Faker": Faker})
