# src/method_contracts/core/config.py
"""
Process-wide configuration for method contracts.

Uses Pydantic for validation and Dynaconf for multi-source loading.

The toggle is read when a function is about to be wrapped: if contracts are
disabled at that moment the function is returned untouched, so disabled
contracts cost nothing at call time. Set it once, before any contracted
module is imported, and treat it as read-only afterwards.
"""

import builtins
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, Field

from method_contracts.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

# Names published into builtins by include_everywhere(), kept so they can be
# withdrawn without touching builtins we did not add.
_published: dict[str, Any] = {}


class ContractSettings(BaseModel):
    """Global method contract settings.

    Mutable through ``configure()`` with validation on assignment, so
    ``config.enabled = "yes"`` is coerced and ``config.enabled = "maybe"``
    fails loudly.

    Example YAML:
        enabled: true
    """

    model_config = {"validate_assignment": True, "extra": "forbid"}

    enabled: bool = Field(
        default=False,
        description="Wrap annotated functions with contract checks",
    )

    def include_everywhere(self) -> list[str]:
        """Publish the declaration helpers as builtins.

        Has no effect unless contracts are enabled. Note that this may shadow
        names such as ``param`` or ``returns`` that a module defines itself.

        Returns:
            Names published (empty when disabled)
        """
        if not self.enabled:
            return []

        from method_contracts.declarations import EVERYWHERE_HELPERS

        for name, helper in EVERYWHERE_HELPERS.items():
            setattr(builtins, name, helper)
            _published[name] = helper
        logger.debug("contract_helpers_published", names=sorted(EVERYWHERE_HELPERS))
        return sorted(EVERYWHERE_HELPERS)


_config = ContractSettings()


def config() -> ContractSettings:
    """The process-wide settings instance."""
    return _config


def configure(fn: Callable[[ContractSettings], T]) -> T:
    """Call ``fn`` with the process-wide settings and return its result.

    Example:
        configure(lambda c: setattr(c, "enabled", True))
    """
    return fn(_config)


def withdraw_everywhere() -> None:
    """Remove helpers previously published by include_everywhere()."""
    for name, helper in list(_published.items()):
        if getattr(builtins, name, None) is helper:
            delattr(builtins, name)
        del _published[name]


def reset_config() -> None:
    """Restore defaults and withdraw published helpers. Used by tests."""
    withdraw_everywhere()
    _config.enabled = False


def load_settings(config_path: Path) -> ContractSettings:
    """Load settings from YAML file with environment variable overrides.

    Uses Dynaconf for multi-source loading with precedence:
    1. Environment variables (METHOD_CONTRACTS_*) - highest priority
    2. Config file
    3. Defaults from Pydantic schema - lowest priority

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated ContractSettings instance

    Raises:
        ValidationError: If configuration fails Pydantic validation
        FileNotFoundError: If config file doesn't exist
    """
    from dynaconf import Dynaconf

    # Explicit check for file existence (Dynaconf silently accepts missing files)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    dynaconf_settings = Dynaconf(
        envvar_prefix="METHOD_CONTRACTS",
        settings_files=[str(config_path)],
        environments=False,
        load_dotenv=False,
    )

    # Dynaconf returns uppercase keys; convert to lowercase for Pydantic
    # Also filter out internal Dynaconf settings
    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"}
    raw_config = {k.lower(): v for k, v in dynaconf_settings.as_dict().items() if k not in internal_keys}

    return ContractSettings(**raw_config)


def configure_from_file(config_path: Path) -> ContractSettings:
    """Load settings from ``config_path`` and install them process-wide."""
    loaded = load_settings(config_path)
    _config.enabled = loaded.enabled
    logger.debug("contract_settings_loaded", path=str(config_path), enabled=loaded.enabled)
    return _config
