"""Shared test fixtures.

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/property/

Contracts are disabled by default and only take effect for functions
defined while enabled, so tests that exercise wrapping request the
``contracts_enabled`` fixture BEFORE defining their sample classes. Global
settings are reset after every test.
"""

import os
from collections.abc import Iterator

import pytest
from hypothesis import Phase, Verbosity, settings

from method_contracts.core.config import ContractSettings, config, reset_config

# =============================================================================
# Hypothesis Configuration
# =============================================================================

settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))


# =============================================================================
# Global configuration fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _reset_contract_settings() -> Iterator[None]:
    """Every test starts and ends with contracts disabled."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def contracts_enabled() -> ContractSettings:
    """Enable contracts for functions defined during this test."""
    settings_ = config()
    settings_.enabled = True
    return settings_
