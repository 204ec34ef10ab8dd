# src/method_contracts/core/__init__.py
"""Core infrastructure: annotations, configuration, logging."""

from method_contracts.core.annotations import (
    AnnotationRecord,
    ParamContract,
    ReturnContract,
)
from method_contracts.core.config import (
    ContractSettings,
    config,
    configure,
    configure_from_file,
    load_settings,
    reset_config,
    withdraw_everywhere,
)
from method_contracts.core.logging import (
    configure_logging,
    get_logger,
)

__all__ = [
    "AnnotationRecord",
    "ContractSettings",
    "ParamContract",
    "ReturnContract",
    "config",
    "configure",
    "configure_from_file",
    "configure_logging",
    "get_logger",
    "load_settings",
    "reset_config",
    "withdraw_everywhere",
]
