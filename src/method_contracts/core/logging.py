# src/method_contracts/core/logging.py
"""Structured logging for method contracts.

Uses structlog for structured logging.

Architecture:
    Every module logs through a structlog BoundLogger wrapped around the
    stdlib logger of the same name (``method_contracts.*``). Events are
    handed to stdlib logging with ProcessorFormatter.wrap_for_formatter, so
    the host application decides where they go through ordinary logging
    configuration. The library never calls ``structlog.configure()`` and
    never touches the root logger.

With no configuration, stdlib's default WARNING threshold drops the debug
events this library emits (binding creation, skipped validation).
configure_logging() is an opt-in that attaches one rendering handler to the
``method_contracts`` logger only.
"""

import logging
import sys
from typing import IO, Any

import structlog
from structlog.stdlib import ProcessorFormatter

LIBRARY_LOGGER_NAME = "method_contracts"

_SHARED_PROCESSORS: list[Any] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.StackInfoRenderer(),
]

# Marks the handler installed by configure_logging() so a second call
# replaces it instead of stacking another one.
_HANDLER_MARKER = "_method_contracts_handler"


def _remove_internal_fields(
    logger: logging.Logger | None,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Remove internal structlog fields from output.

    ProcessorFormatter ALWAYS adds _record and _from_structlog when processing
    log records, so del (not pop) is correct here.
    """
    del event_dict["_record"]
    del event_dict["_from_structlog"]
    return event_dict


def configure_logging(
    *,
    json_output: bool = False,
    level: str = "INFO",
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Render method contract events to a stream.

    Only the ``method_contracts`` logger is touched: its previous handler from
    this function (if any) is replaced, its level set, and propagation turned
    off so events are not rendered twice by the application's root handlers.

    Args:
        json_output: If True, output JSON. If False, human-readable.
        level: Log level (DEBUG, INFO, WARNING, ERROR).
        stream: Destination; stdout if omitted.

    Returns:
        The installed handler, for removal by the caller.
    """
    log_level = getattr(logging, level.upper())

    if json_output:
        final_processors: list[Any] = [
            _remove_internal_fields,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        final_processors = [
            _remove_internal_fields,
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(
        ProcessorFormatter(
            processors=final_processors,
            foreign_pre_chain=_SHARED_PROCESSORS,
        )
    )
    setattr(handler, _HANDLER_MARKER, True)

    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    for existing in list(library_logger.handlers):
        if getattr(existing, _HANDLER_MARKER, False):
            library_logger.removeHandler(existing)
    library_logger.addHandler(handler)
    library_logger.setLevel(log_level)
    library_logger.propagate = False
    return handler


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a bound logger for a module.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Bound structlog logger writing to the stdlib logger ``name``.
    """
    logger: structlog.stdlib.BoundLogger = structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    return logger
