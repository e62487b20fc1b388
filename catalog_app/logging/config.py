"""
Centralized logging configuration for the catalog editor.

This module provides standardized logging configuration using structlog
for all components. Store mutations, edit-mode transitions and action gate
decisions are all logged through the helpers defined here so the audit trail
has a consistent shape.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if format_json:
        processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_action_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for action gate decisions.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger bound to the action gate subsystem
    """
    logger = get_logger(name)

    return logger.bind(
        subsystem="action_gate",
        audit_trail=True
    )


def get_state_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for edit-mode state transitions.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger bound to the edit state subsystem
    """
    logger = get_logger(name)

    return logger.bind(
        subsystem="edit_state",
        audit_trail=True
    )


def log_action_decision(
    logger: FilteringBoundLogger,
    action_name: str,
    available: bool,
    mode: str,
    reason: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log an action availability decision with standardized format.

    Args:
        logger: Structlog logger instance
        action_name: Name of the action being invoked
        available: Whether the action predicate held
        mode: Editor mode at the time of the decision
        reason: Detailed reason for the decision
        context: Additional context data
    """
    bound_logger = logger.bind(
        action_name=action_name,
        action_result="AVAILABLE" if available else "UNAVAILABLE",
        mode=mode,
        reason=reason,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if available:
        bound_logger.info("Action executed")
    else:
        bound_logger.warning("Action unavailable")


def log_state_transition(
    logger: FilteringBoundLogger,
    trigger: str,
    from_state: str,
    to_state: str,
    accepted: bool = True,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log an edit-mode transition with standardized format.

    Args:
        logger: Structlog logger instance
        trigger: What triggered the transition
        from_state: Current mode
        to_state: Target mode
        accepted: False when a guard refused the transition
        context: Additional context data
    """
    bound_logger = logger.bind(
        trigger=trigger,
        from_state=from_state,
        to_state=to_state,
        accepted=accepted,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if accepted:
        bound_logger.info("State transition")
    else:
        bound_logger.warning("State transition refused")
