"""Structured logger for observability."""

import logging
from typing import Any, Optional

from app.infrastructure.config.settings import settings

_logger = logging.getLogger("dealer_app")
_logger.setLevel(logging.DEBUG if settings.debug_mode else settings.log_level.upper())

# Create console handler if not exists
if not _logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def log_event(
    component: str,
    event: str,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """
    Log a structured event.

    Args:
        component: Component name (e.g., 'http', 'query', 'repository')
        event: Event name (e.g., 'create_dealer')
        level: Log level (default: INFO)
        **kwargs: Additional structured fields to log
    """
    fields = {
        "component": component,
        "event": event,
    }
    fields.update(kwargs)

    # Format as key=value pairs for readability
    log_parts = [f"{k}={v!r}" for k, v in fields.items()]
    log_message = " | ".join(log_parts)

    _logger.log(level, log_message)


def log_rest_request(
    operation: str,
    dealer_id: Optional[int] = None,
    **kwargs: Any,
) -> None:
    """
    Log an incoming REST request for the dealer resource.

    Args:
        operation: Operation name (e.g., 'create', 'update', 'delete')
        dealer_id: Target dealer id, if the request addresses one
        **kwargs: Additional fields
    """
    fields = {}
    if dealer_id is not None:
        fields["dealer_id"] = dealer_id
    fields.update(kwargs)

    log_event(component="http", event=f"{operation}_dealer", **fields)


def log_criteria_query(
    operation: str,
    criteria: Any,
    **kwargs: Any,
) -> None:
    """
    Log a criteria query.

    Args:
        operation: Query operation (e.g., 'find_by_criteria', 'count_by_criteria')
        criteria: Criteria being executed (rendered with str())
        **kwargs: Additional fields (page request, result counts)
    """
    log_event(
        component="query",
        event=operation,
        level=logging.DEBUG,
        criteria=str(criteria),
        **kwargs,
    )


logger = _logger
