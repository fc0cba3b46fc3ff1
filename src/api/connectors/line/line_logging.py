"""Helpers de logging para a LINE Messaging API (sem tokens nem ids)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .line_errors import LineApiError

logger = logging.getLogger(__name__)


def log_line_error(
    error: LineApiError,
    method: str,
    operation: str,
) -> None:
    """Loga erro da LINE sem expor dados sensíveis."""
    logger.warning(
        "line_api_error",
        extra={
            "method": method,
            "operation": operation,
            "error_type": type(error).__name__,
            "status_code": error.status_code,
            "line_request_id": error.request_id,
            "is_retryable": error.is_retryable,
        },
    )


def log_transport_failure(
    method: str,
    operation: str,
    reason: str,
) -> None:
    logger.error(
        "line_transport_failure",
        extra={
            "method": method,
            "operation": operation,
            "reason": reason,
        },
    )


def log_success(
    method: str,
    operation: str,
    status_code: int,
) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "line_request_ok",
        extra={
            "method": method,
            "operation": operation,
            "status_code": status_code,
        },
    )
