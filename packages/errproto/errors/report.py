"""Structured logging of error identity."""

from __future__ import annotations

import logging

from packages.errproto.logging import fields, log_context

from .normalize import exception_to_detail


def error_log_context(err: BaseException) -> dict[str, object]:
    """Build structured log fields describing ``err`` and its root cause."""
    detail = exception_to_detail(err)
    context: dict[str, object] = {
        fields.ERROR_MESSAGE: detail.message,
    }
    if detail.is_native:
        context[fields.RFC_CODE] = detail.rfc_code
        context[fields.ERROR_ID] = detail.error_id
        context[fields.ERROR_CODE] = detail.code
        if detail.error_class != "":
            context[fields.ERROR_CLASS] = detail.error_class
        if detail.file != "":
            context[fields.ERROR_FILE] = detail.file
            context[fields.ERROR_LINE] = detail.line
    else:
        context[fields.EXCEPTION_TYPE] = detail.metadata.get("exception_type", "")
    return context


def log_error(
    logger: logging.Logger,
    err: BaseException,
    message: str,
    *,
    level: int = logging.ERROR,
) -> None:
    """Emit ``message`` with the identity of ``err`` bound as log context."""
    with log_context(error_log_context(err)):
        logger.log(level, message)
