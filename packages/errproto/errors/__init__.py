"""Public error-prototype API.

Prototypes carry a stable ``(class, ID)`` identity, derive per-failure error
values cheaply, and compare equal through any amount of wrapping.
"""

from . import codes
from .codes import (
    RFC_CODE_SEPARATOR,
    ErrClassID,
    ErrCode,
    ErrCodeText,
    ErrorID,
    RFCErrorCode,
    split_rfc_code,
)
from .equality import error_equal, error_not_equal
from .normalize import exception_to_detail
from .prototype import Error, class_equal
from .registry import ErrClass, Registry
from .report import error_log_context, log_error
from .stack import (
    CallerStackCapture,
    StackCapture,
    SuspendedStackCapture,
    configure_stack,
    stack_capture,
)
from .types import ErrorDetail
from .wrap import Annotated, Causer, annotate, annotatef, cause, error_stack, trace

__all__ = [
    "Annotated",
    "CallerStackCapture",
    "Causer",
    "ErrClass",
    "ErrClassID",
    "ErrCode",
    "ErrCodeText",
    "Error",
    "ErrorDetail",
    "ErrorID",
    "RFCErrorCode",
    "RFC_CODE_SEPARATOR",
    "Registry",
    "StackCapture",
    "SuspendedStackCapture",
    "annotate",
    "annotatef",
    "cause",
    "class_equal",
    "codes",
    "configure_stack",
    "error_equal",
    "error_log_context",
    "error_not_equal",
    "error_stack",
    "exception_to_detail",
    "log_error",
    "split_rfc_code",
    "stack_capture",
    "trace",
]
