"""Normalization of arbitrary exceptions into ``ErrorDetail``."""

from __future__ import annotations

from .prototype import Error
from .types import ErrorDetail
from .wrap import cause


def exception_to_detail(exc: BaseException) -> ErrorDetail:
    """Normalize an exception, wrapped or not, into an ``ErrorDetail``.

    Wrapping layers are resolved first. Errors outside the registered
    taxonomy keep their display text and type name but carry no code.
    """
    origin = cause(exc)
    if origin is None:
        origin = exc

    if isinstance(origin, Error):
        error_class = origin.error_class
        return ErrorDetail(
            rfc_code=origin.rfc_code,
            error_id=origin.error_id,
            code=origin.code,
            message=origin.message,
            error_class="" if error_class is None else str(error_class),
            workaround=origin.workaround,
            description=origin.description,
            file=origin.file,
            line=origin.line,
        )

    return ErrorDetail(
        rfc_code="",
        error_id="",
        code=0,
        message=str(origin) or type(origin).__name__,
        metadata={"exception_type": type(origin).__name__},
    )
