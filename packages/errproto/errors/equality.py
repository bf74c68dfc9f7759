"""Equality between arbitrary error values.

Both sides are resolved to their root cause first so that equality survives
any amount of wrapping. Native errors compare by ``(class, ID)``. Anything else
falls back to comparing display strings: two distinct foreign errors with the
same text are considered equal. That weaker guarantee is intentional, callers
rely on it for errors that crossed a serialization boundary.
"""

from __future__ import annotations

from packages.errproto.logging import get_logger

from .prototype import Error
from .wrap import cause

_LOGGER = get_logger(__name__)


def error_equal(left: BaseException | None, right: BaseException | None) -> bool:
    """Return whether two error values denote the same kind of error."""
    origin_left = cause(left)
    origin_right = cause(right)

    if origin_left is origin_right:
        return True

    if origin_left is None or origin_right is None:
        return False

    if isinstance(origin_left, Error) and isinstance(origin_right, Error):
        return origin_left.equal(origin_right)

    _LOGGER.debug(
        "comparing foreign errors by display string",
        extra={
            "left_type": type(origin_left).__name__,
            "right_type": type(origin_right).__name__,
        },
    )
    return str(origin_left) == str(origin_right)


def error_not_equal(left: BaseException | None, right: BaseException | None) -> bool:
    """Return whether two error values denote different kinds of error."""
    return not error_equal(left, right)
