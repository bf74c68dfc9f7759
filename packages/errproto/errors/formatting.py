"""Deferred printf-style message expansion."""

from __future__ import annotations

from typing import Any, Mapping

from packages.errproto.logging import get_logger

_LOGGER = get_logger(__name__)

BAD_ARGS_MARKER = "%!(BADARGS"


def format_message(template: str, args: tuple[Any, ...]) -> str:
    """Expand ``template`` with ``args``, marking rather than raising on mismatch.

    A single mapping argument feeds ``%(name)s`` style templates. When the
    template and arguments disagree the raw template is returned followed by
    a visible ``%!(BADARGS ...)`` marker listing the arguments.
    """
    if len(args) == 0:
        return template
    try:
        if len(args) == 1 and isinstance(args[0], Mapping):
            return template % args[0]
        return template % args
    except (TypeError, ValueError, KeyError) as exc:
        _LOGGER.debug(
            "message template mismatch",
            extra={"template": template, "reason": str(exc)},
        )
        rendered = ", ".join(repr(arg) for arg in args)
        return f"{template} {BAD_ARGS_MARKER} {rendered})"
