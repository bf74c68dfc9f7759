"""Shared error code types and RFC code composition helpers.

An RFC code is the colon-joined ``{Component}:{ErrorClass}:{InnerErrorCode}``
identifier used to index errors across components. The separator and field
order are a wire-level contract; the degenerate two-field (no registry name)
and one-field (no class) forms are valid codes too.
"""

from __future__ import annotations

ErrCode = int
ErrCodeText = str
ErrClassID = int
ErrorID = str
RFCErrorCode = str

RFC_CODE_SEPARATOR = ":"


def compose_rfc_code(*parts: str) -> RFCErrorCode:
    """Join RFC code fields with the RFC separator, preserving field order."""
    return RFC_CODE_SEPARATOR.join(parts)


def split_rfc_code(code: RFCErrorCode) -> tuple[str, ...]:
    """Split an RFC code into its one to three fields.

    The inner error code is the last field and may itself contain the
    separator, so at most two splits are taken from the left.
    """
    if code == "":
        return ()
    return tuple(code.split(RFC_CODE_SEPARATOR, 2))
