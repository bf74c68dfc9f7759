"""Transport-agnostic snapshot of an error value.

``ErrorDetail`` carries the identity and display fields of an error across
process boundaries where the error object itself cannot travel.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Mapping

from .codes import ErrCode, ErrorID, RFCErrorCode


@dataclass(frozen=True)
class ErrorDetail:
    """Structured error object used in logs and wire payloads."""

    rfc_code: RFCErrorCode
    error_id: ErrorID
    code: ErrCode
    message: str
    error_class: str = ""
    workaround: str = ""
    description: str = ""
    file: str = ""
    line: int = 0
    metadata: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_native(self) -> bool:
        """Return whether the detail was taken from a registered error kind."""
        return self.rfc_code != ""

    def to_dict(self) -> dict[str, Any]:
        """Return a plain JSON-serializable mapping."""
        payload = asdict(self)
        payload["metadata"] = dict(self.metadata)
        return payload
