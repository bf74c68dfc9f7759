"""Call-site capture strategies applied when deriving errors.

Two strategies share one contract: ``CallerStackCapture`` records the file and
line of the first frame outside this package, ``SuspendedStackCapture`` leaves
the location at its zero value. ``Error.stackful`` and ``Error.stackless`` hold
the strategies used by the ``gen_with_stack*`` and ``fast_gen*`` families.
"""

from __future__ import annotations

import dataclasses
import inspect
from contextlib import contextmanager
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, Protocol, Sequence, TypeVar

if TYPE_CHECKING:
    from packages.errproto.config import StackSettings

_PACKAGE_DIR = Path(__file__).resolve().parent

TLocated = TypeVar("TLocated")


class StackCapture(Protocol):
    """Strategy attaching (or skipping) call-site location on a new error."""

    def apply(self, err: TLocated) -> TLocated:
        """Return ``err`` or a copy of it carrying location information."""


@dataclass(frozen=True)
class CallerStackCapture:
    """Record the derivation call site as ``file``/``line`` on a copy."""

    trim_prefixes: tuple[str, ...] = ()

    def apply(self, err: TLocated) -> TLocated:
        """Return a copy of ``err`` located at the first caller outside the package."""
        file, line = caller_location()
        return dataclasses.replace(err, file=self._trim(file), line=line)

    def _trim(self, file: str) -> str:
        """Strip the first matching configured path prefix."""
        for prefix in self.trim_prefixes:
            if file.startswith(prefix):
                return file[len(prefix) :].lstrip("/\\")
        return file


@dataclass(frozen=True)
class SuspendedStackCapture:
    """Skip call-site capture; location stays ``("", 0)``."""

    def apply(self, err: TLocated) -> TLocated:
        """Return ``err`` unchanged."""
        return err


def caller_location() -> tuple[str, int]:
    """Return ``(file, line)`` of the nearest frame outside this package."""
    frame = inspect.currentframe()
    try:
        while frame is not None and _is_internal(frame.f_code.co_filename):
            frame = frame.f_back
        if frame is None:
            return "", 0
        return frame.f_code.co_filename, frame.f_lineno
    finally:
        del frame


@lru_cache(maxsize=256)
def _is_internal(filename: str) -> bool:
    """Return whether a code object's file lives in this package."""
    try:
        return Path(filename).resolve().parent == _PACKAGE_DIR
    except OSError:
        return False


def stack_capture_from_settings(settings: StackSettings) -> StackCapture:
    """Build the stackful strategy described by configuration."""
    if not settings.enabled:
        return SuspendedStackCapture()
    return CallerStackCapture(trim_prefixes=_prefixes(settings.trim_prefixes))


def configure_stack(settings: StackSettings) -> None:
    """Install the configured stackful strategy on ``Error``."""
    from .prototype import Error

    Error.stackful = stack_capture_from_settings(settings)


@contextmanager
def stack_capture(
    stackful: StackCapture | None = None,
    stackless: StackCapture | None = None,
) -> Iterator[None]:
    """Temporarily swap the derivation strategies on ``Error``."""
    from .prototype import Error

    previous = (Error.stackful, Error.stackless)
    if stackful is not None:
        Error.stackful = stackful
    if stackless is not None:
        Error.stackless = stackless
    try:
        yield
    finally:
        Error.stackful, Error.stackless = previous


def _prefixes(values: Sequence[str]) -> tuple[str, ...]:
    """Drop empty prefixes, which would match every path."""
    return tuple(value for value in values if value)
