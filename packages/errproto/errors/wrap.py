"""Wrapping helpers and root-cause resolution.

Wrappers expose the value they wrap through a ``cause()`` method. Python's
implicit ``__cause__``/``__context__`` chains are not followed: an error raised
``from`` another keeps its own identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from .formatting import format_message
from .stack import CallerStackCapture
from .values import FrozenException

_LOCATE = CallerStackCapture()


@runtime_checkable
class Causer(Protocol):
    """Error value wrapping another error value."""

    def cause(self) -> BaseException | None:
        """Return the wrapped error value."""


def cause(err: BaseException | None) -> BaseException | None:
    """Unwrap ``err`` down to the innermost originating error value.

    Values that do not wrap anything are returned unchanged and ``None`` stays
    ``None``. A wrapper whose ``cause()`` is ``None`` is treated as the root.
    """
    current = err
    seen: set[int] = set()
    while current is not None and id(current) not in seen:
        unwrap = getattr(current, "cause", None)
        if not callable(unwrap):
            break
        inner = unwrap()
        if inner is None:
            break
        seen.add(id(current))
        current = inner
    return current


@dataclass(eq=False)
class Annotated(FrozenException):
    """Wrapper adding a context message and location to an error."""

    inner: BaseException
    note: str = ""
    file: str = ""
    line: int = 0

    def cause(self) -> BaseException:
        """Return the wrapped error value."""
        return self.inner

    @property
    def location(self) -> tuple[str, int]:
        """Return the ``(file, line)`` where the wrapper was created."""
        return self.file, self.line

    def __str__(self) -> str:
        if self.note == "":
            return str(self.inner)
        return f"{self.note}: {self.inner}"


def annotate(err: BaseException | None, message: str) -> Annotated | None:
    """Wrap ``err`` with a context message recorded at the caller's location."""
    if err is None:
        return None
    return _LOCATE.apply(Annotated(inner=err, note=message))


def annotatef(err: BaseException | None, template: str, *args: Any) -> Annotated | None:
    """Wrap ``err`` with a printf-style context message."""
    if err is None:
        return None
    return _LOCATE.apply(Annotated(inner=err, note=format_message(template, args)))


def trace(err: BaseException | None) -> Annotated | None:
    """Wrap ``err`` recording only the caller's location."""
    if err is None:
        return None
    return _LOCATE.apply(Annotated(inner=err))


def error_stack(err: BaseException | None) -> str:
    """Render one line per wrapping layer, outermost first.

    Each line is ``{file}:{line}: {text}``; the location is omitted for layers
    that did not record one.
    """
    lines: list[str] = []
    current = err
    seen: set[int] = set()
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        text = current.note if isinstance(current, Annotated) else str(current)
        location = getattr(current, "location", None)
        if isinstance(location, tuple) and len(location) == 2:
            file, line = location
        else:
            file, line = "", 0
        if file != "":
            lines.append(f"{file}:{line}: {text}" if text else f"{file}:{line}")
        elif text:
            lines.append(text)
        unwrap = getattr(current, "cause", None)
        current = unwrap() if callable(unwrap) else None
    return "\n".join(lines)
