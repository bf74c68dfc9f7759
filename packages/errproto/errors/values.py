"""Immutable exception values.

Error values are dataclass exceptions whose fields are set once by
``__init__`` and never change. A plain ``frozen=True`` dataclass cannot be
used: it also blocks the dunder attributes the interpreter writes while an
exception propagates (``__traceback__`` when leaving a ``@contextmanager``
block, ``__notes__`` from ``add_note``).
"""

from __future__ import annotations

import dataclasses
from functools import partial
from typing import Any


class FrozenException(Exception):
    """Exception base for dataclasses whose fields are write-once."""

    def __setattr__(self, name: str, value: Any) -> None:
        if not _is_dunder(name) and (
            name not in _field_names(self) or name in self.__dict__
        ):
            raise dataclasses.FrozenInstanceError(f"cannot assign to field {name!r}")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if not _is_dunder(name):
            raise dataclasses.FrozenInstanceError(f"cannot delete field {name!r}")
        super().__delattr__(name)

    def __reduce__(self) -> tuple[Any, ...]:
        """Rebuild from field values so ``copy`` and ``pickle`` keep identity."""
        names = _field_names(self)
        values = {name: getattr(self, name) for name in names}
        rebuild = partial(type(self), **values)
        state = {key: value for key, value in self.__dict__.items() if key not in names}
        if state:
            return rebuild, (), state
        return rebuild, ()


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def _field_names(value: Any) -> frozenset[str]:
    return frozenset(item.name for item in dataclasses.fields(value))
