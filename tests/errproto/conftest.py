"""Shared fixtures for errproto tests."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterator

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from packages.errproto.errors import (  # noqa: E402
    CallerStackCapture,
    ErrClass,
    Error,
    Registry,
    SuspendedStackCapture,
)
from packages.errproto.logging import clear_context  # noqa: E402


@pytest.fixture(autouse=True)
def _default_stack_capture(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset derivation strategies so tests cannot leak configuration."""
    monkeypatch.setattr(Error, "stackful", CallerStackCapture())
    monkeypatch.setattr(Error, "stackless", SuspendedStackCapture())


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Restore root handlers, level and logging context after a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    try:
        yield
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)
        clear_context()


@pytest.fixture
def registry() -> Registry:
    """Return a named registry for one component."""
    return Registry(name="TiKV")


@pytest.fixture
def region_class(registry: Registry) -> ErrClass:
    """Return the region error class of the ``TiKV`` registry."""
    return registry.register_error_class(1, "ErrRegion")


@pytest.fixture
def unavailable(region_class: ErrClass) -> Error:
    """Return a textual-coded prototype with a printf-style template."""
    return region_class.define_error(
        code=9005,
        code_text="Unavailable",
        message_template="Region %d is unavailable",
        workaround="Check the status, monitoring data and log of the server.",
        description="A certain Raft Group is not available.",
    )


@pytest.fixture
def not_leader(region_class: ErrClass) -> Error:
    """Return a numeric-only prototype in the same class."""
    return region_class.define_error(
        code=9001,
        message_template="peer is not leader for region %d",
    )
