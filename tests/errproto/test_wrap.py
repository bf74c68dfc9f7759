"""Tests for wrapping helpers and root-cause resolution."""

from __future__ import annotations

from pathlib import Path

from packages.errproto.errors import (
    Annotated,
    Causer,
    Error,
    annotate,
    annotatef,
    cause,
    error_stack,
    trace,
)


class _SelfCause(Exception):
    """Wrapper whose cause is itself."""

    def cause(self) -> BaseException:
        return self


class _EmptyWrapper(Exception):
    """Wrapper that lost its wrapped value."""

    def cause(self) -> None:
        return None


def test_cause_returns_none_for_none() -> None:
    """``None`` should resolve to ``None``."""
    assert cause(None) is None


def test_cause_returns_non_wrappers_unchanged(unavailable: Error) -> None:
    """Values without ``cause()`` are their own root."""
    foreign = ValueError("boom")

    assert cause(foreign) is foreign
    assert cause(unavailable) is unavailable


def test_cause_unwraps_nested_annotations(unavailable: Error) -> None:
    """Nested wrappers should resolve to the innermost value."""
    root = unavailable.fast_gen_by_args(1)
    wrapped = trace(annotate(annotatef(root, "region %d", 1), "outer"))

    assert isinstance(wrapped, Causer)
    assert cause(wrapped) is root


def test_cause_ignores_implicit_exception_chaining(unavailable: Error) -> None:
    """``raise ... from`` should not change an error's identity."""
    derived = unavailable.fast_gen_by_args(1)
    try:
        try:
            raise KeyError("missing")
        except KeyError as exc:
            raise derived from exc
    except Error as caught:
        assert cause(caught) is derived


def test_cause_stops_on_cycles_and_empty_wrappers() -> None:
    """Degenerate wrappers should resolve to themselves."""
    looping = _SelfCause("loop")
    empty = _EmptyWrapper("empty")

    assert cause(looping) is looping
    assert cause(empty) is empty


def test_wrappers_of_none_are_none() -> None:
    """Wrapping ``None`` should produce ``None``."""
    assert annotate(None, "context") is None
    assert annotatef(None, "context %d", 1) is None
    assert trace(None) is None


def test_annotate_records_location_and_message() -> None:
    """Annotations should prefix the message and record the call site."""
    wrapped = annotate(ValueError("bad input"), "loading config")

    assert isinstance(wrapped, Annotated)
    assert str(wrapped) == "loading config: bad input"
    assert Path(wrapped.file).name == "test_wrap.py"
    assert wrapped.line > 0


def test_trace_keeps_inner_message() -> None:
    """A trace wrapper should display the wrapped error unchanged."""
    assert str(trace(ValueError("bad input"))) == "bad input"


def test_error_stack_lists_layers_outermost_first(unavailable: Error) -> None:
    """The rendered stack should show each layer's location and text."""
    root = unavailable.gen_with_stack_by_args(5)
    wrapped = annotate(root, "while splitting")

    lines = error_stack(wrapped).splitlines()

    assert len(lines) == 2
    assert lines[0].endswith(": while splitting")
    assert "test_wrap.py:" in lines[0]
    assert lines[1].endswith("[ErrRegion:Unavailable] Region 5 is unavailable")
    assert f":{root.line}: " in lines[1]


def test_error_stack_omits_unknown_locations(unavailable: Error) -> None:
    """Layers without a location should render their text alone."""
    assert error_stack(unavailable.fast_gen_by_args(5)) == (
        "[ErrRegion:Unavailable] Region 5 is unavailable"
    )
    assert error_stack(None) == ""
