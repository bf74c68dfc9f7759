"""Tests for error equality across derivation and wrapping."""

from __future__ import annotations

from dataclasses import dataclass

from packages.errproto.errors import (
    ErrClass,
    Error,
    Registry,
    annotate,
    error_equal,
    error_not_equal,
    trace,
)


@dataclass(frozen=True, eq=False)
class _RetryWrapper(Exception):
    """Foreign wrapper exposing the wrapped error through ``cause()``."""

    inner: BaseException
    attempts: int

    def cause(self) -> BaseException:
        return self.inner


def _wrap(err: BaseException, times: int) -> BaseException:
    """Wrap ``err`` in alternating wrapper kinds ``times`` times."""
    wrapped = err
    for attempt in range(times):
        if attempt % 2 == 0:
            wrapped = _RetryWrapper(inner=wrapped, attempts=attempt)
        else:
            wrapped = annotate(wrapped, f"attempt {attempt}")
    return wrapped


def test_distinct_ids_in_same_class_are_not_equal(
    unavailable: Error, not_leader: Error
) -> None:
    """Prototypes with different IDs should never compare equal."""
    assert not unavailable.equal(not_leader)
    assert not not_leader.equal(unavailable)
    assert unavailable.not_equal(not_leader)


def test_same_id_in_different_classes_is_not_equal(region_class: ErrClass) -> None:
    """Equal IDs in different classes should be different kinds."""
    other_class = region_class.registry.register_error_class(2, "ErrStore")
    left = region_class.define_error(code=1)
    right = other_class.define_error(code=1)

    assert left.rfc_code != right.rfc_code
    assert not left.equal(right)


def test_same_class_code_in_different_registries_is_not_equal() -> None:
    """Class equality should be namespaced by registry name."""
    tikv = Registry(name="TiKV").register_error_class(1, "ErrRegion")
    pd = Registry(name="PD").register_error_class(1, "ErrRegion")

    assert not tikv.define_error(code=1).equal(pd.define_error(code=1))


def test_independently_built_prototypes_with_same_identity_are_equal(
    region_class: ErrClass,
) -> None:
    """A synthesized prototype should match the registered one by identity."""
    registered = region_class.define_error(code=9010, message_template="one text")
    synthesized = region_class.synthesize(9010, "a different text entirely")

    assert registered.equal(synthesized)
    assert error_equal(registered, synthesized)


def test_textual_code_takes_precedence_for_identity(region_class: ErrClass) -> None:
    """Different numeric codes with the same textual code share identity."""
    left = region_class.define_error(code=1, code_text="Busy")
    right = region_class.define_error(code=2, code_text="Busy")

    assert left.equal(right)


def test_classless_errors_compare_by_id_only() -> None:
    """Absent classes should be equal to each other and nothing else."""
    left = Error(error_class=None, code=8001)
    right = Error(error_class=None, code=8001, message_template="other")
    classed = Registry().register_error_class(1, "x").define_error(code=8001)

    assert left.equal(right)
    assert not left.equal(classed)
    assert not classed.equal(left)


def test_equal_resolves_wrapped_errors(unavailable: Error) -> None:
    """Instance equality should see through wrapping layers."""
    wrapped = _wrap(unavailable.gen_with_stack_by_args(5), 4)

    assert unavailable.equal(wrapped)


def test_equal_rejects_none_and_foreign_errors(unavailable: Error) -> None:
    """``None`` and foreign errors are never a prototype's kind."""
    assert not unavailable.equal(None)
    assert not unavailable.equal(
        ValueError("[ErrRegion:Unavailable] Region %d is unavailable")
    )


def test_error_equal_is_reflexive_and_symmetric(
    unavailable: Error, not_leader: Error
) -> None:
    """``error_equal`` should be reflexive and symmetric."""
    derived = unavailable.fast_gen_by_args(3)

    assert error_equal(derived, derived)
    assert error_equal(unavailable, derived)
    assert error_equal(derived, unavailable)
    assert not error_equal(unavailable, not_leader)
    assert not error_equal(not_leader, unavailable)


def test_error_equal_survives_one_sided_wrapping(unavailable: Error) -> None:
    """Wrapping one side any number of times should not change the result."""
    derived = unavailable.gen_with_stack_by_args(5)

    for times in range(1, 6):
        wrapped = _wrap(derived, times)
        assert error_equal(wrapped, unavailable)
        assert error_equal(unavailable, wrapped)
        assert error_equal(wrapped, trace(derived))


def test_error_equal_handles_none() -> None:
    """``None`` equals only ``None``."""
    assert error_equal(None, None)
    assert not error_equal(None, ValueError("boom"))
    assert not error_equal(ValueError("boom"), None)
    assert error_not_equal(None, ValueError("boom"))


def test_error_equal_falls_back_to_display_string_for_foreign_errors() -> None:
    """Distinct foreign errors with identical text are deliberately equal."""
    left = RuntimeError("connection reset by peer")
    right = RuntimeError("connection reset by peer")

    assert left is not right
    assert error_equal(left, right)
    assert error_equal(_wrap(left, 2), right)
    assert error_not_equal(left, RuntimeError("connection refused"))


def test_error_equal_mixed_native_and_foreign_uses_display_string(
    unavailable: Error,
) -> None:
    """A native error and a foreign one compare by their display strings."""
    derived = unavailable.fast_gen_by_args(5)
    foreign = RuntimeError(str(derived))

    assert error_equal(derived, foreign)
    assert not error_equal(derived, RuntimeError("Region 5 is unavailable"))
