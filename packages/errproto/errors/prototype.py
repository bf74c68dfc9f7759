"""Error prototypes: registered templates for one kind of error.

A prototype is defined once per error kind and derived at the point of
failure::

    ClassRegion = registry.register_error_class(1, "ErrRegion")
    ErrUnavailable = ClassRegion.define_error(
        code_text="Unavailable",
        message_template="Region %d is unavailable",
        workaround="Check the status, monitoring data and log of the server.",
    )

    def locate(region):
        ...
        raise ErrUnavailable.gen_with_stack_by_args(region.id)

and checked by identity rather than by message text::

    if ErrUnavailable.equal(err):
        ...

Derived errors are value copies of their prototype with only the message
template, arguments and location overridden, so derivation never touches
shared state and is safe from any number of threads.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from .codes import ErrCode, ErrCodeText, ErrorID, RFCErrorCode, compose_rfc_code
from .formatting import format_message
from .stack import CallerStackCapture, StackCapture, SuspendedStackCapture
from .values import FrozenException
from .wrap import cause

if TYPE_CHECKING:
    from .registry import ErrClass


@dataclass(eq=False)
class Error(FrozenException):
    """Prototype of one kind of error, and every error derived from it.

    Identity is ``(error_class, error_id)``; message template, arguments,
    location, workaround and description never take part in equality.
    """

    error_class: ErrClass | None
    code: ErrCode = 0
    code_text: ErrCodeText = ""
    message_template: str = ""
    # How to work around this error when it occurs in a real environment.
    workaround: str = ""
    # Expanded detail of why this error occurs, possibly including guesses.
    description: str = ""
    message_args: tuple[Any, ...] = ()
    file: str = ""
    line: int = 0

    stackful: ClassVar[StackCapture] = CallerStackCapture()
    stackless: ClassVar[StackCapture] = SuspendedStackCapture()

    @property
    def error_id(self) -> ErrorID:
        """Return the textual code when set, otherwise the decimal code."""
        if self.code_text != "":
            return self.code_text
        return str(self.code)

    @property
    def rfc_code(self) -> RFCErrorCode:
        """Return ``{Component}:{ErrorClass}:{InnerErrorCode}``.

        The component segment is dropped for classes in an unnamed registry
        and only the ID remains for errors without a class.
        """
        error_class = self.error_class
        if error_class is None:
            return self.error_id
        registry_name = error_class.registry.name
        # Maybe top-level errors.
        if registry_name == "":
            return compose_rfc_code(error_class.description, self.error_id)
        return compose_rfc_code(registry_name, error_class.description, self.error_id)

    @property
    def location(self) -> tuple[str, int]:
        """Return the ``(file, line)`` where this error was derived."""
        return self.file, self.line

    @property
    def message(self) -> str:
        """Return the message template expanded with the bound arguments."""
        return format_message(self.message_template, self.message_args)

    def __str__(self) -> str:
        describe = self.code_text
        if describe == "":
            describe = str(self.code)
        if self.error_class is None:
            return f"[{describe}] {self.message}"
        return f"[{self.error_class}:{describe}] {self.message}"

    def gen_with_stack(self, template: str, *args: Any) -> Error:
        """Derive an error with a new message template and the caller's location."""
        err = dataclasses.replace(self, message_template=template, message_args=args)
        return type(self).stackful.apply(err)

    def gen_with_stack_by_args(self, *args: Any) -> Error:
        """Derive an error with new arguments and the caller's location."""
        err = dataclasses.replace(self, message_args=args)
        return type(self).stackful.apply(err)

    def fast_gen(self, template: str, *args: Any) -> Error:
        """Derive an error with a new message template, skipping location capture."""
        err = dataclasses.replace(self, message_template=template, message_args=args)
        return type(self).stackless.apply(err)

    def fast_gen_by_args(self, *args: Any) -> Error:
        """Derive an error with new arguments, skipping location capture."""
        err = dataclasses.replace(self, message_args=args)
        return type(self).stackless.apply(err)

    def equal(self, err: BaseException | None) -> bool:
        """Return whether the root cause of ``err`` is this kind of error."""
        origin = cause(err)
        if origin is None:
            return False
        if origin is self:
            return True
        if not isinstance(origin, Error):
            return False
        return class_equal(self.error_class, origin.error_class) and (
            self.error_id == origin.error_id
        )

    def not_equal(self, err: BaseException | None) -> bool:
        """Return whether the root cause of ``err`` is a different kind of error."""
        return not self.equal(err)


def class_equal(left: ErrClass | None, right: ErrClass | None) -> bool:
    """Compare two possibly absent error classes.

    Absent classes are only equal to each other.
    """
    if left is None or right is None:
        return left is right
    return left.equal(right)

