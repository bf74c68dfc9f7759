"""Error classes and the registries that own them.

A registry names one component (``TiKV``, ``PD``...) and groups its error
classes; a class groups the prototypes of one subsystem. Both are populated at
import time and only read afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from packages.errproto.logging import get_logger

from .codes import ErrClassID, ErrCode, ErrCodeText
from .prototype import Error
from .wrap import cause

_LOGGER = get_logger(__name__)


@dataclass(eq=False)
class Registry:
    """Named collection of error classes for one component."""

    name: str = ""
    _classes: dict[ErrClassID, ErrClass] = field(
        default_factory=dict, init=False, repr=False
    )

    def register_error_class(self, class_code: ErrClassID, description: str) -> ErrClass:
        """Create and register a new error class in this registry.

        Raises:
            ValueError: if ``class_code`` is already registered here.
        """
        existing = self._classes.get(class_code)
        if existing is not None:
            raise ValueError(
                f"error class {class_code} is already registered in "
                f"registry {self.name!r} as {existing.description!r}"
            )
        error_class = ErrClass(code=class_code, description=description, registry=self)
        self._classes[class_code] = error_class
        _LOGGER.debug(
            "error class registered",
            extra={
                "registry": self.name,
                "class_code": class_code,
                "class_description": description,
            },
        )
        return error_class

    def all_error_classes(self) -> list[ErrClass]:
        """Return registered classes ordered by class code."""
        return [self._classes[code] for code in sorted(self._classes)]

    def all_errors(self) -> list[Error]:
        """Return every registered prototype across all classes."""
        return [
            err
            for error_class in self.all_error_classes()
            for err in error_class.all_errors()
        ]


@dataclass(eq=False)
class ErrClass:
    """Group of error prototypes sharing one subsystem description."""

    code: ErrClassID
    description: str
    registry: Registry = field(repr=False)
    _errors: list[Error] = field(default_factory=list, init=False, repr=False)

    def __str__(self) -> str:
        return self.description

    def equal(self, other: ErrClass | None) -> bool:
        """Return whether ``other`` is the same class of the same registry."""
        if other is None:
            return False
        if other is self:
            return True
        return self.code == other.code and self.registry.name == other.registry.name

    def define_error(
        self,
        *,
        code: ErrCode = 0,
        code_text: ErrCodeText = "",
        message_template: str = "",
        workaround: str = "",
        description: str = "",
    ) -> Error:
        """Build a prototype in this class and register it."""
        err = Error(
            error_class=self,
            code=code,
            code_text=code_text,
            message_template=message_template,
            workaround=workaround,
            description=description,
        )
        self._errors.append(err)
        return err

    def synthesize(self, code: ErrCode, message: str) -> Error:
        """Build an unregistered prototype, e.g. for a code received on the wire."""
        return Error(error_class=self, code=code, message_template=message)

    def all_errors(self) -> list[Error]:
        """Return prototypes registered in this class, in definition order."""
        return list(self._errors)

    def equal_class(self, err: BaseException | None) -> bool:
        """Return whether the root cause of ``err`` belongs to this class."""
        origin = cause(err)
        if not isinstance(origin, Error) or origin.error_class is None:
            return False
        return self.equal(origin.error_class)

    def not_equal_class(self, err: BaseException | None) -> bool:
        """Return whether the root cause of ``err`` is outside this class."""
        return not self.equal_class(err)
