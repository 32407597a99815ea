"""
Native error objects and their typed wrappers.

A native error is any object exposing an integer ``code`` (and usually a
``domain`` string). Generated error-domain bindings subclass ErrorCodeWrap
to map that code onto a ValuedEnum member.
"""

from __future__ import annotations

from typing import ClassVar, Protocol, runtime_checkable

from .valued import ValuedEnum


@runtime_checkable
class NativeError(Protocol):
    """Opaque native error carrying a 64-bit integer code."""

    code: int


class ErrorCodeWrap:
    """
    Typed view of a native error.

    Subclasses set ``code_enum`` to the generated enum of their domain.
    """

    code_enum: ClassVar[type[ValuedEnum]]

    def __init__(self, error: NativeError):
        self.error = error

    @property
    def code(self) -> int:
        return self.error.code

    def get_error_code(self) -> ValuedEnum | None:
        """
        Resolve the native code to an enum member.

        Unknown codes (including codes added by newer native releases)
        yield None; this accessor never raises on an unrecognized code.
        """
        return self.code_enum.find(self.error.code)

    @classmethod
    def get_class_domain(cls) -> str:
        return cls.code_enum.get_class_domain()  # type: ignore[attr-defined]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, error_code={self.get_error_code()!r})"
