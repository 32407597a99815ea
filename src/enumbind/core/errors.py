"""
Error types for enum spec loading, validation, rendering and emission.
"""

from __future__ import annotations


class EnumBindError(Exception):
    """Base exception for all enumbind errors."""

    def __init__(self, message: str, enum_name: str | None = None):
        self.message = message
        self.enum_name = enum_name
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message as a single line, prefixed with the enum name."""
        message = " ".join(self.message.split())
        if self.enum_name:
            return f"{self.enum_name}: {message}"
        return message


class SpecLoadError(EnumBindError):
    """
    Raised when an input or configuration file cannot be read.

    Examples:
    - Missing file
    - Invalid YAML/JSON/TOML
    - Unsupported file extension
    """

    pass


class SpecValidationError(EnumBindError):
    """
    Raised when an enum spec fails validation, before any rendering.

    Examples:
    - Empty constants list
    - Duplicate constant names
    - Missing error domain class name for the error-domain variant
    - Non-numeric or out-of-range constant value
    """

    pass


class RenderError(EnumBindError):
    """
    Raised when a template cannot be rendered.

    Examples:
    - Mandatory section missing from the rendering context
    - Section unknown to the variant's schema
    - Section fragment failed to render
    """

    pass


class EmitError(EnumBindError):
    """Raised when rendered text cannot be published to its destination."""

    pass
