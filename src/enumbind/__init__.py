"""
enumbind - typed enum bindings for native integer constant groups.

Turns declarative enum specs into Java or Python source for a type-safe
enumeration over the native values, plus an error wrapper type for enums
that name an error domain.
"""

# Version fallback - primary source is pyproject.toml via importlib.metadata
__version__ = "0.3.0"

from .core import (  # noqa: E402
    EmitError,
    EnumBindConfig,
    EnumBindError,
    EnumSpec,
    RenderError,
    SpecLoadError,
    SpecValidationError,
    TargetLanguage,
    load_specs,
)
from .pipeline import GenerationResult, GenerationState, generate_all, generate_enum  # noqa: E402

__all__ = [
    "__version__",
    "EmitError",
    "EnumBindConfig",
    "EnumBindError",
    "EnumSpec",
    "GenerationResult",
    "GenerationState",
    "RenderError",
    "SpecLoadError",
    "SpecValidationError",
    "TargetLanguage",
    "generate_all",
    "generate_enum",
    "load_specs",
]
