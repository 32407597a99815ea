"""Core data model, configuration and errors."""

from .config import EnumBindConfig, TargetLanguage, find_config, load_config
from .errors import (
    EmitError,
    EnumBindError,
    RenderError,
    SpecLoadError,
    SpecValidationError,
)
from .models import (
    Constant,
    EnumSpec,
    EnumVariant,
    FreeText,
    FreeTextSection,
    LookupKind,
    Variant,
)
from .spec_loader import load_single_spec, load_specs, read_records

__all__ = [
    "Constant",
    "EmitError",
    "EnumBindConfig",
    "EnumBindError",
    "EnumSpec",
    "EnumVariant",
    "FreeText",
    "FreeTextSection",
    "LookupKind",
    "RenderError",
    "SpecLoadError",
    "SpecValidationError",
    "TargetLanguage",
    "Variant",
    "find_config",
    "load_config",
    "load_single_spec",
    "load_specs",
    "read_records",
]
