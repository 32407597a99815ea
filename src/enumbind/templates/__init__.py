"""Marker-based template engine and section schemas."""

from .engine import (
    ERROR_DOMAIN_SCHEMA,
    JAVA_MARKERS,
    PLAIN_SCHEMA,
    PYTHON_MARKERS,
    MarkerStyle,
    RenderContext,
    SectionSchema,
    TemplateEngine,
)

__all__ = [
    "ERROR_DOMAIN_SCHEMA",
    "JAVA_MARKERS",
    "PLAIN_SCHEMA",
    "PYTHON_MARKERS",
    "MarkerStyle",
    "RenderContext",
    "SectionSchema",
    "TemplateEngine",
]
