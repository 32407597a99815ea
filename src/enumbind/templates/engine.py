"""
Marker-based template engine.

A skeleton is plain target-language source in which named sections are
delimited by paired markers, e.g. ``/*<name>*/ TheName /*</name>*/``.
Rendering replaces the content between each marker pair with the text of
the matching section in a RenderContext.

The engine resolves a fixed set of section names against a schema; it does
not evaluate expressions or control flow. Substitution happens in a single
pass over the skeleton and substituted text is never re-scanned, so the
result is independent of the order sections were supplied in.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import cached_property
from types import MappingProxyType

from ..core.errors import RenderError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarkerStyle:
    """
    Delimiters of a section marker pair.

    Attributes:
        open: Text opening a marker (before the section name)
        close: Text closing a marker (after the section name)
        keep_markers: Whether markers survive in the rendered output
    """

    open: str
    close: str
    keep_markers: bool = True

    @cached_property
    def pattern(self) -> re.Pattern[str]:
        """Regex matching one complete marker pair with its content."""
        o, c = re.escape(self.open), re.escape(self.close)
        return re.compile(
            rf"{o}(?P<key>[A-Za-z_][A-Za-z0-9_]*){c}(?P<body>.*?){o}/(?P=key){c}",
            re.DOTALL,
        )

    def wrap(self, key: str, text: str) -> str:
        """Render a section's text, wrapped in markers when they are kept."""
        if not self.keep_markers:
            return text
        return f"{self.open}{key}{self.close}{text}{self.open}/{key}{self.close}"


JAVA_MARKERS = MarkerStyle("/*<", ">*/", keep_markers=True)
PYTHON_MARKERS = MarkerStyle("<<", ">>", keep_markers=False)


@dataclass(frozen=True)
class SectionSchema:
    """Required and optional section names of one skeleton variant."""

    required: frozenset[str]
    optional: frozenset[str]

    @property
    def known(self) -> frozenset[str]:
        return self.required | self.optional


PLAIN_SCHEMA = SectionSchema(
    required=frozenset({"name", "values", "lookup"}),
    optional=frozenset({"imports", "javadoc", "annotations", "bind", "constants", "methods"}),
)

ERROR_DOMAIN_SCHEMA = SectionSchema(
    required=PLAIN_SCHEMA.required | {"constants"},
    optional=(PLAIN_SCHEMA.optional - {"constants"}) | {"members"},
)


@dataclass(frozen=True)
class RenderContext:
    """
    Section texts for one rendering, checked against a schema.

    Attributes:
        schema: Sections the skeleton variant accepts
        sections: Section name to rendered text; None means unresolved
        enum_name: Name of the enum being rendered, for diagnostics
    """

    schema: SectionSchema
    sections: Mapping[str, str | None] = field(default_factory=dict)
    enum_name: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "sections", MappingProxyType(dict(self.sections)))

    def validate(self) -> None:
        """
        Check the context against its schema.

        Raises:
            RenderError: On unknown sections or unresolved required sections
        """
        unknown = sorted(set(self.sections) - self.schema.known)
        if unknown:
            raise RenderError(f"unknown section(s): {', '.join(unknown)}", self.enum_name)
        missing = sorted(k for k in self.schema.required if self.sections.get(k) is None)
        if missing:
            raise RenderError(
                f"unresolved mandatory section(s): {', '.join(missing)}", self.enum_name
            )

    def text(self, key: str) -> str:
        """Text of a section; absent optional sections render empty."""
        return self.sections.get(key) or ""


class TemplateEngine:
    """Substitutes RenderContext sections into marker-delimited skeletons."""

    def __init__(self, markers: MarkerStyle):
        self.markers = markers

    def sections_in(self, skeleton: str) -> set[str]:
        """Names of all marker pairs present in a skeleton."""
        return {m.group("key") for m in self.markers.pattern.finditer(skeleton)}

    def render(self, skeleton: str, context: RenderContext) -> str:
        """
        Render a skeleton against a context.

        Every occurrence of a section's markers receives the identical text.

        Args:
            skeleton: Skeleton source with marker pairs
            context: Section texts and their schema

        Returns:
            Rendered text

        Raises:
            RenderError: If the context or skeleton does not satisfy the schema
        """
        context.validate()

        present = self.sections_in(skeleton)
        unknown = sorted(present - context.schema.known)
        if unknown:
            raise RenderError(
                f"skeleton contains unknown section(s): {', '.join(unknown)}", context.enum_name
            )
        missing = sorted(context.schema.required - present)
        if missing:
            raise RenderError(
                f"skeleton lacks mandatory section(s): {', '.join(missing)}", context.enum_name
            )

        def replace(match: re.Match[str]) -> str:
            key = match.group("key")
            return self.markers.wrap(key, context.text(key))

        rendered = self.markers.pattern.sub(replace, skeleton)
        logger.debug("Rendered %d section(s) for %s", len(present), context.enum_name)
        return rendered
