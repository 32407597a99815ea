"""
Base generator for enum bindings.

A generator turns one validated EnumSpec into source text for one target:
- PlainEnumGenerator: valued enum with hard-failing reverse lookup
- ErrorDomainEnumGenerator: error-code enum plus bound error wrapper

Each generator only assembles a RenderContext; the target supplies the
section text and the TemplateEngine does the substitution. Generators hold
no state beyond their inputs, so independent specs can be generated
concurrently.
"""

from __future__ import annotations

import logging
from typing import ClassVar

from ..core.models import EnumSpec, EnumVariant
from ..targets.base import Target
from ..templates.engine import RenderContext, SectionSchema

logger = logging.getLogger(__name__)


class EnumGenerator:
    """
    Base class for all enum generators.

    Example:
        class PlainEnumGenerator(EnumGenerator):
            variant = EnumVariant.PLAIN
            schema = PLAIN_SCHEMA
    """

    variant: ClassVar[EnumVariant]
    schema: ClassVar[SectionSchema]

    def __init__(
        self,
        spec: EnumSpec,
        target: Target,
        *,
        lookup_threshold: int = 16,
        license_text: str | None = None,
    ):
        """
        Initialize generator.

        Args:
            spec: Validated enum specification
            target: Target language rules
            lookup_threshold: Constant count above which AUTO lookup is indexed
            license_text: License header text, if any
        """
        self.spec = spec
        self.target = target
        self.lookup_threshold = lookup_threshold
        self.license_text = license_text

    def validate(self) -> None:
        """
        Check the spec against the target's naming rules.

        Raises:
            SpecValidationError: On illegal or reserved identifiers
        """
        self.target.check_identifiers(self.spec)

    def build_sections(self) -> dict[str, str | None]:
        """Section texts shared by all variants."""
        spec = self.spec
        target = self.target
        lookup = spec.resolve_lookup(self.lookup_threshold)
        logger.debug("%s: using %s lookup", spec.name, lookup.value)

        sections: dict[str, str | None] = {
            "name": target.name_section(spec),
            "imports": target.imports_section(spec),
            "javadoc": target.javadoc_section(spec),
            "annotations": target.annotations_section(spec),
            "values": target.values_section(spec, spec.variants()),
            "lookup": target.lookup_section(spec, lookup),
        }
        for key, text in (("bind", spec.free_text.bind), ("methods", spec.free_text.methods)):
            if text:
                sections[key] = target.free_text_section(text)
        return sections

    def build_context(self) -> RenderContext:
        """Assemble the rendering context for this spec."""
        return RenderContext(
            schema=self.schema,
            sections=self.build_sections(),
            enum_name=self.spec.name,
        )

    def skeleton(self, existing: str | None = None) -> str:
        """
        Skeleton to render into, with header rules applied.

        Args:
            existing: Current content of the output file; used as the
                skeleton when the target keeps its markers
        """
        if existing is not None and self.target.supports_merge:
            logger.debug("%s: merging into existing output", self.spec.name)
            text = existing
        else:
            text = self.target.skeleton(self.variant)
        return self.target.apply_header(text, self.spec, self.license_text)

    def render(self, existing: str | None = None) -> str:
        """
        Render the generated unit.

        Returns:
            Complete source text

        Raises:
            RenderError: If a mandatory section cannot be resolved
        """
        return self.target.engine().render(self.skeleton(existing), self.build_context())
