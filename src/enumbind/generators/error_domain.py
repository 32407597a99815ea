"""
Error-domain enum generator.

Adds to the plain enum a domain accessor and a wrapper type that maps a
native error object's code onto the enum. The wrapper's ``getErrorCode``
uses the same ``find`` primitive as ``valueOf`` but returns absence instead
of failing, so error introspection never breaks on codes introduced by a
newer native release.
"""

from __future__ import annotations

from ..core.models import EnumVariant
from ..templates.engine import ERROR_DOMAIN_SCHEMA
from .base import EnumGenerator


class ErrorDomainEnumGenerator(EnumGenerator):
    """Generates an error-code enum plus its bound NSError-style wrapper."""

    variant = EnumVariant.ERROR_DOMAIN
    schema = ERROR_DOMAIN_SCHEMA

    def build_sections(self) -> dict[str, str | None]:
        sections = super().build_sections()
        sections["constants"] = self.target.constants_section(self.spec, include_domain=True)
        if self.spec.free_text.members:
            sections["members"] = self.target.free_text_section(self.spec.free_text.members)
        return sections
