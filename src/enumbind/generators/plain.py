"""Plain valued-enum generator."""

from __future__ import annotations

from ..core.models import EnumVariant
from ..templates.engine import PLAIN_SCHEMA
from .base import EnumGenerator


class PlainEnumGenerator(EnumGenerator):
    """
    Generates an integer-backed enum exposing ``value()``, ``find(v)`` and
    ``valueOf(v)``; ``valueOf`` fails hard on an unrecognized value.
    """

    variant = EnumVariant.PLAIN
    schema = PLAIN_SCHEMA

    def build_sections(self) -> dict[str, str | None]:
        sections = super().build_sections()
        constants = self.target.constants_section(self.spec, include_domain=False)
        if constants:
            sections["constants"] = constants
        return sections
