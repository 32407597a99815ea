"""Enum generators, one per spec variant."""

from ..core.models import EnumSpec, EnumVariant
from ..targets.base import Target
from .base import EnumGenerator
from .error_domain import ErrorDomainEnumGenerator
from .plain import PlainEnumGenerator

GENERATORS: dict[EnumVariant, type[EnumGenerator]] = {
    EnumVariant.PLAIN: PlainEnumGenerator,
    EnumVariant.ERROR_DOMAIN: ErrorDomainEnumGenerator,
}


def create_generator(
    spec: EnumSpec,
    target: Target,
    *,
    lookup_threshold: int = 16,
    license_text: str | None = None,
) -> EnumGenerator:
    """Select the generator for the spec's variant."""
    generator_cls = GENERATORS[spec.variant]
    return generator_cls(
        spec, target, lookup_threshold=lookup_threshold, license_text=license_text
    )


__all__ = [
    "GENERATORS",
    "EnumGenerator",
    "ErrorDomainEnumGenerator",
    "PlainEnumGenerator",
    "create_generator",
]
