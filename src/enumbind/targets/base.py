"""
Base class for target languages.

A target owns everything language-specific about a generated unit:
skeletons, marker style, header rules, the text of each section, output
layout and identifier rules. Generators stay language-agnostic and ask the
target for section text.
"""

from __future__ import annotations

import json
import re
from abc import ABC, abstractmethod
from functools import cache
from pathlib import Path
from typing import Any, ClassVar

from jinja2 import BaseLoader, Environment, StrictUndefined, Template, TemplateError

from ..core.config import TargetLanguage
from ..core.errors import RenderError, SpecValidationError
from ..core.models import EnumSpec, EnumVariant, LookupKind, Variant
from ..templates.engine import MarkerStyle, TemplateEngine

LICENSE_PLACEHOLDER = re.compile(r"^__LICENSE__\n?", re.MULTILINE)

_jinja_env = Environment(
    loader=BaseLoader(),
    undefined=StrictUndefined,  # Raise error on undefined variables
    autoescape=False,
    keep_trailing_newline=True,
)


@cache
def _compile(source: str) -> Template:
    return _jinja_env.from_string(source)


def render_fragment(source: str, enum_name: str, **params: Any) -> str:
    """
    Render a section fragment.

    Raises:
        RenderError: If the fragment fails to render
    """
    try:
        return _compile(source).render(**params)
    except TemplateError as e:
        raise RenderError(f"section fragment failed: {e}", enum_name) from e


def quote(text: str) -> str:
    """Double-quoted string literal, valid in both Java and Python."""
    return json.dumps(text)


def one_line(text: str) -> str:
    return " ".join(text.split())


class Target(ABC):
    """Language-specific rendering rules for generated enums."""

    language: ClassVar[TargetLanguage]
    markers: ClassVar[MarkerStyle]
    file_suffix: ClassVar[str]
    reserved_names: ClassVar[frozenset[str]] = frozenset()

    @property
    def supports_merge(self) -> bool:
        """Whether an existing output file can serve as the skeleton."""
        return self.markers.keep_markers

    def engine(self) -> TemplateEngine:
        return TemplateEngine(self.markers)

    # === Layout and validation ===

    @abstractmethod
    def skeleton(self, variant: EnumVariant) -> str:
        """Default skeleton for a variant."""

    @abstractmethod
    def module_name(self, spec: EnumSpec) -> str:
        """File stem of the generated unit."""

    def output_path(self, root: Path, spec: EnumSpec) -> Path:
        """Location of the generated unit below an output root."""
        package_dir = Path(*spec.package.split(".")) if spec.package else Path()
        return root / package_dir / f"{self.module_name(spec)}{self.file_suffix}"

    @abstractmethod
    def is_identifier(self, name: str) -> bool:
        """Whether ``name`` is a legal identifier in the target language."""

    def check_identifiers(self, spec: EnumSpec) -> None:
        """
        Check the type and member names against the language's rules.

        Raises:
            SpecValidationError: On illegal or reserved names
        """
        if not self.is_identifier(spec.name):
            raise SpecValidationError(
                f"'{spec.name}' is not a valid {self.language.value} type name", spec.name
            )
        for variant in spec.variants():
            if not self.is_identifier(variant.name):
                raise SpecValidationError(
                    f"constant '{variant.native_name}' yields invalid {self.language.value} "
                    f"identifier '{variant.name}'",
                    spec.name,
                )
            if variant.name in self.reserved_names:
                raise SpecValidationError(
                    f"constant name '{variant.name}' is reserved in generated "
                    f"{self.language.value} code",
                    spec.name,
                )

    # === Header rules ===

    @abstractmethod
    def license_block(self, license_text: str) -> str:
        """Format license text as a comment block."""

    def apply_header(self, skeleton: str, spec: EnumSpec, license_text: str | None) -> str:
        """Replace the license placeholder line; drop it when no license is set."""
        replacement = f"{self.license_block(license_text)}\n" if license_text else ""
        return LICENSE_PLACEHOLDER.sub(lambda _: replacement, skeleton, count=1)

    # === Sections ===

    @abstractmethod
    def imports_section(self, spec: EnumSpec) -> str: ...

    @abstractmethod
    def javadoc_section(self, spec: EnumSpec) -> str: ...

    @abstractmethod
    def annotations_section(self, spec: EnumSpec) -> str: ...

    @abstractmethod
    def values_section(self, spec: EnumSpec, variants: tuple[Variant, ...]) -> str: ...

    @abstractmethod
    def lookup_section(self, spec: EnumSpec, kind: LookupKind) -> str: ...

    @abstractmethod
    def constants_section(self, spec: EnumSpec, include_domain: bool) -> str:
        """
        Constants block: the error domain accessor (returning the domain
        name as generated data) followed by any constants-extra text.
        Empty when there is nothing to emit.
        """

    @abstractmethod
    def free_text_section(self, text: str) -> str:
        """Raw text block placed in the type body."""

    def name_section(self, spec: EnumSpec) -> str:
        return spec.name
