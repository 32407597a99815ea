"""
Data models for enum binding specs.

An EnumSpec describes one native integer-constant group to generate. It is
constructed once from an input record, validated on construction, and never
mutated afterwards.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from .errors import SpecValidationError
from .naming import common_prefix, strip_affixes

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_PACKAGE_RE = re.compile(r"^([A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*)?$")


class EnumVariant(StrEnum):
    """Shapes of generated enumerations."""

    PLAIN = "plain"  # Valued enum with hard-failing reverse lookup
    ERROR_DOMAIN = "error-domain"  # Error-code enum plus bound error wrapper


class LookupKind(StrEnum):
    """Reverse lookup strategies for generated code."""

    LINEAR = "linear"  # Ordered table scan
    INDEXED = "indexed"  # First-match-preserving hash index
    AUTO = "auto"  # Indexed above the configured threshold


class FreeTextSection(StrEnum):
    """Raw text blocks copied into the generated unit."""

    JAVADOC = "javadoc"
    BIND = "bind"
    MEMBERS = "members"
    METHODS = "methods"
    CONSTANTS_EXTRA = "constants-extra"


# Record keys accepted at the top level and lifted into free_text
_FREE_TEXT_KEYS = {
    "javadoc": FreeTextSection.JAVADOC,
    "bind": FreeTextSection.BIND,
    "members": FreeTextSection.MEMBERS,
    "methods": FreeTextSection.METHODS,
    "constantsExtra": FreeTextSection.CONSTANTS_EXTRA,
    "constants_extra": FreeTextSection.CONSTANTS_EXTRA,
    "constants-extra": FreeTextSection.CONSTANTS_EXTRA,
}


def coerce_int64(value: Any) -> int:
    """
    Convert a numeric representation into a 64-bit signed integer.

    Accepts ints, integral floats and decimal/hex/octal/binary strings
    (an optional trailing ``L`` is ignored). Booleans are rejected.

    Raises:
        ValueError: If the value is not numeric or does not fit in 64 bits
    """
    if isinstance(value, bool):
        raise ValueError(f"{value!r} is not a numeric value")
    if isinstance(value, int):
        result = value
    elif isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{value!r} is not an integral value")
        result = int(value)
    elif isinstance(value, str):
        text = value.strip()
        if text[-1:] in ("L", "l"):
            text = text[:-1]
        try:
            result = int(text, 0)
        except ValueError:
            # int(..., 0) rejects leading zeros such as "010"
            try:
                result = int(text, 10)
            except ValueError:
                raise ValueError(f"{value!r} is not a numeric value") from None
    else:
        raise ValueError(f"{value!r} is not a numeric value")

    if not INT64_MIN <= result <= INT64_MAX:
        raise ValueError(f"{value!r} does not fit in a 64-bit signed integer")
    return result


Int64 = Annotated[int, BeforeValidator(coerce_int64)]


def _as_lines(value: Any) -> Any:
    """Split a free-text block into non-empty lines; pass lists through."""
    if value is None:
        return []
    if isinstance(value, str):
        return [line.strip() for line in value.splitlines() if line.strip()]
    return value


class Constant(BaseModel):
    """
    One native constant.

    Attributes:
        name: Native symbolic name, unique within its enum
        value: Native integer value (64-bit signed)
        doc: Optional documentation rendered before the declaration
    """

    name: str = Field(min_length=1)
    value: Int64
    doc: str | None = None

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("constant name must not be blank")
        return value.strip()


class FreeText(BaseModel):
    """Raw text sections supplied by the binding configuration."""

    javadoc: str | None = None
    bind: str | None = None
    members: str | None = None
    methods: str | None = None
    constants_extra: str | None = Field(default=None, alias="constants-extra")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    def get(self, section: FreeTextSection) -> str | None:
        """Return the raw text of one section, if supplied."""
        return getattr(self, section.value.replace("-", "_"))

    def sections(self) -> dict[FreeTextSection, str]:
        """Return the supplied sections as a mapping."""
        return {
            section: text
            for section in FreeTextSection
            if (text := self.get(section)) is not None
        }


@dataclass(frozen=True)
class Variant:
    """A constant as it will be generated: normalized name plus native value."""

    name: str
    value: int
    doc: str | None
    native_name: str


class EnumSpec(BaseModel):
    """
    Specification for one generated enumeration.

    Attributes:
        name: Generated type name
        constants: Native constants in declaration order
        package: Package/namespace of the generated type
        imports: Extra imports for the generated unit
        annotations: Annotations applied to the generated type, in order
        free_text: Raw text sections (javadoc, bind, members, methods, constants-extra)
        variant: Plain or error-domain
        error_domain_class_name: Error domain name, required for error-domain
        prefix: Prefix stripped from constant names; inferred when unset
        suffix: Suffix stripped from constant names
        ignore: Regex searched in native constant names to leave them out
        rename: Generated names for individual native constants
        marshaler: Marshaler class for the generated type
        lookup: Reverse lookup strategy
    """

    name: str = Field(min_length=1)
    constants: tuple[Constant, ...] = ()
    package: str = Field(default="", alias="packageOrNamespace")
    imports: frozenset[str] = frozenset()
    annotations: tuple[str, ...] = ()
    free_text: FreeText = Field(default_factory=FreeText, alias="freeTextSections")
    variant: EnumVariant = EnumVariant.PLAIN
    error_domain_class_name: str | None = Field(default=None, alias="errorDomainClassName")
    prefix: str | None = None
    suffix: str = ""
    ignore: str | None = None
    rename: dict[str, str] = Field(default_factory=dict)
    marshaler: str | None = None
    lookup: LookupKind = LookupKind.AUTO

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def _lift_free_text(cls, data: Any) -> Any:
        """Move top-level free-text keys of an input record into free_text."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        free_text: dict[str, Any] = {}
        for key in ("freeTextSections", "free_text"):
            free_text.update(data.pop(key, None) or {})
        for key, section in _FREE_TEXT_KEYS.items():
            if key in data:
                free_text[section.value] = data.pop(key)
        if free_text:
            data["free_text"] = free_text
        return data

    @field_validator("imports", "annotations", mode="before")
    @classmethod
    def _split_blocks(cls, value: Any) -> Any:
        return _as_lines(value)

    @field_validator("annotations")
    @classmethod
    def _dedupe_annotations(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(dict.fromkeys(value))

    @field_validator("package")
    @classmethod
    def _valid_package(cls, value: str) -> str:
        value = value.strip()
        if not _PACKAGE_RE.match(value):
            raise ValueError(f"invalid package name '{value}'")
        return value

    @field_validator("ignore")
    @classmethod
    def _valid_ignore(cls, value: str | None) -> str | None:
        if value is not None:
            try:
                re.compile(value)
            except re.error as e:
                raise ValueError(f"invalid ignore pattern '{value}': {e}") from e
        return value

    @model_validator(mode="after")
    def _check_invariants(self) -> EnumSpec:
        if not self.constants:
            raise ValueError("enum has no constants")

        seen: set[str] = set()
        for constant in self.constants:
            if constant.name in seen:
                raise ValueError(f"duplicate constant name '{constant.name}'")
            seen.add(constant.name)

        unknown = sorted(set(self.rename) - seen)
        if unknown:
            raise ValueError(f"rename refers to unknown constant(s): {', '.join(unknown)}")
        for native_name, new_name in self.rename.items():
            if not new_name.strip():
                raise ValueError(f"rename of '{native_name}' must not be blank")

        variants = self.variants()
        if not variants:
            raise ValueError(f"all constants match ignore pattern '{self.ignore}'")
        normalized: set[str] = set()
        for variant in variants:
            if variant.name in normalized:
                raise ValueError(
                    f"duplicate constant name '{variant.name}' "
                    "after stripping prefix/suffix or renaming"
                )
            normalized.add(variant.name)

        if self.variant == EnumVariant.ERROR_DOMAIN:
            if not (self.error_domain_class_name or "").strip():
                raise ValueError("errorDomainClassName is required for the error-domain variant")
        elif self.free_text.members is not None:
            raise ValueError("members section is only supported by the error-domain variant")
        return self

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> EnumSpec:
        """
        Build and validate an EnumSpec from an input record.

        Raises:
            SpecValidationError: If the record does not describe a valid enum
        """
        name = record.get("name") if isinstance(record, dict) else None
        try:
            return cls.model_validate(record)
        except ValidationError as e:
            raise SpecValidationError(_describe(e), enum_name=name or "<unnamed>") from e

    @property
    def qualified_name(self) -> str:
        """Fully qualified name of the generated type."""
        return f"{self.package}.{self.name}" if self.package else self.name

    @property
    def effective_prefix(self) -> str:
        """The configured prefix, or the prefix shared by every constant name."""
        if self.prefix is not None:
            return self.prefix
        return common_prefix([c.name for c in self.constants])

    def variants(self) -> tuple[Variant, ...]:
        """
        Return the constants to generate, filtered and normalized, in order.

        Constants whose native name contains a match of ``ignore`` are
        dropped. A ``rename`` entry is used verbatim (only a leading digit
        is escaped); other names have the prefix and suffix stripped.
        """
        pattern = re.compile(self.ignore) if self.ignore else None
        prefix = self.effective_prefix
        variants = []
        for c in self.constants:
            if pattern is not None and pattern.search(c.name):
                continue
            if c.name in self.rename:
                name = strip_affixes(self.rename[c.name].strip())
            else:
                name = strip_affixes(c.name, prefix, self.suffix)
            variants.append(Variant(name=name, value=c.value, doc=c.doc, native_name=c.name))
        return tuple(variants)

    def ignored_constants(self) -> tuple[str, ...]:
        """Native names dropped by the ignore pattern."""
        kept = {v.native_name for v in self.variants()}
        return tuple(c.name for c in self.constants if c.name not in kept)

    def resolve_lookup(self, threshold: int) -> LookupKind:
        """Resolve AUTO to a concrete lookup strategy."""
        if self.lookup != LookupKind.AUTO:
            return self.lookup
        if len(self.variants()) > threshold:
            return LookupKind.INDEXED
        return LookupKind.LINEAR


def _describe(error: ValidationError) -> str:
    """Flatten a pydantic ValidationError into a short reason."""
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        message = item["msg"].removeprefix("Value error, ")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)
