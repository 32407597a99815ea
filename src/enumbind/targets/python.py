"""
Python target: ValuedEnum subclasses backed by ``enumbind.runtime``.

Markers (``<<name>> ... <</name>>``) are stripped from the output, so
generated modules are always rendered from the built-in skeletons.
"""

from __future__ import annotations

import keyword
import re
from textwrap import dedent
from typing import ClassVar

from ..core.config import TargetLanguage
from ..core.models import EnumSpec, EnumVariant, LookupKind, Variant
from ..core.naming import camel_to_snake, indent
from ..templates.engine import PYTHON_MARKERS
from .base import Target, one_line, quote, render_fragment

ENUM_SKELETON = '''\
__LICENSE__
"""Generated binding for the <<name>>TheName<</name>> native constants."""

from __future__ import annotations

from enum import nonmember

from enumbind.runtime import IndexedLookup, LinearLookup, ValuedEnum<<imports>><</imports>>


<<annotations>><</annotations>>class <<name>>TheName<</name>>(ValuedEnum):<<javadoc>><</javadoc>><<values>>
    PLACEHOLDER = 0<</values>><<lookup>><</lookup>><<bind>><</bind>><<constants>><</constants>><<methods>><</methods>>
'''

ERROR_ENUM_SKELETON = '''\
__LICENSE__
"""Generated binding for the <<name>>TheName<</name>> native error codes."""

from __future__ import annotations

from enum import nonmember

from enumbind.runtime import (
    BindingRegistry,
    ErrorCodeWrap,
    IndexedLookup,
    LinearLookup,
    NativeError,
    ValuedEnum,
)<<imports>><</imports>>


<<annotations>><</annotations>>class <<name>>TheName<</name>>(ValuedEnum):<<javadoc>><</javadoc>><<values>>
    PLACEHOLDER = 0<</values>><<lookup>><</lookup>><<bind>><</bind>><<constants>><</constants>><<methods>><</methods>>


class <<name>>TheName<</name>>ErrorWrap(ErrorCodeWrap):
    """Native error whose code resolves to a <<name>>TheName<</name>> member."""

    code_enum = <<name>>TheName<</name>><<members>><</members>>

    @classmethod
    def get_class_domain(cls) -> str:
        return <<name>>TheName<</name>>.get_class_domain()


def register(registry: BindingRegistry) -> None:
    """Bind the error wrapper into the binding runtime's registry."""
    registry.bind(<<name>>TheName<</name>>ErrorWrap, NativeError)
'''

VALUES_FRAGMENT = (
    "{% for v in variants %}"
    "\n    {% if v.doc %}#: {{ v.doc }}\n    {% endif %}"
    "{{ v.name }} = {{ v.value }}"
    "{% endfor %}"
)

LOOKUP_FRAGMENT = (
    "\n"
    "\n    qualified_name = nonmember({{ qualified_name }})"
    "\n    lookup_strategy = nonmember({{ strategy }})"
)

DOMAIN_FRAGMENT = (
    "    @classmethod"
    "\n    def get_class_domain(cls) -> str:"
    "\n        return {{ domain }}"
)

# Attributes and classmethods of ValuedEnum that members would shadow
RESERVED_MEMBER_NAMES = frozenset(
    {
        "binding_name",
        "find",
        "get_class_domain",
        "lookup_strategy",
        "mro",
        "name",
        "qualified_name",
        "value",
        "value_of",
    }
)


class PythonTarget(Target):
    """Emits ``<package path>/<snake_name>.py``."""

    language: ClassVar[TargetLanguage] = TargetLanguage.PYTHON
    markers = PYTHON_MARKERS
    file_suffix = ".py"
    reserved_names = RESERVED_MEMBER_NAMES

    def skeleton(self, variant: EnumVariant) -> str:
        if variant == EnumVariant.ERROR_DOMAIN:
            return ERROR_ENUM_SKELETON
        return ENUM_SKELETON

    def module_name(self, spec: EnumSpec) -> str:
        return camel_to_snake(spec.name)

    def is_identifier(self, name: str) -> bool:
        if not name.isidentifier() or keyword.iskeyword(name):
            return False
        # dunder, private and _sunder_ names are never enum members
        return not name.startswith("__") and not (
            len(name) > 2 and name.startswith("_") and name.endswith("_")
        )

    def license_block(self, license_text: str) -> str:
        return "\n".join(f"# {line}".rstrip() for line in license_text.splitlines())

    def imports_section(self, spec: EnumSpec) -> str:
        lines = []
        for entry in sorted(spec.imports):
            if entry.startswith(("import ", "from ")):
                lines.append(entry)
            else:
                lines.append(f"import {entry}")
        return "".join(f"\n{line}" for line in lines)

    def javadoc_section(self, spec: EnumSpec) -> str:
        text = spec.free_text.javadoc
        if not text or not text.strip():
            return ""
        text = dedent(text).strip().replace("\\", "\\\\")
        # no two raw quotes in a row and none at the end
        text = re.sub(r'"(?="|$)', r'\\"', text)
        if "\n" not in text:
            return f'\n    """{text}"""\n'
        return f'\n    """\n{indent(text, 4)}\n    """\n'

    def annotations_section(self, spec: EnumSpec) -> str:
        # marshalers are a Java binding concept; decorators pass through
        return "".join(f"{annotation}\n" for annotation in spec.annotations)

    def values_section(self, spec: EnumSpec, variants: tuple[Variant, ...]) -> str:
        rows = [
            {"name": v.name, "value": v.value, "doc": one_line(v.doc) if v.doc else None}
            for v in variants
        ]
        return render_fragment(VALUES_FRAGMENT, spec.name, variants=rows)

    def lookup_section(self, spec: EnumSpec, kind: LookupKind) -> str:
        strategy = "IndexedLookup" if kind == LookupKind.INDEXED else "LinearLookup"
        return render_fragment(
            LOOKUP_FRAGMENT,
            spec.name,
            qualified_name=quote(spec.qualified_name),
            strategy=strategy,
        )

    def constants_section(self, spec: EnumSpec, include_domain: bool) -> str:
        parts = []
        if include_domain:
            parts.append(
                render_fragment(
                    DOMAIN_FRAGMENT, spec.name, domain=quote(spec.error_domain_class_name or "")
                )
            )
        if spec.free_text.constants_extra:
            parts.append(self._body_text(spec.free_text.constants_extra))
        if not parts:
            return ""
        return "\n\n" + "\n\n".join(parts)

    def free_text_section(self, text: str) -> str:
        return "\n\n" + self._body_text(text)

    def _body_text(self, text: str) -> str:
        return indent(dedent(text).strip("\n"), 4)
