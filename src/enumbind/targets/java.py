"""
Java target: RoboVM-style valued enums and NSError code enums.

Markers are kept in the output (``/*<name>*/ ... /*</name>*/``) so an
existing generated file can be used as the skeleton on regeneration,
preserving hand-written code outside the markers.
"""

from __future__ import annotations

import re
from textwrap import dedent
from typing import ClassVar

from ..core.config import TargetLanguage
from ..core.models import EnumSpec, EnumVariant, LookupKind, Variant
from ..core.naming import indent
from ..templates.engine import JAVA_MARKERS
from .base import Target, one_line, quote, render_fragment

ENUM_SKELETON = """\
__LICENSE__
package org.robovm.foo;

/*<imports>*/
/*</imports>*/

/*<javadoc>*/
/*</javadoc>*/
/*<annotations>*/
/*</annotations>*/
public enum /*<name>*/ TheName /*</name>*/ implements ValuedEnum {
    /*<values>*/
    /*</values>*/

    /*<bind>*/
    /*</bind>*/
    /*<constants>*/
    /*</constants>*/
    /*<methods>*/
    /*</methods>*/

    private final long n;

    private /*<name>*/ TheName /*</name>*/(long n) { this.n = n; }
    public long value() { return n; }
    /*<lookup>*/
    /*</lookup>*/
    public static /*<name>*/ TheName /*</name>*/ valueOf(long n) {
        /*<name>*/ TheName /*</name>*/ v = find(n);
        if (v == null) {
            throw new IllegalArgumentException("No constant with value " + n + " found in "
                + /*<name>*/ TheName /*</name>*/.class.getName());
        }
        return v;
    }
}
"""

NSERROR_ENUM_SKELETON = """\
__LICENSE__
package org.robovm.foo;

/*<imports>*/
/*</imports>*/

/*<javadoc>*/
/*</javadoc>*/
/*<annotations>*/
/*</annotations>*/
public enum /*<name>*/ TheName /*</name>*/ implements NSErrorCode {
    /*<values>*/
    /*</values>*/

    /*<bind>*/
    /*</bind>*/
    /*<constants>*/
    /*</constants>*/
    /*<members>*/
    /*</members>*/
    /*<methods>*/
    /*</methods>*/

    private final long n;

    private /*<name>*/ TheName /*</name>*/(long n) { this.n = n; }
    public long value() { return n; }
    /*<lookup>*/
    /*</lookup>*/
    public static /*<name>*/ TheName /*</name>*/ valueOf(long n) {
        /*<name>*/ TheName /*</name>*/ v = find(n);
        if (v == null) {
            throw new IllegalArgumentException("No constant with value " + n + " found in "
                + /*<name>*/ TheName /*</name>*/.class.getName());
        }
        return v;
    }

    /** Called by the binding runtime at startup. */
    public static void register() { Bro.bind(NSErrorWrap.class); }

    @StronglyLinked
    public static class NSErrorWrap extends NSError {
        protected NSErrorWrap(SkipInit skipInit) {super(skipInit);}

        @Override public NSErrorCode getErrorCode() {
            return /*<name>*/ TheName /*</name>*/.find(getCode());
        }

        public static String getClassDomain() {
            return /*<name>*/ TheName /*</name>*/.getClassDomain();
        }
    }
}
"""

VALUES_FRAGMENT = (
    "{% for v in variants %}"
    "\n    {% if v.doc %}/** {{ v.doc }} */\n    {% endif %}"
    "{{ v.name }}({{ v.value }}L){{ ';' if loop.last else ',' }}"
    "{% endfor %}\n    "
)

LINEAR_LOOKUP_FRAGMENT = (
    "\n    static {{ name }} find(long n) {"
    "\n        for ({{ name }} v : values()) {"
    "\n            if (v.n == n) {"
    "\n                return v;"
    "\n            }"
    "\n        }"
    "\n        return null;"
    "\n    }"
    "\n    "
)

INDEXED_LOOKUP_FRAGMENT = (
    "\n    private static final java.util.Map<Long, {{ name }}> BY_VALUE = new java.util.HashMap<>();"
    "\n    static {"
    "\n        for ({{ name }} v : values()) {"
    "\n            BY_VALUE.putIfAbsent(v.n, v);"
    "\n        }"
    "\n    }"
    "\n    static {{ name }} find(long n) {"
    "\n        return BY_VALUE.get(n);"
    "\n    }"
    "\n    "
)

DOMAIN_FRAGMENT = (
    "    public static String getClassDomain() {"
    "\n        return {{ domain }};"
    "\n    }"
)

PACKAGE_LINE = re.compile(r"^package .*;\n?", re.MULTILINE)
_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

JAVA_KEYWORDS = frozenset(
    """
    abstract assert boolean break byte case catch char class const continue default do
    double else enum extends false final finally float for goto if implements import
    instanceof int interface long native new null package private protected public return
    short static strictfp super switch synchronized this throw throws transient true try
    void volatile while _
    """.split()
)


class JavaTarget(Target):
    """Emits ``<package path>/<Name>.java``."""

    language: ClassVar[TargetLanguage] = TargetLanguage.JAVA
    markers = JAVA_MARKERS
    file_suffix = ".java"
    # Field and index names declared by the skeleton
    reserved_names = frozenset({"n", "BY_VALUE"})

    def skeleton(self, variant: EnumVariant) -> str:
        if variant == EnumVariant.ERROR_DOMAIN:
            return NSERROR_ENUM_SKELETON
        return ENUM_SKELETON

    def module_name(self, spec: EnumSpec) -> str:
        return spec.name

    def is_identifier(self, name: str) -> bool:
        return bool(_IDENTIFIER_RE.match(name)) and name not in JAVA_KEYWORDS

    def license_block(self, license_text: str) -> str:
        lines = ["/*"]
        lines.extend(f" * {line}".rstrip() for line in license_text.splitlines())
        lines.append(" */")
        return "\n".join(lines)

    def apply_header(self, skeleton: str, spec: EnumSpec, license_text: str | None) -> str:
        text = super().apply_header(skeleton, spec, license_text)
        # An empty package means the default package
        replacement = f"package {spec.package};\n" if spec.package else ""
        return PACKAGE_LINE.sub(lambda _: replacement, text, count=1)

    def imports_section(self, spec: EnumSpec) -> str:
        if not spec.imports:
            return ""
        lines = set()
        for entry in spec.imports:
            statement = entry if entry.startswith("import ") else f"import {entry}"
            lines.add(statement if statement.endswith(";") else f"{statement};")
        return "\n" + "\n".join(sorted(lines)) + "\n"

    def javadoc_section(self, spec: EnumSpec) -> str:
        text = spec.free_text.javadoc
        if not text or not text.strip():
            return ""
        text = text.strip()
        if not text.startswith("/*"):
            body = "\n".join(f" * {line.strip()}".rstrip() for line in text.splitlines())
            text = f"/**\n{body}\n */"
        return f"\n{text}\n"

    def annotations_section(self, spec: EnumSpec) -> str:
        annotations = list(spec.annotations)
        if spec.marshaler:
            annotations.insert(0, f"@Marshaler({spec.marshaler}.class)")
        return " ".join(dict.fromkeys(annotations))

    def values_section(self, spec: EnumSpec, variants: tuple[Variant, ...]) -> str:
        rows = [
            {
                "name": v.name,
                "value": v.value,
                "doc": one_line(v.doc).replace("*/", "* /") if v.doc else None,
            }
            for v in variants
        ]
        return render_fragment(VALUES_FRAGMENT, spec.name, variants=rows)

    def lookup_section(self, spec: EnumSpec, kind: LookupKind) -> str:
        fragment = INDEXED_LOOKUP_FRAGMENT if kind == LookupKind.INDEXED else LINEAR_LOOKUP_FRAGMENT
        return render_fragment(fragment, spec.name, name=spec.name)

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
        return "\n" + "\n".join(parts) + "\n    "

    def free_text_section(self, text: str) -> str:
        return "\n" + self._body_text(text) + "\n    "

    def _body_text(self, text: str) -> str:
        return indent(dedent(text).strip("\n"), 4)
