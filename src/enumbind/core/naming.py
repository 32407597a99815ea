"""
Naming helpers shared by the data model and the targets.

- Constant name normalization (prefix inference, prefix/suffix stripping)
- Case conversion for generated module names
- Text indentation for free-text sections
"""

from __future__ import annotations

import os
import re


def strip_affixes(name: str, prefix: str = "", suffix: str = "") -> str:
    """
    Strip a common prefix and suffix from a native constant name.

    A name that would become empty is returned unchanged. A result that
    starts with a digit is escaped with a leading underscore.

    Args:
        name: Native constant name (e.g. ``NSURLErrorTimedOut``)
        prefix: Prefix shared by the enum's constants (e.g. ``NSURLError``)
        suffix: Suffix shared by the enum's constants

    Returns:
        Normalized constant name (e.g. ``TimedOut``)
    """
    result = name
    if prefix and result.startswith(prefix) and len(result) > len(prefix):
        result = result[len(prefix) :]
    if suffix and result.endswith(suffix) and len(result) > len(suffix):
        result = result[: -len(suffix)]
    if result[:1].isdigit():
        result = f"_{result}"
    return result


def common_prefix(names: list[str]) -> str:
    """
    Longest string every name starts with.

    Returns an empty string for fewer than two names.
    """
    if len(names) < 2:
        return ""
    return os.path.commonprefix(names)


def camel_to_snake(name: str) -> str:
    """
    Convert CamelCase to snake_case.

    Args:
        name: CamelCase string

    Returns:
        snake_case string
    """
    # Insert underscore before uppercase letters
    s1 = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", name)
    # Insert underscore before uppercase letters followed by lowercase
    return re.sub("([a-z0-9])([A-Z])", r"\1_\2", s1).lower()


def indent(text: str, spaces: int = 4) -> str:
    """
    Indent all non-blank lines in text by specified number of spaces.

    Args:
        text: Text to indent
        spaces: Number of spaces to indent

    Returns:
        Indented text
    """
    indent_str = " " * spaces
    lines = text.split("\n")
    return "\n".join(indent_str + line if line.strip() else line for line in lines)
