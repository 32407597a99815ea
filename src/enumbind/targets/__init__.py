"""Target languages for generated enum bindings."""

from ..core.config import TargetLanguage
from .base import Target
from .java import JavaTarget
from .python import PythonTarget

TARGETS: dict[TargetLanguage, type[Target]] = {
    TargetLanguage.JAVA: JavaTarget,
    TargetLanguage.PYTHON: PythonTarget,
}


def get_target(language: TargetLanguage | str) -> Target:
    """Return the target for a language name."""
    return TARGETS[TargetLanguage(language)]()


__all__ = ["JavaTarget", "PythonTarget", "TARGETS", "Target", "get_target"]
