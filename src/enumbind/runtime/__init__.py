"""
Runtime support for generated Python bindings.

Generated modules import from here; nothing in this package depends on the
generator itself.
"""

from .errors import ErrorCodeWrap, NativeError
from .lookup import IndexedLookup, LinearLookup, LookupTable
from .registry import BindingRegistry
from .valued import UnrecognizedValueError, ValuedEnum

__all__ = [
    "BindingRegistry",
    "ErrorCodeWrap",
    "IndexedLookup",
    "LinearLookup",
    "LookupTable",
    "NativeError",
    "UnrecognizedValueError",
    "ValuedEnum",
]
