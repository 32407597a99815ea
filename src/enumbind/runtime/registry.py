"""
Explicit binding registry.

Generated error-domain modules expose ``register(registry)`` instead of
binding themselves at import time. The binding runtime creates one registry
at startup and calls each module's ``register`` in the order it chooses.
"""

from __future__ import annotations

import logging
import threading

from .errors import ErrorCodeWrap, NativeError

logger = logging.getLogger(__name__)


class BindingRegistry:
    """Maps native base types to the wrapper types bound for them."""

    def __init__(self) -> None:
        self._bindings: dict[type, list[type[ErrorCodeWrap]]] = {}
        self._lock = threading.Lock()

    def bind(self, wrapper: type[ErrorCodeWrap], base: type = NativeError) -> None:
        """Register ``wrapper`` for native objects of ``base``; repeat calls are no-ops."""
        with self._lock:
            wrappers = self._bindings.setdefault(base, [])
            if wrapper not in wrappers:
                wrappers.append(wrapper)
                logger.debug("Bound %s for %s", wrapper.__qualname__, base.__qualname__)

    def is_bound(self, wrapper: type[ErrorCodeWrap], base: type = NativeError) -> bool:
        with self._lock:
            return wrapper in self._bindings.get(base, [])

    def bound(self, base: type = NativeError) -> tuple[type[ErrorCodeWrap], ...]:
        """Wrappers bound for ``base``, in registration order."""
        with self._lock:
            return tuple(self._bindings.get(base, []))

    def wrap(self, error: NativeError, base: type = NativeError) -> ErrorCodeWrap | None:
        """
        Wrap a native error with the wrapper registered for its domain.

        Returns:
            Wrapper instance, or None if no bound wrapper matches the domain
        """
        domain = getattr(error, "domain", None)
        for wrapper in self.bound(base):
            if wrapper.get_class_domain() == domain:
                return wrapper(error)
        return None
