"""Control factory registration.

``ControlRegistry`` maps extension-method names to control factories.
``RegistrationGuard`` is a one-shot flag: once acquired, any further
acquisition fails, whatever method name is passed.
"""

import logging
import threading
from typing import Any, Callable, Dict, List, Optional

from .exceptions import AlreadyRegisteredError

logger = logging.getLogger(__name__)

ControlFactory = Callable[..., Any]


class RegistrationGuard:
    """One-time registration guard with an atomic check-and-set."""

    def __init__(self, message: str = "Slug control already registered."):
        self._message = message
        self._lock = threading.Lock()
        self._registered = False
        self._method_name: Optional[str] = None

    @property
    def registered(self) -> bool:
        return self._registered

    @property
    def method_name(self) -> Optional[str]:
        return self._method_name

    def acquire(self, method_name: str) -> None:
        with self._lock:
            if self._registered:
                logger.error(
                    f"Registration of '{method_name}' rejected, already registered as '{self._method_name}'"
                )
                raise AlreadyRegisteredError(self._message)
            self._registered = True
            self._method_name = method_name

    def reset(self) -> None:
        """Forget the registration. Meant for test isolation only."""
        with self._lock:
            self._registered = False
            self._method_name = None


class ControlRegistry:
    """Mapping of extension-method name to control factory."""

    def __init__(self):
        self._factories: Dict[str, ControlFactory] = {}
        self._lock = threading.RLock()

    def add(self, method_name: str, factory: ControlFactory) -> None:
        with self._lock:
            if method_name in self._factories:
                raise AlreadyRegisteredError(f'Extension method "{method_name}" is already registered.')
            self._factories[method_name] = factory
        logger.info(f"Registered control factory '{method_name}'")

    def get(self, method_name: str) -> Optional[ControlFactory]:
        with self._lock:
            return self._factories.get(method_name)

    def names(self) -> List[str]:
        with self._lock:
            return list(self._factories)

    def clear(self) -> None:
        with self._lock:
            self._factories.clear()

    def __contains__(self, method_name: str) -> bool:
        return self.get(method_name) is not None


# Process-wide defaults used when the host does not supply its own
default_guard = RegistrationGuard()
default_registry = ControlRegistry()
