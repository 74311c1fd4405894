"""
Event subscriptions for a client.

Only the ``auth`` event exists today. It fires once per authentication
exchange performed by the HTTP layer, with ``(error, result)``.
"""

import logging
import threading
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

AuthCallback = Callable[[Optional[Exception], Any], None]


class EventRegistry:
    """Ordered callback lists keyed by event name."""

    def __init__(self, names: Optional[List[str]] = None):
        self._lock = threading.Lock()
        self._handlers: Dict[str, List[AuthCallback]] = {
            name: [] for name in (names or ["auth"])
        }

    def subscribe(self, name: str, callback: AuthCallback) -> None:
        with self._lock:
            self._handlers[name].append(callback)

    def unsubscribe(self, name: str, callback: AuthCallback) -> bool:
        """Remove the first registration of ``callback``; False if absent."""
        with self._lock:
            handlers = self._handlers[name]
            if callback in handlers:
                handlers.remove(callback)
                return True
            return False

    def handlers(self, name: str) -> List[AuthCallback]:
        with self._lock:
            return list(self._handlers[name])

    def emit(self, name: str, error: Optional[Exception], result: Any) -> None:
        """Call every handler for ``name`` in registration order."""
        handlers = self.handlers(name)
        logger.debug(f"Dispatching '{name}' event to {len(handlers)} handler(s)")
        for callback in handlers:
            callback(error, result)
