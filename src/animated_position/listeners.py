"""Change notification for AnimatedPosition."""

import logging
from typing import Any, List, Protocol


logger = logging.getLogger(__name__)


class PositionListener(Protocol):
    """Receives a synchronous callback whenever an AnimatedPosition changes."""

    def position_changed(self, animated_position: Any, new_position: float) -> None:
        ...


class ListenerList:
    """
    Listener collection that tolerates mutation while it is being called.

    Each call iterates over a snapshot of the registrations:
    - a listener removed during a call is not called later in that call;
    - a listener added during a call is first called on the next one.

    Exceptions raised by a listener propagate to the caller of `call`.
    """

    def __init__(self):
        self._listeners: List[Any] = []

    def add(self, listener: Any) -> None:
        """Register listener; registering it twice has no effect."""
        if listener is None:
            raise ValueError("listener must not be None")
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove(self, listener: Any) -> None:
        """Unregister listener; unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def clear(self) -> None:
        self._listeners.clear()

    def call(self, method_name: str, *args) -> None:
        """Invoke method_name(*args) on every registered listener."""
        for listener in list(self._listeners):
            # Removed by an earlier listener in this same call.
            if listener not in self._listeners:
                logger.debug("Skipping listener %r removed during notification", listener)
                continue
            getattr(listener, method_name)(*args)

    def __len__(self) -> int:
        return len(self._listeners)

    def __contains__(self, listener: Any) -> bool:
        return listener in self._listeners
