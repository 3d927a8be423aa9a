from __future__ import annotations

from threading import RLock
from typing import Callable, Optional

Subscriber = Callable[[str], None]


class Signal:
    """
    Change notification carrying the id of the resource that changed.

    A subscriber hears about every resource, or only about the one it was connected with.
    Delivery is synchronous, in connection order, after the write that emits. Handler
    errors propagate to the writer; a ``weakref.proxy`` whose target is gone is dropped.
    """

    def __init__(self) -> None:
        self._subscribers: list[tuple[Subscriber, Optional[str]]] = []
        self._lock = RLock()

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def connect(self, callback: Subscriber, resource_id: Optional[str] = None) -> Subscriber:
        with self._lock:
            if not any(cb == callback for cb, _ in self._subscribers):
                self._subscribers.append((callback, resource_id))
        return callback

    def disconnect(self, callback: Subscriber) -> None:
        with self._lock:
            self._subscribers = [(cb, scope) for cb, scope in self._subscribers if cb != callback]

    def emit(self, resource_id: str) -> int:
        """Returns how many subscribers were called."""
        with self._lock:
            targets = [cb for cb, scope in self._subscribers if scope is None or scope == resource_id]
        delivered = 0
        gone: list[Subscriber] = []
        for callback in targets:
            try:
                callback(resource_id)
            except ReferenceError:
                gone.append(callback)
                continue
            delivered += 1
        if gone:
            # identity only: comparing a dead proxy raises ReferenceError
            with self._lock:
                self._subscribers = [
                    (cb, scope) for cb, scope in self._subscribers if not any(cb is g for g in gone)
                ]
        return delivered


__all__ = ["Signal", "Subscriber"]
