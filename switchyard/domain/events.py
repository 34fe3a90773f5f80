"""Listener registry used by publishers to broadcast state changes."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Iterable, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

EventKey = Hashable


@runtime_checkable
class Listener(Protocol):
    """Anything that can react to a published payload."""

    def update(self, payload: Any) -> None: ...


@dataclass(frozen=True, slots=True)
class CallbackListener:
    """Adapt a plain callable to the Listener protocol."""

    callback: Callable[[Any], None]

    def update(self, payload: Any) -> None:
        self.callback(payload)


class ListenerRegistry:
    """Synchronous pub-sub keyed by event type.

    Listeners are called in subscription order on the caller's thread. The
    sequence for a key is copied before dispatch, so a listener that subscribes
    or unsubscribes during ``update`` only affects the next ``notify``.

    Exceptions raised by a listener propagate to the caller of ``notify`` and the
    remaining listeners of that pass are skipped.
    """

    def __init__(self) -> None:
        self._listeners: dict[EventKey, list[Listener]] = {}
        self._lock = threading.RLock()

    def subscribe(self, key: EventKey, listener: Listener) -> None:
        with self._lock:
            self._listeners.setdefault(key, []).append(listener)
        logger.debug("Subscribed %r to %r", listener, key)

    def unsubscribe(self, key: EventKey, listener: Listener) -> None:
        with self._lock:
            current = self._listeners.get(key)
            if not current:
                return
            remaining = [entry for entry in current if entry != listener]
            if remaining:
                self._listeners[key] = remaining
            else:
                del self._listeners[key]
        logger.debug("Unsubscribed %r from %r", listener, key)

    def notify(self, key: EventKey, payload: Any = None) -> None:
        snapshot = self.listeners(key)
        if not snapshot:
            return
        logger.debug("Notifying %d listener(s) of %r", len(snapshot), key)
        for listener in snapshot:
            listener.update(payload)

    def listeners(self, key: EventKey) -> tuple[Listener, ...]:
        with self._lock:
            return tuple(self._listeners.get(key, ()))

    def keys(self) -> Iterable[EventKey]:
        with self._lock:
            return tuple(self._listeners)

    def clear(self) -> None:
        with self._lock:
            self._listeners.clear()

    def __len__(self) -> int:
        with self._lock:
            return sum(len(entries) for entries in self._listeners.values())
