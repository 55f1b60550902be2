"""Local Emitter Adapter - synchronous in-process implementation of the Emitter port.

Listeners for an event run highest priority first; listeners with equal
priority run in registration order. Once-listeners are removed before they
are invoked, so a listener that re-emits the same event does not run twice.
Listener exceptions propagate to the caller of :meth:`LocalEmitter.emit`.
"""

from __future__ import annotations

import bisect
import itertools
from dataclasses import dataclass, field
from typing import Any

from hexevents.kernel.logging import get_logger
from hexevents.kernel.ports.emitter import Emitter, ListenerFunc

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class _Registration:
    fn: ListenerFunc
    priority: int
    once: bool
    seq: int
    removed: bool = field(default=False, compare=False)

    @property
    def sort_key(self) -> tuple[int, int]:
        return (-self.priority, self.seq)


class LocalEmitter:
    """In-process event emitter.

    Events are arbitrary payload objects. An event exposing a truthy
    ``propagation_stopped`` attribute stops dispatch to the remaining
    listeners.
    """

    def __init__(self) -> None:
        self._listeners: dict[str, list[_Registration]] = {}
        self._counter = itertools.count()

    def on(self, event_name: str, fn: ListenerFunc, priority: int = 0) -> None:
        self._add(event_name, fn, priority, once=False)

    def once(self, event_name: str, fn: ListenerFunc, priority: int = 0) -> None:
        self._add(event_name, fn, priority, once=True)

    def remove_listener(self, event_name: str, fn: ListenerFunc) -> bool:
        """Remove every registration of ``fn`` for ``event_name``.

        Returns
        -------
        bool
            True if at least one registration was removed
        """
        registrations = self._listeners.get(event_name, [])
        matches = [reg for reg in registrations if reg.fn == fn]
        for reg in matches:
            self._discard(event_name, reg)
        if matches:
            LOGGER.debug(
                "Removed {count} listener(s) from {event}", count=len(matches), event=event_name
            )
        return bool(matches)

    def listeners(self, event_name: str | None = None) -> Any:
        """Return listeners in dispatch order.

        With ``event_name`` a list of callables is returned, otherwise a
        mapping of every event name with listeners to such a list.
        """
        if event_name is not None:
            return [reg.fn for reg in self._listeners.get(event_name, [])]
        return {name: [reg.fn for reg in regs] for name, regs in self._listeners.items() if regs}

    def has_listeners(self, event_name: str) -> bool:
        return bool(self._listeners.get(event_name))

    def emit(self, event_name: str, event: Any) -> Any:
        """Invoke the listeners of ``event_name`` with ``event`` and return it."""
        for reg in list(self._listeners.get(event_name, [])):
            if reg.removed:
                continue
            if reg.once:
                self._discard(event_name, reg)
            reg.fn(event)
            if getattr(event, "propagation_stopped", False):
                LOGGER.trace("Propagation of {event} stopped", event=event_name)
                break
        return event

    def _add(self, event_name: str, fn: ListenerFunc, priority: int, *, once: bool) -> None:
        reg = _Registration(fn=fn, priority=priority, once=once, seq=next(self._counter))
        bisect.insort(self._listeners.setdefault(event_name, []), reg, key=lambda r: r.sort_key)
        LOGGER.trace(
            "Subscribed listener to {event} (priority={priority}, once={once})",
            event=event_name,
            priority=priority,
            once=once,
        )

    def _discard(self, event_name: str, reg: _Registration) -> None:
        reg.removed = True
        registrations = self._listeners.get(event_name)
        if registrations and reg in registrations:
            registrations.remove(reg)
        if not registrations:
            self._listeners.pop(event_name, None)


class HasEmitterMixin:
    """Give a host a lazily-created emitter.

    The emitter is built on the first :meth:`get_emitter` call, using
    ``emitter_factory``.
    """

    emitter_factory: type[Emitter] = LocalEmitter

    _emitter: Emitter | None = None

    def get_emitter(self) -> Emitter:
        if self._emitter is None:
            self._emitter = self.emitter_factory()
        return self._emitter


__all__ = ["HasEmitterMixin", "LocalEmitter"]
