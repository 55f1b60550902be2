"""Emitter Port - the registration surface listener attachment depends on.

Only ``on`` and ``once`` are used when attaching listeners. ``listeners`` is
read-only introspection for hosts and tests. How an emitter stores listeners,
orders priorities or dispatches events is left to the implementation.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

ListenerFunc = Callable[..., Any]


@runtime_checkable
class Emitter(Protocol):
    """Port interface for event emitters."""

    @abstractmethod
    def on(self, event_name: str, fn: ListenerFunc, priority: int = 0) -> None:
        """Subscribe ``fn`` to ``event_name``.

        Args
        ----
            event_name: Name of the event to listen to
            fn: Listener invoked with the event payload
            priority: Ordering hint, interpreted by the emitter
        """
        ...

    @abstractmethod
    def once(self, event_name: str, fn: ListenerFunc, priority: int = 0) -> None:
        """Subscribe ``fn`` so it is removed after its first invocation."""
        ...

    @abstractmethod
    def listeners(self, event_name: str | None = None) -> Any:
        """Return listeners for ``event_name``, or a mapping of all listeners."""
        ...


@runtime_checkable
class HasEmitter(Protocol):
    """Object that owns (or can lazily build) an emitter."""

    @abstractmethod
    def get_emitter(self) -> Emitter:
        """Return the emitter owned by this object."""
        ...
