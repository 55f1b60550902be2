"""Port interfaces for hexevents."""

from hexevents.kernel.ports.emitter import Emitter, HasEmitter, ListenerFunc

__all__ = ["Emitter", "HasEmitter", "ListenerFunc"]
