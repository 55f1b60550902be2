"""hexevents - declarative event listener configuration.

Turn a single options mapping (event name to callable, descriptor, or list of
descriptors) into prioritized, optionally fire-once listener registrations on
an emitter.
"""

try:
    from importlib.metadata import version

    __version__ = version("hexevents")
except Exception:
    __version__ = "0.0.0.dev0"

from hexevents.drivers.emitter import HasEmitterMixin, LocalEmitter
from hexevents.kernel.events import (
    EventAttacherMixin,
    ListenerRecord,
    attach_listeners,
    prepare_event,
    prepare_events,
)
from hexevents.kernel.exceptions import ConfigError, HexEventsError
from hexevents.kernel.ports import Emitter, HasEmitter

__all__ = [
    "ConfigError",
    "Emitter",
    "EventAttacherMixin",
    "HasEmitter",
    "HasEmitterMixin",
    "HexEventsError",
    "ListenerRecord",
    "LocalEmitter",
    "__version__",
    "attach_listeners",
    "prepare_event",
    "prepare_events",
]
