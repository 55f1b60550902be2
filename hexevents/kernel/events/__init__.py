"""Listener normalization and attachment."""

from hexevents.kernel.events.attacher import EventAttacherMixin, attach_listeners
from hexevents.kernel.events.normalizer import prepare_event, prepare_events
from hexevents.kernel.events.records import (
    ListenerDescriptor,
    ListenerRecord,
    ListenerShape,
    classify_listener,
)

__all__ = [
    "EventAttacherMixin",
    "ListenerDescriptor",
    "ListenerRecord",
    "ListenerShape",
    "attach_listeners",
    "classify_listener",
    "prepare_event",
    "prepare_events",
]
