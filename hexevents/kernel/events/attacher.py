"""Registration of prepared listener records with an emitter."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from hexevents.kernel.config.models import AttacherConfig
from hexevents.kernel.events.normalizer import prepare_events
from hexevents.kernel.events.records import ListenerRecord
from hexevents.kernel.logging import get_logger
from hexevents.kernel.ports.emitter import Emitter, HasEmitter

logger = get_logger(__name__)


def attach_listeners(records: Sequence[ListenerRecord], target: Emitter | HasEmitter) -> None:
    """Register each record with the target's emitter, in order.

    ``once`` records go through ``emitter.once``, the rest through
    ``emitter.on``; both receive ``(name, fn, priority)``. With no records the
    target is not touched at all, so a lazily-built emitter stays unbuilt.
    Errors raised by the emitter propagate unchanged.

    Parameters
    ----------
    records : Sequence[ListenerRecord]
        Prepared records, see :func:`prepare_events`
    target : Emitter | HasEmitter
        An emitter, or an object whose ``get_emitter()`` returns one
    """
    if not records:
        return

    emitter = target.get_emitter() if isinstance(target, HasEmitter) else target
    for record in records:
        if record.once:
            emitter.once(record.name, record.fn, record.priority)
        else:
            emitter.on(record.name, record.fn, record.priority)

    logger.debug(
        "Attached {count} listener(s) to {emitter}",
        count=len(records),
        emitter=type(emitter).__name__,
    )


class EventAttacherMixin:
    """Host-side listener buffer filled from constructor options.

    The buffer belongs to the host: it is appended to by
    :meth:`_prepare_events` and read by :meth:`_attach_listeners`. Outside
    code sees it only as the tuple returned by :attr:`event_listeners`.

    Examples
    --------
    Example usage::

        class Client(HasEmitterMixin, EventAttacherMixin):
            def __init__(self, **options):
                self._prepare_events(options, ["before", "complete", "error"])
                self._attach_listeners()
    """

    #: Hosts that follow project settings assign ``load_config().attacher``
    attacher_config: AttacherConfig = AttacherConfig()

    _event_listeners: list[ListenerRecord]

    @property
    def event_listeners(self) -> tuple[ListenerRecord, ...]:
        """Records prepared so far, in declaration order."""
        return tuple(getattr(self, "_event_listeners", ()))

    def _prepare_events(self, events: Mapping[str, Any], allowed_events: Iterable[str]) -> None:
        """Append records for the allowed events found in ``events``."""
        buffer = getattr(self, "_event_listeners", None)
        if buffer is None:
            buffer = self._event_listeners = []
        prepare_events(events, allowed_events, buffer, atomic=self.attacher_config.atomic)

    def _attach_listeners(self, host: Emitter | HasEmitter | None = None) -> None:
        """Attach the prepared records to ``host`` (defaults to ``self``)."""
        target = self if host is None else host
        attach_listeners(self.event_listeners, target)  # type: ignore[arg-type]


__all__ = ["EventAttacherMixin", "attach_listeners"]
