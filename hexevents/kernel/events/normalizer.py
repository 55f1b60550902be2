"""Normalization of options mappings into canonical listener records.

Examples
--------
>>> def on_before(event): ...
>>> def on_after(event): ...
>>> records = prepare_events(
...     {"before": on_before, "after": [{"fn": on_after, "priority": 5}], "timeout": 3},
...     ["before", "after"],
... )
>>> [(r.name, r.priority, r.once) for r in records]
[('before', 0, False), ('after', 5, False)]
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from hexevents.kernel.events.records import (
    ListenerDescriptor,
    ListenerRecord,
    ListenerShape,
    classify_listener,
)
from hexevents.kernel.exceptions import ConfigError
from hexevents.kernel.logging import get_logger

logger = get_logger(__name__)


def prepare_events(
    events: Mapping[str, Any],
    allowed_events: Iterable[str],
    records: list[ListenerRecord] | None = None,
    *,
    atomic: bool = False,
) -> list[ListenerRecord]:
    """Extract the allowed events from ``events`` and append their records.

    Keys not listed in ``allowed_events`` are ignored, so one options mapping
    can carry both listeners and unrelated settings. When ``allowed_events``
    is a sequence its order is kept and a repeated name is visited once; any
    other collection (a ``set``, say) only filters, and names are visited in
    the key order of ``events``. A name that is missing or maps to ``None``
    produces nothing.

    Parameters
    ----------
    events : Mapping[str, Any]
        Options mapping holding listener declarations
    allowed_events : Iterable[str]
        Names to interpret as events
    records : list[ListenerRecord] | None
        Buffer to append to; a new list is created when omitted
    atomic : bool, default=False
        When False, a malformed declaration drops only its own records and
        records appended for earlier names stay in ``records``. When True,
        nothing is appended unless every declaration is valid.

    Returns
    -------
    list[ListenerRecord]
        The buffer that was appended to

    Raises
    ------
    ConfigError
        If an event name is not a non-empty string, or a declaration is not a
        callable, a descriptor or a collection of descriptors
    """
    buffer: list[ListenerRecord] = [] if records is None else records
    staged: list[ListenerRecord] = [] if atomic else buffer

    for name in _visit_order(events, allowed_events):
        value = events.get(name)
        if value is None:
            continue
        try:
            prepared = prepare_event(name, value)
        except ConfigError:
            logger.warning(
                "Rejected listener declaration for {name} ({kept} records kept)",
                name=name,
                kept=0 if atomic else len(buffer),
            )
            raise
        staged.extend(prepared)
        logger.debug("Prepared {count} listener(s) for {name}", count=len(prepared), name=name)

    if atomic:
        buffer.extend(staged)
    return buffer


def prepare_event(event_name: str, event: Any) -> list[ListenerRecord]:
    """Build the records declared for a single event name.

    ``event`` may be a bare callable, a descriptor mapping containing
    ``"fn"``, or an arbitrarily nested collection of descriptors. Records are
    returned in declaration order.

    Raises
    ------
    ConfigError
        If the name is not a non-empty string, or the declaration or any
        nested element is malformed
    """
    if not isinstance(event_name, str) or not event_name:
        raise ConfigError(event_name, event, reason="Event names must be non-empty strings.")

    shape = classify_listener(event_name, event)
    if shape is ListenerShape.CALLABLE:
        return [ListenerRecord(name=event_name, fn=event)]
    return _expand(event_name, event, shape)


def _visit_order(events: Mapping[str, Any], allowed_events: Iterable[str]) -> Iterable[str]:
    if isinstance(allowed_events, Sequence) and not isinstance(allowed_events, str):
        return dict.fromkeys(allowed_events)
    allowed = set(allowed_events)
    return [name for name in events if name in allowed]


def _expand(event_name: str, event: Any, shape: ListenerShape) -> list[ListenerRecord]:
    if shape is ListenerShape.CALLABLE:
        raise ConfigError(
            event_name, event, reason="Listeners inside a collection must be descriptors."
        )

    if shape is ListenerShape.DESCRIPTOR:
        descriptor = ListenerDescriptor.parse(event_name, event)
        return [ListenerRecord.from_descriptor(event_name, descriptor)]

    # Mappings without "fn" are walked by value
    elements = event.values() if isinstance(event, Mapping) else event
    expanded: list[ListenerRecord] = []
    for element in elements:
        expanded.extend(_expand(event_name, element, classify_listener(event_name, element)))
    return expanded


__all__ = ["prepare_event", "prepare_events"]
