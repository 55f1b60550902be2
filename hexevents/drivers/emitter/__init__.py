"""Emitter drivers."""

from hexevents.drivers.emitter.local import HasEmitterMixin, LocalEmitter

__all__ = ["HasEmitterMixin", "LocalEmitter"]
