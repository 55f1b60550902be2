"""Concrete implementations of hexevents ports."""
