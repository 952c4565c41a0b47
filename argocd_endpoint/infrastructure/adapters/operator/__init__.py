"""Operator runtime adapters."""

from .events import KopfEventRecorder
from .handlers import finalize, reconcile, register_handlers

__all__ = [
    "KopfEventRecorder",
    "finalize",
    "reconcile",
    "register_handlers",
]
