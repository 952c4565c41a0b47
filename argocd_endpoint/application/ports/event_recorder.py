"""Port for observability events - driven/secondary port."""

from typing import Protocol

from ...domain.entities import Endpoint


class EventRecorder(Protocol):
    """Records events against the resource being reconciled."""

    def normal(self, endpoint: Endpoint, reason: str, message: str) -> None:
        """Record an informational event."""
        ...
