"""Readiness condition value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum


class ConditionType(StrEnum):
    """Condition types reported in a resource status."""

    READY = "Ready"


class ConditionStatus(StrEnum):
    """Kubernetes condition status values."""

    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"


class ConditionReason(StrEnum):
    """Why a resource is, or is not, ready."""

    CREATING = "Creating"
    AVAILABLE = "Available"
    DELETING = "Deleting"


@dataclass(frozen=True, slots=True)
class Condition:
    """A single status condition."""

    type: ConditionType
    status: ConditionStatus
    reason: ConditionReason
    last_transition_time: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def available(cls) -> Condition:
        """The external resource exists and can be used."""
        return cls(ConditionType.READY, ConditionStatus.TRUE, ConditionReason.AVAILABLE)

    @classmethod
    def creating(cls) -> Condition:
        """The external resource is being created."""
        return cls(ConditionType.READY, ConditionStatus.FALSE, ConditionReason.CREATING)

    @classmethod
    def deleting(cls) -> Condition:
        """The external resource is being deleted."""
        return cls(ConditionType.READY, ConditionStatus.FALSE, ConditionReason.DELETING)

    def equivalent(self, other: Condition) -> bool:
        """Compare conditions ignoring the transition time."""
        return (self.type, self.status, self.reason) == (other.type, other.status, other.reason)

    def to_dict(self) -> dict[str, str]:
        """Render in the shape Kubernetes expects under ``status.conditions``."""
        return {
            "type": str(self.type),
            "status": str(self.status),
            "reason": str(self.reason),
            "lastTransitionTime": self.last_transition_time.strftime("%Y-%m-%dT%H:%M:%SZ"),
        }
