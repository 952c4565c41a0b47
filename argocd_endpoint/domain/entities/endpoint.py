"""Endpoint entity: the desired state of an issued ArgoCD token."""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import uuid4

from ..value_objects import Condition, ConditionType, SecretKeySelector


@dataclass(slots=True)
class Endpoint:
    """Intent to hold an ArgoCD account token inside a Kubernetes secret."""

    name: str
    account: str
    write_secret_to_ref: SecretKeySelector | None
    provider_config_name: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    conditions: list[Condition] = field(default_factory=list)

    def set_conditions(self, *conditions: Condition) -> None:
        """Set conditions, replacing any existing condition of the same type.

        A condition equivalent to the current one keeps its original
        transition time.
        """
        for condition in conditions:
            current = self.get_condition(condition.type)
            if current is not None and current.equivalent(condition):
                continue
            self.conditions = [c for c in self.conditions if c.type != condition.type]
            self.conditions.append(condition)

    def get_condition(self, condition_type: ConditionType) -> Condition | None:
        """Return the condition of the given type, if set."""
        for condition in self.conditions:
            if condition.type == condition_type:
                return condition
        return None

    @property
    def ready_condition(self) -> Condition | None:
        """The readiness condition, if set."""
        return self.get_condition(ConditionType.READY)
