"""Secret reference value objects."""

from __future__ import annotations

from dataclasses import dataclass

BEARER_TOKEN_KEY = "bearer"
TARGET_URL_KEY = "target"


@dataclass(frozen=True, slots=True)
class SecretKeySelector:
    """Points at a single key of a namespaced Kubernetes secret."""

    name: str = ""
    namespace: str = ""
    key: str = ""

    def with_overrides(self, other: SecretKeySelector | None) -> SecretKeySelector:
        """Replace fields with the non-blank, trimmed fields of ``other``."""
        if other is None:
            return self

        name = other.name.strip()
        namespace = other.namespace.strip()
        key = other.key.strip()

        return SecretKeySelector(
            name=name or self.name,
            namespace=namespace or self.namespace,
            key=key or self.key,
        )

    def __str__(self) -> str:
        return f"{self.namespace}/{self.name}[{self.key}]"
